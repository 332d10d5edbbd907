"""
공통 상수
페이로드 키와 색상을 한 곳에서 관리
"""


# ============================================================
# 페이로드 키 (웹훅으로 전송되는 JSON 구조)
# ============================================================
class PayloadKeys:
    """문서 루트 키"""
    USERNAME = "username"
    AVATAR_URL = "avatar_url"
    TEXT = "text"
    EMBEDS = "embeds"


class EmbedKeys:
    """embeds[0] 내부 키"""
    TITLE = "title"
    DESCRIPTION = "text"   # description은 "text" 키로 전송됨
    URL = "url"
    COLOR = "color"
    TIMESTAMP = "ts"       # epoch 초 단위
    AUTHOR = "author"
    FOOTER = "footer"
    IMAGE_URL = "image_url"
    THUMBNAIL = "thumbnail"
    FIELDS = "fields"


# ============================================================
# 진단 메시지
# ============================================================
MISSING_IMAGE_WARNING = "Image passed was null, nothing will be displayed in Discord"


# ============================================================
# Embed 색상
# ============================================================
class EmbedColors:
    """Embed 색상 상수 (hex 문자열, 그대로 저장됨)"""
    INFO = "3498db"      # 파란색
    SUCCESS = "2ecc71"   # 초록색
    WARNING = "f39c12"   # 주황색
    ERROR = "e74c3c"     # 빨간색
    NEUTRAL = "95a5a6"   # 회색

