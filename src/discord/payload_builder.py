"""
웹훅 메시지 페이로드 빌더
체이닝으로 username/avatar/text 와 단일 embed 를 구성한 뒤 get_json() 으로 꺼낸다.

    payload = (
        MessageBuilder()
        .set_title("abc")
        .set_description("blah")
        .add_field("A", "1")
        .get_json()
    )
"""
import copy
import json
import time
from typing import Any, Callable, Optional

from config.settings import get_payload_defaults
from src.utils.constants import EmbedColors, EmbedKeys, PayloadKeys, MISSING_IMAGE_WARNING
from src.utils.logger import logger


class MessageBuilder:
    """웹훅 메시지 빌더 (모든 setter 는 self 를 반환)"""

    def __init__(self, warn: Optional[Callable[[str], None]] = None):
        """
        Args:
            warn: 진단 메시지 수신 함수 (기본값: logger.warning)
        """
        self._warn = warn or logger.warning
        self.data: dict = {
            PayloadKeys.EMBEDS: [{EmbedKeys.FIELDS: []}],
        }

    def __repr__(self) -> str:
        return (
            f"MessageBuilder(title={self._embed.get(EmbedKeys.TITLE)!r}, "
            f"fields={len(self._embed[EmbedKeys.FIELDS])})"
        )

    @property
    def _embed(self) -> dict:
        return self.data[PayloadKeys.EMBEDS][0]

    @property
    def fields(self) -> list[dict]:
        """현재 필드 목록 (복사본)"""
        return [dict(f) for f in self._embed[EmbedKeys.FIELDS]]

    def get_json(self) -> dict:
        """
        웹훅 실행 시 전송될 데이터 반환

        반환값은 깊은 복사본이므로 이후의 빌더 변경이 반영되지 않는다.
        """
        return copy.deepcopy(self.data)

    def to_json(self, **kwargs: Any) -> str:
        """get_json() 결과를 JSON 문자열로 직렬화"""
        return json.dumps(self.get_json(), ensure_ascii=False, **kwargs)

    # ------------------------------------------------------------
    # 문서 루트
    # ------------------------------------------------------------
    def set_name(self, username: str) -> "MessageBuilder":
        """웹훅 표시 이름 설정"""
        self.data[PayloadKeys.USERNAME] = username
        return self

    def set_avatar(self, avatar_url: str) -> "MessageBuilder":
        """웹훅 아바타 URL 설정 (형식 검증 없음)"""
        self.data[PayloadKeys.AVATAR_URL] = avatar_url
        return self

    def set_text(self, text: str) -> "MessageBuilder":
        """embed 와 함께 전송할 본문 텍스트 설정"""
        self.data[PayloadKeys.TEXT] = text
        return self

    # ------------------------------------------------------------
    # Embed
    # ------------------------------------------------------------
    def set_title(self, title: str) -> "MessageBuilder":
        self._embed[EmbedKeys.TITLE] = title
        return self

    def set_description(self, description: str) -> "MessageBuilder":
        self._embed[EmbedKeys.DESCRIPTION] = description
        return self

    def set_url(self, url: str) -> "MessageBuilder":
        """클릭 가능한 링크 설정 (제목이 링크가 됨)"""
        self._embed[EmbedKeys.URL] = url
        return self

    def set_color(self, color: Any) -> "MessageBuilder":
        """
        Embed 색상 설정

        Args:
            color: hex 문자열 또는 정수. 변환 없이 그대로 저장된다.
        """
        self._embed[EmbedKeys.COLOR] = color
        return self

    def set_footer(self, footer: str) -> "MessageBuilder":
        """푸터 텍스트 설정 (아이콘은 지원하지 않음)"""
        self._embed[EmbedKeys.FOOTER] = {"text": footer}
        return self

    def set_author(self, author: str) -> "MessageBuilder":
        """작성자 이름 설정 (이름만 지원)"""
        self._embed[EmbedKeys.AUTHOR] = {"name": author}
        return self

    def set_thumbnail(self, thumbnail_url: str) -> "MessageBuilder":
        self._embed[EmbedKeys.THUMBNAIL] = {"url": thumbnail_url}
        return self

    def set_image(self, image_url: Optional[str]) -> "MessageBuilder":
        """
        Embed 이미지 설정

        URL 이 비어 있으면 경고를 한 번 남기고 그 값을 그대로 저장한다.
        """
        if not image_url:
            self._warn(MISSING_IMAGE_WARNING)
        self._embed[EmbedKeys.IMAGE_URL] = image_url
        return self

    def set_time(self, timestamp: Optional[float] = None) -> "MessageBuilder":
        """
        타임스탬프 설정

        Args:
            timestamp: epoch 초. 생략(또는 falsy)하면 현재 시각을 사용
        """
        if not timestamp:
            timestamp = time.time()
        self._embed[EmbedKeys.TIMESTAMP] = timestamp
        return self

    # ------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------
    def add_field(self, name: str, value: str, inline: bool = False) -> "MessageBuilder":
        """
        필드 추가 (추가 순서 유지, 같은 이름 중복 허용)

        Args:
            name: 필드 이름
            value: 필드 값
            inline: 인라인 표시 여부 (falsy 이면 False)
        """
        if not inline:
            inline = False

        self._embed[EmbedKeys.FIELDS].append({
            "name": name,
            "value": value,
            "inline": inline,
        })
        return self

    def remove_field(self, name: str) -> "MessageBuilder":
        """이름이 일치하는 필드를 모두 제거 (없으면 변화 없음)"""
        self._embed[EmbedKeys.FIELDS] = [
            f for f in self._embed[EmbedKeys.FIELDS] if f["name"] != name
        ]
        return self


PayloadBuilder = MessageBuilder


def create_default_builder(
    defaults: Optional[dict] = None,
    warn: Optional[Callable[[str], None]] = None,
) -> MessageBuilder:
    """
    기본값이 적용된 빌더 생성

    Args:
        defaults: username/avatar_url/color/footer 딕셔너리
                  (None 이면 config/payload_defaults.yaml + 환경 변수)
        warn: 진단 메시지 수신 함수

    Returns:
        MessageBuilder
    """
    if defaults is None:
        defaults = get_payload_defaults()

    builder = MessageBuilder(warn=warn)

    # 비어 있는 값은 적용하지 않음 (color 는 EmbedColors.INFO 로 대체)
    if defaults.get("username"):
        builder.set_name(defaults["username"])
    if defaults.get("avatar_url"):
        builder.set_avatar(defaults["avatar_url"])
    builder.set_color(defaults.get("color") or EmbedColors.INFO)
    if defaults.get("footer"):
        builder.set_footer(defaults["footer"])

    logger.debug(f"Default builder created: {builder!r}")
    return builder
