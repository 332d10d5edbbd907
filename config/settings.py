"""
설정 관리 모듈
환경 변수 및 YAML 설정 파일 로드
"""
import os
from pathlib import Path
from dotenv import load_dotenv
import yaml

# 프로젝트 루트 경로
ROOT_DIR = Path(__file__).parent.parent
CONFIG_DIR = Path(__file__).parent

# .env 파일 로드
load_dotenv(ROOT_DIR / ".env")


class Settings:
    """애플리케이션 설정"""

    # Webhook
    WEBHOOK_URL: str = os.getenv("WEBHOOK_URL", "")
    REQUEST_TIMEOUT: float = float(os.getenv("WEBHOOK_TIMEOUT", "10"))

    # 기본 표시 정보 (YAML 기본값보다 우선)
    DEFAULT_USERNAME: str = os.getenv("WEBHOOK_USERNAME", "")
    DEFAULT_AVATAR_URL: str = os.getenv("WEBHOOK_AVATAR_URL", "")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> list[str]:
        """필수 설정 검증"""
        errors = []
        if not cls.WEBHOOK_URL:
            errors.append("WEBHOOK_URL is required")
        return errors


def load_yaml_config(filename: str) -> dict:
    """YAML 설정 파일 로드"""
    filepath = CONFIG_DIR / filename
    if not filepath.exists():
        return {}
    with open(filepath, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_payload_defaults() -> dict:
    """메시지 기본값 설정 로드 (환경 변수가 username/avatar를 덮어씀)"""
    defaults = dict(load_yaml_config("payload_defaults.yaml"))
    if settings.DEFAULT_USERNAME:
        defaults["username"] = settings.DEFAULT_USERNAME
    if settings.DEFAULT_AVATAR_URL:
        defaults["avatar_url"] = settings.DEFAULT_AVATAR_URL
    return defaults


# 설정 인스턴스
settings = Settings()
