"""
Webhook Builder - 메시지 페이로드 미리보기/전송
메인 실행 파일

사용법:
    python src/main.py          - 예시 페이로드 JSON 출력
    python src/main.py send     - 예시 페이로드를 WEBHOOK_URL 로 전송
"""
import sys
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
ROOT_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT_DIR))

from config.settings import settings
from src.utils.logger import logger
from src.discord import MessageBuilder, create_default_builder, webhook_sender


def build_sample_message() -> MessageBuilder:
    """설정 기본값 위에 예시 embed 구성"""
    return (
        create_default_builder()
        .set_title("Webhook Builder")
        .set_description("Payload preview")
        .add_field("Status", "OK", True)
        .add_field("Log level", settings.LOG_LEVEL, True)
        .set_time()
    )


def main(argv: list[str]) -> int:
    builder = build_sample_message()

    if len(argv) > 1 and argv[1].lower() == "send":
        errors = settings.validate()
        if errors:
            for error in errors:
                logger.error(error)
            return 1
        return 0 if webhook_sender.send(builder) else 1

    print(builder.to_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
