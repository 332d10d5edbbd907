"""
Webhook 전송 모듈
빌더가 만든 페이로드를 JSON 으로 POST (재시도 포함)
"""
import time
from typing import Optional, Union

import requests

from config.settings import settings
from src.discord.payload_builder import MessageBuilder
from src.utils.logger import logger

Message = Union[MessageBuilder, dict]


class RetryConfig:
    """재시도 설정"""
    MAX_RETRIES = 3
    BASE_DELAY = 1.0  # 초
    MAX_DELAY = 10.0  # 초
    RATE_LIMIT_DELAY = 0.3  # 전송 사이 대기 (초)


def parse_retry_after(value: Optional[str]) -> float:
    """
    Retry-After 헤더를 대기 초로 변환

    숫자가 아닌 값(HTTP-date 등)이나 누락은 BASE_DELAY 로 처리하고,
    결과는 [0, MAX_DELAY] 범위로 자른다.
    """
    try:
        delay = float(value)
    except (TypeError, ValueError):
        return RetryConfig.BASE_DELAY
    return max(0.0, min(delay, RetryConfig.MAX_DELAY))


def backoff_delay(attempt: int) -> float:
    """attempt 번째(0부터) 실패 후 지수 백오프 대기 시간"""
    return min(RetryConfig.BASE_DELAY * (2 ** attempt), RetryConfig.MAX_DELAY)


class WebhookSender:
    """Webhook 전송기"""

    def __init__(self, webhook_url: Optional[str] = None, timeout: Optional[float] = None):
        self.webhook_url = webhook_url or settings.WEBHOOK_URL
        self.timeout = timeout or settings.REQUEST_TIMEOUT

    def _post(self, payload: dict) -> bool:
        """
        페이로드를 POST, 재시도 가능한 실패(429/5xx/연결 오류)는 다시 시도

        Returns:
            200/204 응답을 받았는지 여부
        """
        attempts = RetryConfig.MAX_RETRIES + 1
        failure = "no attempt made"

        for attempt in range(attempts):
            try:
                response = requests.post(self.webhook_url, json=payload, timeout=self.timeout)
            except requests.RequestException as e:
                failure = f"{type(e).__name__}: {e}"
                delay = backoff_delay(attempt)
            else:
                status = response.status_code
                if status in (200, 204):
                    return True

                failure = f"HTTP {status}"
                if status == 429:
                    delay = parse_retry_after(response.headers.get("Retry-After"))
                elif 500 <= status < 600:
                    delay = backoff_delay(attempt)
                else:
                    logger.error(f"Webhook rejected payload ({failure}), not retrying")
                    return False

            if attempt + 1 == attempts:
                break
            logger.warning(f"Webhook attempt {attempt + 1}/{attempts} failed ({failure}), retrying in {delay}s")
            time.sleep(delay)

        logger.error(f"Webhook delivery failed after {attempts} attempts ({failure})")
        return False

    def send(self, message: Message) -> bool:
        """
        페이로드 전송

        Args:
            message: MessageBuilder 또는 get_json() 결과 딕셔너리

        Returns:
            전송 성공 여부
        """
        if not self.webhook_url:
            logger.error("Webhook URL not configured")
            return False

        payload = message.get_json() if isinstance(message, MessageBuilder) else message
        success = self._post(payload)
        if success:
            logger.debug("Payload sent successfully")
        return success

    def send_many(self, messages: list[Message]) -> bool:
        """여러 페이로드를 순서대로 전송, 모두 성공해야 True"""
        if not self.webhook_url:
            logger.error("Webhook URL not configured")
            return False

        failed = 0
        for i, message in enumerate(messages):
            if i:
                time.sleep(RetryConfig.RATE_LIMIT_DELAY)
            if not self.send(message):
                logger.error(f"Failed to send payload {i + 1}/{len(messages)}")
                failed += 1

        if failed:
            logger.warning(f"{failed} payload(s) failed out of {len(messages)}")
        return failed == 0


# 전역 인스턴스
webhook_sender = WebhookSender()
