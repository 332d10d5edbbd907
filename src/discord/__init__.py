"""
메시지 페이로드 모듈
빌더 및 Webhook 전송
"""
from src.discord.payload_builder import MessageBuilder, PayloadBuilder, create_default_builder
from src.discord.webhook import WebhookSender, webhook_sender

__all__ = [
    # Builder
    "MessageBuilder",
    "PayloadBuilder",
    "create_default_builder",
    # Sender
    "WebhookSender",
    "webhook_sender",
]
