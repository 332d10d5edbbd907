"""
유틸리티 모듈
"""
from src.utils.logger import logger, setup_logger
from src.utils.constants import (
    PayloadKeys,
    EmbedKeys,
    EmbedColors,
    MISSING_IMAGE_WARNING,
)

__all__ = [
    "logger",
    "setup_logger",
    "PayloadKeys",
    "EmbedKeys",
    "EmbedColors",
    "MISSING_IMAGE_WARNING",
]
