# app/logging.py
# loguru 설정: 부팅 시 setup_logging() 1회 호출 후 어디서나 'from loguru import logger'

import sys
from typing import Optional

from loguru import logger

from app.config import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(level: Optional[str] = None) -> None:
    """Replace loguru's default sink with a stderr sink at ``LOG_LEVEL``."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or settings.LOG_LEVEL),
        format=LOG_FORMAT,
        colorize=True,
        backtrace=False,
        diagnose=False,
    )
