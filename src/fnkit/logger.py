"""fnkit 로거 설정"""
import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fnkit.config import LoggingConfig

__all__ = ["logger", "setup_logger", "configure_logging", "get_logger"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "fnkit",
    level: str | None = None,
    format_string: str | None = None,
    datefmt: str | None = None,
) -> logging.Logger:
    """
    로거 설정 후 반환

    level이 없으면 FNKIT_LOG_LEVEL 환경 변수, 그다음 INFO.
    핸들러는 처음 한 번만 붙는다.
    """
    level = level or os.getenv("FNKIT_LOG_LEVEL", "INFO")

    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            fmt=format_string or DEFAULT_FORMAT,
            datefmt=datefmt or DEFAULT_DATEFMT,
        ))
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(getattr(logging, level.upper()))
    return logger


def configure_logging(config: 'LoggingConfig') -> logging.Logger:
    """LoggingConfig 적용 (기존 핸들러 포맷도 교체)"""
    logger = setup_logger(level=config.level)
    formatter = logging.Formatter(fmt=config.format, datefmt=config.datefmt)
    for handler in logger.handlers:
        handler.setFormatter(formatter)
    return logger


def get_logger(suffix: str) -> logging.Logger:
    """fnkit.<suffix> 자식 로거"""
    return logger.getChild(suffix)


logger = setup_logger()
