"""
로깅 설정 유틸리티
라이브러리는 임포트 시 로깅을 설정하지 않으므로, 애플리케이션에서 명시적으로 호출합니다.
"""

import logging
import sys
from typing import Optional

from ..config import LOG_FILE, LOG_FORMAT, LOG_LEVEL


def setup_logging(
    level: Optional[str] = None, log_file: Optional[str] = None
) -> logging.Logger:
    """
    swarmui_client 패키지 로거 설정

    Args:
        level: 로깅 레벨 (None이면 SWARMUI_LOG_LEVEL)
        log_file: 로그 파일 경로 (None이면 SWARMUI_LOG_FILE, 빈 문자열이면 콘솔만)

    Returns:
        설정된 패키지 로거
    """
    level = (level or LOG_LEVEL).upper()
    log_file = LOG_FILE if log_file is None else log_file

    logger = logging.getLogger("swarmui_client")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    # stderr로만 로깅
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
