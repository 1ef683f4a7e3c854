# core/logging.py

"""
이 모듈은 loguru 로거의 출력 설정을 담당합니다.
로그는 파일로 남기지 않고 콘솔(stderr)로만 출력합니다.
"""

from __future__ import annotations

import sys

from loguru import logger


def configure_logging(level: str = "WARNING") -> None:
    """기본 sink 를 제거하고, 주어진 레벨 이상의 로그를 stderr 로 출력하는 sink 를 등록합니다."""
    logger.remove()
    logger.add(lambda msg: print(msg, end="", file=sys.stderr), level=level,
               format="{time:HH:mm:ss} | {level: <8} | {name} | {message}",
               backtrace=False, diagnose=False)  # console
