import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int | None = None, stream=None):
    """
    Configures logging for the API server and the CLI.

    level 이 없으면 FMTDIFF_LOG_LEVEL 환경변수(기본 INFO).
    CLI 는 stdout 을 결과 출력에 쓰므로 stream=sys.stderr 로 부른다.
    """
    if level is None:
        level = logging.getLevelName(os.getenv("FMTDIFF_LOG_LEVEL", "INFO").upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT, stream=stream or sys.stdout)
