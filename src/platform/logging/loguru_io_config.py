"""
loguru setup for the webinar service.

Imported once (through Logger) before anything logs. Every record, including
those emitted through the standard logging module by granian, SQLAlchemy and
alembic, ends up in the same sinks with the same format.
"""

from contextvars import ContextVar
from datetime import datetime, timezone
from enum import StrEnum
import logging
import os
import re
import sys
from typing import TYPE_CHECKING

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR as DEFAULT_LOG_DIR
from src.platform.logging.service_context import get_service_context


# Tests write to test/test_log instead of the project log directory
LOG_DIR = os.environ.get('TEST_LOG_DIR', str(DEFAULT_LOG_DIR))
IS_TEST_RUN = 'TEST_LOG_DIR' in os.environ

SENSITIVE_KEYWORDS = {'password', 'token', 'secret'}
MAX_CONTENT_LENGTH = 500

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


# granian access line: 127.0.0.1 - "POST /webinars HTTP/1.1" - 201 - 8ms
_ACCESS_LINE = re.compile(r'"[A-Z]+ \S+ HTTP/[\d.]+" - (?P<status>\d{3})\b')


def access_log_level(message: str) -> str | None:
    """Level for an HTTP access line by status code, None if message is not one."""
    match = _ACCESS_LINE.search(message)
    if match is None:
        return None
    status = int(match['status'])
    if status >= 500:
        return 'CRITICAL'
    if status >= 400:
        return 'ERROR'
    if status >= 300:
        return 'WARNING'
    return 'SUCCESS' if status >= 200 else 'INFO'


class InterceptHandler(logging.Handler):
    """Forward standard logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        message = record.getMessage()
        level: str | int | None = access_log_level(message)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        # Point {file}:{line} at the caller, not at the logging module
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        custom_logger.opt(depth=depth, exception=record.exc_info).log(level, message)


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)

loguru_logger.remove()
custom_logger: 'LoguruLogger' = loguru_logger.bind(
    **{
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }
)

min_log_level = 'DEBUG' if settings.DEBUG else 'INFO'
custom_logger.add(sys.stdout, format=io_log_format, level=min_log_level, enqueue=True)

if settings.DEBUG:
    hour_stamp = datetime.now(timezone.utc).strftime('%Y-%m-%d_%H')
    custom_logger.add(
        f'{LOG_DIR}/{"test_" if IS_TEST_RUN else ""}{hour_stamp}.log',
        format=io_log_format,
        rotation='1 hour',
        retention='7 days',
        compression='gz',
        enqueue=True,
        level=min_log_level,
    )

logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
