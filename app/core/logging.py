import logging
import sys

import structlog

from app.core.config import Settings


# 표준 logging 설정 (structlog 출력 대상)
def setup_stdlib_logging(level: str) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    logging.getLogger("multipart").setLevel(logging.WARNING)


# structlog 프로세서 구성
def setup_structlog(json_output: bool) -> None:
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.contextvars.merge_contextvars,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(settings: Settings) -> None:
    """애플리케이션 전체 로그 설정"""
    setup_stdlib_logging(settings.LOG_LEVEL.upper())
    setup_structlog(settings.LOG_JSON)


# 명령 단위 컨텍스트 바인딩
def bind_command(command_type) -> None:
    structlog.contextvars.bind_contextvars(command=command_type.value)


def clear_command() -> None:
    structlog.contextvars.clear_contextvars()
