"""
Configuración de logging estructurado.

Cada entry point llama a configure_logging() una vez antes de loguear.
"""

import logging
import sys
from typing import Optional

import structlog

from propmatch.config import get_settings


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configura logging stdlib + structlog.

    Args:
        level: Nivel de logging (default: settings.log_level)
    """
    level = (level or get_settings().log_level).upper()

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
