"""Logging estruturado do booking bridge.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="calcom_booking_bridge")
    logger = get_logger(__name__)
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter, create_text_formatter

__all__ = [
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "create_text_formatter",
    "get_logger",
    "log_fallback",
]
