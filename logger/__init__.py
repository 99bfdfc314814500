from .constants import HTMLConstants, LoggingConstants
from .logger import (
    ColoredFormatter,
    configure_logging,
    setup_console_logger,
    setup_daily_rotating_logger,
    setup_session_based_logger,
    setup_size_rotating_logger,
    setup_smart_logger,
)

__all__ = [
    "HTMLConstants",
    "LoggingConstants",
    "ColoredFormatter",
    "configure_logging",
    "setup_console_logger",
    "setup_daily_rotating_logger",
    "setup_size_rotating_logger",
    "setup_session_based_logger",
    "setup_smart_logger",
]
