"""
Log setup for the server browser - rotating files plus a colored console
"""
import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from rich.logging import RichHandler

FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)-20s | "
    "%(funcName)-15s:%(lineno)-4d | %(message)s"
)
CONSOLE_FORMAT = "%(asctime)s | %(colored_levelname)s | %(name)-15s | %(message)s"
PLAIN_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-15s | %(message)s"


class ColoredFormatter(logging.Formatter):
    """Simple colored formatter"""
    COLORS = {
        'DEBUG': '\033[36m', 'INFO': '\033[32m', 'WARNING': '\033[33m',
        'ERROR': '\033[31m', 'CRITICAL': '\033[35m', 'RESET': '\033[0m'
    }

    def format(self, record):
        record.colored_levelname = (
            f"{self.COLORS.get(record.levelname, '')}"
            f"{record.levelname:<8}"
            f"{self.COLORS['RESET']}"
        )
        return super().format(record)


def _console_handler(enable_colors: bool, use_rich: bool) -> logging.Handler:
    if use_rich:
        return RichHandler(show_time=False, show_path=False)

    handler = logging.StreamHandler()
    if enable_colors:
        handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    else:
        handler.setFormatter(logging.Formatter(PLAIN_CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    return handler


def _install(
    name: Optional[str],
    level: int,
    file_handler: Optional[logging.Handler],
    enable_colors: bool,
    use_rich: bool,
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    if file_handler is not None:
        file_handler.setFormatter(
            logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
        )
        logger.addHandler(file_handler)

    logger.addHandler(_console_handler(enable_colors, use_rich))
    # ***> named loggers stay isolated, the root logger is the sink <***
    logger.propagate = name is None
    return logger


def setup_daily_rotating_logger(
    name: Optional[str],
    log_file: Union[str, Path],
    level: int = logging.INFO,
    days_to_keep: int = 30,
    enable_colors: bool = True,
    use_rich: bool = False,
) -> logging.Logger:
    """
    Creates a logger that rotates daily - best for long-running pollers.

    Log files will be named like:
    - server_browser.log (current day)
    - server_browser.log.2024-01-15 (previous days)
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = TimedRotatingFileHandler(
        filename=log_path,
        when='midnight',
        interval=1,
        backupCount=days_to_keep,
        encoding='utf-8',
    )
    file_handler.suffix = "%Y-%m-%d"

    return _install(name, level, file_handler, enable_colors, use_rich)


def setup_size_rotating_logger(
    name: Optional[str],
    log_file: Union[str, Path],
    level: int = logging.INFO,
    max_file_size: int = 5 * 1024 * 1024,  # 5MB default
    backup_count: int = 10,
    enable_colors: bool = True,
    use_rich: bool = False,
) -> logging.Logger:
    """
    Creates a logger that rotates by file size.
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        filename=log_path,
        maxBytes=max_file_size,
        backupCount=backup_count,
        encoding='utf-8'
    )

    return _install(name, level, file_handler, enable_colors, use_rich)


def setup_session_based_logger(
    name: Optional[str],
    log_dir: Union[str, Path] = "logs",
    level: int = logging.INFO,
    enable_colors: bool = True,
    use_rich: bool = False,
) -> logging.Logger:
    """
    Creates a new log file for each run, e.g. browser_2024-01-15_14-30-25.log
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    log_file = log_dir / f"{name or 'browser'}_{timestamp}.log"

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    logger = _install(name, level, file_handler, enable_colors, use_rich)

    logger.info("=== NEW SESSION STARTED: %s ===", timestamp)
    logger.info("Log file: %s", log_file)
    return logger


def setup_console_logger(
    name: Optional[str] = None,
    level: int = logging.INFO,
    enable_colors: bool = True,
    use_rich: bool = False,
) -> logging.Logger:
    """
    Console-only logger, used when no log file is configured.
    """
    return _install(name, level, None, enable_colors, use_rich)


def setup_smart_logger(
    name: Optional[str],
    log_file: Optional[Union[str, Path]],
    strategy: str = "daily",
    level: int = logging.INFO,
    **kwargs
) -> logging.Logger:
    """
    Smart logger that chooses the rotation strategy.

    Args:
        name: Logger name (None configures the root logger)
        log_file: Base log file path, None for console only
        strategy: "daily", "size", "session" or "console"
        level: Logging level
        **kwargs: Additional arguments for specific handlers
    """
    if log_file is None or strategy == "console":
        return setup_console_logger(name, level, **kwargs)
    if strategy == "daily":
        return setup_daily_rotating_logger(name, log_file, level, **kwargs)
    elif strategy == "size":
        return setup_size_rotating_logger(name, log_file, level, **kwargs)
    elif strategy == "session":
        return setup_session_based_logger(name, Path(log_file).parent, level, **kwargs)
    else:
        raise ValueError(f"Unknown strategy: {strategy}")


def configure_logging(config, use_rich: bool = False) -> logging.Logger:
    """
    Configure the root logger from a BrowserConfig.
    """
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    log_file = config.log_file
    strategy = config.log_strategy
    if strategy == "session" and log_file is None:
        log_file = "logs/browser.log"

    root = setup_smart_logger(None, log_file, strategy, level, use_rich=use_rich)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return root
