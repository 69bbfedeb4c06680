import logging
from typing import Optional

_HANDLER_NAME = "cloudcube-console"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Send CloudCube logs to stderr; safe to call again to change the level.

    Args:
        level: Level name such as "DEBUG"; unknown names fall back to INFO.
        fmt: Record format, see ``LoggingSettings.format``.
    """
    level_name = (level or "INFO").upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(console_handler)

    # botocore at DEBUG dumps signed request headers
    logging.getLogger("botocore").setLevel(max(numeric_level, logging.INFO))

    logging.getLogger(__name__).info("Logging configured with level: %s", level_name)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
