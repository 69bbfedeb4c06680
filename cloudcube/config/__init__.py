from .settings import CubeSettings, Settings, settings
from .logger import configure_logging, get_logger

__all__ = ["CubeSettings", "Settings", "settings", "configure_logging", "get_logger"]
