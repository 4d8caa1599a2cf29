from .config import ApiMode, Settings, get_settings
from .logging import configure_logging, get_logger, log_error

__all__ = [
    "ApiMode",
    "get_settings",
    "Settings",
    "configure_logging",
    "get_logger",
    "log_error",
]
