"""Shared utilities: unified logging and the exception hierarchy"""

from .exceptions import (  # noqa: F401
    ErrorSeverity,
    ErrorCategory,
    BlackboxError,
    TrayInitializationError,
    WindowOperationError,
    HotkeyRegistrationError,
    ConfigurationError,
)
from .unified_logger import (  # noqa: F401
    logger,
    app_logger_compat,
    get_app_data_dir,
    LogLevel,
    LogCategory,
    TraceContext,
)

app_logger = app_logger_compat

__all__ = [
    "ErrorSeverity",
    "ErrorCategory",
    "BlackboxError",
    "TrayInitializationError",
    "WindowOperationError",
    "HotkeyRegistrationError",
    "ConfigurationError",
    "logger",
    "app_logger",
    "get_app_data_dir",
    "LogLevel",
    "LogCategory",
    "TraceContext",
]
