"""Exception hierarchy for Blackbox

Structured errors carrying an error code, category, severity, context and
recovery suggestions. Only startup failures (tray and menu construction)
are fatal; everything raised by host calls at runtime is caught and
discarded by the dispatcher.
"""

import time
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorSeverity(Enum):
    """Error severity levels"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories"""

    INITIALIZATION = "initialization"
    CONFIGURATION = "configuration"
    TRAY = "tray"
    WINDOW = "window"
    HOTKEY = "hotkey"
    SYSTEM = "system"


class BlackboxError(Exception):
    """Base exception for Blackbox

    Provides structured error information including:
    - Error codes for programmatic handling
    - Context information for debugging
    - Severity levels for appropriate response
    - Recovery suggestions for user guidance
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        category: ErrorCategory = ErrorCategory.SYSTEM,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: Optional[Dict[str, Any]] = None,
        recovery_suggestions: Optional[List[str]] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        Args:
            message: Human-readable error message
            error_code: Unique error code for programmatic handling
            category: Error category for classification
            severity: Error severity level
            context: Additional context information
            recovery_suggestions: List of suggested recovery actions
            original_exception: Original exception if this is a wrapper
        """
        super().__init__(message)

        self.message = message
        self.category = category
        self.severity = severity
        self.context = context or {}
        self.recovery_suggestions = recovery_suggestions or []
        self.original_exception = original_exception
        self.timestamp = time.time()
        self.error_code = error_code or self._generate_error_code()

        if "component" not in self.context:
            self.context["component"] = self.__class__.__name__

    def _generate_error_code(self) -> str:
        """Generate a default error code based on class name"""
        class_name = self.__class__.__name__
        return f"{class_name.upper()}_{int(self.timestamp)}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "context": self.context,
            "recovery_suggestions": self.recovery_suggestions,
            "timestamp": self.timestamp,
            "exception_type": self.__class__.__name__,
            "original_exception": str(self.original_exception)
            if self.original_exception
            else None,
        }

    def get_user_message(self) -> str:
        """Get user-friendly error message with recovery suggestions"""
        user_msg = self.message
        if self.recovery_suggestions:
            suggestions = "\n".join(
                f"• {suggestion}" for suggestion in self.recovery_suggestions
            )
            user_msg += f"\n\nSuggested actions:\n{suggestions}"
        return user_msg

    def is_fatal(self) -> bool:
        return self.severity == ErrorSeverity.CRITICAL


class TrayInitializationError(BlackboxError):
    """Tray icon or tray menu could not be built"""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=message,
            category=ErrorCategory.TRAY,
            severity=kwargs.pop("severity", ErrorSeverity.CRITICAL),
            recovery_suggestions=kwargs.pop(
                "recovery_suggestions",
                [
                    "Make sure the desktop session provides a system tray",
                    "On Linux, install a StatusNotifier/AppIndicator extension",
                    "Restart the application",
                ],
            ),
            **kwargs,
        )


class WindowOperationError(BlackboxError):
    """A host window operation failed"""

    def __init__(self, message: str, label: str = "unknown", **kwargs):
        context = kwargs.pop("context", {})
        context["label"] = label

        super().__init__(
            message=message,
            category=ErrorCategory.WINDOW,
            severity=kwargs.pop("severity", ErrorSeverity.LOW),
            context=context,
            **kwargs,
        )


class HotkeyRegistrationError(BlackboxError):
    """Global hotkey could not be parsed or registered"""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=message,
            category=ErrorCategory.HOTKEY,
            severity=kwargs.pop("severity", ErrorSeverity.MEDIUM),
            recovery_suggestions=kwargs.pop(
                "recovery_suggestions",
                [
                    "Choose a different hotkey in settings",
                    "Check that no other application already uses it",
                    "On macOS, grant accessibility permissions",
                ],
            ),
            **kwargs,
        )


class ConfigurationError(BlackboxError):
    """Settings file is unreadable or holds invalid values"""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=message,
            category=ErrorCategory.CONFIGURATION,
            severity=kwargs.pop("severity", ErrorSeverity.LOW),
            recovery_suggestions=kwargs.pop(
                "recovery_suggestions",
                ["Fix or delete the settings file to fall back to defaults"],
            ),
            **kwargs,
        )


__all__ = [
    "ErrorSeverity",
    "ErrorCategory",
    "BlackboxError",
    "TrayInitializationError",
    "WindowOperationError",
    "HotkeyRegistrationError",
    "ConfigurationError",
]
