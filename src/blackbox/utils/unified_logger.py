"""Unified logging system - single interface, console + file routing

Provides:
- One logger API for the whole shell
- Console output (dev mode or explicitly enabled) plus a file sink
- Lightweight tracing for startup steps

Usage:
    from blackbox.utils import logger

    logger.info("Tray ready", LogCategory.TRAY)

    with logger.trace("startup") as trace:
        # ... bootstrap ...
        trace.checkpoint("tray_built")
"""

import os
import sys
import time
import threading
import json
import traceback
from typing import Dict, Any, List, Union
from pathlib import Path
from enum import Enum
from dataclasses import dataclass, field
from contextlib import contextmanager


class LogLevel(Enum):
    """Log levels"""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


class LogCategory(Enum):
    """Log categories (used for filtering and routing)"""
    STARTUP = "startup"
    TRAY = "tray"
    MENU = "menu"
    WINDOW = "window"
    HOTKEY = "hotkey"
    CONFIG = "config"
    ERROR = "error"
    PERFORMANCE = "performance"


def get_app_data_dir() -> Path:
    """Per-user application directory (APPDATA on Windows, ~/.config elsewhere)"""
    base = os.getenv("APPDATA") or str(Path.home() / ".config")
    return Path(base) / "Blackbox"


@dataclass
class TraceContext:
    """Tracing context"""
    trace_id: str
    operation: str
    component: str = ""
    start_time: float = field(default_factory=time.time)
    parameters: Dict[str, Any] = field(default_factory=dict)
    checkpoints: List[Dict[str, Any]] = field(default_factory=list)

    def checkpoint(self, name: str, data: Dict[str, Any] = None) -> None:
        self.checkpoints.append({
            'name': name,
            'timestamp': time.time(),
            'elapsed': time.time() - self.start_time,
            'data': data or {}
        })

    def duration(self) -> float:
        return time.time() - self.start_time


class UnifiedLogger:
    """Unified logger - singleton"""

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if hasattr(self, '_initialized'):
            return

        self._initialized = True
        self._config_service = None
        self._dev_mode = self._is_dev_mode()
        self._min_level = LogLevel.DEBUG if self._dev_mode else LogLevel.INFO
        self._console_output_enabled = False
        self._enabled_categories = set(LogCategory)
        self._lock = threading.RLock()

        self._log_file = get_app_data_dir() / 'logs' / 'app.log'
        self._file_output_enabled = True

        self._trace_counter = 0

    @staticmethod
    def _is_dev_mode() -> bool:
        return bool("--dev" in sys.argv or os.getenv("BLACKBOX_DEV"))

    def set_dev_mode(self, enabled: bool) -> None:
        """Switch dev mode (DEBUG level, INFO echoed to console)"""
        with self._lock:
            self._dev_mode = enabled
            if enabled:
                self._min_level = LogLevel.DEBUG
                self._console_output_enabled = True

    def set_config_service(self, config_service) -> None:
        """Attach a config service and load logging settings from it

        Args:
            config_service: Object exposing get_setting(key, default)
        """
        self._config_service = config_service
        self._load_settings_from_config()

    def _load_settings_from_config(self) -> None:
        if not self._config_service:
            return

        try:
            level_str = self._config_service.get_setting("logging.level", "INFO")
            if not self._dev_mode:
                self._min_level = self._string_to_log_level(level_str)

            self._console_output_enabled = self._dev_mode or bool(
                self._config_service.get_setting("logging.console_output", False)
            )

            enabled_categories_str = self._config_service.get_setting("logging.enabled_categories", [])
            if enabled_categories_str:
                self._enabled_categories = set(
                    LogCategory(cat) for cat in enabled_categories_str
                )
            else:
                self._enabled_categories = set(LogCategory)

        except Exception as e:
            print(f"[LOG WARNING] Failed to load logger settings from config: {e}", file=sys.stderr)

    def _string_to_log_level(self, level_str: str) -> LogLevel:
        level_map = {
            "DEBUG": LogLevel.DEBUG,
            "INFO": LogLevel.INFO,
            "WARNING": LogLevel.WARNING,
            "ERROR": LogLevel.ERROR,
            "CRITICAL": LogLevel.CRITICAL
        }
        return level_map.get(str(level_str).upper(), LogLevel.INFO)

    def set_log_file(self, path: 'Union[str, Path, None]') -> None:
        """Redirect the file sink; None disables file output"""
        with self._lock:
            if path is None:
                self._file_output_enabled = False
            else:
                self._log_file = Path(path)
                self._file_output_enabled = True

    def get_log_file(self) -> Path:
        return self._log_file

    def _should_log(self, level: LogLevel) -> bool:
        return level.value >= self._min_level.value

    def _format_console_message(self, level: LogLevel, category: LogCategory,
                                message: str, context: Dict[str, Any] = None) -> str:
        timestamp = time.strftime('%H:%M:%S')

        colors = {
            LogLevel.DEBUG: '\033[36m',    # Cyan
            LogLevel.INFO: '\033[32m',     # Green
            LogLevel.WARNING: '\033[33m',  # Yellow
            LogLevel.ERROR: '\033[31m',    # Red
            LogLevel.CRITICAL: '\033[35m'  # Magenta
        }
        reset = '\033[0m'
        color = colors.get(level, '')

        parts = [f"[{timestamp}] {color}{level.name}{reset} | {category.value} | {message}"]

        if context and level.value >= LogLevel.WARNING.value:
            context_str = self._format_context_readable(context)
            if context_str:
                parts.append(f"\n  {context_str}")

        return "".join(parts)

    def _format_context_readable(self, context: Dict[str, Any]) -> str:
        parts = []
        for key, value in context.items():
            if key == "traceback":
                continue
            if isinstance(value, dict):
                parts.append(f"{key}: {json.dumps(value, ensure_ascii=False, default=self._safe_json_serialize)}")
            elif isinstance(value, (list, tuple)):
                parts.append(f"{key}: {', '.join(str(v) for v in value)}")
            else:
                parts.append(f"{key}: {value}")
        return " | ".join(parts)

    @staticmethod
    def _safe_json_serialize(obj):
        """JSON fallback for enums (Qt activation reasons, MenuAction) and types"""
        if hasattr(obj, 'value') and hasattr(obj, 'name'):
            return f"{type(obj).__name__}.{obj.name}"
        if hasattr(obj, '__name__'):
            return obj.__name__
        return str(obj)

    def _format_file_message(self, level: LogLevel, category: LogCategory,
                             message: str, context: Dict[str, Any] = None,
                             component: str = None) -> str:
        timestamp = time.strftime('%Y-%m-%d %H:%M:%S')

        parts = [timestamp, level.name.ljust(8), category.value.ljust(12)]
        if component:
            parts.append(f"[{component}]")
        parts.append(message)

        if context:
            context_json = json.dumps(context, ensure_ascii=False,
                                      separators=(',', ':'),
                                      default=self._safe_json_serialize)
            parts.append(f"| {context_json}")

        return " | ".join(parts)

    def _write_log(self, level: LogLevel, category: LogCategory, message: str,
                   context: Dict[str, Any] = None, component: str = None) -> None:
        if category != LogCategory.PERFORMANCE:
            if not self._should_log(level):
                return

        if category not in self._enabled_categories:
            return

        with self._lock:
            if self._console_output_enabled and self._should_output_to_console(level, category):
                console_msg = self._format_console_message(level, category, message, context)
                output_stream = sys.stderr if level.value >= LogLevel.ERROR.value else sys.stdout
                print(console_msg, file=output_stream, flush=True)

            if not self._file_output_enabled:
                return

            try:
                file_msg = self._format_file_message(level, category, message, context, component)
                self._log_file.parent.mkdir(parents=True, exist_ok=True)
                with open(self._log_file, 'a', encoding='utf-8') as f:
                    f.write(file_msg + '\n')
            except Exception as e:
                print(f"[LOG ERROR] Failed to write to log file: {e}", file=sys.stderr)

    def _should_output_to_console(self, level: LogLevel, category: LogCategory) -> bool:
        if level.value >= LogLevel.WARNING.value:
            return True

        if category == LogCategory.STARTUP and level == LogLevel.INFO:
            return True

        return self._dev_mode

    # ============ Public API ============

    def debug(self, message: str, category: LogCategory = LogCategory.STARTUP,
              context: Dict[str, Any] = None, component: str = None) -> None:
        self._write_log(LogLevel.DEBUG, category, message, context, component)

    def info(self, message: str, category: LogCategory = LogCategory.STARTUP,
             context: Dict[str, Any] = None, component: str = None) -> None:
        self._write_log(LogLevel.INFO, category, message, context, component)

    def warning(self, message: str, category: LogCategory = LogCategory.ERROR,
                context: Dict[str, Any] = None, component: str = None) -> None:
        self._write_log(LogLevel.WARNING, category, message, context, component)

    def error(self, message: str, exception: Exception = None,
              category: LogCategory = LogCategory.ERROR,
              context: Dict[str, Any] = None, component: str = None) -> None:
        ctx = dict(context or {})
        if exception:
            ctx['exception'] = str(exception)
            ctx['exception_type'] = type(exception).__name__
        self._write_log(LogLevel.ERROR, category, message, ctx, component)

    def critical(self, message: str, exception: Exception = None,
                 category: LogCategory = LogCategory.ERROR,
                 context: Dict[str, Any] = None, component: str = None) -> None:
        ctx = dict(context or {})
        if exception:
            ctx['exception'] = str(exception)
            ctx['exception_type'] = type(exception).__name__
        self._write_log(LogLevel.CRITICAL, category, message, ctx, component)

    @contextmanager
    def trace(self, operation: str, component: str = "",
              parameters: Dict[str, Any] = None):
        """Tracing context manager"""
        with self._lock:
            self._trace_counter += 1
            trace_id = f"trace_{self._trace_counter:04d}"

        trace_ctx = TraceContext(
            trace_id=trace_id,
            operation=operation,
            component=component,
            parameters=parameters or {}
        )

        self.debug(f"Starting {operation}", LogCategory.PERFORMANCE,
                   {'trace_id': trace_id, 'parameters': parameters}, component)

        try:
            yield trace_ctx
        except Exception as e:
            trace_ctx.checkpoint("error", {'error': str(e), 'type': type(e).__name__})
            self.error(f"Operation {operation} failed", e, LogCategory.ERROR,
                       {'trace_id': trace_id}, component)
            raise
        finally:
            duration = trace_ctx.duration()
            self.info(f"Completed {operation} in {duration:.3f}s", LogCategory.PERFORMANCE,
                      {'trace_id': trace_id, 'duration': f"{duration:.3f}s",
                       'checkpoints': [c['name'] for c in trace_ctx.checkpoints]}, component)


# ============ Global singleton and adapter ============

logger = UnifiedLogger()


class LegacyLoggerAdapter:
    """Event-oriented facade used across the shell as ``app_logger``"""

    def __init__(self, logger_instance: UnifiedLogger):
        self._logger = logger_instance

    def debug(self, message: str, category: LogCategory = LogCategory.STARTUP,
              context: Dict[str, Any] = None, component: str = None) -> None:
        self._logger.debug(message, category, context, component)

    def info(self, message: str, category: LogCategory = LogCategory.STARTUP,
             context: Dict[str, Any] = None, component: str = None) -> None:
        self._logger.info(message, category, context, component)

    def warning(self, message: str, category: LogCategory = LogCategory.ERROR,
                context: Dict[str, Any] = None, component: str = None) -> None:
        self._logger.warning(message, category, context, component)

    def error(self, message: str, exception: Exception = None,
              category: LogCategory = LogCategory.ERROR,
              context: Dict[str, Any] = None, component: str = None) -> None:
        self._logger.error(message, exception, category, context, component)

    def critical(self, message: str, exception: Exception = None,
                 context: Dict[str, Any] = None, component: str = None) -> None:
        self._logger.critical(message, exception, LogCategory.ERROR, context, component)

    def log_tray_event(self, event: str, details: Dict[str, Any] = None) -> None:
        self._logger.debug(f"Tray: {event}", LogCategory.TRAY, details, "tray")

    def log_menu_event(self, menu_id: str, action: Any) -> None:
        self._logger.info(f"Menu: {menu_id}", LogCategory.MENU,
                          {'menu_id': menu_id, 'action': action}, "menu")

    def log_window_event(self, event: str, details: Dict[str, Any] = None) -> None:
        self._logger.debug(f"Window: {event}", LogCategory.WINDOW, details, "window")

    def log_hotkey_event(self, hotkey: str, action: str) -> None:
        self._logger.info(f"Hotkey Event: {hotkey} - {action}", LogCategory.HOTKEY, component="hotkey")

    def log_config_event(self, event: str, details: Dict[str, Any] = None) -> None:
        self._logger.info(f"Config: {event}", LogCategory.CONFIG, details, "config")

    def log_error(self, error: Exception, context: str) -> None:
        tb_lines = traceback.format_exception(type(error), error, error.__traceback__)
        tb_str = ''.join(tb_lines)

        self._logger.error(
            f"Error in {context}",
            error,
            LogCategory.ERROR,
            context={'traceback': tb_str, 'error_details': str(error)},
            component=context
        )

    def log_startup(self, version: str) -> None:
        self._logger.info(f"Blackbox {version} starting up", LogCategory.STARTUP, component="startup")

    def log_shutdown(self, exit_code: int = 0) -> None:
        self._logger.info("Blackbox shutting down", LogCategory.STARTUP,
                          {'exit_code': exit_code}, component="shutdown")


app_logger_compat = LegacyLoggerAdapter(logger)


__all__ = [
    'logger',
    'app_logger_compat',
    'get_app_data_dir',
    'LogLevel',
    'LogCategory',
    'TraceContext',
    'UnifiedLogger',
    'LegacyLoggerAdapter',
]
