"""
Cabinet Logging System

Provides consistent per-module logging for the platform and all games.
Loggers print formatted lines (``[module] LEVEL: msg``) so output stays
readable in the launcher console and in test captures alike.

Usage:
    from cabinet.logging import get_logger

    log = get_logger('frame_clock')
    log.debug("Tick %d", tick)
    log.info("Session started")

Configuration:
    Environment variables:
        CABINET_LOG_LEVEL=DEBUG            # Global default level
        CABINET_LOG_FRAME_CLOCK=TRACE      # Module-specific level
        CABINET_LOG_STORAGE=WARNING

    Or programmatically:
        from cabinet.logging import configure_logging
        configure_logging(level='DEBUG', modules={'storage': 'INFO'})
"""

import os
import sys
import traceback
from enum import IntEnum
from functools import lru_cache
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Per-tick detail
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100      # Disable logging


_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
}

_RESERVED_KEYS = ('CABINET_LOG_LEVEL',)


def _level_from_string(level_str: str) -> LogLevel:
    """Convert string to LogLevel (unknown names fall back to INFO)."""
    mapping = {
        'TRACE': LogLevel.TRACE,
        'DEBUG': LogLevel.DEBUG,
        'INFO': LogLevel.INFO,
        'WARNING': LogLevel.WARNING,
        'WARN': LogLevel.WARNING,
        'ERROR': LogLevel.ERROR,
        'CRITICAL': LogLevel.CRITICAL,
        'OFF': LogLevel.OFF,
    }
    return mapping.get(level_str.upper(), LogLevel.INFO)


def _format_message(module: str, level: str, msg: str) -> str:
    """Format a log message."""
    return f"[{module}] {level}: {msg}"


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
    """
    _config['default_level'] = _level_from_string(level)

    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][mod.lower()] = _level_from_string(mod_level)


def _load_env_config() -> None:
    """Load configuration from CABINET_LOG_* environment variables."""
    if 'CABINET_LOG_LEVEL' in os.environ:
        _config['default_level'] = _level_from_string(os.environ['CABINET_LOG_LEVEL'])

    # CABINET_LOG_FRAME_CLOCK=DEBUG -> frame_clock: DEBUG
    for key, value in os.environ.items():
        if key.startswith('CABINET_LOG_') and key not in _RESERVED_KEYS:
            module_name = key[len('CABINET_LOG_'):].lower()
            _config['module_levels'][module_name] = _level_from_string(value)


# Load env config on import
_load_env_config()


class CabinetLogger:
    """Logger for a specific module."""

    def __init__(self, module: str):
        self.module = module
        self._module_key = module.lower().replace('.', '_').replace('/', '_')

    @property
    def level(self) -> LogLevel:
        """Get effective log level for this module."""
        if self._module_key in _config['module_levels']:
            return _config['module_levels'][self._module_key]
        return _config['default_level']

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check if a message at the given level would be emitted."""
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        stream = sys.stderr if level >= LogLevel.WARNING else sys.stdout
        print(_format_message(self.module, level_name, msg), file=stream)

    def trace(self, msg: str, *args) -> None:
        """Log at TRACE level (very verbose)."""
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        """Log at DEBUG level."""
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        """Log at INFO level."""
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        """Log at WARNING level."""
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def error(self, msg: str, *args) -> None:
        """Log at ERROR level."""
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def exception(self, msg: str, *args, exc_info: bool = True) -> None:
        """
        Log an exception with traceback.

        Args:
            msg: Message describing what failed
            exc_info: If True, include current exception traceback
        """
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

        if exc_info:
            tb = traceback.format_exc()
            if tb and tb.strip() != 'NoneType: None':
                for line in tb.strip().split('\n'):
                    self._log(LogLevel.ERROR, 'TRACE', line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> CabinetLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') multiple times
    returns the same logger instance.

    Args:
        module: Module name (e.g., 'frame_clock', 'registry', 'snake')

    Returns:
        CabinetLogger instance for the module
    """
    return CabinetLogger(module)
