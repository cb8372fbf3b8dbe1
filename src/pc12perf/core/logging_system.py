"""Logging system for the gateway clients and the polling loop.

This module configures the standard library logging from a YAML file, with
per-component levels, platform-aware log locations, and startup-based rotation.

Platform-specific log locations:
    - macOS: ~/Library/Logs/PC12Perf/pc12perf.log
    - Linux: ~/.pc12perf/logs/pc12perf.log
    - Windows: %AppData%/PC12Perf/Logs/pc12perf.log

Each start rotates logs, keeping the last 5 launches.

Typical usage example:
    from pc12perf.core.logging_system import get_logger, initialize_logging

    initialize_logging("config/logging.yaml")
    log = get_logger("polling_loop")
    log.info("Polling started")
"""

import logging
import logging.handlers
import os
import platform
import time
from pathlib import Path
from typing import Any

import yaml

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_initialized = False


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get platform-specific log directory.

    Returns:
        Path to the platform-appropriate log directory:
        - macOS: ~/Library/Logs/PC12Perf
        - Linux: ~/.pc12perf/logs
        - Windows: %AppData%/PC12Perf/Logs
    """
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "PC12Perf"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "PC12Perf" / "Logs"
    else:
        return Path.home() / ".pc12perf" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = "pc12perf.log", keep_count: int = 5) -> None:
    """Rotate logs on startup, keeping the last N launches.

    Renames the current log to pc12perf.log.1, shifts older logs, and deletes
    logs beyond keep_count.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file.
        keep_count: Number of old logs to keep.
    """
    log_file = log_dir / log_filename

    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        new_log = log_dir / f"{log_filename}.{i + 1}"
        if old_log.exists():
            old_log.rename(new_log)

    log_file.rename(log_dir / f"{log_filename}.1")


def initialize_logging(config_path: str | Path | None = None, use_platform_dir: bool = True) -> None:
    """Initialize the logging system from YAML configuration.

    Call once at startup before any component logs. Rotates the log left by
    the previous launch.

    Args:
        config_path: Path to logging configuration YAML file.
            If None, uses the default configuration.
        use_platform_dir: If True, use the platform-specific log directory.
            If False, use log_dir from the config (development and tests).

    Raises:
        LoggingError: If the configuration cannot be loaded.

    Examples:
        >>> initialize_logging("config/logging.yaml")
        >>> log = get_logger("aspen")
        >>> log.info("Logging initialized")
    """
    global _logging_config, _initialized

    if config_path:
        try:
            config_path = Path(config_path)
            if not config_path.exists():
                raise LoggingError(f"Logging config file not found: {config_path}")

            with config_path.open("r", encoding="utf-8") as f:
                _logging_config = yaml.safe_load(f) or {}

        except Exception as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e
    else:
        _logging_config = _get_default_config()

    if use_platform_dir:
        _logging_config["log_dir"] = str(get_platform_log_dir())

    _setup_directories()

    log_dir = Path(_logging_config.get("log_dir", "logs"))
    log_filename = _logging_config.get("combined_log", {}).get("filename", "pc12perf.log")
    keep_count = _logging_config.get("combined_log", {}).get("backup_count", 5)
    rotate_logs(log_dir, log_filename, keep_count)

    _configure_root_logger()

    # Modules log through logging.getLogger(__name__), so configured
    # components are bound here rather than on first get_logger() call
    for name in _logging_config.get("components", {}):
        _loggers_cache.setdefault(name, logging.getLogger(name))

    for name, logger in _loggers_cache.items():
        _apply_component_config(name, logger)

    _initialized = True


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration.

    Returns:
        Default logging configuration dictionary.
    """
    return {
        "version": 1,
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "combined_log": {
            "enabled": True,
            "filename": "pc12perf.log",
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "INFO",
        },
        "components": {},
    }


def _setup_directories() -> None:
    """Create log directories if they don't exist."""
    log_dir = Path(_logging_config.get("log_dir", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)


def _configure_root_logger() -> None:
    """Configure the root logger with handlers."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter in handlers

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    if _logging_config.get("console", {}).get("enabled", True):
        console_handler = logging.StreamHandler()
        console_level = _logging_config.get("console", {}).get("level", "INFO")
        console_handler.setLevel(getattr(logging, console_level))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)

    # Rotation is done on startup, not by size
    if _logging_config.get("combined_log", {}).get("enabled", True):
        combined_config = _logging_config.get("combined_log", {})
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_file = log_dir / combined_config.get("filename", "pc12perf.log")

        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(getattr(logging, _logging_config.get("level", "DEBUG")))
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)


class MillisecondFormatter(logging.Formatter):
    """Formatter that shows milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        if datefmt:
            s = time.strftime(datefmt, ct)
        else:
            s = time.strftime("%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def _apply_component_config(name: str, logger: logging.Logger) -> None:
    component_config = _logging_config.get("components", {}).get(name, {})

    if not component_config.get("enabled", True):
        logger.disabled = True
        return

    logger.disabled = False
    if "level" in component_config:
        logger.setLevel(getattr(logging, component_config["level"]))

    has_dedicated = any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    )
    if component_config.get("dedicated_file", False) and not has_dedicated:
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / f"{name}.log",
            maxBytes=component_config.get("max_bytes", 1048576),
            backupCount=component_config.get("backup_count", 5),
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Loggers are cached and reused. Each logger can have its own configuration
    under the 'components' section of the logging YAML (level, enabled,
    dedicated_file).

    Args:
        name: Logger name (typically the component name).

    Returns:
        Configured logger instance.

    Note:
        Use lazy formatting (%) instead of f-strings.
    """
    if not _initialized:
        initialize_logging()

    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    _apply_component_config(name, logger)

    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Flush all handlers and close log files.

    Should be called at application shutdown.
    """
    global _initialized

    logging.shutdown()
    _loggers_cache.clear()
    _initialized = False
