"""Logging setup for the airportdb application.

This module configures the standard logging package from a YAML file, with
platform-aware log locations and startup-based rotation.

Platform-specific log locations:
    - macOS: ~/Library/Logs/AirportDB/airportdb.log
    - Linux: ~/.airportdb/logs/airportdb.log
    - Windows: %AppData%/AirportDB/Logs/airportdb.log

Each application start rotates logs, keeping the last 5 runs.

Typical usage example:
    from airportdb.core.logging_system import get_logger, initialize_logging

    initialize_logging("config/logging.yaml")
    log = get_logger(__name__)
    log.info("Loaded %d airports", count)
"""

import logging
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
        - macOS: ~/Library/Logs/AirportDB
        - Linux: ~/.airportdb/logs
        - Windows: %AppData%/AirportDB/Logs
    """
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "AirportDB"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "AirportDB" / "Logs"
    else:
        return Path.home() / ".airportdb" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = "airportdb.log", keep_count: int = 5) -> None:
    """Rotate logs on startup, keeping the last N runs.

    Renames current log to airportdb.log.1, shifts older logs, and deletes
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

    Call once at application startup before any logging occurs.

    Args:
        config_path: Path to logging configuration YAML file.
            If None, uses default configuration.
        use_platform_dir: If True, use platform-specific log directory.
            If False, use directory from config (for development/testing).

    Raises:
        LoggingError: If initialization fails.
    """
    global _logging_config, _initialized

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                _logging_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e
    else:
        _logging_config = _get_default_config()

    if use_platform_dir:
        _logging_config["log_dir"] = str(get_platform_log_dir())

    log_dir = Path(_logging_config.get("log_dir", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    log_filename = _logging_config.get("combined_log", {}).get("filename", "airportdb.log")
    keep_count = _logging_config.get("combined_log", {}).get("backup_count", 5)
    rotate_logs(log_dir, log_filename, keep_count)

    _configure_root_logger()
    _loggers_cache.clear()
    _configure_component_loggers()

    _initialized = True


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration."""
    return {
        "version": 1,
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "combined_log": {
            "enabled": True,
            "filename": "airportdb.log",
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "WARNING",
        },
        "loggers": {},
    }


def _configure_root_logger() -> None:
    """Configure the root logger with handlers."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter in handlers

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    if _logging_config.get("console", {}).get("enabled", True):
        console_handler = logging.StreamHandler()
        console_level = _logging_config.get("console", {}).get("level", "WARNING")
        console_handler.setLevel(getattr(logging, console_level))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)

    # Rotation happens on startup, so a plain FileHandler in write mode is enough
    if _logging_config.get("combined_log", {}).get("enabled", True):
        combined_config = _logging_config.get("combined_log", {})
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_file = log_dir / combined_config.get("filename", "airportdb.log")

        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)


def _apply_logger_config(logger: logging.Logger) -> None:
    """Apply the 'loggers' entry for this logger, if any."""
    logger_config = _logging_config.get("loggers", {}).get(logger.name) or {}
    if logger_config.get("enabled", True):
        if "level" in logger_config:
            logger.setLevel(getattr(logging, str(logger_config["level"]).upper()))
    else:
        logger.disabled = True


def _configure_component_loggers() -> None:
    """Apply the 'loggers' section to every named logger.

    Modules create their loggers at import time, before the configuration is
    loaded, so the levels are pushed onto them here.
    """
    for name in _logging_config.get("loggers") or {}:
        _apply_logger_config(logging.getLogger(name))


class MillisecondFormatter(logging.Formatter):
    """Formatter that shows milliseconds with dot separator."""

    def formatTime(self, record, datefmt=None):
        """Format time with milliseconds using dot separator."""
        ct = self.converter(record.created)
        if datefmt:
            s = time.strftime(datefmt, ct)
        else:
            s = time.strftime("%Y-%m-%d %H:%M:%S", ct)
        s = f"{s}.{int(record.msecs):03d}"
        return s


def _get_formatter() -> logging.Formatter:
    """Get the configured log formatter."""
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Loggers are cached and reused. Each logger can have its own level in the
    logging config YAML under the 'loggers' section. Unlike initialize_logging,
    this never touches handlers, so library code may call it at import time.

    Args:
        name: Logger name (typically the module name).

    Returns:
        Logger instance.

    Note:
        Use lazy formatting (%) instead of f-strings.
    """
    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    _apply_logger_config(logger)

    if _initialized:
        _loggers_cache[name] = logger
    return logger


def is_initialized() -> bool:
    """Check if initialize_logging has run."""
    return _initialized


def shutdown_logging() -> None:
    """Flush all handlers and close log files.

    Should be called at application shutdown.
    """
    global _initialized

    logging.shutdown()
    logging.getLogger().handlers.clear()
    _loggers_cache.clear()
    _initialized = False
