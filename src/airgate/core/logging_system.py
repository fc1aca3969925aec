"""Logging setup for the AirGate controller and its collaborators.

Reads an optional YAML configuration, places logs in a platform-aware
directory, and rotates the combined log each time logging is initialized.

Platform-specific log locations:
    - macOS: ~/Library/Logs/AirGate/airgate.log
    - Linux: ~/.airgate/logs/airgate.log
    - Windows: %AppData%/AirGate/Logs/airgate.log

Typical usage example:
    from airgate.core.logging_system import get_logger

    logger = get_logger(__name__)
    logger.info("Landing accepted for aircraft %d", aircraft_id)
"""

import logging
import logging.handlers
import os
import platform
from pathlib import Path
from typing import Any

import yaml

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_initialized = False

DEFAULT_LOG_FILENAME = "airgate.log"


class LoggingError(Exception):
    """Raised when the logging configuration cannot be applied."""


def get_platform_log_dir() -> Path:
    """Directory AirGate writes its logs to on this machine."""
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "AirGate"
    if system == "Windows":
        roaming = os.environ.get("APPDATA") or str(Path.home() / "AppData" / "Roaming")
        return Path(roaming) / "AirGate" / "Logs"
    return Path.home() / ".airgate" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = DEFAULT_LOG_FILENAME, keep_count: int = 5) -> None:
    """Move the last run's log to ``<name>.1`` and age older copies by one.

    At most ``keep_count`` numbered copies survive; nothing happens when
    there is no current log.
    """
    current = log_dir / log_filename
    if not current.exists():
        return

    numbered = [log_dir / f"{log_filename}.{n}" for n in range(keep_count + 1)]
    numbered[0] = current

    numbered[keep_count].unlink(missing_ok=True)
    for n in range(keep_count - 1, -1, -1):
        if numbered[n].exists():
            numbered[n].rename(numbered[n + 1])


def initialize_logging(config_path: str | Path | None = None, use_platform_dir: bool = True) -> None:
    """Initialize logging from a YAML file or the built-in defaults.

    Args:
        config_path: Path to a logging YAML file. None selects the defaults.
        use_platform_dir: Write logs to get_platform_log_dir() instead of the
            ``log_dir`` named in the configuration.

    Raises:
        LoggingError: If the configuration file is missing or unreadable.
    """
    global _logging_config, _initialized

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e

        if not isinstance(loaded, dict):
            raise LoggingError(f"Logging config must be a mapping: {config_path}")
        _logging_config = _merge_defaults(loaded)
    else:
        _logging_config = _get_default_config()

    if use_platform_dir:
        _logging_config["log_dir"] = str(get_platform_log_dir())

    log_dir = Path(_logging_config["log_dir"])
    log_dir.mkdir(parents=True, exist_ok=True)

    combined = _logging_config["combined_log"]
    rotate_logs(log_dir, combined["filename"], combined["backup_count"])

    _configure_root_logger()
    _loggers_cache.clear()
    _initialized = True


def _get_default_config() -> dict[str, Any]:
    return {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "combined_log": {
            "enabled": True,
            "filename": DEFAULT_LOG_FILENAME,
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "INFO",
        },
        "components": {},
    }


def _merge_defaults(loaded: dict[str, Any]) -> dict[str, Any]:
    """Overlay a loaded configuration on the defaults, one level deep.

    An empty section (``console:`` with nothing below it) keeps the defaults.

    Raises:
        LoggingError: If a section that takes a mapping holds anything else.
    """
    config = _get_default_config()
    for key, value in loaded.items():
        default = config.get(key)
        if not isinstance(default, dict):
            config[key] = value
            continue

        if value is None:
            value = {}
        if not isinstance(value, dict):
            raise LoggingError(f"Logging config section '{key}' must be a mapping, got {value!r}")
        config[key] = {**default, **value}
    return config


def _configure_root_logger() -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # handlers filter
    root_logger.handlers.clear()

    console = _logging_config["console"]
    if console.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_level(console.get("level", _logging_config["level"])))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)

    combined = _logging_config["combined_log"]
    if combined.get("enabled", True):
        log_file = Path(_logging_config["log_dir"]) / combined["filename"]
        # Rotation already happened at startup, so each run starts a fresh file.
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)


def _level(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise LoggingError(f"Unknown log level: {name}")
    return level


class MillisecondFormatter(logging.Formatter):
    """Formatter whose timestamps end in ``.mmm``."""

    default_msec_format = None

    def formatTime(self, record, datefmt=None):
        return f"{super().formatTime(record, datefmt)}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    return MillisecondFormatter(_logging_config["format"], _logging_config["date_format"])


def get_logger(name: str) -> logging.Logger:
    """Get a cached logger for a component.

    A component may be tuned under the ``components`` section of the
    logging YAML with ``level``, ``enabled`` and ``dedicated_file``.
    Logging is initialized with the defaults on first use if nobody
    called initialize_logging() before.

    Args:
        name: Logger name, usually the module's ``__name__``.

    Returns:
        The configured logger.
    """
    if not _initialized:
        initialize_logging()

    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    component_config = _logging_config["components"].get(name) or {}

    if component_config.get("enabled", True):
        if "level" in component_config:
            logger.setLevel(_level(component_config["level"]))

        if component_config.get("dedicated_file", False):
            log_file = Path(_logging_config["log_dir"]) / f"{name}.log"
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=component_config.get("max_bytes", 10485760),
                backupCount=component_config.get("backup_count", 5),
                encoding="utf-8",
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(_get_formatter())
            logger.addHandler(file_handler)
    else:
        logger.disabled = True

    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Flush and close every handler, then forget cached loggers."""
    global _initialized

    logging.shutdown()
    _loggers_cache.clear()
    _initialized = False
