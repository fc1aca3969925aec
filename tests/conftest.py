"""Pytest configuration and fixtures for all tests."""

import tempfile
from pathlib import Path

import yaml

from airgate.core.logging_system import initialize_logging, shutdown_logging


def pytest_configure(config):
    """Send test-run logs to a temporary directory.

    Runs before test modules are imported, so module-level loggers never
    fall back to the platform log directory.
    """
    log_dir = Path(tempfile.mkdtemp(prefix="airgate-test-logs-"))
    config_path = log_dir / "logging.yaml"
    config_path.write_text(
        yaml.safe_dump(
            {
                "log_dir": str(log_dir),
                "console": {"enabled": False},
            }
        ),
        encoding="utf-8",
    )
    initialize_logging(config_path, use_platform_dir=False)


def pytest_unconfigure(config):
    shutdown_logging()
