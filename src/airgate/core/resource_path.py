"""Resolve files shipped next to the source tree.

Typical usage:
    from airgate.core.resource_path import get_config_path

    config = ConfigLoader.load(get_config_path("airport.yaml"))
"""

from pathlib import Path


def get_project_root() -> Path:
    """Get the project root (src/airgate/core -> project root)."""
    return Path(__file__).parent.parent.parent.parent


def get_resource_path(relative_path: str) -> Path:
    """Get the absolute path of a file relative to the project root.

    Examples:
        >>> str(get_resource_path("config/airport.yaml"))
        '/home/user/dev/airgate/config/airport.yaml'
    """
    return get_project_root() / relative_path


def get_config_path(config_file: str) -> Path:
    """Get the path of a file in the ``config/`` directory.

    Examples:
        >>> get_config_path("logging.yaml").name
        'logging.yaml'
    """
    return get_resource_path(f"config/{config_file}")
