"""Resource path resolution for development and packaged applications.

Default configuration ships in the project's config/ directory. When the
application is frozen with PyInstaller the same files are extracted to the
bundle directory instead.

Typical usage:
    from pc12perf.core.resource_path import get_config_path

    config_path = get_config_path("pc12perf.yaml")
"""

import sys
from pathlib import Path


def is_bundled() -> bool:
    """Check if running from a PyInstaller bundle."""
    return hasattr(sys, "_MEIPASS")


def get_project_root() -> Path:
    """Get the project root directory.

    Returns:
        Path to project root:
        - When running from source: the directory holding src/ and config/
        - When bundled: the temporary bundle directory containing resources
    """
    if is_bundled():
        return Path(getattr(sys, "_MEIPASS"))
    # src/pc12perf/core -> project root
    return Path(__file__).parent.parent.parent.parent


def get_config_path(config_file: str) -> Path:
    """Get path to a shipped configuration file.

    Args:
        config_file: Config filename (e.g., "logging.yaml").

    Returns:
        Absolute path to the config file.

    Examples:
        >>> str(get_config_path("logging.yaml"))
        '/Users/user/dev/pc12perf/config/logging.yaml'
    """
    return get_project_root() / "config" / config_file


def get_user_settings_path() -> Path:
    """Get path of the pilot's settings file (~/.pc12perf/settings.yaml)."""
    return Path.home() / ".pc12perf" / "settings.yaml"
