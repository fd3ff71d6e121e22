"""Resource path resolution relative to the project root.

Typical usage:
    from airportdb.core.resource_path import get_config_path, get_data_path

    settings = get_config_path("settings.yaml")
    airports = get_data_path("airports.csv")
"""

from pathlib import Path


def get_project_root() -> Path:
    """Get the project root directory.

    The config/ and data/ directories are only present in a source checkout
    or an editable install.

    Returns:
        Path to project root, three levels above src/airportdb/core.

    Examples:
        >>> get_project_root()
        PosixPath('/Users/user/dev/airportdb')
    """
    return Path(__file__).parent.parent.parent.parent


def get_resource_path(relative_path: str | Path) -> Path:
    """Get absolute path to a resource file or directory.

    Absolute paths are returned unchanged.

    Args:
        relative_path: Path relative to the project root (e.g., "config/logging.yaml")

    Returns:
        Absolute path to the resource.
    """
    path = Path(relative_path)
    if path.is_absolute():
        return path
    return get_project_root() / path


def get_config_path(config_file: str) -> Path:
    """Get path to a configuration file.

    Examples:
        >>> str(get_config_path("logging.yaml"))
        '/Users/user/dev/airportdb/config/logging.yaml'
    """
    return get_resource_path(f"config/{config_file}")


def get_data_path(data_file: str) -> Path:
    """Get path to a data file.

    Examples:
        >>> str(get_data_path("airports.csv"))
        '/Users/user/dev/airportdb/data/airports.csv'
    """
    return get_resource_path(f"data/{data_file}")
