"""Auxiliary docker-compose files in a .ddev directory."""

from pathlib import Path

import yaml

DDEV_DIR = ".ddev"
COMPOSE_PREFIX = "docker-compose."
COMPOSE_SUFFIX = ".yaml"
# Generated by DDEV itself, never user-authored
PRIMARY_COMPOSE_FILE = "docker-compose.yaml"


def is_compose_file(name: str) -> bool:
    """Check if name is an auxiliary docker-compose file."""
    return (
        name.startswith(COMPOSE_PREFIX)
        and name.endswith(COMPOSE_SUFFIX)
        and name != PRIMARY_COMPOSE_FILE
    )


def find_compose_files(ddev_dir: Path) -> list[Path]:
    """Find auxiliary docker-compose files.

    Args:
        ddev_dir: The project's .ddev directory

    Returns:
        Sorted compose file paths. Empty if ddev_dir cannot be listed.
    """
    try:
        entries = sorted(ddev_dir.iterdir())
    except OSError:
        return []
    return [e for e in entries if is_compose_file(e.name) and e.is_file()]


def load_compose_services(compose_file: Path) -> dict:
    """Load the services mapping of a docker-compose file.

    Returns:
        Service name -> service definition. Empty if the file declares none.

    Raises:
        OSError: If the file cannot be read
        yaml.YAMLError: If the file is not valid YAML
    """
    data = yaml.safe_load(compose_file.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        return {}
    services = data.get("services")
    return services if isinstance(services, dict) else {}
