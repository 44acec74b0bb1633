"""Locating DDEV projects."""

import os
from pathlib import Path

import yaml
from platformdirs import user_config_path

from ddev_explain.ddev.config import config_path
from ddev_explain.detect.paths import absolute_path
from ddev_explain.exceptions import ProjectListError
from ddev_explain.exceptions import ProjectNotFoundError

GLOBAL_DIR_ENV = "DDEV_GLOBAL_DIR"
PROJECT_LIST_NAME = "project_list.yaml"


def global_ddev_dir() -> Path:
    """Get DDEV's global configuration directory.

    $DDEV_GLOBAL_DIR wins if set. Otherwise ~/.ddev, unless only the
    platform config directory (e.g. $XDG_CONFIG_HOME/ddev) exists.
    """
    if override := os.environ.get(GLOBAL_DIR_ENV):
        return Path(override).expanduser()

    home_dir = Path.home() / ".ddev"
    if home_dir.is_dir():
        return home_dir
    config_dir = user_config_path("ddev")
    if config_dir.is_dir():
        return config_dir
    return home_dir


def find_project_upward(start_path: Path) -> Path:
    """Find the DDEV project containing start_path.

    Args:
        start_path: Directory to start searching from (will be made absolute)

    Returns:
        The nearest directory at or above start_path with a .ddev/config.yaml

    Raises:
        ProjectNotFoundError: If no such directory exists
    """
    start_path = absolute_path(Path.cwd(), start_path)
    for candidate in (start_path, *start_path.parents):
        if config_path(candidate).is_file():
            return candidate
    raise ProjectNotFoundError(start_path)


def find_all_projects(global_dir: Path | None = None) -> list[Path]:
    """List the roots of all projects known to DDEV.

    Args:
        global_dir: DDEV global directory. If None, uses global_ddev_dir().

    Returns:
        Project roots from project_list.yaml, sorted

    Raises:
        ProjectListError: If project_list.yaml is missing or malformed
    """
    if global_dir is None:
        global_dir = global_ddev_dir()
    list_path = global_dir / PROJECT_LIST_NAME

    try:
        data = yaml.safe_load(list_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ProjectListError(f"No DDEV project list at {list_path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ProjectListError(f"Cannot read {list_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ProjectListError(f"Invalid YAML in {list_path}: {e}") from e

    if data is None:
        return []
    if not isinstance(data, dict):
        raise ProjectListError(f"Expected a mapping in {list_path}")

    roots = []
    for entry in data.values():
        if isinstance(entry, dict) and entry.get("approot"):
            roots.append(Path(str(entry["approot"])))
    return sorted(roots)
