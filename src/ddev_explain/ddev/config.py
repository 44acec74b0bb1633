"""Project configuration from .ddev/config.yaml."""

from pathlib import Path

import yaml

from ddev_explain.ddev.commands import detect_commands
from ddev_explain.ddev.compose import DDEV_DIR
from ddev_explain.ddev.services import detect_services
from ddev_explain.exceptions import ConfigError
from ddev_explain.models import Database
from ddev_explain.models import Project

CONFIG_NAME = "config.yaml"
DEFAULT_TLD = "ddev.site"


def config_path(project_root: Path) -> Path:
    """Get the location of a project's config.yaml."""
    return project_root / DDEV_DIR / CONFIG_NAME


def load_config(project_root: Path) -> dict:
    """Load the raw config.yaml of a project.

    Raises:
        ConfigError: If the config is missing, unreadable or not a mapping
    """
    path = config_path(project_root)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"No DDEV config at {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {path}")
    return data


def _text(value: object) -> str:
    # YAML turns unquoted versions like 8.2 into floats
    return "" if value is None else str(value)


def _list(value: object) -> list:
    return value if isinstance(value, list) else []


def parse_hooks(raw_hooks: object) -> dict[str, list[str]]:
    """Flatten hook definitions into event -> command strings.

    Host-side commands are prefixed with "(host) ".
    """
    hooks: dict[str, list[str]] = {}
    if not isinstance(raw_hooks, dict):
        return hooks

    for event, tasks in raw_hooks.items():
        for task in _list(tasks):
            if not isinstance(task, dict):
                continue
            if task.get("exec"):
                hooks.setdefault(str(event), []).append(_text(task["exec"]))
            if task.get("exec-host"):
                hooks.setdefault(str(event), []).append(
                    f"(host) {_text(task['exec-host'])}"
                )
    return hooks


def project_urls(name: str, config: dict) -> list[str]:
    """Build the HTTPS URLs a project is reachable at."""
    tld = _text(config.get("project_tld")) or DEFAULT_TLD
    hostnames = [name] + [_text(h) for h in _list(config.get("additional_hostnames"))]
    urls = [f"https://{hostname}.{tld}" for hostname in hostnames if hostname]
    urls += [f"https://{_text(f)}" for f in _list(config.get("additional_fqdns")) if f]
    return urls


def parse_config(project_root: Path) -> Project:
    """Read a project's DDEV config into a Project.

    Services and custom commands are detected as well; development paths
    are left empty.

    Args:
        project_root: Root directory of the project

    Raises:
        ConfigError: If config.yaml is missing or malformed
    """
    config = load_config(project_root)
    name = _text(config.get("name")) or project_root.name

    database = config.get("database")
    if not isinstance(database, dict):
        database = {}

    return Project(
        name=name,
        path=project_root,
        type=_text(config.get("type")),
        php_version=_text(config.get("php_version")),
        webserver=_text(config.get("webserver_type")),
        database=Database(
            type=_text(database.get("type")),
            version=_text(database.get("version")),
        ),
        urls=project_urls(name, config),
        nodejs=_text(config.get("nodejs_version")),
        services=detect_services(project_root),
        commands=detect_commands(project_root),
        hooks=parse_hooks(config.get("hooks")),
    )
