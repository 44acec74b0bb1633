"""Data models for ddev-explain."""

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from pathlib import Path


class DevPathKind(str, Enum):
    """How a development path was discovered."""

    PACKAGE_REFERENCE = "package-reference"
    SYMLINK = "symlink"
    MOUNT = "mount"
    CONVENTION = "convention"


class OutputFormat(str, Enum):
    """How to render a project summary."""

    TEXT = "text"
    JSON = "json"
    MARKDOWN = "markdown"


@dataclass(frozen=True)
class DevPath:
    """A development directory linked into the project.

    Detectors produce these as unreconciled candidates; the reconciler
    returns the surviving ones unchanged.
    """

    path: Path  # Absolute, lexically normalized
    kind: DevPathKind
    source: str  # Where it was found (manifest name, symlink path, ...)
    mount_target: str = ""  # Path inside the container, mounts only
    packages: tuple[str, ...] = ()  # Package names directly beneath path

    def __post_init__(self) -> None:
        if not self.path.is_absolute():
            raise ValueError(f"DevPath must be absolute: {self.path}")
        is_mount = self.kind == DevPathKind.MOUNT
        if is_mount != bool(self.mount_target):
            raise ValueError(
                f"mount_target must be set for mounts only: {self.kind.value}"
            )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        data = {
            "path": str(self.path),
            "type": self.kind.value,
            "source": self.source,
            "packages": list(self.packages),
        }
        if self.mount_target:
            data["mount_target"] = self.mount_target
        return data


@dataclass
class Database:
    """Database configuration of a project."""

    type: str = ""
    version: str = ""

    def __str__(self) -> str:
        return f"{self.type} {self.version}".strip()


@dataclass
class Service:
    """An additional service declared in a docker-compose file."""

    name: str
    type: str  # solr, redis, elasticsearch, mail or custom
    ports: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {"name": self.name, "type": self.type, "ports": self.ports}


@dataclass
class Command:
    """A custom DDEV command script."""

    name: str
    description: str
    path: Path
    location: str  # "host" or "web"

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "name": self.name,
            "description": self.description,
            "path": str(self.path),
            "location": self.location,
        }


@dataclass
class Project:
    """Summary of a DDEV project."""

    name: str
    path: Path
    type: str = ""
    php_version: str = ""
    webserver: str = ""
    database: Database = field(default_factory=Database)
    urls: list[str] = field(default_factory=list)
    nodejs: str = ""
    services: list[Service] = field(default_factory=list)
    dev_paths: list[DevPath] = field(default_factory=list)
    commands: list[Command] = field(default_factory=list)
    hooks: dict[str, list[str]] = field(default_factory=dict)  # event -> commands

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "name": self.name,
            "path": str(self.path),
            "type": self.type,
            "php_version": self.php_version,
            "webserver": self.webserver,
            "database": {
                "type": self.database.type,
                "version": self.database.version,
            },
            "urls": self.urls,
            "nodejs": self.nodejs,
            "services": [s.to_dict() for s in self.services],
            "dev_paths": [d.to_dict() for d in self.dev_paths],
            "commands": [c.to_dict() for c in self.commands],
            "hooks": self.hooks,
        }
