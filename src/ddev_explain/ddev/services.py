"""Additional services declared in docker-compose files."""

import logging
from pathlib import Path

import yaml

from ddev_explain.ddev.compose import DDEV_DIR
from ddev_explain.ddev.compose import find_compose_files
from ddev_explain.ddev.compose import load_compose_services
from ddev_explain.models import Service

logger = logging.getLogger(__name__)

# Services every DDEV project has
BUILTIN_SERVICES = frozenset({"web", "db", "dba"})

# Image substring -> service type, first match wins
IMAGE_TYPES = (
    ("solr", "solr"),
    ("redis", "redis"),
    ("elastic", "elasticsearch"),
    ("mailhog", "mail"),
    ("mailpit", "mail"),
)


def classify_image(image: str) -> str:
    """Guess a service type from its image name."""
    for needle, service_type in IMAGE_TYPES:
        if needle in image:
            return service_type
    return "custom"


def detect_services(project_root: Path) -> list[Service]:
    """Find additional services in the project's docker-compose files.

    Unreadable or malformed compose files are skipped.
    """
    services = []
    for compose_file in find_compose_files(project_root / DDEV_DIR):
        try:
            definitions = load_compose_services(compose_file)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning("Ignoring %s: %s", compose_file.name, e)
            continue

        for name, definition in definitions.items():
            if name in BUILTIN_SERVICES:
                continue
            if not isinstance(definition, dict):
                definition = {}
            image = definition.get("image") or ""
            ports = definition.get("ports") or []
            services.append(
                Service(
                    name=str(name),
                    type=classify_image(str(image)),
                    ports=[str(p) for p in ports] if isinstance(ports, list) else [],
                )
            )
    return services
