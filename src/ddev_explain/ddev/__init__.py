"""Reading DDEV project files."""

from ddev_explain.ddev.commands import detect_commands
from ddev_explain.ddev.config import parse_config
from ddev_explain.ddev.services import detect_services

__all__ = [
    "detect_commands",
    "detect_services",
    "parse_config",
]
