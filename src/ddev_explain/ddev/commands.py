"""Custom DDEV commands."""

from pathlib import Path

from ddev_explain.ddev.compose import DDEV_DIR
from ddev_explain.models import Command

COMMAND_LOCATIONS = ("host", "web")
DESCRIPTION_PREFIX = "## Description:"


def parse_command_description(command_file: Path) -> str:
    """Get the description from a command script's "## Description:" line.

    Returns:
        The description, or "" if the script has none or cannot be read
    """
    try:
        with command_file.open(encoding="utf-8", errors="replace") as f:
            for line in f:
                if line.startswith(DESCRIPTION_PREFIX):
                    return line.removeprefix(DESCRIPTION_PREFIX).strip()
    except OSError:
        return ""
    return ""


def detect_commands(project_root: Path) -> list[Command]:
    """Find custom commands in .ddev/commands/host and .ddev/commands/web."""
    commands_dir = project_root / DDEV_DIR / "commands"
    commands = []
    for location in COMMAND_LOCATIONS:
        try:
            entries = sorted((commands_dir / location).iterdir())
        except OSError:
            continue

        for entry in entries:
            if entry.is_dir() or entry.name.startswith("."):
                continue
            commands.append(
                Command(
                    name=entry.name,
                    description=parse_command_description(entry),
                    path=entry,
                    location=location,
                )
            )
    return commands


HOST_COMMAND_NAME = "explain"
HOST_COMMAND_SCRIPT = """#!/bin/bash
## Description: Summarize DDEV project configuration
## Usage: explain [flags]
## Example: ddev explain --format=json

ddev-explain "$@"
"""


def install_host_command(global_dir: Path) -> Path:
    """Install "ddev explain" as a global host command.

    Args:
        global_dir: DDEV global configuration directory

    Returns:
        Path of the written command script

    Raises:
        OSError: If the script cannot be written
    """
    command_path = global_dir / "commands" / "host" / HOST_COMMAND_NAME
    command_path.parent.mkdir(parents=True, exist_ok=True)
    command_path.write_text(HOST_COMMAND_SCRIPT, encoding="utf-8")
    command_path.chmod(0o755)
    return command_path
