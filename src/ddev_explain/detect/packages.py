"""Package marker scanning."""

from pathlib import Path

from ddev_explain.detect.settings import DEFAULT_SETTINGS
from ddev_explain.detect.settings import DetectorSettings


def _has_descriptor(directory: Path, settings: DetectorSettings) -> bool:
    descriptor = directory / settings.package_descriptor
    # is_dir() and is_file() let PermissionError through
    try:
        return directory.is_dir() and descriptor.is_file()
    except OSError:
        return False


def find_packages(
    directory: Path, settings: DetectorSettings = DEFAULT_SETTINGS
) -> list[str]:
    """Find packages in or directly beneath a directory.

    A package is a directory holding a package descriptor (composer.json).

    Args:
        directory: Directory to scan
        settings: Detection settings (descriptor name, ignored names)

    Returns:
        Names of child directories that are packages, sorted. If no child
        qualifies but directory is itself a package, its own name. Empty if
        directory is missing or unreadable. Entries that cannot be inspected
        are skipped.
    """
    try:
        entries = sorted(directory.iterdir())
    except OSError:
        return []

    packages = [
        entry.name
        for entry in entries
        if entry.name not in settings.ignored_names
        and _has_descriptor(entry, settings)
    ]

    if not packages and _has_descriptor(directory, settings):
        packages.append(directory.name)

    return packages
