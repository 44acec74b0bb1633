"""Development path detectors.

Each detector takes the project root and returns unreconciled DevPath
candidates from one source. Detectors never raise: a failing source
contributes no candidates, a failing entry is skipped.
"""

import logging
from collections.abc import Callable
from collections.abc import Iterator
from pathlib import Path

import yaml

from ddev_explain.composer import MANIFEST_NAME
from ddev_explain.composer import parse_path_repositories
from ddev_explain.ddev.compose import find_compose_files
from ddev_explain.ddev.compose import load_compose_services
from ddev_explain.detect.packages import find_packages
from ddev_explain.detect.paths import absolute_path
from ddev_explain.detect.paths import expand_path
from ddev_explain.detect.settings import DEFAULT_SETTINGS
from ddev_explain.detect.settings import DetectorSettings
from ddev_explain.exceptions import ComposerError
from ddev_explain.models import DevPath
from ddev_explain.models import DevPathKind

logger = logging.getLogger(__name__)

Detector = Callable[[Path, DetectorSettings], list[DevPath]]

CONVENTION_SOURCE = "directory pattern"


def detect_composer_paths(
    project_root: Path, settings: DetectorSettings = DEFAULT_SETTINGS
) -> list[DevPath]:
    """Detect path repositories declared in composer.json."""
    try:
        urls = parse_path_repositories(project_root)
    except ComposerError as e:
        logger.warning("Ignoring composer path repositories: %s", e)
        return []

    dev_paths = []
    for url in urls:
        for path in expand_path(project_root, url, settings):
            dev_paths.append(
                DevPath(
                    path=path,
                    kind=DevPathKind.PACKAGE_REFERENCE,
                    source=MANIFEST_NAME,
                    packages=tuple(find_packages(path, settings)),
                )
            )
    return dev_paths


def detect_conventional_paths(
    project_root: Path, settings: DetectorSettings = DEFAULT_SETTINGS
) -> list[DevPath]:
    """Detect conventional development directories that contain packages."""
    dev_paths = []
    for name in settings.conventional_dirs:
        path = absolute_path(project_root, name)
        if settings.is_container_path(path):
            continue
        if not path.is_dir():
            continue
        packages = find_packages(path, settings)
        # An empty conventional directory is not a development path
        if not packages:
            continue
        dev_paths.append(
            DevPath(
                path=path,
                kind=DevPathKind.CONVENTION,
                source=CONVENTION_SOURCE,
                packages=tuple(packages),
            )
        )
    return dev_paths


def iter_symlinks(root: Path) -> Iterator[Path]:
    """Yield every symlink below root exactly once, without following any.

    Directories that cannot be listed are skipped.
    """

    def on_error(error: OSError) -> None:
        logger.debug("Skipping unreadable directory: %s", error)

    for dirpath, dirnames, filenames in root.walk(on_error=on_error):
        for name in dirnames + filenames:
            entry = dirpath / name
            if entry.is_symlink():
                yield entry


def detect_vendor_symlinks(
    project_root: Path, settings: DetectorSettings = DEFAULT_SETTINGS
) -> list[DevPath]:
    """Detect symlinks in vendor/ that point outside of vendor/."""
    vendor_dir = project_root / settings.vendor_dir
    if not vendor_dir.is_dir():
        return []

    dev_paths = []
    for link in iter_symlinks(vendor_dir):
        try:
            target = link.readlink()
        except OSError as e:
            logger.debug("Skipping unreadable symlink %s: %s", link, e)
            continue

        target = absolute_path(link.parent, target)
        if settings.is_container_path(target):
            continue
        if target.is_relative_to(vendor_dir):
            continue
        try:
            exists = target.exists()
        except OSError as e:
            logger.debug("Skipping inaccessible symlink target %s: %s", target, e)
            continue
        if not exists:
            logger.debug("Skipping broken symlink %s -> %s", link, target)
            continue

        dev_paths.append(
            DevPath(
                path=target,
                kind=DevPathKind.SYMLINK,
                source=str(link.relative_to(project_root)),
                packages=tuple(find_packages(target, settings)),
            )
        )
    return dev_paths


def parse_volume(volume: object) -> tuple[str, str] | None:
    """Split a "host:container[:options]" volume into host and container paths.

    Returns:
        (host_path, container_path), or None if the volume is not a host
        path mount (named volume, anonymous volume, malformed entry)
    """
    if not isinstance(volume, str):
        return None
    parts = volume.split(":")
    if len(parts) < 2:
        return None
    host_path, container_path = parts[0], parts[1]
    if not host_path.startswith((".", "/")) or not container_path:
        return None
    return host_path, container_path


def detect_compose_mounts(
    project_root: Path, settings: DetectorSettings = DEFAULT_SETTINGS
) -> list[DevPath]:
    """Detect bind mounts of directories outside the project."""
    dev_paths = []
    for compose_file in find_compose_files(project_root / settings.ddev_dir):
        try:
            services = load_compose_services(compose_file)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning("Ignoring %s: %s", compose_file.name, e)
            continue

        for service in services.values():
            if not isinstance(service, dict):
                continue
            volumes = service.get("volumes") or []
            if not isinstance(volumes, list):
                continue
            for volume in volumes:
                parsed = parse_volume(volume)
                if parsed is None:
                    continue
                host_path, container_path = parsed

                path = absolute_path(compose_file.parent, host_path)
                # Mounts inside the project are already visible
                if path.is_relative_to(project_root):
                    continue
                if settings.is_container_path(path):
                    continue

                dev_paths.append(
                    DevPath(
                        path=path,
                        kind=DevPathKind.MOUNT,
                        source=compose_file.name,
                        mount_target=container_path,
                        packages=tuple(find_packages(path, settings)),
                    )
                )
    return dev_paths


DETECTORS: tuple[Detector, ...] = (
    detect_composer_paths,
    detect_conventional_paths,
    detect_vendor_symlinks,
    detect_compose_mounts,
)
