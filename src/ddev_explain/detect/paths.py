"""Path normalization and expansion utilities."""

import glob
import logging
import os
import re
from pathlib import Path

from ddev_explain.detect.settings import DEFAULT_SETTINGS
from ddev_explain.detect.settings import DetectorSettings

logger = logging.getLogger(__name__)

GLOB_CHAR = "*"


def normalize_project_root(project_root: Path) -> Path:
    """Normalize and validate project root path.

    Args:
        project_root: Root directory of the DDEV project

    Returns:
        Absolute, normalized path to the project root

    Raises:
        FileNotFoundError: If project_root does not exist
        NotADirectoryError: If project_root is not a directory
    """
    project_root = absolute_path(Path.cwd(), project_root)

    if not project_root.exists():
        raise FileNotFoundError(f"Project directory does not exist: {project_root}")
    if not project_root.is_dir():
        raise NotADirectoryError(f"Project path is not a directory: {project_root}")

    return project_root


def absolute_path(base_dir: Path, path: Path | str) -> Path:
    """Join path onto base_dir unless already absolute, then drop . and .. segments.

    Symlinks are not followed, so the result names the same entry the
    caller referred to.
    """
    return Path(os.path.normpath(os.path.join(base_dir, path)))


def expand_path(
    base_dir: Path,
    expression: str,
    settings: DetectorSettings = DEFAULT_SETTINGS,
) -> list[Path]:
    """Expand a path expression into absolute paths.

    Args:
        base_dir: Directory relative expressions are resolved against
        expression: Absolute, relative or glob path expression
        settings: Detection settings (container prefix, ignored names)

    Returns:
        Sorted absolute paths. A plain expression yields exactly one path,
        a glob yields its matches (possibly none). Container-only paths and
        ignored entry names are dropped.
    """
    path = absolute_path(base_dir, expression)
    if settings.is_container_path(path):
        logger.debug("Skipping container-only path %s", expression)
        return []

    if GLOB_CHAR not in expression:
        if path.name in settings.ignored_names:
            return []
        return [path]

    # Only the expression is a pattern, base_dir is matched literally
    pattern = os.path.join(glob.escape(str(base_dir)), expression)
    try:
        matches = glob.glob(pattern)
    except re.error as e:
        logger.debug("Invalid glob %r: %s", expression, e)
        return []

    expanded = []
    for match in sorted(matches):
        match_path = absolute_path(base_dir, match)
        if match_path.name in settings.ignored_names:
            continue
        if settings.is_container_path(match_path):
            continue
        expanded.append(match_path)
    return expanded
