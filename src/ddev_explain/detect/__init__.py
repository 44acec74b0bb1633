"""Development path detection."""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ddev_explain.detect.paths import normalize_project_root
from ddev_explain.detect.reconcile import reconcile
from ddev_explain.detect.settings import DEFAULT_SETTINGS
from ddev_explain.detect.settings import DetectorSettings
from ddev_explain.detect.sources import DETECTORS
from ddev_explain.detect.sources import Detector
from ddev_explain.models import DevPath

logger = logging.getLogger(__name__)


def _run_detector(
    detector: Detector, project_root: Path, settings: DetectorSettings
) -> list[DevPath]:
    try:
        return detector(project_root, settings)
    except OSError as e:
        logger.warning("%s failed: %s", detector.__name__, e)
        return []


def detect_dev_paths(
    project_root: Path,
    settings: DetectorSettings = DEFAULT_SETTINGS,
    detectors: Sequence[Detector] = DETECTORS,
    parallel: bool = False,
) -> list[DevPath]:
    """Find all development paths of a project.

    Args:
        project_root: Root directory of the project (will be made absolute)
        settings: Detection settings
        detectors: Detectors to run against the project root
        parallel: If True, run detectors in a thread pool

    Returns:
        Development paths unique by path, sorted by path

    Raises:
        FileNotFoundError: If project_root does not exist
        NotADirectoryError: If project_root is not a directory
    """
    project_root = normalize_project_root(project_root)

    if parallel:
        with ThreadPoolExecutor(max_workers=len(detectors) or 1) as executor:
            results = list(
                executor.map(
                    lambda d: _run_detector(d, project_root, settings), detectors
                )
            )
    else:
        results = [_run_detector(d, project_root, settings) for d in detectors]

    candidates = [candidate for result in results for candidate in result]
    logger.debug("Reconciling %d candidates in %s", len(candidates), project_root)
    return reconcile(candidates)


__all__ = [
    "DEFAULT_SETTINGS",
    "DETECTORS",
    "DetectorSettings",
    "detect_dev_paths",
    "reconcile",
]
