"""Composer manifest reading."""

import json
from pathlib import Path

from ddev_explain.exceptions import ComposerError

MANIFEST_NAME = "composer.json"


def load_manifest(directory: Path) -> dict | None:
    """Load composer.json from a directory.

    Returns:
        Parsed manifest, or None if the directory has no composer.json

    Raises:
        ComposerError: If the manifest cannot be read or is not a JSON object
    """
    manifest_path = directory / MANIFEST_NAME
    try:
        text = manifest_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        raise ComposerError(f"Cannot read {manifest_path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ComposerError(f"Invalid JSON in {manifest_path}: {e}") from e

    if not isinstance(data, dict):
        raise ComposerError(f"Expected a JSON object in {manifest_path}")
    return data


def parse_path_repositories(project_root: Path) -> list[str]:
    """Get the URLs of path-type repositories declared in composer.json.

    Args:
        project_root: Directory containing composer.json

    Returns:
        Repository URLs in declaration order. Empty if there is no manifest.

    Raises:
        ComposerError: If the manifest exists but is malformed
    """
    manifest = load_manifest(project_root)
    if manifest is None:
        return []

    repositories = manifest.get("repositories") or []
    # Composer also accepts repositories keyed by name
    if isinstance(repositories, dict):
        repositories = list(repositories.values())
    if not isinstance(repositories, list):
        raise ComposerError(f"'repositories' must be a list in {project_root}")

    urls = []
    for repo in repositories:
        if not isinstance(repo, dict) or repo.get("type") != "path":
            continue
        url = repo.get("url")
        if isinstance(url, str) and url:
            urls.append(url)
    return urls
