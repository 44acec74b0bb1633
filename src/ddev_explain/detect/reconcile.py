"""Merging of development path candidates from all detectors."""

from collections.abc import Iterable
from pathlib import Path

from ddev_explain.models import DevPath
from ddev_explain.models import DevPathKind

# Lower rank wins when several detectors report the same path
KIND_RANK: dict[DevPathKind, int] = {
    DevPathKind.PACKAGE_REFERENCE: 1,
    DevPathKind.SYMLINK: 2,
    DevPathKind.MOUNT: 3,
    DevPathKind.CONVENTION: 4,
}
UNRANKED = len(KIND_RANK) + 1


def kind_rank(kind: DevPathKind) -> int:
    """Get the priority rank of a kind (lower is more authoritative)."""
    return KIND_RANK.get(kind, UNRANKED)


def resolve_priorities(candidates: Iterable[DevPath]) -> dict[Path, DevPath]:
    """Keep the highest-priority candidate for each path.

    Args:
        candidates: Candidates from any number of detectors

    Returns:
        Mapping of path to its surviving candidate. Among candidates of equal
        rank the first one seen survives.
    """
    survivors: dict[Path, DevPath] = {}
    for candidate in candidates:
        existing = survivors.get(candidate.path)
        if existing is None or kind_rank(candidate.kind) < kind_rank(existing.kind):
            survivors[candidate.path] = candidate
    return survivors


def suppress_covered_conventions(dev_paths: Iterable[DevPath]) -> list[DevPath]:
    """Drop convention entries whose children were found by another detector.

    A conventional directory such as packages/ adds nothing once a stronger
    source has reported one of its direct children.
    """
    dev_paths = list(dev_paths)
    covered_parents = {
        d.path.parent for d in dev_paths if d.kind != DevPathKind.CONVENTION
    }
    return [
        d
        for d in dev_paths
        if not (d.kind == DevPathKind.CONVENTION and d.path in covered_parents)
    ]


def reconcile(candidates: Iterable[DevPath]) -> list[DevPath]:
    """Merge candidates into the final list of development paths.

    Args:
        candidates: Unreconciled candidates from all detectors

    Returns:
        Development paths unique by path, sorted by path
    """
    survivors = resolve_priorities(candidates)
    return sorted(
        suppress_covered_conventions(survivors.values()), key=lambda d: d.path
    )
