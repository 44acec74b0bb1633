"""Tests for reconciling development path candidates."""

import itertools
from pathlib import Path

from ddev_explain.detect.reconcile import kind_rank
from ddev_explain.detect.reconcile import reconcile
from ddev_explain.detect.reconcile import resolve_priorities
from ddev_explain.detect.reconcile import suppress_covered_conventions
from ddev_explain.models import DevPath
from ddev_explain.models import DevPathKind

ROOT = Path("/home/user/project")


def candidate(path, kind, source="test"):
    return DevPath(
        path=Path(path),
        kind=kind,
        source=source,
        mount_target="/mnt" if kind == DevPathKind.MOUNT else "",
    )


class TestKindRank:
    """Tests for kind_rank()."""

    def test_total_order(self):
        """Test package-reference < symlink < mount < convention."""
        ranks = [
            kind_rank(DevPathKind.PACKAGE_REFERENCE),
            kind_rank(DevPathKind.SYMLINK),
            kind_rank(DevPathKind.MOUNT),
            kind_rank(DevPathKind.CONVENTION),
        ]

        assert ranks == sorted(ranks)
        assert len(set(ranks)) == 4

    def test_unknown_kind_ranks_last(self):
        """Test that kinds missing from the table lose to every known kind."""
        assert kind_rank("something-else") > kind_rank(DevPathKind.CONVENTION)


class TestResolvePriorities:
    """Tests for resolve_priorities()."""

    def test_package_reference_beats_convention(self):
        """Test that an explicit declaration wins over a naming convention."""
        path = ROOT / "packages" / "my-ext"
        candidates = [
            candidate(path, DevPathKind.CONVENTION),
            candidate(path, DevPathKind.PACKAGE_REFERENCE),
        ]

        survivors = resolve_priorities(candidates)

        assert survivors[path].kind == DevPathKind.PACKAGE_REFERENCE

    def test_independent_of_input_order(self):
        """Test that every permutation picks the same kind."""
        path = ROOT / "lib"
        candidates = [
            candidate(path, DevPathKind.CONVENTION),
            candidate(path, DevPathKind.MOUNT),
            candidate(path, DevPathKind.SYMLINK),
        ]

        for permutation in itertools.permutations(candidates):
            survivors = resolve_priorities(permutation)
            assert survivors[path].kind == DevPathKind.SYMLINK

    def test_same_kind_keeps_exactly_one(self):
        """Test that duplicates of one kind collapse to a single entry."""
        path = ROOT / "packages"
        candidates = [
            candidate(path, DevPathKind.CONVENTION, source="first"),
            candidate(path, DevPathKind.CONVENTION, source="second"),
        ]

        survivors = resolve_priorities(candidates)

        assert list(survivors) == [path]
        assert survivors[path].source in ("first", "second")


class TestSuppressCoveredConventions:
    """Tests for suppress_covered_conventions()."""

    def test_drops_convention_parent_of_stronger_entry(self):
        """Test that packages/ is dropped once packages/my-ext is known."""
        dev_paths = [
            candidate(ROOT / "packages", DevPathKind.CONVENTION),
            candidate(ROOT / "packages" / "my-ext", DevPathKind.SYMLINK),
        ]

        result = suppress_covered_conventions(dev_paths)

        assert [d.path for d in result] == [ROOT / "packages" / "my-ext"]

    def test_keeps_convention_without_covered_children(self):
        """Test that unrelated entries do not suppress a convention."""
        dev_paths = [
            candidate(ROOT / "packages", DevPathKind.CONVENTION),
            candidate(ROOT / "local" / "ext", DevPathKind.PACKAGE_REFERENCE),
        ]

        assert len(suppress_covered_conventions(dev_paths)) == 2

    def test_only_direct_children_suppress(self):
        """Test that a grandchild does not suppress the convention."""
        dev_paths = [
            candidate(ROOT / "typo3conf", DevPathKind.CONVENTION),
            candidate(ROOT / "typo3conf" / "ext" / "site", DevPathKind.MOUNT),
        ]

        assert len(suppress_covered_conventions(dev_paths)) == 2

    def test_conventions_do_not_suppress_each_other(self):
        """Test that only non-convention entries cover a parent."""
        dev_paths = [
            candidate(ROOT / "typo3conf", DevPathKind.CONVENTION),
            candidate(ROOT / "typo3conf" / "ext", DevPathKind.CONVENTION),
        ]

        assert len(suppress_covered_conventions(dev_paths)) == 2

    def test_non_convention_parents_are_kept(self):
        """Test that suppression only ever removes convention entries."""
        dev_paths = [
            candidate(ROOT / "local", DevPathKind.PACKAGE_REFERENCE),
            candidate(ROOT / "local" / "ext", DevPathKind.SYMLINK),
        ]

        assert len(suppress_covered_conventions(dev_paths)) == 2


class TestReconcile:
    """Tests for reconcile()."""

    def test_empty_input(self):
        """Test that no candidates give no results."""
        assert reconcile([]) == []

    def test_paths_are_unique(self):
        """Test that the result never repeats a path."""
        candidates = [
            candidate(ROOT / "a", DevPathKind.PACKAGE_REFERENCE),
            candidate(ROOT / "a", DevPathKind.SYMLINK),
            candidate(ROOT / "b", DevPathKind.MOUNT),
            candidate(ROOT / "b", DevPathKind.MOUNT),
            candidate(ROOT / "c", DevPathKind.CONVENTION),
        ]

        result = reconcile(candidates)

        paths = [d.path for d in result]
        assert len(paths) == len(set(paths)) == 3

    def test_priority_then_suppression(self):
        """Test that suppression uses the survivors of priority resolution."""
        candidates = [
            candidate(ROOT / "packages", DevPathKind.CONVENTION),
            candidate(ROOT / "packages" / "my-ext", DevPathKind.CONVENTION),
            candidate(ROOT / "packages" / "my-ext", DevPathKind.PACKAGE_REFERENCE),
        ]

        result = reconcile(candidates)

        assert [(d.path, d.kind) for d in result] == [
            (ROOT / "packages" / "my-ext", DevPathKind.PACKAGE_REFERENCE)
        ]

    def test_project_root_passes_through(self):
        """Test that a candidate for the project root itself is kept."""
        result = reconcile([candidate(ROOT, DevPathKind.PACKAGE_REFERENCE)])

        assert [d.path for d in result] == [ROOT]

    def test_candidates_are_returned_unchanged(self):
        """Test that the reconciler selects candidates without rewriting them."""
        original = DevPath(
            path=ROOT / "lib",
            kind=DevPathKind.MOUNT,
            source="docker-compose.lib.yaml",
            mount_target="/var/www/lib",
            packages=("lib",),
        )

        assert reconcile([original]) == [original]
