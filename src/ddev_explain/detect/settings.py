"""Static tables used by development path detection."""

from dataclasses import dataclass
from pathlib import Path

from ddev_explain.ddev.compose import DDEV_DIR


@dataclass(frozen=True)
class DetectorSettings:
    """Constants that shape detection. Override with dataclasses.replace()."""

    # Paths under this prefix exist only inside the web container
    container_prefix: Path = Path("/var/www")
    conventional_dirs: tuple[str, ...] = (
        "packages",
        "local",
        "local-packages",
        "typo3conf/ext",
    )
    # Entry names that are never packages (OS metadata, VCS placeholders)
    ignored_names: frozenset[str] = frozenset({".DS_Store", ".gitignore", ".gitkeep"})
    package_descriptor: str = "composer.json"
    vendor_dir: str = "vendor"
    ddev_dir: str = DDEV_DIR

    def is_container_path(self, path: Path) -> bool:
        """Check if path is only reachable from inside the container."""
        return path.is_relative_to(self.container_prefix)


DEFAULT_SETTINGS = DetectorSettings()
