"""Project path constants - single source of truth for all file paths.

Paths are resolved from the project root (the directory holding
pyproject.toml) so the seeder behaves the same wherever it is invoked from.
"""

from pathlib import Path

import pyrootutils


def _find_project_root() -> Path:
    """Find project root by looking for the pyproject.toml marker file.

    Falls back to the current working directory when the package is
    installed outside a checkout (no marker above the module).
    """
    try:
        return pyrootutils.find_root(search_from=__file__, indicator="pyproject.toml")
    except FileNotFoundError:
        return Path.cwd()


# Project root (contains pyproject.toml)
PROJECT_ROOT = _find_project_root()

# Seed fixtures
DATA_DIR = PROJECT_ROOT / "data"
SEED_DATA_DIR = DATA_DIR / "seed"

# Generated course bundle
COURSE_DATA_PATH = SEED_DATA_DIR / "course_data.json"

# Local overrides
CONFIG_TOML = PROJECT_ROOT / "config.toml"
ENV_FILE = PROJECT_ROOT / ".env"


def fixture_path(filename: str, data_dir: Path | None = None) -> Path:
    """Get the path of a fixture file in the seed data directory."""
    return (data_dir or SEED_DATA_DIR) / filename
