# Ensure `import micropng` works from a fresh clone:
# put repo/python on sys.path so the package is importable without prior install.
import sys
from pathlib import Path

import pytest


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _ensure_python_path():
    repo = _repo_root()
    pkg_dir = repo / "python"
    if str(pkg_dir) not in sys.path:
        sys.path.insert(0, str(pkg_dir))


_ensure_python_path()


@pytest.fixture
def rgb_image():
    """3x2 RGB image as nested lists."""
    return [
        [[255, 0, 0], [0, 255, 0], [0, 0, 255]],
        [[10, 20, 30], [40, 50, 60], [70, 80, 90]],
    ]


@pytest.fixture
def rgba_image():
    """2x2 RGBA image as nested lists."""
    return [
        [[255, 0, 0, 255], [0, 255, 0, 128]],
        [[0, 0, 255, 0], [1, 2, 3, 4]],
    ]
