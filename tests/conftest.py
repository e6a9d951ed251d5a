from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation so the 'src' directory is importable without install.
2. Shared directory layouts used across unit, integration and e2e tests.
3. Logging reset so each test starts from an unconfigured root logger.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from dirtree.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_logging():
    """Detach dirtree handlers after every test."""
    yield
    shutdown_logging()


@pytest.fixture
def project_structure(tmp_path: Path) -> Path:
    """
    Create a small mixed directory structure.

    Structure:
    /root
      /src
        main.py      (10 bytes)
        util.py      (empty)
        /pkg
          mod.py     (3 bytes)
      /docs
      README.md      (6 bytes)
    """
    root = tmp_path / "root"
    root.mkdir()

    src = root / "src"
    src.mkdir()
    (src / "main.py").write_bytes(b"print(1)\n\n")
    (src / "util.py").write_bytes(b"")

    pkg = src / "pkg"
    pkg.mkdir()
    (pkg / "mod.py").write_bytes(b"x=1")

    (root / "docs").mkdir()
    (root / "README.md").write_bytes(b"# Docs")

    return root


@pytest.fixture
def dirs_only_structure(tmp_path: Path) -> Path:
    """Root holding the empty directories a, b and c."""
    root = tmp_path / "dirs_only"
    root.mkdir()
    for name in ("c", "a", "b"):
        (root / name).mkdir()
    return root


@pytest.fixture
def locked_subdir_structure(tmp_path: Path):
    """
    Root with one readable and one unreadable (mode 000) subdirectory.

    Skipped where permissions are not enforced (Windows, root user).
    """
    if os.name == "nt" or (hasattr(os, "geteuid") and os.geteuid() == 0):
        pytest.skip("directory permissions are not enforced here")

    root = tmp_path / "locked"
    root.mkdir()
    (root / "open").mkdir()
    (root / "open" / "a.txt").write_bytes(b"abc")
    locked = root / "zzz_locked"
    locked.mkdir()
    (locked / "hidden.txt").write_bytes(b"x")
    locked.chmod(0)

    yield root

    # Restore so tmp_path cleanup can remove it
    locked.chmod(0o755)
