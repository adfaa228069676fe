from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for `import autoprefs` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def sandbox_prefs(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Redirect the platform preferences root to a temp directory so tests never touch the real one.
    """
    import autoprefs.paths as paths

    root = tmp_path / "config"

    def _preferences_root() -> Path:
        return root

    monkeypatch.setattr(paths, "preferences_root", _preferences_root)
    for name in ("PREFS_DIR", "PREFS_DEBOUNCE_SECONDS", "PREFS_FSYNC"):
        monkeypatch.delenv(name, raising=False)
    return root


@pytest.fixture
def fs_backend(sandbox_prefs: Path):
    from autoprefs.disk_store import FilesystemBackend

    backend = FilesystemBackend()
    backend.ensure_container("com.example.app")
    return backend
