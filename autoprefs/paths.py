from __future__ import annotations

from pathlib import Path

import platformdirs


def preferences_root() -> Path:
    # e.g. ~/.config on Linux, ~/Library/Application Support on macOS, %APPDATA% on Windows
    return platformdirs.user_config_path(roaming=True)


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def check_component(name: str, *, what: str) -> str:
    """Reject names that could escape their container when used as a path component."""
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"{what} must be a non-empty string")
    if "/" in name or "\\" in name or name in (".", "..") or "\0" in name:
        raise ValueError(f"{what} must not contain path separators: {name!r}")
    return name


def app_dir(root: Path, app_id: str) -> Path:
    return root / check_component(app_id, what="app_id")
