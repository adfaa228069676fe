from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEBOUNCE_WINDOW = 1.0


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


@dataclass(frozen=True)
class Settings:
    # Storage location; None means the platform preferences directory
    prefs_dir: Path | None

    # Autosave
    debounce_seconds: float

    # Durability: fsync temp files and the directory on every save
    fsync_writes: bool


def get_settings(env_file: str | os.PathLike[str] | None = None) -> Settings:
    if env_file is not None:
        load_dotenv(env_file)

    raw_dir = os.getenv("PREFS_DIR", "").strip()
    prefs_dir = Path(raw_dir).expanduser() if raw_dir else None

    debounce_seconds = _env_float("PREFS_DEBOUNCE_SECONDS", DEBOUNCE_WINDOW)
    if debounce_seconds < 0:
        raise ValueError(f"PREFS_DEBOUNCE_SECONDS must be >= 0, got {debounce_seconds}")

    fsync_writes = _env_bool("PREFS_FSYNC", True)

    return Settings(
        prefs_dir=prefs_dir,
        debounce_seconds=debounce_seconds,
        fsync_writes=fsync_writes,
    )
