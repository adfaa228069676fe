from __future__ import annotations

import os
from pathlib import Path


def temp_path_for(path: Path) -> Path:
    return path.with_suffix(path.suffix + ".tmp")


def atomic_write_bytes(path: Path, data: bytes, *, fsync: bool = True) -> None:
    """
    Atomically write bytes to disk by writing to a temp file then replacing.

    The temp file lives next to ``path`` so the final rename never crosses a
    filesystem. If anything fails before the rename, ``path`` keeps its old
    content (or stays absent) and the temp file is removed. OSError propagates.
    """
    tmp_path = temp_path_for(path)
    try:
        with tmp_path.open("wb") as f:
            f.write(data)
            f.flush()
            if fsync:
                os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    if fsync:
        _fsync_dir(path.parent)


def _fsync_dir(directory: Path) -> None:
    # Directories cannot be opened for fsync on Windows.
    if os.name != "posix":
        return
    fd = os.open(directory, os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)
