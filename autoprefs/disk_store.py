from __future__ import annotations

import logging
import os
from pathlib import Path

from . import paths
from .atomic import atomic_write_bytes
from .exceptions import ContainerUnavailableError, ReadError, WriteError
from .interfaces import StorageBackend

logger = logging.getLogger(__name__)


class FilesystemBackend(StorageBackend):
    """
    Stores each preferences file at ``<root>/<app_id>/<key>.<extension>``.

    - ``read`` returns None when the file does not exist.
    - Writes go to ``<key>.<extension>.tmp`` first and are renamed over the
      destination, so the destination never holds a partial file.
    """

    def __init__(self, root: Path | None = None, *, extension: str = "toml", fsync: bool = True):
        self._root = root
        self._extension = extension
        self._fsync = fsync
        self._container: Path | None = None

    @property
    def container(self) -> Path | None:
        return self._container

    def ensure_container(self, app_id: str) -> None:
        root = self._root if self._root is not None else paths.preferences_root()
        container = paths.app_dir(root, app_id)
        try:
            paths.ensure_dir(container)
        except OSError as exc:
            logger.warning("PREFS CONTAINER: could not create %s: %r", container, exc)
            raise ContainerUnavailableError(
                f"cannot create preferences directory {container}: {exc}", app_id=app_id
            ) from exc
        if not os.access(container, os.W_OK):
            raise ContainerUnavailableError(f"preferences directory {container} is not writable", app_id=app_id)
        logger.info("Preferences path: %s", container)
        self._container = container

    def path_for(self, key: str) -> Path:
        if self._container is None:
            raise ContainerUnavailableError("ensure_container() has not been called")
        name = paths.check_component(key, what="preferences file name")
        return self._container / f"{name}.{self._extension}"

    def describe(self, key: str) -> str:
        return str(self.path_for(key))

    def read(self, key: str) -> bytes | None:
        path = self.path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise ReadError(f"cannot read {path}: {exc}", key=key, location=str(path)) from exc

    def write_atomic(self, key: str, data: bytes) -> None:
        path = self.path_for(key)
        try:
            atomic_write_bytes(path, data, fsync=self._fsync)
        except OSError as exc:
            logger.warning("PREFS SAVE: failed to write %s: %r", path, exc)
            raise WriteError(f"cannot write {path}: {exc}", key=key, location=str(path)) from exc
