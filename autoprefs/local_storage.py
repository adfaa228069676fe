from __future__ import annotations

import logging

from . import paths
from .exceptions import ContainerUnavailableError, ReadError, WriteError
from .interfaces import KeyValueStorage, StorageBackend

logger = logging.getLogger(__name__)


class MemoryLocalStorage(KeyValueStorage):
    """
    In-process stand-in for browser localStorage. Survives as long as the object does.
    """

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def keys(self) -> list[str]:
        return list(self._items)


class LocalStorageBackend(StorageBackend):
    """
    Stores each preferences file under the string key ``<app_id>-<key>``.

    A single ``set_item`` replaces the whole value, so the storage itself
    provides the atomic step; there is no temp key.
    """

    def __init__(self, storage: KeyValueStorage | None):
        self._storage = storage
        self._app_id: str | None = None

    def ensure_container(self, app_id: str) -> None:
        paths.check_component(app_id, what="app_id")
        if self._storage is None:
            raise ContainerUnavailableError("local storage is not available", app_id=app_id)
        self._app_id = app_id

    def storage_key(self, key: str) -> str:
        if self._app_id is None or self._storage is None:
            raise ContainerUnavailableError("ensure_container() has not been called")
        name = paths.check_component(key, what="preferences file name")
        return f"{self._app_id}-{name}"

    def describe(self, key: str) -> str:
        return f"localStorage[{self.storage_key(key)!r}]"

    def read(self, key: str) -> bytes | None:
        storage_key = self.storage_key(key)
        try:
            text = self._storage.get_item(storage_key)
        except OSError as exc:
            raise ReadError(f"cannot read {storage_key}: {exc}", key=key, location=storage_key) from exc
        if text is None:
            return None
        return text.encode("utf-8")

    def write_atomic(self, key: str, data: bytes) -> None:
        storage_key = self.storage_key(key)
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise WriteError(f"{storage_key}: value is not UTF-8 text", key=key, location=storage_key) from exc
        try:
            self._storage.set_item(storage_key, text)
        except OSError as exc:
            logger.warning("PREFS SAVE: failed to write %s: %r", storage_key, exc)
            raise WriteError(f"cannot write {storage_key}: {exc}", key=key, location=storage_key) from exc
