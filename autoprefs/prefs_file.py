from __future__ import annotations

import logging
from typing import Any

from .exceptions import DecodeError
from .group import PreferencesGroup
from .interfaces import Serializer, StorageBackend
from .values import same

logger = logging.getLogger(__name__)


class PreferencesFile:
    """
    One persistence unit: a root group plus change tracking.

    ``dirty`` is True iff the root differs from the last persisted (or
    loaded) snapshot, or ``mark_changed()`` was called since the last
    successful flush. The comparison is done lazily, only after a mutation
    and only when ``dirty`` is asked for.
    """

    def __init__(self, name: str, root: PreferencesGroup | None = None):
        self._name = name
        self._root = root if root is not None else PreferencesGroup()
        self._root._bind(self._on_root_changed)
        self._snapshot: dict[str, Any] = self._root.to_doc()
        self._forced = False
        self._differs: bool | None = False

    @classmethod
    def load(cls, backend: StorageBackend, serializer: Serializer, key: str) -> "PreferencesFile":
        """
        Read ``key`` from the backend.

        Absent data gives an empty, clean file. Corrupt data raises DecodeError.
        """
        data = backend.read(key)
        if data is None:
            return cls(key)
        return cls.decode(key, data, serializer, location=backend.describe(key))

    @classmethod
    def decode(cls, key: str, data: bytes, serializer: Serializer, *, location: str = "") -> "PreferencesFile":
        try:
            root = serializer.decode(data)
        except DecodeError as exc:
            where = location or key
            logger.warning("PREFS LOAD: could not decode %s: %s", where, exc)
            raise DecodeError(f"{where}: {exc}", key=key) from exc
        return cls(key, root)

    @property
    def name(self) -> str:
        return self._name

    @property
    def root(self) -> PreferencesGroup:
        return self._root

    @property
    def dirty(self) -> bool:
        if self._forced:
            return True
        if self._differs is None:
            self._differs = not same(self._root.to_doc(), self._snapshot)
        return self._differs

    def _on_root_changed(self) -> None:
        self._differs = None

    def mark_changed(self) -> None:
        self._forced = True

    def get_group(self, name: str) -> PreferencesGroup | None:
        return self._root.get_group(name)

    def get_group_mut(self, name: str) -> PreferencesGroup:
        return self._root.get_group_mut(name)

    def flush(self, backend: StorageBackend, serializer: Serializer, *, force: bool = False) -> bool:
        """
        Write the file if dirty (or ``force``). Returns whether a write happened.

        On failure the error propagates and the file stays dirty.
        """
        if not (force or self.dirty):
            return False
        doc = self._root.to_doc()
        data = serializer.encode(self._root)
        backend.write_atomic(self._name, data)
        self._snapshot = doc
        self._forced = False
        self._differs = False
        return True

    def __repr__(self) -> str:
        return f"PreferencesFile(name={self._name!r}, dirty={self.dirty})"
