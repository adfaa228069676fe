from __future__ import annotations

import logging
from typing import Iterator

from . import paths
from .disk_store import FilesystemBackend
from .exceptions import PreferencesError, SaveError
from .interfaces import KeyValueStorage, Serializer, StorageBackend
from .local_storage import LocalStorageBackend
from .prefs_file import PreferencesFile
from .serializers import JsonSerializer, TomlSerializer
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


class Preferences:
    """
    All preferences files of one application, bound to one backend and format.

    Files are loaded lazily on first ``get``/``get_mut`` and then stay
    resident for the life of the store. Nothing is written until
    ``save_if_changed()`` or ``save_all()`` runs, usually from an
    ``AutosaveScheduler``.

    ``app_id`` namespaces the backend container. A reverse domain name such
    as ``"com.example.app"`` keeps it globally unique.
    """

    def __init__(self, app_id: str, backend: StorageBackend, serializer: Serializer):
        self._app_id = paths.check_component(app_id, what="app_id")
        self._backend = backend
        self._serializer = serializer
        self._files: dict[str, PreferencesFile] = {}
        backend.ensure_container(app_id)

    @classmethod
    def for_filesystem(cls, app_id: str, *, settings: Settings | None = None) -> "Preferences":
        """TOML files under the platform preferences directory (or ``PREFS_DIR``)."""
        settings = settings or get_settings()
        serializer = TomlSerializer()
        backend = FilesystemBackend(
            settings.prefs_dir,
            extension=serializer.extension,
            fsync=settings.fsync_writes,
        )
        return cls(app_id, backend, serializer)

    @classmethod
    def for_local_storage(cls, app_id: str, storage: KeyValueStorage | None) -> "Preferences":
        """Compact JSON values in a browser-style key-value storage."""
        return cls(app_id, LocalStorageBackend(storage), JsonSerializer())

    @property
    def app_id(self) -> str:
        return self._app_id

    @property
    def backend(self) -> StorageBackend:
        return self._backend

    @property
    def serializer(self) -> Serializer:
        return self._serializer

    def names(self) -> list[str]:
        """Names of the files currently resident in memory."""
        return list(self._files)

    def __iter__(self) -> Iterator[PreferencesFile]:
        return iter(list(self._files.values()))

    def get(self, name: str) -> PreferencesFile | None:
        """
        Return the file if it is resident or stored; None if it has never been saved.

        Never creates a file. Raises DecodeError if the stored data is corrupt.
        """
        file = self._files.get(name)
        if file is not None:
            return file
        data = self._backend.read(name)
        if data is None:
            return None
        file = PreferencesFile.decode(name, data, self._serializer, location=self._backend.describe(name))
        self._files[name] = file
        return file

    def get_mut(self, name: str) -> PreferencesFile:
        """
        Return the file, loading it or creating an empty one (not yet saved).

        Raises DecodeError if the stored data is corrupt; the file is then
        left unloaded so the damaged data is never overwritten.
        """
        file = self._files.get(name)
        if file is None:
            file = PreferencesFile.load(self._backend, self._serializer, name)
            self._files[name] = file
        return file

    def save_if_changed(self) -> list[str]:
        return self._save(force=False)

    def save_all(self) -> list[str]:
        return self._save(force=True)

    def _save(self, *, force: bool) -> list[str]:
        """
        Flush every resident file (only dirty ones unless ``force``).

        A failure does not stop the remaining files; all failures are raised
        together as SaveError at the end. Returns the names written.
        """
        saved: list[str] = []
        failures: dict[str, PreferencesError] = {}
        for name, file in self._files.items():
            if not (force or file.dirty):
                continue
            logger.info("Saving preferences file: %s", self._backend.describe(name))
            try:
                file.flush(self._backend, self._serializer, force=force)
            except PreferencesError as exc:
                logger.warning("PREFS SAVE: %s failed: %s", name, exc)
                failures[name] = exc
                continue
            saved.append(name)
        if failures:
            raise SaveError(failures, saved=saved)
        return saved
