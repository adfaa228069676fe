"""autoprefs - implicit, crash-safe persistence for small hierarchical user preferences."""

from __future__ import annotations

from .autosave import AutosaveScheduler, AutosaveState
from .commands import SavePreferences, TimerControl, dispatch
from .disk_store import FilesystemBackend
from .exceptions import (
    ContainerUnavailableError,
    DecodeError,
    EncodeError,
    PreferencesError,
    ReadError,
    SaveError,
    WriteError,
)
from .group import PreferencesGroup
from .interfaces import KeyValueStorage, Serializer, StorageBackend
from .local_storage import LocalStorageBackend, MemoryLocalStorage
from .prefs_file import PreferencesFile
from .serializers import JsonSerializer, TomlSerializer
from .settings import DEBOUNCE_WINDOW, Settings, get_settings
from .store import Preferences
from .values import IVec2, IVec3, UVec2, UVec3, Value, Vec2, Vec3

__all__ = [
    "AutosaveScheduler",
    "AutosaveState",
    "ContainerUnavailableError",
    "DEBOUNCE_WINDOW",
    "DecodeError",
    "EncodeError",
    "FilesystemBackend",
    "IVec2",
    "IVec3",
    "JsonSerializer",
    "KeyValueStorage",
    "LocalStorageBackend",
    "MemoryLocalStorage",
    "Preferences",
    "PreferencesError",
    "PreferencesFile",
    "PreferencesGroup",
    "ReadError",
    "SaveError",
    "SavePreferences",
    "Serializer",
    "Settings",
    "StorageBackend",
    "TimerControl",
    "TomlSerializer",
    "UVec2",
    "UVec3",
    "Value",
    "Vec2",
    "Vec3",
    "WriteError",
    "dispatch",
    "get_settings",
]
