from __future__ import annotations

from typing import Protocol

from .group import PreferencesGroup


class Serializer(Protocol):
    """
    Encodes a preferences group to bytes and back, for one format.
    """

    extension: str

    def encode(self, group: PreferencesGroup) -> bytes:
        """Serialize the full group. Raises EncodeError if a value cannot be represented."""
        ...

    def decode(self, data: bytes) -> PreferencesGroup:
        """Parse bytes into a group. Raises DecodeError on corrupt or unsupported content."""
        ...


class StorageBackend(Protocol):
    """
    Durable medium holding one blob per preferences file, namespaced by app id.
    """

    def ensure_container(self, app_id: str) -> None:
        """Create or open the container for ``app_id``. Raises ContainerUnavailableError."""
        ...

    def read(self, key: str) -> bytes | None:
        """Return the stored blob, or None if it has never been written."""
        ...

    def write_atomic(self, key: str, data: bytes) -> None:
        """Replace the stored blob in one step. Raises WriteError; the old blob survives a failure."""
        ...

    def describe(self, key: str) -> str:
        """Human readable location of ``key``, for logs and errors."""
        ...


class KeyValueStorage(Protocol):
    """
    Minimal string key-value storage with the shape of the browser Storage API.
    """

    def get_item(self, key: str) -> str | None:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...
