"""Exception hierarchy for autoprefs."""

from __future__ import annotations

from typing import Mapping


class PreferencesError(Exception):
    """Base exception for all autoprefs errors."""


class ContainerUnavailableError(PreferencesError):
    """The preferences container (directory or key namespace) cannot be created or used."""

    def __init__(self, message: str, *, app_id: str = "") -> None:
        self.app_id = app_id
        super().__init__(message)


class DecodeError(PreferencesError):
    """Stored data is corrupt or does not fit the preferences document model.

    Raised instead of silently returning an empty file, so that a damaged
    file is never overwritten by defaults on the next save.
    """

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)


class EncodeError(PreferencesError):
    """A value cannot be represented in the chosen serialization format."""


class ReadError(PreferencesError):
    """I/O failure while reading a stored preferences file that does exist."""

    def __init__(self, message: str, *, key: str = "", location: str = "") -> None:
        self.key = key
        self.location = location
        super().__init__(message)


class WriteError(PreferencesError):
    """I/O failure while writing a preferences file."""

    def __init__(self, message: str, *, key: str = "", location: str = "") -> None:
        self.key = key
        self.location = location
        super().__init__(message)


class SaveError(PreferencesError):
    """One or more files failed to save.

    Every file is attempted before this is raised. ``failures`` maps each
    failed file name to its error; ``saved`` lists the files that were
    written.
    """

    def __init__(
        self,
        failures: Mapping[str, PreferencesError],
        *,
        saved: list[str] | None = None,
    ) -> None:
        self.failures = dict(failures)
        self.saved = list(saved or [])
        names = ", ".join(sorted(self.failures))
        super().__init__(f"failed to save preferences file(s): {names}")
