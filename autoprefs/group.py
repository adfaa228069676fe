from __future__ import annotations

from typing import Any, Callable, Iterator, Mapping, TypeVar

from .exceptions import DecodeError
from .values import RawValue, Value, check_kind, from_raw, is_raw_value, same, to_raw

T = TypeVar("T")

ChangeHook = Callable[[], None]


def _check_name(name: str) -> str:
    if not isinstance(name, str):
        raise TypeError(f"preference name must be a str, got {type(name).__name__}")
    if not name:
        raise ValueError("preference name must not be empty")
    return name


class PreferencesGroup:
    """
    Ordered mapping of name -> value or nested group.

    Values are held in plain document form (see ``values``). Every mutation
    that actually changes content calls the owner's change hook, which is how
    a ``PreferencesFile`` learns that it may be dirty. Read operations never
    call it.
    """

    def __init__(self, *, on_change: ChangeHook | None = None) -> None:
        self._entries: dict[str, RawValue | PreferencesGroup] = {}
        self._on_change = on_change

    @classmethod
    def from_doc(cls, doc: Mapping[str, Any], *, on_change: ChangeHook | None = None) -> "PreferencesGroup":
        """
        Build a group from a decoded document, validating every entry.

        Raises DecodeError for anything outside the supported value set.
        """
        group = cls(on_change=on_change)
        for name, raw in doc.items():
            if not isinstance(name, str) or not name:
                raise DecodeError(f"invalid preference name: {name!r}")
            if isinstance(raw, Mapping):
                group._entries[name] = cls.from_doc(raw, on_change=on_change)
            elif is_raw_value(raw):
                group._entries[name] = list(raw) if isinstance(raw, list) else raw
            else:
                raise DecodeError(f"unsupported value for {name!r}: {raw!r}")
        return group

    def to_doc(self) -> dict[str, Any]:
        """Deep plain copy, suitable for serialization."""
        doc: dict[str, Any] = {}
        for name, entry in self._entries.items():
            if isinstance(entry, PreferencesGroup):
                doc[name] = entry.to_doc()
            elif isinstance(entry, list):
                doc[name] = list(entry)
            else:
                doc[name] = entry
        return doc

    def _bind(self, on_change: ChangeHook | None) -> None:
        self._on_change = on_change
        for entry in self._entries.values():
            if isinstance(entry, PreferencesGroup):
                entry._bind(on_change)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()

    def get(self, name: str, kind: type[T]) -> T | None:
        """Typed read. Missing names and type mismatches both return None."""
        entry = self._entries.get(name)
        if entry is None or isinstance(entry, PreferencesGroup):
            check_kind(kind)
            return None
        return from_raw(entry, kind)

    def get_group(self, name: str) -> "PreferencesGroup | None":
        entry = self._entries.get(name)
        return entry if isinstance(entry, PreferencesGroup) else None

    def set(self, name: str, value: Value) -> bool:
        """Insert or overwrite. Returns True only if the stored content changed."""
        _check_name(name)
        raw = to_raw(value)
        current = self._entries.get(name)
        if current is not None and not isinstance(current, PreferencesGroup) and same(current, raw):
            return False
        self._entries[name] = raw
        self._changed()
        return True

    def get_group_mut(self, name: str) -> "PreferencesGroup":
        """Return the nested group, creating an empty one if absent."""
        _check_name(name)
        entry = self._entries.get(name)
        if isinstance(entry, PreferencesGroup):
            return entry
        if entry is not None:
            raise TypeError(f"preference {name!r} holds a value, not a group")
        group = PreferencesGroup(on_change=self._on_change)
        self._entries[name] = group
        self._changed()
        return group

    def remove(self, name: str) -> bool:
        if self._entries.pop(name, None) is None:
            return False
        self._changed()
        return True

    def names(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PreferencesGroup):
            return NotImplemented
        return same(self.to_doc(), other.to_doc())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PreferencesGroup({self.to_doc()!r})"
