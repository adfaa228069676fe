from __future__ import annotations

import json
import tomllib
from typing import Any

import tomli_w

from .exceptions import DecodeError, EncodeError
from .group import PreferencesGroup


def _text(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"preferences data is not valid UTF-8: {exc}") from exc


def _group_from(doc: Any) -> PreferencesGroup:
    if not isinstance(doc, dict):
        raise DecodeError(f"preferences root must be a table/object, got {type(doc).__name__}")
    return PreferencesGroup.from_doc(doc)


class TomlSerializer:
    """
    Structured-text format for desktop storage (``<name>.toml``).
    """

    extension = "toml"

    def encode(self, group: PreferencesGroup) -> bytes:
        try:
            return tomli_w.dumps(group.to_doc()).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise EncodeError(f"cannot encode preferences as TOML: {exc}") from exc

    def decode(self, data: bytes) -> PreferencesGroup:
        try:
            doc = tomllib.loads(_text(data))
        except tomllib.TOMLDecodeError as exc:
            raise DecodeError(f"invalid TOML: {exc}") from exc
        return _group_from(doc)


class JsonSerializer:
    """
    Compact JSON, the web-idiomatic format used with key-value storage.

    Non-finite floats are rejected on encode because JSON has no spelling for them.
    """

    extension = "json"

    def encode(self, group: PreferencesGroup) -> bytes:
        try:
            text = json.dumps(group.to_doc(), ensure_ascii=False, allow_nan=False, separators=(",", ":"))
        except (TypeError, ValueError) as exc:
            raise EncodeError(f"cannot encode preferences as JSON: {exc}") from exc
        return text.encode("utf-8")

    def decode(self, data: bytes) -> PreferencesGroup:
        raw = _text(data)
        if not raw.strip():
            return PreferencesGroup()
        try:
            doc = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise DecodeError(f"invalid JSON: {exc}") from exc
        return _group_from(doc)
