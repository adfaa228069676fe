from __future__ import annotations

import math

import pytest

from autoprefs.exceptions import DecodeError, EncodeError
from autoprefs.group import PreferencesGroup
from autoprefs.serializers import JsonSerializer, TomlSerializer
from autoprefs.values import I64_MAX, I64_MIN, IVec2, IVec3, UVec2, UVec3, Vec2, Vec3

SAMPLES = [
    ("flag", True),
    ("flag_off", False),
    ("count", 42),
    ("big", I64_MAX),
    ("small", I64_MIN),
    ("ratio", 0.1),
    ("whole_float", 3.0),
    ("title", 'He said "hi" é'),
    ("position", IVec2(-5, 12)),
    ("size", UVec2(800, 600)),
    ("offset", Vec2(0.5, -1.25)),
    ("cell", IVec3(1, -2, 3)),
    ("extent", UVec3(4, 5, 6)),
    ("color", Vec3(0.1, 0.2, 0.3)),
]


def _sample_group() -> PreferencesGroup:
    g = PreferencesGroup()
    g.set("version", 1)
    window = g.get_group_mut("window")
    for name, value in SAMPLES:
        window.set(name, value)
    window.get_group_mut("nested").set("deep", "yes")
    g.get_group_mut("empty")
    return g


@pytest.mark.parametrize("serializer", [TomlSerializer(), JsonSerializer()], ids=["toml", "json"])
def test_round_trip_preserves_every_value_type(serializer):
    original = _sample_group()
    decoded = serializer.decode(serializer.encode(original))

    assert decoded == original
    window = decoded.get_group("window")
    for name, value in SAMPLES:
        assert window.get(name, type(value)) == value
    assert window.get("count", float) is None
    assert window.get("whole_float", int) is None
    assert decoded.get_group("empty") is not None


def test_toml_layout_is_human_readable():
    g = PreferencesGroup()
    g.get_group_mut("window").set("size", UVec2(800, 600))
    text = TomlSerializer().encode(g).decode("utf-8")
    assert "[window]" in text
    assert "size = [" in text


def test_json_is_compact_and_ordered():
    g = PreferencesGroup()
    g.set("b", 1)
    g.set("a", UVec2(1, 2))
    assert JsonSerializer().encode(g) == b'{"b":1,"a":[1,2]}'


@pytest.mark.parametrize(
    "serializer,payload",
    [
        (TomlSerializer(), b"this is = = not toml"),
        (TomlSerializer(), b"\xff\xfe\x00"),
        (TomlSerializer(), b"when = 1979-05-27T07:32:00Z"),
        (TomlSerializer(), b"[[servers]]\nname = 'a'\n"),
        (JsonSerializer(), b"{not json"),
        (JsonSerializer(), b"[1, 2]"),
        (JsonSerializer(), b'{"theme": null}'),
        (JsonSerializer(), b'{"grid": [[1, 2], [3, 4]]}'),
    ],
)
def test_decode_rejects_corrupt_or_unsupported_data(serializer, payload):
    with pytest.raises(DecodeError):
        serializer.decode(payload)


def test_empty_payloads_decode_to_empty_groups():
    assert len(TomlSerializer().decode(b"")) == 0
    assert len(JsonSerializer().decode(b"  \n")) == 0


def test_json_refuses_non_finite_floats():
    g = PreferencesGroup()
    g.set("gain", math.inf)
    with pytest.raises(EncodeError):
        JsonSerializer().encode(g)
