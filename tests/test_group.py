from __future__ import annotations

import pytest

from autoprefs.exceptions import DecodeError
from autoprefs.group import PreferencesGroup
from autoprefs.values import IVec2, UVec2, Vec2


def test_get_missing_or_mismatched_returns_none():
    g = PreferencesGroup()
    assert g.get("volume", float) is None

    g.set("volume", 0.5)
    assert g.get("volume", float) == 0.5
    assert g.get("volume", int) is None
    assert g.get("volume", str) is None

    with pytest.raises(TypeError):
        g.get("volume", dict)


def test_set_reports_whether_value_changed():
    g = PreferencesGroup()
    assert g.set("fullscreen", False) is True
    assert g.set("fullscreen", False) is False
    assert g.set("fullscreen", True) is True

    assert g.set("count", 1) is True
    # same number, different type is a change
    assert g.set("count", 1.0) is True
    assert g.get("count", float) == 1.0
    assert g.get("count", int) is None


def test_change_hook_fires_only_on_real_mutations():
    calls: list[int] = []
    g = PreferencesGroup(on_change=lambda: calls.append(1))

    g.set("size", UVec2(800, 600))
    g.set("size", UVec2(800, 600))
    g.get("size", UVec2)
    g.get_group("window")
    assert len(calls) == 1

    window = g.get_group_mut("window")
    assert len(calls) == 2
    assert g.get_group_mut("window") is window
    assert len(calls) == 2

    window.set("position", IVec2(-10, 20))
    assert len(calls) == 3

    assert g.remove("missing") is False
    assert g.remove("size") is True
    assert len(calls) == 4


def test_nested_groups_autovivify_and_read_back():
    g = PreferencesGroup()
    assert g.get_group("window") is None

    inner = g.get_group_mut("window").get_group_mut("placement")
    inner.set("offset", Vec2(0.25, 0.75))

    placement = g.get_group("window").get_group("placement")
    assert placement is not None
    assert placement.get("offset", Vec2) == Vec2(0.25, 0.75)
    assert g.get("window", str) is None


def test_get_group_mut_on_a_value_raises():
    g = PreferencesGroup()
    g.set("theme", "dark")
    with pytest.raises(TypeError):
        g.get_group_mut("theme")
    assert g.get("theme", str) == "dark"


def test_names_must_be_non_empty_strings():
    g = PreferencesGroup()
    with pytest.raises(ValueError):
        g.set("", 1)
    with pytest.raises(TypeError):
        g.set(3, 1)  # type: ignore[arg-type]


def test_order_and_structural_equality():
    a = PreferencesGroup()
    a.set("b", 1)
    a.set("a", 2)
    assert a.names() == ["b", "a"]
    assert list(a) == ["b", "a"]
    assert "a" in a and len(a) == 2

    b = PreferencesGroup()
    b.set("b", 1)
    b.set("a", 2)
    assert a == b
    b.set("a", 2.0)
    assert a != b


def test_from_doc_validates_and_to_doc_copies():
    g = PreferencesGroup.from_doc({"window": {"size": [800, 600], "fullscreen": False}, "volume": 0.5})
    assert g.get_group("window").get("size", UVec2) == UVec2(800, 600)

    doc = g.to_doc()
    doc["window"]["size"].append(1)
    assert g.get_group("window").get("size", UVec2) == UVec2(800, 600)

    with pytest.raises(DecodeError):
        PreferencesGroup.from_doc({"bad": None})
    with pytest.raises(DecodeError):
        PreferencesGroup.from_doc({"bad": [[1, 2]]})
    with pytest.raises(DecodeError):
        PreferencesGroup.from_doc({"": 1})
