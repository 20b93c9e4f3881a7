from __future__ import annotations

from reactorview.core.utils.merge import deep_merge, merge_arrays


def test_nested_dicts_merge() -> None:
    base = {"view": {"outputDir": "a", "format": "pom"}}
    assert deep_merge(base, {"view": {"outputDir": "b"}}) == {"view": {"outputDir": "b", "format": "pom"}}


def test_inputs_are_not_mutated() -> None:
    base = {"view": {"excludePackaging": ["pom"]}}
    deep_merge(base, {"view": {"excludePackaging": ["war"]}})
    assert base == {"view": {"excludePackaging": ["pom"]}}


def test_scalar_replaces_dict() -> None:
    assert deep_merge({"a": {"b": 1}}, {"a": None}) == {"a": None}


def test_array_markers() -> None:
    assert merge_arrays(["pom"], ["war"]) == ["war"]
    assert merge_arrays(["pom"], ["+", "war"]) == ["pom", "war"]
    assert merge_arrays(["pom"], ["=", "war"]) == ["war"]
    assert merge_arrays(["pom"], []) == []


def test_marker_without_base_collapses() -> None:
    assert deep_merge({}, {"excludePackaging": ["+", "pom"]}) == {"excludePackaging": ["pom"]}
