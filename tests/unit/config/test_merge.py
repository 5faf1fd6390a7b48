from __future__ import annotations

from inspire_core.core.utils.merge import deep_merge, merge_lists


def test_deep_merge_nested_without_mutation() -> None:
    base = {"a": 1, "b": {"c": 2}}
    override = {"b": {"d": 3}, "e": 4}

    merged = deep_merge(base, override)

    assert merged == {"a": 1, "b": {"c": 2, "d": 3}, "e": 4}
    assert base == {"a": 1, "b": {"c": 2}}


def test_scalar_replaces_mapping() -> None:
    assert deep_merge({"a": {"b": 1}}, {"a": None}) == {"a": None}


def test_merge_lists_replace_or_append() -> None:
    assert merge_lists(["-", "/"], ["-"]) == ["-"]
    assert merge_lists(["-", "/"], ["+", "--"]) == ["-", "/", "--"]
    assert deep_merge({"p": ["a"]}, {"p": ["+", "b"]}) == {"p": ["a", "b"]}
