"""Tests for value classification, pid and deep-merge helpers."""
from __future__ import annotations

import os

import pytest

from plugconf.core.utils import deep_merge, get_pid, is_default, is_empty, is_not_empty


@pytest.mark.parametrize("value", [None, "", "false", "FALSE", "0", "null", "Null", "N/A", "n/a"])
def test_is_empty_values(value) -> None:
    assert is_empty(value)
    assert not is_not_empty(value)


@pytest.mark.parametrize("value", ["true", "1", "x", " ", "nullable"])
def test_is_not_empty_values(value) -> None:
    assert is_not_empty(value)


@pytest.mark.parametrize("value,expected", [("true", True), ("TRUE", True), ("default", True), ("Default", True), ("false", False), ("", False), (None, False), ("yes", False)])
def test_is_default(value, expected: bool) -> None:
    assert is_default(value) is expected


def test_get_pid_matches_process() -> None:
    assert get_pid() == os.getpid()
    assert get_pid() == get_pid()


def test_deep_merge_does_not_mutate_inputs() -> None:
    base = {"a": {"x": 1}}
    override = {"a": {"y": 2}}
    merged = deep_merge(base, override)
    assert merged == {"a": {"x": 1, "y": 2}}
    assert base == {"a": {"x": 1}}
    assert override == {"a": {"y": 2}}


def test_deep_merge_scalar_replaces_mapping() -> None:
    assert deep_merge({"a": {"x": 1}}, {"a": None}) == {"a": None}
