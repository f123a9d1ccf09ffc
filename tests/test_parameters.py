"""
Tests for argument normalization.
Path: tests/test_parameters.py
"""

import dataclasses

import pytest

from keyfmt.context.parameters import (
    ResolutionMode,
    ResolvedParameters,
    flatten_parameters,
    normalize_parameters,
)


def test_no_arguments_is_positional_and_empty():
    params = normalize_parameters()
    assert params.mode is ResolutionMode.POSITIONAL
    assert params.values == ()
    assert len(params) == 0


def test_plain_values_are_positional():
    params = normalize_parameters("abc", "xyz")
    assert params.mode is ResolutionMode.POSITIONAL
    assert params.values == ("abc", "xyz")


def test_keyword_arguments_are_named():
    params = normalize_parameters(first="abc", second="xyz")
    assert params.mode is ResolutionMode.NAMED
    assert dict(params.values) == {"first": "abc", "second": "xyz"}


def test_single_mapping_is_named():
    params = normalize_parameters({"id": 123, "type": "test"})
    assert params.mode is ResolutionMode.NAMED
    assert list(params.values.items()) == [("id", 123), ("type", "test")]


def test_single_list_with_dense_indices_is_positional():
    params = normalize_parameters(["abc", "xyz"])
    assert params.mode is ResolutionMode.POSITIONAL
    assert params.values == ("abc", "xyz")


def test_mapping_with_dense_integer_keys_is_positional():
    params = normalize_parameters({0: "a", 1: "b"})
    assert params.mode is ResolutionMode.POSITIONAL
    assert params.values == ("a", "b")


def test_empty_list_is_positional_and_empty():
    params = normalize_parameters([])
    assert params.mode is ResolutionMode.POSITIONAL
    assert params.values == ()


def test_strings_are_not_spliced():
    params = normalize_parameters("abc")
    assert params.values == ("abc",)


def test_sequences_are_spliced_in_place():
    params = normalize_parameters(("a", "b"), "c")
    assert params.mode is ResolutionMode.POSITIONAL
    assert params.values == ("a", "b", "c")


def test_flattening_is_one_level_only():
    params = normalize_parameters([["a", "b"]])
    assert params.values == (["a", "b"],)


def test_mixed_positional_and_named_becomes_named_with_string_index():
    params = normalize_parameters("abc", {"id": 1})
    assert params.mode is ResolutionMode.NAMED
    assert dict(params.values) == {"0": "abc", "id": 1}


def test_integer_and_string_key_with_same_name_are_rejected():
    with pytest.raises(ValueError) as excinfo:
        normalize_parameters("a", **{"0": "b"})
    assert str(excinfo.value) == "Parameter '0' was given more than once"


def test_later_name_overwrites_earlier_value():
    assert flatten_parameters(({"id": 1},), {"id": 2}) == {"id": 2}


def test_integer_keys_are_renumbered_across_arguments():
    assert flatten_parameters((["a"], {5: "b"}, "c"), {}) == {0: "a", 1: "b", 2: "c"}


def test_resolved_parameters_are_immutable():
    params = normalize_parameters(id=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.mode = ResolutionMode.POSITIONAL
    with pytest.raises(TypeError):
        params.values["id"] = 2


def test_explicit_constructors():
    assert ResolvedParameters.positional([1, 2]) == ResolvedParameters(ResolutionMode.POSITIONAL, (1, 2))
    named = ResolvedParameters.named({1: "x"})
    assert named.mode is ResolutionMode.NAMED
    assert dict(named.values) == {"1": "x"}
