"""
Tests for placeholder extraction and substitution.
Path: tests/test_template.py
"""

import pytest

from keyfmt.context.template import TemplateResolver, extract_placeholders, required_placeholders


@pytest.mark.parametrize("template,expected", [
    ("static-key", []),
    ("product-book:{id}", ["id"]),
    ("{id}:{type}:{id}", ["id", "type", "id"]),
    ("open { brace", []),
    ("empty {} braces", []),
    ("{id}:{", ["id"]),
    ("{{a}", ["{a"]),
    ("special:{key}:{value}", ["key", "value"]),
])
def test_extract_placeholders(template, expected):
    assert extract_placeholders(template) == expected


def test_required_placeholders_are_distinct_in_first_appearance_order():
    assert required_placeholders("{b}:{a}:{b}:{c}:{a}") == ["b", "a", "c"]


def test_substitute_named_reuses_value_for_repeats():
    assert TemplateResolver.substitute_named("{id}:{id}:{id}", {"id": "123"}) == "123:123:123"


def test_substitute_named_renders_values_with_str():
    assert TemplateResolver.substitute_named("numeric:{id}:{count}", {"id": 0, "count": 42}) == "numeric:0:42"


def test_substitute_keeps_unmatched_brace_literal():
    assert TemplateResolver.substitute_named("{id}:{", {"id": 1}) == "1:{"


def test_substitute_positional_consumes_values_in_order():
    assert TemplateResolver.substitute_positional("{id}:{type}:{id}", ["a", "b", "c"]) == "a:b:c"


def test_substitute_positional_without_placeholders():
    assert TemplateResolver.substitute_positional("static-key", []) == "static-key"
