"""
Chain precedence tests for MultiConfig.
"""

import pytest

from layerconf import Environment, MappingConfig, MultiConfig, Simple, default_config


def test_first_source_wins():
    a = default_config({"x": "1"})
    b = default_config({"x": "2", "y": "3"})
    chain = MultiConfig([a, b])

    assert chain.get("x") == "1"
    assert chain.get("y") == "3"
    assert chain.get("z") is None


def test_overrides_in_both_directions():
    m1 = default_config({"foo": "bar", "bar": "baz"})
    m2 = default_config({"foo": "buz", "buz": "foo"})
    chain = MultiConfig([m2, m1])

    assert chain.get("foo") == "buz"
    assert chain.get("bar") == "baz"
    assert chain.get("buz") == "foo"


def test_empty_string_is_a_present_value():
    chain = MultiConfig([default_config({"x": ""}), default_config({"x": "fallback"})])
    assert chain.get("x") == ""


def test_no_merging_of_composite_values():
    chain = MultiConfig([default_config({"m": "{a=>1}"}), default_config({"m": "{b=>2}"})])
    assert chain.map("m") == {"a": "1"}


def test_plain_mappings_are_wrapped():
    chain = MultiConfig([{"foo": "bar"}, Simple.from_str("baz=foo")])

    assert chain.must_get("foo") == "bar"
    assert chain.must_get("baz") == "foo"
    assert chain.get("bar") is None
    assert isinstance(list(chain)[0], MappingConfig)


def test_rejects_non_config_sources():
    with pytest.raises(TypeError):
        MultiConfig([42])


def test_chains_nest():
    inner = MultiConfig([default_config({"a": "inner"})])
    outer = MultiConfig([default_config({"b": "outer"}), inner, default_config({"a": "last"})])

    assert outer.get("a") == "inner"
    assert outer.get("b") == "outer"


def test_empty_chain():
    chain = MultiConfig([])
    assert len(chain) == 0
    assert chain.get("anything") is None


def test_source_list_is_copied():
    sources = [default_config({"x": "1"})]
    chain = MultiConfig(sources)
    sources.insert(0, default_config({"x": "2"}))

    assert len(chain) == 1
    assert chain.get("x") == "1"


def test_environment_overrides_file_overrides_defaults(monkeypatch):
    monkeypatch.setenv("APP_PORT", "9000")
    monkeypatch.delenv("APP_HOST", raising=False)
    monkeypatch.delenv("APP_DEBUG", raising=False)
    chain = MultiConfig([
        Environment("app"),
        Simple.from_str("port = 8000\nhost = example.org"),
        default_config(port="80", host="localhost", debug="no"),
    ])

    assert chain.int("port") == 9000
    assert chain.string("host") == "example.org"
    assert chain.bool("debug") is False


def test_none_default_falls_through():
    chain = MultiConfig([{"x": None}, default_config({"x": "fallback"})])
    assert chain.get("x") == "fallback"
