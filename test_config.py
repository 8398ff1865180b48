"""
Typed accessor tests for the Config capability.
"""

from datetime import datetime, timedelta, timezone

import pytest

from layerconf import (
    Config,
    ConfigPanic,
    InvalidValueError,
    MissingKeyError,
    default_config,
)

VALUES = {
    "foo": "bar",
    "int": "100",
    "float": "-2.4",
    "bool": "t",
    "duration": "50",
    "datetime": "2015-05-15T05:05:05+00:00",
    "list": "[1, 2, 3]",
    "map": "{a=>1, b=>2, c=>3}",
}


@pytest.fixture
def config():
    return default_config(VALUES)


class OneKeyConfig(Config):
    """A source that only knows a single key, implementing nothing but get."""

    def get(self, key):
        return "42" if key == "answer" else None


def test_string(config):
    assert config.string("foo") == "bar"
    assert config.must_get("foo") == "bar"


def test_get_absent_is_none(config):
    assert config.get("nope") is None


def test_int(config):
    assert config.int("int") == 100


def test_float(config):
    assert config.float("float") == -2.4


def test_bool(config):
    assert config.bool("bool") is True


def test_duration(config):
    assert config.duration("duration") == timedelta(seconds=50)


def test_datetime(config):
    assert config.datetime("datetime") == datetime(2015, 5, 15, 5, 5, 5, tzinfo=timezone.utc)


def test_list(config):
    assert config.list("list") == ["1", "2", "3"]


def test_map(config):
    assert config.map("map") == {"a": "1", "b": "2", "c": "3"}


def test_accessors_inherited_from_get():
    cfg = OneKeyConfig()
    assert cfg.int("answer") == 42
    assert cfg.list("answer") == ["42"]
    assert cfg.get("question") is None


def test_config_requires_get():
    with pytest.raises(TypeError):
        Config()


@pytest.mark.parametrize(
    "accessor", ["must_get", "string", "int", "float", "bool", "duration", "datetime", "list", "map"]
)
def test_missing_key_is_fatal(config, accessor):
    with pytest.raises(MissingKeyError) as excinfo:
        getattr(config, accessor)("missing")
    assert excinfo.value.key == "missing"
    assert isinstance(excinfo.value, ConfigPanic)
    assert "missing" in str(excinfo.value)


@pytest.mark.parametrize(
    "value",
    ["", "abc", "1.5", " 12", "12 ", "1_000", "0x10", "9223372036854775808"],
)
def test_int_rejects(value):
    with pytest.raises(InvalidValueError) as excinfo:
        default_config({"k": value}).int("k")
    assert excinfo.value.key == "k"
    assert excinfo.value.value == value


@pytest.mark.parametrize(
    "value,expected",
    [("-9223372036854775808", -(2 ** 63)), ("+7", 7), ("007", 7)],
)
def test_int_accepts(value, expected):
    assert default_config({"k": value}).int("k") == expected


@pytest.mark.parametrize("value,expected", [("1e3", 1000.0), (".5", 0.5), ("3", 3.0), ("-inf", float("-inf"))])
def test_float_accepts(value, expected):
    assert default_config({"k": value}).float("k") == expected


@pytest.mark.parametrize("value", ["", "one", "1,5", "1.2.3", " 1.0"])
def test_float_rejects(value):
    with pytest.raises(InvalidValueError):
        default_config({"k": value}).float("k")


@pytest.mark.parametrize("value", ["t", "T", "true", "TRUE", "True", "1", "y", "Y", "yes", "YeS"])
def test_bool_truthy(value):
    assert default_config({"k": value}).bool("k") is True


@pytest.mark.parametrize("value", ["0", "no", "maybe", "false", "", " true", "on", "2"])
def test_bool_everything_else_is_false(value):
    assert default_config({"k": value}).bool("k") is False


def test_duration_has_no_units():
    with pytest.raises(InvalidValueError):
        default_config({"k": "5s"}).duration("k")


def test_datetime_normalized_to_utc():
    cfg = default_config({"k": "2015-05-15T07:05:05.250+02:00"})
    value = cfg.datetime("k")
    assert value == datetime(2015, 5, 15, 5, 5, 5, 250000, tzinfo=timezone.utc)
    assert value.utcoffset() == timedelta(0)


def test_datetime_zulu():
    assert default_config({"k": "2015-05-15T05:05:05Z"}).datetime("k") == datetime(
        2015, 5, 15, 5, 5, 5, tzinfo=timezone.utc
    )


@pytest.mark.parametrize(
    "value",
    [
        "2015-05-15",
        "2015-05-15T05:05:05",
        "15 May 2015",
        "2015-13-15T05:05:05Z",
        "2015-05-15T05:05Z",
        "2015-05-15T24:00:00Z",
    ],
)
def test_datetime_rejects(value):
    with pytest.raises(InvalidValueError):
        default_config({"k": value}).datetime("k")


def test_list_without_brackets():
    assert default_config({"k": "1,2,3"}).list("k") == ["1", "2", "3"]


def test_list_of_empty_value_has_one_empty_element():
    # Known surprising edge case: an empty value is not an empty list.
    assert default_config({"k": ""}).list("k") == [""]
    assert default_config({"k": "[]"}).list("k") == [""]


def test_map_entry_without_arrow_has_empty_value():
    assert default_config({"k": "{a=>1, b}"}).map("k") == {"a": "1", "b": ""}


def test_map_last_duplicate_wins():
    assert default_config({"k": "a=>1, a=>2"}).map("k") == {"a": "2"}


def test_values_reparsed_on_each_access():
    cfg = OneKeyConfig()
    assert cfg.int("answer") == cfg.int("answer") == 42


@pytest.mark.parametrize(
    "accessor,value",
    [
        ("duration", "9223372036854775807"),
        ("duration", "-9223372036854775808"),
        ("datetime", "0001-01-01T00:00:00+01:00"),
        ("datetime", "9999-12-31T23:59:59-01:00"),
    ],
)
def test_out_of_range_values_are_fatal(accessor, value):
    with pytest.raises(InvalidValueError) as excinfo:
        getattr(default_config({"k": value}), accessor)("k")
    assert isinstance(excinfo.value, ConfigPanic)
    assert excinfo.value.value == value


def test_datetime_at_range_edges():
    assert default_config({"k": "0001-01-01T00:00:00Z"}).datetime("k") == datetime(
        1, 1, 1, tzinfo=timezone.utc
    )
    assert default_config({"k": "2015-05-15T23:59:59Z"}).datetime("k").hour == 23


def test_none_default_is_absent():
    cfg = default_config({"x": None}, timeout=None, port=80)
    assert cfg.get("x") is None
    assert cfg.get("timeout") is None
    assert cfg.int("port") == 80
    with pytest.raises(MissingKeyError):
        cfg.bool("timeout")
