from __future__ import annotations

import pytest

from pymtcsound._wire import format_bool, parse_bool, parse_clamped_int, split_key_value


def test_split_key_value() -> None:
    assert split_key_value("av_volume=5") == ("av_volume", "5")
    assert split_key_value("av_volume") == ("av_volume", None)
    assert split_key_value("av_gps_package=") == ("av_gps_package", "")
    assert split_key_value("k=a=b") == ("k", "a=b")


@pytest.mark.parametrize("raw", ["", "=5", "  =x", None])
def test_split_key_value_without_key(raw: str | None) -> None:
    assert split_key_value(raw) is None


def test_parse_bool_tokens() -> None:
    assert parse_bool(" TRUE ") is True
    assert parse_bool("off") is False
    with pytest.raises(ValueError):
        parse_bool("2")
    assert format_bool(True) == "true"


def test_parse_clamped_int() -> None:
    assert parse_clamped_int("15", 0, 30) == 15
    assert parse_clamped_int("999", 0, 30) == 30
    with pytest.raises(ValueError):
        parse_clamped_int("x", 0, 30)
