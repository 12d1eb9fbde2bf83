import pytest

from toshoquery.config.settings import Settings
from toshoquery.utils.helpers import (
    pad2, plain_number, to_number, encode_uri_component, parse_bool_param, parse_exclude_terms,
    is_truthy, to_text
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (6, "06"),
        ("6", "06"),
        (" 7 ", "07"),
        (12, "12"),
        (6.0, "06"),
        (6.5, "6.5"),
        (True, "01"),
        ("", "00"),
        ("OVA", "OVA"),
        ("nan", "nan"),
    ],
)
def test_pad2(value, expected) -> None:
    assert pad2(value) == expected


def test_plain_number_strips_padding() -> None:
    assert plain_number("06") == "6"
    assert plain_number(10) == "10"
    assert plain_number("SP1") == "SP1"


def test_to_number_rejects_non_finite() -> None:
    assert to_number("inf") is None
    assert to_number(float("nan")) is None
    assert to_number("3") == 3


def test_encode_uri_component_matches_browser_encoding() -> None:
    assert encode_uri_component('@name "A&B" | (x)') == "%40name%20%22A%26B%22%20%7C%20(x)"


def test_parse_bool_param() -> None:
    assert parse_bool_param(None, default=True) is True
    assert parse_bool_param("true") is True
    assert parse_bool_param("false", default=True) is False
    assert parse_bool_param("1") is False


def test_parse_exclude_terms() -> None:
    assert parse_exclude_terms([]) is None
    assert parse_exclude_terms([""]) is None
    assert parse_exclude_terms(["raw, dub,, "]) == ["raw", "dub"]
    assert parse_exclude_terms(["raw", " dub "]) == ["raw", " dub "]


def test_settings_normalize_values() -> None:
    custom = Settings(SEARCH_BASE_URL="https://mirror.example/", LOG_LEVEL="info")

    assert custom.SEARCH_BASE_URL == "https://mirror.example"
    assert custom.LOG_LEVEL == "INFO"
    assert custom.get_search_url("abc") == "https://mirror.example/search?q=abc&qx=1"


def test_to_number_only_accepts_ascii_numeric_literals() -> None:
    assert to_number("1_0") is None
    assert to_number("١٢") is None
    assert to_number("0x10") == 16
    assert to_number("0b11") == 3
    assert to_number("1e1") == 10
    assert to_number(".5") == 0.5
    assert pad2("1_0") == "1_0"
    assert pad2("0x10") == "16"


def test_is_truthy_follows_loose_semantics() -> None:
    assert is_truthy("false") is True
    assert is_truthy([]) is True
    assert is_truthy("") is False
    assert is_truthy(None) is False
    assert is_truthy(0) is False
    assert is_truthy(float("nan")) is False


def test_to_text() -> None:
    assert to_text(720) == "720"
    assert to_text(2.0) == "2"
    assert to_text(True) == "true"
    assert to_text("raw") == "raw"
