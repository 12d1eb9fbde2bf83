import math
import re
from typing import Optional, List, Any, Union
from urllib.parse import quote


# ===========================
# Constants
# ===========================
URI_COMPONENT_SAFE = "-_.!~*'()"
DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
RADIX_PATTERN = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


# ===========================
# Numeric Coercion
# ===========================
def parse_number_text(text: str) -> Optional[Union[int, float]]:
    if not text:
        return 0
    if RADIX_PATTERN.fullmatch(text):
        return int(text, 0)
    if DECIMAL_PATTERN.fullmatch(text):
        return float(text)
    return None


def to_number(value: Any) -> Optional[Union[int, float]]:
    if isinstance(value, bool):
        return int(value)

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        number = value
    else:
        number = parse_number_text(str(value).strip())
        if number is None:
            return None
        if isinstance(number, int):
            return number

    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number


def plain_number(value: Any) -> str:
    number = to_number(value)
    if number is None:
        return str(value)
    return str(number)


def pad2(value: Any) -> str:
    number = to_number(value)
    if number is None:
        return str(value)
    return str(number).rjust(2, "0")


# ===========================
# Loose Value Coercion
# ===========================
def is_truthy(value: Any) -> bool:
    # Only empty strings, zero, NaN, null and false are falsy; empty lists and objects are not
    if value is None or isinstance(value, (bool, str)):
        return bool(value)
    if isinstance(value, (int, float)):
        return value == value and value != 0
    return True


def to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return plain_number(value)
    return str(value)


# ===========================
# URL Encoding
# ===========================
def encode_uri_component(value: str) -> str:
    return quote(value, safe=URI_COMPONENT_SAFE)


# ===========================
# Query Parameter Parsing
# ===========================
def parse_bool_param(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value == "true"


def parse_exclude_terms(values: List[str]) -> Optional[List[str]]:
    # Repeated parameters are taken as given, a single one is a comma-separated list
    if len(values) > 1:
        return list(values)

    if values and values[0]:
        terms = [term.strip() for term in values[0].split(",")]
        return [term for term in terms if term]

    return None
