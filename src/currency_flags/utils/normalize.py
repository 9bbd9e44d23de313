"""Code normalization helpers shared by the index, flags and generator"""

from collections.abc import Iterable
from typing import Any


def _normalize_code(code: Any) -> str:
    if code is None:
        return ''
    return str(code).strip().upper()


def normalize_currency_code(code: Any) -> str:
    """Trim and upper-case a currency code, None becomes an empty string"""
    return _normalize_code(code)


def normalize_country_code(code: Any) -> str:
    """Trim and upper-case a country code, None becomes an empty string"""
    return _normalize_code(code)


def normalize_query(query: Any) -> str:
    """Trim and lower-case a free-text query"""
    if query is None:
        return ''
    return str(query).strip().lower()


def unique(values: Iterable[str]) -> list[str]:
    """De-duplicate values keeping first-seen order"""
    return list(dict.fromkeys(values))
