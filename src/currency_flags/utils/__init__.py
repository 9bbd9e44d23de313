"""Utilities package"""

from .normalize import normalize_country_code, normalize_currency_code, normalize_query, unique

__all__ = (
    'normalize_country_code',
    'normalize_currency_code',
    'normalize_query',
    'unique',
)
