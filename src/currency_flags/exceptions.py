"""Exceptions raised by currency_flags"""


class CurrencyFlagsError(Exception):
    """Base exception for currency_flags"""


class DatasetError(CurrencyFlagsError):
    """Dataset is missing, unreadable or breaks record invariants"""


class SourceFetchError(CurrencyFlagsError):
    """Upstream source could not be fetched during generation"""
