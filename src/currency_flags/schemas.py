"""Pydantic schemas for dataset records and query results."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CurrencyRecord(BaseModel):
    """One currency with the countries using it"""

    currency_code: str
    currency_name: str
    primary_country_code: str
    other_country_codes: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Dataset(BaseModel):
    """Ordered currency records plus alternate names keyed by currency code"""

    records: list[CurrencyRecord]
    aliases: dict[str, list[str]] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class CountriesForCurrency(BaseModel):
    """Countries associated with a currency"""

    primary: str | None = None
    others: list[str] = []
    all: list[str] = []


class FlagUrls(BaseModel):
    """Flag locators for the countries of a currency"""

    primary: str | None = None
    others: list[str] = []
