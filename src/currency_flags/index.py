"""In-memory currency/country index and its query operations"""

import logging
import re
from pathlib import Path
from typing import Any

from currency_flags.exceptions import DatasetError
from currency_flags.flag_urls import FLAGS_DIR, flag_url_from_country_code
from currency_flags.schemas import CountriesForCurrency, CurrencyRecord, Dataset, FlagUrls
from currency_flags.utils import normalize_country_code, normalize_currency_code, normalize_query, unique

log = logging.getLogger(__name__)

# Anything this short and letter-only is looked up as a country code first
COUNTRY_CODE_PATTERN = re.compile(r'^[a-zA-Z-]{2,5}$')
COUNTRY_CODE_MAX_LENGTH = 3


class CurrencyIndex:
    """Read-only lookup tables built once from a dataset.

    Construction normalizes every code and fills three indices:

    * currency code -> record
    * country code -> currency codes (insertion ordered, de-duplicated)
    * currency code -> lower-cased ``name|alias|...`` haystack for substring search

    Nothing is mutated after ``__init__`` returns, so one instance can be
    shared freely between callers and threads.
    """

    def __init__(self, dataset: Dataset, flags_dir: Path = FLAGS_DIR) -> None:
        self.flags_dir = flags_dir
        self._code_to_currency: dict[str, CurrencyRecord] = {}
        self._country_to_currency_codes: dict[str, dict[str, None]] = {}
        self._name_haystack_by_code: dict[str, str] = {}
        self._exact_names_by_code: dict[str, tuple[str, ...]] = {}

        aliases = {normalize_currency_code(code): names for code, names in dataset.aliases.items()}
        for entry in dataset.records:
            self._add(entry, aliases.get(normalize_currency_code(entry.currency_code), []))

        log.debug(
            'Indexed %d currencies across %d country codes',
            len(self._code_to_currency),
            len(self._country_to_currency_codes),
        )

    def _add(self, entry: CurrencyRecord, aliases: list[str]) -> None:
        ccy = normalize_currency_code(entry.currency_code)
        if not ccy:
            raise DatasetError(f'Record without currency code: {entry!r}')
        if ccy in self._code_to_currency:
            raise DatasetError(f'Duplicate currency code: {ccy}')

        primary = normalize_country_code(entry.primary_country_code)
        others = [cc for cc in unique(map(normalize_country_code, entry.other_country_codes)) if cc and cc != primary]
        record = CurrencyRecord(
            currency_code=ccy,
            currency_name=entry.currency_name,
            primary_country_code=primary,
            other_country_codes=tuple(others),
        )
        self._code_to_currency[ccy] = record

        names = [entry.currency_name, *aliases]
        self._name_haystack_by_code[ccy] = '|'.join(names).lower()
        self._exact_names_by_code[ccy] = tuple(str(name).strip().lower() for name in names)

        for country in (primary, *others):
            if country:
                self._country_to_currency_codes.setdefault(country, {})[ccy] = None

    # Exact and reverse lookups

    def get_currency_by_code(self, currency_code: Any) -> CurrencyRecord | None:
        """Return the record for a currency code, None if unknown"""
        return self._code_to_currency.get(normalize_currency_code(currency_code))

    def get_currency_codes_by_country_code(self, country_code: Any) -> list[str]:
        """Return the codes of every currency used in a country"""
        return list(self._country_to_currency_codes.get(normalize_country_code(country_code), ()))

    def get_currencies_by_country_code(self, country_code: Any) -> list[CurrencyRecord]:
        """Return the records of every currency used in a country"""
        return [self._code_to_currency[ccy] for ccy in self.get_currency_codes_by_country_code(country_code)]

    def get_primary_country_for_currency(self, currency_code: Any) -> str | None:
        record = self.get_currency_by_code(currency_code)
        return record.primary_country_code if record else None

    def get_other_countries_for_currency(self, currency_code: Any) -> list[str]:
        record = self.get_currency_by_code(currency_code)
        return list(record.other_country_codes) if record else []

    def get_all_countries_using_currency(self, currency_code: Any) -> list[str]:
        """Return the primary country followed by the others, without duplicates"""
        record = self.get_currency_by_code(currency_code)
        if not record:
            return []
        return unique([record.primary_country_code, *record.other_country_codes])

    def get_countries_for_currency(self, currency_code: Any) -> CountriesForCurrency:
        record = self.get_currency_by_code(currency_code)
        if not record:
            return CountriesForCurrency()
        return CountriesForCurrency(
            primary=record.primary_country_code,
            others=list(record.other_country_codes),
            all=unique([record.primary_country_code, *record.other_country_codes]),
        )

    # Name search

    def find_currencies_by_name(self, query: Any) -> list[CurrencyRecord]:
        """Substring search over canonical names and aliases, case-insensitive"""
        needle = normalize_query(query)
        if not needle:
            return []
        return [
            self._code_to_currency[ccy] for ccy, haystack in self._name_haystack_by_code.items() if needle in haystack
        ]

    def get_currencies_by_exact_name(self, name: Any) -> list[CurrencyRecord]:
        """Return records whose canonical name or an alias equals ``name`` case-insensitively"""
        needle = normalize_query(name)
        if not needle:
            return []
        return [self._code_to_currency[ccy] for ccy, names in self._exact_names_by_code.items() if needle in names]

    def search(self, query: Any) -> list[CurrencyRecord]:
        """Best-effort lookup by country code, currency code or name.

        Short letter-only queries are always treated as country codes, even
        when they also look like a currency code, so ``search('USD')`` looks
        for a country named ``USD``.
        """
        if query is None:
            return []
        q = str(query).strip()
        if not q:
            return []

        if len(q) <= COUNTRY_CODE_MAX_LENGTH and COUNTRY_CODE_PATTERN.match(q):
            return self.get_currencies_by_country_code(q)

        record = self.get_currency_by_code(q)
        if record:
            return [record]
        return self.find_currencies_by_name(q)

    # Aggregates

    def get_all_currency_entries(self) -> list[CurrencyRecord]:
        return list(self._code_to_currency.values())

    def get_currency_codes(self) -> list[str]:
        return list(self._code_to_currency)

    def get_country_codes(self) -> list[str]:
        """Return every country code used by any currency, first-seen order"""
        return unique(
            cc
            for record in self._code_to_currency.values()
            for cc in (record.primary_country_code, *record.other_country_codes)
            if cc
        )

    # Flags

    def get_flag_url_by_country_code(self, country_code: Any) -> str | None:
        """Return the flag URL of a country, None for empty codes or on any failure"""
        if not normalize_country_code(country_code):
            return None
        try:
            return flag_url_from_country_code(country_code, self.flags_dir)
        except Exception as e:
            log.debug('Cannot resolve flag for %r: %s', country_code, e)
            return None

    def get_flag_url_by_currency_code(self, currency_code: Any) -> str | None:
        """Return the flag URL of the primary country of a currency"""
        record = self.get_currency_by_code(currency_code)
        if not record:
            return None
        return self.get_flag_url_by_country_code(record.primary_country_code)

    def get_flag_urls_for_currency(self, currency_code: Any) -> FlagUrls:
        record = self.get_currency_by_code(currency_code)
        if not record:
            return FlagUrls()
        others = [self.get_flag_url_by_country_code(cc) for cc in record.other_country_codes]
        return FlagUrls(
            primary=self.get_flag_url_by_country_code(record.primary_country_code),
            others=[url for url in others if url],
        )
