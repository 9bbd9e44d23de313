"""Assemble the currency dataset from the upstream sources"""

import json
import logging
from pathlib import Path
from typing import Any

from currency_flags.config import settings
from currency_flags.schemas import CurrencyRecord, Dataset
from currency_flags.utils import normalize_country_code, normalize_currency_code

log = logging.getLogger(f'{settings.log_prefix}.build')

SUPRANATIONAL_CODE = 'EU'
NO_COUNTRY_CODE = 'XX'

# Representative country for currencies shared by several countries
PRIMARY_OVERRIDES = {
    'EUR': SUPRANATIONAL_CODE,
    'USD': 'US',
    'GBP': 'GB',
    'AUD': 'AU',
    'CAD': 'CA',
    'CHF': 'CH',
    'JPY': 'JP',
    'CNY': 'CN',
    'HKD': 'HK',
    'SGD': 'SG',
    'XAF': 'CM',
    'XOF': 'SN',
    'XCD': 'AG',
}

# ISO special-purpose and precious metal codes missing from public datasets
EXTRA_CODES = {
    'XXX': 'No currency',
    'XTS': 'Codes specifically reserved for testing purposes',
    'XPT': 'Platinum (one troy ounce)',
    'XPD': 'Palladium (one troy ounce)',
    'XAU': 'Gold (one troy ounce)',
    'XAG': 'Silver (one troy ounce)',
    'XDR': 'Special Drawing Rights',
    'XBA': 'Bond Markets Unit European Composite Unit (EURCO)',
    'XBB': 'Bond Markets Unit European Monetary Unit (E.M.U.-6)',
    'XBC': 'Bond Markets Unit European Unit of Account 9 (E.U.A.-9)',
    'XBD': 'Bond Markets Unit European Unit of Account 17 (E.U.A.-17)',
    'XSU': 'Sucre',
    'XUA': 'ADB Unit of Account',
}

DEFAULT_ALIASES = {
    'USD': ['US Dollar', 'Dollar', 'American Dollar'],
    'EUR': ['Eurozone Euro'],
    'GBP': ['British Pound', 'Sterling'],
    'AUD': ['Aussie Dollar'],
    'NZD': ['Kiwi Dollar'],
    'CHF': ['Swiss Franc'],
    'CNY': ['Renminbi', 'Yuan Renminbi'],
    'JPY': ['Yen'],
    'HKD': ['Hong Kong Dollar'],
    'SGD': ['Singapore Dollar'],
    'INR': ['Indian Rupee'],
    'AED': ['Dirham', 'UAE Dirham'],
    'SAR': ['Saudi Riyal'],
    'KWD': ['Kuwaiti Dinar'],
    'QAR': ['Qatari Riyal'],
    'BHD': ['Bahraini Dinar'],
    'OMR': ['Omani Rial'],
    'TRY': ['Turkish Lira'],
    'EGP': ['Egyptian Pound'],
    'RUB': ['Russian Ruble', 'Ruble'],
    'SEK': ['Swedish Krona'],
    'NOK': ['Norwegian Krone'],
    'DKK': ['Danish Krone'],
    'XAF': ['CFA Franc BEAC', 'Central African CFA'],
    'XOF': ['CFA Franc BCEAO', 'West African CFA'],
    'ZAR': ['South African Rand', 'Rand'],
}


class _Candidate:
    """Names and countries collected for one currency code"""

    def __init__(self) -> None:
        self.names: dict[str, None] = {}
        self.countries: set[str] = set()


def _choose_primary(code: str, countries: list[str]) -> str:
    if code in PRIMARY_OVERRIDES:
        return PRIMARY_OVERRIDES[code]
    return countries[0] if countries else NO_COUNTRY_CODE


def build_dataset(countries: list[dict[str, Any]], code_to_name: dict[str, str]) -> Dataset:
    """Merge both sources into a dataset sorted by currency code.

    Country names from the countries source win over Open Exchange Rates
    names, which win over the built-in names of special-purpose codes.
    """
    candidates: dict[str, _Candidate] = {}

    for country in countries:
        cca2 = normalize_country_code(country.get('cca2'))
        for raw_code, definition in (country.get('currencies') or {}).items():
            code = normalize_currency_code(raw_code)
            if not code:
                continue
            candidate = candidates.setdefault(code, _Candidate())
            if isinstance(definition, dict) and definition.get('name'):
                candidate.names[str(definition['name'])] = None
            if cca2:
                candidate.countries.add(cca2)

    for raw_code, name in code_to_name.items():
        code = normalize_currency_code(raw_code)
        if code:
            candidates.setdefault(code, _Candidate()).names[str(name)] = None

    for code, name in EXTRA_CODES.items():
        candidates.setdefault(code, _Candidate()).names[name] = None

    records = []
    for code in sorted(candidates):
        candidate = candidates[code]
        sorted_countries = sorted(candidate.countries)
        primary = _choose_primary(code, sorted_countries)
        records.append(
            CurrencyRecord(
                currency_code=code,
                currency_name=next(iter(candidate.names), code),
                primary_country_code=primary,
                other_country_codes=tuple(cc for cc in sorted_countries if cc != primary),
            )
        )

    log.info('Built %d currency records', len(records))
    return Dataset(records=records, aliases=DEFAULT_ALIASES)


def write_dataset(dataset: Dataset, path: str | Path) -> Path:
    """Write a dataset as the JSON file read by ``load_dataset``"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open('w', encoding='utf-8') as f:
        json.dump(dataset.model_dump(mode='json', by_alias=True), f, ensure_ascii=False, indent=2)
        f.write('\n')
    log.info('Wrote %d currencies to %s', len(dataset.records), path)
    return path
