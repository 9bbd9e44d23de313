"""ISO 4217 currency to ISO 3166-1 country lookups with local flag assets.

The module-level functions query ``default_index``, built from the dataset
shipped with the package when this module is imported. Build a separate
``CurrencyIndex`` to query another dataset.

Flag URLs point into the package ``flags/`` directory, which ships empty.
Run ``currency-flags-generate flags`` to download the SVG files; the lookup
functions build the URLs either way and never check that the file exists.
"""

from .dataset import load_dataset
from .exceptions import CurrencyFlagsError, DatasetError
from .flag_urls import flag_url_from_country_code, to_flag_filename
from .index import CurrencyIndex
from .schemas import CountriesForCurrency, CurrencyRecord, Dataset, FlagUrls

default_index = CurrencyIndex(load_dataset())

get_all_currency_entries = default_index.get_all_currency_entries
get_currency_by_code = default_index.get_currency_by_code
get_currencies_by_country_code = default_index.get_currencies_by_country_code
get_currency_codes_by_country_code = default_index.get_currency_codes_by_country_code
get_primary_country_for_currency = default_index.get_primary_country_for_currency
get_other_countries_for_currency = default_index.get_other_countries_for_currency
get_all_countries_using_currency = default_index.get_all_countries_using_currency
get_countries_for_currency = default_index.get_countries_for_currency
find_currencies_by_name = default_index.find_currencies_by_name
get_currencies_by_exact_name = default_index.get_currencies_by_exact_name
get_flag_url_by_country_code = default_index.get_flag_url_by_country_code
get_flag_url_by_currency_code = default_index.get_flag_url_by_currency_code
get_flag_urls_for_currency = default_index.get_flag_urls_for_currency
get_currency_codes = default_index.get_currency_codes
get_country_codes = default_index.get_country_codes
search = default_index.search

__all__ = [
    'CountriesForCurrency',
    'CurrencyFlagsError',
    'CurrencyIndex',
    'CurrencyRecord',
    'Dataset',
    'DatasetError',
    'FlagUrls',
    'default_index',
    'find_currencies_by_name',
    'flag_url_from_country_code',
    'get_all_countries_using_currency',
    'get_all_currency_entries',
    'get_countries_for_currency',
    'get_country_codes',
    'get_currencies_by_country_code',
    'get_currencies_by_exact_name',
    'get_currency_by_code',
    'get_currency_codes',
    'get_currency_codes_by_country_code',
    'get_flag_url_by_country_code',
    'get_flag_url_by_currency_code',
    'get_flag_urls_for_currency',
    'get_other_countries_for_currency',
    'get_primary_country_for_currency',
    'load_dataset',
    'search',
    'to_flag_filename',
]
