"""Resolve country codes to the flag SVG files shipped with the package"""

from pathlib import Path
from typing import Any

from currency_flags.utils import normalize_country_code

FLAGS_DIR = Path(__file__).resolve().parent / 'flags'


def to_flag_filename(country_code: Any) -> str:
    """Return the flag file name for a country code, e.g. ' Us ' -> 'us.svg'"""
    return f'{normalize_country_code(country_code).lower()}.svg'


def flag_url_from_country_code(country_code: Any, flags_dir: Path = FLAGS_DIR) -> str:
    """Build the absolute file:// URL of a country flag.

    Pure path construction: the target file is never opened or checked.

    :raises ValueError: if the code is empty after normalization
    """
    if not normalize_country_code(country_code):
        raise ValueError(f'Empty country code: {country_code!r}')
    return (Path(flags_dir).resolve() / to_flag_filename(country_code)).as_uri()
