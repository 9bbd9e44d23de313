"""Download flag SVG files for the dataset's country codes"""

import asyncio
import logging
from collections.abc import Iterable
from pathlib import Path

from currency_flags.config import settings
from currency_flags.exceptions import SourceFetchError
from currency_flags.flag_urls import to_flag_filename
from currency_flags.generator.sources import SourceClient
from currency_flags.utils import normalize_country_code, unique

log = logging.getLogger(f'{settings.log_prefix}.flags')


async def download_flags(
    client: SourceClient,
    country_codes: Iterable[str],
    target_dir: str | Path,
    max_concurrency: int | None = None,
) -> list[str]:
    """Fetch one SVG per country code into ``target_dir``

    Codes the source cannot serve (e.g. ``XX``) are logged and skipped.
    Returns the codes that were written, in input order.
    """
    target_dir = Path(target_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    semaphore = asyncio.Semaphore(max_concurrency or settings.max_concurrency)
    codes = [cc for cc in unique(map(normalize_country_code, country_codes)) if cc]

    async def fetch_one(code: str) -> str | None:
        async with semaphore:
            try:
                content = await client.fetch_flag(code)
            except SourceFetchError as e:
                log.warning('Skipping flag %s: %s', code, e)
                return None
        try:
            (target_dir / to_flag_filename(code)).write_bytes(content)
        except OSError as e:
            log.warning('Cannot save flag %s: %s', code, e)
            return None
        log.debug('Saved flag %s', code)
        return code

    results = await asyncio.gather(*(fetch_one(code) for code in codes))
    written = [code for code in results if code]
    log.info('Downloaded %d of %d flags into %s', len(written), len(codes), target_dir)
    return written
