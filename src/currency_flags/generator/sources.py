import logging
from typing import Any, cast

import httpx

from currency_flags.config import settings
from currency_flags.exceptions import SourceFetchError

log = logging.getLogger(f'{settings.log_prefix}.sources')


class SourceClient:
    """Client for the public datasets the currency table is generated from"""

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = float(timeout if timeout is not None else settings.timeout)

    async def _get(self, url: str) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            try:
                response = await client.get(url)
                response.raise_for_status()
                return response
            except httpx.HTTPError as e:
                raise SourceFetchError(f'Failed to fetch {url}: {e}') from e

    async def _get_json(self, url: str) -> Any:
        response = await self._get(url)
        try:
            return response.json()
        except ValueError as e:
            raise SourceFetchError(f'Invalid JSON from {url}: {e}') from e

    async def fetch_countries(self) -> list[dict[str, Any]]:
        """Fetch countries with their cca2 code and currencies"""
        data = await self._get_json(settings.countries_url)
        if not isinstance(data, list):
            raise SourceFetchError(f'Unexpected countries payload from {settings.countries_url}')
        log.info('Fetched %d countries', len(data))
        return cast(list[dict[str, Any]], data)

    async def fetch_currency_names(self) -> dict[str, str]:
        """Fetch the currency code to English name mapping"""
        data = await self._get_json(settings.currencies_url)
        if not isinstance(data, dict):
            raise SourceFetchError(f'Unexpected currencies payload from {settings.currencies_url}')
        log.info('Fetched %d currency names', len(data))
        return cast(dict[str, str], data)

    async def fetch_flag(self, country_code: str) -> bytes:
        """Fetch the SVG flag of a country"""
        response = await self._get(settings.flag_source_url.format(code=country_code.lower()))
        return response.content
