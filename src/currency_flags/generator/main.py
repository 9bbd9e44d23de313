"""Entry point regenerating the currency dataset and flag assets"""

import argparse
import asyncio
import logging
import sys

from currency_flags.config import settings
from currency_flags.dataset import load_dataset
from currency_flags.exceptions import CurrencyFlagsError
from currency_flags.generator.build import build_dataset, write_dataset
from currency_flags.generator.flags import download_flags
from currency_flags.generator.sources import SourceClient
from currency_flags.index import CurrencyIndex

log = logging.getLogger(f'{settings.log_prefix}.generator')


async def generate_data(client: SourceClient) -> None:
    """Fetch both sources concurrently and write the dataset file"""
    countries, code_to_name = await asyncio.gather(client.fetch_countries(), client.fetch_currency_names())
    write_dataset(build_dataset(countries, code_to_name), settings.output_path)


async def generate_flags(client: SourceClient) -> None:
    """Download a flag for every country code of the current dataset file"""
    index = CurrencyIndex(load_dataset(settings.output_path))
    await download_flags(client, index.get_country_codes(), settings.flags_output_dir)


async def run(mode: str) -> None:
    client = SourceClient()
    if mode in ('data', 'all'):
        await generate_data(client)
    if mode in ('flags', 'all'):
        await generate_flags(client)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the generator"""
    parser = argparse.ArgumentParser(description='Regenerate currency_flags data')
    parser.add_argument(
        'mode',
        choices=['data', 'flags', 'all'],
        help='data: rebuild currencies.json, flags: download flag SVGs, all: both in order',
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    try:
        asyncio.run(run(args.mode))
    except (CurrencyFlagsError, OSError) as e:
        log.error('Generation failed: %s', e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
