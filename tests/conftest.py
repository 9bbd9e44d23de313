"""Pytest configuration and shared fixtures"""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from currency_flags import CurrencyIndex, CurrencyRecord, Dataset


def pytest_addoption(parser):
    """Add custom command line options"""
    parser.addoption(
        '--run-external', action='store_true', default=False, help='Run tests that require external network access'
    )


def pytest_collection_modifyitems(config, items):
    """Skip external tests unless explicitly requested"""
    if config.getoption('--run-external'):
        return
    skip_external = pytest.mark.skip(reason='needs --run-external')
    for item in items:
        if 'external' in item.keywords:
            item.add_marker(skip_external)


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create temporary directory for test files"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_dataset() -> Dataset:
    """Small hand-made dataset with messy codes and shared countries"""
    return Dataset(
        records=[
            CurrencyRecord(
                currency_code='usd',
                currency_name='United States dollar',
                primary_country_code='US',
                other_country_codes=('ec', ' SV ', 'PA'),
            ),
            CurrencyRecord(
                currency_code='EUR',
                currency_name='Euro',
                primary_country_code='EU',
                other_country_codes=('DE', 'FR', 'EU', 'FR'),
            ),
            CurrencyRecord(
                currency_code='PAB',
                currency_name='Panamanian balboa',
                primary_country_code='PA',
            ),
            CurrencyRecord(
                currency_code=' gbp',
                currency_name='British pound',
                primary_country_code='gb',
                other_country_codes=('IM', 'JE'),
            ),
            CurrencyRecord(
                currency_code='EGP',
                currency_name='Egyptian pound',
                primary_country_code='EG',
                other_country_codes=('PS',),
            ),
            CurrencyRecord(
                currency_code='XAU',
                currency_name='Gold Ounce',
                primary_country_code='XX',
            ),
        ],
        aliases={
            'USD': ['US Dollar', 'Dollar'],
            'gbp': ['Sterling'],
            'EGP': ['Egyptian Pound'],
        },
    )


@pytest.fixture
def sample_index(sample_dataset: Dataset, temp_dir: Path) -> CurrencyIndex:
    """Index over the sample dataset with flags resolved in a temp directory"""
    return CurrencyIndex(sample_dataset, flags_dir=temp_dir / 'flags')
