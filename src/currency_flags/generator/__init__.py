"""Offline generation of the currency dataset and flag assets."""

from .build import build_dataset, write_dataset
from .flags import download_flags
from .sources import SourceClient

__all__ = [
    'SourceClient',
    'build_dataset',
    'download_flags',
    'write_dataset',
]
