"""Load the currency dataset shipped with the package"""

import logging
from pathlib import Path

from pydantic import ValidationError

from currency_flags.exceptions import DatasetError
from currency_flags.schemas import Dataset

DATASET_PATH = Path(__file__).resolve().parent / 'data' / 'currencies.json'

log = logging.getLogger(__name__)


def load_dataset(path: str | Path = DATASET_PATH) -> Dataset:
    """Read and validate a dataset JSON file

    :raises DatasetError: if the file cannot be read or does not match the schema
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding='utf-8')
    except OSError as e:
        raise DatasetError(f'Cannot read dataset {path}: {e}') from e

    try:
        dataset = Dataset.model_validate_json(raw)
    except ValidationError as e:
        raise DatasetError(f'Invalid dataset {path}: {e}') from e

    log.debug('Loaded %d currency records from %s', len(dataset.records), path)
    return dataset
