import logging
import os
from pathlib import Path
from typing import TextIO, Union

import yaml

from dscreds.configs import (DEFAULT_VALIDATE_CREDENTIALS,
                             VALIDATE_CREDENTIALS_ENVAR)

logger = logging.getLogger(__name__)

TRUTHY = ('1', 'true', 'yes', 'on',)
FALSY = ('0', 'false', 'no', 'off', '',)


def str_to_bool(val: Union[str, bool]) -> bool:
    """Converts flag-like strings ("true", "0", "on"...) to bool.

    Raises ValueError for anything that does not look like a flag.
    """
    if isinstance(val, bool):
        return val
    lowered = val.strip().lower()
    if lowered in TRUTHY:
        return True
    if lowered in FALSY:
        return False
    raise ValueError(f'Cannot interpret {val!r} as a boolean flag.')


def validation_enabled() -> bool:
    """Whether credential field validation runs at construction time.

    Controlled by the DSCREDS_VALIDATE_CREDENTIALS environment variable,
    falls back to DEFAULT_VALIDATE_CREDENTIALS when unset.
    """
    envar = os.getenv(VALIDATE_CREDENTIALS_ENVAR)
    if envar is None:
        return DEFAULT_VALIDATE_CREDENTIALS
    try:
        return str_to_bool(envar)
    except ValueError as err:
        logger.error('Config issue: %s must be a boolean flag, got %r.',
                     VALIDATE_CREDENTIALS_ENVAR, envar)
        raise err


def load_from_file_or_path(loadable: Union[Path, str, TextIO]) -> dict:
    try:
        with open(loadable) as file_obj:  # noqa pylint: disable=unspecified-encoding
            logger.debug('loading from file %s', file_obj.name)
            loaded = yaml.safe_load(file_obj)
    except TypeError:
        logger.debug('loading from file-like object...')
        loaded = yaml.safe_load(loadable)
    logger.debug('Done loading.')
    return loaded
