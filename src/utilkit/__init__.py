"""utilkit

Helpers for sequences, dictionaries, strings, numbers, dates and awaitables.

The helpers are grouped in subpackages:

  - :mod:`utilkit.arrays`: sequences (dedup, chunk, move, async iteration)
  - :mod:`utilkit.objects`: dictionaries (pick, omit, split, flatten)
  - :mod:`utilkit.strings`: strings (case conversion, capitalize, uri)
  - :mod:`utilkit.numeric`: numbers (distribute, places, nearest, formatting)
  - :mod:`utilkit.dates`: locale-aware date formatting
  - :mod:`utilkit.promises`: awaiting in sequence
  - :mod:`utilkit.config`: default locale and number formatting options
  - :mod:`utilkit.error`: the exceptions raised by utilkit
"""

import logging

from . import arrays, dates, numeric, objects, promises, strings
from .config import (
    Config,
    NumberFormatOptions,
    configure,
    get_config,
    reset_config,
    resolve_locale,
)
from .error import LocaleError, NotFoundError, UtilkitError
from .numeric import distribute, nearest, places
from .pyutils import Undefined
from .strings import CaseKind, case, convert_case
from .version import version, version_info

# The utilkit package version.
__version__ = version
__version_info__ = version_info

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "version",
    "version_info",
    "arrays",
    "dates",
    "numeric",
    "objects",
    "promises",
    "strings",
    "Config",
    "NumberFormatOptions",
    "configure",
    "get_config",
    "reset_config",
    "resolve_locale",
    "LocaleError",
    "NotFoundError",
    "UtilkitError",
    "distribute",
    "nearest",
    "places",
    "Undefined",
    "CaseKind",
    "case",
    "convert_case",
]
