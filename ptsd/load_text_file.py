"""Reading whole text files, such as shader sources."""

from __future__ import annotations

import logging
import os
from typing import Union

from .logger import LOGGER_NAME, TRACE

_log = logging.getLogger(LOGGER_NAME)


def load_text_file(filepath: Union[str, os.PathLike]) -> str:
    """Return the full contents of ``filepath``, line endings untouched.

    Raises OSError when the file cannot be opened.
    """
    _log.log(TRACE, "Loading File: '%s'", filepath)
    try:
        with open(filepath, encoding="utf-8", newline="") as stream:
            return stream.read()
    except OSError:
        _log.error("Failed to load '%s'", filepath)
        raise