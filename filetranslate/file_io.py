#!/usr/bin/env python3
"""
File helpers for the translation pipeline.
Reads the source text and writes the translated result.
"""

import logging
from pathlib import Path
from typing import Union

from .errors import EmptyInputError, FileOpenError, FileWriteError

logger = logging.getLogger(__name__)


def read_text(path: Union[str, Path]) -> str:
    """
    Read the whole input file as UTF-8 text.

    Args:
        path: Path to the input file

    Returns:
        File contents

    Raises:
        FileOpenError: If the file cannot be opened or is not valid UTF-8
        EmptyInputError: If the file has no content
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            text = f.read()
    except UnicodeDecodeError as e:
        logger.error(f"Input file is not valid UTF-8: {path}: {e}")
        raise FileOpenError(f"Input file is not valid UTF-8: {path}", path) from e
    except OSError as e:
        logger.error(f"Could not open input file {path}: {e}")
        raise FileOpenError(f"Could not open input file: {path} ({e.strerror or e})", path) from e

    if not text:
        logger.error(f"Input file is empty: {path}")
        raise EmptyInputError(f"Input file is empty: {path}", path)

    logger.debug(f"Read {len(text)} characters from {path}")
    return text


def write_text(path: Union[str, Path], text: str) -> Path:
    """
    Write text to a file, replacing any previous content.

    Raises:
        FileWriteError: If the file cannot be opened for writing
    """
    path = Path(path)
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
    except OSError as e:
        logger.error(f"Could not write output file {path}: {e}")
        raise FileWriteError(
            f"Could not write output file: {path} ({e.strerror or e})",
            path,
            translated_text=text,
        ) from e

    logger.debug(f"Wrote {len(text)} characters to {path}")
    return path
