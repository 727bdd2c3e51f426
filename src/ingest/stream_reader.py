"""Stream decoding helpers shared by the format parsers.

This module turns an already-open text or byte stream into text
and CSV rows, mapping low-level failures onto domain errors.
"""

from __future__ import annotations

import csv
import io
from typing import IO, Any

from core.constants import CSV_DELIMITER, TEXT_ENCODING
from core.errors import BethYwMalformedInputError, BethYwSourceError


def ensure_readable(stream: IO[Any]) -> None:
    """Check that a stream is open and readable.

    Raises:
        BethYwSourceError: If the stream is closed or write-only.
    """
    if getattr(stream, "closed", False):
        raise BethYwSourceError("Input stream is closed. Open the source before importing.")
    readable = getattr(stream, "readable", None)
    if readable is None or not readable():
        raise BethYwSourceError("Input stream is not readable. Open the source for reading.")


def read_text(stream: IO[Any]) -> str:
    """Consume a whole stream and return its text.

    Args:
        stream: Open text or binary stream. Bytes are decoded as UTF-8.

    Returns:
        Stream content without a leading byte-order mark.

    Raises:
        BethYwSourceError: If the stream cannot be read.
        BethYwMalformedInputError: If the content is not valid UTF-8.
    """
    try:
        content = stream.read()
        if isinstance(content, bytes):
            content = content.decode(TEXT_ENCODING)
    except UnicodeDecodeError as error:
        raise BethYwMalformedInputError(
            f"Malformed input: stream is not valid UTF-8 ({error.reason})."
        ) from error
    except OSError as error:
        raise BethYwSourceError(f"Failed to read input stream: {error}") from error
    return content.lstrip("\ufeff")


def read_csv_rows(stream: IO[Any]) -> list[list[str]]:
    """Read all non-blank CSV rows from a stream.

    Args:
        stream: Open text or binary stream.

    Returns:
        Rows as lists of cell strings, blank rows dropped.

    Raises:
        BethYwMalformedInputError: If the CSV cannot be tokenized.
    """
    text = read_text(stream)
    try:
        rows = list(csv.reader(io.StringIO(text, newline=""), delimiter=CSV_DELIMITER))
    except csv.Error as error:
        raise BethYwMalformedInputError(f"Malformed CSV input: {error}") from error
    return [row for row in rows if any(cell.strip() for cell in row)]
