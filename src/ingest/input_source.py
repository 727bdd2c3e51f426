"""Input sources that supply streams to the importer.

InputSource is the abstract base for anything with a source
identifier; InputFile opens a local file for reading.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from types import TracebackType
from typing import IO, Any

from core.constants import TEXT_ENCODING
from core.errors import BethYwSourceError


class InputSource(ABC):
    """Abstract base for all input source types."""

    def __init__(self, source: str) -> None:
        self._source = source

    @property
    def source(self) -> str:
        """Unique identifier for the source, i.e. its location."""
        return self._source

    @abstractmethod
    def open(self) -> IO[Any]:
        """Open the source and return a readable stream."""

    @abstractmethod
    def close(self) -> None:
        """Release any stream opened by :meth:`open`."""

    def __enter__(self) -> IO[Any]:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


class InputFile(InputSource):
    """Source data contained within a local file."""

    def __init__(self, file_path: str | Path) -> None:
        super().__init__(str(file_path))
        self._handle: IO[str] | None = None

    def open(self) -> IO[str]:
        """Open the file as UTF-8 text.

        Returns:
            Readable text stream.

        Raises:
            BethYwSourceError: If the file cannot be opened.
        """
        self.close()
        try:
            self._handle = open(self.source, encoding=TEXT_ENCODING, newline="")
        except OSError as error:
            raise BethYwSourceError(
                f"InputFile::open: Failed to open file {self.source}"
            ) from error
        return self._handle

    def close(self) -> None:
        """Close the file handle if one is open."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None
