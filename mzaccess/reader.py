# mzaccess/reader.py
"""
The public reader: sequential and random access over a spectrum file.

``next()`` walks the file through its offset index using an explicit cursor,
so random access with :meth:`MZReader.get_by_index` never moves that cursor.
"""

import logging
from pathlib import Path
from typing import Iterator, Optional, Union

from .config import ReaderConfig
from .core.base_reader import BaseSpectrumSource
from .core.registry import detect_format, get_reader_class
from .exceptions import (
    ReaderClosedError,
    ReaderOpenError,
    SpectrumNotFound,
)
from .metadata.metadata_models import RunMetadata
from .spectrum.frame import IonMobilityFrame
from .spectrum.spectrum import Spectrum

from . import readers  # noqa: F401  (registers the format backends)


class MZReader:
    """
    A handle on one open spectrum file.

    Use :meth:`open` (or :func:`mzaccess.open`) to build one. Each record it
    hands out is independently owned: releasing or dropping a record never
    affects the reader or other records.
    """

    def __init__(self, source: BaseSpectrumSource, config: Optional[ReaderConfig] = None):
        self._source = source
        self.config = config if config is not None else source.config
        self._position = 0
        self._exhausted = False
        self._closed = False
        self._metadata: Optional[RunMetadata] = None

    @classmethod
    def open(cls, path: Union[str, Path], config: Optional[ReaderConfig] = None) -> "MZReader":
        """
        Open a spectrum file, detecting its format unless ``config.format`` is set.

        Raises:
            ReaderOpenError: If the path is missing, is not a regular file, has
                an unrecognised format or cannot be parsed. The underlying
                exception is chained.
        """
        config = config if config is not None else ReaderConfig()
        path = Path(path)

        if not path.exists():
            raise ReaderOpenError(path, "path does not exist")
        if not path.is_file():
            raise ReaderOpenError(path, "not a regular file")

        try:
            input_format = config.format or detect_format(path)
            reader_class = get_reader_class(input_format)
            logging.info(f"Opening {path} as {input_format} with {reader_class.__name__}")
            source = reader_class(path, config)
        except Exception as e:
            logging.error(f"Error opening {path}: {e}")
            raise ReaderOpenError(path, str(e)) from e

        return cls(source, config)

    # --- lifecycle ---

    def _check_open(self) -> None:
        if self._closed:
            raise ReaderClosedError("I/O operation on a closed reader")

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the file handle. Records already handed out stay usable."""
        if self._closed:
            return
        self._closed = True
        self._source.close()
        logging.info(f"Closed {self._source.data_path}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # --- access ---

    def _load(self, index: int) -> Spectrum:
        description, arrays = self._source.read_record(index)
        return Spectrum(description, arrays, check_liveness=self.config.check_liveness)

    def size(self) -> int:
        """Number of spectra in the file."""
        self._check_open()
        return len(self._source)

    def __len__(self) -> int:
        return self.size()

    def next(self) -> Optional[Spectrum]:
        """
        Return the spectrum at the cursor and advance the cursor.

        Returns ``None`` once every spectrum has been read, and keeps returning
        ``None`` until :meth:`reset` or :meth:`start_from_index`.
        """
        self._check_open()
        if self._exhausted or self._position >= len(self._source):
            self._exhausted = True
            return None
        spectrum = self._load(self._position)
        self._position += 1
        return spectrum

    def get_by_index(self, index: int) -> Spectrum:
        """
        Look a spectrum up by its 0-based position through the file index.

        Raises:
            SpectrumNotFound: If ``index`` is outside ``[0, size())``
        """
        self._check_open()
        if not 0 <= index < len(self._source):
            raise SpectrumNotFound(index)
        return self._load(index)

    __getitem__ = get_by_index

    def get_by_id(self, native_id: str) -> Spectrum:
        """
        Look a spectrum up by its native id.

        Raises:
            SpectrumNotFound: If no spectrum carries ``native_id``
        """
        self._check_open()
        description, arrays = self._source.read_record_by_id(native_id)
        return Spectrum(description, arrays, check_liveness=self.config.check_liveness)

    def __iter__(self) -> Iterator[Spectrum]:
        return self

    def __next__(self) -> Spectrum:
        spectrum = self.next()
        if spectrum is None:
            raise StopIteration
        return spectrum

    # --- cursor ---

    @property
    def position(self) -> int:
        """Index of the record the next call to :meth:`next` returns."""
        return self._position

    def start_from_index(self, index: int) -> None:
        """
        Move the sequential cursor to ``index``.

        Raises:
            SpectrumNotFound: If ``index`` is outside ``[0, size())``
        """
        self._check_open()
        if not 0 <= index < len(self._source):
            raise SpectrumNotFound(index)
        self._position = index
        self._exhausted = False

    def reset(self) -> None:
        """Rewind the sequential cursor to the first spectrum."""
        self._check_open()
        self._position = 0
        self._exhausted = False

    # --- ion mobility frames ---

    def next_frame(self) -> Optional[IonMobilityFrame]:
        """
        Like :meth:`next`, regrouped into an ion mobility frame.

        Raises:
            ArrayRetrievalError: If the record has no ion mobility array
        """
        spectrum = self.next()
        if spectrum is None:
            return None
        return IonMobilityFrame.from_spectrum(spectrum)

    def get_frame_by_index(self, index: int) -> IonMobilityFrame:
        return IonMobilityFrame.from_spectrum(self.get_by_index(index))

    # --- metadata ---

    def metadata(self) -> RunMetadata:
        """Run-level metadata, read on first request and cached."""
        self._check_open()
        if self._metadata is None:
            self._metadata = self._source.get_metadata()
        return self._metadata

    def __repr__(self):
        state = "closed" if self._closed else f"position={self._position}"
        return f"MZReader({str(self._source.data_path)!r}, {state})"


def open(path: Union[str, Path], config: Optional[ReaderConfig] = None) -> MZReader:
    """Open a spectrum file. See :meth:`MZReader.open`."""
    return MZReader.open(path, config)
