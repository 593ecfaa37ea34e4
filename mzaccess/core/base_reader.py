# mzaccess/core/base_reader.py
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union

from ..config import ReaderConfig
from ..metadata.metadata_models import RunMetadata
from ..spectrum.arrays import SignalArrays
from ..spectrum.records import SpectrumDescription
from .registry import is_compressed, open_binary


class BaseSpectrumSource(ABC):
    """Abstract base class for random-access spectrum sources."""

    def __init__(self, data_path: Path, config: Optional[ReaderConfig] = None):
        """
        Initialize the source with the path to the data.

        Args:
            data_path: Path to the data file
            config: Reader options, defaults to ``ReaderConfig()``
        """
        self.data_path = Path(data_path)
        self.config = config if config is not None else ReaderConfig()
        self._handle: Optional[BinaryIO] = None

    def _parser_source(self) -> Union[str, BinaryIO]:
        """Path for plain files, a decompressing handle for compressed ones."""
        if is_compressed(self.data_path):
            self._handle = open_binary(self.data_path)
            return self._handle
        return str(self.data_path)

    def _close_handle(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of spectra in the file."""
        pass

    @abstractmethod
    def read_record(self, index: int) -> Tuple[SpectrumDescription, SignalArrays]:
        """
        Decode the spectrum at a 0-based position.

        Raises:
            SpectrumNotFound: If ``index`` is outside ``[0, len(self))``
        """
        pass

    @abstractmethod
    def read_record_by_id(self, native_id: str) -> Tuple[SpectrumDescription, SignalArrays]:
        """
        Decode the spectrum with the given native id.

        Raises:
            SpectrumNotFound: If no spectrum carries ``native_id``
        """
        pass

    def get_metadata(self) -> RunMetadata:
        """Return run-level metadata. Formats without a header return an empty model."""
        return RunMetadata()

    @abstractmethod
    def close(self) -> None:
        """Close all open file handles."""
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit with cleanup."""
        self.close()
