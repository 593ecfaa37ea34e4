# mzaccess/readers/mzml_reader.py
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

from pyteomics import mzml

from ..config import ReaderConfig
from ..core.base_reader import BaseSpectrumSource
from ..core.registry import register_reader, sniff_format
from ..exceptions import SpectrumNotFound
from ..metadata.metadata_models import RunMetadata
from ..metadata.mzml_extractor import MzMLMetadataExtractor
from ..spectrum.arrays import SignalArrays
from ..spectrum.records import SpectrumDescription
from .mzml_decoder import decode_spectrum


@register_reader("mzml")
class MzMLSource(BaseSpectrumSource):
    """Random access to the spectra of an mzML file through its offset index."""

    def __init__(self, data_path: Path, config: Optional[ReaderConfig] = None):
        super().__init__(data_path, config)
        if sniff_format(self.data_path) != "mzml":
            raise ValueError(f"{self.data_path} does not look like an mzML document")

        try:
            self._reader = mzml.MzML(
                self._parser_source(), use_index=True, huge_tree=self.config.huge_tree
            )
        except Exception:
            self._close_handle()
            raise
        self._count = len(self._reader)
        self._metadata: Optional[RunMetadata] = None
        self._positions: Optional[Dict[str, int]] = None
        logging.info(f"Indexed {self._count} spectra in {self.data_path.name}")

    def __len__(self) -> int:
        return self._count

    def read_record(self, index: int) -> Tuple[SpectrumDescription, SignalArrays]:
        if not 0 <= index < self._count:
            raise SpectrumNotFound(index)
        raw = self._reader.get_by_index(index)
        return decode_spectrum(raw, index)

    def read_record_by_id(self, native_id: str) -> Tuple[SpectrumDescription, SignalArrays]:
        try:
            raw = self._reader.get_by_id(native_id)
        except KeyError:
            raise SpectrumNotFound(native_id) from None
        return decode_spectrum(raw, self._position_of(native_id))

    def _position_of(self, native_id: str) -> int:
        # The offset index keeps file order, so enumeration gives the record index
        if self._positions is None:
            self._positions = {
                spectrum_id: position
                for position, spectrum_id in enumerate(self._reader.index["spectrum"])
            }
        return self._positions[native_id]

    def get_metadata(self) -> RunMetadata:
        if self._metadata is None:
            if self.config.read_metadata:
                extractor = MzMLMetadataExtractor(self.data_path, huge_tree=self.config.huge_tree)
                self._metadata = extractor.extract_complete_metadata()
            else:
                self._metadata = RunMetadata()
        return self._metadata

    def close(self) -> None:
        if hasattr(self._reader, "close"):
            self._reader.close()
        self._close_handle()
