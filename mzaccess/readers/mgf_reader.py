# mzaccess/readers/mgf_reader.py
import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pyteomics import mgf

from ..config import ReaderConfig
from ..core.base_reader import BaseSpectrumSource
from ..core.registry import register_reader, sniff_format
from ..exceptions import SpectrumNotFound
from ..params import Param, Unit
from ..spectrum.arrays import SignalArrays
from ..spectrum.records import (
    AcquisitionRecord,
    PrecursorRecord,
    ScanEventRecord,
    ScanPolarity,
    SelectedIon,
    SignalContinuity,
    SpectrumDescription,
)

# Header fields decoded into structured records rather than kept as params
_STRUCTURED_FIELDS = ("pepmass", "charge")
_END_IONS = b"END IONS"


def _first_charge(value) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        value = value[0]
    try:
        return int(value)
    except (TypeError, ValueError):
        text = str(value).strip()
        # "2+" / "3-" notation
        if text and text[-1] in "+-" and text[:-1].isdigit():
            return int(text[:-1]) * (-1 if text[-1] == "-" else 1)
        logging.debug(f"Ignoring unparseable MGF charge {value!r}")
        return None


def decode_mgf_spectrum(raw: Dict[str, Any], index: int) -> Tuple[SpectrumDescription, SignalArrays]:
    """
    Decode one pyteomics MGF spectrum dictionary.

    MGF entries are centroided MS2 peak lists: ``PEPMASS`` and ``CHARGE`` give
    the selected ion, ``RTINSECONDS`` the start time and ``TITLE`` the native id.
    No isolation window is recorded.
    """
    header = raw.get("params", {})

    params = tuple(
        Param.from_raw(key, value, unit=Unit.SECOND if key == "rtinseconds" else Unit.UNKNOWN)
        for key, value in header.items()
        if key not in _STRUCTURED_FIELDS
    )

    charge = _first_charge(header.get("charge"))
    precursors = ()
    pepmass = header.get("pepmass")
    if pepmass is not None:
        if not isinstance(pepmass, (list, tuple)):
            pepmass = (pepmass,)
        mz = float(pepmass[0]) if pepmass and pepmass[0] is not None else 0.0
        intensity = float(pepmass[1]) if len(pepmass) > 1 and pepmass[1] is not None else 0.0
        precursors = (PrecursorRecord(ions=(SelectedIon(mz, intensity, charge),)),)

    start_time = 0.0
    if header.get("rtinseconds") is not None:
        start_time = float(header["rtinseconds"]) / 60.0

    polarity = ScanPolarity.UNKNOWN
    if charge is not None and charge > 0:
        polarity = ScanPolarity.POSITIVE
    elif charge is not None and charge < 0:
        polarity = ScanPolarity.NEGATIVE

    description = SpectrumDescription(
        id=str(header.get("title", f"index={index}")),
        index=index,
        ms_level=2,
        polarity=polarity,
        signal_continuity=SignalContinuity.CENTROID,
        parameters=params,
        precursors=precursors,
        acquisition=AcquisitionRecord(scans=(ScanEventRecord(start_time=start_time),)),
    )
    arrays = SignalArrays.build(raw.get("m/z array"), raw.get("intensity array"))
    return description, arrays


class PositionalMGF(mgf.IndexedMGF):
    """
    ``IndexedMGF`` that indexes every ``BEGIN IONS`` block.

    Records carrying a ``TITLE`` are keyed by it. Untitled records are keyed
    ``index=N`` by their position in the file instead of being left out.
    """

    def _generate_offsets(self):
        title = re.compile(self.label.encode(self.encoding))
        begin = self.delimiter.encode(self.encoding)
        offset = 0
        position = 0
        for chunk in self._chunk_iterator():
            if chunk.startswith(begin) and _END_IONS in chunk:
                match = title.search(chunk)
                if match is not None:
                    label = match.group(self.label_group).decode(self.encoding)
                else:
                    label = f"index={position}"
                yield offset, label, match
                position += 1
            offset += len(chunk)
        yield offset, None, None


@register_reader("mgf")
class MGFSource(BaseSpectrumSource):
    """Random access to an MGF peak list, indexed by spectrum title."""

    def __init__(self, data_path: Path, config: Optional[ReaderConfig] = None):
        super().__init__(data_path, config)
        if self.data_path.stat().st_size and sniff_format(self.data_path) != "mgf":
            raise ValueError(f"{self.data_path} does not look like an MGF peak list")

        try:
            self._reader = PositionalMGF(self._parser_source())
        except Exception:
            self._close_handle()
            raise
        self._count = len(self._reader)
        self._positions: Optional[Dict[str, int]] = None
        logging.info(f"Indexed {self._count} spectra in {self.data_path.name}")

    def __len__(self) -> int:
        return self._count

    def read_record(self, index: int) -> Tuple[SpectrumDescription, SignalArrays]:
        if not 0 <= index < self._count:
            raise SpectrumNotFound(index)
        return decode_mgf_spectrum(self._reader.get_by_index(index), index)

    def read_record_by_id(self, native_id: str) -> Tuple[SpectrumDescription, SignalArrays]:
        if self._positions is None:
            self._positions = {title: position for position, title in enumerate(self._reader.index)}
        position = self._positions.get(native_id)
        if position is None:
            raise SpectrumNotFound(native_id)
        return self.read_record(position)

    def close(self) -> None:
        self._reader.close()
        self._close_handle()
