"""
Borrowed views into a record: :class:`Precursor`, :class:`Acquisition` and :class:`ScanEvent`.

A view is minted by exactly one factory method on its owner and holds a
reference back to that owner. Every call first asks the owner whether it is
still alive, so a view used after :meth:`Spectrum.release` raises
:class:`~mzaccess.exceptions.ReleasedHandleError` instead of answering from
stale data.
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from ..exceptions import ScanNotFound
from ..params import CURIE, Param, ParamDescribed
from .isolation import IsolationWindow
from .records import (
    AcquisitionRecord,
    PrecursorRecord,
    ScanCombination,
    ScanEventRecord,
    ScanWindow,
    SelectedIon,
)

# Only record classes hold this token, so callers cannot construct views themselves
_MINT = object()


class _BorrowedView:
    """Common plumbing for views that borrow from an owning record."""

    def __init__(self, owner, record, token):
        if token is not _MINT:
            raise TypeError(
                f"{type(self).__name__} objects can only be obtained from their parent record"
            )
        self._owner = owner
        self._record = record

    def _data(self):
        self._owner._ensure_alive()
        return self._record

    @property
    def owner(self):
        return self._owner


class Precursor(_BorrowedView):
    """The precursor selection behind an MS-n spectrum.

    The first selected ion is "the" precursor by convention; the
    ``selected_*`` accessors read it and return ``None`` when the ion list is
    empty.
    """

    _record: PrecursorRecord

    def ions(self) -> Tuple[SelectedIon, ...]:
        return self._data().ions

    def selected_ion(self) -> Optional[SelectedIon]:
        ions = self._data().ions
        return ions[0] if ions else None

    def selected_mz(self) -> Optional[float]:
        ion = self.selected_ion()
        return ion.mz if ion is not None else None

    def selected_charge(self) -> Optional[int]:
        ion = self.selected_ion()
        return ion.charge if ion is not None else None

    def selected_ion_mobility(self) -> Optional[float]:
        ion = self.selected_ion()
        return ion.ion_mobility if ion is not None else None

    def isolation_window(self) -> Optional[IsolationWindow]:
        """The isolation window, or ``None`` when the file recorded none.

        An unrecorded window is never reported as a zero-width window.
        """
        window = self._data().isolation_window
        if not window.is_valid():
            return None
        return window

    def activation_energy(self) -> float:
        return self._data().activation.energy

    def activation_method_is_combined(self) -> bool:
        return self._data().activation.is_combined()

    def activation_methods(self) -> List[CURIE]:
        return list(self._data().activation.methods)

    def activation_method(self) -> Optional[CURIE]:
        return self._data().activation.method()

    def activation_params(self) -> Sequence[Param]:
        return self._data().activation.parameters

    def precursor_id(self) -> Optional[str]:
        """Native id of the spectrum the precursor was selected from, if recorded."""
        return self._data().precursor_id

    def __repr__(self):
        if self._owner.is_released:
            return f"{type(self).__name__}(<released>)"
        return f"{type(self).__name__}(selected_mz={self.selected_mz()}, charge={self.selected_charge()})"


class ScanEvent(_BorrowedView, ParamDescribed):
    """One scan within an :class:`Acquisition`."""

    _record: ScanEventRecord

    def params(self) -> Sequence[Param]:
        return self._data().parameters

    def start_time(self) -> float:
        """Scan start time in minutes."""
        return self._data().start_time

    def injection_time(self) -> float:
        """Ion injection time in milliseconds; 0.0 when not recorded."""
        return self._data().injection_time

    def instrument_configuration_id(self) -> Optional[str]:
        return self._data().instrument_configuration_id

    def ion_mobility(self) -> Optional[float]:
        return self._data().ion_mobility

    def ion_mobility_type(self) -> Optional[CURIE]:
        return self._data().ion_mobility_type

    def has_ion_mobility(self) -> bool:
        return self._data().ion_mobility is not None

    def filter_string(self) -> Optional[str]:
        return self._data().filter_string

    def scan_configuration(self) -> Optional[str]:
        return self._data().scan_configuration

    def scan_windows(self) -> Tuple[ScanWindow, ...]:
        return self._data().scan_windows

    def __repr__(self):
        if self._owner.is_released:
            return f"{type(self).__name__}(<released>)"
        return f"{type(self).__name__}(start_time={self.start_time()}, filter_string={self.filter_string()!r})"


class Acquisition(_BorrowedView, ParamDescribed):
    """The ordered scans that make up one spectrum."""

    _record: AcquisitionRecord

    def params(self) -> Sequence[Param]:
        return self._data().parameters

    def scan_count(self) -> int:
        return len(self._data().scans)

    def __len__(self) -> int:
        return self.scan_count()

    def combination(self) -> ScanCombination:
        return self._data().combination

    def start_time(self) -> float:
        """Start time of the first scan in minutes, or 0.0 for an acquisition without scans."""
        scans = self._data().scans
        return scans[0].start_time if scans else 0.0

    def instrument_configuration_ids(self) -> List[str]:
        """Distinct instrument configuration ids in scan order."""
        seen: List[str] = []
        for scan in self._data().scans:
            ref = scan.instrument_configuration_id
            if ref is not None and ref not in seen:
                seen.append(ref)
        return seen

    def scan(self, index: int) -> ScanEvent:
        """
        Return the scan event at ``index``.

        Raises:
            ScanNotFound: If ``index`` is negative or past the last scan.
        """
        scans = self._data().scans
        if not 0 <= index < len(scans):
            raise ScanNotFound(index, len(scans))
        return ScanEvent(self._owner, scans[index], _MINT)

    def first_scan(self) -> ScanEvent:
        return self.scan(0)

    def scans(self) -> List[ScanEvent]:
        return [ScanEvent(self._owner, scan, _MINT) for scan in self._data().scans]

    def __iter__(self) -> Iterator[ScanEvent]:
        return iter(self.scans())

    def __repr__(self):
        if self._owner.is_released:
            return f"{type(self).__name__}(<released>)"
        return f"{type(self).__name__}(scans={self.scan_count()}, start_time={self.start_time()})"
