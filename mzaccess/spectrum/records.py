"""
Owned description records for one scan.

These are the materialized values a source decodes a spectrum into. Callers
never see them directly: they reach them through the views minted by
:class:`~mzaccess.spectrum.spectrum.Spectrum`.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple

from ..config import PROTON_MASS
from ..params import CURIE, Param, ParamDescribed
from .isolation import IsolationWindow


class SignalContinuity(Enum):
    UNKNOWN = "unknown"
    CENTROID = "centroid"
    PROFILE = "profile"


class ScanPolarity(Enum):
    UNKNOWN = 0
    POSITIVE = 1
    NEGATIVE = -1


class ScanCombination(Enum):
    NO_COMBINATION = "no combination"
    SUM = "sum of spectra"
    MEDIAN = "median of spectra"


@dataclass(frozen=True)
class SelectedIon(ParamDescribed):
    """One selected precursor ion. A value type: safe to keep after its spectrum is released."""
    mz: float
    intensity: float = 0.0
    charge: Optional[int] = None
    ion_mobility: Optional[float] = None
    ion_mobility_type: Optional[CURIE] = None
    parameters: Tuple[Param, ...] = ()

    def params(self) -> Sequence[Param]:
        return self.parameters

    @property
    def neutral_mass(self) -> float:
        # An unknown charge is treated as singly charged
        charge = self.charge if self.charge else 1
        return (self.mz - PROTON_MASS) * abs(charge)

    def has_ion_mobility(self) -> bool:
        return self.ion_mobility is not None


@dataclass(frozen=True)
class Activation:
    methods: Tuple[CURIE, ...] = ()
    energy: float = 0.0
    parameters: Tuple[Param, ...] = ()

    def is_combined(self) -> bool:
        return len(self.methods) > 1

    def method(self) -> Optional[CURIE]:
        return self.methods[0] if self.methods else None


@dataclass(frozen=True)
class PrecursorRecord:
    ions: Tuple[SelectedIon, ...] = ()
    isolation_window: IsolationWindow = field(default_factory=IsolationWindow)
    activation: Activation = field(default_factory=Activation)
    precursor_id: Optional[str] = None


@dataclass(frozen=True)
class ScanWindow:
    lower_bound: float
    upper_bound: float


@dataclass(frozen=True)
class ScanEventRecord:
    start_time: float = 0.0  # minutes
    injection_time: float = 0.0  # milliseconds
    instrument_configuration_id: Optional[str] = None
    ion_mobility: Optional[float] = None
    ion_mobility_type: Optional[CURIE] = None
    filter_string: Optional[str] = None
    scan_configuration: Optional[str] = None
    scan_windows: Tuple[ScanWindow, ...] = ()
    parameters: Tuple[Param, ...] = ()


@dataclass(frozen=True)
class AcquisitionRecord:
    scans: Tuple[ScanEventRecord, ...] = ()
    combination: ScanCombination = ScanCombination.NO_COMBINATION
    parameters: Tuple[Param, ...] = ()


@dataclass(frozen=True)
class SpectrumDescription:
    """Everything about one scan except its signal arrays."""
    id: str
    index: int
    ms_level: int = 1
    polarity: ScanPolarity = ScanPolarity.UNKNOWN
    signal_continuity: SignalContinuity = SignalContinuity.UNKNOWN
    parameters: Tuple[Param, ...] = ()
    precursors: Tuple[PrecursorRecord, ...] = ()
    acquisition: AcquisitionRecord = field(default_factory=AcquisitionRecord)

