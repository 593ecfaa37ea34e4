"""
mzaccess - Accessor layer over parsed mass spectrometry runs.

Open an mzML or MGF file with :func:`open` and read spectra sequentially or by
index. Each spectrum exposes its precursors, acquisition and scan events as
views, plus its signal arrays, which can be copied into caller-owned buffers.
"""

from . import readers  # This triggers reader registrations  # noqa: F401
from .config import ReaderConfig
from .exceptions import (
    ArrayRetrievalError,
    CURIEParseError,
    MzAccessError,
    NotFoundError,
    ParamValueParseError,
    ReaderClosedError,
    ReaderOpenError,
    ReleasedHandleError,
    ScanNotFound,
    SpectrumNotFound,
)
from .logging_config import setup_logging
from .metadata import RunMetadata
from .params import CURIE, ControlledVocabulary, Param, ParamDescribed, Unit, ValueType
from .reader import MZReader, open
from .spectrum import (
    Acquisition,
    IonMobilityFrame,
    IsolationWindow,
    IsolationWindowState,
    Precursor,
    ScanCombination,
    ScanEvent,
    ScanPolarity,
    SelectedIon,
    SignalContinuity,
    Spectrum,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "open",
    "MZReader",
    "ReaderConfig",
    "RunMetadata",
    "setup_logging",
    "Acquisition",
    "IonMobilityFrame",
    "IsolationWindow",
    "IsolationWindowState",
    "Precursor",
    "ScanCombination",
    "ScanEvent",
    "ScanPolarity",
    "SelectedIon",
    "SignalContinuity",
    "Spectrum",
    "CURIE",
    "ControlledVocabulary",
    "Param",
    "ParamDescribed",
    "Unit",
    "ValueType",
    "ArrayRetrievalError",
    "CURIEParseError",
    "MzAccessError",
    "NotFoundError",
    "ParamValueParseError",
    "ReaderClosedError",
    "ReaderOpenError",
    "ReleasedHandleError",
    "ScanNotFound",
    "SpectrumNotFound",
]
