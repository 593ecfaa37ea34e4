from .arrays import SignalArrays
from .frame import IonMobilityFrame
from .isolation import IsolationWindow, IsolationWindowState
from .records import (
    Activation,
    AcquisitionRecord,
    PrecursorRecord,
    ScanCombination,
    ScanEventRecord,
    ScanPolarity,
    ScanWindow,
    SelectedIon,
    SignalContinuity,
    SpectrumDescription,
)
from .spectrum import MSRecord, Spectrum
from .views import Acquisition, Precursor, ScanEvent

__all__ = [
    'Acquisition',
    'AcquisitionRecord',
    'Activation',
    'IonMobilityFrame',
    'IsolationWindow',
    'IsolationWindowState',
    'MSRecord',
    'Precursor',
    'PrecursorRecord',
    'ScanCombination',
    'ScanEvent',
    'ScanEventRecord',
    'ScanPolarity',
    'ScanWindow',
    'SelectedIon',
    'SignalArrays',
    'SignalContinuity',
    'Spectrum',
    'SpectrumDescription',
]
