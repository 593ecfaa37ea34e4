"""Shared in-memory records for spectrum tests."""

import numpy as np
import pytest

from mzaccess.params import CURIE, Param, Unit
from mzaccess.params import terms
from mzaccess.spectrum import (
    AcquisitionRecord,
    Activation,
    IsolationWindow,
    PrecursorRecord,
    ScanEventRecord,
    ScanPolarity,
    SelectedIon,
    SignalArrays,
    SignalContinuity,
    Spectrum,
    SpectrumDescription,
)

CID = CURIE.parse("MS:1000133")


@pytest.fixture
def ms2_description():
    """An MS2 description with one precursor and one scan."""
    ion = SelectedIon(mz=810.79, intensity=1.2e5, charge=2)
    precursor = PrecursorRecord(
        ions=(ion,),
        isolation_window=IsolationWindow.around(810.79, 1.0, 1.0),
        activation=Activation(methods=(CID,), energy=35.0),
        precursor_id="scan=1",
    )
    scan = ScanEventRecord(
        start_time=1.5,
        injection_time=20.0,
        instrument_configuration_id="IC1",
        filter_string="ITMS + c NSI d Full ms2 810.79@cid35.00",
        scan_configuration="2",
        parameters=(
            Param.from_raw("scan start time", 1.5, curie=terms.SCAN_START_TIME, unit=Unit.MINUTE),
        ),
    )
    return SpectrumDescription(
        id="scan=2",
        index=1,
        ms_level=2,
        polarity=ScanPolarity.POSITIVE,
        signal_continuity=SignalContinuity.CENTROID,
        parameters=(
            Param.from_raw("ms level", 2, curie=terms.MS_LEVEL),
            Param.from_raw("centroid spectrum", "", curie=terms.CENTROID_SPECTRUM),
        ),
        precursors=(precursor,),
        acquisition=AcquisitionRecord(scans=(scan,)),
    )


@pytest.fixture
def ms2_spectrum(ms2_description):
    arrays = SignalArrays.build([100.0, 200.5, 300.25], [10.0, 20.0, 30.0])
    return Spectrum(ms2_description, arrays)


@pytest.fixture
def ms1_spectrum():
    description = SpectrumDescription(id="scan=1", index=0)
    return Spectrum(description, SignalArrays.build([150.0], [5.0]))


@pytest.fixture
def mobility_spectrum():
    """Six points spread over three mobility values, deliberately unsorted."""
    description = SpectrumDescription(id="frame=1", index=0)
    arrays = SignalArrays.build(
        mzs=[300.0, 100.0, 200.0, 150.0, 250.0, 120.0],
        intensities=[3.0, 1.0, 2.0, 1.5, 2.5, 1.2],
        ion_mobility=np.array([0.9, 0.8, 0.9, 1.1, 0.8, 0.8]),
        ion_mobility_type=CURIE.parse("MS:1003006"),
    )
    return Spectrum(description, arrays)
