# tests/unit/spectrum/test_spectrum.py

"""Tests for Spectrum ownership, accessors and bulk transfer."""

from array import array

import numpy as np
import pytest

from mzaccess.exceptions import ReleasedHandleError
from mzaccess.spectrum import (
    ScanPolarity,
    SignalArrays,
    SignalContinuity,
    Spectrum,
    SpectrumDescription,
)


class TestSpectrumAccessors:
    """Test description accessors."""

    def test_description(self, ms2_spectrum):
        assert ms2_spectrum.id() == "scan=2"
        assert ms2_spectrum.native_id() == "scan=2"
        assert ms2_spectrum.index() == 1
        assert ms2_spectrum.ms_level() == 2
        assert ms2_spectrum.polarity() is ScanPolarity.POSITIVE
        assert ms2_spectrum.signal_continuity() is SignalContinuity.CENTROID
        assert not ms2_spectrum.is_profile()
        assert ms2_spectrum.start_time() == 1.5

    def test_params(self, ms2_spectrum):
        assert ms2_spectrum.get_param_by_curie("MS:1000511").to_i64() == 2
        assert ms2_spectrum.get_param_by_name("centroid spectrum").is_empty()

    def test_ms1_has_no_precursor(self, ms1_spectrum):
        assert ms1_spectrum.precursor() is None
        assert ms1_spectrum.precursors() == []

    def test_peak_count(self, ms2_spectrum):
        assert ms2_spectrum.peak_count() == 3
        assert len(ms2_spectrum) == 3

    def test_arrays_are_read_only(self, ms2_spectrum):
        with pytest.raises(ValueError):
            ms2_spectrum.arrays.mzs[0] = 1.0

    def test_mismatched_arrays_rejected(self):
        with pytest.raises(ValueError, match="differ in length"):
            SignalArrays.build([1.0, 2.0], [1.0])


class TestSignalInto:
    """Test transfer into caller-owned buffers."""

    def test_list_buffers_are_appended(self, ms2_spectrum):
        mzs = [0.0]
        ms2_spectrum.mzs_into(mzs)

        assert mzs == [0.0, 100.0, 200.5, 300.25]

    def test_array_buffers(self, ms2_spectrum):
        mzs = array("d")
        intensities = array("f")
        ms2_spectrum.signal_into(mzs, intensities)

        assert list(mzs) == [100.0, 200.5, 300.25]
        assert list(intensities) == [10.0, 20.0, 30.0]

    def test_signal_into_matches_separate_transfers(self, ms2_spectrum):
        mzs, intensities = [], []
        ms2_spectrum.signal_into(mzs, intensities)

        separate_mzs, separate_intensities = [], []
        ms2_spectrum.mzs_into(separate_mzs)
        ms2_spectrum.intensities_into(separate_intensities)

        reversed_mzs, reversed_intensities = [], []
        ms2_spectrum.intensities_into(reversed_intensities)
        ms2_spectrum.mzs_into(reversed_mzs)

        assert mzs == separate_mzs == reversed_mzs == [100.0, 200.5, 300.25]
        assert intensities == separate_intensities == reversed_intensities == [10.0, 20.0, 30.0]
        assert list(zip(mzs, intensities)) == list(
            zip(ms2_spectrum.arrays.mzs.tolist(), ms2_spectrum.arrays.intensities.tolist())
        )

    def test_repeated_fresh_reads_are_identical(self, ms2_spectrum):
        reads = []
        for _ in range(3):
            mzs, intensities = array("d"), array("f")
            ms2_spectrum.signal_into(mzs, intensities)
            reads.append((list(mzs), list(intensities)))

        assert reads[0] == reads[1] == reads[2]

    def test_repeated_reads_accumulate(self, ms2_spectrum):
        mzs, intensities = [], []
        ms2_spectrum.signal_into(mzs, intensities)
        ms2_spectrum.signal_into(mzs, intensities)

        assert mzs == [100.0, 200.5, 300.25] * 2
        assert intensities == [10.0, 20.0, 30.0] * 2

    def test_bad_second_buffer_leaves_first_untouched(self, ms2_spectrum):
        mzs = []
        with pytest.raises(TypeError):
            ms2_spectrum.signal_into(mzs, np.zeros(3))

        assert mzs == []

    def test_empty_spectrum_leaves_buffer_unchanged(self):
        empty = Spectrum(SpectrumDescription(id="empty", index=0))
        mzs = [1.0]
        empty.mzs_into(mzs)

        assert mzs == [1.0]


class TestRelease:
    """Test that views do not outlive their record."""

    def test_views_fail_after_release(self, ms2_spectrum):
        precursor = ms2_spectrum.precursor()
        acquisition = ms2_spectrum.acquisition()
        scan = acquisition.first_scan()

        ms2_spectrum.release()

        assert ms2_spectrum.is_released
        with pytest.raises(ReleasedHandleError, match="was released"):
            precursor.selected_mz()
        with pytest.raises(ReleasedHandleError):
            scan.start_time()
        with pytest.raises(ReleasedHandleError):
            acquisition.scan_count()
        with pytest.raises(ReleasedHandleError):
            ms2_spectrum.mzs_into([])

    def test_selected_ion_values_survive_release(self, ms2_spectrum):
        ion = ms2_spectrum.precursor().selected_ion()
        ms2_spectrum.release()

        assert ion.mz == pytest.approx(810.79)

    def test_context_manager_releases(self, ms2_spectrum):
        with ms2_spectrum as spectrum:
            precursor = spectrum.precursor()

        with pytest.raises(ReleasedHandleError):
            precursor.selected_charge()

    def test_liveness_check_can_be_disabled(self, ms2_description):
        spectrum = Spectrum(ms2_description, check_liveness=False)
        precursor = spectrum.precursor()
        spectrum.release()

        assert precursor.selected_charge() == 2
