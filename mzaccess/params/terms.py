"""PSI-MS terms the record decoders recognise, keyed by accession and by name."""

from typing import Dict, Optional

from .cv import CURIE, ControlledVocabulary


def _ms(accession: int) -> CURIE:
    return CURIE(ControlledVocabulary.MS, accession)


# Spectrum-level
MS_LEVEL = _ms(1000511)
CENTROID_SPECTRUM = _ms(1000127)
PROFILE_SPECTRUM = _ms(1000128)
NEGATIVE_SCAN = _ms(1000129)
POSITIVE_SCAN = _ms(1000130)

# Scan-level
SCAN_START_TIME = _ms(1000016)
FILTER_STRING = _ms(1000512)
PRESET_SCAN_CONFIGURATION = _ms(1000616)
ION_INJECTION_TIME = _ms(1000927)
SCAN_WINDOW_LOWER_LIMIT = _ms(1000501)
SCAN_WINDOW_UPPER_LIMIT = _ms(1000500)

# Scan combination
NO_COMBINATION = _ms(1000795)
SUM_OF_SPECTRA = _ms(1000571)
MEDIAN_OF_SPECTRA = _ms(1000573)

# Selected ion
SELECTED_ION_MZ = _ms(1000744)
CHARGE_STATE = _ms(1000041)
PEAK_INTENSITY = _ms(1000042)

# Ion mobility values
ION_MOBILITY_DRIFT_TIME = _ms(1002476)
INVERSE_REDUCED_ION_MOBILITY = _ms(1002815)
FAIMS_COMPENSATION_VOLTAGE = _ms(1001581)

# Isolation window
ISOLATION_WINDOW_TARGET_MZ = _ms(1000827)
ISOLATION_WINDOW_LOWER_OFFSET = _ms(1000828)
ISOLATION_WINDOW_UPPER_OFFSET = _ms(1000829)
ISOLATION_WINDOW_LOWER_LIMIT = _ms(1000793)
ISOLATION_WINDOW_UPPER_LIMIT = _ms(1000794)

# Activation
COLLISION_ENERGY = _ms(1000045)
ACTIVATION_ENERGY = _ms(1000509)

# Signal arrays
MZ_ARRAY = _ms(1000514)
INTENSITY_ARRAY = _ms(1000515)
MEAN_ION_MOBILITY_ARRAY = _ms(1002816)
MEAN_ION_MOBILITY_DRIFT_TIME_ARRAY = _ms(1002477)
MEAN_INVERSE_REDUCED_ION_MOBILITY_ARRAY = _ms(1003006)
RAW_ION_MOBILITY_ARRAY = _ms(1003007)
RAW_INVERSE_REDUCED_ION_MOBILITY_ARRAY = _ms(1003008)
RAW_ION_MOBILITY_DRIFT_TIME_ARRAY = _ms(1003153)


TERM_NAMES: Dict[CURIE, str] = {
    MS_LEVEL: "ms level",
    CENTROID_SPECTRUM: "centroid spectrum",
    PROFILE_SPECTRUM: "profile spectrum",
    NEGATIVE_SCAN: "negative scan",
    POSITIVE_SCAN: "positive scan",
    SCAN_START_TIME: "scan start time",
    FILTER_STRING: "filter string",
    PRESET_SCAN_CONFIGURATION: "preset scan configuration",
    ION_INJECTION_TIME: "ion injection time",
    SCAN_WINDOW_LOWER_LIMIT: "scan window lower limit",
    SCAN_WINDOW_UPPER_LIMIT: "scan window upper limit",
    NO_COMBINATION: "no combination",
    SUM_OF_SPECTRA: "sum of spectra",
    MEDIAN_OF_SPECTRA: "median of spectra",
    SELECTED_ION_MZ: "selected ion m/z",
    CHARGE_STATE: "charge state",
    PEAK_INTENSITY: "peak intensity",
    ION_MOBILITY_DRIFT_TIME: "ion mobility drift time",
    INVERSE_REDUCED_ION_MOBILITY: "inverse reduced ion mobility",
    FAIMS_COMPENSATION_VOLTAGE: "FAIMS compensation voltage",
    ISOLATION_WINDOW_TARGET_MZ: "isolation window target m/z",
    ISOLATION_WINDOW_LOWER_OFFSET: "isolation window lower offset",
    ISOLATION_WINDOW_UPPER_OFFSET: "isolation window upper offset",
    ISOLATION_WINDOW_LOWER_LIMIT: "isolation window lower limit",
    ISOLATION_WINDOW_UPPER_LIMIT: "isolation window upper limit",
    COLLISION_ENERGY: "collision energy",
    ACTIVATION_ENERGY: "activation energy",
    MZ_ARRAY: "m/z array",
    INTENSITY_ARRAY: "intensity array",
    MEAN_ION_MOBILITY_ARRAY: "mean ion mobility array",
    MEAN_ION_MOBILITY_DRIFT_TIME_ARRAY: "mean ion mobility drift time array",
    MEAN_INVERSE_REDUCED_ION_MOBILITY_ARRAY: "mean inverse reduced ion mobility array",
    RAW_ION_MOBILITY_ARRAY: "raw ion mobility array",
    RAW_INVERSE_REDUCED_ION_MOBILITY_ARRAY: "raw inverse reduced ion mobility array",
    RAW_ION_MOBILITY_DRIFT_TIME_ARRAY: "raw ion mobility drift time array",
}

# Children of "dissociation method" (MS:1000044)
DISSOCIATION_METHODS: Dict[CURIE, str] = {
    _ms(1000133): "collision-induced dissociation",
    _ms(1000134): "plasma desorption",
    _ms(1000135): "post-source decay",
    _ms(1000136): "surface-induced dissociation",
    _ms(1000242): "blackbody infrared radiative dissociation",
    _ms(1000250): "electron capture dissociation",
    _ms(1000262): "infrared multiphoton dissociation",
    _ms(1000282): "sustained off-resonance irradiation",
    _ms(1000422): "beam-type collision-induced dissociation",
    _ms(1000433): "low-energy collision-induced dissociation",
    _ms(1000435): "photodissociation",
    _ms(1000598): "electron transfer dissociation",
    _ms(1000599): "pulsed q dissociation",
    _ms(1001880): "in-source collision-induced dissociation",
    _ms(1002000): "LIFT",
    _ms(1002472): "trap-type collision-induced dissociation",
    _ms(1002631): "Electron-Transfer/Higher-Energy Collision Dissociation (EThcD)",
    _ms(1002678): "supplemental beam-type collision-induced dissociation",
    _ms(1002679): "supplemental collision-induced dissociation",
    _ms(1003246): "ultraviolet photodissociation",
    _ms(1003247): "negative electron transfer dissociation",
}

_DISSOCIATION_BY_NAME = {name.lower(): curie for curie, name in DISSOCIATION_METHODS.items()}

ION_MOBILITY_VALUE_TERMS = {
    TERM_NAMES[INVERSE_REDUCED_ION_MOBILITY]: INVERSE_REDUCED_ION_MOBILITY,
    TERM_NAMES[ION_MOBILITY_DRIFT_TIME]: ION_MOBILITY_DRIFT_TIME,
    TERM_NAMES[FAIMS_COMPENSATION_VOLTAGE]: FAIMS_COMPENSATION_VOLTAGE,
}

ION_MOBILITY_ARRAY_TERMS = {
    TERM_NAMES[curie]: curie
    for curie in (
        MEAN_INVERSE_REDUCED_ION_MOBILITY_ARRAY,
        MEAN_ION_MOBILITY_ARRAY,
        MEAN_ION_MOBILITY_DRIFT_TIME_ARRAY,
        RAW_INVERSE_REDUCED_ION_MOBILITY_ARRAY,
        RAW_ION_MOBILITY_ARRAY,
        RAW_ION_MOBILITY_DRIFT_TIME_ARRAY,
    )
}


def term_name(curie: CURIE) -> Optional[str]:
    return TERM_NAMES.get(curie) or DISSOCIATION_METHODS.get(curie)


def dissociation_method(name: str, curie: Optional[CURIE] = None) -> Optional[CURIE]:
    """Return the dissociation method term for a param, or ``None`` if it is not one."""
    if curie is not None and curie in DISSOCIATION_METHODS:
        return curie
    return _DISSOCIATION_BY_NAME.get(str(name).lower())
