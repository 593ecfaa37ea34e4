# mzaccess/readers/mzml_decoder.py
"""
Turn pyteomics spectrum dictionaries into owned description records.

pyteomics hands every ``cvParam``/``userParam`` over as a dictionary entry whose
key is a :class:`~pyteomics.auxiliary.cvstr` (carrying the term accession and
unit accession) and whose value is a unit-carrying scalar. Element attributes
(``id``, ``spectrumRef`` ...) are plain ``str`` keys and nested elements are
nested dictionaries or lists of them.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ..exceptions import CURIEParseError
from ..params import CURIE, Param, Unit
from ..params import terms
from ..spectrum.arrays import SignalArrays
from ..spectrum.isolation import IsolationWindow, IsolationWindowState
from ..spectrum.records import (
    AcquisitionRecord,
    Activation,
    PrecursorRecord,
    ScanCombination,
    ScanEventRecord,
    ScanPolarity,
    ScanWindow,
    SelectedIon,
    SignalContinuity,
    SpectrumDescription,
)

_COMBINATIONS = {
    terms.NO_COMBINATION: ScanCombination.NO_COMBINATION,
    terms.SUM_OF_SPECTRA: ScanCombination.SUM,
    terms.MEDIAN_OF_SPECTRA: ScanCombination.MEDIAN,
}

_ARRAY_NAMES = {name.lower(): curie for name, curie in terms.ION_MOBILITY_ARRAY_TERMS.items()}


def _as_list(value) -> list:
    if value is None:
        return []
    if isinstance(value, dict):
        return [value]
    return list(value)


def _children(entries: Dict, container: str, item: str) -> List[Dict]:
    """Items of a ``<fooList><foo/></fooList>`` nesting, tolerating a missing list."""
    holder = entries.get(container)
    if holder is None:
        return []
    if isinstance(holder, dict):
        return _as_list(holder.get(item))
    return _as_list(holder)


def _is_scalar(value) -> bool:
    return not isinstance(value, (dict, list, tuple, np.ndarray))


def _key_curie(key) -> Optional[CURIE]:
    accession = getattr(key, "accession", None)
    if not accession:
        return None
    try:
        return CURIE.parse(accession)
    except CURIEParseError:
        logging.debug(f"Ignoring malformed accession {accession!r} on {key!r}")
        return None


def _key_unit(key, value) -> Unit:
    unit_text = getattr(key, "unit_accession", None) or getattr(value, "unit_info", None)
    return Unit.parse(unit_text)


def _is_param_key(key) -> bool:
    # Attributes come through as plain str, params as cvstr
    return hasattr(key, "accession")


def params_of(entries: Dict) -> Tuple[Param, ...]:
    """Collect the ``cvParam``/``userParam`` entries of one element."""
    params = []
    for key, value in entries.items():
        if not _is_param_key(key) or not _is_scalar(value):
            continue
        params.append(Param.from_raw(str(key), value, curie=_key_curie(key), unit=_key_unit(key, value)))
    return tuple(params)


def _find(params: Tuple[Param, ...], curie: CURIE) -> Optional[Param]:
    name = terms.term_name(curie)
    for param in params:
        if param.curie() == curie:
            return param
    for param in params:
        if param.name == name:
            return param
    return None


def _find_f64(params: Tuple[Param, ...], curie: CURIE) -> Optional[float]:
    param = _find(params, curie)
    if param is None or param.is_empty():
        return None
    return param.to_f64()


def _to_minutes(param: Param) -> float:
    value = param.to_f64()
    if param.unit is Unit.SECOND:
        logging.debug(f"Converting {param.name} from seconds to minutes")
        return value / 60.0
    if param.unit is Unit.MILLISECOND:
        return value / 60000.0
    return value


def _ion_mobility(params: Tuple[Param, ...]) -> Tuple[Optional[float], Optional[CURIE]]:
    for curie in terms.ION_MOBILITY_VALUE_TERMS.values():
        value = _find_f64(params, curie)
        if value is not None:
            return value, curie
    return None, None


def decode_selected_ion(entries: Dict) -> SelectedIon:
    params = params_of(entries)
    charge = _find(params, terms.CHARGE_STATE)
    ion_mobility, ion_mobility_type = _ion_mobility(params)
    return SelectedIon(
        mz=_find_f64(params, terms.SELECTED_ION_MZ) or 0.0,
        intensity=_find_f64(params, terms.PEAK_INTENSITY) or 0.0,
        charge=charge.to_i64() if charge is not None and not charge.is_empty() else None,
        ion_mobility=ion_mobility,
        ion_mobility_type=ion_mobility_type,
        parameters=params,
    )


def decode_isolation_window(entries: Optional[Dict]) -> IsolationWindow:
    """
    Rebuild an isolation window from whichever terms were recorded.

    Target plus offsets gives an ``OFFSET`` window, absolute limits alone give
    ``EXPLICIT`` and both forms together give ``COMPLETE``. Bounds that were not
    recorded fall back to the target.
    """
    if not entries:
        return IsolationWindow()
    params = params_of(entries)
    target = _find_f64(params, terms.ISOLATION_WINDOW_TARGET_MZ)
    lower_offset = _find_f64(params, terms.ISOLATION_WINDOW_LOWER_OFFSET)
    upper_offset = _find_f64(params, terms.ISOLATION_WINDOW_UPPER_OFFSET)
    lower_limit = _find_f64(params, terms.ISOLATION_WINDOW_LOWER_LIMIT)
    upper_limit = _find_f64(params, terms.ISOLATION_WINDOW_UPPER_LIMIT)

    has_offsets = any(value is not None for value in (target, lower_offset, upper_offset))
    has_limits = lower_limit is not None or upper_limit is not None
    if not has_offsets and not has_limits:
        return IsolationWindow()

    if target is None:
        if lower_limit is not None and upper_limit is not None:
            target = (lower_limit + upper_limit) / 2.0
        else:
            target = lower_limit if lower_limit is not None else (upper_limit or 0.0)

    lower = target - (lower_offset or 0.0)
    upper = target + (upper_offset or 0.0)
    if lower_limit is not None:
        lower = lower_limit
    if upper_limit is not None:
        upper = upper_limit

    if has_offsets and has_limits:
        state = IsolationWindowState.COMPLETE
    elif has_limits:
        state = IsolationWindowState.EXPLICIT
    else:
        state = IsolationWindowState.OFFSET
    return IsolationWindow(target, lower, upper, state)


def decode_activation(entries: Optional[Dict]) -> Activation:
    if not entries:
        return Activation()
    methods = []
    others = []
    for param in params_of(entries):
        method = terms.dissociation_method(param.name, param.curie())
        if method is not None:
            methods.append(method)
        else:
            others.append(param)
    others = tuple(others)
    energy = _find_f64(others, terms.COLLISION_ENERGY)
    if energy is None:
        energy = _find_f64(others, terms.ACTIVATION_ENERGY)
    return Activation(methods=tuple(methods), energy=energy or 0.0, parameters=others)


def decode_precursor(entries: Dict) -> PrecursorRecord:
    ions = tuple(
        decode_selected_ion(ion) for ion in _children(entries, "selectedIonList", "selectedIon")
    )
    return PrecursorRecord(
        ions=ions,
        isolation_window=decode_isolation_window(entries.get("isolationWindow")),
        activation=decode_activation(entries.get("activation")),
        precursor_id=entries.get("spectrumRef"),
    )


def decode_scan(entries: Dict) -> ScanEventRecord:
    params = params_of(entries)
    start_time = _find(params, terms.SCAN_START_TIME)
    filter_string = _find(params, terms.FILTER_STRING)
    configuration = _find(params, terms.PRESET_SCAN_CONFIGURATION)
    ion_mobility, ion_mobility_type = _ion_mobility(params)

    windows = []
    for window in _children(entries, "scanWindowList", "scanWindow"):
        window_params = params_of(window)
        windows.append(
            ScanWindow(
                _find_f64(window_params, terms.SCAN_WINDOW_LOWER_LIMIT) or 0.0,
                _find_f64(window_params, terms.SCAN_WINDOW_UPPER_LIMIT) or 0.0,
            )
        )

    return ScanEventRecord(
        start_time=_to_minutes(start_time) if start_time is not None else 0.0,
        injection_time=_find_f64(params, terms.ION_INJECTION_TIME) or 0.0,
        instrument_configuration_id=entries.get("instrumentConfigurationRef"),
        ion_mobility=ion_mobility,
        ion_mobility_type=ion_mobility_type,
        filter_string=filter_string.to_str() if filter_string is not None else None,
        scan_configuration=configuration.to_str() if configuration is not None else None,
        scan_windows=tuple(windows),
        parameters=params,
    )


def decode_acquisition(entries: Optional[Dict]) -> AcquisitionRecord:
    if not entries:
        return AcquisitionRecord()
    params = params_of(entries)
    combination = ScanCombination.NO_COMBINATION
    for curie, kind in _COMBINATIONS.items():
        if _find(params, curie) is not None:
            combination = kind
            break
    scans = tuple(decode_scan(scan) for scan in _as_list(entries.get("scan")))
    return AcquisitionRecord(scans=scans, combination=combination, parameters=params)


def decode_arrays(raw: Dict[str, Any]) -> SignalArrays:
    ion_mobility = None
    ion_mobility_type = None
    for key, value in raw.items():
        curie = _ARRAY_NAMES.get(str(key).lower())
        if curie is not None and value is not None:
            ion_mobility, ion_mobility_type = value, curie
            break
    return SignalArrays.build(
        raw.get("m/z array"),
        raw.get("intensity array"),
        ion_mobility=ion_mobility,
        ion_mobility_type=ion_mobility_type,
    )


def decode_spectrum(raw: Dict[str, Any], index: int) -> Tuple[SpectrumDescription, SignalArrays]:
    """
    Decode one pyteomics mzML spectrum dictionary.

    Args:
        raw: Dictionary returned by ``pyteomics.mzml.MzML``
        index: 0-based position of the spectrum in the file

    Returns:
        Tuple of (description, signal arrays)
    """
    params = params_of(raw)

    ms_level_param = _find(params, terms.MS_LEVEL)
    ms_level = 1
    if ms_level_param is not None and not ms_level_param.is_empty():
        ms_level = ms_level_param.to_i64()

    polarity = ScanPolarity.UNKNOWN
    if _find(params, terms.POSITIVE_SCAN) is not None:
        polarity = ScanPolarity.POSITIVE
    elif _find(params, terms.NEGATIVE_SCAN) is not None:
        polarity = ScanPolarity.NEGATIVE

    continuity = SignalContinuity.UNKNOWN
    if _find(params, terms.CENTROID_SPECTRUM) is not None:
        continuity = SignalContinuity.CENTROID
    elif _find(params, terms.PROFILE_SPECTRUM) is not None:
        continuity = SignalContinuity.PROFILE

    precursors = tuple(
        decode_precursor(precursor) for precursor in _children(raw, "precursorList", "precursor")
    )

    description = SpectrumDescription(
        id=str(raw.get("id", "")),
        index=index,
        ms_level=ms_level,
        polarity=polarity,
        signal_continuity=continuity,
        parameters=params,
        precursors=precursors,
        acquisition=decode_acquisition(raw.get("scanList")),
    )
    return description, decode_arrays(raw)
