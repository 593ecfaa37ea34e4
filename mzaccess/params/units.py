"""Units attached to parameter values."""

from enum import Enum
from typing import Optional

from .cv import CURIE, ControlledVocabulary

_MS = ControlledVocabulary.MS
_UO = ControlledVocabulary.UO


class Unit(Enum):
    UNKNOWN = "unknown"
    MZ = "m/z"
    MASS = "dalton"
    PARTS_PER_MILLION = "parts per million"
    NANOMETER = "nanometer"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"
    VOLT_SECOND_PER_SQUARE_CENTIMETER = "volt-second per square centimeter"
    ELECTRONVOLT = "electronvolt"
    PERCENT = "percent"
    COUNT = "count"
    DETECTOR_COUNTS = "number of detector counts"
    DIMENSIONLESS = "dimensionless unit"

    def curie(self) -> Optional[CURIE]:
        return _UNIT_CURIES.get(self)

    @classmethod
    def from_curie(cls, curie: Optional[CURIE]) -> "Unit":
        if curie is None:
            return cls.UNKNOWN
        return _CURIE_UNITS.get(curie, cls.UNKNOWN)

    @classmethod
    def from_name(cls, name: Optional[str]) -> "Unit":
        if not name:
            return cls.UNKNOWN
        key = name.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        return cls.UNKNOWN

    @classmethod
    def parse(cls, text: Optional[str]) -> "Unit":
        """Accept either a unit accession (``"UO:0000031"``) or a unit name (``"minute"``)."""
        if not text:
            return cls.UNKNOWN
        text = str(text)
        prefix = text.partition(":")[0]
        if prefix in ("UO", "MS") and text[len(prefix) + 1:].isdigit():
            return cls.from_curie(CURIE.parse(text))
        return cls.from_name(text)


_UNIT_CURIES = {
    Unit.MZ: CURIE(_MS, 1000040),
    Unit.MASS: CURIE(_UO, 221),
    Unit.PARTS_PER_MILLION: CURIE(_UO, 169),
    Unit.NANOMETER: CURIE(_UO, 18),
    Unit.MINUTE: CURIE(_UO, 31),
    Unit.SECOND: CURIE(_UO, 10),
    Unit.MILLISECOND: CURIE(_UO, 28),
    Unit.VOLT_SECOND_PER_SQUARE_CENTIMETER: CURIE(_MS, 1002814),
    Unit.ELECTRONVOLT: CURIE(_UO, 266),
    Unit.PERCENT: CURIE(_UO, 187),
    Unit.COUNT: CURIE(_UO, 189),
    Unit.DETECTOR_COUNTS: CURIE(_MS, 1000131),
    Unit.DIMENSIONLESS: CURIE(_UO, 186),
}

_CURIE_UNITS = {curie: unit for unit, curie in _UNIT_CURIES.items()}
