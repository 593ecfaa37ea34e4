"""
Typed key-value metadata.

A :class:`Param` is an immutable value: once built it can be handed out to any
number of callers without copying, and it stays valid after the record it came
from is released.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..exceptions import ParamValueParseError
from .cv import CURIE, ControlledVocabulary
from .units import Unit


class ValueType(Enum):
    EMPTY = "empty"
    BOOLEAN = "boolean"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BUFFER = "buffer"


_TRUE_TEXT = ("true", "yes", "1")
_FALSE_TEXT = ("false", "no", "0")

# Plain decimal literals only: no digit separators, nan or infinity
_INT_TEXT = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_TEXT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _format_float(value: float) -> str:
    # Integral floats print without a trailing ".0", e.g. "1" for a scan configuration
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def infer_value(raw: Any):
    """Normalize a raw value to a ``(ValueType, value)`` pair.

    Strings are inspected the way they appear in a file: integers and floats
    are recognised, ``"true"``/``"false"`` become booleans, and the empty string
    is an empty value. Subclasses of the builtin types handed over by the
    parser (unit-carrying floats and strings) are reduced to the plain type.
    """
    if raw is None:
        return ValueType.EMPTY, None
    if isinstance(raw, bool):
        return ValueType.BOOLEAN, bool(raw)
    if isinstance(raw, int):
        return ValueType.INT, int(raw)
    if isinstance(raw, float):
        return ValueType.FLOAT, float(raw)
    if isinstance(raw, (bytes, bytearray, memoryview)):
        return ValueType.BUFFER, bytes(raw)

    text = str(raw)
    if not text.strip():
        return ValueType.EMPTY, None
    lowered = text.strip().lower()
    if lowered in ("true", "false"):
        return ValueType.BOOLEAN, lowered == "true"
    if _INT_TEXT.fullmatch(text.strip()):
        return ValueType.INT, int(text)
    if _FLOAT_TEXT.fullmatch(text.strip()):
        return ValueType.FLOAT, float(text)
    return ValueType.STRING, text


@dataclass(frozen=True)
class Param:
    """One metadata field: a name, a typed value, an optional term identity and a unit."""
    name: str
    value: Any = None
    value_type: ValueType = ValueType.EMPTY
    controlled_vocabulary: Optional[ControlledVocabulary] = None
    accession: Optional[int] = None
    unit: Unit = Unit.UNKNOWN

    @classmethod
    def from_raw(
        cls,
        name: str,
        raw: Any,
        curie: Optional[CURIE] = None,
        unit: Unit = Unit.UNKNOWN,
    ) -> "Param":
        value_type, value = infer_value(raw)
        if curie is None:
            return cls(str(name), value, value_type, unit=unit)
        return cls(
            str(name),
            value,
            value_type,
            controlled_vocabulary=curie.controlled_vocabulary,
            accession=curie.accession,
            unit=unit,
        )

    def curie(self) -> Optional[CURIE]:
        if self.controlled_vocabulary is None or self.accession is None:
            return None
        return CURIE(self.controlled_vocabulary, self.accession)

    def is_controlled(self) -> bool:
        return self.accession is not None

    # --- type predicates ---

    def is_empty(self) -> bool:
        return self.value_type is ValueType.EMPTY

    def is_boolean(self) -> bool:
        return self.value_type is ValueType.BOOLEAN

    def is_i64(self) -> bool:
        return self.value_type is ValueType.INT

    def is_f64(self) -> bool:
        return self.value_type is ValueType.FLOAT

    def is_str(self) -> bool:
        return self.value_type is ValueType.STRING

    def is_buffer(self) -> bool:
        return self.value_type is ValueType.BUFFER

    # --- coercions ---

    def _fail(self, requested: str):
        return ParamValueParseError(self.name, requested, self.value)

    def to_bool(self) -> bool:
        """
        Interpret the value as a boolean.

        Raises:
            ParamValueParseError: For empty and buffer values, and for text
                that is not one of true/false/yes/no/1/0.
        """
        if self.value_type is ValueType.BOOLEAN:
            return self.value
        if self.value_type in (ValueType.INT, ValueType.FLOAT):
            return self.value != 0
        if self.value_type is ValueType.STRING:
            lowered = self.value.strip().lower()
            if lowered in _TRUE_TEXT:
                return True
            if lowered in _FALSE_TEXT:
                return False
        raise self._fail("bool")

    def to_i64(self) -> int:
        """
        Interpret the value as an integer. Floats are truncated toward zero.

        Raises:
            ParamValueParseError: When the value is empty, a buffer, a
                non-finite float, or text that is not an integer literal.
        """
        if self.value_type is ValueType.INT:
            return self.value
        if self.value_type is ValueType.BOOLEAN:
            return int(self.value)
        if self.value_type is ValueType.FLOAT:
            if math.isfinite(self.value):
                return int(self.value)
        elif self.value_type is ValueType.STRING:
            if _INT_TEXT.fullmatch(self.value.strip()):
                return int(self.value)
        raise self._fail("int")

    def to_f64(self) -> float:
        """
        Interpret the value as a float.

        Raises:
            ParamValueParseError: When the value is empty, a buffer, or text
                that is not a number.
        """
        if self.value_type in (ValueType.FLOAT, ValueType.INT, ValueType.BOOLEAN):
            return float(self.value)
        if self.value_type is ValueType.STRING:
            if _FLOAT_TEXT.fullmatch(self.value.strip()):
                return float(self.value)
        raise self._fail("float")

    def to_str(self) -> str:
        """Render the value as text. This never fails."""
        if self.value_type is ValueType.EMPTY:
            return ""
        if self.value_type is ValueType.BOOLEAN:
            return "true" if self.value else "false"
        if self.value_type is ValueType.FLOAT:
            return _format_float(self.value)
        if self.value_type is ValueType.BUFFER:
            return self.value.decode("utf-8", errors="replace")
        return str(self.value)

    def to_buffer(self) -> bytes:
        if self.value_type is ValueType.BUFFER:
            return self.value
        if self.value_type is ValueType.STRING:
            return self.value.encode("utf-8")
        raise self._fail("buffer")

    def __str__(self) -> str:
        curie = self.curie()
        head = f"{curie}|{self.name}" if curie is not None else self.name
        if self.is_empty():
            return head
        return f"{head}={self.to_str()}"
