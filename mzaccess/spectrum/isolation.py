"""Isolation windows around a precursor target."""

from dataclasses import dataclass
from enum import Enum


class IsolationWindowState(Enum):
    """How much of a window was actually recorded in the file.

    ``UNKNOWN`` means nothing was recorded. ``OFFSET`` means the bounds were
    derived from a target and offsets. ``EXPLICIT`` means the bounds were
    written as absolute limits. ``COMPLETE`` means both forms were present.
    """

    UNKNOWN = "unknown"
    OFFSET = "offset"
    EXPLICIT = "explicit"
    COMPLETE = "complete"


@dataclass(frozen=True)
class IsolationWindow:
    """The closed m/z interval ``[lower_bound, upper_bound]`` admitted around ``target``."""
    target: float = 0.0
    lower_bound: float = 0.0
    upper_bound: float = 0.0
    state: IsolationWindowState = IsolationWindowState.UNKNOWN

    @classmethod
    def around(cls, target: float, lower_offset: float, upper_offset: float) -> "IsolationWindow":
        return cls(
            target,
            target - lower_offset,
            target + upper_offset,
            IsolationWindowState.OFFSET,
        )

    def contains(self, point: float) -> bool:
        return self.lower_bound <= point <= self.upper_bound

    def __contains__(self, point: float) -> bool:
        return self.contains(point)

    def is_valid(self) -> bool:
        """Whether any isolation information was recorded."""
        return self.state is not IsolationWindowState.UNKNOWN

    def is_empty(self) -> bool:
        """True when the window carries no data.

        A window recorded with zero width is not empty: it still reports a
        state other than ``UNKNOWN``.
        """
        return (
            self.state is IsolationWindowState.UNKNOWN
            and self.lower_bound == self.target
            and self.upper_bound == self.target
        )

    def width(self) -> float:
        return self.upper_bound - self.lower_bound
