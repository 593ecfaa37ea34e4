"""
Top-level records handed out by a reader.

A record owns its description and signal arrays and is independent of the
reader once produced. Views minted from it (:class:`Precursor`,
:class:`Acquisition`, :class:`ScanEvent`) stay usable until :meth:`release`
is called, after which they raise :class:`ReleasedHandleError`.
"""

from typing import Any, List, Optional, Sequence

from ..boundary import ensure_growable, extend_into
from ..exceptions import ReleasedHandleError
from ..params import Param, ParamDescribed
from .arrays import SignalArrays
from .records import ScanPolarity, SignalContinuity, SpectrumDescription
from .views import _MINT, Acquisition, Precursor


class MSRecord(ParamDescribed):
    """Description accessors and ownership shared by spectra and ion mobility frames."""

    def __init__(self, description: SpectrumDescription, check_liveness: bool = True):
        self._description = description
        self._check_liveness = check_liveness
        self._released = False

    # --- ownership ---

    @property
    def is_released(self) -> bool:
        return self._released

    def _ensure_alive(self) -> None:
        if self._released and self._check_liveness:
            raise ReleasedHandleError(
                f"{type(self).__name__} {self._description.id!r} was released; "
                "views borrowed from it are no longer valid"
            )

    def release(self) -> None:
        """Release the record. Views borrowed from it become invalid."""
        self._released = True

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit releases the record."""
        self.release()

    # --- description ---

    def id(self) -> str:
        self._ensure_alive()
        return self._description.id

    native_id = id

    def index(self) -> int:
        self._ensure_alive()
        return self._description.index

    def ms_level(self) -> int:
        self._ensure_alive()
        return self._description.ms_level

    def polarity(self) -> ScanPolarity:
        self._ensure_alive()
        return self._description.polarity

    def signal_continuity(self) -> SignalContinuity:
        self._ensure_alive()
        return self._description.signal_continuity

    def is_profile(self) -> bool:
        return self.signal_continuity() is SignalContinuity.PROFILE

    def start_time(self) -> float:
        """Start time of the first scan, in minutes."""
        return self.acquisition().start_time()

    def params(self) -> Sequence[Param]:
        self._ensure_alive()
        return self._description.parameters

    # --- view factories ---

    def precursor(self) -> Optional[Precursor]:
        """The first precursor, or ``None`` for a spectrum without one (e.g. MS1)."""
        self._ensure_alive()
        precursors = self._description.precursors
        if not precursors:
            return None
        return Precursor(self, precursors[0], _MINT)

    def precursors(self) -> List[Precursor]:
        self._ensure_alive()
        return [Precursor(self, record, _MINT) for record in self._description.precursors]

    def acquisition(self) -> Acquisition:
        self._ensure_alive()
        return Acquisition(self, self._description.acquisition, _MINT)

    def __repr__(self):
        if self._released:
            return f"{type(self).__name__}(id={self._description.id!r}, <released>)"
        return (
            f"{type(self).__name__}(id={self._description.id!r}, index={self._description.index}, "
            f"ms_level={self._description.ms_level})"
        )


class Spectrum(MSRecord):
    """One MS scan: description metadata plus its m/z and intensity arrays."""

    def __init__(
        self,
        description: SpectrumDescription,
        arrays: Optional[SignalArrays] = None,
        check_liveness: bool = True,
    ):
        super().__init__(description, check_liveness)
        self._arrays = arrays if arrays is not None else SignalArrays.empty()

    @property
    def arrays(self) -> SignalArrays:
        self._ensure_alive()
        return self._arrays

    def peak_count(self) -> int:
        self._ensure_alive()
        return len(self._arrays)

    def __len__(self) -> int:
        return self.peak_count()

    def mzs_into(self, container: Any) -> None:
        """Append every m/z value to ``container``. Existing contents are kept."""
        self._ensure_alive()
        extend_into(container, self._arrays.mzs)

    def intensities_into(self, container: Any) -> None:
        """Append every intensity value to ``container``. Existing contents are kept."""
        self._ensure_alive()
        extend_into(container, self._arrays.intensities)

    def signal_into(self, mzs: Any, intensities: Any) -> None:
        """Append m/z and intensity values in lock-step, index for index.

        Both containers are checked before either is written, so a bad second
        container leaves the first untouched.
        """
        self._ensure_alive()
        ensure_growable(mzs)
        ensure_growable(intensities)
        extend_into(mzs, self._arrays.mzs)
        extend_into(intensities, self._arrays.intensities)

    def has_ion_mobility(self) -> bool:
        self._ensure_alive()
        return self._arrays.has_ion_mobility()
