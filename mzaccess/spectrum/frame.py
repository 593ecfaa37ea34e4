"""
Ion mobility frames: a spectrum resolved along a second, mobility axis.
"""

import logging
from typing import Any, Optional

import numpy as np
from numpy.typing import NDArray

from ..boundary import ensure_growable, extend_into
from ..exceptions import ArrayRetrievalError
from ..params import CURIE
from .arrays import SignalArrays
from .records import SpectrumDescription
from .spectrum import MSRecord, Spectrum


class IonMobilityFrame(MSRecord):
    """A frame of (m/z, intensity) slices indexed by ion mobility value.

    The mobility dimension is the sorted set of distinct mobility values in
    the frame. Slice ``i`` holds the points measured at
    ``ion_mobility_dimension()[i]``, ordered by m/z.
    """

    def __init__(
        self,
        description: SpectrumDescription,
        arrays: SignalArrays,
        check_liveness: bool = True,
    ):
        super().__init__(description, check_liveness)
        if not arrays.has_ion_mobility():
            raise ArrayRetrievalError(
                f"Record {description.id!r} has no ion mobility array to build a frame from"
            )
        self._ion_mobility_type = arrays.ion_mobility_type

        # Group points by mobility value, then by m/z within each slice
        order = np.lexsort((arrays.mzs, arrays.ion_mobility))
        mobility = arrays.ion_mobility[order]
        self._mzs = arrays.mzs[order]
        self._intensities = arrays.intensities[order]
        self._dimension, starts = np.unique(mobility, return_index=True)
        self._bounds = np.append(starts, len(mobility))
        self._dimension.flags.writeable = False
        logging.debug(
            f"Built frame {description.id!r}: {len(mobility)} points over {len(self._dimension)} mobility slices"
        )

    @classmethod
    def from_spectrum(cls, spectrum: Spectrum) -> "IonMobilityFrame":
        """
        Regroup a spectrum carrying an ion mobility array into a frame.

        Raises:
            ArrayRetrievalError: If the spectrum has no ion mobility array
            ReleasedHandleError: If the spectrum was already released
        """
        spectrum._ensure_alive()
        return cls(spectrum._description, spectrum._arrays, spectrum._check_liveness)

    def ion_mobility_type(self) -> Optional[CURIE]:
        self._ensure_alive()
        return self._ion_mobility_type

    def ion_mobility_dimension(self) -> NDArray[np.float64]:
        """Read-only array of the distinct mobility values, ascending."""
        self._ensure_alive()
        return self._dimension

    def ion_mobility_dimension_into(self, container: Any) -> None:
        self._ensure_alive()
        extend_into(container, self._dimension)

    def num_ion_mobility_points(self) -> int:
        self._ensure_alive()
        return len(self._dimension)

    def __len__(self) -> int:
        return self.num_ion_mobility_points()

    def signal_at_ion_mobility_index_into(
        self, index: int, mzs: Any, intensities: Any
    ) -> Optional[float]:
        """Append slice ``index``'s m/z and intensity values and return its mobility value.

        An ``index`` outside ``[0, num_ion_mobility_points())`` is a no-op: both
        buffers are left as they were and ``None`` is returned. Callers bound-check
        against the dimension length themselves.
        """
        self._ensure_alive()
        if not 0 <= index < len(self._dimension):
            return None
        ensure_growable(mzs)
        ensure_growable(intensities)
        start, stop = self._bounds[index], self._bounds[index + 1]
        extend_into(mzs, self._mzs[start:stop])
        extend_into(intensities, self._intensities[start:stop])
        return float(self._dimension[index])
