"""Signal arrays owned by one record."""

from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from ..config import INTENSITY_DTYPE, ION_MOBILITY_DTYPE, MZ_DTYPE
from ..params import CURIE


def _frozen(values, dtype) -> NDArray:
    data = np.array(values if values is not None else [], dtype=dtype)
    data.flags.writeable = False
    return data


@dataclass(frozen=True, eq=False)
class SignalArrays:
    """Parallel m/z, intensity and (optionally) ion mobility arrays.

    The arrays are copied on construction and made read-only, so nothing the
    source holds on to can change a record after it is built.

    Raises:
        ValueError: If the arrays are not the same length.
    """
    mzs: NDArray[np.float64]
    intensities: NDArray[np.float32]
    ion_mobility: Optional[NDArray[np.float64]] = None
    ion_mobility_type: Optional[CURIE] = None

    @classmethod
    def build(cls, mzs=None, intensities=None, ion_mobility=None, ion_mobility_type=None):
        mz_array = _frozen(mzs, MZ_DTYPE)
        intensity_array = _frozen(intensities, INTENSITY_DTYPE)
        if len(mz_array) != len(intensity_array):
            raise ValueError(
                f"m/z and intensity arrays differ in length: {len(mz_array)} != {len(intensity_array)}"
            )
        im_array = None
        if ion_mobility is not None:
            im_array = _frozen(ion_mobility, ION_MOBILITY_DTYPE)
            if len(im_array) != len(mz_array):
                raise ValueError(
                    f"Ion mobility array length {len(im_array)} does not match {len(mz_array)} points"
                )
        return cls(mz_array, intensity_array, im_array, ion_mobility_type)

    @classmethod
    def empty(cls) -> "SignalArrays":
        return cls.build()

    def __len__(self) -> int:
        return len(self.mzs)

    def has_ion_mobility(self) -> bool:
        return self.ion_mobility is not None
