"""
Bulk transfer of signal arrays into caller-owned buffers.

Every ``*_into`` accessor funnels through :func:`extend_into`. The callee only
appends, never clears, and keeps no reference to the container afterwards.
"""

from array import array
from typing import Any

import numpy as np
from numpy.typing import NDArray

_ARRAY_TYPECODES = ("f", "d")


def ensure_growable(container: Any) -> None:
    """
    Check that ``container`` can be appended to.

    Accepted: ``array.array`` with a ``'f'`` or ``'d'`` typecode, ``list``, and
    any other object with an ``extend`` method that is not a byte buffer.

    Raises:
        TypeError: If the container is fixed-size or not numeric.
    """
    if isinstance(container, array):
        if container.typecode not in _ARRAY_TYPECODES:
            raise TypeError(
                f"array.array buffers must use typecode 'f' or 'd', got {container.typecode!r}"
            )
        return
    if isinstance(container, (np.ndarray, bytes, bytearray, str, tuple)):
        raise TypeError(f"{type(container).__name__} is not a growable numeric buffer")
    if not callable(getattr(container, "extend", None)):
        raise TypeError(f"{type(container).__name__} has no extend() method")


def extend_into(container: Any, values: NDArray) -> None:
    """Append ``values`` to ``container`` in order, in a single pass."""
    ensure_growable(container)
    if isinstance(container, array):
        # One block copy in the buffer's own element type
        block = np.ascontiguousarray(values, dtype=np.dtype(container.typecode))
        container.frombytes(memoryview(block))
    else:
        container.extend(values.tolist())
