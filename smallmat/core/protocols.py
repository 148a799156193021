"""
Core protocols for smallmat.

Mat2f, Mat3f and Mat4f are unrelated concrete types: there is no base
class and no inheritance between them. This protocol describes the little
they structurally share so tooling (comparison, numpy interop) can accept
any of them.
"""

from typing import Any, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class SquareMatrix(Protocol):
    """
    Structural interface of every fixed-size matrix type.

    Implemented by Mat2f, Mat3f and Mat4f.
    """

    @property
    def dimension(self) -> int:
        """Number of rows (== number of columns)."""
        ...

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Float64 array of shape (dimension, dimension), indexed [row, col]."""
        ...
