"""
Core infrastructure for smallmat.

Shared abstractions used by the vector and matrix subpackages.

Key components:
    exceptions: Exception hierarchy
    result: Generic Result[P] success/failure envelope
    validation: Input validators for numpy interop
    tolerances: Tolerance tiers for approximate comparison
    protocols: SquareMatrix structural protocol
"""

from smallmat.core.protocols import SquareMatrix
from smallmat.core.result import Result
from smallmat.core.exceptions import (
    SmallMatError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    NearSingularWarning,
)
from smallmat.core.tolerances import ToleranceTier, FP64, FP64_LOOSE

__all__ = [
    # Protocols
    "SquareMatrix",
    # Result
    "Result",
    # Exceptions
    "SmallMatError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "NearSingularWarning",
    # Tolerances
    "ToleranceTier",
    "FP64",
    "FP64_LOOSE",
]
