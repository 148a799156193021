"""
Exception hierarchy for smallmat.

All exceptions inherit from SmallMatError to allow catching any
library-specific error. Matrix algebra itself is total: exceptions are
raised only at the numpy boundary, for zero-length normalization, and
when a failed Result is unwrapped.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class SmallMatError(Exception):
    """Base exception for all smallmat errors."""
    pass


class ValidationError(SmallMatError):
    """
    Input validation failed.

    Raised when array-like input handed to a from_array constructor
    fails validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array or value dimensions are incorrect or inconsistent.

    Raised when an array shape does not match the fixed size of the
    target type, or when values of different sizes are compared.
    """
    pass


class NumericalError(SmallMatError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues, such as
    normalizing a zero-length vector.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Carried by a failed inverse Result and raised by Result.unwrap().
    A matrix is singular here only when its determinant is exactly 0.0.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that triggered the failure, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant


class NearSingularWarning(UserWarning):
    """
    Inverse succeeded but the determinant is tiny.

    Emitted only when the caller opts in with warn_below=...; the
    inverse is still returned.
    """
    pass
