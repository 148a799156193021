"""
Generic two-outcome result for fallible matrix operations.

inverse() and divide() do not raise on a singular matrix. They return a
Result that is either a success holding the computed value, or a failure
holding no value and a SingularMatrixError describing why.

Design decisions:
    - Generic over the value payload P for type safety
    - Failure carries no matrix payload (value is None)
    - Immutable (frozen=True), like every other smallmat value
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from smallmat.core.exceptions import SingularMatrixError

P = TypeVar('P')  # Value payload type
Q = TypeVar('Q')


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable success/failure envelope.

    Build with the classmethods rather than the constructor:

    Examples:
        >>> Result.ok(mat2f.IDENTITY).is_ok
        True
        >>> failed = Result.singular("determinant is 0.0", matrix_name="Mat2f")
        >>> failed.value is None
        True
    """
    value: P | None
    error: SingularMatrixError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Result needs exactly one of value or error")

    @classmethod
    def ok(cls, value: P) -> Result[P]:
        """Successful outcome holding value."""
        return cls(value=value)

    @classmethod
    def singular(
        cls,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
    ) -> Result[P]:
        """Failed outcome for a singular matrix."""
        return cls(
            value=None,
            error=SingularMatrixError(
                message, matrix_name=matrix_name, determinant=determinant
            ),
        )

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def is_singular(self) -> bool:
        return self.error is not None

    def unwrap(self) -> P:
        """
        Return the success value.

        Raises:
            SingularMatrixError: If this is a failed Result
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: P) -> P:
        """Return the success value, or default on failure."""
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]

    def map(self, fn: Callable[[P], Q]) -> Result[Q]:
        """Apply fn to a success value; failures pass through unchanged."""
        if self.error is not None:
            return Result(value=None, error=self.error)
        return Result.ok(fn(self.value))  # type: ignore[arg-type]
