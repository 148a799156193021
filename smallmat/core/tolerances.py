"""
Tolerance tiers for numerical comparison.

The library's singularity check is exact (determinant == 0.0). Everything
that compares computed matrices, such as the inverse laws M @ inv(M) == I,
needs a tolerance instead. These tiers are the single source for it and
are used by smallmat.matrix.compare and the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Default: well-conditioned float64 arithmetic
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='double precision, well-conditioned inputs',
)

# Ill-conditioned inputs or long chains of products
FP64_LOOSE = ToleranceTier(
    rtol=1e-6,
    atol=1e-9,
    name='fp64_loose',
    description='double precision, ill-conditioned or accumulated error',
)

DEFAULT = FP64
