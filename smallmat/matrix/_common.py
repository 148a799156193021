"""
Shared helpers for the matrix modules.
"""

import warnings

from smallmat.core.exceptions import NearSingularWarning


def warn_if_near_singular(
    det: float,
    warn_below: float | None,
    matrix_name: str,
) -> None:
    """
    Emit NearSingularWarning for a tiny but nonzero determinant.

    Does nothing unless the caller opted in with warn_below. Called from
    a private _inverse one frame below the public inverse or divide, so
    the warning is attributed to the user's call of that function.
    """
    if warn_below is not None and abs(det) < warn_below:
        warnings.warn(
            f"{matrix_name} determinant {det!r} is below {warn_below!r}; "
            f"inverse may be inaccurate",
            NearSingularWarning,
            stacklevel=4,
        )
