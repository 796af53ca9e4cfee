"""
Thickness Calculator
====================
Fringe-counting estimate of film thickness on a silicon substrate, assuming
normal incidence:

    d = m * Δλ / 2 * sqrt(n² - 1)

where:
    d  = film thickness in nm
    Δλ = spectral bandwidth over which the spectrum was acquired, in nm
    n  = real part of the refractive index of the film
    m  = number of maxima within the spectral bandwidth

The expression is evaluated exactly in that order: the product ``m * Δλ`` is
halved before being multiplied by the square root. For ``n < 1`` the square
root has no real value and the result is NaN. Callers are responsible for
checking it, see ``thickness_is_defined``.
"""
from __future__ import annotations

from typing import Union, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

ArrayLike = Union[float, "npt.ArrayLike"]


def compute_thickness(
    refractive_index: ArrayLike,
    spectral_range: ArrayLike,
    fringe_count: ArrayLike,
) -> Union[float, npt.NDArray[np.float64]]:
    """
    Film thickness in nm.

    Scalars in, Python float out. Any array argument broadcasts and an
    ndarray is returned. No side effects.
    """
    n = np.asarray(refractive_index, dtype=np.float64)
    delta_lambda = np.asarray(spectral_range, dtype=np.float64)
    m = np.asarray(fringe_count, dtype=np.float64)

    # sqrt of a negative number is NaN by contract, not a warning
    with np.errstate(invalid="ignore"):
        thickness = (m * delta_lambda) / 2.0 * np.sqrt((n * n) - 1.0)

    if np.ndim(thickness) == 0:
        return float(thickness)
    return thickness


def thickness_is_defined(refractive_index: float) -> bool:
    """True when the formula yields a real thickness for this index."""
    return bool(np.isfinite(refractive_index) and refractive_index >= 1.0)
