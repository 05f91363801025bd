from __future__ import annotations

import logging
import math
from numbers import Integral
from typing import Any

import numpy as np

from curvekit.constants import DEFAULT_RESOLUTION
from curvekit.exceptions import InvalidArgument
from curvekit.models import SampledCurve, as_control_points, make_sampled_curve
from curvekit.pascal import pascal_row

logger = logging.getLogger(__name__)


def _log_space_weight(n: int, i: int, t: np.ndarray, coeff: int) -> np.ndarray:
    # only reached for 0 < i < n, so the -inf logs at t = 0 or 1 give weight 0
    with np.errstate(divide="ignore"):
        log_weight = math.log(coeff) + i * np.log(t) + (n - i) * np.log1p(-t)
    return np.exp(log_weight)


def bernstein_poly(n: int, i: int, t: np.ndarray, coeff: int | None = None) -> np.ndarray:
    # np.power(0.0, 0) is 1.0, so both endpoints interpolate exactly
    row = pascal_row(n) if coeff is None else None
    if isinstance(i, bool) or not isinstance(i, Integral) or not 0 <= i <= n:
        raise InvalidArgument(f"Bernstein index must be in 0..{n}, got {i!r}")
    if row is not None:
        coeff = row[i]
    t = np.asarray(t, dtype=float)
    try:
        scale = float(coeff)
    except OverflowError:
        return _log_space_weight(n, i, t, coeff)
    return scale * np.power(t, i) * np.power(1.0 - t, n - i)


def bezier_curve(control_points: Any, t: Any) -> np.ndarray:
    ctrl = as_control_points(control_points).points
    degree = ctrl.shape[0] - 1
    t = np.asarray(t, dtype=float).reshape(-1)
    coeffs = pascal_row(degree)
    points = np.zeros((t.size, 2), dtype=float)
    for i, coeff in enumerate(coeffs):
        points += bernstein_poly(degree, i, t, coeff)[:, None] * ctrl[i]
    return points


def parameter_grid(resolution: int = DEFAULT_RESOLUTION) -> np.ndarray:
    if isinstance(resolution, bool) or not isinstance(resolution, Integral):
        raise InvalidArgument(f"resolution must be an integer, got {type(resolution).__name__}")
    if resolution < 2:
        raise InvalidArgument(f"resolution must be at least 2, got {resolution}")
    resolution = int(resolution)
    return np.arange(resolution, dtype=float) / (resolution - 1)


def evaluate(control_points: Any, resolution: int = DEFAULT_RESOLUTION) -> SampledCurve:
    """Sample the Bézier curve of ``control_points`` at ``resolution`` uniform
    parameter values ``t = j / (resolution - 1)``.

    The first and last samples coincide with the first and last control
    points. The input is copied, never modified.
    """
    ctrl = as_control_points(control_points)
    t = parameter_grid(resolution)
    logger.debug("Evaluating degree-%d curve at %d samples", ctrl.degree, t.size)
    points = bezier_curve(ctrl, t)
    return make_sampled_curve(t, points)


def bezier(control_points: Any, resolution: int = DEFAULT_RESOLUTION) -> np.ndarray:
    """Plain ``(resolution, 2)`` array of curve samples."""
    return np.array(evaluate(control_points, resolution).points)
