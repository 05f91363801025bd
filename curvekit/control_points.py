from __future__ import annotations

import logging
from math import hypot, isfinite
from numbers import Integral
from typing import Any, Union

import numpy as np

from curvekit.constants import DEFAULT_N_INTERIOR
from curvekit.exceptions import InvalidArgument, NumericDegenerate
from curvekit.models import ControlPointSequence, as_control_points, as_point

logger = logging.getLogger(__name__)

RandomSource = Union[np.random.Generator, int, None]


def _as_generator(rng: RandomSource) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    if rng is None or (isinstance(rng, Integral) and not isinstance(rng, bool)):
        return np.random.default_rng(rng)
    raise InvalidArgument(f"rng must be a numpy Generator, an int seed or None, got {type(rng).__name__}")


def synthesize(
    start: Any,
    end: Any,
    deviation: float,
    rng: RandomSource = None,
    n_interior: int = DEFAULT_N_INTERIOR,
) -> ControlPointSequence:
    """Build ``[start, *interior, end]`` with randomly jittered interior points.

    Interior points sit on the start-end segment at evenly spaced fractions
    (with two of them: exactly on ``start`` and ``end``) and each coordinate is
    shifted by an independent draw from ``[-m, m)``, where
    ``m = |deviation| * distance(start, end)``. Anchors are never jittered.

    ``rng`` may be a ``numpy.random.Generator``, an integer seed, or ``None``
    for a freshly seeded generator.
    """
    start_pt = as_point(start, "start")
    end_pt = as_point(end, "end")
    if isinstance(n_interior, bool) or not isinstance(n_interior, Integral) or n_interior < 0:
        raise InvalidArgument(f"n_interior must be a non-negative integer, got {n_interior!r}")
    try:
        deviation = float(deviation)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"deviation must be a number, got {deviation!r}") from exc
    if not isfinite(deviation):
        raise NumericDegenerate(f"deviation must be finite, got {deviation}")
    if deviation < 0:
        logger.warning(
            "Negative deviation %s is deprecated; its magnitude is used for the jitter range",
            deviation,
        )

    generator = _as_generator(rng)
    distance = hypot(end_pt.x - start_pt.x, end_pt.y - start_pt.y)
    max_deviation = abs(deviation * distance)

    anchor_start = start_pt.as_array()
    anchor_end = end_pt.as_array()
    fractions = np.linspace(0.0, 1.0, int(n_interior))
    bases = (1.0 - fractions[:, None]) * anchor_start + fractions[:, None] * anchor_end
    offsets = generator.uniform(-max_deviation, max_deviation, size=(int(n_interior), 2))

    points = np.vstack([anchor_start, bases + offsets, anchor_end])
    logger.debug(
        "Synthesized %d control points (distance=%.6g, max_deviation=%.6g)",
        points.shape[0],
        distance,
        max_deviation,
    )
    return as_control_points(points)


def generate_control_points(init: Any, fin: Any, deviation: float, rng: RandomSource = None) -> np.ndarray:
    """Plain ``(4, 2)`` array: start, two jittered handles, end."""
    return np.array(synthesize(init, fin, deviation, rng=rng).points)
