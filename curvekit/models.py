from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List

import numpy as np

from curvekit.exceptions import InvalidArgument, NumericDegenerate


def _readonly(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


def _check_finite(array: np.ndarray, what: str) -> None:
    if not np.all(np.isfinite(array)):
        raise NumericDegenerate(f"{what} contains NaN or infinite coordinates")


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float

    @classmethod
    def from_any(cls, value: Any) -> "Point2D":
        if isinstance(value, Point2D):
            return value
        try:
            coords = np.asarray(value, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidArgument(f"Cannot interpret {value!r} as a 2D point") from exc
        if coords.shape != (2,):
            raise InvalidArgument(f"A point needs exactly two coordinates, got shape {coords.shape}")
        return cls(x=float(coords[0]), y=float(coords[1]))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def is_finite(self) -> bool:
        return bool(np.isfinite(self.x) and np.isfinite(self.y))


@dataclass(frozen=True, eq=False)
class ControlPointSequence:
    """Control polygon of a Bézier curve of degree ``len(points) - 1``.

    ``points`` is a read-only ``(n, 2)`` float array; index 0 is the start
    anchor and the last row the end anchor.
    """

    points: np.ndarray

    def __post_init__(self) -> None:
        try:
            points = np.array(self.points, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidArgument("control_points must be numeric with shape (n_ctrl, 2)") from exc
        if points.ndim != 2 or points.shape[1] != 2:
            raise InvalidArgument(f"control_points must have shape (n_ctrl, 2), got {points.shape}")
        if points.shape[0] < 2:
            raise InvalidArgument("control_points must contain at least two points")
        _check_finite(points, "control_points")
        object.__setattr__(self, "points", _readonly(points))

    @property
    def degree(self) -> int:
        return self.points.shape[0] - 1

    @property
    def start(self) -> Point2D:
        return self[0]

    @property
    def end(self) -> Point2D:
        return self[-1]

    def __len__(self) -> int:
        return self.points.shape[0]

    def __getitem__(self, index: int) -> Point2D:
        row = self.points[index]
        return Point2D(x=float(row[0]), y=float(row[1]))

    def __iter__(self) -> Iterator[Point2D]:
        for index in range(len(self)):
            yield self[index]

    def tolist(self) -> List[List[float]]:
        return self.points.tolist()


@dataclass(frozen=True, eq=False)
class SampledCurve:
    t: np.ndarray
    points: np.ndarray

    def __post_init__(self) -> None:
        t = np.array(self.t, dtype=float).reshape(-1)
        points = np.array(self.points, dtype=float)
        if points.ndim != 2 or points.shape[1] != 2 or points.shape[0] != t.size:
            raise InvalidArgument(f"curve points must have shape ({t.size}, 2), got {points.shape}")
        object.__setattr__(self, "t", _readonly(t))
        object.__setattr__(self, "points", _readonly(points))

    @property
    def resolution(self) -> int:
        return self.points.shape[0]

    def __len__(self) -> int:
        return self.points.shape[0]

    def __getitem__(self, index: int) -> Point2D:
        row = self.points[index]
        return Point2D(x=float(row[0]), y=float(row[1]))

    def arc_length(self) -> float:
        """Length of the polyline through the samples."""
        segments = np.diff(self.points, axis=0)
        return float(np.sum(np.hypot(segments[:, 0], segments[:, 1])))

    def bounds(self) -> dict[str, float]:
        mins = self.points.min(axis=0)
        maxs = self.points.max(axis=0)
        return {
            "x_min": float(mins[0]),
            "x_max": float(maxs[0]),
            "y_min": float(mins[1]),
            "y_max": float(maxs[1]),
        }


def as_point(value: Any, what: str = "point") -> Point2D:
    point = Point2D.from_any(value)
    if not point.is_finite():
        raise NumericDegenerate(f"{what} contains NaN or infinite coordinates")
    return point


def as_control_points(value: Any) -> ControlPointSequence:
    if isinstance(value, ControlPointSequence):
        return value
    return ControlPointSequence(points=value)


def make_sampled_curve(t: Any, points: Any) -> SampledCurve:
    return SampledCurve(t=t, points=points)
