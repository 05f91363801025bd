from curvekit.bezier import bernstein_poly, bezier, bezier_curve, evaluate, parameter_grid
from curvekit.constants import DEFAULT_N_INTERIOR, DEFAULT_RESOLUTION, default_constants
from curvekit.control_points import generate_control_points, synthesize
from curvekit.exceptions import CurveError, InvalidArgument, NumericDegenerate
from curvekit.models import (
    ControlPointSequence,
    Point2D,
    SampledCurve,
    as_control_points,
    as_point,
)
from curvekit.pascal import pascal_row

__all__ = [
    "ControlPointSequence",
    "CurveError",
    "DEFAULT_N_INTERIOR",
    "DEFAULT_RESOLUTION",
    "InvalidArgument",
    "NumericDegenerate",
    "Point2D",
    "SampledCurve",
    "as_control_points",
    "as_point",
    "bernstein_poly",
    "bezier",
    "bezier_curve",
    "default_constants",
    "evaluate",
    "generate_control_points",
    "parameter_grid",
    "pascal_row",
    "synthesize",
]
