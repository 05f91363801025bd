"""Errors raised by the curve kernels."""


class CurveError(Exception):
    """Base class for curvekit errors."""


class InvalidArgument(CurveError, ValueError):
    """A call-site argument has the wrong type, shape or range."""


class NumericDegenerate(CurveError, ValueError):
    """An input carries NaN or infinite coordinates."""
