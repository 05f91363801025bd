from __future__ import annotations

from numbers import Integral

from curvekit.exceptions import InvalidArgument


def pascal_row(n: int) -> list[int]:
    """Row ``n`` of Pascal's triangle, i.e. ``C(n, k)`` for ``k = 0..n``.

    Plain Python integers are used so large rows stay exact; every step of
    the recurrence divides evenly.
    """
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidArgument(f"Pascal row index must be an integer, got {type(n).__name__}")
    n = int(n)
    if n < 0:
        raise InvalidArgument(f"Pascal row index must be non-negative, got {n}")

    row = [1] * (n + 1)
    for k in range(1, n):
        row[k] = row[k - 1] * (n - k + 1) // k
    return row
