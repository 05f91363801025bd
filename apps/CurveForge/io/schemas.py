from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict

from curvekit.constants import default_constants


@dataclass(frozen=True)
class CurveOutputSchema:
    meta: Dict[str, Any]
    control_points: Any
    curve: Dict[str, Any]
    summary: Dict[str, Any]
    constants_used: Dict[str, Any]


CURVE_OUTPUT_KEYS = CurveOutputSchema(
    meta={"app": "", "case_id": "", "stage": "curve", "units": "", "timestamp": ""},
    control_points=[],
    curve={"t": [], "points": []},
    summary={
        "degree": None,
        "resolution": None,
        "arc_length": None,
        "bounds": {"x_min": None, "x_max": None, "y_min": None, "y_max": None},
    },
    constants_used={"resolution": None, "n_interior": None, "deviation": None},
)


CURVEFORGE_DEFAULTS = {
    "meta": {"app": "CurveForge", "case_id": "", "units": "SI"},
    "curve_constants": default_constants(),
}


def timestamp_utc() -> str:
    return datetime.now(timezone.utc).isoformat()
