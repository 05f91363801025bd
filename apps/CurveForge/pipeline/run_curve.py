from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from apps.CurveForge.io.json_codec import load_json, merge_dicts, save_json, to_jsonable
from apps.CurveForge.io.schemas import CURVE_OUTPUT_KEYS, CURVEFORGE_DEFAULTS, timestamp_utc
from curvekit.bezier import evaluate
from curvekit.control_points import synthesize
from curvekit.models import ControlPointSequence, SampledCurve, as_control_points

logger = logging.getLogger(__name__)


def _load_payload(source: str | Path | Dict[str, Any]) -> Dict[str, Any]:
    if isinstance(source, dict):
        return source
    logger.info("Loading curve case from %s", source)
    return load_json(source)


def _curve_constants(payload: Dict[str, Any]) -> Dict[str, Any]:
    return merge_dicts(CURVEFORGE_DEFAULTS["curve_constants"], payload.get("curve_constants", {}))


def _build_control_points(payload: Dict[str, Any], constants: Dict[str, Any]) -> ControlPointSequence:
    explicit = payload.get("control_points")
    synthesis = payload.get("synthesis")
    if explicit is not None and synthesis is not None:
        raise ValueError("Provide either control_points or synthesis, not both")
    if explicit is not None:
        return as_control_points(explicit)
    if synthesis is None:
        raise ValueError("control_points or synthesis is required")

    start = synthesis.get("start")
    end = synthesis.get("end")
    if start is None or end is None:
        raise ValueError("synthesis.start and synthesis.end are required")
    return synthesize(
        start,
        end,
        synthesis.get("deviation", constants["deviation"]),
        rng=synthesis.get("seed"),
        n_interior=synthesis.get("n_interior", constants["n_interior"]),
    )


def _build_output(
    payload: Dict[str, Any],
    control_points: ControlPointSequence,
    curve: SampledCurve,
    constants: Dict[str, Any],
) -> Dict[str, Any]:
    meta = merge_dicts(CURVEFORGE_DEFAULTS["meta"], payload.get("meta", {}))
    output = {
        "meta": {
            "app": meta["app"],
            "case_id": meta["case_id"],
            "stage": "curve",
            "units": meta["units"],
            "timestamp": timestamp_utc(),
        },
        "control_points": control_points,
        "curve": curve,
        "summary": {
            "degree": control_points.degree,
            "resolution": curve.resolution,
            "arc_length": curve.arc_length(),
            "bounds": curve.bounds(),
        },
        "constants_used": constants,
        "validation": CURVE_OUTPUT_KEYS,
    }
    return to_jsonable(output)


def run_curve(input_path: str | Path | Dict[str, Any], output_path: str | Path | None = None) -> Dict[str, Any]:
    payload = _load_payload(input_path)
    constants = _curve_constants(payload)
    control_points = _build_control_points(payload, constants)
    curve = evaluate(control_points, resolution=constants["resolution"])
    output = _build_output(payload, control_points, curve, constants)
    if output_path is not None:
        save_json(output_path, output)
        logger.info("Wrote %d curve samples to %s", curve.resolution, output_path)
    return output


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Run CurveForge curve pipeline")
    parser.add_argument("--in", dest="input_path", required=True)
    parser.add_argument("--out", dest="output_path", required=True)
    args = parser.parse_args()

    run_curve(args.input_path, args.output_path)
