from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from apps.CurveForge.io.json_codec import save_json, to_jsonable
from apps.CurveForge.pipeline.run_curve import run_curve
from apps.CurveForge.plot import plot_curve
from curvekit.constants import DEFAULT_N_INTERIOR
from curvekit.control_points import synthesize
from curvekit.models import as_control_points, make_sampled_curve

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CurveForge CLI")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    curve_parser = subparsers.add_parser("curve", help="Sample a Bezier curve from a JSON case file")
    curve_parser.add_argument("--in", dest="input_path", required=True)
    curve_parser.add_argument("--out", dest="output_path", required=True)
    curve_parser.add_argument("--plot", dest="plot_path")
    curve_parser.add_argument("--case-id", dest="case_id")

    ctrl_parser = subparsers.add_parser("control-points", help="Synthesize jittered control points")
    ctrl_parser.add_argument("--start", nargs=2, type=float, required=True, metavar=("X", "Y"))
    ctrl_parser.add_argument("--end", nargs=2, type=float, required=True, metavar=("X", "Y"))
    ctrl_parser.add_argument("--deviation", type=float, required=True)
    ctrl_parser.add_argument("--n-interior", dest="n_interior", type=int, default=DEFAULT_N_INTERIOR)
    ctrl_parser.add_argument("--seed", type=int)
    ctrl_parser.add_argument("--out", dest="output_path")
    return parser


def _run_curve_command(args: argparse.Namespace) -> None:
    input_path = Path(args.input_path)
    output = run_curve(input_path)
    if args.case_id:
        output["meta"]["case_id"] = args.case_id
    save_json(args.output_path, output)

    if args.plot_path:
        curve = make_sampled_curve(output["curve"]["t"], output["curve"]["points"])
        plot_curve(
            curve,
            as_control_points(output["control_points"]),
            path=args.plot_path,
            title=output["meta"]["case_id"] or None,
        )
        logger.info("Saved curve plot to %s", args.plot_path)


def _run_control_points_command(args: argparse.Namespace) -> None:
    control_points = synthesize(
        args.start,
        args.end,
        args.deviation,
        rng=args.seed,
        n_interior=args.n_interior,
    )
    payload = {"control_points": to_jsonable(control_points)}
    if args.output_path:
        save_json(args.output_path, payload)
        return
    json.dump(payload, sys.stdout, indent=2)
    sys.stdout.write("\n")


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command == "curve":
        _run_curve_command(args)
        return

    _run_control_points_command(args)


if __name__ == "__main__":
    main()
