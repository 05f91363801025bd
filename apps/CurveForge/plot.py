from __future__ import annotations

from pathlib import Path

from matplotlib.backends.backend_agg import FigureCanvasAgg as FigureCanvas
from matplotlib.figure import Figure

from curvekit.models import ControlPointSequence, SampledCurve


def plot_curve(
    curve: SampledCurve,
    control_points: ControlPointSequence | None = None,
    path: str | Path | None = None,
    title: str | None = None,
) -> Figure:
    figure = Figure()
    canvas = FigureCanvas(figure)
    axes = figure.add_subplot(111)

    points = curve.points
    axes.plot(points[:, 0], points[:, 1], color="tab:blue", label="Curve")

    if control_points is not None:
        ctrl = control_points.points
        axes.plot(
            ctrl[:, 0],
            ctrl[:, 1],
            linestyle="--",
            color="tab:gray",
            alpha=0.5,
            label="Control polygon",
        )
        axes.scatter(ctrl[1:-1, 0], ctrl[1:-1, 1], color="tab:orange", zorder=3)
        axes.scatter(ctrl[[0, -1], 0], ctrl[[0, -1], 1], color="tab:red", zorder=3)

    if title:
        axes.set_title(title)
    axes.set_xlabel("x")
    axes.set_ylabel("y")
    axes.set_aspect(1.0, adjustable="datalim")
    axes.legend(loc="best")
    axes.grid(True, linestyle=":", alpha=0.3)
    figure.tight_layout()

    if path is not None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        canvas.print_figure(str(path))
    return figure
