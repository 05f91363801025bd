import logging

import numpy as np
import pytest

from curvekit.bezier import evaluate
from curvekit.control_points import generate_control_points, synthesize
from curvekit.exceptions import InvalidArgument, NumericDegenerate
from curvekit.models import ControlPointSequence, Point2D


def test_zero_deviation_collapses_jitter():
    ctrl = synthesize((0.0, 0.0), (10.0, 0.0), 0.0)
    assert isinstance(ctrl, ControlPointSequence)
    assert ctrl.tolist() == [[0.0, 0.0], [0.0, 0.0], [10.0, 0.0], [10.0, 0.0]]


def test_interior_points_stay_within_bounds():
    rng = np.random.default_rng(1234)
    start = np.array([3.0, -2.0])
    end = np.array([15.0, 7.0])
    deviation = 0.3
    limit = deviation * np.hypot(*(end - start))
    for _ in range(1000):
        ctrl = synthesize(start, end, deviation, rng=rng).points
        assert np.all(np.abs(ctrl[1] - start) <= limit + 1e-12)
        assert np.all(np.abs(ctrl[2] - end) <= limit + 1e-12)


def test_anchors_are_exact():
    start = (0.1, 0.7)
    end = (0.3, -1.9)
    ctrl = synthesize(start, end, 0.5, rng=3)
    assert ctrl.start == Point2D(0.1, 0.7)
    assert ctrl.end == Point2D(0.3, -1.9)
    assert len(ctrl) == 4


def test_seeded_generator_is_reproducible():
    first = synthesize((0.0, 0.0), (5.0, 5.0), 0.2, rng=np.random.default_rng(42))
    second = synthesize((0.0, 0.0), (5.0, 5.0), 0.2, rng=np.random.default_rng(42))
    assert np.array_equal(first.points, second.points)
    assert np.array_equal(synthesize((0, 0), (5, 5), 0.2, rng=9).points, synthesize((0, 0), (5, 5), 0.2, rng=9).points)


def test_draw_order_is_x_then_y_per_point():
    start = np.array([0.0, 0.0])
    end = np.array([10.0, 0.0])
    ctrl = synthesize(start, end, 0.5, rng=np.random.default_rng(5)).points
    draws = np.random.default_rng(5).uniform(-5.0, 5.0, size=(2, 2))
    np.testing.assert_allclose(ctrl[1], start + draws[0])
    np.testing.assert_allclose(ctrl[2], end + draws[1])


def test_negative_deviation_is_symmetric_and_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="curvekit.control_points"):
        negative = synthesize((0.0, 0.0), (10.0, 0.0), -0.5, rng=11).points
    positive = synthesize((0.0, 0.0), (10.0, 0.0), 0.5, rng=11).points
    assert np.array_equal(negative, positive)
    assert "deprecated" in caplog.text


def test_generalized_interior_count():
    ctrl = synthesize((0.0, 0.0), (9.0, 0.0), 0.0, n_interior=4)
    assert len(ctrl) == 6
    np.testing.assert_allclose(ctrl.points[1:-1, 0], [0.0, 3.0, 6.0, 9.0])
    assert synthesize((0.0, 0.0), (9.0, 0.0), 0.1, n_interior=0).tolist() == [[0.0, 0.0], [9.0, 0.0]]


def test_output_feeds_the_evaluator():
    ctrl = synthesize((1.0, 1.0), (4.0, 5.0), 0.25, rng=0)
    curve = evaluate(ctrl)
    np.testing.assert_allclose(curve.points[0], [1.0, 1.0])
    np.testing.assert_allclose(curve.points[-1], [4.0, 5.0])


def test_generate_control_points_array():
    points = generate_control_points((0.0, 0.0), (10.0, 0.0), 0.1, rng=1)
    assert points.shape == (4, 2)
    assert points.dtype == np.float64
    points[1, 0] = 0.0


@pytest.mark.parametrize(
    "start, end, deviation",
    [
        ((np.nan, 0.0), (1.0, 1.0), 0.1),
        ((0.0, 0.0), (np.inf, 1.0), 0.1),
        ((0.0, 0.0), (1.0, 1.0), np.nan),
    ],
)
def test_rejects_non_finite_inputs(start, end, deviation):
    with pytest.raises(NumericDegenerate):
        synthesize(start, end, deviation)


@pytest.mark.parametrize("kwargs", [{"n_interior": -1}, {"n_interior": 1.5}, {"rng": "seed"}])
def test_rejects_bad_arguments(kwargs):
    with pytest.raises(InvalidArgument):
        synthesize((0.0, 0.0), (1.0, 1.0), 0.1, **kwargs)


def test_rejects_malformed_point():
    with pytest.raises(InvalidArgument):
        synthesize((0.0, 0.0, 0.0), (1.0, 1.0), 0.1)


@pytest.mark.parametrize("deviation", [None, "wide", [0.1, 0.2]])
def test_rejects_non_numeric_deviation(deviation):
    with pytest.raises(InvalidArgument):
        synthesize((0.0, 0.0), (1.0, 1.0), deviation)
