"""Tests for whole-trajectory summaries."""

import math

import numpy as np
import pytest

from trajdyn import Trajectory, compute, summarize
from trajdyn.generators import circle


class TestSummarize:

    def test_straight_line(self):
        t = np.arange(5, dtype=float)
        s = summarize(compute(Trajectory.from_arrays(t, t, np.zeros(5))))
        assert s.n_samples == 5
        assert s.duration == pytest.approx(4.0)
        assert s.path_length == pytest.approx(4.0)
        assert s.net_displacement == pytest.approx(4.0)
        assert s.straightness == pytest.approx(1.0)
        assert s.mean_speed == pytest.approx(1.0)
        assert s.max_acceleration == pytest.approx(0.0)
        assert s.mean_abs_curvature == 0.0
        assert s.n_stationary == 0

    def test_there_and_back(self):
        s = summarize(compute(Trajectory.from_arrays([0, 1, 2], [0, 1, 0], [0, 0, 0])))
        assert s.path_length == pytest.approx(2.0)
        assert s.net_displacement == 0.0
        assert s.straightness == 0.0
        assert s.n_stationary == 1

    def test_stationary(self):
        s = summarize(compute(Trajectory.from_arrays([0, 1, 2], [3, 3, 3], [1, 1, 1])))
        assert s.path_length == 0.0
        assert math.isnan(s.straightness)
        assert math.isnan(s.mean_abs_curvature)
        assert s.n_stationary == 3

    def test_circle(self):
        s = summarize(compute(circle(n_samples=2000)))
        assert s.mean_speed == pytest.approx(1.0, rel=1e-3)
        assert s.mean_abs_curvature == pytest.approx(1.0, rel=1e-2)
        assert s.path_length == pytest.approx(2 * np.pi, rel=1e-2)

    def test_to_dict(self):
        s = summarize(compute(Trajectory.from_arrays([0, 1], [0, 1], [0, 0])))
        d = s.to_dict()
        assert d['n_samples'] == 2
        assert 'straightness' in d
