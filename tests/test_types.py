"""Tests for trajectory containers."""

import math

import numpy as np
import polars as pl
import pytest

from trajdyn import (
    EnrichedSample,
    InvalidValueError,
    MissingColumnError,
    Sample,
    Trajectory,
    compute,
)


class TestTrajectory:

    def test_from_samples(self):
        traj = Trajectory.from_samples([(0, 1, 2), Sample(1, 3, 4)])
        assert len(traj) == 2
        assert traj[1] == Sample(1.0, 3.0, 4.0)
        assert list(traj) == [Sample(0.0, 1.0, 2.0), Sample(1.0, 3.0, 4.0)]

    def test_columns_are_float_and_read_only(self):
        traj = Trajectory.from_arrays([0, 1], [2, 3], [4, 5])
        assert traj.t.dtype == np.float64
        with pytest.raises(ValueError):
            traj.x[0] = 1.0

    def test_copies_caller_arrays(self):
        x = np.array([0.0, 1.0])
        traj = Trajectory.from_arrays([0.0, 1.0], x, [0.0, 0.0])
        x[0] = 42.0
        assert traj.x[0] == 0.0

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="equal length"):
            Trajectory.from_arrays([0, 1, 2], [0, 1], [0, 1, 2])

    def test_two_dimensional_rejected(self):
        with pytest.raises(ValueError, match="one-dimensional"):
            Trajectory(t=[[0, 1]], x=[[0, 1]], y=[[0, 1]])

    def test_from_frame(self):
        df = pl.DataFrame({'time': [0, 1, 2], 'px': [1.0, 2.0, 3.0], 'py': [0.0, 0.0, 1.0]})
        traj = Trajectory.from_frame(df, time_col='time', x_col='px', y_col='py')
        np.testing.assert_array_equal(traj.t, [0.0, 1.0, 2.0])
        np.testing.assert_array_equal(traj.y, [0.0, 0.0, 1.0])

    def test_from_frame_missing_column(self):
        df = pl.DataFrame({'t': [0.0], 'x': [0.0]})
        with pytest.raises(MissingColumnError) as exc:
            Trajectory.from_frame(df)
        assert exc.value.missing == ['y']
        assert isinstance(exc.value, KeyError)

    def test_from_frame_nulls_become_nan(self):
        df = pl.DataFrame({'t': [0.0, 1.0], 'x': [None, 1.0], 'y': [0.0, 0.0]})
        traj = Trajectory.from_frame(df)
        assert math.isnan(traj.x[0])

    def test_from_frame_non_numeric(self):
        df = pl.DataFrame({'t': ['0', '1', 'later'], 'x': [0.0, 1.0, 2.0], 'y': [0.0, 0.0, 0.0]})
        with pytest.raises(InvalidValueError) as exc:
            Trajectory.from_frame(df)
        assert exc.value.field == 't'
        assert exc.value.index == 2
        assert 'later' in str(exc.value)

    def test_from_frame_numeric_strings(self):
        df = pl.DataFrame({'t': ['0', '1.5'], 'x': [0.0, 1.0], 'y': [0.0, 0.0]})
        np.testing.assert_array_equal(Trajectory.from_frame(df).t, [0.0, 1.5])

    def test_to_frame(self):
        df = Trajectory.from_arrays([0, 1], [2, 3], [4, 5]).to_frame()
        assert df.columns == ['t', 'x', 'y']
        assert df['x'].to_list() == [2.0, 3.0]


class TestEnrichedTrajectory:

    @pytest.fixture
    def out(self):
        return compute(Trajectory.from_arrays([0, 1, 2], [0, 1, 0], [0, 0, 0]))

    def test_rows(self, out):
        rows = list(out)
        assert len(rows) == 3
        assert all(isinstance(r, EnrichedSample) for r in rows)
        assert rows[0].sample == Sample(0.0, 0.0, 0.0)

    def test_negative_index(self, out):
        assert out[-1].t == 2.0

    def test_index_out_of_range(self, out):
        with pytest.raises(IndexError):
            out[3]

    def test_missing_is_none(self, out):
        assert out[0].disp_x is None
        assert out[1].curv is None

    def test_column(self, out):
        np.testing.assert_allclose(out.column('vx'), [1.0, 0.0, -1.0])
        with pytest.raises(KeyError):
            out.column('jerk')

    def test_to_dicts(self, out):
        dicts = out.to_dicts()
        assert dicts[1]['t'] == 1.0
        assert dicts[1]['curv'] is None
        assert set(dicts[0]) == {
            't', 'x', 'y', 'vx', 'vy', 'aspeed', 'ax', 'ay', 'aaccel',
            'curv', 'curv_radius', 'disp_x', 'disp_y', 'adisp',
        }

    def test_to_trajectory(self, out):
        traj = out.to_trajectory()
        np.testing.assert_array_equal(traj.x, [0.0, 1.0, 0.0])

    def test_to_frame_keeps_infinite_radius(self, out):
        df = out.to_frame()
        assert df['curv_radius'][0] == float('inf')
        assert df['curv_radius'][1] is None
