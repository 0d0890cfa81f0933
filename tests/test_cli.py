"""Tests for the trajdyn command line."""

import json

import polars as pl
import pytest

from trajdyn.__main__ import main


@pytest.fixture
def circle_csv(tmp_path):
    path = tmp_path / 'circle.csv'
    assert main(['generate', 'circle', '--output', str(path), '--n_samples', '100']) == 0
    return path


class TestGenerate:

    def test_writes_file(self, circle_csv):
        df = pl.read_csv(circle_csv)
        assert df.columns == ['t', 'x', 'y']
        assert len(df) == 100

    def test_invalid_jitter(self, tmp_path, capsys):
        code = main(['generate', 'linear', '--output', str(tmp_path / 'l.csv'), '--jitter', '1.5'])
        assert code == 1
        assert 'Error' in capsys.readouterr().out

    def test_invalid_duration(self, tmp_path):
        code = main(['generate', 'circle', '--output', str(tmp_path / 'c.csv'), '--duration', '0'])
        assert code == 1
        assert not (tmp_path / 'c.csv').exists()


class TestCompute:

    def test_default_output(self, circle_csv):
        assert main(['compute', str(circle_csv)]) == 0
        out = circle_csv.with_name('circle_dynamics.parquet')
        df = pl.read_parquet(out)
        assert len(df) == 100
        assert 'curv_radius' in df.columns
        assert df['disp_x'].null_count() == 1

    def test_explicit_output_and_scheme(self, circle_csv, tmp_path):
        out = tmp_path / 'enriched.parquet'
        assert main(['compute', str(circle_csv), '-o', str(out), '--scheme', 'stencil']) == 0
        df = pl.read_parquet(out)
        radius = df['curv_radius'].to_list()[1:-1]
        assert radius == pytest.approx([1.0] * len(radius), rel=1e-2)

    def test_custom_columns(self, tmp_path):
        src = tmp_path / 'track.csv'
        src.write_text("time,px,py\n0,0,0\n1,1,0\n2,2,0\n")
        out = tmp_path / 'track_out.csv'
        code = main(['compute', str(src), '-o', str(out),
                     '--time-col', 'time', '--x-col', 'px', '--y-col', 'py'])
        assert code == 0
        assert pl.read_csv(out)['vx'].to_list() == [1.0, 1.0, 1.0]

    def test_config_file(self, tmp_path):
        src = tmp_path / 'track.csv'
        src.write_text("time,x,y\n0,0,0\n1,1,0\n3,9,0\n")
        cfg = tmp_path / 'settings.yaml'
        cfg.write_text("columns:\n  time: time\nio:\n  default_format: csv\n")
        assert main(['compute', str(src), '--config', str(cfg)]) == 0
        df = pl.read_csv(tmp_path / 'track_dynamics.csv')
        assert df['ax'].to_list() == pytest.approx([2.0, 1.0, 0.5])

    def test_non_monotonic_input(self, tmp_path, capsys):
        src = tmp_path / 'bad.csv'
        src.write_text("t,x,y\n0,0,0\n1,1,0\n1,2,0\n2,3,0\n")
        assert main(['compute', str(src)]) == 1
        assert 'strictly increasing' in capsys.readouterr().out

    def test_single_sample(self, tmp_path, capsys):
        src = tmp_path / 'one.csv'
        src.write_text("t,x,y\n0,0,0\n")
        assert main(['compute', str(src)]) == 1
        assert 'at least 2 samples' in capsys.readouterr().out

    def test_missing_column(self, tmp_path, capsys):
        src = tmp_path / 'nox.csv'
        src.write_text("t,y\n0,0\n1,1\n")
        assert main(['compute', str(src)]) == 1
        assert 'missing column' in capsys.readouterr().out

    def test_non_numeric_input(self, tmp_path, capsys):
        src = tmp_path / 'text.csv'
        src.write_text("t,x,y\n0,a,0\n1,b,0\n")
        assert main(['compute', str(src)]) == 1
        assert 'non-numeric x[0]' in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main(['compute', str(tmp_path / 'nope.csv')]) == 1
        assert 'does not exist' in capsys.readouterr().out


class TestSummary:

    def test_json(self, circle_csv, capsys):
        capsys.readouterr()
        assert main(['summary', str(circle_csv), '--json']) == 0
        summary = json.loads(capsys.readouterr().out)
        assert summary['n_samples'] == 100
        assert summary['mean_speed'] == pytest.approx(1.0, rel=1e-2)

    def test_json_stationary_uses_null(self, tmp_path, capsys):
        """Undefined aggregates are written as JSON null."""
        src = tmp_path / 'still.csv'
        src.write_text("t,x,y\n0,1,1\n1,1,1\n2,1,1\n")
        assert main(['summary', str(src), '--json']) == 0
        out = capsys.readouterr().out
        assert 'NaN' not in out
        summary = json.loads(out)
        assert summary['straightness'] is None
        assert summary['mean_abs_curvature'] is None
        assert summary['n_stationary'] == 3

    def test_summary_non_numeric_input(self, tmp_path, capsys):
        src = tmp_path / 'text.csv'
        src.write_text("t,x,y\n0,0,a\n1,0,b\n")
        assert main(['summary', str(src)]) == 1
        assert 'Error' in capsys.readouterr().out

    def test_table(self, circle_csv, capsys):
        capsys.readouterr()
        assert main(['summary', str(circle_csv)]) == 0
        assert 'path_length' in capsys.readouterr().out


def test_no_command(capsys):
    assert main([]) == 2
    assert 'trajdyn compute' in capsys.readouterr().out
