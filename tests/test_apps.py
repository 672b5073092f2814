"""
Smoke tests for the command line apps.
"""

import json

import pytest

from moremath.apps import inspect_shape, run_ray_fan
from moremath.apps.common import parse_pair


class TestParsePair:
    def test_valid(self):
        assert parse_pair("1,2.5") == (1.0, 2.5)
        assert parse_pair("-1, 3") == (-1.0, 3.0)

    @pytest.mark.parametrize("text", ["1", "1,2,3", "a,b"])
    def test_invalid(self, text):
        import argparse

        with pytest.raises(argparse.ArgumentTypeError):
            parse_pair(text)


class TestInspectShape:
    def test_bundled_probes(self, capsys):
        inspect_shape.main(["--shape", "convex_quad"])
        out = capsys.readouterr().out
        assert "shape=convex_quad points=4 probes=6" in out
        assert "probe=0 x=0.000 y=0.000 inside=True inside_no_checker_board=True" in out
        assert "probe=5 x=1.000 y=2.000 inside=False inside_no_checker_board=False" in out

    def test_fill_modes_differ_on_pentagram(self, capsys):
        inspect_shape.main(["--shape", "pentagram"])
        out = capsys.readouterr().out
        assert "probe=0 x=1.000 y=0.000 inside=False inside_no_checker_board=True" in out

    def test_extra_point_and_vector(self, capsys):
        inspect_shape.main(["--shape", "square", "--point", "1,1", "--vector", "0,1"])
        out = capsys.readouterr().out
        assert "probes=6" in out
        assert "closest=(1.0000, 2.0000)" in out
        assert "edge=0 distance=nan along=nan direction=1" in out

    def test_shape_file(self, tmp_path, capsys):
        path = tmp_path / "tri.json"
        path.write_text(json.dumps({"name": "tri", "points": [[0, 0], [4, 0], [0, 4]]}))
        inspect_shape.main(["--shape-file", str(path), "--point", "1,1"])
        out = capsys.readouterr().out
        assert "shape=tri points=3 probes=1" in out
        assert "inside=True" in out

    def test_missing_shape_file(self, tmp_path):
        with pytest.raises(SystemExit):
            inspect_shape.main(["--shape-file", str(tmp_path / "missing.json")])

    def test_bad_point(self):
        with pytest.raises(SystemExit):
            inspect_shape.main(["--point", "nope"])


class TestRunRayFan:
    def test_square(self, capsys):
        run_ray_fan.main(["--shape", "square", "--origin", "1,1", "--num-rays", "3"])
        out = capsys.readouterr().out
        assert "shape=square origin=(1.000, 1.000) heading_deg=90.0" in out
        assert "summary min_distance=1.000 hits=3" in out

    def test_invalid_ray_count(self):
        with pytest.raises(SystemExit):
            run_ray_fan.main(["--shape", "square", "--origin", "1,1", "--num-rays", "1"])

    def test_origin_required(self):
        with pytest.raises(SystemExit):
            run_ray_fan.main(["--shape", "square"])
