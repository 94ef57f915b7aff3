import io
import json
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from invasion.cli.app import main
from invasion.cli.models import RunConfig


def _write_map(tmpdir: str, lines) -> str:
    path = Path(tmpdir) / "map.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


def test_text_output_without_collisions():
    with tempfile.TemporaryDirectory() as tmpdir:
        map_path = _write_map(tmpdir, ["A north=B"])
        out = io.StringIO()
        code = main(["-f", map_path, "-a", "1", "-s", "10", "--seed", "3"], out=out)
        assert code == 0
        assert out.getvalue() == "A north=B\nB south=A\n\nA north=B\nB south=A\n"


def test_text_output_reports_destruction():
    with tempfile.TemporaryDirectory() as tmpdir:
        map_path = _write_map(tmpdir, ["Solo"])
        out = io.StringIO()
        code = main(["-f", map_path, "-a", "2", "-s", "1"], out=out)
        assert code == 0
        assert out.getvalue() == "Solo\n\nSolo has been destroyed by alien 1 and alien 2!\n"


def test_json_report():
    with tempfile.TemporaryDirectory() as tmpdir:
        map_path = _write_map(tmpdir, ["Solo", "Foo east=Bar"])
        out = io.StringIO()
        code = main(["-f", map_path, "-a", "0", "--json"], out=out)
        assert code == 0
        report = json.loads(out.getvalue())
        assert report["initial_map"] == ["Bar west=Foo", "Foo east=Bar", "Solo"]
        assert report["final_map"] == report["initial_map"]
        assert report["destructions"] == []
        assert report["surviving_aliens"] == 0


def test_missing_map_exits_nonzero():
    with tempfile.TemporaryDirectory() as tmpdir:
        out = io.StringIO()
        code = main(["-f", str(Path(tmpdir) / "nope.txt")], out=out)
        assert code == 1
        assert out.getvalue() == ""


def test_undecodable_map_exits_nonzero():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "map.txt"
        path.write_bytes(b"Foo north=B\xffar\n")
        out = io.StringIO()
        assert main(["-f", str(path)], out=out) == 1
        assert out.getvalue() == ""


def test_negative_counts_rejected():
    with tempfile.TemporaryDirectory() as tmpdir:
        map_path = _write_map(tmpdir, ["A north=B"])
        assert main(["-f", map_path, "-a", "-3"], out=io.StringIO()) == 1
    with pytest.raises(ValidationError):
        RunConfig(map_path="map.txt", aliens=1, steps=-1)
