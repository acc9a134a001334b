import importlib.util
import os

import pytest

TOOL = os.path.join(os.path.dirname(__file__), "..", "tools", "render_grid.py")

def load_tool():
    spec = importlib.util.spec_from_file_location("render_grid", TOOL)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod

def test_tsv_with_text_cell_exits_with_message(tmp_path):
    rg = load_tool()
    path = tmp_path / "bad.tsv"
    path.write_text("1\t1\t1\n1\tx\t1\n1\t1\t1\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        rg.read_tsv(str(path))
    assert "row 2" in str(exc.value)

def test_ragged_tsv_exits_with_message(tmp_path):
    rg = load_tool()
    path = tmp_path / "ragged.tsv"
    path.write_text("1\t1\t1\n1\t0\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        rg.read_tsv(str(path))

def test_render_writes_png(tmp_path):
    rg = load_tool()
    path = tmp_path / "ok.tsv"
    path.write_text("1\t1\t1\t1\n1\t2\t4\t1\n1\t0\t3\t1\n1\t1\t1\t1\n", encoding="utf-8")
    grid = rg.read_tsv(str(path))
    out = tmp_path / "png" / "01.png"
    rg.render_grid(grid, str(out), tile_size=8)
    assert out.exists() and out.stat().st_size > 0
