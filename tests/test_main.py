import sys

import main as cli


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["main.py", *argv])
    cli.main()


def test_grid_run_reports_conflict_free_coloring(monkeypatch, capsys, tmp_path):
    dot_dir = tmp_path / "dot"
    obj_path = tmp_path / "colored.obj"
    _run(monkeypatch, "--width", "4", "--height", "3", "--spacing", "1.0",
         "--first-fit-baseline", "--dot-dir", str(dot_dir), "--export-obj", str(obj_path))

    out = capsys.readouterr().out
    assert "Vertices: 12" in out
    assert "Colors (max_neighbor):" in out
    assert "Conflicts: 0" in out
    assert "Colors (first-fit baseline):" in out
    assert (dot_dir / "simple.dot").exists()
    assert (dot_dir / "line.dot").exists()
    assert obj_path.read_text().startswith("# Colored constraint graph")


def test_policy_and_augment_flags(monkeypatch, capsys):
    _run(monkeypatch, "--width", "3", "--height", "3", "--no-augment", "--policy", "smallest_available")
    out = capsys.readouterr().out
    assert "Colors (smallest_available):" in out
    assert "Conflicts: 0" in out
    assert "first-fit" not in out


def test_obj_input(monkeypatch, capsys, tmp_path):
    path = tmp_path / "tri.obj"
    path.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")
    _run(monkeypatch, "--obj", str(path))
    out = capsys.readouterr().out
    assert "Triangles: 1" in out
    assert "Colors (max_neighbor): 3" in out


def test_mesh_without_edges(monkeypatch, capsys):
    _run(monkeypatch, "--width", "1", "--height", "1")
    assert "nothing to color" in capsys.readouterr().out
