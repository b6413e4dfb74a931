from src.experiments import npuzzle
from src.experiments.visualize_path import save_path_frames


def test_save_path_frames(tmp_path, goal3):
    path = [(1, 2, 3, 8, 4, 0, 7, 6, 5), goal3]
    written = save_path_frames(path, 3, tmp_path / "frames")
    assert [p.name for p in written] == ["step_000.png", "step_001.png"]
    for p in written:
        assert p.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_solver_cli_writes_frames(tmp_path, capsys):
    outdir = tmp_path / "steps"
    assert npuzzle.main(["3", "true", "6", "--seed", "2", "--frames", str(outdir)]) == 0
    out = capsys.readouterr().out
    frames = sorted(outdir.glob("step_*.png"))
    assert frames
    assert f"Saved {len(frames)} frames to {outdir}" in out
