import subprocess
import sys
from pathlib import Path

import pytest

from ttt_console.cli import main


def _run_cli(args: list[str], cwd: Path, stdin: str = "") -> subprocess.CompletedProcess:
    exe = [sys.executable, "-m", "ttt_console.cli"]
    return subprocess.run(exe + args, cwd=cwd, input=stdin, capture_output=True, text=True)


def test_cli_solve_center_opening(tmp_path: Path):
    r = _run_cli(["solve", "--board", "000010000"], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "to_move=O" in s
    assert "move=1" in s
    assert "optimal=[1, 3, 7, 9]" in s


def test_cli_solve_stdin_streams_csv(tmp_path: Path):
    boards = "000010000\nnot-a-board\n111220000\n110020000\n"
    r = _run_cli(["solve", "--stdin"], cwd=tmp_path, stdin=boards)
    assert r.returncode == 0
    rows = [line for line in r.stdout.splitlines() if line]
    assert rows[0] == "board,to_move,move,optimal_moves,scores"
    # invalid and terminal boards are skipped
    assert [row.split(",")[0] for row in rows[1:]] == ["000010000", "110020000"]
    assert rows[2].split(",")[2] == "3"


def test_cli_tactics(tmp_path: Path):
    r = _run_cli(["tactics", "--board", "110020000"], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "to_move=O" in s
    assert "blocks=[3]" in s


@pytest.mark.parametrize("bad", ["abc", "012345678", "0123456789", "12345678x"])
def test_cli_error_invalid_boards(tmp_path: Path, bad: str):
    r = _run_cli(["solve", "--board", bad], cwd=tmp_path)
    assert r.returncode == 2
    r = _run_cli(["tactics", "--board", bad], cwd=tmp_path)
    assert r.returncode == 2


def test_cli_error_unreachable_or_terminal(tmp_path: Path):
    assert _run_cli(["solve", "--board", "111222111"], cwd=tmp_path).returncode == 2
    assert _run_cli(["solve", "--board", "111220000"], cwd=tmp_path).returncode == 2


def test_cli_play_exit_prints_tally(tmp_path: Path):
    r = _run_cli(["--no-color", "--no-clear", "play"], cwd=tmp_path, stdin="3\n")
    assert r.returncode == 0
    assert "Final Results:" in r.stdout
    assert "Draws: 0" in r.stdout


def test_cli_play_full_round_seeded(tmp_path: Path):
    moves = "\n".join(["1"] + ["1", "4", "2", "5", "3"] + ["n"]) + "\n"
    r = _run_cli(["--no-color", "--no-clear", "--delay", "0", "--seed", "1"], cwd=tmp_path, stdin=moves)
    assert r.returncode == 0
    assert "Player X wins!" in r.stdout
    assert "X Wins: 1" in r.stdout


def test_cli_play_end_of_input_is_clean(tmp_path: Path):
    r = _run_cli(["--no-color", "--no-clear", "--delay", "0"], cwd=tmp_path, stdin="1\n5\n")
    assert r.returncode == 0
    assert "Final Results:" in r.stdout


def test_main_rejects_negative_delay():
    assert main(["--delay", "-1", "play"]) == 2


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip()
