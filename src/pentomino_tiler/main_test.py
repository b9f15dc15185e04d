import pytest
from pentomino_tiler import main

def test_no_action_prints_help(capsys):
    main([])
    assert "usage: pentomino-tiler" in capsys.readouterr().out

def test_count(capsys):
    main(["--count", "--width", "3", "--height", "20"])
    assert "Solutions: 8" in capsys.readouterr().out

def test_solve_prints_boards(capsys):
    main(["--solve", "--width", "5", "--height", "1", "--use", "i"])
    out = capsys.readouterr().out
    assert "▕██████████▏" in out
    assert "Solutions: 1" in out

def test_pieces(capsys):
    main(["--pieces", "--use", "X"])
    assert "██████" in capsys.readouterr().out

def test_count_with_constraint_model(capsys):
    main(["--count", "--cp", "--width", "5", "--height", "3", "--use", "LTY"])
    out = capsys.readouterr().out
    assert "Solutions: 0" not in out
    assert "Solutions:" in out

@pytest.mark.parametrize("argv", [
    ["--count", "--width", "0"],
    ["--count", "--limit", "0"],
    ["--count", "--use", "Q"],
    ["--count", "--use", "FF"],
])
def test_bad_arguments(argv):
    with pytest.raises(SystemExit) as e:
        main(argv)
    assert e.value.code == 2

def test_count_first_only(capsys):
    main(["--count", "--first-only", "--width", "3", "--height", "20"])
    assert "Solutions: 8" in capsys.readouterr().out

@pytest.mark.parametrize("flag", ["--solve", "--first-only"])
def test_constraint_model_only_counts(flag):
    with pytest.raises(SystemExit) as e:
        main(["--count", "--cp", flag, "--width", "5", "--height", "3", "--use", "LTY"])
    assert e.value.code == 2
