import pytest

from algokit.cli import main
from algokit.palindrome import longest_palindrome


def _run(capsys):
    status = main([])
    captured = capsys.readouterr()
    return status, captured.out.splitlines(), captured.err.splitlines()


def test_exit_status_is_zero(capsys):
    status, _, _ = _run(capsys)
    assert status == 0


def test_spiral_lines(capsys):
    _, out, _ = _run(capsys)
    assert "Output for matrix1: [1 2 3 6 9 8 7 4 5]" in out
    assert "Output for matrix2: [1 2 3 4 8 12 11 10 9 5 6 7]" in out


def test_palindrome_lines(capsys):
    _, out, _ = _run(capsys)
    expected = f"Longest palindrome in 'babad': {longest_palindrome('babad')}"
    assert expected in out


def test_holes_line_comes_first(capsys):
    _, out, _ = _run(capsys)
    assert out[0].startswith("Number of holes: ")


def test_search_results_are_last(capsys):
    _, out, _ = _run(capsys)
    assert out[-3:] == ["true", "true", "false"]


def test_sorted_lists_go_to_stderr(capsys):
    _, _, err = _run(capsys)
    assert err == ["1 2 3 4 ", "-1 0 3 4 5 ", ""]


def test_matrix_headers_present(capsys):
    _, out, _ = _run(capsys)
    first = out.index("Output 1:")
    second = out.index("Output 2:")
    assert second - first == 4


def test_unknown_argument_rejected(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2