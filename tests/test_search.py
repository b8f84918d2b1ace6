import pytest

from algokit.search import exist

BOARD = [
    ["A", "B", "C", "E"],
    ["S", "F", "C", "S"],
    ["A", "D", "E", "E"],
]


@pytest.mark.parametrize(
    "word, expected",
    [("ABCCED", True), ("SEE", True), ("ABCB", False)],
)
def test_examples(word, expected):
    assert exist(BOARD, word) is expected


@pytest.mark.parametrize("word", ["ABCCED", "SEE", "ABCB", "ASADFB", "CCE"])
def test_reversed_word_has_same_answer(word):
    assert exist(BOARD, word) == exist(BOARD, word[::-1])


def test_every_single_letter_on_board_is_found():
    for row in BOARD:
        for letter in row:
            assert exist(BOARD, letter) is True


def test_letter_missing_from_board_is_not_found():
    assert exist(BOARD, "Z") is False


def test_word_longer_than_cell_count_cannot_be_traced():
    assert exist([["A", "A"]], "AAA") is False


def test_empty_word_with_cells_is_found():
    assert exist(BOARD, "") is True


def test_string_rows_are_accepted():
    assert exist(["ABCE", "SFCS", "ADEE"], "ABCCED") == exist(BOARD, "ABCCED")


def test_empty_board_raises():
    with pytest.raises(ValueError):
        exist([], "A")