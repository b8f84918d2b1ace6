"""Command that runs each algorithm on a set of sample inputs."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from algokit.bitmapholes import bitmap_holes
from algokit.combination import combination_sum
from algokit.equalparts import three_equal_parts
from algokit.lastword import length_of_last_word
from algokit.matrix import print_matrix, update_matrix
from algokit.maxgap import maximum_gap
from algokit.minstack import MinStack
from algokit.palindrome import longest_palindrome
from algokit.permutations import permute
from algokit.search import exist
from algokit.sorting import create_list, print_list, sort_list
from algokit.spiralorder import spiral_order
from algokit.subset import subsets

__all__ = ["main"]


def _show(value: object) -> str:
    """Render lists as space-separated brackets and booleans in lower case."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_show(item) for item in value) + "]"
    return str(value)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the results of every algorithm on its sample inputs."""
    parser = argparse.ArgumentParser(
        prog="algokit", description="Run each algorithm on sample inputs."
    )
    parser.parse_args(argv)

    bitmap = ["01111", "01001", "01001", "01111"]
    print("Number of holes:", bitmap_holes(bitmap))

    for text in ("babad", "cbbd"):
        print(f"Longest palindrome in '{text}':", longest_palindrome(text))

    for nums in ([7, 9, 15], [0, 1]):
        print(f"Permutations of {nums}:".replace(",", ""), _show(permute(nums)))

    for sentence in ("Hello World", "   fly me   to   the moon  ", "luffy is still joyboy"):
        print(length_of_last_word(sentence))

    for candidates, target in (([2, 3, 6, 7], 7), ([2, 3, 5], 8), ([2], 1)):
        print(_show(combination_sum(candidates, target)))

    for nums in ([1, 2, 3], [0]):
        print(_show(subsets(nums)))

    stack = MinStack()
    for value in (-2, 0, -3):
        stack.push(value)
    print(stack.get_min())
    stack.pop()
    print(stack.top())
    print(stack.get_min())

    square = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    wide = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]
    print("Output for matrix1:", _show(spiral_order(square)))
    print("Output for matrix2:", _show(spiral_order(wide)))

    for arr in ([1, 0, 1, 0, 1], [1, 1, 0, 1, 1], [1, 1, 0, 0, 1]):
        print("Input:", _show(arr), "Output:", _show(three_equal_parts(arr)))

    for nums in ([3, 6, 9, 1], [10]):
        print(maximum_gap(nums))

    for nums in ([4, 2, 1, 3], [-1, 5, 3, 4, 0], []):
        print_list(sort_list(create_list(nums)))

    grids = (
        [[0, 0, 0], [0, 1, 0], [0, 0, 0]],
        [[0, 0, 0], [0, 1, 0], [1, 1, 1]],
    )
    for number, grid in enumerate(grids, start=1):
        print(f"Output {number}:")
        print_matrix(update_matrix(grid))

    board = [
        ["A", "B", "C", "E"],
        ["S", "F", "C", "S"],
        ["A", "D", "E", "E"],
    ]
    for word in ("ABCCED", "SEE", "ABCB"):
        print(_show(exist(board, word)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())