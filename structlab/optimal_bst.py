"""Optimal binary search tree built from key access frequencies."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

DEFAULT_KEYS = (10, 20, 30)
DEFAULT_FREQ = (3, 2, 4)


@dataclass
class BSTNode:
    """A node of a binary search tree."""

    key: int
    left: BSTNode | None = None
    right: BSTNode | None = None


def optimal_bst(keys: Sequence[int], freq: Sequence[int]) -> tuple[int, BSTNode]:
    """Return ``(cost, root)`` of the search tree with minimum weighted cost.

    ``keys`` must be sorted; ties choose the leftmost root.
    """
    count = len(keys)
    if count == 0:
        raise ValueError("at least one key is required")
    if len(freq) != count:
        raise ValueError("keys and frequencies must have the same length")

    cost = [[0] * count for _ in range(count)]
    root = [[0] * count for _ in range(count)]
    for i, weight in enumerate(freq):
        cost[i][i] = weight
        root[i][i] = i

    def split_cost(i: int, j: int, r: int) -> int:
        left = cost[i][r - 1] if r > i else 0
        right = cost[r + 1][j] if r < j else 0
        return left + right

    for length in range(2, count + 1):
        for i in range(count - length + 1):
            j = i + length - 1
            best = min(range(i, j + 1), key=lambda r: split_cost(i, j, r))
            root[i][j] = best
            cost[i][j] = split_cost(i, j, best) + sum(freq[i : j + 1])

    def build(i: int, j: int) -> BSTNode | None:
        if i > j:
            return None
        r = root[i][j]
        return BSTNode(keys[r], build(i, r - 1), build(r + 1, j))

    tree = build(0, count - 1)
    assert tree is not None
    return cost[0][count - 1], tree


def inorder(root: BSTNode | None) -> list[int]:
    """Return the keys of the tree in in-order sequence."""
    if root is None:
        return []
    return [*inorder(root.left), root.key, *inorder(root.right)]


def render_tree(root: BSTNode | None, space: int = 0, height: int = 10) -> str:
    """Draw the tree sideways: right subtree above, each level indented by ``height``."""
    if root is None:
        return ""
    space += height
    return (
        render_tree(root.right, space, height)
        + "\n"
        + " " * (space - height)
        + f"{root.key}\n"
        + render_tree(root.left, space, height)
    )


def main(argv: list[str] | None = None) -> int:
    """Build and print the optimal tree for the given keys and frequencies."""
    parser = argparse.ArgumentParser(description="Build an optimal binary search tree.")
    parser.add_argument("--keys", type=int, nargs="+", default=list(DEFAULT_KEYS))
    parser.add_argument("--freq", type=int, nargs="+", default=list(DEFAULT_FREQ))
    args = parser.parse_args(argv)
    try:
        cost, root = optimal_bst(args.keys, args.freq)
    except ValueError as exc:
        parser.error(str(exc))
    print(f"Optimal BST Cost: {cost}")
    print("\nInorder Traversal of the Optimal BST: " + "".join(f"{k} " for k in inorder(root)))
    print("\nTree Structure:")
    print(render_tree(root), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())