"""Keyword dictionary kept in a self-balancing AVL tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

NOT_FOUND = "Keyword not found"


@dataclass
class _Node:
    key: str
    meaning: str
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node else 0


def _update_height(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance_factor(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    _update_height(node)
    balance = _balance_factor(node)
    if balance > 1:
        assert node.left is not None
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        assert node.right is not None
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: _Node | None, key: str, meaning: str) -> _Node:
    if node is None:
        return _Node(key, meaning)
    if key < node.key:
        node.left = _insert(node.left, key, meaning)
    elif key > node.key:
        node.right = _insert(node.right, key, meaning)
    else:
        node.meaning = meaning
        return node
    return _rebalance(node)


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: _Node | None, key: str) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if key < node.key:
        node.left, removed = _delete(node.left, key)
    elif key > node.key:
        node.right, removed = _delete(node.right, key)
    else:
        if node.left is None or node.right is None:
            return node.left or node.right, True
        successor = _min_node(node.right)
        node.key, node.meaning = successor.key, successor.meaning
        node.right, removed = _delete(node.right, successor.key)
    return _rebalance(node), removed


def _walk(node: _Node | None, reverse: bool) -> Iterator[tuple[str, str]]:
    if node is None:
        return
    first, second = (node.right, node.left) if reverse else (node.left, node.right)
    yield from _walk(first, reverse)
    yield node.key, node.meaning
    yield from _walk(second, reverse)


class AVLDictionary:
    """Maps keywords to meanings, keeping lookups logarithmic."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, key: str, meaning: str) -> None:
        """Add ``key``; an existing keyword gets the new meaning."""
        self._root = _insert(self._root, key, meaning)

    def delete(self, key: str) -> bool:
        """Remove ``key``; return whether it was present."""
        self._root, removed = _delete(self._root, key)
        return removed

    def update(self, key: str, meaning: str) -> None:
        """Set the meaning of ``key``, adding it when absent."""
        self.insert(key, meaning)

    def search(self, key: str) -> str:
        """Return the meaning of ``key``; raise KeyError when absent."""
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node.meaning
        raise KeyError(key)

    def ascending(self) -> list[tuple[str, str]]:
        """Return ``(keyword, meaning)`` pairs in ascending keyword order."""
        return list(_walk(self._root, reverse=False))

    def descending(self) -> list[tuple[str, str]]:
        """Return ``(keyword, meaning)`` pairs in descending keyword order."""
        return list(_walk(self._root, reverse=True))

    def max_comparisons(self) -> int:
        """Return the most comparisons a lookup can need: the tree height."""
        return _height(self._root)


_MENU = """
Dictionary Menu:
1. Insert a new keyword
2. Delete a keyword
3. Update meaning of a keyword
4. Search for a keyword
5. Display dictionary (Ascending Order)
6. Display dictionary (Descending Order)
7. Find maximum comparisons needed for lookup
8. Exit"""


def _print_pairs(pairs: list[tuple[str, str]]) -> None:
    for key, meaning in pairs:
        print(f"{key} : {meaning}")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive dictionary menu."""
    dictionary = AVLDictionary()
    try:
        while True:
            print(_MENU)
            try:
                choice = int(input("Enter your choice: ").strip())
            except ValueError:
                choice = 0
            if choice == 1:
                key = input("Enter keyword: ")
                dictionary.insert(key, input("Enter meaning: "))
            elif choice == 2:
                dictionary.delete(input("Enter keyword to delete: "))
            elif choice == 3:
                key = input("Enter keyword to update: ")
                dictionary.update(key, input("Enter new meaning: "))
            elif choice == 4:
                key = input("Enter keyword to search: ")
                try:
                    meaning = dictionary.search(key)
                except KeyError:
                    meaning = NOT_FOUND
                print(f"Meaning: {meaning}")
            elif choice == 5:
                print("Dictionary in Ascending Order:")
                _print_pairs(dictionary.ascending())
            elif choice == 6:
                print("Dictionary in Descending Order:")
                _print_pairs(dictionary.descending())
            elif choice == 7:
                print(
                    "Maximum comparisons needed for lookup: "
                    f"{dictionary.max_comparisons()}"
                )
            elif choice == 8:
                print("Exiting the program.")
                return 0
            else:
                print("Invalid choice. Please try again.")
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())