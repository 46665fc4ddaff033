"""Depth-first and breadth-first traversal of small graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _check_start(start: int, count: int) -> None:
    if not 0 <= start < count:
        raise ValueError(f"start node {start} is outside 0..{count - 1}")


def dfs(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Depth-first order from ``start`` over an adjacency matrix of 0/1 links."""
    count = len(matrix)
    _check_start(start, count)
    visited = [False] * count
    order: list[int] = []
    stack = [start]
    while stack:
        node = stack.pop()
        if visited[node]:
            continue
        visited[node] = True
        order.append(node)
        stack.extend(
            other
            for other in reversed(range(count))
            if matrix[node][other] == 1 and not visited[other]
        )
    return order


def _normalise(adjacency: Sequence[Iterable[int]]) -> list[list[int]]:
    count = len(adjacency)
    result = []
    for node, neighbours in enumerate(adjacency):
        ordered = sorted(set(neighbours))
        for other in ordered:
            if not 0 <= other < count:
                raise ValueError(f"node {node} links to unknown node {other}")
        result.append(ordered)
    return result


def bfs(adjacency: Sequence[Iterable[int]], start: int) -> list[int]:
    """Breadth-first order from ``start``; neighbours are visited in ascending order."""
    neighbours = _normalise(adjacency)
    _check_start(start, len(neighbours))
    visited = [False] * len(neighbours)
    order: list[int] = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        if visited[node]:
            continue
        visited[node] = True
        order.append(node)
        queue.extend(other for other in neighbours[node] if not visited[other])
    return order


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render an adjacency matrix with row and column labels."""
    lines = ["Adjacency Matrix:", "  " + "".join(f"{i} " for i in range(len(matrix)))]
    lines.extend(
        f"{i} " + "".join(f"{value} " for value in row) for i, row in enumerate(matrix)
    )
    return "\n".join(lines) + "\n"


def format_adjacency(adjacency: Sequence[Iterable[int]]) -> str:
    """Render adjacency lists, one node per line."""
    lines = ["Adjacency List:"]
    lines.extend(
        f"Node {node} is connected to: " + "".join(f"{other} " for other in neighbours)
        for node, neighbours in enumerate(_normalise(adjacency))
    )
    return "\n".join(lines) + "\n"


class _TokenReader:
    def __init__(self) -> None:
        self._pending: deque[str] = deque()

    def next_int(self, prompt: str) -> int:
        while not self._pending:
            self._pending.extend(input(prompt).split())
        return int(self._pending.popleft())


def _read_matrix(reader: _TokenReader) -> list[list[int]]:
    count = reader.next_int("Number of nodes: ")
    return [
        [reader.next_int(f"Enter link status from node {i} to {j}: ") for j in range(count)]
        for i in range(count)
    ]


def _read_adjacency(reader: _TokenReader) -> list[set[int]]:
    count = reader.next_int("Number of nodes: ")
    adjacency: list[set[int]] = []
    for node in range(count):
        connected = reader.next_int(f"Enter number of nodes connected to node {node}: ")
        adjacency.append({reader.next_int("Enter the nodes: ") for _ in range(connected)})
    return adjacency


def _format_order(label: str, order: list[int]) -> str:
    return f"{label} Traversal: " + "".join(f"{node} " for node in order)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive graph traversal menu."""
    reader = _TokenReader()
    matrix: list[list[int]] | None = None
    adjacency: list[set[int]] | None = None
    menu = (
        "\n*** MENU ***\n1. Create Graph (Matrix)\n2. DFS Traversal (Using Matrix)"
        "\n3. Create Graph (List)\n4. BFS Traversal (Using List)\n5. Exit"
    )
    try:
        while True:
            print(menu)
            try:
                choice = reader.next_int("Enter choice: ")
                if choice == 1:
                    matrix = _read_matrix(reader)
                    print(format_matrix(matrix))
                elif choice == 2:
                    if matrix is None:
                        print("Create the matrix graph first.")
                        continue
                    start = reader.next_int("Enter starting node for DFS: ")
                    print(_format_order("DFS", dfs(matrix, start)))
                elif choice == 3:
                    adjacency = _read_adjacency(reader)
                    print(format_adjacency(adjacency))
                elif choice == 4:
                    if adjacency is None:
                        print("Create the list graph first.")
                        continue
                    start = reader.next_int("Enter starting node for BFS: ")
                    print(_format_order("BFS", bfs(adjacency, start)))
                elif choice == 5:
                    return 0
                else:
                    print("Invalid choice. Try again.")
            except ValueError as exc:
                print(f"Error: {exc}")
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())