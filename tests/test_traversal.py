import pytest

from structlab.traversal import bfs, dfs, format_adjacency, format_matrix, main

# Tree: 0-1, 0-2, 1-3
TREE_MATRIX = [
    [0, 1, 1, 0],
    [1, 0, 0, 1],
    [1, 0, 0, 0],
    [0, 1, 0, 0],
]
TREE_LISTS = [[2, 1], [0, 3], [0], [1]]


def test_dfs_goes_deep_first():
    assert dfs(TREE_MATRIX, 0) == [0, 1, 3, 2]


def test_bfs_goes_wide_first():
    assert bfs(TREE_LISTS, 0) == [0, 1, 2, 3]


@pytest.mark.parametrize("start", range(4))
def test_traversals_visit_every_connected_node_once(start):
    depth = dfs(TREE_MATRIX, start)
    breadth = bfs(TREE_LISTS, start)
    assert depth[0] == start and breadth[0] == start
    assert sorted(depth) == [0, 1, 2, 3]
    assert sorted(breadth) == [0, 1, 2, 3]


def test_unreachable_nodes_are_skipped():
    matrix = [[0, 1, 0], [1, 0, 0], [0, 0, 0]]
    lists = [[1], [0], []]
    assert 2 not in dfs(matrix, 0)
    assert 2 not in bfs(lists, 0)
    assert dfs(matrix, 2) == [2]
    assert bfs(lists, 2) == [2]


def test_only_value_one_counts_as_link():
    matrix = [[0, 2], [0, 0]]
    assert dfs(matrix, 0) == [0]


def test_start_out_of_range():
    with pytest.raises(ValueError):
        dfs(TREE_MATRIX, 4)
    with pytest.raises(ValueError):
        bfs(TREE_LISTS, -1)


def test_bfs_rejects_unknown_neighbour():
    with pytest.raises(ValueError):
        bfs([[5]], 0)


def test_format_matrix():
    assert format_matrix([[0, 1], [1, 0]]) == "Adjacency Matrix:\n  0 1 \n0 0 1 \n1 1 0 \n"


def test_format_adjacency_sorts_neighbours():
    text = format_adjacency(TREE_LISTS)
    lines = text.splitlines()
    assert lines[0] == "Adjacency List:"
    assert lines[1] == "Node 0 is connected to: 1 2 "
    assert lines[3] == "Node 2 is connected to: 0 "


def test_main_matrix_and_dfs(monkeypatch, capsys):
    answers = iter(["1", "2", "0 1", "1 0", "2", "0", "5"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    assert "DFS Traversal: 0 1 " in capsys.readouterr().out