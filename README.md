# structlab

A collection of classic data structures. Each one can be used as a library
and also has a small interactive console program:

| Module | What it provides | Command |
| --- | --- | --- |
| `structlab.hashing` | Phone book hash tables that use chaining or linear probing and report how many comparisons each lookup took | `structlab-hashing` |
| `structlab.booktree` | A book's chapters, sections and subsections as a tree of named nodes | `structlab-booktree` |
| `structlab.traversal` | Depth-first search on an adjacency matrix and breadth-first search on adjacency lists | `structlab-traversal` |
| `structlab.optimal_bst` | An optimal binary search tree built from keys and their access frequencies | `structlab-optimal-bst` |
| `structlab.avl` | A dictionary of keywords and meanings kept in an AVL tree | `structlab-avl` |
| `structlab.triage` | A hospital triage queue ordered by severity | `structlab-triage` |
| `structlab.students` | A binary file of fixed-size student records with logical deletion | `structlab-students` |

## Installation

```
pip install structlab
```

No third-party libraries are needed at run time.

## Using the commands

Each command, except `structlab-optimal-bst`, starts a menu-driven session in
the terminal and reads its answers from standard input:

```
structlab-hashing
structlab-booktree
structlab-traversal
structlab-avl
structlab-triage
structlab-students
```

`structlab-optimal-bst` prints the cost, the in-order sequence and a sideways
drawing of the tree. It uses the keys `10 20 30` with the frequencies `3 2 4`
unless you give others:

```
structlab-optimal-bst --keys 10 20 30 40 --freq 4 2 6 3
```

`structlab-students` keeps its records in `stud.dat` in the current
directory. If you give a path as the first argument to `main`, it uses that
file instead.

## Using the library

```python
from structlab.hashing import ChainingHashTable, LinearProbingHashTable

book = ChainingHashTable(10)
book.insert("alice", "0100")
phone, comparisons = book.search("alice")   # phone is None when the name is absent

probing = LinearProbingHashTable(10)
probing.insert("alice", "0100")             # raises TableFullError when no slot is free
```

```python
from structlab.avl import AVLDictionary

words = AVLDictionary()
words.insert("tree", "a hierarchical structure")
words.insert("graph", "vertices joined by edges")
print(words.search("tree"))      # raises KeyError for an unknown keyword
print(words.ascending())
print(words.max_comparisons())
```

```python
from structlab.traversal import dfs, bfs

matrix = [[0, 1, 1], [1, 0, 0], [1, 0, 0]]
print(dfs(matrix, 0))                  # [0, 1, 2]
print(bfs([[1, 2], [0], [0]], 0))      # [0, 1, 2]
```

```python
from structlab.optimal_bst import optimal_bst, inorder, render_tree

cost, root = optimal_bst([10, 20, 30], [3, 2, 4])
print(cost, inorder(root))
print(render_tree(root))
```

```python
from structlab.triage import TriageQueue

queue = TriageQueue()
queue.push(3, "Ravi")
queue.push(1, "Meera")
print(queue.pop().name)   # Meera: the most serious case comes first
```

```python
from structlab.students import StudentFile, StudentRecord

store = StudentFile("students.dat")
store.create([StudentRecord(1, "Asha", "A", "Pune")])
print(store.find(1))
store.delete(1)           # raises KeyError when the roll number is absent
print(store.records())    # []
```

## What the package does not do

The package has no minimum-spanning-tree or network-cost planner. Its only
record storage is the student file: there is no employee file and no record
file with a separate index.

## Running the tests

```
pip install -e ".[test]"
pytest
```