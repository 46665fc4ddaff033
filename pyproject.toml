[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structlab"
version = "0.1.0"
description = "Small interactive programs and reusable code for classic data structures: hashing, trees, graph traversal, priority queues and record files."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "hash table",
    "avl tree",
    "optimal bst",
    "graph traversal",
    "priority queue",
    "record files",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structlab-hashing = "structlab.hashing:main"
structlab-booktree = "structlab.booktree:main"
structlab-traversal = "structlab.traversal:main"
structlab-optimal-bst = "structlab.optimal_bst:main"
structlab-avl = "structlab.avl:main"
structlab-triage = "structlab.triage:main"
structlab-students = "structlab.students:main"

[tool.hatch.build.targets.wheel]
packages = ["structlab"]

[tool.hatch.build.targets.sdist]
include = ["structlab", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
disallow_untyped_defs = true
