[build-system]
requires = ["hatchling>=1.18"]
build-backend = "hatchling.build"

[project]
name = "structkit"
version = "0.1.0"
description = "Classic data structures and algorithms: expression trees, polynomials, sparse matrices, search trees, heaps, graphs, linked lists and record files."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "binary-search-tree",
    "avl-tree",
    "heap",
    "graph",
    "linked-list",
    "sparse-matrix",
    "expression-tree",
    "polynomial",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest>=7"]

[project.scripts]
structkit-expression = "structkit.expression:main"
structkit-polynomial = "structkit.polynomial:main"
structkit-sparse = "structkit.sparse:main"
structkit-bst = "structkit.bst:main"
structkit-bst-array = "structkit.bst_array:main"
structkit-avl = "structkit.avl:main"
structkit-heap = "structkit.heap:main"
structkit-graph = "structkit.graph:main"
structkit-list = "structkit.linked_list:main"
structkit-records = "structkit.records:main"

[tool.hatch.build.targets.wheel]
packages = ["structkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
check_untyped_defs = true
