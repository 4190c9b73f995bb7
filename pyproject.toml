[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkedstructs"
version = "0.1.0"
description = "Small linked data structures: singly and doubly linked lists and a binary search tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "doubly linked list", "binary search tree", "data structures", "teaching"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linked-list-demo = "linkedstructs.linked_list:main"
double-linked-list-demo = "linkedstructs.double_linked_list:main"
search-tree-demo = "linkedstructs.search_tree:main"

[tool.hatch.build.targets.wheel]
packages = ["linkedstructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
