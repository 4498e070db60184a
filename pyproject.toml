[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslabs"
version = "0.1.0"
description = "Classic data structures with interactive console menus: linked lists, stacks, queues, binary trees, search trees and AVL trees"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "linked list",
    "stack",
    "queue",
    "binary tree",
    "binary search tree",
    "avl",
    "infix",
    "postfix",
    "prefix",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Natural Language :: Spanish",
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
test = ["pytest"]

[project.scripts]
dslabs = "dslabs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dslabs"]

[tool.pytest.ini_options]
addopts = "-ra"
