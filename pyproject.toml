[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "structkit"
version = "0.1.0"
description = "Classic data structures: linked lists, stacks, queues, binary search trees and red-black trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "linked-list",
    "stack",
    "queue",
    "priority-queue",
    "binary-search-tree",
    "red-black-tree",
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structkit-stack-demo = "structkit.stacks:main"
structkit-rbtree-demo = "structkit.rbtree:main"

[tool.setuptools.packages.find]
include = ["structkit*"]

[tool.pytest.ini_options]
addopts = "-ra"
