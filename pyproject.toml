[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchtrees"
version = "0.1.0"
description = "Binary search trees, self-balancing AVL trees, an equal-path check and a text tree printer"
requires-python = ">=3.10"
keywords = ["binary search tree", "avl", "data structures", "tree"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
searchtrees-demo = "searchtrees.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["searchtrees"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
