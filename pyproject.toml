[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lsview"
version = "0.1.0"
description = "Terminal rendering primitives for file listings: styled text cells, tree drawing, tables and detail columns"
requires-python = ">=3.10"
keywords = ["ls", "terminal", "ansi", "table", "tree", "file listing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["lsview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
