[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uls"
version = "0.1.0"
description = "A small ls-style directory lister with long, column and single-column output"
requires-python = ">=3.10"
dependencies = []
keywords = ["ls", "directory", "listing", "filesystem", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
uls = "uls.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["uls"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
