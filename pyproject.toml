[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "litekit"
version = "2.6.1"
description = "Small UNIX helpers: file utilities, pidfiles, config-file parsing, terminal escapes, lists and trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["unix", "files", "pidfile", "fparseln", "splay tree", "red-black tree", "queue", "conio"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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

[tool.hatch.build.targets.wheel]
packages = ["litekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
