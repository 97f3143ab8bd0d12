[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mrlite"
version = "0.1.0"
description = "Length-prefixed byte pieces with varint file IO, string helpers and lock primitives"
requires-python = ">=3.10"
dependencies = []
keywords = ["varint", "serialization", "keys", "string-utilities", "mutex", "locking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["mrlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
