[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strlayout"
version = "0.2.0"
description = "Read and write strings in fixed-length, length-prefixed and zero-ended binary layouts, in UTF-8 or UTF-16."
requires-python = ">=3.10"
dependencies = []
keywords = ["binary", "serialization", "string", "pascal-string", "c-string", "utf-16"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["strlayout"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
