[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enumwords"
version = "0.4.2"
description = "Word inflection, literal formatting and text building helpers for enum code generation"
requires-python = ">=3.10"
dependencies = []
keywords = ["enum", "code generation", "pluralise", "singularise", "inflection"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enumwords"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
