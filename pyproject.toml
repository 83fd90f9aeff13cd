[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adlang"
version = "0.1.0"
description = "A small expression language with a Pratt parser, typed values and an interactive REPL"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "expression", "parser", "pratt", "repl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adlang = "adlang.repl:main"

[tool.hatch.build.targets.wheel]
packages = ["adlang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
