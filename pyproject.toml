[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pestle"
version = "0.1.0"
description = "Parsing primitives: input positions, spans, a rewindable stack, tokens and a precedence climber"
requires-python = ">=3.10"
dependencies = []
keywords = ["parser", "peg", "precedence climbing", "span", "position"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pestle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
