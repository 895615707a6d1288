[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tokscope"
version = "0.1.0"
description = "A small tokenizer with bracket-scope matching, a prefix trie and a fixed-size matrix"
requires-python = ">=3.10"
dependencies = []
keywords = ["tokenizer", "lexer", "scope", "brackets", "trie", "matrix"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tokscope"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
