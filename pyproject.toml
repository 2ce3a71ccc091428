[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cttlex"
version = "1.0.0"
description = "Table-driven DFA lexer for the CTT toy language, with a tool that derives the DFA from an NFA by subset construction"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "tokenizer", "dfa", "nfa", "subset construction", "compiler"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cttlex = "cttlex.cli:main"
cttlex-dfa = "cttlex.dfa:main"

[tool.hatch.build.targets.wheel]
packages = ["cttlex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
