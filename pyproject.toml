[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "harbol"
version = "0.1.0"
description = "Small data structures and lexing helpers: an index-linked deque, an ordered hash map, diagnostics and C/Go literal lexers."
requires-python = ">=3.10"
dependencies = []
keywords = ["deque", "hashmap", "ordered map", "lexer", "tokenizer", "utf-8", "diagnostics"]
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
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["harbol"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
