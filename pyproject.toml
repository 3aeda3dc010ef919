[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minicfront"
version = "1.0.1"
description = "Front end for a small C-like language: two lexers and a recursive-descent parser that builds an abstract syntax tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "scanner", "parser", "recursive-descent", "ast", "minic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minicfront = "minicfront.executor:main"

[tool.hatch.build.targets.wheel]
packages = ["minicfront"]

[tool.pytest.ini_options]
addopts = "-ra"
