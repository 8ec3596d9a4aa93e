[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minicc"
version = "0.1.0"
description = "A small compiler for integer expressions and int variables that emits LLVM-style textual IR"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "llvm", "ir", "lexer", "parser", "codegen"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minicc-hello = "minicc.hello:main"
minicc-expr = "minicc.expr.cli:main"
minicc-var = "minicc.var.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minicc"]

[tool.pytest.ini_options]
addopts = "-ra"
