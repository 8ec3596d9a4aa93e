"""A small compiler for integer expressions and int variables that emits LLVM-style IR."""

__version__ = "0.1.0"