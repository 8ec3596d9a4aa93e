"""Lexer, semantic checks, parser, printer and IR generator for expressions with int variables."""