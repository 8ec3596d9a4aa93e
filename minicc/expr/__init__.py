"""Lexer, parser, printer and IR generator for semicolon-separated integer expressions."""