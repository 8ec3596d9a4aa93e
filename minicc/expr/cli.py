"""Command line: list the tokens, print the expressions, print the IR."""

from __future__ import annotations

import sys
from pathlib import Path

from minicc.expr.codegen import generate
from minicc.expr.lexer import Lexer
from minicc.expr.parser import ParseError, parse
from minicc.expr.printer import PrintVisitor


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("please input filename!")
        return 0

    try:
        source = Path(args[0]).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        print("can't open file!!!", file=sys.stderr)
        return -1

    for token in Lexer(source):
        print(token.dump())

    try:
        program = parse(source)
    except ParseError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    PrintVisitor(sys.stdout).visit_program(program)
    sys.stdout.write(str(generate(program)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())