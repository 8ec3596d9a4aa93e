"""Command line: print the program, then print its IR."""

from __future__ import annotations

import sys
from pathlib import Path

from minicc.var.codegen import generate
from minicc.var.parser import ParseError, parse
from minicc.var.printer import PrintVisitor
from minicc.var.sema import SemaError


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

    try:
        program = parse(source)
    except (ParseError, SemaError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    PrintVisitor(sys.stdout).visit_program(program)
    try:
        module = generate(program)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(str(module))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())