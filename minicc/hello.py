"""Build and print a module whose main calls puts on a constant string."""

from __future__ import annotations

import sys

from minicc.ir import IRBuilder, Module


def build_module() -> Module:
    """The hello-world module: a string constant, puts, and a main that calls it."""
    module = Module("helloworld")
    puts = module.declare_function("puts", "i32", ["ptr"], False)
    gstr = module.add_global_string("helloworld", "gstr")
    main_function = module.define_function("main", "i32")

    builder = IRBuilder()
    builder.position_at_end(main_function.append_block("entry"))
    # Indexing a global with all-zero indices folds to the global itself.
    builder.call(puts, [gstr], "call_puts")
    builder.ret(builder.const_int(32, 0))
    return module


def main(argv: list[str] | None = None) -> int:
    sys.stdout.write(str(build_module()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())