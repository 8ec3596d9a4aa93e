# minicc

`minicc` is a small compiler for integer expressions and `int` variables. It
writes LLVM-style textual IR to standard output. There are three stages, and
each one builds on the stage before it:

- **hello** (`minicc.hello`) builds a module whose `main` calls `puts` on the
  constant string `helloworld`, then prints that module.
- **expr** (`minicc.expr`) compiles integer expressions separated by `;`.
  Expressions may use `+ - * /` and parentheses. The generated `main` prints
  the value of each expression with `printf`.
- **var** (`minicc.var`) adds `int` declarations with optional initialisers,
  such as `int a, b = 3;`. It also adds assignment and variable access. The
  generated `main` prints the value of the last statement.

## Installation

```
pip install .
```

## Command-line use

```
minicc-hello
minicc-expr program.txt
minicc-var program.txt
```

`minicc-hello` takes no arguments and prints its module.

`minicc-expr` and `minicc-var` each take the path of one source file:

- `minicc-expr` prints three things in order:
  1. one line per token, for example `{ 1, row = 1, col = 1}`;
  2. each parsed expression in infix form;
  3. the IR module.
- `minicc-var` prints each parsed statement, then the IR module.

If no file name is given, both commands print `please input filename!` and exit
with status 0.

If the file cannot be read, they print `can't open file!!!` to standard error
and exit with a non-zero status.

Syntax errors and semantic errors are reported on standard error as
`error: ...` and give exit status 1. Semantic errors include:

- declaring a variable twice;
- using a variable that was never declared;
- ending a program with a statement that has no value, such as an assignment.

An example input for `minicc-expr`:

```
1 + 3; (3 + 2) * 2; 2 - 3;
```

An example input for `minicc-var`:

```
int a, b = 3;
a = b * 2;
a + b;
```

Arithmetic on two constants is folded while the IR is built:

- `1 + 3` becomes `i32 4`.
- Results wrap to 32 bits.
- Dividing a constant by zero yields `poison`.

## Library use

```python
from minicc.expr.parser import parse
from minicc.expr.printer import render
from minicc.expr.codegen import generate

program = parse("1 + 2 * 3;")
print(render(program))    # "1 + 2 * 3\n"
print(generate(program))  # the IR module as text
```

The `var` stage has the same entry points:

- `minicc.var.parser.parse`, which raises `ParseError` or `minicc.var.sema.SemaError`;
- `minicc.var.printer.render`;
- `minicc.var.codegen.generate`.

The lexers (`minicc.expr.lexer.Lexer` and `minicc.var.lexer.Lexer`) can be
iterated to get their tokens. `Token.dump()` returns the one-line form that the
command prints.

`minicc.ir` holds the IR-building pieces: `Module`, `Function`, `Block`,
`Value` and `IRBuilder`. You can use them directly to build modules and print
them with `str()`.

## What it does not do

The output is IR text only. `minicc` does not check that text against LLVM. It
does not optimise beyond constant folding. It does not compile the IR to
machine code and does not run it.

The language has only the `int` type. It has no control flow, functions or
nested blocks.

## Tests

```
pip install .[test]
pytest
```