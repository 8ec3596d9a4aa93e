from minicc.expr.cli import main
from minicc.expr.codegen import generate
from minicc.expr.lexer import Lexer
from minicc.expr.parser import parse
from minicc.expr.printer import render


def test_no_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "please input filename!\n"


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == -1
    assert "can't open file!!!" in capsys.readouterr().err


def test_full_output(tmp_path, capsys):
    source = "1+3;\n(2 - 8) * 4;\n"
    path = tmp_path / "prog.txt"
    path.write_text(source, encoding="utf-8")

    assert main([str(path)]) == 0

    program = parse(source)
    dumps = "".join(token.dump() + "\n" for token in Lexer(source))
    expected = dumps + render(program) + str(generate(program))
    assert capsys.readouterr().out == expected


def test_parse_error(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("(1", encoding="utf-8")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.startswith("error:")