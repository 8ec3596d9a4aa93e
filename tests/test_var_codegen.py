import pytest

from minicc.var.ast_nodes import AssignExpr, NumberExpr, Program, VariableAccessExpr
from minicc.var.codegen import CodeGen, generate
from minicc.var.parser import parse


def test_module_header_and_main():
    text = str(generate(parse("1;")))
    assert text.startswith("; ModuleID = 'expr'\n")
    assert "define i32 @main() {" in text
    assert "declare i32 @printf(ptr, ...)" in text
    assert "ret i32 0" in text


def test_constant_expressions_fold():
    folded = str(generate(parse("1 + 2;")))
    literal = str(generate(parse("3;")))
    assert folded == literal


def test_only_last_value_is_printed():
    text = str(generate(parse("1; 2; 3;")))
    assert text.count("@printf(") == 2  # declaration and one call
    assert text.count("expr val: %d\\0A\\00") == 1


def test_variable_slot_store_and_load():
    text = str(generate(parse("int a = 3; a;")))
    assert "%a = alloca i32, align 4" in text
    assert "store i32 3, ptr %a, align 4" in text
    alloca_at = text.index("alloca")
    store_at = text.index("store")
    load_at = text.index("load i32, ptr %a")
    assert alloca_at < store_at < load_at


def test_decl_records_address():
    codegen = CodeGen()
    codegen.visit_program(parse("int x, y = 2; y;"))
    assert set(codegen.var_addr_map) == {"x", "y"}
    assert all(value.type == "ptr" for value in codegen.var_addr_map.values())


def test_empty_program_is_rejected():
    with pytest.raises(ValueError):
        generate(Program())


def test_assignment_as_last_statement_is_rejected():
    with pytest.raises(ValueError):
        generate(parse("int a = 3;"))


def test_assignment_to_undeclared_storage_is_rejected():
    program = Program([AssignExpr(VariableAccessExpr("z"), NumberExpr(1))])
    with pytest.raises(ValueError):
        generate(program)