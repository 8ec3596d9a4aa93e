from minicc.hello import build_module, main


def test_module_text():
    assert str(build_module()) == (
        "; ModuleID = 'helloworld'\n"
        'source_filename = "helloworld"\n'
        "\n"
        '@gstr = private constant [11 x i8] c"helloworld\\00"\n'
        "\n"
        "declare i32 @puts(ptr)\n"
        "\n"
        "define i32 @main() {\n"
        "entry:\n"
        "  %call_puts = call i32 @puts(ptr @gstr)\n"
        "  ret i32 0\n"
        "}\n"
    )


def test_functions_in_declaration_order():
    module = build_module()
    assert [f.name for f in module.functions] == ["puts", "main"]
    assert module.functions[0].is_declaration
    assert module.functions[1].blocks[0].terminated


def test_main_prints_module(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == str(build_module())


def test_build_is_repeatable():
    build_module()
    second = build_module()
    assert second.globals == ['@gstr = private constant [11 x i8] c"helloworld\\00"']
    assert [f.name for f in second.functions] == ["puts", "main"]