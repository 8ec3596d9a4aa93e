from minicc.var.ctype import CType, TypeKind, int_type


def test_int_type_is_shared():
    first = int_type()
    second = int_type()
    assert first is second
    assert (second.kind, second.size, second.align) == (TypeKind.INT, 4, 4)


def test_int_type_layout():
    ty = int_type()
    assert ty.kind is TypeKind.INT
    assert ty.size == 4
    assert ty.align == 4


def test_equal_description_compares_equal():
    assert CType(TypeKind.INT, 4, 4) == int_type()
    assert CType(TypeKind.INT, 8, 8) != int_type()