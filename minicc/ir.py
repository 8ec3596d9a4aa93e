"""A small builder for textual LLVM IR modules.

Values carry their IR type and the text that refers to them. Arithmetic on
two constants is folded at build time, the way LLVM's constant folder does
it. A folded result wraps to the width of its type, and dividing by zero
yields ``poison``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

_PTR = "ptr"
_VOID = "void"
_POISON = "poison"


@dataclass(frozen=True)
class Value:
    """An IR value: its type, how it is written, and its constant value if known."""

    type: str
    ref: str
    constant: int | None = None
    allocated_type: str | None = None

    @property
    def is_poison(self) -> bool:
        return self.ref == _POISON

    @property
    def is_constant(self) -> bool:
        return self.constant is not None or self.is_poison

    def typed(self) -> str:
        """The value written with its type, as it appears among operands."""
        return f"{self.type} {self.ref}"


def _int_bits(ty: str) -> int:
    if len(ty) > 1 and ty[0] == "i" and ty[1:].isdigit():
        return int(ty[1:])
    raise TypeError(f"{ty!r} is not an integer type")


def _wrap(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _align(ty: str) -> int:
    if ty == _PTR:
        return 8
    return max(1, _int_bits(ty) // 8)


def _escape(data: bytes) -> str:
    return "".join(
        chr(b) if 0x20 <= b < 0x7F and b not in (0x22, 0x5C) else f"\\{b:02X}"
        for b in data
    )


class Block:
    """A basic block: a label and a list of instructions."""

    def __init__(self, function: Function, name: str) -> None:
        self.function = function
        self.name = name
        self.instructions: list[str] = []
        self.terminated = False

    def __str__(self) -> str:
        body = "".join(f"  {line}\n" for line in self.instructions)
        return f"{self.name}:\n{body}"


class Function:
    """A function declaration, or a definition once it has blocks."""

    def __init__(
        self,
        module: Module,
        name: str,
        return_type: str,
        param_types: Iterable[str] = (),
        var_arg: bool = False,
    ) -> None:
        self.module = module
        self.name = name
        self.return_type = return_type
        self.param_types = list(param_types)
        self.var_arg = var_arg
        self.blocks: list[Block] = []
        self._next_slot = 0
        self._local_names: set[str] = set()
        self._unique = 0

    @property
    def is_declaration(self) -> bool:
        return not self.blocks

    @property
    def function_type(self) -> str:
        return f"{self.return_type} ({self._params()})"

    def _params(self) -> str:
        params = list(self.param_types)
        if self.var_arg:
            params.append("...")
        return ", ".join(params)

    def _local_name(self, name: str) -> str:
        if not name:
            slot = self._next_slot
            self._next_slot += 1
            return str(slot)
        candidate = name
        while candidate in self._local_names:
            self._unique += 1
            candidate = f"{name}{self._unique}"
        self._local_names.add(candidate)
        return candidate

    def append_block(self, name: str = "") -> Block:
        """Add a new, empty basic block at the end of the function."""
        block = Block(self, self._local_name(name))
        self.blocks.append(block)
        return block

    def __str__(self) -> str:
        header = f"{self.return_type} @{self.name}({self._params()})"
        if self.is_declaration:
            return f"declare {header}\n"
        body = "\n".join(str(block) for block in self.blocks)
        return f"define {header} {{\n{body}}}\n"


class Module:
    """A module holding global constants and functions, printable as IR text."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.globals: list[str] = []
        self.functions: list[Function] = []
        self._global_names: set[str] = set()
        self._next_slot = 0
        self._unique = 0

    def _global_name(self, name: str) -> str:
        if not name:
            slot = self._next_slot
            self._next_slot += 1
            return str(slot)
        candidate = name
        while candidate in self._global_names:
            self._unique += 1
            candidate = f"{name}.{self._unique}"
        self._global_names.add(candidate)
        return candidate

    def declare_function(
        self,
        name: str,
        return_type: str,
        param_types: Iterable[str] = (),
        var_arg: bool = False,
    ) -> Function:
        """Declare an external function with the given signature."""
        function = Function(self, self._global_name(name), return_type, param_types, var_arg)
        self.functions.append(function)
        return function

    def define_function(self, name: str, return_type: str) -> Function:
        """Create a function taking no parameters, to be filled with blocks."""
        return self.declare_function(name, return_type, (), False)

    def _add_string(
        self, text: str, name: str, unnamed_addr: bool, align: int | None
    ) -> Value:
        data = text.encode("utf-8") + b"\x00"
        symbol = self._global_name(name)
        line = (
            f"@{symbol} = private {'unnamed_addr ' if unnamed_addr else ''}"
            f"constant [{len(data)} x i8] c\"{_escape(data)}\""
        )
        if align is not None:
            line += f", align {align}"
        self.globals.append(line)
        return Value(_PTR, f"@{symbol}")

    def add_global_string(self, text: str, name: str = "") -> Value:
        """Add a private NUL-terminated byte array constant and return a pointer to it."""
        return self._add_string(text, name, False, None)

    def __str__(self) -> str:
        out = f"; ModuleID = '{self.name}'\nsource_filename = \"{self.name}\"\n"
        if self.globals:
            out += "\n" + "".join(f"{line}\n" for line in self.globals)
        for function in self.functions:
            out += "\n" + str(function)
        return out


class IRBuilder:
    """Appends instructions at the end of a chosen basic block."""

    def __init__(self) -> None:
        self._block: Block | None = None

    @property
    def block(self) -> Block:
        if self._block is None:
            raise RuntimeError("builder has no insertion block")
        return self._block

    def position_at_end(self, block: Block) -> None:
        self._block = block

    def _emit(self, text: str, ty: str, name: str = "", **extra: str) -> Value:
        block = self.block
        if ty == _VOID:
            block.instructions.append(text)
            return Value(_VOID, "")
        ref = f"%{block.function._local_name(name)}"
        block.instructions.append(f"{ref} = {text}")
        return Value(ty, ref, **extra)

    def const_int(self, bits: int, value: int) -> Value:
        """An integer constant of the given width, wrapped to that width."""
        if bits < 1:
            raise ValueError("integer width must be positive")
        wrapped = _wrap(value, bits)
        if bits == 1:
            ref = "true" if wrapped else "false"
        else:
            ref = str(wrapped)
        return Value(f"i{bits}", ref, wrapped)

    def _binary(self, opcode: str, nsw: bool, lhs: Value, rhs: Value) -> Value:
        if lhs.type != rhs.type:
            raise TypeError(f"operand types differ: {lhs.type} and {rhs.type}")
        bits = _int_bits(lhs.type)
        if lhs.is_constant and rhs.is_constant:
            return self._fold(opcode, bits, lhs, rhs)
        flag = " nsw" if nsw else ""
        return self._emit(f"{opcode}{flag} {lhs.type} {lhs.ref}, {rhs.ref}", lhs.type)

    def _fold(self, opcode: str, bits: int, lhs: Value, rhs: Value) -> Value:
        poison = Value(lhs.type, _POISON)
        if lhs.is_poison or rhs.is_poison:
            return poison
        a, b = lhs.constant, rhs.constant
        if opcode == "add":
            result = a + b
        elif opcode == "sub":
            result = a - b
        elif opcode == "mul":
            result = a * b
        else:
            if b == 0 or (a == -(1 << (bits - 1)) and b == -1):
                return poison
            result = abs(a) // abs(b)
            if (a < 0) != (b < 0):
                result = -result
        return self.const_int(bits, result)

    def nsw_add(self, lhs: Value, rhs: Value) -> Value:
        return self._binary("add", True, lhs, rhs)

    def nsw_sub(self, lhs: Value, rhs: Value) -> Value:
        return self._binary("sub", True, lhs, rhs)

    def nsw_mul(self, lhs: Value, rhs: Value) -> Value:
        return self._binary("mul", True, lhs, rhs)

    def sdiv(self, lhs: Value, rhs: Value) -> Value:
        return self._binary("sdiv", False, lhs, rhs)

    def alloca(self, name: str = "") -> Value:
        """Reserve a 32-bit integer slot on the stack and return its address."""
        ty = "i32"
        return self._emit(
            f"alloca {ty}, align {_align(ty)}", _PTR, name, allocated_type=ty
        )

    def store(self, value: Value, address: Value) -> Value:
        if address.type != _PTR:
            raise TypeError("store address must be a pointer")
        return self._emit(
            f"store {value.typed()}, ptr {address.ref}, align {_align(value.type)}",
            _VOID,
        )

    def load(self, address: Value, name: str = "") -> Value:
        if address.type != _PTR or address.allocated_type is None:
            raise TypeError("load needs the address of a stack slot")
        ty = address.allocated_type
        return self._emit(f"load {ty}, ptr {address.ref}, align {_align(ty)}", ty, name)

    def call(self, function: Function, args: Iterable[Value] = (), name: str = "") -> Value:
        args = list(args)
        fixed = len(function.param_types)
        if len(args) < fixed or (len(args) > fixed and not function.var_arg):
            raise TypeError(f"wrong number of arguments for @{function.name}")
        for arg, ty in zip(args, function.param_types):
            if arg.type != ty:
                raise TypeError(f"argument of type {arg.type} where {ty} is expected")
        callee = function.function_type if function.var_arg else function.return_type
        operands = ", ".join(arg.typed() for arg in args)
        return self._emit(
            f"call {callee} @{function.name}({operands})", function.return_type, name
        )

    def ret(self, value: Value | None = None) -> Value:
        text = "ret void" if value is None else f"ret {value.typed()}"
        result = self._emit(text, _VOID)
        self.block.terminated = True
        return result

    def global_string_ptr(self, text: str) -> Value:
        """Add an unnamed private string constant to the current module."""
        module = self.block.function.module
        return module._add_string(text, "", True, 1)