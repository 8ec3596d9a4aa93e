"""Nested symbol tables for variable names."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from minicc.var.ctype import CType


class SymbolKind(Enum):
    LOCAL_VARIABLE = auto()


@dataclass(frozen=True)
class Symbol:
    kind: SymbolKind
    ty: CType
    name: str


@dataclass
class Env:
    """One level of scope: the variables declared in it."""

    variable_symbol_table: dict[str, Symbol] = field(default_factory=dict)


class Scope:
    """A stack of environments, innermost last."""

    def __init__(self) -> None:
        self.envs: list[Env] = [Env()]

    def enter_scope(self) -> None:
        self.envs.append(Env())

    def exit_scope(self) -> None:
        if len(self.envs) == 1:
            raise RuntimeError("cannot exit the outermost scope")
        self.envs.pop()

    def find_var_symbol(self, name: str) -> Symbol | None:
        """Look a name up from the innermost environment outwards."""
        for env in reversed(self.envs):
            symbol = env.variable_symbol_table.get(name)
            if symbol is not None:
                return symbol
        return None

    def find_var_symbol_in_cur_env(self, name: str) -> Symbol | None:
        return self.envs[-1].variable_symbol_table.get(name)

    def add_symbol(self, kind: SymbolKind, ty: CType, name: str) -> Symbol:
        """Add a symbol to the innermost environment; an existing entry is kept."""
        table = self.envs[-1].variable_symbol_table
        return table.setdefault(name, Symbol(kind, ty, name))