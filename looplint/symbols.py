"""Symbol table of declared variables built by the semantic analyzer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from . import constants


@dataclass(frozen=True)
class VariableInfo:
    """One declared variable.

    ``initial_value`` is the raw lexeme of the initializer's first token,
    never an evaluated value; it is ``""`` when the declaration has no
    initializer.
    """

    name: str
    declared_type: str
    initial_value: str
    line: int
    column: int


class SymbolTable:
    """Flat name -> VariableInfo mapping with no scopes.

    Re-declaring a name silently replaces the earlier entry.
    """

    def __init__(self):
        self._entries: dict[str, VariableInfo] = {}

    def declare(self, info: VariableInfo) -> None:
        self._entries[info.name] = info

    def lookup(self, name: str) -> VariableInfo | None:
        return self._entries.get(name)

    def type_of(self, name: str) -> str:
        info = self._entries.get(name)
        return info.declared_type if info else constants.UNKNOWN_TYPE

    def has_type(self, name: str, expected_type: str) -> bool:
        info = self._entries.get(name)
        return info is not None and info.declared_type == expected_type

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[VariableInfo]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
