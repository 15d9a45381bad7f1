"""
Import resolver - collects the symbols a generated file references.

Each symbol maps to exactly one module path per file. Entries keep
first-registration order so repeated runs produce identical output.

Usage:
    imports = ImportResolver()
    imports.register("StringFilter", module_path("StringFilter", SymbolKind.INPUT))
    imports.register("StringFilter", "./StringFilter.input")  # no-op
    imports.finalize()  # (ImportEntry(symbol="StringFilter", module="./StringFilter.input"),)
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .errors import ConflictingImport, NotFound
from .options import FileNaming
from .records import ImportEntry, SymbolKind, SymbolRef
from .utils import to_kebab_case


LIBRARY_MODULES: Mapping[str, str] = MappingProxyType({
    "Field": "@nestjs/graphql",
    "InputType": "@nestjs/graphql",
    "ArgsType": "@nestjs/graphql",
    "Int": "@nestjs/graphql",
    "Float": "@nestjs/graphql",
    "registerEnumType": "@nestjs/graphql",
    "GraphQLJSON": "graphql-type-json",
    "GraphQLDecimal": "prisma-graphql-type-decimal",
    "Decimal": "@prisma/client/runtime/library",
})


def file_stem(symbol: str, file_naming: FileNaming = "pascal") -> str:
    if file_naming == "kebab":
        return to_kebab_case(symbol)
    return symbol


def module_path(symbol: str, kind: SymbolKind, file_naming: FileNaming = "pascal") -> str:
    """
    Canonical module path of a symbol.

    Examples:
        StringFilter, input -> ./StringFilter.input
        Role, enum -> ./Role.enum
        Int, library -> @nestjs/graphql
    """
    if kind is SymbolKind.LIBRARY:
        try:
            return LIBRARY_MODULES[symbol]
        except KeyError:
            raise NotFound("Library symbol", symbol) from None
    return f"./{file_stem(symbol, file_naming)}.{kind.value}"


class ImportResolver:
    """
    Ordered, deduplicated import manifest for one generated file.

    Not safe for concurrent registration: use one instance per file.
    """

    def __init__(self, file_naming: FileNaming = "pascal"):
        self.file_naming = file_naming
        self._entries: list[ImportEntry] = []
        self._modules: dict[str, str] = {}

    def register(self, symbol: str, module: str) -> None:
        existing = self._modules.get(symbol)
        if existing is None:
            self._modules[symbol] = module
            self._entries.append(ImportEntry(symbol=symbol, module=module))
        elif existing != module:
            raise ConflictingImport(symbol, existing, module)

    def register_symbol(self, ref: SymbolRef) -> None:
        """Register a symbol at its canonical module path."""
        self.register(ref.name, module_path(ref.name, ref.kind, self.file_naming))

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._modules

    def __len__(self) -> int:
        return len(self._entries)

    def finalize(self) -> tuple[ImportEntry, ...]:
        return tuple(self._entries)
