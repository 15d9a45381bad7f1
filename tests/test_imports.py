import pytest

from inputgraph.core.errors import ConflictingImport, NotFound
from inputgraph.core.imports import ImportResolver, module_path
from inputgraph.core.records import ImportEntry, SymbolKind, SymbolRef


def test_module_path_convention():
    assert module_path("StringFilter", SymbolKind.INPUT) == "./StringFilter.input"
    assert module_path("Role", SymbolKind.ENUM) == "./Role.enum"
    assert module_path("Int", SymbolKind.LIBRARY) == "@nestjs/graphql"
    assert module_path("GraphQLJSON", SymbolKind.LIBRARY) == "graphql-type-json"


def test_module_path_kebab_naming():
    assert module_path("JsonNullableFilter", SymbolKind.INPUT, "kebab") == "./json-nullable-filter.input"
    assert module_path("SortOrder", SymbolKind.ENUM, "kebab") == "./sort-order.enum"


def test_unknown_library_symbol():
    with pytest.raises(NotFound):
        module_path("Unknown", SymbolKind.LIBRARY)


def test_register_keeps_first_registration_order():
    imports = ImportResolver()
    imports.register("Field", "@nestjs/graphql")
    imports.register("StringFilter", "./StringFilter.input")
    imports.register("Int", "@nestjs/graphql")
    imports.register("AFilter", "./AFilter.input")

    assert [e.symbol for e in imports.finalize()] == ["Field", "StringFilter", "Int", "AFilter"]


def test_register_same_pair_twice_is_noop():
    imports = ImportResolver()
    imports.register("StringFilter", "./StringFilter.input")
    imports.register("StringFilter", "./StringFilter.input")

    assert imports.finalize() == (ImportEntry(symbol="StringFilter", module="./StringFilter.input"),)


def test_register_conflicting_module_raises():
    imports = ImportResolver()
    imports.register("Decimal", "@prisma/client/runtime/library")

    with pytest.raises(ConflictingImport) as exc_info:
        imports.register("Decimal", "./Decimal.enum")

    error = exc_info.value
    assert error.symbol == "Decimal"
    assert error.existing == "@prisma/client/runtime/library"
    assert error.requested == "./Decimal.enum"
    # The first registration is not silently replaced
    assert imports.finalize() == (
        ImportEntry(symbol="Decimal", module="@prisma/client/runtime/library"),
    )


def test_register_symbol_uses_file_naming():
    imports = ImportResolver(file_naming="kebab")
    imports.register_symbol(SymbolRef(name="EnumRoleFilter", kind=SymbolKind.INPUT))

    assert "EnumRoleFilter" in imports
    assert imports.finalize()[0].module == "./enum-role-filter.input"
