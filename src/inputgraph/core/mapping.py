"""
Type-mapping table.

Maps (type kind, filter kind, cardinality, nullable) to the declared type, the
annotation argument and the symbols a generated property references.

Templates use the NAME placeholder for the referenced enum or model:

    (ENUM, FILTER, SINGLE, False) with name "Role"
        -> type "EnumRoleFilter | `${Role}`", annotation "EnumRoleFilter"

The table is built once at import time and never mutated. Every key has
exactly one rule; a missing key raises UnmappedCombination.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from .defs import Cardinality, FilterKind, TypeKind
from .errors import UnmappedCombination
from .records import SymbolKind, SymbolRef


NAME = "{name}"

MappingKey = tuple[TypeKind, FilterKind, Cardinality, bool]


@dataclass(frozen=True)
class ScalarInfo:
    """How one scalar kind surfaces in generated code."""
    type: str  # declared type of a bare value
    annotation: str  # runtime type named by the annotation factory
    filter_stem: str  # prefix of the generated filter names
    type_symbols: tuple[SymbolRef, ...] = ()
    annotation_symbols: tuple[SymbolRef, ...] = ()


def _lib(name: str) -> SymbolRef:
    return SymbolRef(name=name, kind=SymbolKind.LIBRARY)


SCALARS: Mapping[TypeKind, ScalarInfo] = MappingProxyType({
    TypeKind.STRING: ScalarInfo("string", "String", "String"),
    TypeKind.INT: ScalarInfo(
        "number", "Int", "Int", annotation_symbols=(_lib("Int"),)
    ),
    TypeKind.FLOAT: ScalarInfo(
        "number", "Float", "Float", annotation_symbols=(_lib("Float"),)
    ),
    TypeKind.BOOLEAN: ScalarInfo("boolean", "Boolean", "Bool"),
    # Date values are announced as the generic Date scalar; only filter
    # names carry the DateTime stem.
    TypeKind.DATETIME: ScalarInfo("Date | string", "Date", "DateTime"),
    TypeKind.BYTES: ScalarInfo("Buffer", "String", "Bytes"),
    TypeKind.DECIMAL: ScalarInfo(
        "Decimal",
        "GraphQLDecimal",
        "Decimal",
        type_symbols=(_lib("Decimal"),),
        annotation_symbols=(_lib("GraphQLDecimal"),),
    ),
    TypeKind.BIGINT: ScalarInfo("bigint | number", "String", "BigInt"),
    TypeKind.JSON: ScalarInfo(
        "any", "GraphQLJSON", "Json", annotation_symbols=(_lib("GraphQLJSON"),)
    ),
})

SORT_ORDER = "SortOrder"


@dataclass(frozen=True)
class TypeMappingRule:
    """Output shape for one mapping key."""
    type: str
    annotation: str
    symbols: tuple[tuple[str, SymbolKind], ...] = ()
    accepts_null: bool = False  # nullable fields may add "| null"

    def render(self, name: Optional[str] = None) -> tuple[str, str, tuple[SymbolRef, ...]]:
        """Substitute the referenced enum/model name into the templates."""
        fill = name or ""
        symbols = tuple(
            SymbolRef(name=template.replace(NAME, fill), kind=kind)
            for template, kind in self.symbols
        )
        return (
            self.type.replace(NAME, fill),
            self.annotation.replace(NAME, fill),
            symbols,
        )


def _refs(symbols: tuple[SymbolRef, ...]) -> tuple[tuple[str, SymbolKind], ...]:
    return tuple((s.name, s.kind) for s in symbols)


def _input(template: str) -> tuple[str, SymbolKind]:
    return (template, SymbolKind.INPUT)


def _enum(template: str) -> tuple[str, SymbolKind]:
    return (template, SymbolKind.ENUM)


def _ordering_rules(kind: TypeKind) -> dict[MappingKey, TypeMappingRule]:
    rules = {}
    order = TypeMappingRule(
        type="`${" + SORT_ORDER + "}`",
        annotation=SORT_ORDER,
        symbols=(_enum(SORT_ORDER),),
    )
    count = TypeMappingRule(type="true", annotation="Boolean")
    for cardinality in Cardinality:
        for nullable in (False, True):
            rules[(kind, FilterKind.ORDER, cardinality, nullable)] = order
            rules[(kind, FilterKind.COUNT, cardinality, nullable)] = count
    return rules


def _scalar_rules(kind: TypeKind, info: ScalarInfo) -> dict[MappingKey, TypeMappingRule]:
    rules = _ordering_rules(kind)
    value_symbols = _refs(info.annotation_symbols + info.type_symbols)
    type_symbols = _refs(info.type_symbols)
    stem = info.filter_stem

    for nullable in (False, True):
        filter_stem = f"{stem}Nullable" if nullable else stem

        rules[(kind, FilterKind.VALUE, Cardinality.SINGLE, nullable)] = TypeMappingRule(
            type=info.type,
            annotation=info.annotation,
            symbols=value_symbols,
            accepts_null=True,
        )
        rules[(kind, FilterKind.VALUE, Cardinality.LIST, nullable)] = TypeMappingRule(
            type=f"Array<{info.type}>",
            annotation=f"[{info.annotation}]",
            symbols=value_symbols,
            accepts_null=True,
        )
        rules[(kind, FilterKind.FILTER, Cardinality.LIST, nullable)] = TypeMappingRule(
            type=f"{stem}NullableListFilter",
            annotation=f"{stem}NullableListFilter",
            symbols=(_input(f"{stem}NullableListFilter"),),
        )

        if kind is TypeKind.JSON:
            # No equality shorthand: a bare JSON value is ambiguous with the
            # filter object itself.
            rules[(kind, FilterKind.FILTER, Cardinality.SINGLE, nullable)] = TypeMappingRule(
                type=f"{filter_stem}Filter",
                annotation=f"{filter_stem}Filter",
                symbols=(_input(f"{filter_stem}Filter"),),
            )
            continue

        rules[(kind, FilterKind.FILTER, Cardinality.SINGLE, nullable)] = TypeMappingRule(
            type=f"{filter_stem}Filter | {info.type}",
            annotation=f"{filter_stem}Filter",
            symbols=(_input(f"{filter_stem}Filter"),) + type_symbols,
            accepts_null=True,
        )
        rules[(kind, FilterKind.NESTED_FILTER, Cardinality.SINGLE, nullable)] = TypeMappingRule(
            type=f"Nested{filter_stem}Filter | {info.type}",
            annotation=f"Nested{filter_stem}Filter",
            symbols=(_input(f"Nested{filter_stem}Filter"),) + type_symbols,
            accepts_null=True,
        )
    return rules


def _enum_rules() -> dict[MappingKey, TypeMappingRule]:
    kind = TypeKind.ENUM
    rules = _ordering_rules(kind)
    value = "`${" + NAME + "}`"

    for nullable in (False, True):
        filter_name = f"Enum{NAME}NullableFilter" if nullable else f"Enum{NAME}Filter"

        rules[(kind, FilterKind.VALUE, Cardinality.SINGLE, nullable)] = TypeMappingRule(
            type=value,
            annotation=NAME,
            symbols=(_enum(NAME),),
            accepts_null=True,
        )
        rules[(kind, FilterKind.VALUE, Cardinality.LIST, nullable)] = TypeMappingRule(
            type=f"Array<{value}>",
            annotation=f"[{NAME}]",
            symbols=(_enum(NAME),),
            accepts_null=True,
        )
        rules[(kind, FilterKind.FILTER, Cardinality.SINGLE, nullable)] = TypeMappingRule(
            type=f"{filter_name} | {value}",
            annotation=filter_name,
            symbols=(_input(filter_name), _enum(NAME)),
            accepts_null=True,
        )
        rules[(kind, FilterKind.FILTER, Cardinality.LIST, nullable)] = TypeMappingRule(
            type=f"Enum{NAME}NullableListFilter",
            annotation=f"Enum{NAME}NullableListFilter",
            symbols=(_input(f"Enum{NAME}NullableListFilter"),),
        )
        rules[(kind, FilterKind.NESTED_FILTER, Cardinality.SINGLE, nullable)] = TypeMappingRule(
            type=f"Nested{filter_name} | {value}",
            annotation=f"Nested{filter_name}",
            symbols=(_input(f"Nested{filter_name}"), _enum(NAME)),
            accepts_null=True,
        )
    return rules


def _relation_rules() -> dict[MappingKey, TypeMappingRule]:
    kind = TypeKind.RELATION
    rules = {}

    def reference(template: str, accepts_null: bool = False) -> dict[Cardinality, TypeMappingRule]:
        return {
            Cardinality.SINGLE: TypeMappingRule(
                type=template,
                annotation=template,
                symbols=(_input(template),),
                accepts_null=accepts_null,
            ),
            Cardinality.LIST: TypeMappingRule(
                type=f"Array<{template}>",
                annotation=f"[{template}]",
                symbols=(_input(template),),
            ),
        }

    where = reference(f"{NAME}WhereInput", accepts_null=True)
    where_unique = reference(f"{NAME}WhereUniqueInput", accepts_null=True)

    for nullable in (False, True):
        def put(filter_kind: FilterKind, cardinality: Cardinality, rule: TypeMappingRule) -> None:
            rules[(kind, filter_kind, cardinality, nullable)] = rule

        put(FilterKind.RELATION_FILTER, Cardinality.SINGLE, TypeMappingRule(
            type=f"{NAME}RelationFilter | {NAME}WhereInput",
            annotation=f"{NAME}RelationFilter",
            symbols=(_input(f"{NAME}RelationFilter"), _input(f"{NAME}WhereInput")),
            accepts_null=True,
        ))
        put(FilterKind.RELATION_FILTER, Cardinality.LIST, TypeMappingRule(
            type=f"{NAME}ListRelationFilter",
            annotation=f"{NAME}ListRelationFilter",
            symbols=(_input(f"{NAME}ListRelationFilter"),),
        ))
        for cardinality in Cardinality:
            put(FilterKind.WHERE, cardinality, where[cardinality])
            put(FilterKind.WHERE_UNIQUE, cardinality, where_unique[cardinality])

        for filter_kind, verb in (
            (FilterKind.CREATE_RELATION, "Create"),
            (FilterKind.UPDATE_RELATION, "Update"),
        ):
            for cardinality, arity in ((Cardinality.SINGLE, "One"), (Cardinality.LIST, "Many")):
                name = f"{NAME}{verb}Nested{arity}Input"
                put(filter_kind, cardinality, TypeMappingRule(
                    type=name,
                    annotation=name,
                    symbols=(_input(name),),
                ))
    return rules


class TypeMappingTable:
    """
    Read-only lookup over type-mapping rules.

    Usage:
        rule = TYPE_MAPPING.lookup(TypeKind.STRING, FilterKind.FILTER, Cardinality.SINGLE, False)
        rule.render()  # ("StringFilter | string", "StringFilter", (...))
    """

    def __init__(self, rules: Mapping[MappingKey, TypeMappingRule]):
        self._rules = MappingProxyType(dict(rules))

    def lookup(
        self,
        kind: TypeKind,
        filter_kind: FilterKind,
        cardinality: Cardinality,
        nullable: bool,
    ) -> TypeMappingRule:
        try:
            return self._rules[(kind, filter_kind, cardinality, nullable)]
        except KeyError:
            raise UnmappedCombination(
                kind.value, filter_kind.value, cardinality.value, nullable
            ) from None

    def __contains__(self, key: object) -> bool:
        return key in self._rules

    def __iter__(self) -> Iterator[MappingKey]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


def build_rules() -> dict[MappingKey, TypeMappingRule]:
    rules: dict[MappingKey, TypeMappingRule] = {}
    for kind, info in SCALARS.items():
        rules.update(_scalar_rules(kind, info))
    rules.update(_enum_rules())
    rules.update(_relation_rules())
    return rules


TYPE_MAPPING = TypeMappingTable(build_rules())
