"""
Input catalog - derives the standard input-type descriptors of a schema.

For every model:
- <M>WhereInput, <M>WhereUniqueInput
- <M>CreateInput, <M>UpdateInput
- <M>OrderByInput, <M>CountAggregateInput, <M>CountOrderByAggregateInput
- <M>RelationFilter, <M>ListRelationFilter
- <M>CreateNestedOneInput, <M>CreateNestedManyInput
- <M>UpdateNestedOneInput, <M>UpdateNestedManyInput

Followed by every scalar, enum and JSON filter some where-input refers to,
together with the nested filter used by its "not" operator. Filter names are
taken from the type-mapping table, so each referenced filter has exactly one
descriptor.
"""

from __future__ import annotations

from typing import Optional

from .defs import (
    Cardinality,
    FieldDescriptor,
    FilterKind,
    InputField,
    InputKind,
    InputTypeDescriptor,
    RelationRef,
    SchemaModel,
    TypeKind,
)
from .mapping import TYPE_MAPPING, TypeMappingTable
from .registry import SchemaRegistry


COMPARISON_OPS = ("lt", "lte", "gt", "gte")
STRING_OPS = ("contains", "startsWith", "endsWith")

JSON_STRING_OPS = ("string_contains", "string_starts_with", "string_ends_with")
JSON_ARRAY_OPS = ("array_starts_with", "array_ends_with", "array_contains")


def _operators(kind: TypeKind) -> tuple[str, ...]:
    """Single-value operators of a scalar or enum filter, before "not"."""
    if kind is TypeKind.BOOLEAN:
        return ("equals",)
    if kind in (TypeKind.BYTES, TypeKind.ENUM):
        return ("equals", "in", "notIn")
    if kind is TypeKind.STRING:
        return ("equals", "in", "notIn") + COMPARISON_OPS + STRING_OPS
    return ("equals", "in", "notIn") + COMPARISON_OPS


def _value(
    name: str,
    kind: TypeKind,
    *,
    cardinality: Cardinality = Cardinality.SINGLE,
    nullable: bool = False,
    enum: Optional[str] = None,
    filter_kind: FilterKind = FilterKind.VALUE,
) -> InputField:
    return InputField(
        field=FieldDescriptor(
            name=name,
            kind=kind,
            cardinality=cardinality,
            nullable=nullable,
            enum=enum,
        ),
        filter=filter_kind,
    )


def _link(name: str, model: str, filter_kind: FilterKind, many: bool = False) -> InputField:
    return InputField(
        field=FieldDescriptor(
            name=name,
            kind=TypeKind.RELATION,
            cardinality=Cardinality.LIST if many else Cardinality.SINGLE,
            relation=RelationRef(model=model),
        ),
        filter=filter_kind,
    )


class InputCatalog:
    """
    Builds input-type descriptors for every model of a registry.

    Usage:
        descriptors = InputCatalog(registry).build()
    """

    def __init__(self, registry: SchemaRegistry, table: TypeMappingTable = TYPE_MAPPING):
        self.registry = registry
        self.table = table

    def build(self) -> tuple[InputTypeDescriptor, ...]:
        descriptors: list[InputTypeDescriptor] = []
        for model in self.registry.models.values():
            descriptors.extend(self.model_inputs(model))
        descriptors.extend(self.filter_inputs())
        return tuple(descriptors)

    # =========================================================================
    # Model inputs
    # =========================================================================

    def model_inputs(self, model: SchemaModel) -> list[InputTypeDescriptor]:
        name = model.name
        own = tuple(InputField(field=f) for f in model.fields)
        scalars = tuple(
            InputField(field=f) for f in model.fields if f.kind is not TypeKind.RELATION
        )
        unique = tuple(
            InputField(field=f) for f in model.fields if f.is_id or f.is_unique
        )
        count_all = InputField(field=FieldDescriptor(name="_all", kind=TypeKind.BOOLEAN))

        def descriptor(suffix: str, kind: InputKind, fields: tuple[InputField, ...]) -> InputTypeDescriptor:
            return InputTypeDescriptor(name=f"{name}{suffix}", kind=kind, fields=fields, model=name)

        boolean = tuple(
            _link(op, name, FilterKind.WHERE, many=True) for op in ("AND", "OR", "NOT")
        )

        return [
            descriptor("WhereInput", InputKind.WHERE, boolean + own),
            descriptor("WhereUniqueInput", InputKind.WHERE_UNIQUE, unique),
            descriptor("CreateInput", InputKind.CREATE, own),
            descriptor("UpdateInput", InputKind.UPDATE, own),
            descriptor("OrderByInput", InputKind.ORDER_BY, own),
            descriptor("CountAggregateInput", InputKind.COUNT_AGGREGATE, scalars + (count_all,)),
            descriptor("CountOrderByAggregateInput", InputKind.ORDER_BY, scalars),
            descriptor("RelationFilter", InputKind.FILTER, (
                _link("is", name, FilterKind.WHERE),
                _link("isNot", name, FilterKind.WHERE),
            )),
            descriptor("ListRelationFilter", InputKind.FILTER, tuple(
                _link(op, name, FilterKind.WHERE) for op in ("every", "some", "none")
            )),
            descriptor("CreateNestedOneInput", InputKind.NESTED, (
                _link("connect", name, FilterKind.WHERE_UNIQUE),
            )),
            descriptor("CreateNestedManyInput", InputKind.NESTED, (
                _link("connect", name, FilterKind.WHERE_UNIQUE, many=True),
            )),
            descriptor("UpdateNestedOneInput", InputKind.NESTED, (
                _link("connect", name, FilterKind.WHERE_UNIQUE),
                _value("disconnect", TypeKind.BOOLEAN),
            )),
            descriptor("UpdateNestedManyInput", InputKind.NESTED, tuple(
                _link(op, name, FilterKind.WHERE_UNIQUE, many=True)
                for op in ("connect", "set", "disconnect")
            )),
        ]

    # =========================================================================
    # Filter inputs
    # =========================================================================

    def filter_inputs(self) -> list[InputTypeDescriptor]:
        """Filters referenced by where-inputs, in first-use order."""
        descriptors: dict[str, InputTypeDescriptor] = {}

        def add(descriptor: InputTypeDescriptor) -> None:
            descriptors.setdefault(descriptor.name, descriptor)

        for model in self.registry.models.values():
            for f in model.fields:
                if f.kind is TypeKind.RELATION or f.hidden:
                    continue
                if f.is_list:
                    add(self.list_filter(f.kind, f.enum))
                elif f.kind is TypeKind.JSON:
                    add(self.json_filter(f.nullable))
                else:
                    add(self.scalar_filter(f.kind, f.nullable, f.enum))
                    add(self.scalar_filter(f.kind, f.nullable, f.enum, nested=True))

        return list(descriptors.values())

    def _filter_name(
        self,
        kind: TypeKind,
        filter_kind: FilterKind,
        cardinality: Cardinality,
        nullable: bool,
        enum: Optional[str],
    ) -> str:
        _, name, _ = self.table.lookup(kind, filter_kind, cardinality, nullable).render(enum)
        return name

    def scalar_filter(
        self,
        kind: TypeKind,
        nullable: bool,
        enum: Optional[str] = None,
        nested: bool = False,
    ) -> InputTypeDescriptor:
        """StringFilter, IntNullableFilter, EnumRoleFilter, NestedDateTimeFilter, ..."""
        filter_kind = FilterKind.NESTED_FILTER if nested else FilterKind.FILTER
        name = self._filter_name(kind, filter_kind, Cardinality.SINGLE, nullable, enum)

        fields = []
        for op in _operators(kind):
            if op in ("in", "notIn"):
                fields.append(_value(op, kind, cardinality=Cardinality.LIST, enum=enum))
            else:
                fields.append(_value(op, kind, nullable=nullable and op == "equals", enum=enum))
        fields.append(
            _value("not", kind, nullable=nullable, enum=enum, filter_kind=FilterKind.NESTED_FILTER)
        )
        return InputTypeDescriptor(name=name, kind=InputKind.FILTER, fields=tuple(fields))

    def list_filter(self, kind: TypeKind, enum: Optional[str] = None) -> InputTypeDescriptor:
        """StringNullableListFilter, EnumRoleNullableListFilter, ..."""
        name = self._filter_name(kind, FilterKind.FILTER, Cardinality.LIST, True, enum)
        many = Cardinality.LIST
        return InputTypeDescriptor(
            name=name,
            kind=InputKind.FILTER,
            fields=(
                _value("equals", kind, cardinality=many, nullable=True, enum=enum),
                _value("has", kind, nullable=True, enum=enum),
                _value("hasEvery", kind, cardinality=many, enum=enum),
                _value("hasSome", kind, cardinality=many, enum=enum),
                _value("isEmpty", TypeKind.BOOLEAN),
            ),
        )

    def json_filter(self, nullable: bool) -> InputTypeDescriptor:
        """JsonFilter / JsonNullableFilter with structural operators."""
        name = self._filter_name(TypeKind.JSON, FilterKind.FILTER, Cardinality.SINGLE, nullable, None)
        fields = [
            _value("equals", TypeKind.JSON),
            _value("path", TypeKind.STRING, cardinality=Cardinality.LIST),
        ]
        fields.extend(_value(op, TypeKind.STRING) for op in JSON_STRING_OPS)
        fields.extend(_value(op, TypeKind.JSON) for op in JSON_ARRAY_OPS + COMPARISON_OPS)
        fields.append(_value("not", TypeKind.JSON))
        return InputTypeDescriptor(name=name, kind=InputKind.FILTER, fields=tuple(fields))
