"""
Core dataclass definitions for the inputgraph system.

These define the schema structure (models, fields, relations, enums) and the
input-type descriptors derived from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class TypeKind(str, Enum):
    """Type of a field: one of the scalar kinds, an enum or a relation."""
    STRING = "String"
    INT = "Int"
    FLOAT = "Float"
    BOOLEAN = "Boolean"
    DATETIME = "DateTime"
    BYTES = "Bytes"
    DECIMAL = "Decimal"
    BIGINT = "BigInt"
    JSON = "Json"
    ENUM = "enum"
    RELATION = "relation"

    @property
    def is_scalar(self) -> bool:
        return self not in (TypeKind.ENUM, TypeKind.RELATION)


SCALAR_KINDS: tuple[TypeKind, ...] = tuple(k for k in TypeKind if k.is_scalar)


class Cardinality(str, Enum):
    SINGLE = "single"
    LIST = "list"


class InputKind(str, Enum):
    """Kind tag of a generated input declaration."""
    WHERE = "where"
    WHERE_UNIQUE = "whereUnique"
    CREATE = "create"
    UPDATE = "update"
    ORDER_BY = "orderBy"
    COUNT_AGGREGATE = "countAggregate"
    FILTER = "filter"  # operator container, e.g. StringFilter
    NESTED = "nested"  # nested write container, e.g. UserCreateNestedOneInput


class FilterKind(str, Enum):
    """How a field's value is consumed by the generated property."""
    VALUE = "value"
    FILTER = "filter"
    NESTED_FILTER = "nestedFilter"
    ORDER = "order"
    COUNT = "count"
    RELATION_FILTER = "relationFilter"
    WHERE = "where"
    WHERE_UNIQUE = "whereUnique"
    CREATE_RELATION = "createRelation"
    UPDATE_RELATION = "updateRelation"


@dataclass(frozen=True)
class RelationRef:
    """
    Reference from a relation field to its target model.

    Example: Post.author -> User with fields=("authorId",), where authorId is
    the shadow foreign-key column stored on Post.
    """
    model: str
    fields: tuple[str, ...] = ()
    name: Optional[str] = None


@dataclass(frozen=True)
class FieldDescriptor:
    """Definition of a model field."""
    name: str
    kind: TypeKind
    cardinality: Cardinality = Cardinality.SINGLE
    nullable: bool = False
    relation: RelationRef | None = None
    enum: Optional[str] = None
    hidden: bool = False
    is_id: bool = False
    is_unique: bool = False
    has_default: bool = False

    @property
    def is_list(self) -> bool:
        return self.cardinality is Cardinality.LIST

    @property
    def to_many(self) -> bool:
        return self.relation is not None and self.is_list

    @property
    def reference(self) -> Optional[str]:
        """Name of the referenced model or enum, if any."""
        if self.relation is not None:
            return self.relation.model
        return self.enum


@dataclass(frozen=True)
class SchemaModel:
    """Definition of a schema model."""
    name: str
    fields: tuple[FieldDescriptor, ...] = ()

    def field(self, name: str) -> FieldDescriptor | None:
        for f in self.fields:
            if f.name == name:
                return f
        return None


@dataclass(frozen=True)
class EnumDef:
    """Definition of a schema enum."""
    name: str
    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class InputField:
    """A field of an input type, with the filter kind that applies to it."""
    field: FieldDescriptor
    filter: FilterKind | None = None  # None: derive from the input kind


@dataclass(frozen=True)
class InputTypeDescriptor:
    """Schema-derived description of one generated input declaration."""
    name: str
    kind: InputKind
    fields: tuple[InputField, ...] = field(default_factory=tuple)
    model: Optional[str] = None

    @property
    def foreign_keys(self) -> frozenset[str]:
        """
        Names of scalar columns that only store a relation's identifier.

        Hidden relations shadow nothing: their columns stay raw inputs.
        """
        return frozenset(
            column
            for input_field in self.fields
            if input_field.field.relation is not None and not input_field.field.hidden
            for column in input_field.field.relation.fields
        )
