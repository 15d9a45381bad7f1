import pytest

from inputgraph.core.defs import (
    Cardinality,
    FieldDescriptor,
    FilterKind,
    InputKind,
    RelationRef,
    TypeKind,
)
from inputgraph.core.errors import UnmappedCombination, UnresolvedEnumTarget, UnresolvedRelationTarget
from inputgraph.core.options import GeneratorOptions
from inputgraph.core.registry import SchemaRegistry
from inputgraph.core.resolver import FieldResolver


def test_where_string_field(user_registry):
    resolver = FieldResolver(user_registry)
    prop = resolver.resolve(FieldDescriptor(name="id", kind=TypeKind.STRING, is_id=True), InputKind.WHERE)

    assert prop.type == "StringFilter | string"
    assert prop.annotation == "() => StringFilter"
    assert prop.nullable


def test_create_optional_int(user_registry):
    resolver = FieldResolver(user_registry)
    field = FieldDescriptor(name="countComments", kind=TypeKind.INT, nullable=True)
    prop = resolver.resolve(field, InputKind.CREATE)

    assert prop.type == "number | null"
    assert prop.annotation_type == "Int"
    assert prop.nullable
    assert not any("Filter" in s.name for s in prop.symbols)


def test_create_required_field_is_not_optional(user_registry):
    resolver = FieldResolver(user_registry)
    prop = resolver.resolve(FieldDescriptor(name="age", kind=TypeKind.INT), InputKind.CREATE)

    assert prop.type == "number"
    assert not prop.nullable


def test_create_field_with_default_is_optional(user_registry):
    resolver = FieldResolver(user_registry)
    field = FieldDescriptor(name="id", kind=TypeKind.INT, is_id=True, has_default=True)

    assert resolver.resolve(field, InputKind.CREATE).nullable


def test_update_fields_are_optional_without_null(user_registry):
    resolver = FieldResolver(user_registry)
    prop = resolver.resolve(FieldDescriptor(name="age", kind=TypeKind.INT), InputKind.UPDATE)

    assert prop.type == "number"
    assert prop.nullable


def test_null_union_can_be_disabled(user_registry):
    options = GeneratorOptions(optional_null_union=False)
    resolver = FieldResolver(user_registry, options)
    field = FieldDescriptor(name="countComments", kind=TypeKind.INT, nullable=True)

    prop = resolver.resolve(field, InputKind.CREATE)
    assert prop.type == "number"
    assert prop.nullable


def test_where_nullable_datetime(user_registry):
    resolver = FieldResolver(user_registry)
    field = FieldDescriptor(name="died", kind=TypeKind.DATETIME, nullable=True)

    assert resolver.resolve(field, InputKind.WHERE).type == "DateTimeNullableFilter | Date | string | null"


def test_enum_value_in_create(user_registry):
    resolver = FieldResolver(user_registry)
    prop = resolver.resolve(FieldDescriptor(name="role", kind=TypeKind.ENUM, enum="Role"), InputKind.CREATE)

    assert prop.type == "`${Role}`"
    assert prop.annotation_type == "Role"


def test_order_by_uses_sort_order(user_registry):
    resolver = FieldResolver(user_registry)
    prop = resolver.resolve(FieldDescriptor(name="age", kind=TypeKind.INT), InputKind.ORDER_BY)

    assert prop.type == "`${SortOrder}`"
    assert prop.annotation_type == "SortOrder"
    assert prop.nullable


def test_relation_not_exposed_in_order_by(blog_registry):
    resolver = FieldResolver(blog_registry)
    field = FieldDescriptor(name="author", kind=TypeKind.RELATION, relation=RelationRef(model="User"))

    assert resolver.resolve(field, InputKind.ORDER_BY) is None
    assert resolver.resolve(field, InputKind.COUNT_AGGREGATE) is None


def test_explicit_filter_kind_wins(user_registry):
    resolver = FieldResolver(user_registry)
    field = FieldDescriptor(name="not", kind=TypeKind.STRING)
    prop = resolver.resolve(field, InputKind.FILTER, filter_kind=FilterKind.NESTED_FILTER)

    assert prop.type == "NestedStringFilter | string"


def test_shadow_foreign_key_hidden_in_where_and_create(blog_registry):
    resolver = FieldResolver(blog_registry)
    field = FieldDescriptor(name="authorId", kind=TypeKind.INT)
    foreign_keys = frozenset({"authorId"})

    assert resolver.resolve(field, InputKind.WHERE, foreign_keys=foreign_keys) is None
    assert resolver.resolve(field, InputKind.CREATE, foreign_keys=foreign_keys) is None


def test_shadow_foreign_key_editable_in_update(blog_registry):
    resolver = FieldResolver(blog_registry)
    field = FieldDescriptor(name="authorId", kind=TypeKind.INT)
    prop = resolver.resolve(field, InputKind.UPDATE, foreign_keys=frozenset({"authorId"}))

    assert prop.type == "number"


def test_raw_foreign_key_inputs_option(blog_registry):
    options = GeneratorOptions(raw_foreign_key_inputs=frozenset({InputKind.WHERE}))
    resolver = FieldResolver(blog_registry, options)
    field = FieldDescriptor(name="authorId", kind=TypeKind.INT)
    foreign_keys = frozenset({"authorId"})

    assert resolver.resolve(field, InputKind.WHERE, foreign_keys=foreign_keys).type == "IntFilter | number"
    assert resolver.resolve(field, InputKind.UPDATE, foreign_keys=foreign_keys) is None


def test_unresolved_relation_target():
    resolver = FieldResolver(SchemaRegistry())
    field = FieldDescriptor(name="author", kind=TypeKind.RELATION, relation=RelationRef(model="Ghost"))

    with pytest.raises(UnresolvedRelationTarget) as exc_info:
        resolver.resolve(field, InputKind.WHERE)

    assert exc_info.value.target == "Ghost"
    assert exc_info.value.field == "author"


def test_unresolved_enum_target():
    resolver = FieldResolver(SchemaRegistry())
    field = FieldDescriptor(name="role", kind=TypeKind.ENUM, enum="Role")

    with pytest.raises(UnresolvedEnumTarget) as exc_info:
        resolver.resolve(field, InputKind.WHERE)

    assert exc_info.value.target == "Role"


def test_unmapped_combination_names_field(user_registry):
    resolver = FieldResolver(user_registry)
    field = FieldDescriptor(name="tags", kind=TypeKind.STRING, cardinality=Cardinality.LIST)

    with pytest.raises(UnmappedCombination) as exc_info:
        resolver.resolve(field, InputKind.FILTER, filter_kind=FilterKind.NESTED_FILTER)

    assert exc_info.value.field == "tags"


def test_unresolved_relation_fails_even_when_not_exposed():
    resolver = FieldResolver(SchemaRegistry())
    field = FieldDescriptor(name="author", kind=TypeKind.RELATION, relation=RelationRef(model="Ghost"))

    for input_kind in (InputKind.ORDER_BY, InputKind.COUNT_AGGREGATE, InputKind.WHERE_UNIQUE):
        with pytest.raises(UnresolvedRelationTarget):
            resolver.resolve(field, input_kind)
