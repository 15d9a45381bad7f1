"""
Field resolver - turns one field of an input type into a ResolvedProperty.

The filter kind comes from the input field when the descriptor states it,
otherwise it is derived from the input kind and the field's own kind. The
declared type and annotation come from the type-mapping table.
"""

from __future__ import annotations

import logging
from typing import Optional

from .defs import FieldDescriptor, FilterKind, InputKind, TypeKind
from .errors import NotFound, UnmappedCombination, UnresolvedEnumTarget, UnresolvedRelationTarget
from .mapping import TYPE_MAPPING, TypeMappingTable
from .options import GeneratorOptions
from .records import ResolvedProperty
from .registry import SchemaRegistry

logger = logging.getLogger(__name__)


# Filter kind per input kind for (scalar or enum field, relation field).
# None means the field is not exposed by that input kind.
DEFAULT_FILTER_KINDS: dict[InputKind, tuple[FilterKind, Optional[FilterKind]]] = {
    InputKind.WHERE: (FilterKind.FILTER, FilterKind.RELATION_FILTER),
    InputKind.WHERE_UNIQUE: (FilterKind.VALUE, None),
    InputKind.CREATE: (FilterKind.VALUE, FilterKind.CREATE_RELATION),
    InputKind.UPDATE: (FilterKind.VALUE, FilterKind.UPDATE_RELATION),
    InputKind.ORDER_BY: (FilterKind.ORDER, None),
    InputKind.COUNT_AGGREGATE: (FilterKind.COUNT, None),
    InputKind.FILTER: (FilterKind.VALUE, FilterKind.WHERE),
    InputKind.NESTED: (FilterKind.VALUE, FilterKind.WHERE_UNIQUE),
}


class FieldResolver:
    """
    Resolves fields against the mapping table and the schema registry.

    Usage:
        resolver = FieldResolver(registry)
        prop = resolver.resolve(field, InputKind.WHERE)
        prop.type  # "StringFilter | string"
    """

    def __init__(
        self,
        registry: SchemaRegistry,
        options: GeneratorOptions | None = None,
        table: TypeMappingTable = TYPE_MAPPING,
    ):
        self.registry = registry
        self.options = options or GeneratorOptions()
        self.table = table

    def filter_kind_for(self, field: FieldDescriptor, input_kind: InputKind) -> Optional[FilterKind]:
        """Default filter kind of a field in an input kind, None if not exposed."""
        scalar_kind, relation_kind = DEFAULT_FILTER_KINDS[input_kind]
        if field.kind is TypeKind.RELATION:
            return relation_kind
        return scalar_kind

    def is_shadowed(
        self,
        field: FieldDescriptor,
        input_kind: InputKind,
        foreign_keys: frozenset[str],
    ) -> bool:
        """True for a foreign-key column hidden behind its relation property."""
        return (
            field.kind is not TypeKind.RELATION
            and field.name in foreign_keys
            and input_kind not in self.options.raw_foreign_key_inputs
        )

    def resolve(
        self,
        field: FieldDescriptor,
        input_kind: InputKind,
        *,
        filter_kind: Optional[FilterKind] = None,
        foreign_keys: frozenset[str] = frozenset(),
    ) -> Optional[ResolvedProperty]:
        """
        Resolve a field to an output property.

        Returns None when the input kind does not expose the field.

        Raises:
            UnresolvedRelationTarget: relation target model is not registered
            UnresolvedEnumTarget: referenced enum is not registered
            UnmappedCombination: the table has no rule for the field
        """
        name = self._check_reference(field)

        if self.is_shadowed(field, input_kind, foreign_keys):
            logger.debug(f"Skipping foreign key '{field.name}' behind its relation ({input_kind.value})")
            return None

        if filter_kind is None:
            filter_kind = self.filter_kind_for(field, input_kind)
            if filter_kind is None:
                logger.debug(f"Field '{field.name}' not exposed by {input_kind.value} inputs")
                return None

        try:
            rule = self.table.lookup(field.kind, filter_kind, field.cardinality, field.nullable)
        except UnmappedCombination as e:
            e.field = field.name
            raise

        declared_type, annotation_type, symbols = rule.render(name)
        if field.nullable and rule.accepts_null and self.options.optional_null_union:
            declared_type = f"{declared_type} | null"

        return ResolvedProperty(
            name=field.name,
            type=declared_type,
            nullable=self._is_optional(field, input_kind),
            annotation_type=annotation_type,
            symbols=symbols,
        )

    def _check_reference(self, field: FieldDescriptor) -> Optional[str]:
        """Verify the field's model/enum reference and return its name."""
        if field.kind is TypeKind.RELATION:
            if field.relation is None:
                raise UnresolvedRelationTarget("<missing>", field=field.name)
            try:
                return self.registry.find_model(field.relation.model).name
            except NotFound as e:
                raise UnresolvedRelationTarget(field.relation.model, field=field.name) from e

        if field.kind is TypeKind.ENUM:
            if field.enum is None:
                raise UnresolvedEnumTarget("<missing>", field=field.name)
            try:
                return self.registry.find_enum(field.enum).name
            except NotFound as e:
                raise UnresolvedEnumTarget(field.enum, field=field.name) from e

        return None

    @staticmethod
    def _is_optional(field: FieldDescriptor, input_kind: InputKind) -> bool:
        if input_kind is InputKind.CREATE:
            return field.nullable or field.has_default or field.is_list
        return True
