"""
Declaration synthesizer - assembles one DeclarationRecord per input type.

Fields are resolved in declared order and every referenced symbol is fed to a
fresh ImportResolver, so one synthesizer can serve many threads at once.
"""

from __future__ import annotations

import logging

from .defs import InputTypeDescriptor
from .imports import ImportResolver
from .mapping import TYPE_MAPPING, TypeMappingTable
from .options import GeneratorOptions
from .records import DeclarationRecord, ResolvedProperty, SymbolKind, SymbolRef
from .registry import SchemaRegistry
from .resolver import FieldResolver

logger = logging.getLogger(__name__)


class DeclarationSynthesizer:
    """
    Builds DeclarationRecords from input-type descriptors.

    Usage:
        synthesizer = DeclarationSynthesizer(registry)
        record = synthesizer.synthesize(descriptor)
        record.imports  # Field, InputType, then first-use order
    """

    FIELD_DECORATOR = "Field"

    def __init__(
        self,
        registry: SchemaRegistry,
        options: GeneratorOptions | None = None,
        table: TypeMappingTable = TYPE_MAPPING,
    ):
        self.options = options or GeneratorOptions()
        self.resolver = FieldResolver(registry, self.options, table)

    def synthesize(self, descriptor: InputTypeDescriptor) -> DeclarationRecord:
        imports = ImportResolver(self.options.file_naming)
        imports.register_symbol(SymbolRef(name=self.FIELD_DECORATOR, kind=SymbolKind.LIBRARY))
        imports.register_symbol(SymbolRef(name=self.options.decorator, kind=SymbolKind.LIBRARY))

        foreign_keys = descriptor.foreign_keys
        properties: list[ResolvedProperty] = []

        for input_field in descriptor.fields:
            field = input_field.field
            if field.hidden:
                logger.debug(f"Skipping hidden field {descriptor.name}.{field.name}")
                continue

            prop = self.resolver.resolve(
                field,
                descriptor.kind,
                filter_kind=input_field.filter,
                foreign_keys=foreign_keys,
            )
            if prop is None:
                continue

            for ref in prop.symbols:
                # Self references (AND: Array<UserWhereInput>) need no import
                if ref.name == descriptor.name:
                    continue
                imports.register_symbol(ref)

            properties.append(prop)

        logger.debug(
            f"Synthesized {descriptor.name}: {len(properties)} properties, {len(imports)} imports"
        )

        return DeclarationRecord(
            name=descriptor.name,
            kind=descriptor.kind,
            properties=tuple(properties),
            imports=imports.finalize(),
        )
