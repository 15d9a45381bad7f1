"""
inputgraph - typed input declarations generated from a data-model schema.

Resolves where/create/update/order-by/filter inputs for every model of a
schema and renders them as decorated TypeScript classes.

Usage:
    from inputgraph import InputCatalog, InputCompiler, load_schema, render_declaration

    registry = load_schema("schema.yaml")
    result = InputCompiler(registry).compile(InputCatalog(registry).build())
    for record in result.declarations:
        print(render_declaration(record))
"""

from __future__ import annotations

from .core import (
    Cardinality,
    CompilationError,
    CompilationResult,
    ConfigError,
    ConflictingImport,
    DeclarationRecord,
    DeclarationSynthesizer,
    EnumDef,
    FieldDescriptor,
    FieldResolver,
    FilterKind,
    GenerationError,
    GeneratorOptions,
    ImportEntry,
    ImportResolver,
    InputCatalog,
    InputCompiler,
    InputField,
    InputGraphError,
    InputKind,
    InputTypeDescriptor,
    NotFound,
    RelationRef,
    ResolvedProperty,
    SchemaError,
    SchemaModel,
    SchemaRegistry,
    TYPE_MAPPING,
    TypeKind,
    UnmappedCombination,
    UnresolvedEnumTarget,
    UnresolvedRelationTarget,
    compile_inputs,
    load_schema,
    module_path,
    render_declaration,
    render_enum,
)

__version__ = "0.1.0"

__all__ = [
    # Definitions
    "TypeKind",
    "Cardinality",
    "InputKind",
    "FilterKind",
    "RelationRef",
    "FieldDescriptor",
    "SchemaModel",
    "EnumDef",
    "InputField",
    "InputTypeDescriptor",
    # Errors
    "InputGraphError",
    "NotFound",
    "SchemaError",
    "ConfigError",
    "UnmappedCombination",
    "UnresolvedRelationTarget",
    "UnresolvedEnumTarget",
    "ConflictingImport",
    "GenerationError",
    # Records
    "ResolvedProperty",
    "ImportEntry",
    "DeclarationRecord",
    # Engine
    "GeneratorOptions",
    "SchemaRegistry",
    "load_schema",
    "TYPE_MAPPING",
    "ImportResolver",
    "module_path",
    "FieldResolver",
    "DeclarationSynthesizer",
    "InputCompiler",
    "CompilationResult",
    "CompilationError",
    "compile_inputs",
    "InputCatalog",
    # Rendering
    "render_declaration",
    "render_enum",
]
