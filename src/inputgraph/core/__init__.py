"""
Core module - definitions, type mapping, resolution and synthesis.
"""

from __future__ import annotations

from .defs import (
    Cardinality,
    EnumDef,
    FieldDescriptor,
    FilterKind,
    InputField,
    InputKind,
    InputTypeDescriptor,
    RelationRef,
    SchemaModel,
    TypeKind,
)
from .errors import (
    ConfigError,
    ConflictingImport,
    GenerationError,
    InputGraphError,
    NotFound,
    ResolutionError,
    SchemaError,
    UnmappedCombination,
    UnresolvedEnumTarget,
    UnresolvedRelationTarget,
)
from .records import (
    DeclarationRecord,
    ImportEntry,
    ResolvedProperty,
    SymbolKind,
    SymbolRef,
)
from .options import GeneratorOptions
from .registry import SORT_ORDER_ENUM, SchemaRegistry
from .schema import SchemaDocument, load_schema, parse_schema
from .mapping import TYPE_MAPPING, TypeMappingRule, TypeMappingTable
from .imports import ImportResolver, module_path
from .resolver import FieldResolver
from .synthesizer import DeclarationSynthesizer
from .compiler import (
    CompilationError,
    CompilationResult,
    InputCompiler,
    compile_inputs,
)
from .catalog import InputCatalog
from .typescript_generator import output_file_name, render_declaration, render_enum

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
    "ResolutionError",
    "UnresolvedRelationTarget",
    "UnresolvedEnumTarget",
    "ConflictingImport",
    "GenerationError",
    # Records
    "SymbolKind",
    "SymbolRef",
    "ResolvedProperty",
    "ImportEntry",
    "DeclarationRecord",
    # Options
    "GeneratorOptions",
    # Registry
    "SchemaRegistry",
    "SORT_ORDER_ENUM",
    "SchemaDocument",
    "load_schema",
    "parse_schema",
    # Mapping
    "TYPE_MAPPING",
    "TypeMappingRule",
    "TypeMappingTable",
    # Resolution
    "ImportResolver",
    "module_path",
    "FieldResolver",
    "DeclarationSynthesizer",
    # Compiler
    "InputCompiler",
    "CompilationResult",
    "CompilationError",
    "compile_inputs",
    "InputCatalog",
    # Rendering
    "render_declaration",
    "render_enum",
    "output_file_name",
]
