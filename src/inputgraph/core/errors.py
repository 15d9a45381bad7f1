"""
Custom exceptions for the inputgraph system.
"""

from __future__ import annotations

from typing import Optional


class InputGraphError(Exception):
    """Base exception for all inputgraph errors."""
    pass


class NotFound(InputGraphError):
    """Raised when a registry lookup misses."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} '{name}' not found")


class SchemaError(InputGraphError):
    """Raised when a schema document or registry is malformed."""
    pass


class ConfigError(InputGraphError):
    """Raised when generator configuration is invalid."""
    pass


class UnmappedCombination(InputGraphError):
    """Raised when the type-mapping table has no rule for a key."""

    def __init__(
        self,
        kind: str,
        filter_kind: str,
        cardinality: str,
        nullable: bool,
        field: Optional[str] = None,
    ):
        self.key = (kind, filter_kind, cardinality, nullable)
        self.field = field
        super().__init__(
            f"No type mapping for kind={kind} filter={filter_kind} "
            f"cardinality={cardinality} nullable={nullable}"
        )


class ResolutionError(InputGraphError):
    """Raised when a field references something the schema does not define."""

    def __init__(self, target: str, field: Optional[str] = None):
        self.target = target
        self.field = field
        super().__init__(self.describe())

    def describe(self) -> str:
        return f"Unresolved reference '{self.target}'"


class UnresolvedRelationTarget(ResolutionError):
    """Raised when a relation points at a model missing from the registry."""

    def describe(self) -> str:
        return f"Relation target model '{self.target}' not found"


class UnresolvedEnumTarget(ResolutionError):
    """Raised when a field references an enum missing from the registry."""

    def describe(self) -> str:
        return f"Enum '{self.target}' not found"


class ConflictingImport(InputGraphError):
    """Raised when one symbol is imported from two different modules."""

    def __init__(self, symbol: str, existing: str, requested: str):
        self.symbol = symbol
        self.existing = existing
        self.requested = requested
        super().__init__(
            f"Symbol '{symbol}' already imported from '{existing}', "
            f"cannot import it from '{requested}'"
        )


class GenerationError(InputGraphError):
    """Raised when one or more declarations failed to generate."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("Generation failed:\n" + "\n".join(errors))
