"""
Pydantic models for generated declarations.

These are the records handed to the renderer: resolved properties, import
entries and the declaration itself. They are frozen so one record can be
shared between the renderer and the CLI's JSON output.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .defs import InputKind


class SymbolKind(str, Enum):
    """Where a referenced symbol is declared."""
    INPUT = "input"  # generated input declaration
    ENUM = "enum"  # generated enum declaration
    LIBRARY = "library"  # third-party package export


class SymbolRef(BaseModel):
    """A symbol referenced by a resolved property."""
    model_config = ConfigDict(frozen=True)

    name: str
    kind: SymbolKind


class ResolvedProperty(BaseModel):
    """
    Fully resolved output property.

    Example (UserWhereInput.id):
        name="id", type="StringFilter | string", nullable=True,
        annotation_type="StringFilter"
    """
    model_config = ConfigDict(frozen=True)

    name: str
    type: str  # declared type, may be a union
    nullable: bool  # property is optional in the declaration
    annotation_type: str  # runtime type named by the annotation factory
    symbols: tuple[SymbolRef, ...] = ()

    @computed_field
    @property
    def annotation(self) -> str:
        """Annotation factory expression, e.g. '() => StringFilter'."""
        return f"() => {self.annotation_type}"


class ImportEntry(BaseModel):
    """One symbol imported by a generated file."""
    model_config = ConfigDict(frozen=True)

    symbol: str
    module: str


class DeclarationRecord(BaseModel):
    """Language-neutral declaration handed to the renderer."""
    model_config = ConfigDict(frozen=True)

    name: str
    kind: InputKind
    properties: tuple[ResolvedProperty, ...] = Field(default_factory=tuple)
    imports: tuple[ImportEntry, ...] = Field(default_factory=tuple)

    def get_property(self, name: str) -> ResolvedProperty | None:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None
