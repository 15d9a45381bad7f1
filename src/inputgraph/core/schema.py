"""
Pydantic models for schema documents.

A schema document is a YAML (or JSON) mapping of models and enums:

    models:
      User:
        fields:
          - {name: id, type: String, id: true}
          - {name: role, type: Role}
          - {name: posts, type: "Post[]"}
      Post:
        fields:
          - {name: id, type: Int, id: true, default: autoincrement}
          - {name: author, type: User, relation: {fields: [authorId]}}
          - {name: authorId, type: Int}
          - {name: score, type: "Float?"}
    enums:
      Role: [USER, ADMIN]

Type suffixes: "?" marks a nullable field, "[]" a list. A type that is
neither a scalar nor a declared enum is a relation to the named model.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .defs import Cardinality, EnumDef, FieldDescriptor, RelationRef, SchemaModel, TypeKind
from .errors import SchemaError
from .registry import SchemaRegistry


SCALAR_NAMES = {k.value: k for k in TypeKind if k.is_scalar}


def parse_type(type_name: str) -> tuple[str, bool, bool]:
    """
    Split a field type into (base name, is_list, nullable).

    Examples:
        Int? -> ("Int", False, True)
        String[] -> ("String", True, False)
    """
    base = type_name.strip()
    nullable = base.endswith("?")
    if nullable:
        base = base[:-1]
    is_list = base.endswith("[]")
    if is_list:
        base = base[:-2]
    if not base.isidentifier():
        raise SchemaError(f"Invalid field type '{type_name}'")
    return base, is_list, nullable


class RelationDocument(BaseModel):
    """Relation attributes of a field."""
    fields: list[str] = Field(default_factory=list)  # local foreign-key columns
    name: Optional[str] = None


class FieldDocument(BaseModel):
    name: str
    type: str
    id: bool = False
    unique: bool = False
    default: Any = None
    hidden: bool = False
    relation: Optional[RelationDocument] = None


class ModelDocument(BaseModel):
    fields: list[FieldDocument] = Field(default_factory=list)


class SchemaDocument(BaseModel):
    """Root of a schema document."""
    models: dict[str, ModelDocument] = Field(default_factory=dict)
    enums: dict[str, list[str]] = Field(default_factory=dict)

    def to_registry(self) -> SchemaRegistry:
        enums = [EnumDef(name=name, values=tuple(values)) for name, values in self.enums.items()]
        models = [
            SchemaModel(
                name=model_name,
                fields=tuple(self._field(model_name, f) for f in model.fields),
            )
            for model_name, model in self.models.items()
        ]
        return SchemaRegistry(models=models, enums=enums)

    def _field(self, model_name: str, doc: FieldDocument) -> FieldDescriptor:
        base, is_list, nullable = parse_type(doc.type)
        cardinality = Cardinality.LIST if is_list else Cardinality.SINGLE

        relation = None
        enum = None
        if base in SCALAR_NAMES:
            kind = SCALAR_NAMES[base]
            if doc.relation is not None:
                raise SchemaError(f"{model_name}.{doc.name}: scalar field cannot declare a relation")
        elif base in self.enums:
            kind = TypeKind.ENUM
            enum = base
        else:
            kind = TypeKind.RELATION
            relation_doc = doc.relation or RelationDocument()
            relation = RelationRef(
                model=base,
                fields=tuple(relation_doc.fields),
                name=relation_doc.name,
            )

        return FieldDescriptor(
            name=doc.name,
            kind=kind,
            cardinality=cardinality,
            nullable=nullable,
            relation=relation,
            enum=enum,
            hidden=doc.hidden,
            is_id=doc.id,
            is_unique=doc.unique,
            has_default=doc.default is not None,
        )


def parse_schema(data: Any) -> SchemaRegistry:
    """Validate a schema mapping and build its registry."""
    try:
        document = SchemaDocument.model_validate(data or {})
    except ValidationError as e:
        raise SchemaError(f"Invalid schema document:\n{e}") from e
    return document.to_registry()


def load_schema(path: Path | str) -> SchemaRegistry:
    """Load a schema document from a YAML or JSON file."""
    path = Path(path)
    if not path.exists():
        raise SchemaError(f"Schema file {path} not found")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise SchemaError(f"Cannot parse {path}: {e}") from e
    return parse_schema(data)
