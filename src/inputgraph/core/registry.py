"""
Schema registry - read-only lookup of models and enums.

Loaded once per generation run and shared by every resolution, including
resolutions running on different worker threads.

Usage:
    from inputgraph.core.registry import SchemaRegistry

    registry = SchemaRegistry(models=[user, post], enums=[role])
    registry.find_model("User")
    registry.find_enum("Role")
    registry.find_enum("Missing")  # raises NotFound
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from .defs import EnumDef, SchemaModel
from .errors import NotFound, SchemaError


# Built-in enum referenced by every order-by input
SORT_ORDER_ENUM = EnumDef(name="SortOrder", values=("asc", "desc"))


class SchemaRegistry:
    """
    Read-only registry of schema models and enums.

    Lookups fail with NotFound rather than returning a default.
    """

    def __init__(
        self,
        models: Iterable[SchemaModel] = (),
        enums: Iterable[EnumDef] = (),
    ):
        self._models = MappingProxyType(self._index(models, "Model"))
        enums = list(enums)
        if not any(e.name == SORT_ORDER_ENUM.name for e in enums):
            enums.append(SORT_ORDER_ENUM)
        self._enums = MappingProxyType(self._index(enums, "Enum"))

        clashes = set(self._models) & set(self._enums)
        if clashes:
            raise SchemaError(
                f"Names used by both a model and an enum: {sorted(clashes)}"
            )

    @staticmethod
    def _index(items, label: str) -> dict:
        index = {}
        for item in items:
            if item.name in index:
                raise SchemaError(f"{label} '{item.name}' defined more than once")
            index[item.name] = item
        return index

    @property
    def models(self) -> Mapping[str, SchemaModel]:
        return self._models

    @property
    def enums(self) -> Mapping[str, EnumDef]:
        return self._enums

    def find_model(self, name: str) -> SchemaModel:
        try:
            return self._models[name]
        except KeyError:
            raise NotFound("Model", name) from None

    def find_enum(self, name: str) -> EnumDef:
        try:
            return self._enums[name]
        except KeyError:
            raise NotFound("Enum", name) from None

    def __repr__(self) -> str:
        return f"SchemaRegistry(models={list(self._models)}, enums={list(self._enums)})"
