"""
Generator options controlling the shape of generated declarations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from .defs import InputKind
from .errors import ConfigError


FileNaming = Literal["pascal", "kebab"]

DEFAULT_RAW_FOREIGN_KEY_INPUTS = frozenset({
    InputKind.UPDATE,
    InputKind.ORDER_BY,
    InputKind.COUNT_AGGREGATE,
})


@dataclass(frozen=True)
class GeneratorOptions:
    """
    Documented generator options.

    optional_null_union: nullable fields declare "T | null" instead of bare T
    raw_foreign_key_inputs: input kinds that expose shadow foreign-key columns
    file_naming: stem style of generated module paths
    decorator: class decorator applied to every generated input
    extra: unrecognised options, kept verbatim and never interpreted
    """
    optional_null_union: bool = True
    raw_foreign_key_inputs: frozenset[InputKind] = DEFAULT_RAW_FOREIGN_KEY_INPUTS
    file_naming: FileNaming = "pascal"
    decorator: str = "InputType"
    extra: dict[str, Any] = field(default_factory=dict, hash=False, compare=False)

    KNOWN_KEYS = ("optional_null_union", "raw_foreign_key_inputs", "file_naming", "decorator")

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "GeneratorOptions":
        """Create options from a configuration mapping."""
        data = dict(data or {})

        raw_inputs = data.get("raw_foreign_key_inputs")
        if raw_inputs is None:
            raw_foreign_key_inputs = DEFAULT_RAW_FOREIGN_KEY_INPUTS
        else:
            try:
                raw_foreign_key_inputs = frozenset(InputKind(kind) for kind in raw_inputs)
            except ValueError as e:
                raise ConfigError(f"Invalid raw_foreign_key_inputs: {e}") from e

        file_naming = data.get("file_naming", "pascal")
        if file_naming not in ("pascal", "kebab"):
            raise ConfigError(
                f"Invalid file_naming '{file_naming}', must be 'pascal' or 'kebab'"
            )

        optional_null_union = data.get("optional_null_union", True)
        if not isinstance(optional_null_union, bool):
            raise ConfigError(
                f"Invalid optional_null_union '{optional_null_union}', must be true or false"
            )

        return cls(
            optional_null_union=optional_null_union,
            raw_foreign_key_inputs=raw_foreign_key_inputs,
            file_naming=file_naming,
            decorator=data.get("decorator", "InputType"),
            extra={k: v for k, v in data.items() if k not in cls.KNOWN_KEYS},
        )
