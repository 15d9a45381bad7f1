"""
Input compiler - synthesizes declarations for a whole generation run.

A failure in one descriptor never aborts its siblings: every descriptor is
attempted and all failures are reported together.

Usage:
    from inputgraph.core.catalog import InputCatalog
    from inputgraph.core.compiler import InputCompiler

    descriptors = InputCatalog(registry).build()
    result = InputCompiler(registry, workers=4).compile(descriptors)
    if not result.success:
        print("\n".join(result.error_messages()))
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from .defs import InputTypeDescriptor
from .errors import GenerationError, InputGraphError
from .mapping import TYPE_MAPPING, TypeMappingTable
from .options import GeneratorOptions
from .records import DeclarationRecord
from .registry import SchemaRegistry
from .synthesizer import DeclarationSynthesizer

logger = logging.getLogger(__name__)


@dataclass
class CompilationError:
    """Single compilation error."""
    declaration: str
    field: Optional[str]
    error_type: str
    message: str

    def __str__(self) -> str:
        location = f"{self.declaration}.{self.field}" if self.field else self.declaration
        return f"[{location}] {self.error_type}: {self.message}"


@dataclass
class CompilationResult:
    """Result of compilation."""
    success: bool
    declarations: list[DeclarationRecord] = field(default_factory=list)
    errors: list[CompilationError] = field(default_factory=list)

    def error_messages(self) -> list[str]:
        """Get all error messages as strings."""
        return [str(e) for e in self.errors]


class InputCompiler:
    """
    Compiles input-type descriptors to DeclarationRecords.

    With workers > 1 descriptors are synthesized on a thread pool. Every
    synthesis owns its import resolver, while the registry, options and
    mapping table are shared read-only. Output order always follows input
    order.
    """

    def __init__(
        self,
        registry: SchemaRegistry,
        options: GeneratorOptions | None = None,
        workers: int = 1,
        table: TypeMappingTable = TYPE_MAPPING,
    ):
        self.synthesizer = DeclarationSynthesizer(registry, options, table)
        self.workers = max(1, workers)

    def compile(self, descriptors: Iterable[InputTypeDescriptor]) -> CompilationResult:
        """
        Synthesize every descriptor.

        Returns:
            CompilationResult with the declarations that succeeded and one
            error per descriptor that failed
        """
        descriptors = list(descriptors)

        if self.workers > 1 and len(descriptors) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                outcomes = list(executor.map(self._compile_one, descriptors))
        else:
            outcomes = [self._compile_one(d) for d in descriptors]

        declarations = [o for o in outcomes if isinstance(o, DeclarationRecord)]
        errors = [o for o in outcomes if isinstance(o, CompilationError)]

        if errors:
            logger.error(f"{len(errors)} of {len(descriptors)} declarations failed")

        return CompilationResult(
            success=not errors,
            declarations=declarations,
            errors=errors,
        )

    def _compile_one(
        self, descriptor: InputTypeDescriptor
    ) -> Union[DeclarationRecord, CompilationError]:
        try:
            return self.synthesizer.synthesize(descriptor)
        except InputGraphError as e:
            error = CompilationError(
                declaration=descriptor.name,
                field=getattr(e, "field", None),
                error_type=type(e).__name__,
                message=str(e),
            )
            logger.error(f"Failed to generate {error}")
            return error


def compile_inputs(
    descriptors: Iterable[InputTypeDescriptor],
    registry: SchemaRegistry,
    options: GeneratorOptions | None = None,
    workers: int = 1,
) -> list[DeclarationRecord]:
    """
    Convenience function to compile descriptors.

    Raises:
        GenerationError: If any declaration fails, listing all failures

    Returns:
        Declarations in descriptor order
    """
    compiler = InputCompiler(registry, options, workers=workers)
    result = compiler.compile(descriptors)

    if not result.success:
        raise GenerationError(result.error_messages())

    return result.declarations
