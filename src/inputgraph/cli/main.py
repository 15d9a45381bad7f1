#!/usr/bin/env python3
"""
inputgraph CLI - Main entry point.

Usage:
    inputgraph init                        # Write default inputgraph.yaml
    inputgraph generate                    # Generate TypeScript inputs
    inputgraph inspect <name>              # Print one declaration as JSON
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..core.catalog import InputCatalog
from ..core.compiler import InputCompiler
from ..core.errors import InputGraphError
from ..core.records import SymbolKind
from ..core.registry import SchemaRegistry
from ..core.schema import load_schema
from ..core.synthesizer import DeclarationSynthesizer
from ..core.typescript_generator import output_file_name, render_declaration, render_enum
from .config import DEFAULT_CONFIG_PATH, ProjectConfig, load_config


def _load_project(args: argparse.Namespace) -> tuple[ProjectConfig, SchemaRegistry]:
    """Load config (optional) and schema, applying command-line overrides."""
    config = load_config(args.config) or ProjectConfig()
    if getattr(args, "schema", None):
        config.schema = args.schema
    if getattr(args, "out", None):
        config.output = args.out
    if getattr(args, "workers", None):
        config.workers = args.workers
    return config, load_schema(config.schema)


def cmd_init(args: argparse.Namespace) -> int:
    """Write a default configuration file."""
    config_path = Path(args.config)

    if config_path.exists() and not args.force:
        print(f"Error: {config_path} already exists. Use --force to overwrite.")
        return 1

    ProjectConfig().save(config_path)
    print(f"Created {config_path}")
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate TypeScript input declarations for every model."""
    try:
        config, registry = _load_project(args)
    except InputGraphError as e:
        print(f"Error: {e}")
        return 1

    options = config.generator
    descriptors = InputCatalog(registry).build()
    result = InputCompiler(registry, options, workers=config.workers).compile(descriptors)

    output = Path(config.output)
    output.mkdir(parents=True, exist_ok=True)

    for enum in registry.enums.values():
        path = output / output_file_name(enum.name, SymbolKind.ENUM, options.file_naming)
        path.write_text(render_enum(enum))

    for record in result.declarations:
        path = output / output_file_name(record.name, SymbolKind.INPUT, options.file_naming)
        path.write_text(render_declaration(record, options.decorator))

    print(
        f"Generated {len(result.declarations)} inputs and "
        f"{len(registry.enums)} enums in {output}/"
    )

    if not result.success:
        print(f"{len(result.errors)} declarations failed:")
        for message in result.error_messages():
            print(f"  {message}")
        return 1
    return 0


def cmd_inspect(args: argparse.Namespace) -> int:
    """Print one declaration record as JSON."""
    try:
        config, registry = _load_project(args)
        descriptor = next(
            (d for d in InputCatalog(registry).build() if d.name == args.name),
            None,
        )
        if descriptor is None:
            print(f"Error: no input named '{args.name}'")
            return 1
        record = DeclarationSynthesizer(registry, config.generator).synthesize(descriptor)
    except InputGraphError as e:
        print(f"Error: {e}")
        return 1

    print(record.model_dump_json(indent=2))
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="inputgraph",
        description="inputgraph - typed input declarations from a data-model schema"
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument("--config", "-c", default=DEFAULT_CONFIG_PATH, help="Config file path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # init
    init_parser = subparsers.add_parser("init", help="Write default configuration")
    init_parser.add_argument("--force", "-f", action="store_true", help="Overwrite existing config")

    # generate
    generate_parser = subparsers.add_parser("generate", help="Generate TypeScript inputs")
    generate_parser.add_argument("--schema", "-s", help="Schema document (YAML or JSON)")
    generate_parser.add_argument("--out", "-o", help="Output directory")
    generate_parser.add_argument("--workers", "-w", type=int, help="Parallel worker threads")

    # inspect
    inspect_parser = subparsers.add_parser("inspect", help="Print one declaration as JSON")
    inspect_parser.add_argument("name", help="Input name, e.g. UserWhereInput")
    inspect_parser.add_argument("--schema", "-s", help="Schema document (YAML or JSON)")

    return parser


def app(args: Optional[List[str]] = None) -> int:
    """Main CLI application."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not parsed.command:
        parser.print_help()
        return 0

    commands = {
        "init": cmd_init,
        "generate": cmd_generate,
        "inspect": cmd_inspect,
    }

    handler = commands.get(parsed.command)
    if handler:
        return handler(parsed)

    parser.print_help()
    return 1


def main() -> None:
    """Entry point for CLI."""
    sys.exit(app())


if __name__ == "__main__":
    main()
