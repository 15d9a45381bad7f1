"""
TypeScript renderer for generated declarations.

Generates:
- Decorated input classes from DeclarationRecords
- Enum declarations registered with the GraphQL runtime

Example output:

    import { Field } from '@nestjs/graphql';
    import { InputType } from '@nestjs/graphql';
    import { StringFilter } from './StringFilter.input';

    @InputType()
    export class UserWhereInput {
      @Field(() => StringFilter, { nullable: true })
      id?: StringFilter | string;
    }
"""

from __future__ import annotations

from .defs import EnumDef
from .imports import file_stem, module_path
from .options import FileNaming
from .records import DeclarationRecord, ImportEntry, ResolvedProperty, SymbolKind


INDENT = "  "


def render_import(entry: ImportEntry) -> str:
    return f"import {{ {entry.symbol} }} from '{entry.module}';"


def render_property(prop: ResolvedProperty) -> list[str]:
    """Render one decorated class property."""
    nullable = "true" if prop.nullable else "false"
    marker = "?" if prop.nullable else "!"
    return [
        f"{INDENT}@Field({prop.annotation}, {{ nullable: {nullable} }})",
        f"{INDENT}{prop.name}{marker}: {prop.type};",
    ]


def render_declaration(record: DeclarationRecord, decorator: str = "InputType") -> str:
    """
    Render a declaration as TypeScript source.

    Imports follow the record's manifest order, one line per symbol.
    """
    lines = [render_import(entry) for entry in record.imports]
    lines.extend(["", f"@{decorator}()", f"export class {record.name} {{"])

    for i, prop in enumerate(record.properties):
        if i:
            lines.append("")
        lines.extend(render_property(prop))

    lines.extend(["}", ""])
    return "\n".join(lines)


def render_enum(enum: EnumDef) -> str:
    """Render an enum declaration and its runtime registration."""
    register = "registerEnumType"
    lines = [
        f"import {{ {register} }} from '{module_path(register, SymbolKind.LIBRARY)}';",
        "",
        f"export enum {enum.name} {{",
    ]
    for value in enum.values:
        lines.append(f"{INDENT}{value} = '{value}',")
    lines.extend([
        "}",
        "",
        f"{register}({enum.name}, {{ name: '{enum.name}', description: undefined }});",
        "",
    ])
    return "\n".join(lines)


def output_file_name(symbol: str, kind: SymbolKind, file_naming: FileNaming = "pascal") -> str:
    """File a generated symbol is written to, matching its module path."""
    return f"{file_stem(symbol, file_naming)}.{kind.value}.ts"
