"""Main CLI entry point for classdiagram."""

import json
import logging
import sys
from io import StringIO
from pathlib import Path

import click
from rich.markup import escape

from classdiagram.cli.display import console, show_error, show_generate_summary, show_success
from classdiagram.core.config import Settings
from classdiagram.core.exceptions import ClassDiagramError, ConfigurationError, SourceReadError
from classdiagram.core.logger import setup_logging
from classdiagram.models import ClassNode, parse_access_filter
from classdiagram.models.modifier import to_modifier_string
from classdiagram.parser import dialect_for_path, get_dialect
from classdiagram.project import generate_diagram, parse_file

logger = logging.getLogger(__name__)


def split_names(text: str | None) -> list[str]:
    """Split a ``,``, space or ``|`` separated list, dropping empty words."""
    if not text:
        return []
    for separator in ("|", ","):
        text = text.replace(separator, " ")
    return text.split()


@click.group(invoke_without_command=True)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.pass_context
def main(ctx: click.Context, version: bool) -> None:
    """classdiagram - PlantUML class diagrams from C# and Java sources."""
    if version:
        from classdiagram import __version__

        click.echo(f"classdiagram version {__version__}")
        return

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.option("--input", "-i", "input_dir", required=True, help="Directory containing the source files")
@click.option("--output", "-o", "output_file", required=True, help="PlantUML file to write")
@click.option("--language", "-l", required=True, help="Source language: cs, csharp or java")
@click.option("--access-level", "-a", "access_level", help="Shown access levels, e.g. public,protected")
@click.option("--exclude", "-e", "excluded", help="Class names to comment out, e.g. ClassA,ClassB")
@click.option("--title", "-t", help="Diagram title")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False), help="YAML configuration file")
@click.option("--verbose", is_flag=True, help="Log debug output")
def generate(
    input_dir: str,
    output_file: str,
    language: str,
    access_level: str | None,
    excluded: str | None,
    title: str | None,
    config_path: str | None,
    verbose: bool,
) -> None:
    """Generate a class diagram from every source file in a directory.

    Example:
        classdiagram generate -i ./src -o diagram.puml -l cs -a public,protected
    """
    try:
        settings = Settings.load(Path(config_path) if config_path else None)
    except ConfigurationError as e:
        show_error("Configuration Error", str(e))
        sys.exit(1)

    setup_logging(settings.logging, level="DEBUG" if verbose else None)

    try:
        dialect = get_dialect(language)
    except ClassDiagramError as e:
        show_error("Invalid Language", e.message)
        sys.exit(1)

    root = Path(input_dir)
    if not root.is_dir():
        show_error("Invalid Path", f"Input directory does not exist: {root}")
        sys.exit(1)

    result = generate_diagram(
        root,
        dialect,
        title=title,
        access_filter=parse_access_filter(access_level),
        excluded_classes=split_names(excluded),
        settings=settings.generator,
    )

    output_path = Path(output_file)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.text, encoding=settings.generator.encoding, newline="")
    except OSError as e:
        show_error("Write Error", f"Cannot write {output_path}: {e}")
        sys.exit(1)

    logger.info(f"Wrote {output_path}")
    show_generate_summary(result, output_path)


@main.command()
@click.option("--path", "-p", required=True, type=click.Path(exists=True, dir_okay=False), help="Source file")
@click.option("--language", "-l", help="Source language (detected from the extension if omitted)")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--output", "-o", help="Output file path")
def parse(path: str, language: str | None, output_format: str, output: str | None) -> None:
    """Parse one source file and show its classes and members.

    Examples:
        classdiagram parse -p Base.cs
        classdiagram parse -p Base.java -f json -o structure.json
    """
    setup_logging()
    source_path = Path(path)

    try:
        dialect = get_dialect(language) if language else dialect_for_path(source_path)
    except ClassDiagramError as e:
        show_error("Invalid Language", e.message)
        sys.exit(1)

    if dialect is None:
        show_error("Invalid Language", f"Cannot detect the language of {source_path}, use --language")
        sys.exit(1)

    try:
        classes = parse_file(source_path, dialect)
    except SourceReadError as e:
        show_error("Read Error", str(e))
        sys.exit(1)

    if output_format == "json":
        output_result = json.dumps(_format_classes_json(classes), indent=2)
    else:
        output_result = _format_classes_text(source_path, dialect.name, classes)

    if output:
        Path(output).write_text(output_result, encoding="utf-8")
        show_success("Parsed", f"Output written to: {output}")
    elif output_format == "json":
        console.print_json(output_result)
    else:
        console.print(output_result)


def _format_classes_text(source_path: Path, language: str, classes: list[ClassNode]) -> str:
    """Format parsed classes as rich markup text."""
    output = StringIO()
    output.write(f"\n[bold cyan]File: {escape(str(source_path))}[/]\n")
    output.write(f"[dim]Language: {language} | Classes: {sum(len(c.all_classes()) for c in classes)}[/]\n")

    for root in classes:
        for cls in root.all_classes():
            scope = f"{escape(cls.scope_name)}." if cls.scope_name else ""
            output.write(f"\n  [bold]{scope}{escape(str(cls.type))}[/] ({cls.category.value})\n")
            if cls.inherited_types:
                output.write(f"    [dim]inherits: {escape(', '.join(str(t) for t in cls.inherited_types))}[/]\n")
            for field in cls.fields:
                kinds = [flag.name.lower() for flag in type(field.property_kind) if flag & field.property_kind]
                suffix = f" [{', '.join(kinds)}]" if kinds else ""
                label = "property" if field.is_property else "field"
                output.write(
                    f"    [green]{label}[/] {escape(to_modifier_string(field.modifier))} "
                    f"{escape(str(field.type))} {escape(field.name)}{escape(suffix)}\n"
                )
            for method in cls.methods:
                args = ", ".join(f"{a.type} {a.name}" for a in method.arguments)
                ret = f" -> {method.return_type}" if method.return_type is not None else ""
                output.write(
                    f"    [yellow]method[/] {escape(to_modifier_string(method.modifier))} "
                    f"{escape(method.name)}({escape(args)}){escape(ret)}\n"
                )

    return output.getvalue()


def _format_classes_json(classes: list[ClassNode]) -> list[dict]:
    """Format parsed classes as JSON-serializable dicts."""
    return [_format_class_json(cls) for cls in classes]


def _format_class_json(cls: ClassNode) -> dict:
    return {
        "name": cls.name,
        "full_name": cls.full_name,
        "category": cls.category.value,
        "scope": cls.scope_name,
        "modifiers": to_modifier_string(cls.modifier).split(),
        "type": str(cls.type),
        "inherited_types": [str(t) for t in cls.inherited_types],
        "fields": [
            {
                "name": f.name,
                "type": str(f.type),
                "modifiers": to_modifier_string(f.modifier).split(),
                "property_kind": [flag.name.lower() for flag in type(f.property_kind) if flag & f.property_kind],
                "indexer_args": [{"name": a.name, "type": str(a.type)} for a in f.indexer_args],
            }
            for f in cls.fields
        ],
        "methods": [
            {
                "name": m.name,
                "return_type": str(m.return_type) if m.return_type is not None else None,
                "modifiers": to_modifier_string(m.modifier).split(),
                "arguments": [
                    {"name": a.name, "type": str(a.type), "modifier": a.modifier.value}
                    for a in m.arguments
                ],
            }
            for m in cls.methods
        ],
        "inner_classes": [_format_class_json(inner) for inner in cls.inner_classes],
    }


if __name__ == "__main__":
    main()
