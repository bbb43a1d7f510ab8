"""Source acquisition and whole-project diagram generation."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from classdiagram.core.config import GeneratorSettings
from classdiagram.core.exceptions import SourceReadError
from classdiagram.diagram import Relation, generate, infer
from classdiagram.models import ALL_ACCESS_LEVELS, ClassNode, Modifier
from classdiagram.parser import Dialect, SourceCodeParser

logger = logging.getLogger(__name__)


@dataclass
class ProjectModel:
    """Classes parsed from a set of source files."""

    classes: list[ClassNode] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)
    skipped_files: dict[Path, str] = field(default_factory=dict)

    @property
    def class_count(self) -> int:
        """Number of classes including inner classes."""
        return sum(len(cls.all_classes()) for cls in self.classes)


@dataclass
class DiagramResult:
    """Output of ``generate_diagram``."""

    model: ProjectModel
    relations: list[Relation]
    text: str


def find_source_files(
    root: Path,
    dialect: Dialect,
    settings: GeneratorSettings | None = None,
) -> list[Path]:
    """Find the source files of a dialect below ``root``.

    Args:
        root: Directory to search recursively.
        dialect: Dialect whose file extensions are collected.
        settings: Excluded directory names and the file size limit.

    Returns:
        Sorted file paths.
    """
    settings = settings or GeneratorSettings()
    root = Path(root)
    excluded_dirs = set(settings.excluded_dirs)
    extensions = set(dialect.extensions)

    files = []
    for file_path in root.rglob("*"):
        relative_parts = file_path.relative_to(root).parts[:-1]
        if any(part in excluded_dirs for part in relative_parts):
            continue
        if file_path.suffix.lower() not in extensions or not file_path.is_file():
            continue
        try:
            if file_path.stat().st_size > settings.max_file_size:
                logger.debug(f"Skipping large file: {file_path}")
                continue
        except OSError:
            continue
        files.append(file_path)

    return sorted(files)


def read_source(path: Path, encoding: str = "utf-8") -> str:
    """Read a source file.

    Raises:
        SourceReadError: If the file cannot be read or decoded.
    """
    try:
        # utf-8-sig drops the BOM Visual Studio writes to C# files
        return Path(path).read_text(encoding="utf-8-sig" if encoding.lower() in ("utf-8", "utf8") else encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise SourceReadError(f"Cannot read source file: {e}", file_path=str(path)) from e


def parse_file(path: Path, dialect: Dialect, encoding: str = "utf-8") -> list[ClassNode]:
    """Parse one source file into its top-level classes."""
    return SourceCodeParser(dialect).parse(read_source(path, encoding))


def parse_files(
    paths: Iterable[Path],
    dialect: Dialect,
    max_workers: int = 4,
    encoding: str = "utf-8",
) -> ProjectModel:
    """Parse files in parallel.

    A file that cannot be read is recorded in ``skipped_files`` and does
    not stop the others. Classes keep the order of ``paths``.
    """
    paths = list(paths)
    model = ProjectModel()
    results: dict[Path, list[ClassNode]] = {}

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(parse_file, path, dialect, encoding): path for path in paths}
        for future in as_completed(futures):
            path = futures[future]
            try:
                results[path] = future.result()
            except SourceReadError as e:
                logger.warning(f"Skipping {path}: {e.message}")
                model.skipped_files[path] = e.message

    for path in paths:
        if path in results:
            model.files.append(path)
            model.classes.extend(results[path])

    logger.info(
        f"Parsed {len(model.files)} files, found {model.class_count} classes"
        f" ({len(model.skipped_files)} skipped)"
    )
    return model


def generate_diagram(
    root: Path,
    dialect: Dialect,
    title: str | None = None,
    access_filter: Modifier = ALL_ACCESS_LEVELS,
    excluded_classes: Iterable[str] | None = None,
    settings: GeneratorSettings | None = None,
) -> DiagramResult:
    """Parse every source file below ``root`` and render the class diagram.

    Relations are inferred only after all files are parsed, since they may
    point to classes in any file.
    """
    settings = settings or GeneratorSettings()
    files = find_source_files(root, dialect, settings)
    logger.info(f"Found {len(files)} {dialect.name} files in {root}")

    model = parse_files(files, dialect, settings.max_workers, settings.encoding)
    relations = infer(model.classes)
    text = generate(
        title or settings.title,
        model.classes,
        relations,
        access_filter=access_filter,
        excluded_classes=excluded_classes,
        newline=settings.newline,
    )
    return DiagramResult(model=model, relations=relations, text=text)
