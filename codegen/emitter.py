# ============================================================================
# CODE EMITTER
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Core - Module assembly and formatting
# PURPOSE: Turn the analysed schema into one formatted Python module
# CREATED: 19 OCT 2026
# ============================================================================
"""
Code Emitter

Assembles the fragments from codegen.renderers in a fixed order:

    header
    for each table (in the given order):
        entity dataclass
        repository class

The assembly is parsed with `ast` and then canonicalised with black, so
two runs over the same model are byte-identical.
"""

import ast
from typing import Iterable, List

import black

from core.errors import EmissionError, SchemaConsistencyError
from core.logging import ComponentType, get_logger
from core.models import Table

from .renderers import render_entity, render_header, render_repository

logger = get_logger(__name__, ComponentType.EMITTER)

# Names bound by the module header
HEADER_NAMES = frozenset({"ScanError", "Any", "List", "Optional", "Sequence"})


class CodeEmitter:
    """Renders and formats the generated module."""

    def __init__(self, line_length: int = 88):
        self.line_length = line_length

    def emit(self, tables: List[Table], required_imports: Iterable[str]) -> str:
        """
        Render the module for `tables`.

        Raises:
            SchemaConsistencyError: when two tables map to the same class name
            EmissionError: when the assembled source does not parse or format
        """
        check_class_names(tables)
        parts = [render_header(required_imports)]
        for table in tables:
            parts.append(render_entity(table))
            parts.append(render_repository(table))

        source = "\n\n".join(parts)
        formatted = self.format_source(source)
        logger.info(
            f"Emitted {len(tables)} entities "
            f"({len(formatted.splitlines())} lines)"
        )
        return formatted

    def format_source(self, source: str) -> str:
        """
        Validate and canonicalise source text.

        Raises:
            EmissionError: on a syntax error or a formatter failure
        """
        try:
            ast.parse(source)
        except SyntaxError as e:
            raise EmissionError(
                f"Generated source does not parse: {e.msg} (line {e.lineno})",
                line=e.lineno,
            ) from e

        try:
            return black.format_str(source, mode=black.Mode(line_length=self.line_length))
        except black.InvalidInput as e:
            raise EmissionError(f"Formatter rejected generated source: {e}") from e


def check_class_names(tables: List[Table]) -> None:
    """
    Reject tables whose entity or repository class would shadow another
    generated class, e.g. `user` and `users` both becoming `User`.

    Raises:
        SchemaConsistencyError: naming the second table of the clash
    """
    owners = {name: None for name in HEADER_NAMES}
    for table in tables:
        for class_name in (table.entity_singular, table.repository_name):
            if class_name in owners:
                owner = owners[class_name]
                clash = f"table {owner}" if owner else "the module header"
                raise SchemaConsistencyError(
                    f"Table {table.name} maps to class {class_name}, already used by {clash}",
                    table=table.name,
                )
            owners[class_name] = table.name


__all__ = ["CodeEmitter", "check_class_names"]
