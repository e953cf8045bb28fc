# ============================================================================
# MODEL GENERATOR
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Service - Pipeline facade
# PURPOSE: Introspect, resolve relations and emit in one object
# CREATED: 19 OCT 2026
# ============================================================================
"""
Model Generator

Runs the pipeline over one connection and schema:

    analyse()   introspect tables/columns, then resolve relations
    generate()  emit the module (analyses first if needed)

Usage:
    with MySQLConnectionFactory(defaults.connection).connection() as conn:
        generator = ModelGenerator(conn, "shop")
        source = generator.generate()
"""

from typing import Any, List, Optional, Set

from codegen import CodeEmitter
from core.config import Defaults, get_defaults
from core.logging import ComponentType, get_logger, log_checkpoint, log_context
from core.models import Table
from repositories import CatalogRepository

from .introspector import SchemaIntrospector
from .relation_resolver import RelationResolver

logger = get_logger(__name__, ComponentType.GENERATOR)


class ModelGenerator:
    """Facade over introspection, relation resolution and emission."""

    def __init__(self, connection: Any, schema: str, defaults: Optional[Defaults] = None):
        self.defaults = defaults or get_defaults()
        self.schema = schema
        self.catalog = CatalogRepository(connection)
        self.introspector = SchemaIntrospector(
            self.catalog,
            skip_unsupported=self.defaults.generation.skip_unsupported_columns,
        )
        self.resolver = RelationResolver(
            self.catalog,
            schema,
            detect_many_to_many=self.defaults.generation.detect_many_to_many,
        )
        self.emitter = CodeEmitter(line_length=self.defaults.generation.line_length)

        self._tables: Optional[List[Table]] = None
        self._output: Optional[str] = None

    @property
    def tables(self) -> List[Table]:
        """Analysed tables (empty before analyse())."""
        return list(self._tables or [])

    @property
    def required_imports(self) -> Set[str]:
        return set(self.introspector.required_imports)

    @property
    def output(self) -> Optional[str]:
        """Source from the last generate(), or None."""
        return self._output

    @property
    def analysed(self) -> bool:
        return self._tables is not None

    def analyse(self) -> List[Table]:
        """
        Build the schema model.

        Raises:
            CatalogError, SchemaConsistencyError, UnsupportedColumnError
        """
        with log_context(schema=self.schema, operation="analyse"):
            tables = self.introspector.introspect(self.schema)
            self.resolver.resolve(tables)
            self._tables = tables
            self._output = None
        return self.tables

    def generate(self) -> str:
        """
        Emit the module source.

        Raises:
            GeneratorError subclasses from analysis or emission
        """
        if not self.analysed:
            self.analyse()

        with log_context(schema=self.schema, operation="generate"):
            self._output = self.emitter.emit(self._tables, self.required_imports)
            log_checkpoint("generation_complete", {
                "tables": len(self._tables),
                "bytes": len(self._output),
            })
        return self._output

    def get_table(self, name: str) -> Optional[Table]:
        """Find an analysed table by its SQL name."""
        for table in self._tables or []:
            if table.name == name:
                return table
        return None


__all__ = ["ModelGenerator"]
