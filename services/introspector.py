# ============================================================================
# SCHEMA INTROSPECTOR
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Service - Catalog to schema model
# PURPOSE: Build Tables and Fields from information_schema rows
# CREATED: 19 OCT 2026
# ============================================================================
"""
Schema Introspector

Two ordered passes over the catalog:
    1. base tables of the schema, by name
    2. columns of each table, by ordinal position

Each column becomes a Field with its type resolved by the type mapper.
Primary-key columns also join the table identity, in column order.

Temporal fields record "datetime.datetime" in required_imports so the
emitted module imports it.
"""

from typing import List, Optional, Set

from core.contracts import ColumnRow
from core.errors import UnsupportedColumnError
from core.logging import ComponentType, get_logger, log_checkpoint, log_context
from core.models import Field, Table
from core.schema import resolve_type, time_format
from repositories import CatalogRepository

logger = get_logger(__name__, ComponentType.INTROSPECTOR)

DATETIME_IMPORT = "datetime.datetime"


class SchemaIntrospector:
    """
    Builds the schema model for one MySQL schema.

    Any catalog failure aborts introspection (CatalogError propagates).
    Unsupported columns abort too unless skip_unsupported is set, in which
    case the column is left out of the model with a warning.
    """

    def __init__(self, catalog: CatalogRepository, skip_unsupported: bool = False):
        self.catalog = catalog
        self.skip_unsupported = skip_unsupported
        self.required_imports: Set[str] = set()
        self.skipped_columns: List[str] = []

    def introspect(self, schema_name: str) -> List[Table]:
        """
        Read tables and columns of `schema_name`.

        Returns:
            Tables ordered by name, each with fields in ordinal order

        Raises:
            CatalogError: on any query or row failure
            UnsupportedColumnError: on an unsupported column (strict mode)
        """
        self.required_imports = set()
        self.skipped_columns = []

        with log_context(schema=schema_name, operation="introspect"):
            tables = [
                Table.from_catalog(row.name, row.comment)
                for row in self.catalog.fetch_tables(schema_name)
            ]
            logger.info(f"Found {len(tables)} tables")

            for table in tables:
                with log_context(table=table.name):
                    for column in self.catalog.fetch_columns(schema_name, table.name):
                        with log_context(column=column.name):
                            self._add_column(table, column)

            log_checkpoint("introspection_complete", {
                "tables": len(tables),
                "fields": sum(len(t.fields) for t in tables),
                "skipped": len(self.skipped_columns),
            })
        return tables

    def _add_column(self, table: Table, column: ColumnRow) -> Optional[Field]:
        try:
            field = self.build_field(column)
        except UnsupportedColumnError as e:
            e.table = table.name
            e.column = column.name
            if not self.skip_unsupported:
                logger.error(f"Unsupported column {table.name}.{column.name}: {e}")
                raise
            logger.warning(f"Skipping column {table.name}.{column.name} ({e.kind}): {column.column_type}")
            self.skipped_columns.append(f"{table.name}.{column.name}")
            return None

        if field.is_temporal:
            self.required_imports.add(DATETIME_IMPORT)

        return table.add_field(field)

    @staticmethod
    def build_field(column: ColumnRow) -> Field:
        """
        Build a Field from one information_schema.COLUMNS row.

        Raises:
            UnsupportedColumnError: from the type mapper
        """
        field = Field.from_column(column.name)
        field.default = column.default
        field.nullable = column.nullable
        field.comment = column.comment
        field.sql_type = column.column_type
        field.type = resolve_type(column.column_type, column.nullable)
        field.primary = column.column_key == "PRI"
        field.auto_inc = field.primary and "auto_increment" in column.extra.lower()
        if field.is_temporal:
            field.format = time_format(column.column_type)
        return field


__all__ = ["SchemaIntrospector", "DATETIME_IMPORT"]
