# ============================================================================
# CATALOG REPOSITORY
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Domain - information_schema queries
# PURPOSE: Read tables, columns and foreign keys of one MySQL schema
# CREATED: 19 OCT 2026
# ============================================================================
"""
Catalog Repository

Read-only access to MySQL information_schema.

Every query opens its own cursor in a `with` block, consumes the whole
result with fetchall() and releases the cursor before the next query runs,
on success and on error. Rows are validated into pydantic contracts.
"""

from typing import Any, List, Sequence, Type

from core.contracts import CatalogRow, ColumnRow, ForeignKeyRow, TableRow
from infrastructure.base_repository import BaseRepository

SQL_TABLES = """
    SELECT   Tables.TABLE_NAME,
             Tables.TABLE_COMMENT
    FROM     information_schema.TABLES AS Tables
    WHERE    Tables.TABLE_SCHEMA = %s AND Tables.TABLE_TYPE = 'BASE TABLE'
    ORDER BY Tables.TABLE_NAME
"""

# DESCRIBE is not enough: it drops comments and the full COLUMN_TYPE
SQL_COLUMNS = """
    SELECT   Columns.COLUMN_NAME,
             Columns.COLUMN_DEFAULT,
             Columns.IS_NULLABLE,
             Columns.COLUMN_TYPE,
             Columns.COLUMN_KEY,
             Columns.EXTRA,
             Columns.COLUMN_COMMENT
    FROM     information_schema.COLUMNS AS Columns
    WHERE    Columns.TABLE_SCHEMA = %s AND Columns.TABLE_NAME = %s
    ORDER BY Columns.ORDINAL_POSITION
"""

# Rows with a referenced table/column are true foreign keys; PRIMARY and
# UNIQUE constraints show up here too, with NULL references.
SQL_FOREIGN_KEYS = """
    SELECT   Relations.CONSTRAINT_NAME,
             Relations.COLUMN_NAME,
             Relations.REFERENCED_TABLE_NAME,
             Relations.REFERENCED_COLUMN_NAME
    FROM     information_schema.KEY_COLUMN_USAGE AS Relations
    WHERE    Relations.CONSTRAINT_SCHEMA = %s AND
             Relations.TABLE_SCHEMA = %s AND
             Relations.REFERENCED_TABLE_SCHEMA = %s AND
             Relations.TABLE_NAME = %s AND
             Relations.REFERENCED_TABLE_NAME IS NOT NULL AND
             Relations.REFERENCED_COLUMN_NAME IS NOT NULL
    ORDER BY Relations.CONSTRAINT_NAME, Relations.ORDINAL_POSITION
"""


class CatalogRepository(BaseRepository):
    """Repository over information_schema for one connection."""

    def __init__(self, connection: Any):
        """
        Args:
            connection: PEP 249 connection (PyMySQL in production)
        """
        super().__init__()
        self.connection = connection

    def _query(self, query: str, params: Sequence[Any], contract: Type[CatalogRow]) -> List[Any]:
        """Run one query and validate every row into `contract`."""
        with self.connection.cursor() as cursor:
            cursor.execute(query, tuple(params))
            rows = cursor.fetchall()
        return [contract.from_row(row) for row in rows]

    def fetch_tables(self, schema: str) -> List[TableRow]:
        """Base tables of `schema`, ordered by name."""
        with self._error_context("fetch tables", schema):
            tables = self._query(SQL_TABLES, (schema,), TableRow)
        self._log_operation("fetch tables", schema, {"count": len(tables)})
        return tables

    def fetch_columns(self, schema: str, table: str) -> List[ColumnRow]:
        """Columns of `schema.table`, ordered by ordinal position."""
        entity_id = f"{schema}.{table}"
        with self._error_context("fetch columns", entity_id):
            columns = self._query(SQL_COLUMNS, (schema, table), ColumnRow)
        self._log_operation("fetch columns", entity_id, {"count": len(columns)})
        return columns

    def fetch_foreign_keys(self, schema: str, table: str) -> List[ForeignKeyRow]:
        """Foreign-key columns of `schema.table` that reference the same schema."""
        entity_id = f"{schema}.{table}"
        with self._error_context("fetch foreign keys", entity_id):
            keys = self._query(
                SQL_FOREIGN_KEYS, (schema, schema, schema, table), ForeignKeyRow
            )
        self._log_operation("fetch foreign keys", entity_id, {"count": len(keys)})
        return keys


__all__ = ["CatalogRepository", "SQL_TABLES", "SQL_COLUMNS", "SQL_FOREIGN_KEYS"]
