# ============================================================================
# GENERATOR ERRORS
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Foundation - Error taxonomy
# PURPOSE: One exception per failure class of the generation pipeline
# CREATED: 19 OCT 2026
# ============================================================================
"""
Generator Errors

Every failure aborts the run; there is no partial-success mode.

- CatalogError: a catalog query or row scan failed
- SchemaConsistencyError: a relation references an unknown table/column
- UnsupportedColumnError: a column has no safe representation
- EmissionError: the generated source does not parse or format
"""

from typing import Optional


class GeneratorError(Exception):
    """Base exception for the generation pipeline."""
    pass


class CatalogError(GeneratorError):
    """Raised when reading information_schema fails."""

    def __init__(self, message: str, operation: str = None, entity_id: str = None):
        self.operation = operation
        self.entity_id = entity_id
        super().__init__(message)


class SchemaConsistencyError(GeneratorError):
    """
    Raised when the schema cannot be expressed consistently: a foreign key
    points outside the introspected schema, or two tables map to one class.
    """

    def __init__(self, message: str, table: str = None, column: str = None):
        self.table = table
        self.column = column
        super().__init__(message)


class UnsupportedColumnError(GeneratorError):
    """
    Raised when a column type cannot be mapped safely.

    Carries a descriptive kind (e.g. "nullable_temporal") so callers can
    decide whether to abort the run or skip the column.
    """

    NULLABLE_TEMPORAL = "nullable_temporal"

    def __init__(
        self,
        message: str,
        kind: str,
        table: Optional[str] = None,
        column: Optional[str] = None,
        column_type: Optional[str] = None,
    ):
        self.kind = kind
        self.table = table
        self.column = column
        self.column_type = column_type
        super().__init__(message)


class EmissionError(GeneratorError):
    """Raised when the rendered source fails to parse or format."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        super().__init__(message)


__all__ = [
    "GeneratorError",
    "CatalogError",
    "SchemaConsistencyError",
    "UnsupportedColumnError",
    "EmissionError",
]
