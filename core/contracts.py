# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Foundation - Core enums and catalog row contracts
# PURPOSE: Scalar type tags, relation kinds and information_schema rows
# CREATED: 19 OCT 2026
# EXPORTS: ScalarType, RelationKind, TableRow, ColumnRow, ForeignKeyRow
# DEPENDENCIES: enum, pydantic
# ============================================================================
"""
Base contracts for the model generator.

These define the shapes that cross the catalog boundary:
- SQL (MySQL information_schema rows)
- Python (the in-memory schema model)

Catalog rows are validated on the way in so the introspector and resolver
only ever see typed values.
"""

from enum import Enum
from typing import Any, Optional, Sequence

from pydantic import BaseModel, Field, field_validator


# ============================================================================
# TYPE TAGS
# ============================================================================

class ScalarType(str, Enum):
    """
    Closed set of target types a column can be mapped to.

    Every tag has exactly one Python spelling (see TYPE_SPELLINGS in
    core.schema.type_mapper).
    """
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"
    TIME = "time"
    NULL_INT = "null_int"
    NULL_FLOAT = "null_float"
    NULL_BOOL = "null_bool"
    NULL_STRING = "null_string"

    def is_nullable(self) -> bool:
        """Check if this is one of the nullable variants."""
        return self in (
            ScalarType.NULL_INT,
            ScalarType.NULL_FLOAT,
            ScalarType.NULL_BOOL,
            ScalarType.NULL_STRING,
        )

    def is_numeric(self) -> bool:
        """Check if the zero value of this tag compares equal to 0."""
        return self in (ScalarType.INT, ScalarType.FLOAT)


class RelationKind(str, Enum):
    """
    Kinds of relation the resolver produces.

    BELONGS_TO   - one foreign key, navigable from the owning row
    MANY_TO_MANY - two belongs-to relations joined through a link table
    """
    BELONGS_TO = "belongs_to"
    MANY_TO_MANY = "many_to_many"


# ============================================================================
# CATALOG ROW CONTRACTS
# ============================================================================

class CatalogRow(BaseModel):
    """Base for rows read from information_schema."""

    model_config = {"frozen": True}

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "CatalogRow":
        """Build a contract from a positional cursor row."""
        names = list(cls.model_fields)
        if len(row) != len(names):
            raise ValueError(
                f"{cls.__name__} expects {len(names)} columns, got {len(row)}"
            )
        return cls.model_validate(dict(zip(names, row)))


def _text(value: Any) -> Any:
    """MySQL drivers may hand back bytes for text columns."""
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8")
    return value


class TableRow(CatalogRow):
    """One base table: information_schema.TABLES."""
    name: str = Field(..., min_length=1)
    comment: str = ""

    @field_validator("name", "comment", mode="before")
    @classmethod
    def _decode(cls, value: Any) -> Any:
        value = _text(value)
        return "" if value is None else value


class ColumnRow(CatalogRow):
    """One column: information_schema.COLUMNS."""
    name: str = Field(..., min_length=1)
    default: Optional[str] = None
    nullable: bool = False
    column_type: str = Field(..., min_length=1)
    column_key: str = ""
    extra: str = ""
    comment: str = ""

    @field_validator("nullable", mode="before")
    @classmethod
    def _yes_no(cls, value: Any) -> Any:
        value = _text(value)
        if isinstance(value, str):
            return value.upper() == "YES"
        return value

    @field_validator("default", mode="before")
    @classmethod
    def _decode_default(cls, value: Any) -> Any:
        value = _text(value)
        return None if value is None else str(value)

    @field_validator("name", "column_type", "column_key", "extra", "comment", mode="before")
    @classmethod
    def _decode(cls, value: Any) -> Any:
        value = _text(value)
        return "" if value is None else value


class ForeignKeyRow(CatalogRow):
    """One referencing column: information_schema.KEY_COLUMN_USAGE."""
    constraint_name: str = Field(..., min_length=1)
    column_name: str = Field(..., min_length=1)
    referenced_table: str = Field(..., min_length=1)
    referenced_column: str = Field(..., min_length=1)

    @field_validator("*", mode="before")
    @classmethod
    def _decode(cls, value: Any) -> Any:
        return _text(value)


__all__ = [
    "ScalarType",
    "RelationKind",
    "CatalogRow",
    "TableRow",
    "ColumnRow",
    "ForeignKeyRow",
]
