# ============================================================================
# TYPE MAPPER
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Core - MySQL column type to Python type resolution
# PURPOSE: Map COLUMN_TYPE + nullability to a ScalarType tag
# CREATED: 19 OCT 2026
# EXPORTS: resolve_type, time_format, parse_column_type, TYPE_SPELLINGS, ZERO_VALUES
# DEPENDENCIES: core.contracts, core.errors
# ============================================================================
"""
Type Mapper

Pure functions; no database access.

    resolve_type("int(11)", False)     -> ScalarType.INT
    resolve_type("tinyint(1)", True)   -> ScalarType.NULL_BOOL
    resolve_type("datetime", False)    -> ScalarType.TIME
    resolve_type("geometry", True)     -> ScalarType.STRING

Timestamps are mapped to epoch integers, not datetime objects. Unknown types
degrade to a non-nullable string. Nullable temporal columns are rejected
with UnsupportedColumnError.
"""

import re
from typing import Dict, Tuple

from core.contracts import ScalarType
from core.errors import UnsupportedColumnError

# name(size[,scale]) with optional trailing MySQL modifiers
_SIZED_TYPE = re.compile(
    r"^([a-zA-Z_]+)\(([0-9]+)(,[0-9]+)?\)((\s+(unsigned|signed|zerofill))*)$"
)
# enum('a','b'), set('x') and other types with non-numeric arguments
_ARGUMENT_TYPE = re.compile(r"^([a-zA-Z_]+)\s*\(.*\)$", re.DOTALL)
# bare name with modifiers only: "int unsigned", "bigint unsigned zerofill"
_MODIFIED_TYPE = re.compile(r"^([a-zA-Z_]+)(\s+(unsigned|signed|zerofill))+$")

INTEGER_TYPES = frozenset({
    "int", "integer", "smallint", "tinyint", "mediumint", "bigint", "bool", "boolean",
})
BOOLEAN_NAMES = frozenset({"bool", "boolean"})
EPOCH_TYPES = frozenset({"timestamp"})
FLOAT_TYPES = frozenset({"float", "double", "decimal", "real", "numeric"})
STRING_TYPES = frozenset({
    "text", "tinytext", "mediumtext", "longtext", "varchar", "char", "enum", "set",
})

# strftime patterns for text <-> datetime conversion
TIME_FORMATS: Dict[str, str] = {
    "datetime": "%Y-%m-%d %H:%M:%S",
    "date": "%Y-%m-%d",
    "time": "%H:%M:%S",
}

TYPE_SPELLINGS: Dict[ScalarType, str] = {
    ScalarType.INT: "int",
    ScalarType.FLOAT: "float",
    ScalarType.BOOL: "bool",
    ScalarType.STRING: "str",
    ScalarType.TIME: "datetime",
    ScalarType.NULL_INT: "Optional[int]",
    ScalarType.NULL_FLOAT: "Optional[float]",
    ScalarType.NULL_BOOL: "Optional[bool]",
    ScalarType.NULL_STRING: "Optional[str]",
}

# Source literal of each tag's zero value; a fresh entity carries these
ZERO_VALUES: Dict[ScalarType, str] = {
    ScalarType.INT: "0",
    ScalarType.FLOAT: "0.0",
    ScalarType.BOOL: "False",
    ScalarType.STRING: '""',
    ScalarType.TIME: "datetime.min",
    ScalarType.NULL_INT: "None",
    ScalarType.NULL_FLOAT: "None",
    ScalarType.NULL_BOOL: "None",
    ScalarType.NULL_STRING: "None",
}


def parse_column_type(raw_column_type: str) -> Tuple[str, int, int]:
    """
    Split a MySQL COLUMN_TYPE into (name, size, scale).

    Size and scale are -1 when absent.

        "decimal(10,2)"    -> ("decimal", 10, 2)
        "int(11) unsigned" -> ("int", 11, -1)
        "enum('a','b')"    -> ("enum", -1, -1)
        "datetime"         -> ("datetime", -1, -1)
    """
    text = raw_column_type.strip().lower()

    match = _SIZED_TYPE.match(text)
    if match:
        scale = int(match.group(3)[1:]) if match.group(3) else -1
        return match.group(1), int(match.group(2)), scale

    match = _ARGUMENT_TYPE.match(text) or _MODIFIED_TYPE.match(text)
    if match:
        return match.group(1), -1, -1

    return text, -1, -1


def resolve_type(raw_column_type: str, nullable: bool) -> ScalarType:
    """
    Resolve a declared column type to a ScalarType tag.

    Args:
        raw_column_type: information_schema.COLUMNS.COLUMN_TYPE value
        nullable: True when IS_NULLABLE = 'YES'

    Returns:
        ScalarType tag

    Raises:
        UnsupportedColumnError: for nullable datetime/date/time columns
    """
    name, size, _ = parse_column_type(raw_column_type)

    if name in INTEGER_TYPES:
        if size == 1 or name in BOOLEAN_NAMES:
            return ScalarType.NULL_BOOL if nullable else ScalarType.BOOL
        return ScalarType.NULL_INT if nullable else ScalarType.INT

    if name in EPOCH_TYPES:
        return ScalarType.NULL_INT if nullable else ScalarType.INT

    if name in FLOAT_TYPES:
        return ScalarType.NULL_FLOAT if nullable else ScalarType.FLOAT

    if name in STRING_TYPES:
        return ScalarType.NULL_STRING if nullable else ScalarType.STRING

    if name in TIME_FORMATS:
        if nullable:
            raise UnsupportedColumnError(
                f"Nullable {name} columns are not supported: {raw_column_type}",
                kind=UnsupportedColumnError.NULLABLE_TEMPORAL,
                column_type=raw_column_type,
            )
        return ScalarType.TIME

    return ScalarType.STRING


def time_format(raw_column_type: str) -> str:
    """Return the strftime pattern for a temporal type, or "" otherwise."""
    name, _, _ = parse_column_type(raw_column_type)
    return TIME_FORMATS.get(name, "")


def type_spelling(scalar_type: ScalarType) -> str:
    """Python annotation for a tag."""
    return TYPE_SPELLINGS[scalar_type]


def zero_value(scalar_type: ScalarType) -> str:
    """Source literal of a tag's zero value."""
    return ZERO_VALUES[scalar_type]


__all__ = [
    "parse_column_type",
    "resolve_type",
    "time_format",
    "type_spelling",
    "zero_value",
    "TYPE_SPELLINGS",
    "ZERO_VALUES",
    "TIME_FORMATS",
]
