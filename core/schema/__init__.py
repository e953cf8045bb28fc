# ============================================================================
# SCHEMA MODULE
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Core - Column type resolution
# PURPOSE: Map MySQL column types to Python types
# CREATED: 19 OCT 2026
# ============================================================================

from core.schema.type_mapper import (
    TIME_FORMATS,
    TYPE_SPELLINGS,
    ZERO_VALUES,
    parse_column_type,
    resolve_type,
    time_format,
    type_spelling,
    zero_value,
)

__all__ = [
    "resolve_type",
    "time_format",
    "parse_column_type",
    "type_spelling",
    "zero_value",
    "TYPE_SPELLINGS",
    "ZERO_VALUES",
    "TIME_FORMATS",
]
