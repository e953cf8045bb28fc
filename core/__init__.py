# ============================================================================
# CORE MODULE
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Core module initialization
# PURPOSE: Export contracts, errors, schema model and type mapping
# CREATED: 19 OCT 2026
# ============================================================================

from core.contracts import RelationKind, ScalarType
from core.errors import (
    CatalogError,
    EmissionError,
    GeneratorError,
    SchemaConsistencyError,
    UnsupportedColumnError,
)
from core.models import Field, Relation, Table
from core.schema import resolve_type, time_format

__all__ = [
    # Enums
    "ScalarType",
    "RelationKind",
    # Errors
    "GeneratorError",
    "CatalogError",
    "SchemaConsistencyError",
    "UnsupportedColumnError",
    "EmissionError",
    # Models
    "Table",
    "Field",
    "Relation",
    # Type mapping
    "resolve_type",
    "time_format",
]
