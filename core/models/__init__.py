# ============================================================================
# MODELS MODULE
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Model exports
# PURPOSE: Central export point for the schema model
# CREATED: 19 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

The schema model built by introspection and consumed by emission.
"""

from core.models.schema import Field, Relation, Table

__all__ = [
    "Table",
    "Field",
    "Relation",
]
