# ============================================================================
# SERVICES MODULE
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Core - Pipeline layer
# PURPOSE: Introspection, relation resolution and the generator facade
# CREATED: 19 OCT 2026
# ============================================================================
"""
Services Module

Pipeline stages of the model generator.
Services coordinate between the catalog repository and the emitter.

Usage:
    from services import ModelGenerator

    generator = ModelGenerator(conn, "shop")
    source = generator.generate()
"""

from .introspector import SchemaIntrospector
from .relation_resolver import RelationResolver
from .generator import ModelGenerator

__all__ = [
    "SchemaIntrospector",
    "RelationResolver",
    "ModelGenerator",
]
