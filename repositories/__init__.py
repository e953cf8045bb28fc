# ============================================================================
# REPOSITORIES MODULE
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Core - Catalog access layer
# PURPOSE: Read-only queries against information_schema
# CREATED: 19 OCT 2026
# ============================================================================
"""
Repositories Module

Provides catalog access for the model generator.

Usage:
    from repositories import CatalogRepository

    catalog = CatalogRepository(conn)
    tables = catalog.fetch_tables("shop")
"""

from .catalog_repo import CatalogRepository

__all__ = [
    "CatalogRepository",
]
