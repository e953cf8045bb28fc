# ============================================================================
# INFRASTRUCTURE MODULE
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Infrastructure - Database connectivity
# PURPOSE: Connection handling and repository base patterns
# CREATED: 19 OCT 2026
# ============================================================================
"""
Infrastructure module for the model generator.

Provides:
- BaseRepository: error context and logging for catalog repositories
- MySQLConnectionFactory: PyMySQL connections from configuration

Usage:
    from infrastructure import MySQLConnectionFactory

    with MySQLConnectionFactory().connection() as conn:
        ...
"""

from infrastructure.base_repository import BaseRepository
from infrastructure.mysql import MySQLConnectionFactory

__all__ = [
    "BaseRepository",
    "MySQLConnectionFactory",
]
