# ============================================================================
# BASE REPOSITORY - ERROR HANDLING PATTERNS
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Infrastructure - Base repository patterns
# PURPOSE: Common error handling and logging for catalog repositories
# CREATED: 19 OCT 2026
# ============================================================================
"""
Base Repository Patterns

Abstract base class that provides common infrastructure for repositories:
- Consistent error handling with context managers
- Standardized logging

Any exception raised inside an error context is logged and re-raised as
CatalogError with the original chained, so callers see a single error type
while the driver's message is kept verbatim.
"""

import logging
from abc import ABC
from contextlib import contextmanager
from typing import Any, Dict, Optional

from core.errors import CatalogError

logger = logging.getLogger(__name__)


class BaseRepository(ABC):
    """
    Abstract base repository with common patterns.

    Provides:
    - Error context manager for consistent error handling
    - Standardized logging

    Subclasses implement the queries.
    """

    def __init__(self):
        """Initialize base repository."""
        self.logger = logging.getLogger(self.__class__.__name__)
        self.logger.debug(f"{self.__class__.__name__} initialized")

    @contextmanager
    def _error_context(self, operation: str, entity_id: Optional[str] = None):
        """
        Context manager for consistent error handling.

        Args:
            operation: Human-readable description of the operation
            entity_id: Optional entity (schema or table) for context

        Example:
            with self._error_context("fetch columns", "shop.article"):
                rows = self._query(SQL, params)
        """
        try:
            yield
        except CatalogError:
            # Already has context, just re-raise
            raise
        except Exception as e:
            error_msg = f"{operation} failed"
            if entity_id:
                error_msg += f" for {entity_id}"
            error_msg += f": {e}"
            self.logger.error(error_msg)
            raise CatalogError(error_msg, operation=operation, entity_id=entity_id) from e

    def _log_operation(
        self,
        operation: str,
        entity_id: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log a completed operation with consistent formatting.

        Format:
            "operation: entity_id | details"
        """
        msg = f"{operation}: {entity_id}"
        if details:
            msg += f" | {details}"
        self.logger.debug(msg)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "BaseRepository",
]
