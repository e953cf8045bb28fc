# ============================================================================
# MYSQL CONNECTION INFRASTRUCTURE
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Infrastructure - MySQL connection handling
# PURPOSE: Open catalog connections for the generator CLI
# CREATED: 19 OCT 2026
# ============================================================================
"""
MySQL Connection Infrastructure

The generator itself only needs a PEP 249 connection; this module is the
thin driver layer the CLI uses to obtain one.

Usage:
    factory = MySQLConnectionFactory(defaults.connection)
    with factory.connection() as conn:
        generator = ModelGenerator(conn, schema="shop")
        source = generator.generate()
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Optional

import pymysql

from core.config import ConnectionDefaults

logger = logging.getLogger(__name__)


class MySQLConnectionFactory:
    """
    Opens PyMySQL connections from ConnectionDefaults.

    Connections are opened read-mostly with autocommit on; the generator
    issues SELECTs against information_schema only.
    """

    def __init__(self, settings: Optional[ConnectionDefaults] = None):
        self.settings = settings or ConnectionDefaults.from_env()

    def connect_kwargs(self) -> Dict[str, Any]:
        """Build pymysql.connect() keyword arguments."""
        s = self.settings
        if not s.host or not s.database:
            raise ValueError(
                "Database connection not configured. "
                "Set MYSQL_HOST and MYSQL_DATABASE environment variables."
            )
        return {
            "host": s.host,
            "port": s.port,
            "user": s.user,
            "password": s.password,
            "database": s.database,
            "charset": s.charset,
            "connect_timeout": s.connect_timeout,
            "autocommit": True,
        }

    def connect(self) -> "pymysql.connections.Connection":
        """Open a new connection. Caller owns closing it."""
        kwargs = self.connect_kwargs()
        logger.debug(f"Connecting to mysql://{kwargs['user']}@{kwargs['host']}:{kwargs['port']}/{kwargs['database']}")
        return pymysql.connect(**kwargs)

    @contextmanager
    def connection(self):
        """
        Context manager yielding a connection that is always closed.

        Example:
            with factory.connection() as conn:
                ...
        """
        conn = self.connect()
        try:
            yield conn
        finally:
            conn.close()
            logger.debug("Connection closed")


__all__ = ["MySQLConnectionFactory"]
