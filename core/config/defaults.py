# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for the catalog connection and code generation
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides sensible defaults for connecting to the catalog and shaping the
generated module. These can be overridden via environment variables or CLI
flags.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass, field, replace
from typing import Optional


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ConnectionDefaults:
    """
    Defaults for the MySQL catalog connection.

    The generator only reads information_schema; any account with SELECT on
    the target schema is enough.
    """
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = ""
    charset: str = "utf8mb4"
    connect_timeout: int = 10  # seconds

    @classmethod
    def from_env(cls) -> "ConnectionDefaults":
        """Create from environment variables."""
        return cls(
            host=os.getenv("MYSQL_HOST", "localhost"),
            port=int(os.getenv("MYSQL_PORT", 3306)),
            user=os.getenv("MYSQL_USER", "root"),
            password=os.getenv("MYSQL_PASSWORD", ""),
            database=os.getenv("MYSQL_DATABASE", ""),
            charset=os.getenv("MYSQL_CHARSET", "utf8mb4"),
            connect_timeout=int(os.getenv("MYSQL_CONNECT_TIMEOUT", 10)),
        )


@dataclass(frozen=True)
class GenerationDefaults:
    """
    Defaults for model generation.

    Controls which schema is read, where the module is written and how
    strictly unsupported columns are treated.
    """
    schema: str = ""  # falls back to the connection database
    output_path: str = "model/model.py"
    line_length: int = 88

    # Abort on nullable datetime/date/time columns unless this is set
    skip_unsupported_columns: bool = False

    # Second resolver pass for link tables
    detect_many_to_many: bool = True

    @classmethod
    def from_env(cls) -> "GenerationDefaults":
        """Create from environment variables."""
        return cls(
            schema=os.getenv("MODELGEN_SCHEMA", ""),
            output_path=os.getenv("MODELGEN_OUTPUT", "model/model.py"),
            line_length=int(os.getenv("MODELGEN_LINE_LENGTH", 88)),
            skip_unsupported_columns=_env_bool("MODELGEN_SKIP_UNSUPPORTED", False),
            detect_many_to_many=_env_bool("MODELGEN_MANY_TO_MANY", True),
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Container for all default configurations."""
    connection: ConnectionDefaults = field(default_factory=ConnectionDefaults)
    generation: GenerationDefaults = field(default_factory=GenerationDefaults)

    @classmethod
    def from_env(cls) -> "Defaults":
        """Create all defaults from environment variables."""
        return cls(
            connection=ConnectionDefaults.from_env(),
            generation=GenerationDefaults.from_env(),
        )

    @property
    def schema(self) -> str:
        """Schema to introspect: explicit setting, else the connection database."""
        return self.generation.schema or self.connection.database

    def with_overrides(self, **overrides) -> "Defaults":
        """
        Return a copy with non-None overrides applied.

        Keys are routed to the section that owns them, so CLI flags can be
        passed straight through:
            defaults.with_overrides(host="db", schema="shop", line_length=None)
        """
        conn = {k: v for k, v in overrides.items()
                if v is not None and k in ConnectionDefaults.__dataclass_fields__}
        gen = {k: v for k, v in overrides.items()
               if v is not None and k in GenerationDefaults.__dataclass_fields__}
        unknown = set(overrides) - set(ConnectionDefaults.__dataclass_fields__) \
            - set(GenerationDefaults.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
        return Defaults(
            connection=replace(self.connection, **conn),
            generation=replace(self.generation, **gen),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ConnectionDefaults",
    "GenerationDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
