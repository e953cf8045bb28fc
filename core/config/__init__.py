# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for the model generator.
"""

from core.config.defaults import (
    ConnectionDefaults,
    GenerationDefaults,
    Defaults,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "ConnectionDefaults",
    "GenerationDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
