# ============================================================================
# CODEGEN MODULE
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Core - Source generation
# PURPOSE: Render the schema model as a Python module
# CREATED: 19 OCT 2026
# ============================================================================
"""
Codegen Module

Usage:
    from codegen import CodeEmitter

    source = CodeEmitter(line_length=88).emit(tables, required_imports)
"""

from .emitter import CodeEmitter
from .renderers import (
    build_save_params,
    render_entity,
    render_header,
    render_repository,
)

__all__ = [
    "CodeEmitter",
    "build_save_params",
    "render_entity",
    "render_header",
    "render_repository",
]
