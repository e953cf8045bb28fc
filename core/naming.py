# ============================================================================
# NAMING HELPERS
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Core - Identifier derivation
# PURPOSE: Inflect table names and derive safe Python identifiers
# CREATED: 19 OCT 2026
# ============================================================================
"""
Naming Helpers

Table and column names come straight from the catalog, so they can be
plural, singular, mixed case, or collide with Python keywords. These helpers
turn them into entity class names and attribute names.

Inflection and case conversion go through the `inflection` package; the
helpers here add identifier sanitising on top.
"""

import keyword
import re

import inflection

_NON_IDENTIFIER = re.compile(r"[^0-9a-zA-Z_]+")

# Names the generated entity class already uses
_RESERVED = frozenset({"self", "from_row", "datetime"})


def to_plural(name: str) -> str:
    """Pluralize the last word of a snake_case name."""
    return inflection.pluralize(name)


def to_singular(name: str) -> str:
    """Singularize the last word of a snake_case name."""
    return inflection.singularize(name)


def to_snake_case(name: str) -> str:
    """'OrderItem' / 'order-item' / 'ORDER_ITEM' -> 'order_item'."""
    name = inflection.underscore(_NON_IDENTIFIER.sub("_", name))
    return re.sub(r"_+", "_", name).strip("_")


def to_pascal_case(name: str) -> str:
    """'order_item' -> 'OrderItem'."""
    return inflection.camelize(to_snake_case(name))


def safe_identifier(name: str) -> str:
    """
    Derive a valid, non-keyword Python identifier from a column name.

    Examples:
        'CreateDate'  -> 'create_date'
        'class'       -> 'class_'
        '2fa_enabled' -> '_2fa_enabled'
    """
    ident = to_snake_case(name) or "column"
    if ident[0].isdigit():
        ident = "_" + ident
    if keyword.iskeyword(ident) or ident in _RESERVED:
        ident += "_"
    return ident


def safe_class_name(name: str) -> str:
    """
    PascalCase class name that is a valid, non-keyword identifier.

        'order_item' -> 'OrderItem'
        'none'       -> 'None_'
        '2fa_codes'  -> '_2faCodes'
    """
    ident = to_pascal_case(name)
    if not ident:
        return ident
    if ident[0].isdigit():
        ident = "_" + ident
    if keyword.iskeyword(ident):
        ident += "_"
    return ident


def escape_identifier(name: str) -> str:
    """Backtick-quote a MySQL identifier."""
    return "`" + name.replace("`", "``") + "`"


__all__ = [
    "to_plural",
    "to_singular",
    "to_snake_case",
    "to_pascal_case",
    "safe_identifier",
    "safe_class_name",
    "escape_identifier",
]
