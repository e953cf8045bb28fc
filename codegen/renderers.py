# ============================================================================
# CODE RENDERERS
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Core - Schema model to source fragments
# PURPOSE: Pure functions rendering each fragment of the generated module
# CREATED: 19 OCT 2026
# ============================================================================
"""
Code Renderers

Pure functions: schema model in, source text out. Same model, same text.

    render_header(required_imports)   module docstring, imports, helpers
    render_entity(table)              entity dataclass
    render_repository(table)          repository class with every method
    render_find(table)                find()
    render_save(table)                save()
    render_relation(relation)         find_<relation>()

Output is not yet formatted; CodeEmitter parses and formats the assembly.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from __version__ import __version__
from core.contracts import RelationKind, ScalarType
from core.models import Field, Relation, Table

from .templates import get_registry

# Always imported by the generated module
BASE_IMPORTS = frozenset({
    "dataclasses.dataclass",
    "typing.Any",
    "typing.List",
    "typing.Optional",
    "typing.Sequence",
})

TIME_IMPORT = "datetime.datetime"

PLACEHOLDER = "%s"


# ============================================================================
# SQL AND EXPRESSION HELPERS
# ============================================================================

def qualified_name(table: Table, field: Field) -> str:
    """`table`.`column`"""
    return f"{table.escaped_name}.{field.escaped_name}"


def select_columns(table: Table) -> str:
    """Column list shared by every SELECT of a table, in field order."""
    return ", ".join(qualified_name(table, f) for f in table.fields)


def scan_expression(field: Field, index: int) -> str:
    """Expression loading row[index] into a field."""
    if field.is_temporal:
        return f"_parse_time(row[{index}], {field.format!r}, {field.real_name!r})"
    return f"row[{index}]"


def value_expression(field: Field, owner: str = "entity") -> str:
    """Expression passing a field of `owner` as a query parameter."""
    attribute = f"{owner}.{field.name}"
    if field.is_temporal:
        return f"_format_time({attribute}, {field.format!r})"
    return attribute


def tuple_literal(items: Iterable[str]) -> str:
    """Source for a tuple of expressions: (), (a,) or (a, b)."""
    items = list(items)
    if not items:
        return "()"
    if len(items) == 1:
        return f"({items[0]},)"
    return "(" + ", ".join(items) + ")"


def zero_check(field: Field) -> str:
    """Condition true while a field still holds its zero value."""
    if field.zero_value == "None":
        return f"entity.{field.name} is None"
    return f"entity.{field.name} == {field.zero_value}"


def equality_clause(fields: List[Field], qualify: Optional[Table] = None) -> str:
    """`a` = %s AND `b` = %s"""
    return " AND ".join(
        f"{qualified_name(qualify, f) if qualify else f.escaped_name} = {PLACEHOLDER}"
        for f in fields
    )


def import_lines(required_imports: Iterable[str]) -> List[str]:
    """
    Group dotted imports into sorted import statements.

        {"typing.List", "typing.Any", "json"} ->
            ["import json", "from typing import Any, List"]
    """
    plain = set()
    grouped = {}
    for dotted in set(required_imports) | BASE_IMPORTS:
        module, _, name = dotted.rpartition(".")
        if module:
            grouped.setdefault(module, set()).add(name)
        else:
            plain.add(name)

    lines = [f"import {module}" for module in sorted(plain)]
    lines += [
        f"from {module} import {', '.join(sorted(names))}"
        for module, names in sorted(grouped.items())
    ]
    return lines


def identity_lookup_field(table: Table) -> Optional[Field]:
    """The identity field when it is exactly one integer column, else None."""
    if len(table.identity) == 1 and table.identity[0].type == ScalarType.INT:
        return table.identity[0]
    return None


# ============================================================================
# SAVE PARAMETERS
# ============================================================================

@dataclass
class SaveParams:
    """Everything save() needs, as literal SQL and source expressions."""
    id_check: str
    insert_sql: str
    insert_params: str
    update_sql: str
    update_params: str
    auto_inc: Optional[Field] = None


def build_save_params(table: Table) -> SaveParams:
    """
    Compute the upsert of one table.

    Insert lists the non-primary-key columns; an auto-increment key is read
    back from cursor.lastrowid. Update sets those same columns and matches
    on every primary-key column. No identity: id_check is "" (insert only).
    No settable columns: update_sql is "" (nothing to update).
    """
    settable = table.non_identity_fields
    column_list = ", ".join(f.escaped_name for f in settable)
    placeholders = ", ".join(PLACEHOLDER for _ in settable)
    insert_sql = f"INSERT INTO {table.escaped_name} ({column_list}) VALUES ({placeholders})"

    update_sql = ""
    if settable and table.identity:
        assignments = ", ".join(f"{f.escaped_name} = {PLACEHOLDER}" for f in settable)
        update_sql = (
            f"UPDATE {table.escaped_name} SET {assignments} "
            f"WHERE {equality_clause(table.identity)}"
        )

    return SaveParams(
        id_check=" and ".join(zero_check(f) for f in table.identity),
        insert_sql=insert_sql,
        insert_params=tuple_literal(value_expression(f) for f in settable),
        update_sql=update_sql,
        update_params=tuple_literal(
            value_expression(f) for f in settable + table.identity
        ),
        auto_inc=table.auto_inc_field,
    )


# ============================================================================
# FRAGMENTS
# ============================================================================

def render_header(required_imports: Iterable[str], title: str = "Entity models") -> str:
    """Module docstring, imports, ScanError and the temporal helpers."""
    required = set(required_imports)
    return get_registry().render(
        "header",
        title=title,
        version=__version__,
        import_lines=import_lines(required),
        uses_time=TIME_IMPORT in required,
    )


def render_entity(table: Table) -> str:
    """Entity dataclass with zero-value defaults and from_row()."""
    bindings = [
        {"name": f.name, "expr": scan_expression(f, i)}
        for i, f in enumerate(table.fields)
    ]
    doc = table.comment or f"Row of {table.name}."
    return get_registry().render(
        "entity",
        table=table,
        doc=doc,
        bindings=bindings,
        width_error=f"{table.name}: expected {len(bindings)} columns, got ",
    )


def render_find(table: Table) -> str:
    """find(id) for a single integer identity, find(where, *params) otherwise."""
    field = identity_lookup_field(table)
    if field is None:
        return get_registry().render("find_by_filter", table=table)
    return get_registry().render(
        "find_by_id",
        table=table,
        field=field,
        where=f"WHERE {equality_clause([field], qualify=table)}",
    )


def render_save(table: Table) -> str:
    return get_registry().render("save", table=table, save=build_save_params(table))


def render_relation(relation: Relation) -> str:
    """find_<relation>() for one belongs-to or many-to-many relation."""
    if relation.kind == RelationKind.MANY_TO_MANY:
        middle = relation.middle_entity
        where = (
            f"INNER JOIN {middle.escaped_name} ON "
            f"{qualified_name(middle, relation.middle_dst_column)} = "
            f"{qualified_name(relation.target_entity, relation.target_column)} "
            f"WHERE {qualified_name(middle, relation.middle_src_column)} = {PLACEHOLDER}"
        )
        return get_registry().render(
            "many_to_many",
            relation=relation,
            where=where,
            value=value_expression(relation.column),
        )

    where = f"WHERE {equality_clause([relation.target_column], qualify=relation.target_entity)}"
    return get_registry().render(
        "belongs_to",
        relation=relation,
        where=where,
        value=value_expression(relation.column),
    )


def render_repository(table: Table) -> str:
    """Repository class: query helpers, find(), save(), one method per relation."""
    parts = [
        get_registry().render("repository", table=table, columns=select_columns(table)),
        render_find(table),
        render_save(table),
    ]
    parts += [render_relation(r) for r in table.relations]
    return "".join(parts)


__all__ = [
    "BASE_IMPORTS",
    "SaveParams",
    "build_save_params",
    "identity_lookup_field",
    "import_lines",
    "render_header",
    "render_entity",
    "render_find",
    "render_save",
    "render_relation",
    "render_repository",
    "select_columns",
    "tuple_literal",
]
