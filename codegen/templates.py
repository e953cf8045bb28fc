# ============================================================================
# CODE TEMPLATES
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Core - Jinja2 templates for the generated module
# PURPOSE: Source templates and the shared rendering environment
# CREATED: 19 OCT 2026
# ============================================================================
"""
Code Templates

One Jinja2 template per fragment of the generated module:

    header      docstring, imports, ScanError, time helpers
    entity      @dataclass with from_row()
    repository  repository class head, find_with_filter(), find_first()
    find        find() by identity
    save        save() upsert
    belongs_to  find_<relation>() for a foreign key
    many        find_<relation>() through a link table

Templates only place values; every SQL string, parameter tuple and
condition is computed beforehand in codegen.renderers. String literals go
through the `pyrepr` filter so any table or column name yields valid Python.
"""

from typing import Any, Dict

from jinja2 import Environment, BaseLoader, StrictUndefined, Template

HEADER_TEMPLATE = '''"""
{{ title|docstring }}

Generated by modelgen {{ version }}. Do not edit by hand.

Every entity has a dataclass (with from_row) and a repository class taking
a PEP 249 connection. Repositories never commit; transactions belong to
the caller.
"""

from __future__ import annotations

{% for line in import_lines %}
{{ line }}
{% endfor %}


class ScanError(ValueError):
    """Raised when a row cannot be loaded into an entity."""

{% if uses_time %}

def _parse_time(value: Any, fmt: str, column: str) -> datetime:
    """Load a temporal column through its text form."""
    if isinstance(value, datetime):
        return value
    text = value.decode() if isinstance(value, (bytes, bytearray)) else str(value)
    try:
        return datetime.strptime(text, fmt)
    except ValueError as exc:
        raise ScanError(f"{column}: cannot parse {text!r} with {fmt!r}") from exc


def _format_time(value: datetime, fmt: str) -> str:
    """Serialize a temporal field to its text form, year zero-padded."""
    return value.strftime(fmt.replace("%Y", f"{value.year:04d}"))
{% endif %}
'''

ENTITY_TEMPLATE = '''
@dataclass
class {{ table.entity_singular }}:
    """{{ doc|docstring }}"""

{% for field in table.fields %}
    {{ field.name }}: {{ field.type_spelling }} = {{ field.zero_value }}{% if field.comment %}  # {{ field.comment|comment }}{% endif %}

{% endfor %}

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> {{ table.entity_singular }}:
        """Load from a row selected with {{ table.repository_name }}.COLUMNS."""
        if len(row) != {{ bindings|length }}:
            raise ScanError({{ width_error|pyrepr }} + str(len(row)))
        return cls(
{% for binding in bindings %}
            {{ binding.name }}={{ binding.expr }},
{% endfor %}
        )
'''

REPOSITORY_TEMPLATE = '''
class {{ table.repository_name }}:
    """Loads and saves {{ table.entity_singular }} rows of {{ table.name|docstring }}."""

    TABLE = {{ table.escaped_name|pyrepr }}
    COLUMNS = {{ columns|pyrepr }}

    def __init__(self, connection: Any) -> None:
        self.connection = connection

    def find_with_filter(self, where: str = "", *params: Any) -> List[{{ table.entity_singular }}]:
        """Select rows matching a raw SQL clause (JOIN / WHERE / ORDER BY)."""
        query = "SELECT " + self.COLUMNS + " FROM " + self.TABLE
        if where:
            query += " " + where
        with self.connection.cursor() as cursor:
            cursor.execute(query, params)
            rows = cursor.fetchall()
        return [{{ table.entity_singular }}.from_row(row) for row in rows]

    def find_first(self, where: str = "", *params: Any) -> Optional[{{ table.entity_singular }}]:
        """First row matching a raw SQL clause, or None."""
        found = self.find_with_filter(where, *params)
        return found[0] if found else None
'''

FIND_BY_ID_TEMPLATE = '''
    def find(self, {{ field.name }}: int) -> Optional[{{ table.entity_singular }}]:
        """Find one {{ table.entity_singular }} by primary key."""
        return self.find_first({{ where|pyrepr }}, {{ field.name }})
'''

FIND_BY_FILTER_TEMPLATE = '''
    def find(self, where: str, *params: Any) -> Optional[{{ table.entity_singular }}]:
        """Find one {{ table.entity_singular }} with a raw SQL clause."""
        return self.find_first(where, *params)
'''

SAVE_TEMPLATE = '''
    def save(self, entity: {{ table.entity_singular }}) -> {{ table.entity_singular }}:
{% if save.id_check %}
        """
        Insert or update `entity` (does not commit).

        Inserts while every primary-key field holds its zero value,
        otherwise updates the row with that primary key.
        """
        if {{ save.id_check }}:
            with self.connection.cursor() as cursor:
                cursor.execute({{ save.insert_sql|pyrepr }}, {{ save.insert_params }})
{% if save.auto_inc %}
                entity.{{ save.auto_inc.name }} = cursor.lastrowid
{% endif %}
            return entity
{% if save.update_sql %}
        with self.connection.cursor() as cursor:
            cursor.execute({{ save.update_sql|pyrepr }}, {{ save.update_params }})
{% endif %}
        return entity
{% else %}
        """Insert `entity` (the table has no primary key; does not commit)."""
        with self.connection.cursor() as cursor:
            cursor.execute({{ save.insert_sql|pyrepr }}, {{ save.insert_params }})
        return entity
{% endif %}
'''

BELONGS_TO_TEMPLATE = '''
    def {{ relation.method_name }}(self, entity: {{ relation.table.entity_singular }}) -> Optional[{{ relation.target_entity.entity_singular }}]:
        """Find the {{ relation.target_entity.entity_singular }} referenced by {{ relation.column.real_name|docstring }}."""
        return {{ relation.target_entity.repository_name }}(self.connection).find_first(
            {{ where|pyrepr }}, {{ value }}
        )
'''

MANY_TO_MANY_TEMPLATE = '''
    def {{ relation.method_name }}(self, entity: {{ relation.table.entity_singular }}) -> List[{{ relation.target_entity.entity_singular }}]:
        """Find {{ relation.target_entity.entity_singular }} rows linked through {{ relation.middle_entity.name|docstring }}."""
        return {{ relation.target_entity.repository_name }}(self.connection).find_with_filter(
            {{ where|pyrepr }}, {{ value }}
        )
'''

TEMPLATES: Dict[str, str] = {
    "header": HEADER_TEMPLATE,
    "entity": ENTITY_TEMPLATE,
    "repository": REPOSITORY_TEMPLATE,
    "find_by_id": FIND_BY_ID_TEMPLATE,
    "find_by_filter": FIND_BY_FILTER_TEMPLATE,
    "save": SAVE_TEMPLATE,
    "belongs_to": BELONGS_TO_TEMPLATE,
    "many_to_many": MANY_TO_MANY_TEMPLATE,
}


# ============================================================================
# FILTERS
# ============================================================================

def pyrepr(value: Any) -> str:
    """Python literal for a value (string literals are always valid source)."""
    return repr(value)


def docstring(value: Any) -> str:
    """Make text safe inside a triple-quoted docstring."""
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return text.strip()


def comment(value: Any) -> str:
    """Collapse text onto one line for a trailing # comment."""
    return " ".join(str(value).split())


# ============================================================================
# ENVIRONMENT
# ============================================================================

class TemplateRegistry:
    """
    Compiled templates over one Jinja2 environment.

    Templates are compiled once and reused; rendering is side-effect free.
    """

    def __init__(self):
        self._env = Environment(
            loader=BaseLoader(),
            autoescape=False,
            # Fail on any missing variable instead of rendering ""
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self._env.filters["pyrepr"] = pyrepr
        self._env.filters["docstring"] = docstring
        self._env.filters["comment"] = comment
        self._templates: Dict[str, Template] = {
            name: self._env.from_string(source) for name, source in TEMPLATES.items()
        }

    def render(self, name: str, **context: Any) -> str:
        """Render a named template."""
        return self._templates[name].render(**context)


_registry = None


def get_registry() -> TemplateRegistry:
    """Get shared template registry instance."""
    global _registry
    if _registry is None:
        _registry = TemplateRegistry()
    return _registry


__all__ = [
    "TEMPLATES",
    "TemplateRegistry",
    "get_registry",
    "pyrepr",
    "docstring",
    "comment",
]
