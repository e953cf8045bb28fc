# ============================================================================
# SCHEMA MODEL
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Core model - Tables, fields and relations
# PURPOSE: In-memory representation of the introspected schema
# CREATED: 19 OCT 2026
# EXPORTS: Table, Field, Relation
# DEPENDENCIES: dataclasses
# ============================================================================
"""
Schema Model

Key concept:
- Table owns its Fields (column order) and its Relations (append-only)
- Identity = the primary-key Fields, in column order
- Relation points at Fields of two Tables; it never owns them

Lifecycle:
    1. SchemaIntrospector creates Tables and fills fields/identity
    2. RelationResolver appends relations
    3. CodeEmitter reads the model; nothing mutates it afterwards

Dataclasses (not pydantic) because relations form a cyclic object graph.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from core.contracts import RelationKind, ScalarType
from core.naming import (
    escape_identifier,
    safe_class_name,
    safe_identifier,
    to_plural,
    to_singular,
)
from core.schema.type_mapper import type_spelling, zero_value

_QUERY_HELPERS = frozenset({"find_with_filter", "find_first"})


@dataclass(eq=False)
class Field:
    """
    One column of a table.

    `name` is the Python attribute; `real_name` is the column as declared.
    """
    name: str
    real_name: str
    escaped_name: str = ""
    default: Optional[str] = None
    nullable: bool = False
    type: ScalarType = ScalarType.STRING
    primary: bool = False
    auto_inc: bool = False
    comment: str = ""
    format: str = ""  # strftime pattern, temporal fields only
    sql_type: str = ""

    @classmethod
    def from_column(cls, raw_name: str) -> "Field":
        """Create a field with names derived from the column name."""
        return cls(
            name=safe_identifier(raw_name),
            real_name=raw_name,
            escaped_name=escape_identifier(raw_name),
        )

    @property
    def type_spelling(self) -> str:
        return type_spelling(self.type)

    @property
    def zero_value(self) -> str:
        return zero_value(self.type)

    @property
    def is_temporal(self) -> bool:
        return self.type == ScalarType.TIME


@dataclass(eq=False)
class Table:
    """
    One base table.

    Maps to: one entity dataclass + one repository class in the output.
    """
    name: str
    escaped_name: str = ""
    entity_singular: str = ""
    entity_plural: str = ""
    comment: str = ""
    fields: List[Field] = field(default_factory=list)
    identity: List[Field] = field(default_factory=list)
    relations: List["Relation"] = field(default_factory=list)

    @classmethod
    def from_catalog(cls, sql_name: str, comment: str = "") -> "Table":
        """Create a table with inflected entity names."""
        name = sql_name.lower()
        return cls(
            name=sql_name,
            escaped_name=escape_identifier(sql_name),
            entity_singular=safe_class_name(to_singular(name)) or "Entity",
            entity_plural=safe_class_name(to_plural(name)) or "Entities",
            comment=comment,
        )

    @property
    def repository_name(self) -> str:
        return f"{self.entity_singular}Repository"

    @property
    def non_identity_fields(self) -> List[Field]:
        return [f for f in self.fields if not f.primary]

    @property
    def auto_inc_field(self) -> Optional[Field]:
        for f in self.identity:
            if f.auto_inc:
                return f
        return None

    def add_field(self, new_field: Field) -> Field:
        """
        Append a field (and to identity if primary).

        Attribute names that collapse onto an existing one get a numeric
        suffix ('UserId' next to 'user_id' becomes 'user_id_2').
        """
        taken = {f.name for f in self.fields}
        if new_field.name in taken:
            base, n = new_field.name, 2
            while f"{base}_{n}" in taken:
                n += 1
            new_field.name = f"{base}_{n}"
        self.fields.append(new_field)
        if new_field.primary:
            self.identity.append(new_field)
        return new_field

    def get_field(self, name: str) -> Optional[Field]:
        """Find a field by its declared column name."""
        for f in self.fields:
            if f.real_name == name:
                return f
        return None

    def add_relation(self, relation: "Relation") -> "Relation":
        self.relations.append(relation)
        return relation


@dataclass(eq=False)
class Relation:
    """
    Directed association derived from foreign keys.

    BELONGS_TO:   table.column -> target_entity.target_column
    MANY_TO_MANY: table.column <- middle_entity.middle_src_column,
                  middle_entity.middle_dst_column -> target_entity.target_column
    """
    name: str
    table: Table
    target_entity: Table
    column: Optional[Field] = None
    target_column: Optional[Field] = None
    kind: RelationKind = RelationKind.BELONGS_TO
    middle_entity: Optional[Table] = None
    middle_src_column: Optional[Field] = None
    middle_dst_column: Optional[Field] = None

    @property
    def method_name(self) -> str:
        method = f"find_{safe_identifier(self.name)}"
        # keep clear of the repository query helpers
        if method in _QUERY_HELPERS:
            method += "_"
        return method

    def __repr__(self) -> str:
        return (
            f"Relation({self.kind.value} {self.name!r}: "
            f"{self.table.name} -> {self.target_entity.name})"
        )


__all__ = ["Field", "Table", "Relation"]
