# ============================================================================
# RELATION RESOLVER
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Service - Foreign keys to relation descriptors
# PURPOSE: Attach belongs-to and many-to-many relations to the schema model
# CREATED: 19 OCT 2026
# ============================================================================
"""
Relation Resolver

Pass 1 - belongs-to:
    One foreign-key column = one relation on the owning table, pointing at
    the referenced table/column. Named after the column without its `_id`
    suffix (article.category_id -> "category"), or after the constraint
    when the column does not follow that convention.

Pass 2 - many-to-many:
    A link table whose only two columns are both primary key and both
    foreign keys connects the two tables it references. Each side gets a
    relation named after the plural of the other side ("tags", "articles").

Naming is a heuristic. Pass a `namer` callable or an `overrides` mapping
({"table.column": "name"}) to change it.

The inverse has-many direction is not produced.
"""

import re
from typing import Callable, Dict, List, Optional

from core.contracts import ForeignKeyRow, RelationKind
from core.errors import SchemaConsistencyError
from core.logging import ComponentType, get_logger, log_checkpoint, log_context
from core.models import Relation, Table
from core.naming import to_plural
from repositories import CatalogRepository

logger = get_logger(__name__, ComponentType.RESOLVER)

# match foo_id, article_id column names for relations
ID_COLUMN_PATTERN = re.compile(r"^([a-zA-Z0-9_]+)_id$")

RelationNamer = Callable[[str, str], str]


def default_relation_name(column_name: str, constraint_name: str) -> str:
    """
    Derive a relation name from a foreign-key column.

        default_relation_name("category_id", "fk_1") -> "category"
        default_relation_name("owner", "fk_owner")   -> "fk_owner"
    """
    match = ID_COLUMN_PATTERN.match(column_name)
    if match:
        return match.group(1)
    return constraint_name


class RelationResolver:
    """
    Resolves foreign keys of one schema into Relation descriptors.

    All tables must already be introspected: targets are looked up in the
    given table list, and a miss is a SchemaConsistencyError.
    """

    def __init__(
        self,
        catalog: CatalogRepository,
        schema: str,
        namer: Optional[RelationNamer] = None,
        overrides: Optional[Dict[str, str]] = None,
        detect_many_to_many: bool = True,
    ):
        self.catalog = catalog
        self.schema = schema
        self.namer = namer or default_relation_name
        self.overrides = dict(overrides or {})
        self.detect_many_to_many = detect_many_to_many

    def resolve(self, tables: List[Table]) -> None:
        """
        Append relations to every table, in place.

        Raises:
            CatalogError: on any query or row failure
            SchemaConsistencyError: on a reference outside `tables`
        """
        by_name = {t.name: t for t in tables}

        with log_context(schema=self.schema, operation="resolve_relations"):
            for table in tables:
                with log_context(table=table.name):
                    for row in self.catalog.fetch_foreign_keys(self.schema, table.name):
                        with log_context(relation=row.constraint_name):
                            self._add_belongs_to(table, row, by_name)

            if self.detect_many_to_many:
                for table in tables:
                    self._add_many_to_many(table)

            log_checkpoint("relations_resolved", {
                "relations": sum(len(t.relations) for t in tables),
            })

    def relation_name(self, table: Table, row: ForeignKeyRow) -> str:
        key = f"{table.name}.{row.column_name}"
        if key in self.overrides:
            return self.overrides[key]
        return self.namer(row.column_name, row.constraint_name)

    def _add_belongs_to(self, table: Table, row: ForeignKeyRow, by_name: Dict[str, Table]) -> Relation:
        target = by_name.get(row.referenced_table)
        if target is None:
            raise SchemaConsistencyError(
                f"{table.name}.{row.column_name} references unknown table {row.referenced_table}",
                table=row.referenced_table,
            )
        target_column = target.get_field(row.referenced_column)
        if target_column is None:
            raise SchemaConsistencyError(
                f"{table.name}.{row.column_name} references unknown column "
                f"{row.referenced_table}.{row.referenced_column}",
                table=row.referenced_table,
                column=row.referenced_column,
            )
        column = table.get_field(row.column_name)
        if column is None:
            raise SchemaConsistencyError(
                f"Foreign key {row.constraint_name} uses unknown column {table.name}.{row.column_name}",
                table=table.name,
                column=row.column_name,
            )

        relation = table.add_relation(Relation(
            name=self.relation_name(table, row),
            table=table,
            column=column,
            target_entity=target,
            target_column=target_column,
        ))
        logger.debug(
            f"{row.constraint_name}: {row.column_name} -> "
            f"{row.referenced_table}.{row.referenced_column} as {relation.name!r}"
        )
        return relation

    def _add_many_to_many(self, link: Table) -> None:
        """Connect the two tables referenced by a pure link table."""
        if not is_link_table(link):
            return

        a, b = [r for r in link.relations if r.kind == RelationKind.BELONGS_TO]
        for near, far in ((a, b), (b, a)):
            owner = near.target_entity
            name = to_plural(far.name)
            with log_context(table=owner.name, relation=name):
                relation = owner.add_relation(Relation(
                    name=name,
                    kind=RelationKind.MANY_TO_MANY,
                    table=owner,
                    column=near.target_column,
                    target_entity=far.target_entity,
                    target_column=far.target_column,
                    middle_entity=link,
                    middle_src_column=near.column,
                    middle_dst_column=far.column,
                ))
                logger.debug(f"{owner.name} <-> {far.target_entity.name} through {link.name} as {relation.name!r}")


def is_link_table(table: Table) -> bool:
    """
    True for a table made of exactly two columns that form a composite
    primary key, each covered by a belongs-to relation.
    """
    if len(table.fields) != 2 or len(table.identity) != 2:
        return False
    belongs_to = [r for r in table.relations if r.kind == RelationKind.BELONGS_TO]
    if len(belongs_to) != 2:
        return False
    first, second = (r.column for r in belongs_to)
    return first is not second


__all__ = [
    "RelationResolver",
    "default_relation_name",
    "is_link_table",
    "ID_COLUMN_PATTERN",
]
