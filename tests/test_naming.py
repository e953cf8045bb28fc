# ============================================================================
# NAMING TESTS
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Tests - Inflection and identifiers
# PURPOSE: Verify entity names, attribute names and SQL quoting
# CREATED: 19 OCT 2026
# ============================================================================
"""
Naming Tests

Run with:
    pytest tests/test_naming.py -v
"""

import pytest

from core.models import Field, Table
from core.naming import (
    escape_identifier,
    safe_class_name,
    safe_identifier,
    to_pascal_case,
    to_plural,
    to_singular,
    to_snake_case,
)


class TestInflection:

    @pytest.mark.parametrize("singular, plural", [
        ("tag", "tags"),
        ("category", "categories"),
        ("box", "boxes"),
        ("address", "addresses"),
        ("day", "days"),
        ("person", "people"),
        ("order_item", "order_items"),
        ("sheep", "sheep"),
    ])
    def test_plural(self, singular, plural):
        assert to_plural(singular) == plural

    @pytest.mark.parametrize("plural, singular", [
        ("tags", "tag"),
        ("categories", "category"),
        ("boxes", "box"),
        ("addresses", "address"),
        ("houses", "house"),
        ("people", "person"),
        ("order_items", "order_item"),
        ("status", "status"),
        ("article", "article"),
        ("movies", "movie"),
        ("buses", "bus"),
        ("statuses", "status"),
        ("quizzes", "quiz"),
        ("heroes", "hero"),
    ])
    def test_singular(self, plural, singular):
        assert to_singular(plural) == singular

    def test_only_last_word_inflects(self):
        assert to_plural("news_category") == "news_categories"
        assert to_singular("boxes_items") == "boxes_item"


class TestCase:

    def test_snake_case(self):
        assert to_snake_case("CreateDate") == "create_date"
        assert to_snake_case("order-item") == "order_item"
        assert to_snake_case("ORDER_ITEM") == "order_item"

    def test_pascal_case(self):
        assert to_pascal_case("order_item") == "OrderItem"
        assert to_pascal_case("article") == "Article"


class TestIdentifiers:

    @pytest.mark.parametrize("raw, expected", [
        ("CreateDate", "create_date"),
        ("class", "class_"),
        ("2fa_enabled", "_2fa_enabled"),
        ("self", "self_"),
        ("from_row", "from_row_"),
        ("datetime", "datetime_"),
        ("first name", "first_name"),
        ("$$$", "column"),
    ])
    def test_safe_identifier(self, raw, expected):
        assert safe_identifier(raw) == expected

    def test_safe_class_name(self):
        assert safe_class_name("order_item") == "OrderItem"
        assert safe_class_name("none") == "None_"
        assert safe_class_name("2fa_codes") == "_2faCodes"

    def test_escape_identifier(self):
        assert escape_identifier("article") == "`article`"
        assert escape_identifier("we`ird") == "`we``ird`"


class TestModelNames:

    def test_table_names(self):
        table = Table.from_catalog("categories", "Product categories")
        assert table.entity_singular == "Category"
        assert table.entity_plural == "Categories"
        assert table.repository_name == "CategoryRepository"
        assert table.escaped_name == "`categories`"

    @pytest.mark.parametrize("name, entity", [
        ("movies", "Movie"),
        ("statuses", "Status"),
        ("order_items", "OrderItem"),
        ("people", "Person"),
    ])
    def test_entity_singular(self, name, entity):
        assert Table.from_catalog(name).entity_singular == entity

    def test_colliding_attribute_names_get_suffix(self):
        table = Table.from_catalog("user")
        first = table.add_field(Field.from_column("user_id"))
        second = table.add_field(Field.from_column("UserId"))
        assert first.name == "user_id"
        assert second.name == "user_id_2"
        assert second.real_name == "UserId"
        assert table.get_field("UserId") is second
