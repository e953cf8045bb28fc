# ============================================================================
# MODEL GENERATOR TESTS
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Tests - Pipeline facade and CLI
# PURPOSE: Verify analyse/generate sequencing and the command-line driver
# CREATED: 19 OCT 2026
# ============================================================================
"""
Model Generator Tests

Run with:
    pytest tests/test_generator.py -v
"""

import json

import pytest
from unittest.mock import patch

from core.config import Defaults
from core.errors import CatalogError, UnsupportedColumnError
from fakes import FakeCatalogConnection, column, shop_tables
from repositories.catalog_repo import SQL_TABLES
from scripts import generate_models
from services import ModelGenerator
from services.introspector import DATETIME_IMPORT


def _generator(tables=None, **generation):
    defaults = Defaults().with_overrides(**generation)
    connection = FakeCatalogConnection(shop_tables() if tables is None else tables)
    return ModelGenerator(connection, "shop", defaults=defaults)


# ============================================================================
# FACADE
# ============================================================================

class TestModelGenerator:

    def test_initial_state(self):
        generator = _generator()
        assert generator.tables == []
        assert generator.output is None
        assert not generator.analysed

    def test_analyse(self):
        generator = _generator()
        tables = generator.analyse()

        assert [t.name for t in tables] == [t.name for t in generator.tables]
        assert generator.required_imports == {DATETIME_IMPORT}
        assert generator.get_table("article").relations
        assert generator.get_table("missing") is None

    def test_generate_analyses_first(self):
        generator = _generator()
        source = generator.generate()

        assert generator.analysed
        assert generator.output == source
        assert "class ArticleRepository:" in source

    def test_generate_reuses_analysis(self):
        generator = _generator()
        generator.analyse()
        executed = len(generator.catalog.connection.executed)
        generator.generate()
        assert len(generator.catalog.connection.executed) == executed

    def test_skip_unsupported_from_defaults(self):
        tables = {
            "event": {
                "columns": [
                    column("id", "int(11)", key="PRI", extra="auto_increment"),
                    column("ends_at", "date", nullable="YES"),
                ],
            },
        }
        with pytest.raises(UnsupportedColumnError):
            _generator(tables).generate()

        generator = _generator(tables, skip_unsupported_columns=True)
        source = generator.generate()
        assert "ends_at" not in source
        assert generator.introspector.skipped_columns == ["event.ends_at"]

    def test_many_to_many_disabled_from_defaults(self):
        source = _generator(detect_many_to_many=False).generate()
        assert "def find_tags(" not in source
        assert "def find_category(" in source

    def test_catalog_failure_propagates(self):
        connection = FakeCatalogConnection(shop_tables(), fail_on=SQL_TABLES)
        generator = ModelGenerator(connection, "shop", defaults=Defaults())
        with pytest.raises(CatalogError):
            generator.generate()
        assert generator.output is None


# ============================================================================
# CLI
# ============================================================================

@pytest.fixture
def fake_factory():
    """Patch the connection factory to serve the shop catalog."""
    with patch.object(generate_models, "MySQLConnectionFactory") as factory_cls:
        factory = factory_cls.return_value
        factory.connection.return_value.__enter__.return_value = FakeCatalogConnection(shop_tables())
        yield factory_cls


class TestCli:

    def test_writes_output_file(self, tmp_path, fake_factory):
        target = tmp_path / "model" / "nested" / "model.py"
        code = generate_models.main(["--schema", "shop", "--output", str(target)])

        assert code == 0
        assert "class ArticleRepository:" in target.read_text(encoding="utf-8")
        settings = fake_factory.call_args[0][0]
        assert settings.database == "shop"

    def test_stdout(self, capsys, fake_factory):
        code = generate_models.main(["--schema", "shop", "--stdout"])
        assert code == 0
        assert "class TagRepository:" in capsys.readouterr().out

    def test_json_logs(self, capsys, fake_factory):
        code = generate_models.main(["--schema", "shop", "--stdout", "--json-logs"])
        assert code == 0

        lines = capsys.readouterr().err.strip().splitlines()
        records = [json.loads(line) for line in lines]
        assert any(r["context"].get("schema") == "shop" for r in records if "context" in r)

    def test_flags_override_defaults(self):
        args = generate_models.build_parser().parse_args([
            "--schema", "shop", "--host", "db", "--port", "3307",
            "--skip-unsupported", "--no-many-to-many",
        ])
        defaults = generate_models.resolve_defaults(args, base=Defaults())

        assert defaults.connection.host == "db"
        assert defaults.connection.port == 3307
        assert defaults.generation.skip_unsupported_columns is True
        assert defaults.generation.detect_many_to_many is False

    def test_unset_flags_keep_defaults(self):
        args = generate_models.build_parser().parse_args(["--schema", "shop"])
        defaults = generate_models.resolve_defaults(args, base=Defaults())

        assert defaults.generation.skip_unsupported_columns is False
        assert defaults.generation.detect_many_to_many is True
        assert defaults.generation.output_path == "model/model.py"

    def test_missing_schema_exits_1(self, fake_factory):
        assert generate_models.main([]) == 1
        fake_factory.assert_not_called()

    def test_generator_error_exits_1(self, fake_factory):
        failing = FakeCatalogConnection(shop_tables(), fail_on=SQL_TABLES)
        fake_factory.return_value.connection.return_value.__enter__.return_value = failing
        assert generate_models.main(["--schema", "shop", "--stdout"]) == 1

    def test_connection_error_exits_1(self):
        with patch.object(generate_models, "MySQLConnectionFactory") as factory_cls:
            factory_cls.return_value.connection.side_effect = ValueError("not configured")
            assert generate_models.main(["--schema", "shop"]) == 1
