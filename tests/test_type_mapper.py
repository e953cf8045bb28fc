# ============================================================================
# TYPE MAPPER TESTS
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Tests - Column type resolution
# PURPOSE: Verify COLUMN_TYPE parsing and ScalarType selection
# CREATED: 19 OCT 2026
# ============================================================================
"""
Type Mapper Tests

Run with:
    pytest tests/test_type_mapper.py -v
"""

import pytest

from core.contracts import ScalarType
from core.errors import GeneratorError, UnsupportedColumnError
from core.schema.type_mapper import (
    parse_column_type,
    resolve_type,
    time_format,
    type_spelling,
    zero_value,
)


# ============================================================================
# PARSING
# ============================================================================

class TestParseColumnType:

    @pytest.mark.parametrize("raw, expected", [
        ("int(11)", ("int", 11, -1)),
        ("decimal(10,2)", ("decimal", 10, 2)),
        ("int(10) unsigned", ("int", 10, -1)),
        ("bigint(20) unsigned zerofill", ("bigint", 20, -1)),
        ("int unsigned", ("int", -1, -1)),
        ("enum('a','b')", ("enum", -1, -1)),
        ("datetime", ("datetime", -1, -1)),
        ("  VARCHAR(64) ", ("varchar", 64, -1)),
    ])
    def test_parse(self, raw, expected):
        assert parse_column_type(raw) == expected


# ============================================================================
# RESOLUTION
# ============================================================================

class TestResolveType:

    @pytest.mark.parametrize("raw, expected", [
        ("int(11)", ScalarType.INT),
        ("bigint(20) unsigned", ScalarType.INT),
        ("smallint(6)", ScalarType.INT),
        ("tinyint(4)", ScalarType.INT),
        ("tinyint(1)", ScalarType.BOOL),
        ("boolean", ScalarType.BOOL),
        ("timestamp", ScalarType.INT),
        ("float", ScalarType.FLOAT),
        ("double", ScalarType.FLOAT),
        ("decimal(10,2)", ScalarType.FLOAT),
        ("text", ScalarType.STRING),
        ("varchar(255)", ScalarType.STRING),
        ("enum('draft','live')", ScalarType.STRING),
        ("datetime", ScalarType.TIME),
        ("date", ScalarType.TIME),
        ("time", ScalarType.TIME),
    ])
    def test_not_null(self, raw, expected):
        assert resolve_type(raw, nullable=False) == expected

    @pytest.mark.parametrize("raw, expected", [
        ("int(11)", ScalarType.NULL_INT),
        ("tinyint(1)", ScalarType.NULL_BOOL),
        ("timestamp", ScalarType.NULL_INT),
        ("decimal(10,2)", ScalarType.NULL_FLOAT),
        ("varchar(255)", ScalarType.NULL_STRING),
    ])
    def test_nullable(self, raw, expected):
        assert resolve_type(raw, nullable=True) == expected

    def test_unknown_type_falls_back_to_string(self):
        assert resolve_type("blob", nullable=False) == ScalarType.STRING
        assert resolve_type("json", nullable=True) == ScalarType.STRING

    @pytest.mark.parametrize("raw", ["datetime", "date", "time"])
    def test_nullable_temporal_is_unsupported(self, raw):
        with pytest.raises(UnsupportedColumnError) as exc_info:
            resolve_type(raw, nullable=True)
        assert exc_info.value.kind == UnsupportedColumnError.NULLABLE_TEMPORAL
        assert exc_info.value.column_type == raw
        assert isinstance(exc_info.value, GeneratorError)


# ============================================================================
# SPELLINGS
# ============================================================================

class TestSpellings:

    def test_time_formats(self):
        assert time_format("datetime") == "%Y-%m-%d %H:%M:%S"
        assert time_format("date") == "%Y-%m-%d"
        assert time_format("time") == "%H:%M:%S"
        assert time_format("int(11)") == ""

    def test_type_spelling(self):
        assert type_spelling(ScalarType.INT) == "int"
        assert type_spelling(ScalarType.TIME) == "datetime"
        assert type_spelling(ScalarType.NULL_STRING) == "Optional[str]"

    def test_zero_values(self):
        assert zero_value(ScalarType.INT) == "0"
        assert zero_value(ScalarType.FLOAT) == "0.0"
        assert zero_value(ScalarType.STRING) == '""'
        assert zero_value(ScalarType.TIME) == "datetime.min"
        assert zero_value(ScalarType.NULL_INT) == "None"

    def test_every_tag_has_spelling_and_zero(self):
        for tag in ScalarType:
            assert type_spelling(tag)
            assert zero_value(tag)
