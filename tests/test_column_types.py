"""
Unit tests for ColumnTypeMapper.
Tests physical type parsing, abstract type conversion and default casting.
"""
from decimal import Decimal

import pytest

from asa_dialect.database.dialects import ColumnTypeMapper
from asa_dialect.database.models import AbstractType


@pytest.fixture
def mapper():
    return ColumnTypeMapper()


class TestParsePhysical:
    """Test parsing of physical type strings."""

    def test_decimal_precision_scale(self, mapper):
        parsed = mapper.parse_physical("decimal(18,2)")
        assert parsed.base_token == "decimal"
        assert parsed.abstract_type == AbstractType.DECIMAL
        assert parsed.size == 18
        assert parsed.precision == 18
        assert parsed.scale == 2

    def test_bit_32_is_integer(self, mapper):
        assert mapper.parse_physical("bit(32)").abstract_type == AbstractType.INTEGER

    def test_bit_wider_than_32_is_bigint(self, mapper):
        assert mapper.parse_physical("bit(40)").abstract_type == AbstractType.BIGINT

    def test_tinyint_1_is_boolean(self, mapper):
        assert mapper.parse_physical("tinyint(1)").abstract_type == AbstractType.BOOLEAN

    def test_bit_1_is_boolean(self, mapper):
        assert mapper.parse_physical("bit(1)").abstract_type == AbstractType.BOOLEAN

    def test_unsized_bit_is_smallint(self, mapper):
        assert mapper.parse_physical("bit").abstract_type == AbstractType.SMALLINT

    def test_varchar_size(self, mapper):
        parsed = mapper.parse_physical("varchar(50)")
        assert parsed.abstract_type == AbstractType.VARCHAR
        assert parsed.size == 50
        assert parsed.scale is None

    def test_long_varchar_is_text(self, mapper):
        parsed = mapper.parse_physical("long varchar")
        assert parsed.abstract_type == AbstractType.TEXT
        assert parsed.base_token == "long"

    def test_unsigned_int(self, mapper):
        parsed = mapper.parse_physical("unsigned int")
        assert parsed.abstract_type == AbstractType.INTEGER
        assert parsed.unsigned is True

    def test_unknown_type_is_string(self, mapper):
        assert mapper.parse_physical("uniqueidentifierstr").abstract_type == AbstractType.STRING

    def test_unparseable_is_string(self, mapper):
        parsed = mapper.parse_physical("(((")
        assert parsed.abstract_type == AbstractType.STRING
        assert parsed.size is None

    @pytest.mark.parametrize("db_type", [
        "decimal(18,2)", "bit(32)", "long varchar", "unsigned bigint", "varchar(40)",
    ])
    def test_parsing_is_deterministic(self, mapper, db_type):
        assert mapper.parse_physical(db_type) == mapper.parse_physical(db_type)
        assert ColumnTypeMapper().parse_physical(db_type) == mapper.parse_physical(db_type)

    def test_case_insensitive(self, mapper):
        assert mapper.parse_physical("DECIMAL(10,4)").abstract_type == AbstractType.DECIMAL


class TestToPhysical:
    """Test abstract -> physical conversion."""

    @pytest.mark.parametrize("abstract,physical", [
        ("pk", "int IDENTITY PRIMARY KEY"),
        ("bigpk", "bigint IDENTITY PRIMARY KEY"),
        ("string", "nvarchar(255)"),
        ("text", "nvarchar(32767)"),
        ("boolean", "bit"),
        ("money", "decimal(19,2)"),
        ("binary", "varbinary(32767)"),
    ])
    def test_plain_abstract(self, mapper, abstract, physical):
        assert mapper.to_physical(abstract) == physical

    def test_size_override(self, mapper):
        assert mapper.to_physical("string(64)") == "nvarchar(64)"
        assert mapper.to_physical("decimal(10,2)") == "decimal(10,2)"

    def test_modifiers_kept(self, mapper):
        assert mapper.to_physical("string not null") == "nvarchar(255) not null"
        assert mapper.to_physical("string(32) not null") == "nvarchar(32) not null"

    def test_unknown_passes_through(self, mapper):
        assert mapper.to_physical("uniqueidentifier") == "uniqueidentifier"
        assert mapper.to_physical("long varchar") == "long varchar"


class TestPythonType:
    """Test abstract type -> Python type."""

    def test_types(self, mapper):
        assert mapper.python_type(AbstractType.INTEGER) is int
        assert mapper.python_type(AbstractType.BOOLEAN) is bool
        assert mapper.python_type(AbstractType.DOUBLE) is float
        assert mapper.python_type(AbstractType.DECIMAL) is Decimal
        assert mapper.python_type(AbstractType.BINARY) is bytes
        assert mapper.python_type(AbstractType.VARCHAR) is str


class TestCastDefault:
    """Test conversion of raw catalog defaults."""

    def test_none(self, mapper):
        assert mapper.cast_default(AbstractType.INTEGER, None) is None

    def test_empty_for_number_is_none(self, mapper):
        assert mapper.cast_default(AbstractType.INTEGER, "") is None

    def test_empty_for_string_kept(self, mapper):
        assert mapper.cast_default(AbstractType.VARCHAR, "") == ""

    def test_quoted_string(self, mapper):
        assert mapper.cast_default(AbstractType.VARCHAR, "'new'") == "new"
        assert mapper.cast_default(AbstractType.VARCHAR, "'it''s'") == "it's"

    def test_integer(self, mapper):
        assert mapper.cast_default(AbstractType.INTEGER, "42") == 42

    def test_decimal(self, mapper):
        assert mapper.cast_default(AbstractType.DECIMAL, "0.00") == Decimal("0.00")

    def test_boolean(self, mapper):
        assert mapper.cast_default(AbstractType.BOOLEAN, "1") is True
        assert mapper.cast_default(AbstractType.BOOLEAN, "0") is False

    def test_expression_returned_unchanged(self, mapper):
        assert mapper.cast_default(AbstractType.INTEGER, "user_id()") == "user_id()"

    def test_server_generated_default(self, mapper):
        assert mapper.is_server_generated_default(AbstractType.TIMESTAMP, "current timestamp")
        assert not mapper.is_server_generated_default(AbstractType.VARCHAR, "current timestamp")
        assert not mapper.is_server_generated_default(AbstractType.TIMESTAMP, None)
