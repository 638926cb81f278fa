"""
Tests for the SQLAnywhereSchema entry point.
"""
import pytest

from asa_dialect import DialectConfig, SQLAnywhereSchema
from asa_dialect.database.catalog_queries import ServerVersionFamily

from conftest import COLUMNS_SQL, PRIMARY_KEYS_SQL, VERSION_SQL, column_row


@pytest.fixture
def schema(executor):
    return SQLAnywhereSchema(executor, DialectConfig(username="dbo"))


class TestConstruction:
    """Test configuration wiring."""

    def test_default_schema_from_username(self, executor):
        schema = SQLAnywhereSchema(executor, DialectConfig(username="webuser"))
        assert schema.default_schema == "webuser"
        assert schema.dialect.default_schema == "webuser"

    def test_default_schema_fallback(self, executor):
        assert SQLAnywhereSchema(executor).default_schema == "dbo"

    def test_version_override(self, executor):
        schema = SQLAnywhereSchema(executor, DialectConfig(version_override=11))
        assert schema.get_server_version_family() == ServerVersionFamily.V11
        assert executor.calls_matching(VERSION_SQL) == []

    def test_cache_disabled(self, executor):
        schema = SQLAnywhereSchema(executor, DialectConfig(enable_schema_cache=False))
        schema.get_table_schema("Orders")
        schema.get_table_schema("Orders")
        assert schema.cache is None
        assert len(executor.calls_matching(COLUMNS_SQL)) == 2


class TestTableSchema:
    """Test cached metadata access."""

    def test_cached(self, schema, executor):
        first = schema.get_table_schema("Orders")
        second = schema.get_table_schema("[dbo].[orders]")
        assert first is second
        assert len(executor.calls_matching(COLUMNS_SQL)) == 1

    def test_refresh(self, schema, executor):
        first = schema.get_table_schema("Orders")
        second = schema.refresh_table_schema("Orders")
        assert first is not second
        assert len(executor.calls_matching(COLUMNS_SQL)) == 2

    def test_invalidate_one(self, schema, executor):
        schema.get_table_schema("Orders")
        schema.invalidate_cache("Orders")
        schema.get_table_schema("Orders")
        assert len(executor.calls_matching(COLUMNS_SQL)) == 2

    def test_invalidate_all(self, schema, executor):
        schema.get_table_schema("Orders")
        schema.invalidate_cache()
        assert schema.cache.cache_info()["size"] == 0

    def test_absent_table(self, schema, executor):
        executor.route(COLUMNS_SQL, [])
        assert schema.get_table_schema("Missing") is None

    def test_load_bypasses_cache(self, schema, executor):
        schema.get_table_schema("Orders")
        schema.load_table_schema("Orders")
        assert len(executor.calls_matching(COLUMNS_SQL)) == 2


class TestTranslation:
    """Test SQL helpers exposed by the entry point."""

    def test_translate_pagination(self, schema):
        assert schema.translate_pagination("SELECT * FROM t", limit=10) == "SELECT TOP 10 * FROM t"
        assert schema.translate_pagination("SELECT * FROM t", "id DESC", 10, 5) == \
            "SELECT TOP 10 START AT 6 * FROM t ORDER BY id DESC"

    def test_quoting(self, schema):
        assert schema.quote_identifier("a") == "[a]"
        assert schema.quote_table_name("dbo.t") == "[dbo].[t]"

    def test_compare_table_names(self, schema):
        assert schema.compare_table_names("dbo.Users", "[users]")
        assert not schema.compare_table_names("acme.Users", "Users")

    def test_select_exists(self, schema):
        assert schema.select_exists("SELECT 1") == "SELECT IF EXISTS(SELECT 1) THEN 1 ELSE 0 ENDIF"

    def test_ddl(self, schema):
        assert schema.rename_table("Users", "Members") == "ALTER TABLE [Users] RENAME [Members]"
        assert schema.rename_column("Users", "a", "b") == "ALTER TABLE [Users] RENAME [a] TO [b]"
        assert schema.alter_column_type("Users", "a", "integer") == \
            "ALTER TABLE [Users] MODIFY [a] int"


class TestResetSequence:
    """Test identity and sequence reset."""

    def test_reset_with_value(self, schema, executor):
        assert schema.reset_sequence("Orders", 100) is True
        sql, params = executor.calls_matching("sa_reset_identity")[0]
        assert params == {"tableName": "Orders", "owner": "dbo", "value": 100}

    def test_reset_uses_max_primary_key(self, schema, executor):
        executor.route("SELECT MAX(", [{"max": 41}])
        assert schema.reset_sequence("Orders") is True

        max_sql, _ = executor.calls_matching("SELECT MAX(")[0]
        assert max_sql == "SELECT MAX([id]) FROM [dbo].[Orders]"
        _, params = executor.calls_matching("sa_reset_identity")[0]
        assert params["value"] == 41

    def test_reset_named_sequence(self, schema, executor):
        executor.route(COLUMNS_SQL, [
            column_row("id", "bigint", width=8, nulls="N", default="seq_orders.nextval",
                       sequence_name="seq_orders", pkey="Y"),
        ])
        assert schema.reset_sequence("Orders", 5) is True

        sql, params = executor.calls[-1]
        assert sql == "ALTER SEQUENCE [seq_orders] RESTART WITH 6"
        assert params == {}
        assert executor.calls_matching("sa_reset_identity") == []

    def test_no_identity(self, schema, executor):
        executor.route(COLUMNS_SQL, [column_row("id", "integer", width=4, nulls="N")])
        assert schema.reset_sequence("Orders") is False
        assert executor.calls_matching("sa_reset_identity") == []

    def test_absent_table(self, schema, executor):
        executor.route(PRIMARY_KEYS_SQL, [])
        executor.route(COLUMNS_SQL, [])
        assert schema.reset_sequence("Missing") is False


class TestTableNames:
    """Test table listing through the entry point."""

    def test_get_table_names(self, schema, executor):
        executor.route("TABLE_SCHEMA", [{"table_name": "Orders", "TABLE_SCHEMA": "dbo"}])
        assert schema.get_table_names() == ["Orders"]
