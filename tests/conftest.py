"""
Pytest configuration and fixtures for ASA dialect tests.
"""
import pytest

from asa_dialect.database.dialects import SQLAnywhereDialect


class FakeExecutor:
    """
    Scripted QueryExecutor: routes SQL to canned rows by text fragment.

    Routes are checked in insertion order; a route value may be a list of
    rows, an exception instance (raised) or a callable taking params.
    Unrouted SQL returns no rows. Every call is recorded.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def route(self, fragment, result):
        self.routes[fragment] = result

    def execute(self, sql, params=None):
        self.calls.append((sql, dict(params or {})))
        for fragment, result in self.routes.items():
            if fragment in sql:
                if isinstance(result, Exception):
                    raise result
                if callable(result):
                    return result(params or {})
                return [dict(row) for row in result]
        return []

    def calls_matching(self, fragment):
        return [call for call in self.calls if fragment in call[0]]


# Text fragments identifying each catalog query
VERSION_SQL = "@@version"
OWNER_COUNT_SQL = "COUNT(DISTINCT creator)"
PRIMARY_KEYS_SQL = "AS field_name"
COLUMNS_SQL = "AS base_type"
FOREIGN_KEYS_SQL = "UQ_TABLE_NAME"
TABLE_NAMES_SQL = "TABLE_SCHEMA"


def column_row(name, base_type, width=None, scale=0, nulls="Y", default=None,
               sequence_name=None, remarks=None, pkey="N"):
    """One row of the columns catalog query."""
    return {
        "column_name": name,
        "base_type": base_type,
        "width": width,
        "scale": scale,
        "nulls": nulls,
        "unique": "N",
        "pkey": pkey,
        "default": default,
        "sequence_name": sequence_name,
        "remarks": remarks,
    }


ORDERS_COLUMNS = [
    column_row("id", "integer", width=4, nulls="N", default="autoincrement", pkey="Y"),
    column_row("customer_id", "integer", width=4, nulls="N"),
    column_row("status", "varchar", width=20, default="'new'", remarks="Order state"),
    column_row("amount", "decimal", width=18, scale=2, default="0.00"),
    column_row("is_paid", "bit", width=1, nulls="N", default="0"),
    column_row("created_at", "timestamp", width=8, default="current timestamp"),
    column_row("notes", "long varchar", width=32767, default="(NULL)"),
]


@pytest.fixture
def dialect():
    """SQL Anywhere dialect with 'dbo' as default schema."""
    return SQLAnywhereDialect(default_schema="dbo")


@pytest.fixture
def executor():
    """Fake executor for a version 17 server with an 'Orders' table."""
    return FakeExecutor({
        VERSION_SQL: [{"ver": "17.0.10.6057"}],
        OWNER_COUNT_SQL: [{"cnt": 1}],
        PRIMARY_KEYS_SQL: [{"field_name": "id"}],
        COLUMNS_SQL: ORDERS_COLUMNS,
        FOREIGN_KEYS_SQL: [
            {"FK_KEY_ID": 1, "FK_COLUMN_NAME": "customer_id",
             "UQ_TABLE_NAME": "Customers", "UQ_COLUMN_NAME": "id"},
        ],
    })
