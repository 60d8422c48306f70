import logging

import pytest

from gaussorm import (
    AdapterConnectionError,
    AdapterExecutionError,
    Assignment,
    Column,
    ColumnDescriptor,
    Database,
    DataType,
    DialectConfig,
    Insert,
    OnConflict,
    OpenGaussDialect,
    Returning,
    Schema,
    Table,
    Values,
    excluded,
)

USERS = Schema(
    "users",
    [
        ColumnDescriptor("id", DataType.INT, primary_key=True, auto_increment=True),
        ColumnDescriptor("name", DataType.STRING, size=64, unique=True),
        ColumnDescriptor("age", DataType.INT, size=32),
    ],
)


class FakeCursor:
    def __init__(self, connection):
        self.connection = connection

    def execute(self, sql, params=None):
        self.connection.executed.append((sql, params))


class FakeConnection:
    def __init__(self):
        self.executed = []
        self.closed = False

    def cursor(self):
        return FakeCursor(self)

    def close(self):
        self.closed = True


@pytest.fixture
def connection():
    return FakeConnection()


@pytest.fixture
def db(connection):
    return Database(OpenGaussDialect(DialectConfig(conn=connection)))


def insert_statement(db, on_conflict=None, returning=None):
    stmt = db.statement(USERS)
    stmt.add_clause(
        Insert(Table("users")),
        Values((Column("name"), Column("age")), (("alice", 30),)),
    )
    if on_conflict is not None:
        stmt.add_clause(on_conflict)
    if returning is not None:
        stmt.add_clause(returning)
    return db.render_create(stmt)


def test_insert_with_returning(db):
    stmt = insert_statement(db, returning=Returning((Column("id"),)))
    assert stmt.sql == 'INSERT INTO "users" ("name","age") VALUES ($1,$2) RETURNING "id"'
    assert stmt.vars == ["alice", 30]


def test_upsert_updates_only_non_key_columns(db):
    stmt = insert_statement(
        db,
        on_conflict=OnConflict(
            columns=(Column("name"),),
            do_updates=(
                Assignment(Column("name"), excluded("name")),
                Assignment(Column("age"), excluded("age")),
            ),
        ),
    )
    assert stmt.sql == (
        'INSERT INTO "users" ("name","age") VALUES ($1,$2) '
        'ON DUPLICATE KEY UPDATE "age"="excluded"."age"'
    )


def test_upsert_suppresses_returning(db):
    stmt = insert_statement(
        db,
        on_conflict=OnConflict(columns=(Column("id"),), do_nothing=True),
        returning=Returning(),
    )
    assert "ON DUPLICATE KEY UPDATE NOTHING" in stmt.sql
    assert "RETURNING" not in stmt.sql


def test_without_returning_never_renders_returning(connection):
    db = Database(OpenGaussDialect(DialectConfig(conn=connection, without_returning=True)))
    stmt = insert_statement(db, returning=Returning())
    assert stmt.sql == 'INSERT INTO "users" ("name","age") VALUES ($1,$2)'


def test_execute_statement_passes_vars_and_logs(db, connection, caplog):
    caplog.set_level(logging.DEBUG, logger="gaussorm.database")
    stmt = insert_statement(db, returning=Returning((Column("id"),)))
    db.execute_statement(stmt)
    assert connection.executed == [(stmt.sql, ("alice", 30))]
    assert any("VALUES ('alice',30)" in record.message for record in caplog.records)


def test_execute_validates_parameter_count(db):
    with pytest.raises(AdapterExecutionError):
        db.execute('SELECT * FROM "users" WHERE "id" = $1', ())
    with pytest.raises(AdapterExecutionError):
        db.execute('SELECT 1', (1,))


def test_savepoints_go_through_connection(db, connection):
    db.savepoint("sp_1")
    db.rollback_to("sp_1")
    assert [sql for sql, _ in connection.executed] == [
        "SAVEPOINT sp_1",
        "ROLLBACK TO SAVEPOINT sp_1",
    ]


def test_close_releases_connection(db, connection):
    db.close()
    assert connection.closed is True
    with pytest.raises(AdapterConnectionError):
        db.execute("SELECT 1")
