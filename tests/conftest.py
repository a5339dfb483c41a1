"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest
from sqlalchemy import create_engine, event, text
from sqlalchemy.pool import StaticPool

from modelgen.codegen.core.config import GeneratorConfig
from modelgen.codegen.core.generator import ModelGenerator
from modelgen.codegen.core.schema import SchemaIntrospector

DATABASE = "shop"

CATALOG_ROWS = [
    ("shop", "posts", "id", 1, "int", "pk"),
    ("shop", "posts", "title", 2, "varchar", "post title"),
    ("shop", "users", "id", 1, "bigint", "primary key"),
    ("shop", "users", "name", 2, "varchar", "user name"),
    ("shop", "users", "created_at", 3, "timestamp", "created at"),
    ("shop", "users", "balance", 4, "decimal", "account balance"),
    ("shop", "users", "bio", 5, "text", None),
    ("archive", "posts", "legacy_id", 1, "int", "other schema"),
]


def make_catalog_engine(rows=CATALOG_ROWS):
    """In-memory SQLite engine with an attached ``information_schema``."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine, "connect")
    def _attach_catalog(dbapi_connection, connection_record):
        dbapi_connection.execute("ATTACH DATABASE ':memory:' AS information_schema")

    with engine.begin() as connection:
        connection.execute(
            text(
                "CREATE TABLE information_schema.columns ("
                "table_schema TEXT, table_name TEXT, column_name TEXT, "
                "ordinal_position INTEGER, data_type TEXT, column_comment TEXT)"
            )
        )
        connection.execute(
            text(
                "INSERT INTO information_schema.columns VALUES "
                "(:table_schema, :table_name, :column_name, "
                ":ordinal_position, :data_type, :column_comment)"
            ),
            [
                {
                    "table_schema": schema,
                    "table_name": table,
                    "column_name": column,
                    "ordinal_position": position,
                    "data_type": data_type,
                    "column_comment": comment,
                }
                for schema, table, column, position, data_type, comment in rows
            ],
        )

    return engine


@pytest.fixture
def catalog_engine():
    """SQLite engine holding the test catalog."""
    engine = make_catalog_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def catalog_factory():
    """Build a fresh catalog engine per call; each one is disposed at teardown."""
    engines = []

    def factory():
        engine = make_catalog_engine()
        engines.append(engine)
        return engine

    yield factory
    for engine in engines:
        engine.dispose()


@pytest.fixture
def introspector(catalog_engine) -> SchemaIntrospector:
    return SchemaIntrospector(catalog_engine, DATABASE)


@pytest.fixture
def base_path(tmp_path: Path) -> Path:
    """Return the application source directory for generated classes."""
    return tmp_path / "app"


@pytest.fixture
def config(base_path: Path) -> GeneratorConfig:
    return GeneratorConfig(
        base_path=str(base_path),
        connections={"mysql": {"url": "sqlite://", "database": DATABASE}},
    )


@pytest.fixture
def generator(config, introspector) -> ModelGenerator:
    return ModelGenerator(config, introspector=introspector)
