"""
Schema introspection for model generation.

Reads column metadata from the database's information schema and reduces
it to the two strings the model stub needs: a ``@property`` docblock and a
quoted list of fillable field names.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ...logging_config import get_logger

logger = get_logger(__name__)

# SQL column types mapped onto docblock types; anything else passes through
TYPE_ALIASES: Dict[str, str] = {
    "varchar": "string",
    "char": "string",
    "tinyint": "int",
    "mediumint": "int",
    "bigint": "int",
    "timestamp": "datetime",
    "decimal": "float",
}

PRIMARY_KEY_COLUMN = "id"

# Aliases keep the result keys lowercase on MySQL 8, which reports
# information_schema column labels in uppercase.
_COLUMNS_QUERY = text(
    """
    SELECT
        data_type AS data_type,
        column_name AS column_name,
        column_comment AS column_comment
    FROM information_schema.columns
    WHERE table_schema = :schema AND table_name = :table
    ORDER BY ordinal_position
    """
)

_FIELDS_QUERY = text(
    """
    SELECT column_name AS column_name
    FROM information_schema.columns
    WHERE table_schema = :schema
        AND table_name = :table
        AND column_name <> :primary_key
    ORDER BY ordinal_position
    """
)


@dataclass(frozen=True)
class ColumnMetadata:
    """One column of a table as reported by the information schema."""

    column_name: str
    data_type: str
    column_comment: str = ""

    @property
    def property_type(self) -> str:
        """Docblock type for this column."""
        return alias_type(self.data_type)

    def to_property_line(self) -> str:
        """Format the column as a ``@property`` docblock line."""
        return f" * @property {self.property_type} {self.column_name} {self.column_comment}"


def alias_type(data_type: str) -> str:
    """Map a SQL data type onto its docblock type."""
    return TYPE_ALIASES.get(data_type, data_type)


def format_comments(columns: List[ColumnMetadata]) -> str:
    """Join the ``@property`` lines for ``columns`` with newlines."""
    return "\n".join(column.to_property_line() for column in columns)


def format_fields(names: List[str]) -> str:
    """Quote each field name and join them with a comma and a space."""
    return ", ".join(f"'{name}'" for name in names)


class SchemaIntrospector:
    """Read-only access to column metadata in the information schema."""

    def __init__(self, engine: Engine, database: Optional[str]):
        """
        Initialize the introspector.

        Args:
            engine: SQLAlchemy engine connected to the application database
            database: Schema name used as ``table_schema`` in queries
        """
        self.engine = engine
        self.database = database or ""

    def columns(self, table: str) -> List[ColumnMetadata]:
        """
        Get metadata for every column of ``table`` in catalog order.

        Query failures are logged and treated as an empty result.
        """
        rows = self._fetch(_COLUMNS_QUERY, {"schema": self.database, "table": table})
        return [
            ColumnMetadata(
                column_name=row["column_name"],
                data_type=row["data_type"],
                column_comment=row["column_comment"] or "",
            )
            for row in rows
        ]

    def field_names(self, table: str) -> List[str]:
        """Get every column name of ``table`` except the primary key."""
        rows = self._fetch(
            _FIELDS_QUERY,
            {
                "schema": self.database,
                "table": table,
                "primary_key": PRIMARY_KEY_COLUMN,
            },
        )
        return [row["column_name"] for row in rows]

    def comments(self, table: str) -> str:
        """Build the ``@property`` docblock for ``table``."""
        return format_comments(self.columns(table))

    def fields(self, table: str) -> str:
        """Build the quoted field list for ``table``."""
        return format_fields(self.field_names(table))

    def _fetch(self, query, params: Dict[str, str]) -> List[Dict[str, str]]:
        """Run a catalog query and return its rows as mappings."""
        logger.debug(
            "Querying information schema: schema=%s table=%s",
            params["schema"],
            params["table"],
        )
        try:
            with self.engine.connect() as connection:
                result = connection.execute(query, params)
                rows = [dict(row) for row in result.mappings()]
        except SQLAlchemyError as e:
            logger.warning(
                "Information schema query failed for %s.%s: %s",
                params["schema"],
                params["table"],
                e,
            )
            return []

        if not rows:
            logger.warning(
                "No columns found for %s.%s", params["schema"], params["table"]
            )
        return rows
