"""Generate PostgreSQL DDL for projection tables built from JSON schemas.

The table for a schema titled ``Student`` is ``student_projection``. It holds
fixed entity metadata columns, the raw ``entity_data`` JSONB document and one
generated column per flattened schema attribute. Index statements are derived
from the schema's ``_osConfig`` section.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from rcweb.flatten import FlattenedAttribute, flatten_json_schema

__all__ = [
    "SchemaProjectionError",
    "generate_create_table_statement",
    "generate_index_statements",
]

_METADATA_COLUMNS = (
    "id UUID PRIMARY KEY",
    "entity_type TEXT NOT NULL",
    "created_by TEXT NOT NULL",
    "created_at TIMESTAMPTZ NOT NULL",
    "registry_def_id UUID NOT NULL",
    "registry_def_version INTEGER NOT NULL",
    "version INTEGER NOT NULL",
    "entity_data JSONB NOT NULL",
)

# Generated columns must use immutable expressions, and casts are not
# immutable, so primitive values are stored as text.
_STORED_AS_TEXT = frozenset({"INTEGER", "NUMERIC", "BOOLEAN", "DATE", "TIMESTAMPTZ"})


class SchemaProjectionError(ValueError):
    """Raised when a schema cannot be turned into a projection table."""


def _table_name(schema: Any) -> str:
    title = schema.get("title") if isinstance(schema, Mapping) else None
    if not isinstance(title, str):
        raise SchemaProjectionError("Schema must have a 'title' field")
    return f"{title.lower()}_projection"


def generate_create_table_statement(schema: Any) -> str:
    """Return the CREATE TABLE statement for the schema's projection table."""
    table_name = _table_name(schema)
    columns = list(_METADATA_COLUMNS)
    for attribute in flatten_json_schema(schema):
        db_type = (
            "TEXT" if attribute.column_type in _STORED_AS_TEXT else attribute.column_type
        )
        columns.append(
            f"{attribute.attribute_name} {db_type} "
            f"GENERATED ALWAYS AS ({attribute.generated_column_pattern}) STORED"
        )
    body = ",\n".join(f"    {column}" for column in columns)
    return f"CREATE TABLE {table_name} (\n{body}\n);"


def generate_index_statements(schema: Any) -> list[str]:
    """Return CREATE INDEX statements for the schema's projection table.

    Plain indexes come from ``_osConfig.indexFields``, unique ones from
    ``_osConfig.uniqueIndexFields``; a GIN index on ``entity_data`` is
    always added last.
    """
    table_name = _table_name(schema)
    attributes = flatten_json_schema(schema)
    statements: list[str] = []

    os_config = schema.get("_osConfig")
    if isinstance(os_config, Mapping):
        for column in _matching_columns_for(attributes, os_config.get("indexFields")):
            statements.append(
                f"CREATE INDEX idx_{table_name}_{column} ON {table_name} ({column});"
            )
        for column in _matching_columns_for(
            attributes, os_config.get("uniqueIndexFields")
        ):
            statements.append(
                f"CREATE UNIQUE INDEX uidx_{table_name}_{column} "
                f"ON {table_name} ({column});"
            )

    statements.append(
        f"CREATE INDEX idx_{table_name}_entity_data_gin "
        f"ON {table_name} USING GIN (entity_data);"
    )
    return statements


def _matching_columns_for(
    attributes: list[FlattenedAttribute], fields: Any
) -> Iterable[str]:
    if not isinstance(fields, list):
        return
    for field in fields:
        if isinstance(field, str):
            yield from _find_matching_columns(attributes, field)


def _find_matching_columns(
    attributes: list[FlattenedAttribute], field_pattern: str
) -> list[str]:
    """Column names equal to, ending with, or containing the field pattern."""
    pattern = field_pattern.lower()
    return [
        attribute.attribute_name
        for attribute in attributes
        if pattern in attribute.attribute_name.lower()
    ]