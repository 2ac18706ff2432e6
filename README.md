# rcweb

Build PostgreSQL read-model projection tables from JSON schemas. The package
also describes the HTTP CORS rules and security headers that a registry web
service applies. It has no dependencies beyond the standard library.

## Modules

### `rcweb.flatten`

`flatten_json_schema(schema)` takes a parsed JSON schema (a `dict`) and
returns a list of `FlattenedAttribute` objects. These are frozen dataclasses
with three fields:

- `attribute_name`: the property path, lower-cased and joined with
  underscores, for example `student_contactdetails_email`.
- `column_type`: the column type for the property:
  - `TEXT` for strings.
  - `TIMESTAMPTZ` for strings with format `date` or `date-time`.
  - `INTEGER`, `NUMERIC` and `BOOLEAN` for integers, numbers and booleans.
  - `JSONB` for arrays and objects that are not expanded.
  - `TEXT` when a property has no type.
- `generated_column_pattern`: a JSON path over an `entity_data` column, for
  example `entity_data -> 'student' -> 'contactdetails' ->> 'email'`. A
  `JSONB` value ends in `->`; every other type ends in `->>`.

How the walk works:

- It starts at the schema's `properties`.
- It follows `$ref` values of the form `#/definitions/<Name>`, both on
  properties and on array `items`. The referenced definition's properties are
  flattened under the property's name.
- Objects that have `properties` are expanded, so only their leaves appear.
- Nesting is limited to 3 levels, or to 5 when the schema has `definitions`.
  An object at the limit, or an object without `properties`, becomes a single
  `JSONB` column.

### `rcweb.ddl`

- `generate_create_table_statement(schema)` returns
  `CREATE TABLE <title>_projection (...);`. The table has these fixed columns:
  - `id UUID PRIMARY KEY`
  - `entity_type`
  - `created_by`
  - `created_at`
  - `registry_def_id`
  - `registry_def_version`
  - `version`
  - `entity_data JSONB NOT NULL`

  Each flattened attribute is added as a `GENERATED ALWAYS AS (...) STORED`
  column. Integer, numeric, boolean, date and timestamp attributes are stored
  as `TEXT`, so that the generated expressions need no casts. `JSONB`
  attributes keep their type.
- `generate_index_statements(schema)` returns a list of statements:
  - One `CREATE INDEX idx_<table>_<column>` for each field named in
    `_osConfig.indexFields`.
  - One `CREATE UNIQUE INDEX uidx_<table>_<column>` for each field named in
    `_osConfig.uniqueIndexFields`.
  - Last, and always, a GIN index on `entity_data`.

  A field name matches every flattened column whose name contains it, ignoring
  case.
- Both functions raise `SchemaProjectionError` (a `ValueError`) with the
  message `Schema must have a 'title' field` when the schema has no string
  `title`.

### `rcweb.http_policy`

- `cors(client_origin_url)` returns a `CorsPolicy` with these settings:
  - One allowed origin.
  - Methods `GET`, `POST`, `PUT` and `DELETE`.
  - Headers `Authorization` and `Content-Type`.
  - Credentials supported.
  - A max age of 86400 seconds.
- `CorsPolicy` has these methods:
  - `allows_origin(origin)`: exact match.
  - `allows_method(method)`: case-sensitive.
  - `allows_header(header)`: case-insensitive.
  - `response_headers(origin)`: returns the `Access-Control-*` and `Vary`
    headers for an allowed origin, and an empty dict for any other origin.
- `security_headers()` returns a dict of default response headers:
  - `X-XSS-Protection`
  - `Strict-Transport-Security`
  - `X-Frame-Options`
  - `X-Content-Type-Options`
  - `Content-Security-Policy`
  - `Cache-Control`
  - `Pragma`
  - `Expires`

### `rcweb.models`

`ValidateDefRequest` holds an `id`. It has three methods:

- `ValidateDefRequest.from_dict(data)` builds a request from decoded JSON. It
  raises `ValidationError` when the input is not an object, or when `id` is
  missing or is not a string.
- `validate()` raises `ValidationError` unless `id` is exactly 36 characters
  long, and otherwise returns the request.
- `to_dict()` returns `{"id": ...}`.

## Example

```python
from rcweb.flatten import flatten_json_schema
from rcweb.ddl import generate_create_table_statement, generate_index_statements

schema = {
    "title": "Student",
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "age": {"type": "integer"},
    },
    "_osConfig": {"indexFields": ["name"]},
}

for attribute in flatten_json_schema(schema):
    print(attribute.attribute_name, attribute.column_type,
          attribute.generated_column_pattern)

print(generate_create_table_statement(schema))
print("\n".join(generate_index_statements(schema)))
```

## What it does not do

This package only produces SQL text and header values. In particular:

- It does not connect to a database, run the statements it generates, or keep
  projections up to date as events arrive.
- It does not contain a web server. `CorsPolicy` and `security_headers()`
  describe the policies, and applying them to requests is left to whatever
  HTTP framework you use.

## Running the tests

```
pip install -e ".[test]"
pytest
```