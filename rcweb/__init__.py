"""JSON-schema flattening and PostgreSQL projection DDL, with HTTP CORS and security-header policies and request models."""

__version__ = "2.4.0"
__all__ = ["ddl", "flatten", "http_policy", "models"]