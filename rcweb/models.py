"""Request models accepted by the web API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

__all__ = ["ValidationError", "ValidateDefRequest"]

_ID_LENGTH = 36
_ID_MESSAGE = "id is required and must be 36 characters long"


class ValidationError(ValueError):
    """Raised when a request model is malformed or fails validation."""


@dataclass
class ValidateDefRequest:
    """A request to validate a definition, identified by its 36-character id."""

    id: str

    def validate(self) -> ValidateDefRequest:
        """Check the id length; return ``self`` or raise :class:`ValidationError`."""
        if len(self.id) != _ID_LENGTH:
            raise ValidationError(_ID_MESSAGE)
        return self

    @classmethod
    def from_dict(cls, data: Any) -> ValidateDefRequest:
        """Build a request from decoded JSON without validating it."""
        if not isinstance(data, Mapping):
            raise ValidationError("expected a JSON object")
        if "id" not in data:
            raise ValidationError("missing field `id`")
        identifier = data["id"]
        if not isinstance(identifier, str):
            raise ValidationError("field `id` must be a string")
        return cls(id=identifier)

    def to_dict(self) -> dict[str, str]:
        """Return the JSON-ready form of the request."""
        return {"id": self.id}