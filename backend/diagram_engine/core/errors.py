from typing import Any

from pydantic import ValidationError


class DiagramError(Exception):
    """Base class for diagram engine failures."""


class InvalidParameterError(DiagramError):
    """A merged generator or style parameter falls outside its domain."""

    def __init__(self, field: str, value: Any, message: str = ""):
        self.field = field
        self.value = value
        self.message = message or "invalid value"
        super().__init__(f"{field}={value!r}: {self.message}")

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "value": self.value,
            "message": self.message,
        }


class DanglingConnectionError(DiagramError):
    """A connection references a node that is not part of the diagram."""

    def __init__(self, node_id: str, message: str = ""):
        self.node_id = node_id
        super().__init__(message or f"connection references unknown node '{node_id}'")


def invalid_parameter_from(error: ValidationError, supplied: dict) -> InvalidParameterError:
    """Translate the first pydantic error into an InvalidParameterError."""
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    value = first.get("input", supplied.get(field))
    return InvalidParameterError(field, value, first.get("msg", "invalid value"))
