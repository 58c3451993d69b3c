from __future__ import annotations

from typing import Any


class NominaError(Exception):
    """Base class for payroll engine errors."""


class InvalidArgument(NominaError, ValueError):
    """A required numeric field was negative or not a number."""

    def __init__(self, field: str, value: Any, label: str | None = None, requirement: str = "a non-negative number"):
        self.field = field
        self.value = value
        self.label = label or field.replace("_", " ").capitalize()
        super().__init__(f"{self.label} must be {requirement}")


class DataFileError(NominaError):
    """An input file could not be read as payroll data."""

    def __init__(self, path: Any, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
