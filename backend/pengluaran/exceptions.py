"""Domain errors raised by the service layer.

API handlers translate these into HTTP responses; the CLI prints them.
"""

from __future__ import annotations


class NotFoundError(LookupError):
    def __init__(self, resource: str = "Resource"):
        super().__init__(f"{resource} not found")
        self.resource = resource


class CategoryMismatchError(ValueError):
    """A transaction was tagged with a category of the other type."""


class CategoryLimitError(ValueError):
    """The user already owns the maximum number of categories."""


class UnknownIconError(ValueError):
    def __init__(self, name: str):
        super().__init__(f"Unknown category icon '{name}'")
        self.name = name
