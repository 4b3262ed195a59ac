"""
Exceptions raised by the box classifier.
"""


class BoxEngineError(Exception):
    """Base class for box inspector errors."""


class InvalidNodeError(BoxEngineError, ValueError):
    """A predicate was asked about a missing node handle."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}() requires a node, got None")


class UnknownPredicateError(BoxEngineError, KeyError):
    """No predicate is registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown box predicate: {self.name!r}"
