"""
Application-layer exceptions.

These exceptions are used across the core and infrastructure layers.
"""


class StringMapError(Exception):
    """Base error for string map operations."""

    pass


class InvalidStringError(StringMapError, TypeError):
    """A string map operation received a value that is neither str nor None.

    Absent input (None) is never an error; this is only raised for
    ill-typed arguments such as numbers handed to add_string().
    """

    def __init__(self, operation: str, value: object):
        self.operation = operation
        self.value = value
        super().__init__(
            f"{operation}() expects a str or None, got {type(value).__name__}: {value!r}"
        )
