"""
selective_disclosure/errors.py
Typed contract violations raised by the disclosure engine.
"""
from typing import Any


class DisclosureError(ValueError):
    """Base class for all disclosure contract violations.

    These indicate a caller or schema mistake, never a transient
    condition, so they must not be retried.
    """


class UnknownFieldError(DisclosureError):
    """A field identifier is not part of the registry."""

    def __init__(self, field: Any, schema: str = ""):
        self.field = field
        self.schema = schema
        where = f" in schema '{schema}'" if schema else ""
        super().__init__(f"Unknown field{where}: {field!r}")


class MaskLengthMismatchError(DisclosureError):
    """Mask length disagrees with the registry cardinality."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Mask length mismatch: expected {expected} entries, got {actual}"
        )


class InvalidValueError(DisclosureError):
    """A stored payload is not an opaque str/bytes value."""

    def __init__(self, field: Any, value_type: type):
        self.field = field
        self.value_type = value_type
        super().__init__(
            f"Invalid value for field {field!r}: expected str or bytes, "
            f"got {value_type.__name__}"
        )
