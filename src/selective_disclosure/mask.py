"""
selective_disclosure/mask.py
Per-request disclosure authorization vector.
"""
from typing import Any, Iterable, Iterator, Tuple

from .errors import MaskLengthMismatchError, UnknownFieldError
from .fields import FieldRegistry


class DisclosureMask:
    """Fixed-length sequence of booleans, one per registry ordinal.

    ``True`` at an ordinal means the field is authorized for release.
    Masks are immutable and created fresh per request.
    """

    __slots__ = ('_values',)

    def __init__(self, values: Iterable[bool]):
        values = tuple(values)
        for index, value in enumerate(values):
            if not isinstance(value, bool):
                raise TypeError(
                    f"Mask entry {index} must be bool, got {type(value).__name__}"
                )
        self._values: Tuple[bool, ...] = values

    @classmethod
    def none(cls, registry: FieldRegistry) -> 'DisclosureMask':
        """Mask that withholds every field."""
        return cls([False] * registry.cardinality())

    @classmethod
    def all(cls, registry: FieldRegistry) -> 'DisclosureMask':
        """Mask that authorizes every field."""
        return cls([True] * registry.cardinality())

    @classmethod
    def for_fields(cls, registry: FieldRegistry, fields: Iterable[Any]) -> 'DisclosureMask':
        """Mask authorizing exactly the given fields.

        Args:
            registry: Schema the mask is built against
            fields: Names, FieldIds, ordinals or Enum members

        Raises:
            UnknownFieldError: If any field is outside the schema
        """
        values = [False] * registry.cardinality()
        for field in fields:
            values[registry.ordinal(field)] = True
        return cls(values)

    def validate(self, registry: FieldRegistry) -> None:
        """Check the mask covers the registry exactly.

        Raises:
            MaskLengthMismatchError: If the lengths disagree
        """
        if len(self._values) != registry.cardinality():
            raise MaskLengthMismatchError(registry.cardinality(), len(self._values))

    def allows(self, ordinal: int) -> bool:
        if isinstance(ordinal, bool) or not isinstance(ordinal, int):
            raise TypeError("ordinal must be an int")
        if not 0 <= ordinal < len(self._values):
            raise UnknownFieldError(ordinal)
        return self._values[ordinal]

    def authorized_ordinals(self) -> Tuple[int, ...]:
        return tuple(i for i, allowed in enumerate(self._values) if allowed)

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, ordinal: int) -> bool:
        return self.allows(ordinal)

    def __iter__(self) -> Iterator[bool]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DisclosureMask):
            return self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"DisclosureMask(authorized={list(self.authorized_ordinals())}, length={len(self)})"
