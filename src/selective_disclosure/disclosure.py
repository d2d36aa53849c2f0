"""
selective_disclosure/disclosure.py
Disclosure filter: decide, per field, disclose or withhold.
"""
import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .errors import UnknownFieldError
from .fields import FieldId, FieldRegistry
from .mask import DisclosureMask
from .serialize import canonical_json, decode_payload, encode_payload, fingerprint
from .store import DataStore, Payload


@dataclass(frozen=True)
class Disclosed:
    """Field present and authorized: carries the payload unchanged."""
    value: Payload

    @property
    def is_disclosed(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "Disclosed(...)"


@dataclass(frozen=True)
class Withheld:
    """Field present but not authorized for this request. Carries no value."""

    @property
    def is_disclosed(self) -> bool:
        return False


Entry = Union[Disclosed, Withheld]

WITHHELD = Withheld()


class DisclosureResult:
    """Outcome of one disclosure request.

    Holds exactly one entry per field present in the input store, in
    ascending ordinal order. Fields the store never held have no entry;
    ``requested_absent`` lists the ones the mask asked for anyway.
    """

    __slots__ = ('_registry', '_entries', '_requested_absent')

    def __init__(
        self,
        registry: FieldRegistry,
        entries: Mapping[FieldId, Entry],
        requested_absent: Sequence[str] = (),
    ):
        self._registry = registry
        ordered = dict(sorted(entries.items(), key=lambda item: item[0].ordinal))
        self._entries: Mapping[FieldId, Entry] = MappingProxyType(ordered)
        self._requested_absent: Tuple[str, ...] = tuple(requested_absent)

    @property
    def registry(self) -> FieldRegistry:
        return self._registry

    @property
    def requested_absent(self) -> Tuple[str, ...]:
        """Authorized field names with no stored value. Informational only."""
        return self._requested_absent

    def items(self) -> Iterator[Tuple[FieldId, Entry]]:
        return iter(self._entries.items())

    def disclosed(self) -> Dict[str, Payload]:
        """Released payloads keyed by field name, in ordinal order."""
        return {
            field.name: entry.value
            for field, entry in self._entries.items()
            if isinstance(entry, Disclosed)
        }

    def withheld(self) -> Tuple[str, ...]:
        return tuple(
            field.name for field, entry in self._entries.items()
            if isinstance(entry, Withheld)
        )

    def __getitem__(self, key: Any) -> Entry:
        try:
            field = self._registry.field(key)
        except UnknownFieldError:
            raise KeyError(key) from None
        return self._entries[field]

    def __contains__(self, key: Any) -> bool:
        try:
            return self._registry.field(key) in self._entries
        except (UnknownFieldError, TypeError):
            return False

    def __iter__(self) -> Iterator[FieldId]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DisclosureResult):
            return NotImplemented
        return (
            self._registry == other._registry
            and list(self._entries.items()) == list(other._entries.items())
            and self._requested_absent == other._requested_absent
        )

    def __repr__(self) -> str:
        return (
            f"DisclosureResult(schema={self._registry.name!r}, "
            f"disclosed={len(self.disclosed())}, withheld={len(self.withheld())})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form. Withheld entries carry no value key at all."""
        entries: List[Dict[str, Any]] = []
        for field, entry in self._entries.items():
            item = {
                'field': field.name,
                'ordinal': field.ordinal,
                'disclosed': entry.is_disclosed,
            }
            if isinstance(entry, Disclosed):
                item.update(encode_payload(entry.value))
            entries.append(item)
        return {
            'schema': self._registry.name,
            'entries': entries,
            'requested_absent': list(self._requested_absent),
        }

    def to_json(self) -> str:
        return canonical_json(self.to_dict()).decode('utf-8')

    def fingerprint(self) -> str:
        return fingerprint(self.to_dict())

    @classmethod
    def from_dict(cls, registry: FieldRegistry, data: Mapping[str, Any]) -> 'DisclosureResult':
        """Rebuild a result produced by ``to_dict``.

        Raises:
            ValueError: On schema mismatch, a disclosed entry without a value
                or a withheld entry carrying one
            UnknownFieldError: If an entry names a field outside the schema
        """
        if data.get('schema') != registry.name:
            raise ValueError(
                f"Schema mismatch: data is for '{data.get('schema')}', "
                f"registry is '{registry.name}'"
            )
        entries: Dict[FieldId, Entry] = {}
        for item in data['entries']:
            field = registry.field(item['field'])
            if field in entries:
                raise ValueError(f"Duplicate entry for field: {field.name}")
            if 'ordinal' in item and item['ordinal'] != field.ordinal:
                raise UnknownFieldError(f"{field.name}@{item['ordinal']}", registry.name)
            if item['disclosed']:
                if 'value' not in item and 'value_hex' not in item:
                    raise ValueError(f"Disclosed entry carries no value: {field.name}")
                entries[field] = Disclosed(decode_payload(item))
            else:
                if 'value' in item or 'value_hex' in item:
                    raise ValueError(f"Withheld entry carries a value: {field.name}")
                entries[field] = WITHHELD
        return cls(registry, entries, data.get('requested_absent', ()))

    @classmethod
    def from_json(cls, registry: FieldRegistry, text: str) -> 'DisclosureResult':
        return cls.from_dict(registry, json.loads(text))


def disclose(
    mask: Union[DisclosureMask, Sequence[bool]],
    data: DataStore,
    registry: Optional[FieldRegistry] = None,
) -> DisclosureResult:
    """Apply a disclosure mask to a subject's data store.

    For every field present in ``data`` (ascending ordinal), emit
    ``Disclosed(value)`` if the mask authorizes it, else ``Withheld``.
    Fields absent from ``data`` get no entry. Neither input is modified
    and no state is kept, so identical inputs give identical results.
    Nothing is logged here; callers such as SubjectLedger log the outcome.

    Args:
        mask: DisclosureMask, or a plain sequence of bools
        data: Subject's data store (read-only)
        registry: Schema to validate against; defaults to ``data.registry``

    Returns:
        DisclosureResult with one entry per stored field

    Raises:
        MaskLengthMismatchError: If the mask does not cover the schema exactly
        UnknownFieldError: If the store holds a field outside the schema
    """
    if not isinstance(mask, DisclosureMask):
        mask = DisclosureMask(mask)
    if registry is None:
        registry = data.registry

    mask.validate(registry)
    for field in data:
        if field not in registry:
            raise UnknownFieldError(field, registry.name)

    entries: Dict[FieldId, Entry] = {}
    for field, value in data.items():
        entries[field] = Disclosed(value) if mask.allows(field.ordinal) else WITHHELD

    requested_absent = [
        registry.field(ordinal).name
        for ordinal in mask.authorized_ordinals()
        if registry.field(ordinal) not in entries
    ]

    return DisclosureResult(registry, entries, requested_absent)
