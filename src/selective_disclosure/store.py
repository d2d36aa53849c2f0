"""
selective_disclosure/store.py
Immutable per-subject store of opaque field payloads.
"""
import json
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Tuple, Union

from .errors import InvalidValueError, UnknownFieldError
from .fields import FieldId, FieldRegistry
from .serialize import canonical_json, decode_payload, encode_payload, fingerprint

Payload = Union[str, bytes]


class DataStore:
    """Mapping from FieldId to an opaque payload for one subject.

    The payload is a placeholder for a commitment or ciphertext; the
    engine never inspects it. A store is built once per subject and is
    read-only afterwards, so it can be shared across concurrent
    disclosure calls.

    Example:
        store = DataStore(PERSONAL_DATA_REGISTRY, {
            PersonalData.NAME: "Riley",
            "age": "30",
        })
    """

    __slots__ = ('_registry', '_values')

    def __init__(self, registry: FieldRegistry, values: Mapping[Any, Payload]):
        resolved: Dict[FieldId, Payload] = {}
        for key, value in values.items():
            field = registry.field(key)
            if field in resolved:
                raise ValueError(f"Duplicate value for field: {field.name}")
            if not isinstance(value, (str, bytes)):
                raise InvalidValueError(field.name, type(value))
            resolved[field] = value

        ordered = dict(sorted(resolved.items(), key=lambda item: item[0].ordinal))
        self._registry = registry
        self._values: Mapping[FieldId, Payload] = MappingProxyType(ordered)

    @property
    def registry(self) -> FieldRegistry:
        return self._registry

    def fields(self) -> Tuple[FieldId, ...]:
        """Present fields in ascending ordinal order."""
        return tuple(self._values)

    def items(self) -> Iterator[Tuple[FieldId, Payload]]:
        """(FieldId, payload) pairs in ascending ordinal order."""
        return iter(self._values.items())

    def get(self, key: Any, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default

    def __getitem__(self, key: Any) -> Payload:
        try:
            field = self._registry.field(key)
        except UnknownFieldError:
            raise KeyError(key) from None
        return self._values[field]

    def __contains__(self, key: Any) -> bool:
        try:
            return self._registry.field(key) in self._values
        except (UnknownFieldError, TypeError):
            return False

    def __iter__(self) -> Iterator[FieldId]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataStore):
            return NotImplemented
        return self._registry == other._registry and dict(self._values) == dict(other._values)

    def __hash__(self) -> int:
        return hash((self._registry, tuple(self._values.items())))

    def __repr__(self) -> str:
        # Payloads never appear in the repr.
        return f"DataStore(schema={self._registry.name!r}, fields={len(self)})"

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form, entries in ascending ordinal order."""
        entries: List[Dict[str, Any]] = []
        for field, value in self._values.items():
            entry = {'field': field.name, 'ordinal': field.ordinal}
            entry.update(encode_payload(value))
            entries.append(entry)
        return {'schema': self._registry.name, 'entries': entries}

    def to_json(self) -> str:
        return canonical_json(self.to_dict()).decode('utf-8')

    def fingerprint(self) -> str:
        return fingerprint(self.to_dict())

    @classmethod
    def from_dict(cls, registry: FieldRegistry, data: Mapping[str, Any]) -> 'DataStore':
        """Rebuild a store produced by ``to_dict``.

        Raises:
            ValueError: If the schema name does not match the registry
            UnknownFieldError: If an entry names a field outside the schema
        """
        schema = data.get('schema')
        if schema != registry.name:
            raise ValueError(
                f"Schema mismatch: data is for '{schema}', registry is '{registry.name}'"
            )
        values: Dict[FieldId, Payload] = {}
        for entry in data['entries']:
            field = registry.field(entry['field'])
            if field in values:
                raise ValueError(f"Duplicate value for field: {field.name}")
            if 'ordinal' in entry and entry['ordinal'] != field.ordinal:
                raise UnknownFieldError(f"{field.name}@{entry['ordinal']}", registry.name)
            values[field] = decode_payload(entry)
        return cls(registry, values)

    @classmethod
    def from_json(cls, registry: FieldRegistry, text: str) -> 'DataStore':
        return cls.from_dict(registry, json.loads(text))
