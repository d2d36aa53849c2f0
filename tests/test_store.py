"""
tests/test_store.py
Unit tests for the per-subject data store.
"""
import json

import pytest
from selective_disclosure.errors import InvalidValueError, UnknownFieldError
from selective_disclosure.fields import FieldId, FieldRegistry, PersonalData, PERSONAL_DATA_REGISTRY
from selective_disclosure.store import DataStore


@pytest.fixture
def registry():
    return FieldRegistry(["name", "age", "ssn"], name="demo")


@pytest.fixture
def store(registry):
    """Store built with keys out of ordinal order."""
    return DataStore(registry, {"ssn": "123-45-6789", "name": "Riley", "age": "30"})


class TestDataStoreConstruction:
    """Construction and validation."""

    def test_keys_resolved(self, store):
        assert store["name"] == "Riley"
        assert store[1] == "30"
        assert store[FieldId("ssn", 2)] == "123-45-6789"

    def test_enum_keys(self):
        store = DataStore(PERSONAL_DATA_REGISTRY, {PersonalData.NAME: "Riley"})
        assert store["name"] == "Riley"

    def test_unknown_field_rejected(self, registry):
        with pytest.raises(UnknownFieldError):
            DataStore(registry, {"height": "180cm"})

    def test_duplicate_field_rejected(self):
        """Two keys naming the same field should raise error."""
        with pytest.raises(ValueError, match="Duplicate value"):
            DataStore(PERSONAL_DATA_REGISTRY, {"name": "Riley", PersonalData.NAME: "R"})

    def test_non_opaque_value_rejected(self, registry):
        with pytest.raises(InvalidValueError) as exc_info:
            DataStore(registry, {"age": 30})
        assert exc_info.value.field == "age"
        assert exc_info.value.value_type is int

    def test_none_value_rejected(self, registry):
        with pytest.raises(InvalidValueError):
            DataStore(registry, {"age": None})

    def test_bytes_value_accepted(self, registry):
        store = DataStore(registry, {"ssn": b"\x00\xffcipher"})
        assert store["ssn"] == b"\x00\xffcipher"

    def test_source_mapping_not_retained(self, registry):
        source = {"name": "Riley"}
        store = DataStore(registry, source)
        source["age"] = "30"
        assert "age" not in store


class TestDataStoreAccess:
    """Read-only mapping behaviour."""

    def test_iterates_in_ordinal_order(self, store):
        assert [f.name for f in store] == ["name", "age", "ssn"]
        assert [f.ordinal for f, _ in store.items()] == [0, 1, 2]

    def test_absent_field(self, registry):
        store = DataStore(registry, {"name": "Riley"})
        assert "age" not in store
        assert store.get("age") is None
        with pytest.raises(KeyError):
            store["age"]

    def test_unknown_key_lookup(self, store):
        assert "height" not in store
        assert store.get("height", "x") == "x"

    def test_repr_hides_payloads(self, store):
        assert "Riley" not in repr(store)

    def test_equal_stores_hash_equal(self, registry):
        a = DataStore(registry, {"name": "Riley", "age": "30"})
        b = DataStore(registry, {"age": "30", "name": "Riley"})
        assert a == b
        assert hash(a) == hash(b)

    def test_no_item_assignment(self, store):
        with pytest.raises(TypeError):
            store["name"] = "Other"


class TestDataStoreSerialization:
    """Serialization for persistence collaborators."""

    def test_to_dict_ordered(self, store):
        data = store.to_dict()
        assert data["schema"] == "demo"
        assert [e["field"] for e in data["entries"]] == ["name", "age", "ssn"]
        assert data["entries"][0] == {"field": "name", "ordinal": 0, "value": "Riley"}

    def test_bytes_hex_encoded(self, registry):
        store = DataStore(registry, {"ssn": b"\xab\xcd"})
        assert store.to_dict()["entries"][0]["value_hex"] == "abcd"

    def test_json_round_trip_unchanged(self, registry):
        store = DataStore(registry, {"name": "Riley", "ssn": b"\x01\x02"})
        restored = DataStore.from_json(registry, store.to_json())
        assert restored == store
        assert restored["ssn"] == b"\x01\x02"

    def test_json_is_deterministic(self, registry):
        a = DataStore(registry, {"name": "Riley", "age": "30"})
        b = DataStore(registry, {"age": "30", "name": "Riley"})
        assert a.to_json() == b.to_json()
        assert a.fingerprint() == b.fingerprint()

    def test_schema_mismatch_rejected(self, store):
        other = FieldRegistry(["name", "age", "ssn"], name="other")
        with pytest.raises(ValueError, match="Schema mismatch"):
            DataStore.from_dict(other, store.to_dict())

    def test_ordinal_mismatch_rejected(self, registry, store):
        data = json.loads(store.to_json())
        data["entries"][0]["ordinal"] = 2
        with pytest.raises(UnknownFieldError):
            DataStore.from_dict(registry, data)

    def test_duplicate_entry_rejected(self, registry, store):
        data = store.to_dict()
        data["entries"].append(dict(data["entries"][0]))
        with pytest.raises(ValueError, match="Duplicate value"):
            DataStore.from_dict(registry, data)
