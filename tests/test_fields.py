"""
tests/test_fields.py
Unit tests for the field registry.
"""
import pytest
from selective_disclosure.errors import UnknownFieldError
from selective_disclosure.fields import (
    FieldId,
    FieldRegistry,
    PersonalData,
    PERSONAL_DATA_REGISTRY,
)


@pytest.fixture
def registry():
    """Three-field demo schema."""
    return FieldRegistry(["name", "age", "ssn"], name="demo")


class TestPersonalDataSchema:
    """Tests for the built-in personal-data schema."""

    def test_cardinality(self):
        """Schema should define 42 fields."""
        assert PERSONAL_DATA_REGISTRY.cardinality() == 42
        assert len(PersonalData) == 42

    def test_ordinals_follow_definition_order(self):
        """Ordinals should be stable definition positions."""
        assert PERSONAL_DATA_REGISTRY.ordinal(PersonalData.NAME) == 0
        assert PERSONAL_DATA_REGISTRY.ordinal(PersonalData.AGE) == 2
        assert PERSONAL_DATA_REGISTRY.ordinal("healthRecords") == 18
        assert PERSONAL_DATA_REGISTRY.ordinal(PersonalData.PROFILE_PICTURE) == 41

    def test_registry_named_after_enum(self):
        """Registry built from an enum takes the enum's name."""
        assert PERSONAL_DATA_REGISTRY.name == "PersonalData"


class TestFieldRegistryConstruction:
    """Construction-time validation."""

    def test_empty_rejected(self):
        """A schema needs at least one field."""
        with pytest.raises(ValueError, match="at least one field"):
            FieldRegistry([])

    def test_duplicate_rejected(self):
        """Duplicate names should raise error."""
        with pytest.raises(ValueError, match="Duplicate field name"):
            FieldRegistry(["name", "age", "name"])

    def test_blank_name_rejected(self):
        """Empty names should raise error."""
        with pytest.raises(ValueError, match="Invalid field name"):
            FieldRegistry(["name", ""])

    def test_bare_string_rejected(self):
        """A single string is not a sequence of names."""
        with pytest.raises(TypeError):
            FieldRegistry("name")


class TestFieldLookup:
    """Bidirectional lookups."""

    def test_ordinal_by_name(self, registry):
        assert registry.ordinal("name") == 0
        assert registry.ordinal("ssn") == 2

    def test_field_by_ordinal(self, registry):
        assert registry.field(1) == FieldId(name="age", ordinal=1)

    def test_unknown_name(self, registry):
        """Unknown names fail with UnknownFieldError."""
        with pytest.raises(UnknownFieldError, match="height") as exc_info:
            registry.ordinal("height")
        assert exc_info.value.field == "height"
        assert exc_info.value.schema == "demo"

    def test_out_of_range_ordinal(self, registry):
        """Out-of-range ordinals fail instead of wrapping."""
        with pytest.raises(UnknownFieldError):
            registry.field(3)
        with pytest.raises(UnknownFieldError):
            registry.field(-1)

    def test_foreign_field_id(self, registry):
        """A FieldId from another schema is not accepted."""
        with pytest.raises(UnknownFieldError):
            registry.field(FieldId(name="email", ordinal=1))

    def test_enum_from_other_schema(self, registry):
        """Enum members resolve by value."""
        assert registry.ordinal(PersonalData.NAME) == 0
        assert registry.ordinal(PersonalData.AGE) == 1
        with pytest.raises(UnknownFieldError):
            registry.ordinal(PersonalData.EMAIL)

    def test_unsupported_key_type(self, registry):
        with pytest.raises(TypeError):
            registry.field(1.5)
        with pytest.raises(TypeError):
            registry.field(True)

    def test_unknown_field_is_value_error(self, registry):
        """Errors stay catchable as ValueError."""
        with pytest.raises(ValueError):
            registry.ordinal("nope")


class TestRegistryProtocol:
    """Container behaviour."""

    def test_contains(self, registry):
        assert "age" in registry
        assert FieldId("age", 1) in registry
        assert FieldId("age", 2) not in registry
        assert "height" not in registry
        assert 7 not in registry

    def test_iteration_in_ordinal_order(self, registry):
        assert [f.ordinal for f in registry] == [0, 1, 2]
        assert registry.names() == ("name", "age", "ssn")
        assert len(registry) == 3

    def test_equality(self, registry):
        assert registry == FieldRegistry(["name", "age", "ssn"], name="demo")
        assert registry != FieldRegistry(["name", "ssn", "age"], name="demo")
        assert registry != FieldRegistry(["name", "age", "ssn"], name="other")
