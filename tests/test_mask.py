"""
tests/test_mask.py
Unit tests for disclosure masks.
"""
import pytest
from selective_disclosure.errors import MaskLengthMismatchError, UnknownFieldError
from selective_disclosure.fields import FieldRegistry, PersonalData, PERSONAL_DATA_REGISTRY
from selective_disclosure.mask import DisclosureMask


@pytest.fixture
def registry():
    return FieldRegistry(["name", "age", "ssn"], name="demo")


class TestMaskConstruction:
    """Tests for building masks."""

    def test_from_booleans(self):
        mask = DisclosureMask([True, False, True])
        assert list(mask) == [True, False, True]
        assert len(mask) == 3

    def test_non_bool_rejected(self):
        """Truthy values are not coerced."""
        with pytest.raises(TypeError, match="Mask entry 1 must be bool"):
            DisclosureMask([True, 1, False])

    def test_none_and_all(self, registry):
        assert list(DisclosureMask.none(registry)) == [False, False, False]
        assert list(DisclosureMask.all(registry)) == [True, True, True]

    def test_for_fields(self, registry):
        mask = DisclosureMask.for_fields(registry, ["name", "ssn"])
        assert list(mask) == [True, False, True]

    def test_for_fields_unknown(self, registry):
        with pytest.raises(UnknownFieldError):
            DisclosureMask.for_fields(registry, ["name", "height"])

    def test_for_fields_with_enum(self):
        mask = DisclosureMask.for_fields(
            PERSONAL_DATA_REGISTRY, [PersonalData.NAME, PersonalData.MEDICATIONS]
        )
        assert mask.authorized_ordinals() == (0, 26)
        assert len(mask) == 42

    def test_immutable_copy_of_input(self):
        """Mutating the source list does not affect the mask."""
        values = [True, False]
        mask = DisclosureMask(values)
        values[1] = True
        assert list(mask) == [True, False]


class TestMaskAccess:
    """Tests for mask lookups and validation."""

    def test_allows(self):
        mask = DisclosureMask([True, False])
        assert mask.allows(0) is True
        assert mask[1] is False

    def test_out_of_range(self):
        """Out-of-range indices are a contract violation."""
        mask = DisclosureMask([True, False])
        with pytest.raises(UnknownFieldError):
            mask.allows(2)
        with pytest.raises(UnknownFieldError):
            mask[-1]

    def test_validate_length(self, registry):
        DisclosureMask([True, True, False]).validate(registry)
        with pytest.raises(MaskLengthMismatchError) as exc_info:
            DisclosureMask([True, True]).validate(registry)
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_equality(self):
        assert DisclosureMask([True, False]) == DisclosureMask([True, False])
        assert DisclosureMask([True, False]) != DisclosureMask([False, False])
