"""
selective_disclosure/fields.py
Closed registry of disclosable personal-data fields.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Sequence, Tuple, Type

from .errors import UnknownFieldError


class PersonalData(Enum):
    """Disclosable personal-data fields, in ordinal order."""
    NAME = "name"
    SURNAME = "surname"
    AGE = "age"
    EMAIL = "email"
    PHONE = "phone"
    ADDRESS = "address"
    GENDER = "gender"
    MARITAL_STATUS = "maritalStatus"
    NICKNAME = "nickname"
    DATE_OF_BIRTH = "dateOfBirth"
    PLACE_OF_BIRTH = "placeOfBirth"
    SOCIAL_SECURITY_NUMBER = "socialSecurityNumber"
    BANK_ACCOUNT_NUMBER = "bankAccountNumber"
    CREDIT_CARD_NUMBER = "creditCardNumber"
    PASSPORT_NUMBER = "passportNumber"
    DRIVER_LICENSE_NUMBER = "driverLicenseNumber"
    HEALTH_INSURANCE_NUMBER = "healthInsuranceNumber"
    TAX_IDENTIFICATION_NUMBER = "taxIdentificationNumber"
    # Medical
    HEALTH_RECORDS = "healthRecords"
    MEDICAL_CONDITIONS = "medicalConditions"
    HEIGHT = "height"
    WEIGHT = "weight"
    HAIR_COLOR = "hairColor"
    EYE_COLOR = "eyeColor"
    FAMILY_MEDICAL_HISTORY = "familyMedicalHistory"
    ALLERGIES = "allergies"
    MEDICATIONS = "medications"
    # Employment
    EMPLOYMENT_HISTORY = "employmentHistory"
    EMPLOYMENT_STATUS = "employmentStatus"
    SALARY = "salary"
    JOB_TITLE = "jobTitle"
    SKILLS = "skills"
    LANGUAGES_SPOKEN = "languagesSpoken"
    HOBBIES = "hobbies"
    INTERESTS = "interests"
    REFERENCES = "references"
    EDUCATION_HISTORY = "educationHistory"
    CRIMINAL_HISTORY = "criminalHistory"
    SOCIAL_MEDIA_PROFILES = "socialMediaProfiles"
    RESUME = "resume"
    COVER_LETTER = "coverLetter"
    PROFILE_PICTURE = "profilePicture"


@dataclass(frozen=True)
class FieldId:
    """A field identifier issued by a FieldRegistry."""
    name: str
    ordinal: int


class FieldRegistry:
    """Immutable mapping between field names and dense ordinals.

    The registry is the universe every mask and data store is indexed
    against. Lookups go both ways and fail fast on anything outside
    the schema; ordinals never wrap.

    Example:
        registry = FieldRegistry(["name", "age", "ssn"], name="demo")
        registry.ordinal("age")      # 1
        registry.field(2).name       # "ssn"
        registry.cardinality()       # 3
    """

    def __init__(self, fields: Sequence[str], name: str = "custom"):
        if isinstance(fields, str):
            raise TypeError("fields must be a sequence of names, not a string")
        if not fields:
            raise ValueError("Registry must define at least one field")

        by_name: Dict[str, FieldId] = {}
        for ordinal, field_name in enumerate(fields):
            if not isinstance(field_name, str) or not field_name:
                raise ValueError(f"Invalid field name at ordinal {ordinal}: {field_name!r}")
            if field_name in by_name:
                raise ValueError(f"Duplicate field name: {field_name}")
            by_name[field_name] = FieldId(name=field_name, ordinal=ordinal)

        self._name = name
        self._by_name = by_name
        self._fields: Tuple[FieldId, ...] = tuple(by_name.values())

    @classmethod
    def from_enum(cls, enum_cls: Type[Enum], name: Optional[str] = None) -> 'FieldRegistry':
        """Build a registry from an Enum whose values are field names."""
        return cls([member.value for member in enum_cls], name=name or enum_cls.__name__)

    @property
    def name(self) -> str:
        return self._name

    @property
    def fields(self) -> Tuple[FieldId, ...]:
        return self._fields

    def names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self._fields)

    def cardinality(self) -> int:
        """Number of fields in the schema."""
        return len(self._fields)

    def field(self, key: Any) -> FieldId:
        """Resolve a name, ordinal, FieldId or Enum member to a FieldId.

        Raises:
            UnknownFieldError: If the key is not part of this schema
        """
        if isinstance(key, FieldId):
            if key not in self:
                raise UnknownFieldError(key, self._name)
            return key
        if isinstance(key, Enum):
            key = key.value
        if isinstance(key, bool):
            raise TypeError("Field keys must not be booleans")
        if isinstance(key, int):
            if 0 <= key < len(self._fields):
                return self._fields[key]
            raise UnknownFieldError(key, self._name)
        if isinstance(key, str):
            try:
                return self._by_name[key]
            except KeyError:
                raise UnknownFieldError(key, self._name) from None
        raise TypeError(f"Unsupported field key type: {type(key).__name__}")

    def ordinal(self, key: Any) -> int:
        """Ordinal position of a field.

        Raises:
            UnknownFieldError: If the field is not part of this schema
        """
        return self.field(key).ordinal

    def __contains__(self, key: Any) -> bool:
        if isinstance(key, FieldId):
            return (
                0 <= key.ordinal < len(self._fields)
                and self._fields[key.ordinal] == key
            )
        try:
            self.field(key)
        except (UnknownFieldError, TypeError):
            return False
        return True

    def __iter__(self) -> Iterator[FieldId]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldRegistry):
            return NotImplemented
        return self._name == other._name and self._fields == other._fields

    def __hash__(self) -> int:
        return hash((self._name, self._fields))

    def __repr__(self) -> str:
        return f"FieldRegistry(name={self._name!r}, cardinality={len(self._fields)})"


PERSONAL_DATA_REGISTRY = FieldRegistry.from_enum(PersonalData)
