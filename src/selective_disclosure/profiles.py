"""
selective_disclosure/profiles.py
Preset disclosure requests for common forms.
"""
from enum import Enum
from typing import Dict, FrozenSet, Hashable, Iterable, Mapping, Optional

from .disclosure import DisclosureResult, disclose
from .fields import PERSONAL_DATA_REGISTRY, FieldRegistry, PersonalData
from .mask import DisclosureMask
from .store import DataStore


class DisclosureProfile(Enum):
    """Kinds of request a subject typically answers."""
    DOCTOR_OFFICE = "doctor_office"
    JOB_APPLICATION = "job_application"
    RENTAL_APPLICATION = "rental_application"
    SCHOOL_ENROLLMENT = "school_enrollment"
    ID_RENEWAL = "id_renewal"


def _names(*fields: PersonalData) -> FrozenSet[str]:
    return frozenset(f.value for f in fields)


_CONTACT = (
    PersonalData.NAME,
    PersonalData.SURNAME,
    PersonalData.EMAIL,
    PersonalData.PHONE,
    PersonalData.ADDRESS,
)

PROFILE_FIELD_MAPPING: Dict[DisclosureProfile, FrozenSet[str]] = {
    DisclosureProfile.DOCTOR_OFFICE: _names(
        *_CONTACT,
        PersonalData.AGE,
        PersonalData.HEALTH_RECORDS,
        PersonalData.FAMILY_MEDICAL_HISTORY,
        PersonalData.MEDICATIONS,
        PersonalData.ALLERGIES,
    ),
    DisclosureProfile.JOB_APPLICATION: _names(
        *_CONTACT,
        PersonalData.JOB_TITLE,
        PersonalData.SKILLS,
        PersonalData.LANGUAGES_SPOKEN,
        PersonalData.REFERENCES,
        PersonalData.EDUCATION_HISTORY,
        PersonalData.RESUME,
    ),
    DisclosureProfile.RENTAL_APPLICATION: _names(
        *_CONTACT,
        PersonalData.EMPLOYMENT_STATUS,
        PersonalData.SALARY,
        PersonalData.REFERENCES,
        PersonalData.PROFILE_PICTURE,
    ),
    DisclosureProfile.SCHOOL_ENROLLMENT: _names(
        *_CONTACT,
        PersonalData.AGE,
        PersonalData.DATE_OF_BIRTH,
        PersonalData.EDUCATION_HISTORY,
        PersonalData.PROFILE_PICTURE,
    ),
    DisclosureProfile.ID_RENEWAL: _names(
        *_CONTACT,
        PersonalData.AGE,
        PersonalData.DATE_OF_BIRTH,
        PersonalData.SOCIAL_SECURITY_NUMBER,
        PersonalData.PASSPORT_NUMBER,
        PersonalData.DRIVER_LICENSE_NUMBER,
    ),
}


def build_profile_mask(
    profile: Hashable,
    registry: FieldRegistry = PERSONAL_DATA_REGISTRY,
    mapping: Optional[Mapping[Hashable, Iterable[str]]] = None,
) -> DisclosureMask:
    """Build the mask for a preset profile.

    Args:
        profile: Profile key, a DisclosureProfile or a custom key
        registry: Schema the mask is built against
        mapping: Profile -> field names; defaults to PROFILE_FIELD_MAPPING

    Raises:
        ValueError: If the profile is not defined in the mapping
        UnknownFieldError: If the profile names a field outside the schema
    """
    mapping = PROFILE_FIELD_MAPPING if mapping is None else mapping
    if profile not in mapping:
        raise ValueError(f"Unknown disclosure profile: {profile!r}")
    return DisclosureMask.for_fields(registry, mapping[profile])


class ProfiledDisclosure:
    """Answers preset profile requests against one subject's store."""

    def __init__(
        self,
        store: DataStore,
        mapping: Optional[Mapping[Hashable, Iterable[str]]] = None,
    ):
        self.store = store
        self.mapping = PROFILE_FIELD_MAPPING if mapping is None else mapping

    def mask_for(self, profile: Hashable) -> DisclosureMask:
        return build_profile_mask(profile, self.store.registry, self.mapping)

    def disclose(self, profile: Hashable) -> DisclosureResult:
        """Run the profile's request against the store.

        Raises:
            ValueError: If the profile is not defined in the mapping
        """
        return disclose(self.mask_for(profile), self.store)
