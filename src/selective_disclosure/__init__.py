"""
Selective Disclosure: release only the personal-data fields a request authorizes.

Given a closed schema of fields, a subject's data store and a per-request
disclosure mask, the engine returns each stored field as either
``Disclosed(value)`` or ``Withheld``. Nothing outside the mask leaks and
nothing present is silently dropped.
"""

from .errors import (
    DisclosureError,
    UnknownFieldError,
    MaskLengthMismatchError,
    InvalidValueError,
)

from .fields import (
    PersonalData,
    FieldId,
    FieldRegistry,
    PERSONAL_DATA_REGISTRY,
)

from .mask import DisclosureMask

from .store import DataStore

from .disclosure import (
    Disclosed,
    Withheld,
    WITHHELD,
    DisclosureResult,
    disclose,
)

from .profiles import (
    DisclosureProfile,
    PROFILE_FIELD_MAPPING,
    ProfiledDisclosure,
    build_profile_mask,
)

from .ledger import (
    StoreSnapshot,
    SubjectLedger,
)

from .serialize import (
    canonical_json,
    fingerprint,
    fingerprints_match,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "DisclosureError",
    "UnknownFieldError",
    "MaskLengthMismatchError",
    "InvalidValueError",
    # Registry
    "PersonalData",
    "FieldId",
    "FieldRegistry",
    "PERSONAL_DATA_REGISTRY",
    # Mask / store
    "DisclosureMask",
    "DataStore",
    # Filter
    "Disclosed",
    "Withheld",
    "WITHHELD",
    "DisclosureResult",
    "disclose",
    # Profiles
    "DisclosureProfile",
    "PROFILE_FIELD_MAPPING",
    "ProfiledDisclosure",
    "build_profile_mask",
    # Ledger
    "StoreSnapshot",
    "SubjectLedger",
    # Serialization
    "canonical_json",
    "fingerprint",
    "fingerprints_match",
    # Meta
    "__version__",
]
