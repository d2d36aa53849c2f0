"""
examples/complete_workflow.py
End-to-end example: Upload → Request → Disclose → Serialize
"""
import os
import sys

# Add src to path for development
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from selective_disclosure import (
    DataStore,
    DisclosureMask,
    DisclosureProfile,
    PERSONAL_DATA_REGISTRY,
    PersonalData,
    ProfiledDisclosure,
    SubjectLedger,
)
from selective_disclosure.observability import setup_logging

setup_logging(level="INFO", format="console")

# ============================================================
# STEP 1: DATA SOURCE - Riley's record (fictional)
# ============================================================

riley_data = {
    PersonalData.NAME: "Riley",
    PersonalData.SURNAME: "Smith",
    PersonalData.AGE: "30",
    PersonalData.EMAIL: "riley.smith@test.com",
    PersonalData.PHONE: "123-456-7890",
    PersonalData.ADDRESS: "123 Main St, Anytown, USA",
    PersonalData.GENDER: "Non-binary",
    PersonalData.MARITAL_STATUS: "Single",
    PersonalData.NICKNAME: "Riley",
    PersonalData.DATE_OF_BIRTH: "1993-01-01",
    PersonalData.PLACE_OF_BIRTH: "Anytown, USA",
    PersonalData.SOCIAL_SECURITY_NUMBER: "123-45-6789",
    PersonalData.BANK_ACCOUNT_NUMBER: "987654321",
    PersonalData.CREDIT_CARD_NUMBER: "4111-1111-1111-1111",
    PersonalData.PASSPORT_NUMBER: "X123456789",
    PersonalData.DRIVER_LICENSE_NUMBER: "D123456789",
    PersonalData.HEALTH_INSURANCE_NUMBER: "H123456789",
    PersonalData.TAX_IDENTIFICATION_NUMBER: "T123456789",
    PersonalData.HEALTH_RECORDS: "Record1, Record2",
    PersonalData.MEDICAL_CONDITIONS: "Condition1, Condition2",
    PersonalData.HEIGHT: "180cm",
    PersonalData.WEIGHT: "70kg",
    PersonalData.HAIR_COLOR: "Blonde",
    PersonalData.EYE_COLOR: "Green",
    PersonalData.FAMILY_MEDICAL_HISTORY: "History1, History2",
    PersonalData.ALLERGIES: "Allergy1, Allergy2",
    PersonalData.MEDICATIONS: "Medication1, Medication2",
    PersonalData.EMPLOYMENT_HISTORY: "Job1, Job2",
    PersonalData.EMPLOYMENT_STATUS: "Employed",
    PersonalData.SALARY: "100000",
    PersonalData.JOB_TITLE: "Software Engineer",
    PersonalData.SKILLS: "Python, SQL, Rust",
    PersonalData.LANGUAGES_SPOKEN: "English, Spanish",
    PersonalData.HOBBIES: "Reading, Hiking, Dancing, Cooking",
    PersonalData.INTERESTS: "Technology, Art, Music, Traveling",
    PersonalData.REFERENCES: "Reference1, Reference2",
    PersonalData.EDUCATION_HISTORY: "Degree1, Degree2",
    PersonalData.CRIMINAL_HISTORY: "None",
    PersonalData.SOCIAL_MEDIA_PROFILES: "Profile1, Profile2",
    PersonalData.RESUME: "Resume content",
    PersonalData.COVER_LETTER: "Cover letter content",
    PersonalData.PROFILE_PICTURE: "profile-pic.jpg",
}

# ============================================================
# STEP 2: Upload a snapshot to an owned ledger
# ============================================================

print("=" * 60)
print("SELECTIVE DISCLOSURE")
print("=" * 60)

ledger = SubjectLedger()
snapshot = ledger.upload_from(
    "riley", lambda: DataStore(PERSONAL_DATA_REGISTRY, riley_data)
)

print(f"✓ Snapshot v{snapshot.version} with {len(snapshot.store)} fields")
print(f"✓ Store fingerprint: {snapshot.store.fingerprint()[:16]}...")

# ============================================================
# STEP 3: Answer each preset request
# ============================================================

profiled = ProfiledDisclosure(ledger.snapshot("riley").store)

for profile in DisclosureProfile:
    result = profiled.disclose(profile)
    print()
    print("-" * 60)
    print(f"{profile.value.upper()} ({len(result.disclosed())} disclosed, "
          f"{len(result.withheld())} withheld)")
    print("-" * 60)
    for name, value in result.disclosed().items():
        print(f"  {name}: {value}")

# ============================================================
# STEP 4: Ad-hoc request and serialization
# ============================================================

mask = DisclosureMask.for_fields(
    PERSONAL_DATA_REGISTRY, [PersonalData.NAME, PersonalData.ALLERGIES]
)
result = ledger.disclose("riley", mask)

print()
print("✓ Ad-hoc result serialized for an attestation layer:")
print(f"  - Entries: {len(result)}")
print(f"  - Fingerprint: {result.fingerprint()[:16]}...")

print()
print("=" * 60)
print("COMPLETE WORKFLOW SUCCESSFUL")
print("=" * 60)
