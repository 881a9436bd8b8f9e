"""
Enrollment Helpers

Pure functions used by the enrollment service.
"""

import uuid

from academy_api.modules.enrollments.schemas import EnrollmentStatus

TOTAL_FORMS = 6
UNDER_REVIEW_THRESHOLD = 4


def derive_enrollment_status(forms_present: int) -> EnrollmentStatus:
    """
    Status of an enrollment from the number of its forms on file.

    The student registration always counts, so forms_present is 1..6.
    """
    if forms_present >= TOTAL_FORMS:
        return EnrollmentStatus.APPROVED
    if forms_present >= UNDER_REVIEW_THRESHOLD:
        return EnrollmentStatus.UNDER_REVIEW
    return EnrollmentStatus.PENDING


def split_full_name(full_name: str) -> tuple[str, str]:
    """
    Split a full name at single spaces: first token, then the rest.

    "Amina" -> ("Amina", ""); "Amina Yusuf Noor" -> ("Amina", "Yusuf Noor")
    """
    parts = full_name.split(" ")
    return parts[0], " ".join(parts[1:])


def generate_enrollment_id() -> str:
    """New enrollment key, e.g. ENR-3F9A0C1B22D4."""
    return f"ENR-{uuid.uuid4().hex[:12].upper()}"
