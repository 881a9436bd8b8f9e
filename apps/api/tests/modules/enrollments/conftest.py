"""
Fixtures for enrollment tests.
"""

from datetime import UTC, date, datetime
from uuid import uuid4

import pytest

from academy_api.modules.enrollments.models import NewEnrollment, NewEnrollmentStatus
from academy_api.modules.enrollments.schemas import EnrollmentSubmission, NewEnrollmentCreate
from academy_api.modules.shared import YesNo


@pytest.fixture
def enrollment_submission():
    """A combined enrollment submission as parsed from multipart fields."""
    return EnrollmentSubmission.model_validate(
        {
            "parentFullName": "Omar Yusuf",
            "relationshipToStudent": "Father",
            "primaryPhone": "555-0105",
            "email": "Omar@Example.com",
            "streetAddress": "12 Cedar Lane",
            "city": "Springfield",
            "state": "IL",
            "zipCode": "62704",
            "studentFullName": "Amina Yusuf",
            "gender": "Female",
            "dateOfBirth": "2015-03-14",
            "classGrade": "4",
            "previousSchoolName": "Lincoln Elementary",
            "agreementSignature": "Omar Yusuf",
        }
    )


@pytest.fixture
def new_enrollment_fields():
    """Multipart fields of a new enrollment, as sent by the client."""
    return {
        "enrollmentId": "NE-2026-001",
        "parentFullName": "Sara Malik",
        "relationshipToStudent": "Mother",
        "maritalStatus": "Married",
        "primaryPhone": "555-0201",
        "email": "Sara.Malik@Example.com",
        "streetAddress": "8 Birch Road",
        "city": "Springfield",
        "state": "IL",
        "zipCode": "62704",
        "studentFullName": "Zain Malik",
        "gender": "Male",
        "dateOfBirth": "2016-09-02",
        "birthCertificateNIC": "BC-778812",
        "totalSiblings": "",
        "orphanStatus": "",
        "oscStatus": "No",
        "admissionDate": "",
        "classGrade": "3",
        "previousSchoolID": "LS-44",
        "studentEmail": "Zain@Example.com",
        "agreementSignature": "Sara Malik",
    }


@pytest.fixture
def new_enrollment_create(new_enrollment_fields):
    return NewEnrollmentCreate.model_validate(new_enrollment_fields)


@pytest.fixture
def new_enrollment_model():
    """A stored new enrollment."""
    return NewEnrollment(
        id=uuid4(),
        enrollment_id="NE-2026-001",
        parent_full_name="Sara Malik",
        relationship_to_student="Mother",
        marital_status="Married",
        primary_phone="555-0201",
        email="sara.malik@example.com",
        street_address="8 Birch Road",
        city="Springfield",
        state="IL",
        zip_code="62704",
        student_full_name="Zain Malik",
        gender="Male",
        date_of_birth=date(2016, 9, 2),
        birth_certificate_nic="BC-778812",
        total_siblings=0,
        orphan_status=YesNo.NO,
        osc_status=YesNo.NO,
        class_grade="3",
        previous_school_id="LS-44",
        student_email="zain@example.com",
        agreement_signature="Sara Malik",
        submitted_at=datetime.now(UTC),
        status=NewEnrollmentStatus.PENDING,
    )
