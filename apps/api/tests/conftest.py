"""
Shared fixtures: a mocked database session, an HTTP client bound to it and
ready-made form documents.
"""

from collections.abc import AsyncGenerator
from datetime import UTC, date, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from academy_api.core.database import get_db
from academy_api.main import app
from academy_api.modules.forms.models import (
    EmergencyContact,
    HealthForm,
    PictureAuthorization,
    StudentRegistration,
    TransferRecords,
    TuitionContract,
)

ENROLLMENT_ID = "ENR-001"


@pytest.fixture
def mock_db():
    """Create a mock database session."""
    db = AsyncMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    db.refresh = AsyncMock()
    db.get = AsyncMock()
    db.execute = AsyncMock()
    db.add = MagicMock()
    return db


@pytest_asyncio.fixture
async def client(mock_db) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient for the app with the database session replaced by mock_db."""

    async def override_get_db():
        yield mock_db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def upload_settings(tmp_path):
    """Upload settings pointing at a temporary directory with a 1KB ceiling."""
    mock_settings = MagicMock()
    mock_settings.upload_dir = str(tmp_path)
    mock_settings.max_upload_size_bytes = 1024
    mock_settings.max_upload_size_mb = 5
    with patch("academy_api.core.uploads.settings", mock_settings):
        yield mock_settings


@pytest.fixture
def make_registration():
    """Factory for stored student registrations."""

    def _make(enrollment_id: str = ENROLLMENT_ID, minutes_ago: int = 0, **overrides):
        values = {
            "id": uuid4(),
            "enrollment_id": enrollment_id,
            "submitted_at": datetime.now(UTC) - timedelta(minutes=minutes_ago),
            "first_name": "Amina",
            "last_name": "Yusuf",
            "gender": "Female",
            "date_of_birth": date(2015, 3, 14),
            "grade_level": "4",
            "address_line1": "12 Cedar Lane",
            "city": "Springfield",
            "state": "IL",
            "zip_code": "62704",
            "father_first_name": "Omar",
            "father_last_name": "Yusuf",
            "father_email": "omar@example.com",
            "siblings": [],
        }
        values.update(overrides)
        return StudentRegistration(**values)

    return _make


@pytest.fixture
def registration(make_registration):
    return make_registration()


@pytest.fixture
def health_form():
    return HealthForm(
        id=uuid4(),
        enrollment_id=ENROLLMENT_ID,
        submitted_at=datetime.now(UTC),
        insurance_company="Blue Shield",
        physician_name="Dr. Patel",
        physician_number="555-0101",
        has_disabilities="No",
        medical_conditions={"asthma": True},
        past_diseases={"chickenpox": True},
        takes_regular_medication="No",
        has_allergies="Yes",
        allergies_list="Peanuts",
        health_form_signature="Omar Yusuf",
    )


@pytest.fixture
def emergency_contact():
    return EmergencyContact(
        id=uuid4(),
        enrollment_id=ENROLLMENT_ID,
        submitted_at=datetime.now(UTC),
        emergency_contact1_name="Leila Yusuf",
        emergency_contact1_phone="555-0102",
        emergency_contact1_relationship="Aunt",
        emergency_contact2_name="Karim Yusuf",
        emergency_contact2_phone="555-0103",
        emergency_contact2_relationship="Uncle",
        emergency_form_signature="Omar Yusuf",
    )


@pytest.fixture
def picture_authorization():
    return PictureAuthorization(
        id=uuid4(),
        enrollment_id=ENROLLMENT_ID,
        submitted_at=datetime.now(UTC),
        picture_auth_signature="Omar Yusuf",
        discipline_acknowledgment="Agreed",
        signer_role="Parent",
        discipline_form_signature="Omar Yusuf",
    )


@pytest.fixture
def transfer_records():
    return TransferRecords(
        id=uuid4(),
        enrollment_id=ENROLLMENT_ID,
        submitted_at=datetime.now(UTC),
        first_name="Amina",
        last_name="Yusuf",
        date_of_birth=date(2015, 3, 14),
        grade="4",
        previous_school_name="Lincoln Elementary",
        previous_school_address="400 Oak Street",
        previous_school_city="Springfield",
        previous_school_state="IL",
        previous_school_zip="62701",
        previous_school_phone="555-0104",
        parent_guardian_name="Omar Yusuf",
        parent_guardian_phone="555-0105",
        transfer_form_signature="Omar Yusuf",
    )


@pytest.fixture
def tuition_contract():
    return TuitionContract(
        id=uuid4(),
        enrollment_id=ENROLLMENT_ID,
        submitted_at=datetime.now(UTC),
        guardian_first_name="Omar",
        guardian_last_name="Yusuf",
        guardian_phone="555-0105",
        guardian_email="omar@example.com",
        guardian_address_line1="12 Cedar Lane",
        guardian_city="Springfield",
        guardian_state="IL",
        guardian_zip_code="62704",
        tuition_acknowledgment="Agreed",
        textbook_fee_acknowledgment="Agreed",
        application_fee_acknowledgment="Agreed",
        payment_option1=True,
        payment_option2=False,
        payment_option3=False,
        tuition_contract_signature="Omar Yusuf",
    )


@pytest.fixture
def related_forms(health_form, emergency_contact, picture_authorization, transfer_records, tuition_contract):
    """The five non-registration forms of one enrollment, keyed by ORM model."""
    return {
        HealthForm: health_form,
        EmergencyContact: emergency_contact,
        PictureAuthorization: picture_authorization,
        TransferRecords: transfer_records,
        TuitionContract: tuition_contract,
    }
