"""
Fixtures for re-enrollment tests.
"""

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from academy_api.modules.renroll.models import RenrollForm
from academy_api.modules.renroll.schemas import RenrollFormSubmit


@pytest.fixture
def step0_data():
    """Wire fields that satisfy step 0."""
    return {
        "childFirstName": "Amina",
        "childLastName": "Yusuf",
        "gender": "female",
        "dateOfBirth": "2015-03-14",
        "ethnicity": "Prefer not to say",
        "gradeLevel": "5",
        "hasAdditionalChildren": "",
        "address1": "12 Cedar Lane",
        "city": "Springfield",
        "state": "IL",
        "zipCode": "62704",
        "schoolDistrict": "District 186",
        "fatherFirstName": "Omar",
        "fatherLastName": "Yusuf",
        "fatherPhone": "555-0105",
        "fatherEmail": "omar@example.com",
        "motherFirstName": "Sara",
        "motherLastName": "Yusuf",
        "motherPhone": "555-0106",
        "motherEmail": "sara@example.com",
    }


@pytest.fixture
def step1_data():
    """Wire fields that satisfy step 1."""
    return {
        "emergency1Name": "Leila Yusuf",
        "emergency1Phone": "555-0102",
        "emergency1Relationship": "Aunt",
        "emergency2Name": "Karim Yusuf",
        "emergency2Phone": "555-0103",
        "emergency2Relationship": "Uncle",
        "authorizedPerson1": "Leila Yusuf",
        "authorizedPerson1Phone": "555-0102",
        "authorizedPerson1Relationship": "Aunt",
        "hospitalPreference": "Memorial",
        "parentSignature": "Omar Yusuf",
    }


@pytest.fixture
def step2_data():
    """Wire fields that satisfy step 2."""
    return {
        "guardianName": "Omar Yusuf",
        "homePhone": "555-0100",
        "guardianEmail": "omar@example.com",
        "acknowledgeTuition": "yes",
        "acknowledgeTextbookFee": "yes",
        "paymentOption": "monthly",
        "tuitionSignature": "Omar Yusuf",
    }


@pytest.fixture
def complete_form_data(step0_data, step1_data, step2_data):
    return {**step0_data, **step1_data, **step2_data}


@pytest.fixture
def make_draft():
    """Factory for stored drafts built from wire fields."""

    def _make(form_data: dict, current_step: int = 0, is_completed: bool = False) -> RenrollForm:
        values = RenrollFormSubmit.model_validate(form_data).model_dump(
            exclude_unset=True, exclude={"current_step", "draft_id"}
        )
        return RenrollForm(
            id=uuid4(),
            submitted_at=datetime.now(UTC),
            current_step=current_step,
            is_completed=is_completed,
            **values,
        )

    return _make


@pytest.fixture
def fake_renroll_repository():
    """
    Behaviour for the patched repository's create and update: apply the
    values to an in-memory RenrollForm the way the real queries would.
    """

    async def _create(db, values, *, current_step, is_completed):
        return RenrollForm(
            id=uuid4(),
            submitted_at=datetime.now(UTC),
            current_step=current_step,
            is_completed=is_completed,
            **values,
        )

    async def _update(db, form, values, *, current_step, is_completed):
        for field, value in values.items():
            setattr(form, field, value)
        form.current_step = current_step
        form.is_completed = is_completed
        return form

    return {"create": _create, "update": _update}
