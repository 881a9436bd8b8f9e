"""
Unit tests for the re-enrollment service layer.

These tests cover:
- Per-step validation before anything is stored
- Draft lookup by draftId and by father email + child name
- Merging a step into an existing draft
- Completion at the last step, and that completion sticks
- Dry-run validation, lookup and deletion
"""

from datetime import date
from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import OperationalError

from academy_api.core.exceptions import (
    RecordNotFoundError,
    StorageFailureError,
    ValidationFailedError,
)
from academy_api.modules.renroll.schemas import RenrollFormSubmit
from academy_api.modules.renroll.service import (
    delete_form,
    get_form,
    merged_form_data,
    submit_step,
    validate_step_request,
)

REPOSITORY = "academy_api.modules.renroll.service.repository"


def _body(form_data: dict, step: int, draft_id=None) -> dict:
    body = {**form_data, "currentStep": step}
    if draft_id is not None:
        body["draftId"] = str(draft_id)
    return body


class TestSubmitStepValidation:
    """A step that fails validation stores nothing."""

    @pytest.mark.asyncio
    async def test_missing_step_fields_are_rejected(self, mock_db, step0_data):
        del step0_data["childFirstName"]
        step0_data["motherEmail"] = " "

        with patch(REPOSITORY) as mock_repo:
            mock_repo.create = AsyncMock()
            mock_repo.find_draft = AsyncMock()

            with pytest.raises(ValidationFailedError) as exc_info:
                await submit_step(mock_db, _body(step0_data, 0))

        assert exc_info.value.errors == [
            "Child first name is required",
            "Mother email is required",
        ]
        assert exc_info.value.message == "Validation failed"
        mock_repo.find_draft.assert_not_awaited()
        mock_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_step_rules_run_before_field_types(self, mock_db, step2_data):
        """A wrongly cased acknowledgment reports the step's messages, in order."""
        step2_data["acknowledgeTuition"] = "Yes"
        step2_data["homePhone"] = ""

        with pytest.raises(ValidationFailedError) as exc_info:
            await submit_step(mock_db, _body(step2_data, 2))

        assert exc_info.value.errors == [
            "Home phone is required",
            "Tuition acknowledgment is required",
        ]

    @pytest.mark.asyncio
    async def test_invalid_field_type_after_step_passes(self, mock_db, step0_data):
        step0_data["gender"] = "unknown"

        with patch(REPOSITORY) as mock_repo:
            mock_repo.create = AsyncMock()

            with pytest.raises(ValidationFailedError) as exc_info:
                await submit_step(mock_db, _body(step0_data, 0))

        assert any(error.startswith("gender") for error in exc_info.value.errors)
        mock_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_out_of_range_step(self, mock_db, step0_data):
        with pytest.raises(ValidationFailedError) as exc_info:
            await submit_step(mock_db, _body(step0_data, 3))

        assert any(error.startswith("currentStep") for error in exc_info.value.errors)

    @pytest.mark.asyncio
    async def test_other_steps_acknowledgments_are_not_checked(
        self, mock_db, step0_data, fake_renroll_repository
    ):
        step0_data["acknowledgeTuition"] = "true"

        with patch(REPOSITORY) as mock_repo:
            mock_repo.find_draft = AsyncMock(return_value=None)
            mock_repo.create = AsyncMock(side_effect=fake_renroll_repository["create"])

            response, created = await submit_step(mock_db, _body(step0_data, 0))

        assert created is True
        assert response.form.acknowledge_tuition == "true"

    def test_step_defaults_to_zero(self, step0_data):
        assert RenrollFormSubmit.model_validate(step0_data).current_step == 0
        assert RenrollFormSubmit.model_validate({**step0_data, "currentStep": ""}).current_step == 0


class TestDateOfBirth:
    """Tests for the accepted date of birth formats."""

    @pytest.mark.parametrize(
        "value",
        ["2015-03-14", "03/14/2015", "03-14-2015", "2015/03/14", "2015-03-14T00:00:00"],
    )
    def test_accepted_formats(self, value):
        form = RenrollFormSubmit.model_validate({"dateOfBirth": value})
        assert form.date_of_birth == date(2015, 3, 14)

    def test_blank_is_none(self):
        assert RenrollFormSubmit.model_validate({"dateOfBirth": " "}).date_of_birth is None

    def test_unrecognized_date_is_rejected(self):
        with pytest.raises(ValidationError):
            RenrollFormSubmit.model_validate({"dateOfBirth": "next spring"})


class TestSubmitStepDrafts:
    """Tests for draft creation, lookup and merging."""

    @pytest.mark.asyncio
    async def test_first_step_creates_draft(self, mock_db, step0_data, fake_renroll_repository):
        with patch(REPOSITORY) as mock_repo:
            mock_repo.find_draft = AsyncMock(return_value=None)
            mock_repo.create = AsyncMock(side_effect=fake_renroll_repository["create"])

            response, created = await submit_step(mock_db, _body(step0_data, 0))

        assert created is True
        assert response.success is True
        assert response.message == "Step 1 saved successfully"
        assert response.can_proceed is True
        assert response.form.current_step == 0
        assert response.form.is_completed is False
        assert response.form.child_first_name == "Amina"

        mock_repo.find_draft.assert_awaited_once_with(
            mock_db, "omar@example.com", "Amina", "Yusuf"
        )
        assert mock_repo.create.call_args.kwargs == {"current_step": 0, "is_completed": False}

    @pytest.mark.asyncio
    async def test_resubmitting_step_updates_same_draft(
        self, mock_db, make_draft, step0_data, fake_renroll_repository
    ):
        """Same father email + child name without a draftId finds the existing draft."""
        draft = make_draft(step0_data)

        with patch(REPOSITORY) as mock_repo:
            mock_repo.find_draft = AsyncMock(return_value=draft)
            mock_repo.create = AsyncMock()
            mock_repo.update = AsyncMock(side_effect=fake_renroll_repository["update"])

            response, created = await submit_step(mock_db, _body(step0_data, 0))

        assert created is False
        assert response.form.id == draft.id
        mock_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_draft_id_is_not_found(self, mock_db, step1_data):
        with patch(REPOSITORY) as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=None)
            mock_repo.create = AsyncMock()

            with pytest.raises(RecordNotFoundError) as exc_info:
                await submit_step(mock_db, _body(step1_data, 1, draft_id=uuid4()))

        assert exc_info.value.message == "Renroll form not found"
        mock_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_draft_id_takes_precedence_over_name_lookup(
        self, mock_db, make_draft, step0_data, step1_data, fake_renroll_repository
    ):
        draft = make_draft(step0_data)

        with patch(REPOSITORY) as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=draft)
            mock_repo.find_draft = AsyncMock()
            mock_repo.update = AsyncMock(side_effect=fake_renroll_repository["update"])

            response, created = await submit_step(
                mock_db, _body({**step0_data, **step1_data}, 1, draft_id=draft.id)
            )

        assert created is False
        assert response.form.id == draft.id
        mock_repo.find_draft.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unsent_fields_keep_their_stored_value(
        self, mock_db, make_draft, step0_data, step1_data, fake_renroll_repository
    ):
        """Only the step 1 fields are sent; the step 0 fields survive the update."""
        draft = make_draft(step0_data)

        with patch(REPOSITORY) as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=draft)
            mock_repo.update = AsyncMock(side_effect=fake_renroll_repository["update"])

            response, _ = await submit_step(mock_db, _body(step1_data, 1, draft_id=draft.id))

        values = mock_repo.update.call_args.args[2]
        assert "child_first_name" not in values
        assert values["emergency1_name"] == "Leila Yusuf"

        assert response.form.child_first_name == "Amina"
        assert response.form.emergency1_name == "Leila Yusuf"
        assert response.form.current_step == 1
        assert response.message == "Step 2 saved successfully"

    @pytest.mark.asyncio
    async def test_sent_fields_overwrite_stored_value(
        self, mock_db, make_draft, step0_data, fake_renroll_repository
    ):
        draft = make_draft(step0_data)

        with patch(REPOSITORY) as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=draft)
            mock_repo.update = AsyncMock(side_effect=fake_renroll_repository["update"])

            response, _ = await submit_step(
                mock_db, _body({**step0_data, "city": "Chicago"}, 0, draft_id=draft.id)
            )

        assert response.form.city == "Chicago"

    @pytest.mark.asyncio
    async def test_storage_failure(self, mock_db, step0_data):
        with patch(REPOSITORY) as mock_repo:
            mock_repo.find_draft = AsyncMock(return_value=None)
            mock_repo.create = AsyncMock(
                side_effect=OperationalError("INSERT", {}, Exception("disk full"))
            )

            with pytest.raises(StorageFailureError) as exc_info:
                await submit_step(mock_db, _body(step0_data, 0))

        assert exc_info.value.message == "Failed to save renroll form"
        mock_db.rollback.assert_awaited_once()


class TestSubmitStepCompletion:
    """Tests for the last step."""

    @pytest.mark.asyncio
    async def test_last_step_completes_a_full_draft(
        self, mock_db, make_draft, step0_data, step1_data, step2_data, fake_renroll_repository
    ):
        draft = make_draft({**step0_data, **step1_data}, current_step=1)

        with patch(REPOSITORY) as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=draft)
            mock_repo.update = AsyncMock(side_effect=fake_renroll_repository["update"])

            response, created = await submit_step(
                mock_db, _body(step2_data, 2, draft_id=draft.id)
            )

        assert created is False
        assert response.message == "Renroll form completed successfully!"
        assert response.can_proceed is False
        assert response.form.is_completed is True
        assert response.form.current_step == 2

    @pytest.mark.asyncio
    async def test_last_step_rejects_incomplete_draft(
        self, mock_db, make_draft, step1_data, step2_data
    ):
        """Skipping straight to the last step cannot complete the form."""
        draft = make_draft(step1_data, current_step=1)

        with patch(REPOSITORY) as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=draft)
            mock_repo.update = AsyncMock()

            with pytest.raises(ValidationFailedError) as exc_info:
                await submit_step(mock_db, _body(step2_data, 2, draft_id=draft.id))

        assert exc_info.value.message == "Re-enrollment form is incomplete"
        assert "Child first name is required" in exc_info.value.errors
        mock_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_completed_form_stays_completed(
        self, mock_db, make_draft, complete_form_data, step0_data, fake_renroll_repository
    ):
        draft = make_draft(complete_form_data, current_step=2, is_completed=True)

        with patch(REPOSITORY) as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=draft)
            mock_repo.update = AsyncMock(side_effect=fake_renroll_repository["update"])

            response, _ = await submit_step(mock_db, _body(step0_data, 0, draft_id=draft.id))

        assert mock_repo.update.call_args.kwargs["is_completed"] is True
        assert response.form.is_completed is True
        assert response.form.current_step == 0
        assert response.can_proceed is True

    def test_merged_form_data_overlays_payload_on_draft(self, make_draft, step0_data):
        draft = make_draft(step0_data)

        merged = merged_form_data(draft, RenrollFormSubmit.model_validate({"city": "Chicago"}))

        assert merged["city"] == "Chicago"
        assert merged["childFirstName"] == "Amina"
        assert "currentStep" not in merged
        assert "draftId" not in merged


class TestValidateStepRequest:
    """Tests for the dry-run validation."""

    def test_failing_step(self):
        result = validate_step_request(1, {"emergency1Name": "Leila Yusuf"})

        assert result.success is False
        assert result.can_proceed is False
        assert "Emergency contact 1 phone is required" in result.errors

    def test_passing_step(self, step2_data):
        result = validate_step_request(2, step2_data)

        assert result.success is True
        assert result.can_proceed is True
        assert result.errors == []


class TestGetAndDelete:
    """Tests for get_form and delete_form."""

    @pytest.mark.asyncio
    async def test_get_unknown_form(self, mock_db):
        with patch(REPOSITORY) as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=None)

            with pytest.raises(RecordNotFoundError):
                await get_form(mock_db, uuid4())

    @pytest.mark.asyncio
    async def test_delete_form(self, mock_db, make_draft, step0_data):
        draft = make_draft(step0_data)

        with patch(REPOSITORY) as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=draft)
            mock_repo.delete = AsyncMock()

            result = await delete_form(mock_db, draft.id)

        mock_repo.delete.assert_awaited_once_with(mock_db, draft)
        assert result.message == "Renroll form deleted successfully"
