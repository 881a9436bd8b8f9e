"""
HTTP tests for the re-enrollment endpoints.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest

from academy_api.modules.renroll.models import RenrollForm

REPOSITORY = "academy_api.modules.renroll.service.repository"


class TestValidateStepEndpoint:
    @pytest.mark.asyncio
    async def test_reports_missing_fields(self, client):
        response = await client.post(
            "/api/v1/renroll/renroll-form/validate-step",
            json={"step": 2, "formData": {"guardianName": "Omar Yusuf"}},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["canProceed"] is False
        assert "Home phone is required" in body["errors"]
        assert "Guardian name is required" not in body["errors"]

    @pytest.mark.asyncio
    async def test_unknown_step_is_rejected(self, client):
        response = await client.post(
            "/api/v1/renroll/renroll-form/validate-step", json={"step": 7, "formData": {}}
        )

        assert response.status_code == 400


class TestSubmitStepEndpoint:
    @pytest.mark.asyncio
    async def test_incomplete_step_returns_flat_400(self, client):
        response = await client.post(
            "/api/v1/renroll/renroll-form",
            json={"currentStep": 0, "childFirstName": "Amina"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "VALIDATION_FAILED"
        assert body["message"] == "Validation failed"
        assert "Child last name is required" in body["errors"]
        assert "Child first name is required" not in body["errors"]

    @pytest.mark.asyncio
    async def test_submit_and_dry_run_report_the_same_errors(self, client, step2_data):
        step2_data["acknowledgeTuition"] = "Yes"

        submitted = await client.post(
            "/api/v1/renroll/renroll-form", json={**step2_data, "currentStep": 2}
        )
        dry_run = await client.post(
            "/api/v1/renroll/renroll-form/validate-step",
            json={"step": 2, "formData": step2_data},
        )

        assert submitted.status_code == 400
        assert submitted.json()["errors"] == ["Tuition acknowledgment is required"]
        assert dry_run.json()["errors"] == ["Tuition acknowledgment is required"]

    @pytest.mark.asyncio
    async def test_out_of_range_step_is_rejected(self, client):
        response = await client.post("/api/v1/renroll/renroll-form", json={"currentStep": 3})

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_FAILED"

    @pytest.mark.asyncio
    async def test_new_draft_returns_201(self, client, step0_data, fake_renroll_repository):
        with patch(REPOSITORY) as mock_repo:
            mock_repo.find_draft = AsyncMock(return_value=None)
            mock_repo.create = AsyncMock(side_effect=fake_renroll_repository["create"])

            response = await client.post(
                "/api/v1/renroll/renroll-form", json={**step0_data, "currentStep": 0}
            )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["canProceed"] is True
        assert body["form"]["childFirstName"] == "Amina"
        assert body["form"]["currentStep"] == 0
        assert body["form"]["isCompleted"] is False

    @pytest.mark.asyncio
    async def test_existing_draft_returns_200(self, client, step0_data, fake_renroll_repository):
        draft = RenrollForm(
            id=uuid4(), submitted_at=datetime.now(UTC), current_step=0, is_completed=False
        )

        with patch(REPOSITORY) as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=draft)
            mock_repo.update = AsyncMock(side_effect=fake_renroll_repository["update"])

            response = await client.post(
                "/api/v1/renroll/renroll-form",
                json={**step0_data, "currentStep": 0, "draftId": str(draft.id)},
            )

        assert response.status_code == 200
        assert response.json()["form"]["id"] == str(draft.id)

    @pytest.mark.asyncio
    async def test_unknown_draft_returns_404(self, client, step0_data):
        with patch(REPOSITORY) as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=None)

            response = await client.post(
                "/api/v1/renroll/renroll-form",
                json={**step0_data, "currentStep": 0, "draftId": str(uuid4())},
            )

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"


class TestFormLookupEndpoints:
    @pytest.mark.asyncio
    async def test_list_forms(self, client, make_draft, step0_data):
        with patch(REPOSITORY) as mock_repo:
            mock_repo.list_all = AsyncMock(return_value=[make_draft(step0_data)])

            response = await client.get("/api/v1/renroll/renroll-form")

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 1
        assert body["forms"][0]["fatherEmail"] == "omar@example.com"

    @pytest.mark.asyncio
    async def test_delete_unknown_form(self, client):
        with patch(REPOSITORY) as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=None)

            response = await client.delete(f"/api/v1/renroll/renroll-form/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["message"] == "Renroll form not found"
