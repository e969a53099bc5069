"""
Tests for failure classification.

These tests verify that explainable failures reach clients as classified
ApiResponse envelopes instead of raw 500 errors.
"""

import pytest
from fastapi.testclient import TestClient

from cardshelf.main import app
from cardshelf.models.failure import (
    ApiResponse,
    FailureKind,
    InvalidGroupingError,
    KnownError,
    MetadataLookupError,
    OutcomeType,
)


class TestFailureEnvelope:
    """Tests for the ApiResponse failure envelope."""

    def test_success_response_structure(self) -> None:
        response = ApiResponse.success({"data": "value"})

        assert response.outcome == OutcomeType.SUCCESS
        assert response.data == {"data": "value"}
        assert response.failure is None

    def test_known_failure_response_structure(self) -> None:
        response = ApiResponse.known_failure(
            kind=FailureKind.NOT_FOUND,
            message="Resource not found",
            detail="Pack 'xyz' does not exist",
        )

        assert response.outcome == OutcomeType.KNOWN_FAILURE
        assert response.data is None
        assert response.failure is not None
        assert response.failure.kind == FailureKind.NOT_FOUND


class TestKnownErrorException:
    def test_known_error_converts_to_response(self) -> None:
        error = KnownError(
            kind=FailureKind.INVALID_INPUT,
            message="Invalid grouping",
            detail="Expected a grouping name",
            status_code=400,
        )

        response = error.to_response()

        assert response.outcome == OutcomeType.KNOWN_FAILURE
        assert response.failure is not None
        assert response.failure.kind == FailureKind.INVALID_INPUT
        assert response.failure.message == "Invalid grouping"

    def test_metadata_lookup_error(self) -> None:
        error = MetadataLookupError("cycle", "tfa")

        assert isinstance(error, KnownError)
        assert error.kind == FailureKind.NOT_FOUND
        assert error.status_code == 422
        assert "tfa" in str(error)

    def test_invalid_grouping_error_lists_allowed(self) -> None:
        error = InvalidGroupingError("rarity", ["cycle", "pack"])

        failure = error.to_response().failure

        assert failure is not None
        assert failure.detail == "Allowed groupings: cycle, pack"


class TestExceptionHandlers:
    """Tests for the exception handler in main.py."""

    @pytest.fixture
    def client(self) -> TestClient:
        return TestClient(app, raise_server_exceptions=False)

    def test_health_endpoint_returns_success(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200

    def test_unknown_grouping_returns_envelope(self, client: TestClient) -> None:
        """Unknown groupings are classified, not 500."""
        response = client.post("/grouping", json={"groupings": ["rarity"]})

        assert response.status_code == 422
        data = response.json()
        assert data["outcome"] == "known_failure"
        assert data["failure"]["kind"] == "invalid_input"
        assert data["failure"]["suggestion"]

    def test_unknown_sorting_returns_envelope(self, client: TestClient) -> None:
        response = client.post("/grouping", json={"sorting": ["rarity"]})

        assert response.status_code == 422
        data = response.json()
        assert data["outcome"] == "known_failure"
        assert data["failure"]["detail"].startswith("Allowed sorting: name")
