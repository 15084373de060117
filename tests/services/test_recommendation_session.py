"""
Tests for the RecommendationSession state container.

Covers the busy flag lifecycle, the re-entrancy guard and wholesale
replacement of outcomes between submissions.
"""

import pytest
from unittest.mock import patch

from google.genai import errors as genai_errors

from eshop.schemas.recommendations import FailureKind
from eshop.services.recommendation_session import (
    DEFAULT_NUM_RECOMMENDATIONS,
    RecommendationSession,
    SessionBusyError,
)

SHIRT_LINK = "https://example.com/stylish-blue-shirt"


class TestSessionState:
    """Initial state and snapshots."""

    def test_initial_state_is_idle(self):
        session = RecommendationSession()
        state = session.snapshot()

        assert state.product_link == ""
        assert state.num_recommendations == DEFAULT_NUM_RECOMMENDATIONS == 3
        assert state.is_loading is False
        assert state.outcome is None

    @pytest.mark.asyncio
    async def test_success_is_stored(self, gemini_client_ok):
        session = RecommendationSession(client=gemini_client_ok)

        outcome = await session.submit(SHIRT_LINK, 2)

        assert outcome.status == "SUCCESS"
        state = session.snapshot()
        assert state.outcome == outcome
        assert state.product_link == SHIRT_LINK
        assert state.num_recommendations == 2
        assert state.is_loading is False

    @pytest.mark.asyncio
    async def test_validation_failure_is_stored(self, gemini_client_ok):
        session = RecommendationSession(client=gemini_client_ok)

        outcome = await session.submit("   ", 3)

        assert outcome.status == "FAILURE"
        assert outcome.kind == FailureKind.VALIDATION_ERROR
        assert session.is_loading is False
        gemini_client_ok.aio.models.generate_content.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_outcome_replaced_wholesale(
        self, gemini_client_factory, gemini_response_factory, slim_trousers_text
    ):
        client = gemini_client_factory(side_effect=[
            gemini_response_factory(slim_trousers_text),
            gemini_response_factory("not json"),
            gemini_response_factory('[{"name": "Linen Skirt"}]'),
        ])
        session = RecommendationSession(client=client)

        first = await session.submit(SHIRT_LINK, 1)
        assert first.status == "SUCCESS"

        second = await session.submit(SHIRT_LINK, 1)
        assert second.status == "FAILURE"
        assert session.outcome == second

        third = await session.submit(SHIRT_LINK, 1)
        assert [item.name for item in third.items] == ["Linen Skirt"]
        assert session.outcome == third


class TestBusyFlag:
    """The busy flag is true only while the provider call is in flight."""

    @pytest.mark.asyncio
    async def test_busy_during_call_on_success(
        self, gemini_client_factory, gemini_response_factory, slim_trousers_text
    ):
        observed = []
        session = RecommendationSession()

        async def fake_generate_content(**kwargs):
            observed.append(session.is_loading)
            observed.append(session.snapshot().outcome)
            return gemini_response_factory(slim_trousers_text)

        session._client = gemini_client_factory(side_effect=fake_generate_content)

        assert session.is_loading is False
        await session.submit(SHIRT_LINK, 1)

        assert observed == [True, None]
        assert session.is_loading is False

    @pytest.mark.asyncio
    async def test_busy_cleared_on_provider_error(self, gemini_client_factory):
        observed = []
        session = RecommendationSession()

        async def fake_generate_content(**kwargs):
            observed.append(session.is_loading)
            raise genai_errors.ServerError(500, {"error": {"message": "Internal error"}})

        session._client = gemini_client_factory(side_effect=fake_generate_content)

        outcome = await session.submit(SHIRT_LINK, 1)

        assert observed == [True]
        assert outcome.kind == FailureKind.PROVIDER_ERROR
        assert session.is_loading is False

    @pytest.mark.asyncio
    async def test_busy_cleared_on_unexpected_exception(self, gemini_client_ok):
        """Even an exception escaping the service clears the flag."""
        session = RecommendationSession(client=gemini_client_ok)

        with patch(
            "eshop.services.recommendation_session.generate_recommendations",
            side_effect=RuntimeError("boom"),
        ):
            with pytest.raises(RuntimeError):
                await session.submit(SHIRT_LINK, 1)

        assert session.is_loading is False

    @pytest.mark.asyncio
    async def test_resubmission_rejected_while_busy(
        self, gemini_client_factory, gemini_response_factory, slim_trousers_text
    ):
        session = RecommendationSession()

        async def fake_generate_content(**kwargs):
            with pytest.raises(SessionBusyError):
                await session.submit(SHIRT_LINK, 5)
            return gemini_response_factory(slim_trousers_text)

        session._client = gemini_client_factory(side_effect=fake_generate_content)

        outcome = await session.submit(SHIRT_LINK, 1)

        assert outcome.status == "SUCCESS"
        assert session.num_recommendations == 1
        session._client.aio.models.generate_content.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_resubmission_allowed_after_failure(self, gemini_client_factory, gemini_response_factory):
        client = gemini_client_factory(side_effect=[
            ConnectionError("Network is unreachable"),
            gemini_response_factory("[]"),
        ])
        session = RecommendationSession(client=client)

        first = await session.submit(SHIRT_LINK, 1)
        second = await session.submit(SHIRT_LINK, 1)

        assert first.kind == FailureKind.FETCH_FAILED
        assert second.status == "SUCCESS"
        assert second.items == []
