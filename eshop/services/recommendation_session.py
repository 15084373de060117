"""
Recommendation Session - page state container.

Holds what the presentation layer displays: the last submitted link and
count, the busy flag, and the outcome of the last completed request.

State machine (per submission):
    Idle -> Submitting -> {Success | Failure} -> Idle

Only one request may be in flight. The busy flag is set before any work
starts and cleared on every exit path.
"""

import logging
from typing import Optional

from google import genai

from eshop.schemas.recommendations import RecommendationSessionState, RequestOutcome
from eshop.services.recommendation_service import generate_recommendations

logger = logging.getLogger(__name__)

DEFAULT_NUM_RECOMMENDATIONS = 3


class SessionBusyError(RuntimeError):
    """Raised when a submission arrives while another is in flight."""


class RecommendationSession:
    """State owned by one recommendation page."""

    def __init__(self, client: Optional[genai.Client] = None):
        self.product_link: str = ""
        self.num_recommendations: int = DEFAULT_NUM_RECOMMENDATIONS
        self.outcome: Optional[RequestOutcome] = None
        self.is_loading: bool = False
        self._client = client

    async def submit(self, product_link: str, num_recommendations: int) -> RequestOutcome:
        """
        Run one recommendation request and store its outcome.

        The previous outcome is cleared up front and replaced wholesale.

        Raises:
            SessionBusyError: If a request is already in progress
        """
        if self.is_loading:
            logger.warning("Submission rejected: request already in progress")
            raise SessionBusyError("A recommendation request is already in progress.")

        self.is_loading = True
        self.product_link = product_link
        self.num_recommendations = num_recommendations
        self.outcome = None

        try:
            outcome = await generate_recommendations(
                product_link, num_recommendations, client=self._client
            )
            self.outcome = outcome
            return outcome
        finally:
            self.is_loading = False

    def snapshot(self) -> RecommendationSessionState:
        """Current display state."""
        return RecommendationSessionState(
            product_link=self.product_link,
            num_recommendations=self.num_recommendations,
            is_loading=self.is_loading,
            outcome=self.outcome,
        )
