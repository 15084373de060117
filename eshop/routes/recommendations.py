"""
FastAPI routes for the recommendation page.

This module is the presentation boundary: it hands user input to the
recommendation session and returns the outcome for the client to render.

Endpoints:
- POST /recommendations/generate: Run one recommendation request
- GET /recommendations/state: Current page state (busy flag, last outcome)
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from eshop.schemas.recommendations import (
    RecommendationGenerateRequest,
    RecommendationSessionState,
    RequestOutcome,
)
from eshop.services.recommendation_session import RecommendationSession, SessionBusyError

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(
    prefix="/recommendations",
    tags=["recommendations"]
)


def get_recommendation_session(request: Request) -> RecommendationSession:
    """Return the session owned by the running app."""
    return request.app.state.recommendation_session


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post(
    "/generate",
    response_model=RequestOutcome,
    status_code=200,
    summary="Generate complementary product recommendations",
    description="""
    Suggests products that go well with the linked product.
    
    **Frontend Flow:**
    1. User enters a product link and a count (1-10)
    2. User clicks "Generate Recommendations" (disabled while loading)
    3. POST /recommendations/generate
    4. Receive one of two responses:
       - SUCCESS: render `items` as cards (name, price, "review", link)
       - FAILURE: render `message` in the alert region
    
    Returns 409 while another request is still in progress.
    """
)
async def generate_recommendations_endpoint(
    request: RecommendationGenerateRequest,
    session: RecommendationSession = Depends(get_recommendation_session)
) -> RequestOutcome:
    """
    Recommendation request endpoint.

    - Parse/Validate: count range handled by RecommendationGenerateRequest
    - Link validation: done by the request builder (FAILURE outcome)
    - Call LLM: single Gemini call via the session
    - Return response: FastAPI validates against RequestOutcome
    """
    logger.info(
        f"POST /recommendations/generate called, "
        f"product_link='{request.product_link[:50]}', count={request.num_recommendations}"
    )

    try:
        outcome = await session.submit(request.product_link, request.num_recommendations)
    except SessionBusyError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    logger.info(f"Returning response with status={outcome.status}")
    return outcome


@router.get(
    "/state",
    response_model=RecommendationSessionState,
    summary="Current recommendation page state",
)
async def get_recommendation_state_endpoint(
    session: RecommendationSession = Depends(get_recommendation_session)
) -> RecommendationSessionState:
    """Busy flag plus the last outcome, for disabling the submit button."""
    return session.snapshot()
