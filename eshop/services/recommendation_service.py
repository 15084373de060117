"""
Recommendation Service - Gemini Structured Output

This service turns a RecommendationRequest into a RequestOutcome using
Google's Gemini model.

Architecture:
- Pattern: Single-shot LLM (one awaited generate_content call)
- Model: settings.GEMINI_MODEL
- API: Google Gen AI Python SDK (google-genai), async client (client.aio)
- Output: JSON array enforced via response_mime_type + response_schema
- No retries, no timeout, no backoff: one attempt per user action

Normalization:
- Provider rejects the call (APIError)  -> PROVIDER_ERROR
- No candidates / content / parts        -> EMPTY_RESPONSE
- Text is not a JSON array of objects    -> MALFORMED_RESPONSE
- Anything else (network, SDK failure)   -> FETCH_FAILED
- Otherwise                              -> SUCCESS with items in order
"""

import json
import logging
from typing import Any, List, Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from pydantic import ValidationError

from eshop.agents.recommendation.errors import (
    FETCH_FAILED_PREFIX,
    EmptyResponseError,
    MalformedResponseError,
    ProviderError,
    RecommendationError,
    RecommendationValidationError,
)
from eshop.agents.recommendation.prompts import build_recommendation_request
from eshop.agents.recommendation.types import RecommendationRequest
from eshop.config import settings
from eshop.schemas.recommendations import (
    FailureKind,
    RecommendationFailure,
    RecommendationItem,
    RecommendationSuccess,
    RequestOutcome,
)

logger = logging.getLogger(__name__)

# Initialize Gemini client (lazy initialization)
_gemini_client = None


def _get_gemini_client():
    """
    Lazy initialization of Gemini client.
    Uses the Google Gen AI SDK with the key from settings.
    """
    global _gemini_client

    if _gemini_client is not None:
        return _gemini_client

    if not settings.GOOGLE_API_KEY:
        logger.warning(
            "GOOGLE_API_KEY not configured. Recommendation service will not work. "
            "Please set GOOGLE_API_KEY in your .env file."
        )
        return None

    try:
        _gemini_client = genai.Client(api_key=settings.GOOGLE_API_KEY)
        logger.info("Gemini client initialized successfully for recommendations")
        return _gemini_client
    except Exception as e:
        logger.error(f"Failed to initialize Gemini client: {e}")
        return None


def _failure_from_error(error: RecommendationError) -> RecommendationFailure:
    return RecommendationFailure(kind=error.kind, message=error.user_message)


def _provider_error_detail(error: genai_errors.APIError) -> str:
    """Provider's own error text, else its status text, else the HTTP code."""
    return error.message or error.status or f"HTTP {error.code}"


def build_generation_config(request: RecommendationRequest) -> types.GenerateContentConfig:
    """Request JSON output matching the declared recommendation schema."""
    return types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=request.output_schema,
    )


def extract_response_text(response: Any) -> Optional[str]:
    """
    Return the text of the first part of the first candidate.

    Raises:
        EmptyResponseError: If candidates, content or parts are missing
    """
    candidates = getattr(response, "candidates", None)
    if not candidates:
        logger.error("Gemini response has no candidates")
        raise EmptyResponseError()

    content = candidates[0].content
    if content is None or not content.parts:
        logger.error("Gemini candidate has no content parts")
        raise EmptyResponseError()

    return content.parts[0].text


def parse_recommendations(text: Optional[str]) -> List[RecommendationItem]:
    """
    Parse the provider text as a JSON array of recommendation objects.

    Item fields are not checked beyond being JSON objects; missing fields
    come through as None.

    Raises:
        MalformedResponseError: If the text is not a JSON array of objects
    """
    try:
        parsed = json.loads(text)  # type: ignore[arg-type]
    except (json.JSONDecodeError, TypeError) as e:
        logger.error(f"JSON parsing error: {e}")
        logger.debug(f"Raw content: {(text or '')[:500]}")
        raise MalformedResponseError() from e

    if not isinstance(parsed, list):
        logger.error(f"Expected a JSON array, got {type(parsed).__name__}")
        raise MalformedResponseError()

    try:
        return [RecommendationItem.model_validate(item) for item in parsed]
    except ValidationError as e:
        logger.error(f"Recommendation item is not an object of strings: {e.error_count()} error(s)")
        raise MalformedResponseError() from e


async def fetch_recommendations(
    request: RecommendationRequest,
    client: Optional[genai.Client] = None,
) -> RequestOutcome:
    """
    Send one recommendation request to Gemini and normalize the result.

    Args:
        request: Built RecommendationRequest
        client: Gemini client (defaults to the lazily created shared client)

    Returns:
        RecommendationSuccess or RecommendationFailure
    """
    logger.info(
        f"fetch_recommendations called: category={request.inferred_category.value}, "
        f"count={request.count}"
    )

    client = client or _get_gemini_client()
    if client is None:
        logger.error("Gemini client not available")
        return RecommendationFailure(
            kind=FailureKind.FETCH_FAILED,
            message=f"{FETCH_FAILED_PREFIX}: Recommendation service is not configured.",
        )

    try:
        logger.info(f"Calling Gemini API ({settings.GEMINI_MODEL})...")

        response = await client.aio.models.generate_content(
            model=settings.GEMINI_MODEL,
            contents=[
                types.Content(role="user", parts=[types.Part(text=request.instruction)])
            ],
            config=build_generation_config(request),
        )

        text = extract_response_text(response)
        items = parse_recommendations(text)

    except genai_errors.APIError as e:
        logger.error(f"Gemini API returned an error: code={e.code} status={e.status}")
        return _failure_from_error(ProviderError(_provider_error_detail(e)))

    except RecommendationError as e:
        return _failure_from_error(e)

    except Exception as e:
        logger.error(f"Recommendation generation error: {e}", exc_info=True)
        return RecommendationFailure(
            kind=FailureKind.FETCH_FAILED,
            message=f"{FETCH_FAILED_PREFIX}: {e}",
        )

    logger.info(f"Returning {len(items)} product recommendations")
    return RecommendationSuccess(items=items)


async def generate_recommendations(
    source_link: str,
    count: int,
    client: Optional[genai.Client] = None,
) -> RequestOutcome:
    """
    Build the request for a product link and fetch recommendations.

    An empty link fails validation and no network call is made.
    """
    logger.info(f"generate_recommendations called for link='{source_link[:50]}', count={count}")

    try:
        request = build_recommendation_request(source_link, count)
    except RecommendationValidationError as e:
        logger.info("Rejected empty product link")
        return _failure_from_error(e)

    return await fetch_recommendations(request, client=client)
