"""
Service layer for the E-Shopping AI backend.

Contains the orchestration that:
- Builds recommendation requests from user input
- Calls Gemini and maps its output into Pydantic outcome models
- Keeps the page state (busy flag, last outcome) between requests

Services act as the glue between routes (HTTP layer) and agents.
"""

from .recommendation_service import (
    extract_response_text,
    fetch_recommendations,
    generate_recommendations,
    parse_recommendations,
)
from .recommendation_session import RecommendationSession, SessionBusyError

__all__ = [
    "extract_response_text",
    "fetch_recommendations",
    "generate_recommendations",
    "parse_recommendations",
    "RecommendationSession",
    "SessionBusyError",
]
