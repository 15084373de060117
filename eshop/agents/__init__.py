"""
AI Components for the E-Shopping AI backend.

1. Recommendation Request Builder (Single-Shot LLM Prompt)
   - Infers a product category from the submitted link
   - Builds the instruction and JSON output schema for Gemini
   - Located in: eshop/agents/recommendation/

The Gemini call itself lives in eshop/services/recommendation_service.py.
"""

from eshop.agents.recommendation import (
    RecommendationRequest,
    build_recommendation_request,
)

__all__ = [
    "RecommendationRequest",
    "build_recommendation_request",
]
