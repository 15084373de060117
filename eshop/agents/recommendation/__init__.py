"""
Recommendation Request Builder

Turns a product link and a requested count into the prompt and output
schema sent to Gemini.

The service layer (HTTP call and response normalization) is in:
- eshop/services/recommendation_service.py
"""

from eshop.agents.recommendation.prompts import (
    RECOMMENDATION_OUTPUT_SCHEMA,
    build_recommendation_instruction,
    build_recommendation_request,
    complementary_category_for,
    infer_product_category,
)
from eshop.agents.recommendation.errors import RecommendationValidationError
from eshop.agents.recommendation.types import ProductCategory, RecommendationRequest

__all__ = [
    "RECOMMENDATION_OUTPUT_SCHEMA",
    "ProductCategory",
    "RecommendationRequest",
    "RecommendationValidationError",
    "build_recommendation_instruction",
    "build_recommendation_request",
    "complementary_category_for",
    "infer_product_category",
]
