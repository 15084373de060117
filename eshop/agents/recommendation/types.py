"""
Recommendation Request Type Definitions

Strictly typed input contract for the recommendation prompt.
A RecommendationRequest is built fresh for every user action and is
immutable once built.
"""

from enum import Enum

from google.genai import types
from pydantic import BaseModel, ConfigDict


class ProductCategory(str, Enum):
    """Product category guessed from the submitted link."""
    SHIRT = "shirt"
    DRESS = "dress"
    SHOE = "shoe"
    CLOTHING_ITEM = "clothing-item"

    @property
    def prompt_label(self) -> str:
        """Human wording used inside the prompt ("clothing item")."""
        return self.value.replace("-", " ")


class RecommendationRequest(BaseModel):
    """Everything needed to ask the provider for complementary products."""
    model_config = ConfigDict(frozen=True)

    source_link: str
    count: int
    inferred_category: ProductCategory
    complementary_category: str

    @property
    def instruction(self) -> str:
        """Natural-language instruction sent as the user turn."""
        from eshop.agents.recommendation.prompts import build_recommendation_instruction

        return build_recommendation_instruction(
            source_link=self.source_link,
            category=self.inferred_category,
            count=self.count,
            complementary_category=self.complementary_category,
        )

    @property
    def output_schema(self) -> types.Schema:
        """Response schema the provider is instructed to honor."""
        from eshop.agents.recommendation.prompts import RECOMMENDATION_OUTPUT_SCHEMA

        return RECOMMENDATION_OUTPUT_SCHEMA
