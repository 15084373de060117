"""
Recommendation Prompt Templates

Builds the natural-language instruction and the structured output schema
for the Gemini recommendation call.

Architecture:
- Pattern: Single-shot LLM (one generate_content call, no tools)
- Model: configured via GEMINI_MODEL (default gemini-2.0-flash)
- Output: Structured JSON (response_mime_type + response_schema)

Category inference is a plain keyword match on the product link.
Keyword order is a fixed tie-break: a link mentioning both "shirt" and
"dress" is always treated as a shirt.
"""

from typing import Dict, Tuple

from google.genai import types

from eshop.agents.recommendation.errors import RecommendationValidationError
from eshop.agents.recommendation.types import ProductCategory, RecommendationRequest

# =============================================================================
# CATEGORY INFERENCE
# =============================================================================

CATEGORY_KEYWORDS: Tuple[Tuple[str, ProductCategory], ...] = (
    ("shirt", ProductCategory.SHIRT),
    ("dress", ProductCategory.DRESS),
    ("shoe", ProductCategory.SHOE),
)

COMPLEMENTARY_CATEGORIES: Dict[ProductCategory, str] = {
    ProductCategory.SHIRT: "trousers or skirts",
    ProductCategory.DRESS: "jackets or accessories",
    ProductCategory.SHOE: "socks or shoe care products",
    ProductCategory.CLOTHING_ITEM: "matching outfits or accessories",
}

# =============================================================================
# OUTPUT SCHEMA
# =============================================================================

RECOMMENDATION_FIELDS: Tuple[str, ...] = ("name", "price", "review", "link")

RECOMMENDATION_OUTPUT_SCHEMA = types.Schema(
    type=types.Type.ARRAY,
    items=types.Schema(
        type=types.Type.OBJECT,
        properties={
            field: types.Schema(type=types.Type.STRING)
            for field in RECOMMENDATION_FIELDS
        },
        property_ordering=list(RECOMMENDATION_FIELDS),
    ),
)

# =============================================================================
# USER PROMPT
# =============================================================================

RECOMMENDATION_PROMPT_TEMPLATE = """Given a product link (e.g., "{source_link}") which is a {category}, please suggest exactly {count} relevant and modern {complementary_category} that would fit well with it. For each suggestion, provide a product name, a realistic price (e.g., "$XX.XX"), a short, positive review snippet, and a dummy product link (e.g., "https://example.com/product-recommendation-1").
Format the output as a JSON array of objects. Each object should have 'name' (string), 'price' (string), 'review' (string), and 'link' (string) properties.
Example JSON structure:
[
  {{"name": "...", "price": "...", "review": "...", "link": "..."}},
  {{"name": "...", "price": "...", "review": "...", "link": "..."}}
]"""


def infer_product_category(source_link: str) -> ProductCategory:
    """
    Guess the product category from the link text.

    Case-insensitive substring match, first keyword wins.

    Examples:
        - "https://shop.com/Blue-SHIRT" -> shirt
        - "https://shop.com/shirt-dress" -> shirt
        - "https://shop.com/p/1234" -> clothing-item
    """
    link = source_link.lower()
    for keyword, category in CATEGORY_KEYWORDS:
        if keyword in link:
            return category
    return ProductCategory.CLOTHING_ITEM


def complementary_category_for(category: ProductCategory) -> str:
    """Return the kind of product that goes well with the given category."""
    return COMPLEMENTARY_CATEGORIES[category]


def build_recommendation_instruction(
    source_link: str,
    category: ProductCategory,
    count: int,
    complementary_category: str,
) -> str:
    """
    Build the natural-language instruction for the provider.

    The requested count is embedded verbatim; the prompt demands exactly
    that many suggestions.
    """
    return RECOMMENDATION_PROMPT_TEMPLATE.format(
        source_link=source_link,
        category=category.prompt_label,
        count=count,
        complementary_category=complementary_category,
    )


def build_recommendation_request(source_link: str, count: int) -> RecommendationRequest:
    """
    Build an immutable RecommendationRequest for one user action.

    Args:
        source_link: Product link entered by the user
        count: Number of suggestions to ask for (clamped to 1-10 by the caller)

    Returns:
        RecommendationRequest with inferred and complementary categories

    Raises:
        RecommendationValidationError: If source_link is empty or whitespace
    """
    if not source_link or not source_link.strip():
        raise RecommendationValidationError()

    category = infer_product_category(source_link)
    return RecommendationRequest(
        source_link=source_link,
        count=count,
        inferred_category=category,
        complementary_category=complementary_category_for(category),
    )
