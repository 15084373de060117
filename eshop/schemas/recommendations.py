"""
Pydantic schemas for recommendation endpoints.

These models define the strict request/response contracts between the
presentation layer and the recommendation service. Outcomes are tagged by
`status` so the client can pick the right display state:
- SUCCESS: render `items` as product cards
- FAILURE: render `message` in the alert region
"""

from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# ============================================================================
# ENUMS
# ============================================================================

class FailureKind(str, Enum):
    """Why a recommendation attempt failed."""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PROVIDER_ERROR = "PROVIDER_ERROR"
    EMPTY_RESPONSE = "EMPTY_RESPONSE"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    FETCH_FAILED = "FETCH_FAILED"


# ============================================================================
# REQUEST MODELS
# ============================================================================

class RecommendationGenerateRequest(BaseModel):
    """
    Request to generate complementary product recommendations.

    Frontend flow:
    1. User pastes a product link and picks how many suggestions they want
    2. User clicks "Generate Recommendations"
    3. POST /recommendations/generate with this body
    """
    product_link: str = Field(
        ...,
        description=(
            "Link to the product the user already likes. "
            "Emptiness is reported as a FAILURE outcome, not a 422."
        ),
        max_length=2048,
        examples=["https://example.com/stylish-blue-shirt"]
    )
    num_recommendations: int = Field(
        3,
        description="How many suggestions to ask for",
        ge=1,
        le=10,
        examples=[3]
    )


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class RecommendationItem(BaseModel):
    """
    Schema for a single product recommendation, ready for card display.

    Fields are passed through as the provider returned them: a missing
    field stays None and numbers are kept as their string form.
    """
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    name: Optional[str] = Field(
        None,
        description="Product name",
        examples=["Slim Trousers"]
    )
    price: Optional[str] = Field(
        None,
        description="Display price",
        examples=["$39.99"]
    )
    review: Optional[str] = Field(
        None,
        description="Short positive review snippet (rendered in quotes)",
        examples=["Great fit"]
    )
    link: Optional[str] = Field(
        None,
        description="Product link, opened in a new tab by the client",
        examples=["https://example.com/p1"]
    )


class RecommendationSuccess(BaseModel):
    """
    Outcome when the provider returned a parseable list.

    Frontend should replace any previous cards with `items`, in order.
    """
    status: Literal["SUCCESS"] = Field(
        "SUCCESS",
        description="Indicates successful recommendations"
    )
    items: List[RecommendationItem] = Field(
        default_factory=list,
        description="Recommendations in provider order"
    )


class RecommendationFailure(BaseModel):
    """
    Outcome when the attempt failed at any stage.

    Frontend should display `message` in the alert region and allow
    resubmission.
    """
    status: Literal["FAILURE"] = Field(
        "FAILURE",
        description="Indicates a failed attempt"
    )
    kind: FailureKind = Field(
        ...,
        description="Failure category"
    )
    message: str = Field(
        ...,
        description="User-readable message",
        examples=[
            "Please enter a product link.",
            "No recommendations received from AI. Please try again."
        ]
    )


RequestOutcome = Union[RecommendationSuccess, RecommendationFailure]


class RecommendationSessionState(BaseModel):
    """
    Display state of the recommendation page.

    `is_loading` is the busy flag: the client disables its submit button
    and shows a spinner while it is true.
    """
    product_link: str = Field("", description="Last submitted product link")
    num_recommendations: int = Field(3, description="Last requested count")
    is_loading: bool = Field(False, description="True while a request is in flight")
    outcome: Optional[RequestOutcome] = Field(
        None,
        description="Result of the last completed request, if any"
    )
