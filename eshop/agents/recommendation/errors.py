"""
Recommendation failure taxonomy.

Every failure is terminal for the current attempt: none is retried, and
each carries the user-readable message shown in the alert region.
"""

from eshop.schemas.recommendations import FailureKind

EMPTY_LINK_MESSAGE = "Please enter a product link."
EMPTY_RESPONSE_MESSAGE = "No recommendations received from AI. Please try again."
MALFORMED_RESPONSE_MESSAGE = "Failed to parse recommendations from AI. Please try again."
FETCH_FAILED_PREFIX = "Failed to fetch recommendations"


class RecommendationError(Exception):
    """Base class for recommendation failures."""

    kind: FailureKind = FailureKind.FETCH_FAILED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def user_message(self) -> str:
        """Message shown to the user for this failure."""
        return self.message


class RecommendationValidationError(RecommendationError):
    """Bad input; blocks the request before any network activity."""

    kind = FailureKind.VALIDATION_ERROR

    def __init__(self, message: str = EMPTY_LINK_MESSAGE):
        super().__init__(message)


class ProviderError(RecommendationError):
    """The provider answered with a non-success status."""

    kind = FailureKind.PROVIDER_ERROR

    def __init__(self, detail: str):
        super().__init__(f"API error: {detail}")

    @property
    def user_message(self) -> str:
        return f"{FETCH_FAILED_PREFIX}: {self.message}"


class EmptyResponseError(RecommendationError):
    """Successful transport, but no candidate text in the payload."""

    kind = FailureKind.EMPTY_RESPONSE

    def __init__(self, message: str = EMPTY_RESPONSE_MESSAGE):
        super().__init__(message)


class MalformedResponseError(RecommendationError):
    """Candidate text present but not a JSON array of objects."""

    kind = FailureKind.MALFORMED_RESPONSE

    def __init__(self, message: str = MALFORMED_RESPONSE_MESSAGE):
        super().__init__(message)
