"""
Pytest configuration for the E-Shopping AI backend tests.

Sets up test environment and global fixtures.
"""
import os
import pytest
from unittest.mock import AsyncMock, MagicMock

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")

from google.genai import types  # noqa: E402


@pytest.fixture
def gemini_response_factory():
    """Factory for Gemini responses (see make_gemini_response)."""
    return make_gemini_response


@pytest.fixture
def gemini_client_factory():
    """Factory for mocked Gemini clients (see make_gemini_client)."""
    return make_gemini_client


def make_gemini_response(text):
    """Build a real Gemini response whose first candidate carries `text`."""
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(role="model", parts=[types.Part(text=text)])
            )
        ]
    )


def make_gemini_client(response=None, side_effect=None):
    """
    Mock Gemini client for testing the async generate_content call.
    Returns a MagicMock whose client.aio.models.generate_content is awaitable.
    """
    mock_client = MagicMock()
    mock_client.aio.models.generate_content = AsyncMock(
        return_value=response, side_effect=side_effect
    )
    return mock_client


@pytest.fixture
def slim_trousers_text():
    """Provider text for a single valid recommendation."""
    return (
        '[{"name":"Slim Trousers","price":"$39.99",'
        '"review":"Great fit","link":"https://example.com/p1"}]'
    )


@pytest.fixture
def gemini_client_ok(slim_trousers_text):
    """Gemini client that answers with one valid recommendation."""
    return make_gemini_client(response=make_gemini_response(slim_trousers_text))
