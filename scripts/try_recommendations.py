#!/usr/bin/env python3
"""
Recommendation Smoke Script

Runs one recommendation request against the real Gemini API from the
terminal, without starting the web server.

Usage:
    python scripts/try_recommendations.py
    python scripts/try_recommendations.py --link "https://example.com/red-summer-dress" --count 5
    python scripts/try_recommendations.py --prompt-only --link "https://example.com/running-shoe"
"""

import argparse
import asyncio
import logging
import os
import sys

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from eshop.agents.recommendation.errors import RecommendationValidationError
from eshop.agents.recommendation.prompts import build_recommendation_request
from eshop.schemas.recommendations import RecommendationSuccess
from eshop.services.recommendation_service import generate_recommendations


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def print_result(result):
    """Pretty print the recommendation outcome as cards."""
    print("\n" + "=" * 60)
    print(f"STATUS: {result.status}")
    print("=" * 60)
    
    if isinstance(result, RecommendationSuccess):
        print(f"\n✅ Received {len(result.items)} recommendation(s):\n")
        
        for i, item in enumerate(result.items, 1):
            print(f"--- Product #{i} ---")
            print(f"  Name:    {item.name}")
            print(f"  Price:   {item.price}")
            print(f"  Review:  \"{item.review}\"")
            print(f"  Link:    {item.link}")
            print()
    else:
        print(f"\n❌ {result.kind.value}")
        print(f"  Error: {result.message}\n")


def print_prompt(link: str, count: int):
    """Show the request that would be sent, without calling Gemini."""
    try:
        request = build_recommendation_request(link, count)
    except RecommendationValidationError as e:
        print(f"\n❌ {e.message}\n")
        return

    print(f"\nInferred category:       {request.inferred_category.value}")
    print(f"Complementary category:  {request.complementary_category}")
    print("\n--- Instruction ---")
    print(request.instruction)
    print("\n--- Output schema ---")
    print(request.output_schema.model_dump_json(indent=2, exclude_none=True))


async def run_once(link: str, count: int):
    """Run a single recommendation request."""
    if not os.getenv("GOOGLE_API_KEY"):
        print("\n⚠️  ERROR: GOOGLE_API_KEY environment variable not set!")
        print("   Please set it in your .env file or export it:")
        print("   export GOOGLE_API_KEY=your-gemini-api-key")
        return None
    
    print(f"\nLink:   {link}")
    print(f"Count:  {count}")
    print("\nCalling Gemini API...")
    
    result = await generate_recommendations(link, count)
    print_result(result)
    return result


def main():
    parser = argparse.ArgumentParser(description="Try the recommendation service")
    parser.add_argument(
        "--link",
        default="https://example.com/stylish-blue-shirt",
        help="Product link to get recommendations for",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=3,
        choices=range(1, 11),
        metavar="{1..10}",
        help="Number of recommendations",
    )
    parser.add_argument(
        "--prompt-only",
        action="store_true",
        help="Print the prompt and schema without calling Gemini",
    )
    args = parser.parse_args()

    if args.prompt_only:
        print_prompt(args.link, args.count)
    else:
        asyncio.run(run_once(args.link, args.count))


if __name__ == "__main__":
    main()
