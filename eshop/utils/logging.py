"""
Logging utilities for the E-Shopping AI backend.

Provides standardized logger configuration.

SECURITY RULES:
- NEVER log the Gemini API key or any request URL that embeds it
- Log product links truncated (they are user input)
- Log raw provider text only on parse failures, truncated

Acceptable logging:
- High-level events (e.g., "Recommendation request built", "Gemini call completed")
- Non-sensitive metadata (e.g., "category=shirt count=3")
- Sanitized error messages
"""

import logging
from typing import Optional, Union

from eshop.config import settings


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.
    
    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to settings.LOG_LEVEL)
    
    Returns:
        Configured logger instance
    
    Usage:
        >>> from eshop.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)
    
    if level is None:
        level = settings.LOG_LEVEL.upper()
    
    logger.setLevel(level)
    
    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    
    return logger
