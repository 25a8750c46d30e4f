"""
Content source: HTTP access to the study material generation service.

Produces the raw channel strings that src.parsing turns into records.
"""

from .client import ContentSourceClient
from .errors import (
    ContentSourceConnectionError,
    ContentSourceError,
    ContentSourceServiceError,
)
from .models import GeneratedContent, GenerationType, Topic

__all__ = [
    "ContentSourceClient",
    "ContentSourceError",
    "ContentSourceConnectionError",
    "ContentSourceServiceError",
    "GeneratedContent",
    "GenerationType",
    "Topic",
]
