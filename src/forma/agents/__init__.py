"""AI agents for plan generation and catalog extraction."""

from .client import GeminiClient, GenerationClient, gemini_client_factory
from .dispatcher import DispatchResult, KeyRotationDispatcher, is_rate_limit_error
from .enricher import enrich_plan
from .prompts import build_extraction_prompt, build_workout_prompt, format_catalog_context

__all__ = [
    "build_extraction_prompt",
    "build_workout_prompt",
    "DispatchResult",
    "enrich_plan",
    "format_catalog_context",
    "gemini_client_factory",
    "GeminiClient",
    "GenerationClient",
    "is_rate_limit_error",
    "KeyRotationDispatcher",
]
