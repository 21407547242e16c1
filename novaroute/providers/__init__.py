"""LLM provider abstraction module."""

from novaroute.providers.base import LLMProvider, LLMResponse
from novaroute.providers.completion import (
    CompletionError,
    CompletionService,
    GenerationOptions,
    ProviderCompletionService,
)
from novaroute.providers.litellm_provider import LiteLLMProvider

__all__ = [
    "LLMProvider",
    "LLMResponse",
    "LiteLLMProvider",
    "CompletionError",
    "CompletionService",
    "GenerationOptions",
    "ProviderCompletionService",
]
