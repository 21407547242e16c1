"""Text completion service consumed by the intent classifier."""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from loguru import logger

from novaroute.providers.base import LLMProvider


class CompletionError(Exception):
    """Raised when a completion cannot be produced, for any reason."""


@dataclass
class GenerationOptions:
    """Per-call generation overrides."""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


class CompletionService(ABC):
    """Produces free text for a system prompt and a user prompt."""

    @abstractmethod
    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        options: Optional[GenerationOptions] = None,
    ) -> str:
        """
        Generate text.

        Raises:
            CompletionError: On any failure (network, credentials, provider, timeout).
        """
        pass


class ProviderCompletionService(CompletionService):
    """CompletionService backed by an LLMProvider chat call."""

    DEFAULT_TEMPERATURE = 0.7
    DEFAULT_MAX_TOKENS = 4096

    def __init__(
        self,
        provider: LLMProvider,
        model: Optional[str] = None,
        timeout_ms: Optional[int] = None,
    ):
        self.provider = provider
        self.model = model
        self.timeout_ms = timeout_ms

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        options: Optional[GenerationOptions] = None,
    ) -> str:
        options = options or GenerationOptions()
        messages = self._build_messages(system_prompt, user_prompt)

        response = await self._call_llm(
            messages,
            max_tokens=options.max_tokens if options.max_tokens is not None else self.DEFAULT_MAX_TOKENS,
            temperature=options.temperature if options.temperature is not None else self.DEFAULT_TEMPERATURE,
        )

        if response.is_error:
            raise CompletionError(response.content or "LLM provider error")
        if response.content is None:
            raise CompletionError("LLM returned no content")
        return response.content

    def _build_messages(self, system_prompt: str, user_prompt: str) -> list[dict[str, Any]]:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})
        return messages

    async def _call_llm(self, messages: list[dict[str, Any]], max_tokens: int, temperature: float):
        """Call the provider, honouring the optional timeout."""
        call = self.provider.chat(
            messages=messages,
            model=self.model or self.provider.get_default_model(),
            max_tokens=max_tokens,
            temperature=temperature,
        )
        if self.timeout_ms is None:
            return await call

        try:
            return await asyncio.wait_for(call, timeout=self.timeout_ms / 1000.0)
        except asyncio.TimeoutError:
            logger.debug(f"Completion timed out after {self.timeout_ms}ms")
            raise CompletionError(f"LLM completion timed out after {self.timeout_ms}ms")
