"""Intent classification orchestrator - model first, heuristics as fallback."""

from typing import Any, Optional

from loguru import logger

from novaroute.config.schema import ClassifierConfig, Config
from novaroute.providers.completion import (
    CompletionService,
    GenerationOptions,
    ProviderCompletionService,
)
from novaroute.providers.litellm_provider import LiteLLMProvider

from .heuristics import HeuristicClassifier
from .models import IntentDecision, UserIntent

# Colon commands belong to provider switching and custom commands in the host.
RESERVED_PREFIX = ":"

CLASSIFICATION_PROMPT = """Classify this text as CHAT, METADATA, or CONTENT:
"{user_input}"

CHAT = questions/discussion/analysis
METADATA = tags/properties/frontmatter
CONTENT = edit document text/add content

Answer with one word only:"""


class IntentClassifier:
    """
    Routes one line of chat input to CHAT, METADATA or CONTENT.

    Two layers:
    1. A single, best-effort model classification (when a completion
       service is available)
    2. The deterministic heuristic cascade, used on any failure or any
       answer that is not exactly one of the three labels

    No retries and no state between calls.
    """

    def __init__(
        self,
        completion: Optional[CompletionService] = None,
        config: Optional[ClassifierConfig] = None,
        heuristics: Optional[HeuristicClassifier] = None,
    ):
        self.completion = completion
        self.config = config or ClassifierConfig()
        self.heuristics = heuristics or HeuristicClassifier()

    @property
    def ai_enabled(self) -> bool:
        return self.completion is not None and self.config.ai_enabled

    async def classify_intent(self, user_input: Any, has_selection: bool = False) -> UserIntent:
        """Classify user input into one of the three intents."""
        decision = await self.classify(user_input, has_selection)
        return decision.intent

    async def classify(self, user_input: Any, has_selection: bool = False) -> IntentDecision:
        """
        Classify user input and report how the answer was reached.

        Args:
            user_input: The line typed into the chat box
            has_selection: Whether the editor has an active text selection

        Returns:
            IntentDecision; never raises for any input
        """
        if not isinstance(user_input, str):
            return self._fallback(user_input, has_selection)

        if user_input.startswith(RESERVED_PREFIX):
            logger.debug("Reserved prefix, classified as CHAT")
            return IntentDecision(intent=UserIntent.CHAT, layer="prefix")

        if not self.ai_enabled:
            return self._fallback(user_input, has_selection)

        try:
            response = await self.completion.complete(
                "",
                self.build_prompt(user_input),
                GenerationOptions(
                    temperature=self.config.temperature,
                    max_tokens=self.config.max_tokens,
                ),
            )
        except Exception as e:
            logger.warning(f"AI intent classification failed, using fallback: {e}")
            return self._fallback(user_input, has_selection)

        intent = self.parse_label(response)
        if intent is None:
            logger.warning(f"Unexpected AI intent label {response!r}, using fallback")
            return self._fallback(user_input, has_selection, raw_response=response)

        logger.debug(f"AI classified input as {intent.value}")
        return IntentDecision(intent=intent, layer="ai", raw_response=response)

    def build_prompt(self, user_input: str) -> str:
        return CLASSIFICATION_PROMPT.format(user_input=user_input)

    @staticmethod
    def parse_label(response: Any) -> Optional[UserIntent]:
        """Accept only an exact label word, ignoring case and surrounding whitespace."""
        if not isinstance(response, str):
            return None
        label = response.strip().upper()
        if label in UserIntent.__members__:
            return UserIntent[label]
        return None

    def _fallback(
        self,
        user_input: Any,
        has_selection: bool,
        raw_response: Optional[str] = None,
    ) -> IntentDecision:
        decision = self.heuristics.decide(user_input, has_selection)
        return IntentDecision(
            intent=decision.intent,
            layer="heuristic",
            rule=decision.rule,
            raw_response=raw_response,
        )


def build_intent_classifier(config: Config) -> IntentClassifier:
    """
    Wire an IntentClassifier from configuration.

    The model attempt is only set up when it is enabled and a provider
    is configured; otherwise every input goes through the heuristics.
    """
    completion = None
    if config.ai_available:
        provider = LiteLLMProvider(
            api_key=config.provider.api_key or None,
            api_base=config.provider.api_base,
            default_model=config.classifier.model,
            extra_headers=config.provider.extra_headers,
        )
        completion = ProviderCompletionService(
            provider,
            model=config.classifier.model,
            timeout_ms=config.classifier.timeout_ms,
        )
    else:
        logger.debug("AI intent classification unavailable, heuristics only")

    return IntentClassifier(completion=completion, config=config.classifier)
