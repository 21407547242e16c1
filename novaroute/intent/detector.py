"""Pattern detector - consultation vs editing signals in free text."""

from typing import Any

from loguru import logger

from .models import IntentClassification, IntentType, PatternRule
from .patterns import CONSULTATION_PATTERNS, EDITING_PATTERNS

CLEAR_MATCH_CONFIDENCE = 0.9
AMBIGUOUS_CONFIDENCE = 0.5


class PatternDetector:
    """
    Stateless scorer over the consultation and editing pattern families.

    A clean single-family match yields that family's type. Conflicting
    signals, or no signal at all, yield AMBIGUOUS and are left for the
    caller to resolve.
    """

    def __init__(
        self,
        consultation_patterns: tuple[PatternRule, ...] = CONSULTATION_PATTERNS,
        editing_patterns: tuple[PatternRule, ...] = EDITING_PATTERNS,
    ):
        self.consultation_patterns = consultation_patterns
        self.editing_patterns = editing_patterns

    def classify(self, text: Any) -> IntentClassification:
        """
        Classify text as consultation, editing or ambiguous.

        Args:
            text: The raw user input. Non-string values are ambiguous.

        Returns:
            IntentClassification with the matched rule names in declaration order
        """
        if not isinstance(text, str):
            return self._ambiguous()

        consultation_matches = self._match(self.consultation_patterns, text)
        editing_matches = self._match(self.editing_patterns, text)

        if consultation_matches and not editing_matches:
            return IntentClassification(
                type=IntentType.CONSULTATION,
                confidence=CLEAR_MATCH_CONFIDENCE,
                matched_patterns=consultation_matches,
            )

        if editing_matches and not consultation_matches:
            return IntentClassification(
                type=IntentType.EDITING,
                confidence=CLEAR_MATCH_CONFIDENCE,
                matched_patterns=editing_matches,
            )

        if consultation_matches and editing_matches:
            logger.debug(
                f"Conflicting patterns {consultation_matches} vs {editing_matches}, ambiguous"
            )
        return self._ambiguous()

    def _match(self, rules: tuple[PatternRule, ...], text: str) -> list[str]:
        return [rule.name for rule in rules if rule.matches(text)]

    def _ambiguous(self) -> IntentClassification:
        return IntentClassification(
            type=IntentType.AMBIGUOUS,
            confidence=AMBIGUOUS_CONFIDENCE,
            matched_patterns=[],
        )
