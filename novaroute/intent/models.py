"""Data models for intent classification."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class UserIntent(str, Enum):
    """Dispatch categories for a line of user input."""
    CHAT = "CHAT"
    METADATA = "METADATA"
    CONTENT = "CONTENT"


class IntentType(str, Enum):
    """Pattern detector verdicts."""
    CONSULTATION = "consultation"
    EDITING = "editing"
    AMBIGUOUS = "ambiguous"


class PatternFamily(str, Enum):
    """Families of detector patterns."""
    CONSULTATION = "consultation"
    EDITING = "editing"


@dataclass(frozen=True)
class PatternRule:
    """A named regular expression belonging to a pattern family."""

    family: PatternFamily
    name: str
    pattern: re.Pattern

    def matches(self, text: str) -> bool:
        """Check whether the rule matches anywhere in `text`."""
        return self.pattern.search(text) is not None


@dataclass
class IntentClassification:
    """Result of the pattern detector.

    `matched_patterns` is empty exactly when `type` is AMBIGUOUS.
    """

    type: IntentType
    confidence: float
    matched_patterns: list[str] = field(default_factory=list)


@dataclass
class HeuristicDecision:
    """Intent chosen by the fallback cascade and the rule that chose it."""

    intent: UserIntent
    rule: str


@dataclass
class IntentDecision:
    """Full answer of the classification orchestrator."""

    intent: UserIntent
    layer: str  # "prefix", "ai" or "heuristic"
    rule: Optional[str] = None
    raw_response: Optional[str] = None
