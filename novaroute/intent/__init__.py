"""
Intent classification for chat input.

Routes a line of user input to CHAT, METADATA or CONTENT:
1. Best-effort model classification through a completion service
2. Deterministic heuristic cascade (greetings, questions, verbs, patterns)
"""

from .classifier import IntentClassifier, build_intent_classifier
from .detector import PatternDetector
from .heuristics import HEURISTIC_RULES, HeuristicClassifier
from .models import (
    HeuristicDecision,
    IntentClassification,
    IntentDecision,
    IntentType,
    PatternFamily,
    PatternRule,
    UserIntent,
)
from .patterns import CONSULTATION_PATTERNS, EDITING_PATTERNS, PATTERN_FAMILIES

__all__ = [
    "IntentClassifier",
    "build_intent_classifier",
    "HeuristicClassifier",
    "HEURISTIC_RULES",
    "PatternDetector",
    "UserIntent",
    "IntentType",
    "PatternFamily",
    "PatternRule",
    "IntentClassification",
    "HeuristicDecision",
    "IntentDecision",
    "CONSULTATION_PATTERNS",
    "EDITING_PATTERNS",
    "PATTERN_FAMILIES",
]
