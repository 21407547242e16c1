"""Deterministic fallback classifier.

The cascade below is evaluated top to bottom and the first rule that returns
an intent wins. The order of HEURISTIC_RULES is the behavior: sentence-initial
verbs are checked before the verb-anywhere scan, which is checked before the
whole-sentence pattern families.
"""

import re
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Callable, Optional

from loguru import logger

from .detector import PatternDetector
from .models import HeuristicDecision, IntentClassification, IntentType, UserIntent


# ========== LEXICONS ==========

PRIMARY_EDITING_VERBS = (
    "write", "add", "create", "insert", "make", "edit", "compose", "draft",
    "generate", "modify", "update", "revise", "enhance", "append", "prepend",
)

PRIMARY_ANALYSIS_VERBS = (
    "summarize", "analyze", "describe", "discuss", "review", "evaluate",
    "assess", "compare", "contrast", "tell", "show", "list", "find", "search",
    "identify", "explain",
)

EDITING_VERBS = PRIMARY_EDITING_VERBS + (
    "fix", "improve", "change", "remove", "delete", "condense", "shorten",
    "expand", "adjust", "correct", "rewrite",
)

# A bare editing verb means "insert at cursor".
SINGLE_EDITING_WORDS = frozenset({"add", "write", "create", "insert", "make", "edit", "fix"})

_GREETING_END = r"(\s|$|[.,!?])"
GREETING_PATTERNS = (
    re.compile(rf"^(hi|hello|hey|hiya|howdy){_GREETING_END}"),
    re.compile(rf"^(hi|hello|hey|hiya|howdy)\s+(nova|there){_GREETING_END}"),
    re.compile(rf"^good\s+(morning|afternoon|evening|night){_GREETING_END}"),
    re.compile(rf"^nova{_GREETING_END}"),
)

_QUESTION_WORD = re.compile(r"^(what|why|how|when|where|who)\s")
_REQUEST_OPENER = re.compile(r"^(can you|could you|please)\s")
_EXPLAIN = re.compile(r"\bexplain\b")
_HELP_ME_UNDERSTAND = re.compile(r"\bhelp me understand\b")
_EXPLAIN_MIN_LENGTH = 10

_EDITING_VERB = re.compile(r"\b(" + "|".join(EDITING_VERBS) + r")\b")

_EDITING_LANGUAGE = re.compile(
    r"\b(better|clearer|more|less|section|paragraph|text|content|here|this)\b"
)

METADATA_PATTERNS = (
    re.compile(r"\btags?\b", re.IGNORECASE),
    re.compile(r"\btagging\b", re.IGNORECASE),
    re.compile(r"\b(title|author|date|status|category|categories)\b", re.IGNORECASE),
    re.compile(r"\b(metadata|frontmatter|properties|property)\b", re.IGNORECASE),
    re.compile(r"^(add|update|set|remove|clean|optimize)\s+(tags?|title|author|metadata)", re.IGNORECASE),
)


# ========== PREDICATES ==========
# All predicates take the lowercased, trimmed input.

def _starts_with_word(lowered: str, words: tuple[str, ...]) -> bool:
    return any(lowered == word or lowered.startswith(word + " ") for word in words)


def is_greeting(lowered: str) -> bool:
    """Anchored greeting check; "highlight" or "higher" are not greetings."""
    return any(pattern.search(lowered) for pattern in GREETING_PATTERNS)


def is_question(lowered: str) -> bool:
    return (
        "?" in lowered
        or _QUESTION_WORD.search(lowered) is not None
        or _REQUEST_OPENER.search(lowered) is not None
        or (_EXPLAIN.search(lowered) is not None and len(lowered) > _EXPLAIN_MIN_LENGTH)
        or _HELP_ME_UNDERSTAND.search(lowered) is not None
    )


def is_primary_editing_action(lowered: str) -> bool:
    return _starts_with_word(lowered, PRIMARY_EDITING_VERBS)


def is_primary_analysis_action(lowered: str) -> bool:
    return _starts_with_word(lowered, PRIMARY_ANALYSIS_VERBS)


def has_editing_verb(lowered: str) -> bool:
    return _EDITING_VERB.search(lowered) is not None


def is_metadata_related(lowered: str) -> bool:
    """Tags, titles, authorship and frontmatter-style properties."""
    return any(pattern.search(lowered) for pattern in METADATA_PATTERNS)


def is_single_editing_word(lowered: str) -> bool:
    return lowered.strip() in SINGLE_EDITING_WORDS


def contains_editing_language(lowered: str) -> bool:
    return _EDITING_LANGUAGE.search(lowered) is not None


# ========== CASCADE ==========

class Utterance:
    """One piece of user input as seen by the cascade."""

    def __init__(self, text: str, has_selection: bool, detector: PatternDetector):
        self.text = text
        self.lowered = text.lower().strip()
        self.has_selection = has_selection
        self._detector = detector

    @cached_property
    def detection(self) -> IntentClassification:
        """Pattern detector verdict on the raw input, computed once."""
        return self._detector.classify(self.text)


@dataclass(frozen=True)
class HeuristicRule:
    """A cascade stage: returns an intent when decisive, None to pass."""

    name: str
    resolve: Callable[[Utterance], Optional[UserIntent]]


def _edit_target(utterance: Utterance) -> UserIntent:
    """Every editing branch splits between METADATA and CONTENT the same way."""
    if is_metadata_related(utterance.lowered):
        return UserIntent.METADATA
    return UserIntent.CONTENT


def _greeting(u: Utterance) -> Optional[UserIntent]:
    return UserIntent.CHAT if is_greeting(u.lowered) else None


def _question(u: Utterance) -> Optional[UserIntent]:
    return UserIntent.CHAT if is_question(u.lowered) else None


def _primary_editing_action(u: Utterance) -> Optional[UserIntent]:
    return _edit_target(u) if is_primary_editing_action(u.lowered) else None


def _primary_analysis_action(u: Utterance) -> Optional[UserIntent]:
    return UserIntent.CHAT if is_primary_analysis_action(u.lowered) else None


def _editing_verb(u: Utterance) -> Optional[UserIntent]:
    return _edit_target(u) if has_editing_verb(u.lowered) else None


def _pattern_detector(u: Utterance) -> Optional[UserIntent]:
    if u.detection.type == IntentType.EDITING:
        return _edit_target(u)
    if u.detection.type == IntentType.CONSULTATION:
        return UserIntent.CHAT
    return None


def _ambiguous_resolution(u: Utterance) -> Optional[UserIntent]:
    if u.detection.type != IntentType.AMBIGUOUS:
        return None
    if is_metadata_related(u.lowered):
        return UserIntent.METADATA
    if is_single_editing_word(u.lowered):
        return UserIntent.CONTENT
    return UserIntent.CHAT


def _final_fallback(u: Utterance) -> Optional[UserIntent]:
    if is_metadata_related(u.lowered):
        return UserIntent.METADATA
    if contains_editing_language(u.lowered):
        return UserIntent.CONTENT
    return UserIntent.CHAT


HEURISTIC_RULES: tuple[HeuristicRule, ...] = (
    HeuristicRule("greeting", _greeting),
    HeuristicRule("question", _question),
    HeuristicRule("primary_editing_action", _primary_editing_action),
    # Must stay ahead of editing_verb: "explain how to add items" is a question
    # about adding, not an edit.
    HeuristicRule("primary_analysis_action", _primary_analysis_action),
    HeuristicRule("editing_verb", _editing_verb),
    HeuristicRule("pattern_detector", _pattern_detector),
    HeuristicRule("ambiguous_resolution", _ambiguous_resolution),
    HeuristicRule("final_fallback", _final_fallback),
)


class HeuristicClassifier:
    """
    Rule-cascade classifier used whenever the model answer is unavailable.

    Always terminates with one of the three intents and never raises,
    whatever it is given.
    """

    def __init__(
        self,
        detector: Optional[PatternDetector] = None,
        rules: tuple[HeuristicRule, ...] = HEURISTIC_RULES,
    ):
        self.detector = detector or PatternDetector()
        self.rules = rules

    def decide(self, text: Any, has_selection: bool = False) -> HeuristicDecision:
        """
        Run the cascade and report which rule decided.

        Args:
            text: The raw user input
            has_selection: Whether the editor has an active text selection

        Returns:
            HeuristicDecision with the intent and the deciding rule name
        """
        if not isinstance(text, str):
            logger.debug(f"Non-text input of type {type(text).__name__}, defaulting to CHAT")
            return HeuristicDecision(intent=UserIntent.CHAT, rule="non_text_input")

        utterance = Utterance(text, has_selection, self.detector)
        for rule in self.rules:
            intent = rule.resolve(utterance)
            if intent is not None:
                logger.debug(
                    f"Heuristic rule '{rule.name}' -> {intent.value} "
                    f"(selection={has_selection})"
                )
                return HeuristicDecision(intent=intent, rule=rule.name)

        return HeuristicDecision(intent=UserIntent.CHAT, rule="default")

    def classify(self, text: Any, has_selection: bool = False) -> UserIntent:
        """Classify text into CHAT, METADATA or CONTENT."""
        return self.decide(text, has_selection).intent
