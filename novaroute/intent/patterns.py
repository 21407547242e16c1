"""Pattern families used by the pattern detector.

Each family is an immutable, ordered tuple of named rules. Order matters:
the detector reports matched rule names in declaration order.
"""

import re
from types import MappingProxyType

from .models import PatternFamily, PatternRule

# Contractions are written with either an ASCII or a typographic apostrophe.
_APOS = "['’]"


def _rule(family: PatternFamily, name: str, regex: str) -> PatternRule:
    return PatternRule(family=family, name=name, pattern=re.compile(regex, re.IGNORECASE))


CONSULTATION_PATTERNS: tuple[PatternRule, ...] = (
    # Anchored: only a sentence-initial time reference counts.
    _rule(
        PatternFamily.CONSULTATION,
        "temporal",
        r"^(now is|today|this week|lately|currently|these days)",
    ),
    _rule(
        PatternFamily.CONSULTATION,
        "personal_state",
        rf"\b(I{_APOS}m (feeling|thinking|working|trying)|I{_APOS}ve been|I was|I feel)\b",
    ),
    _rule(
        PatternFamily.CONSULTATION,
        "reflective",
        rf"\b(reminds me|makes me think|I wonder|I{_APOS}m wondering)\b",
    ),
)

EDITING_PATTERNS: tuple[PatternRule, ...] = (
    _rule(
        PatternFamily.EDITING,
        "command_verb",
        r"\b(write|mak(e|ing)|fix|improve|change|add|remove|rewrite|edit|create|compose|draft|generate)\b",
    ),
    _rule(
        PatternFamily.EDITING,
        "document_reference",
        r"\b(this (section|paragraph|part|text|writing|better)|the writing here|here we|here needs"
        r"|this is (unclear|wrong|confusing|right))\b",
    ),
    _rule(
        PatternFamily.EDITING,
        "quality_assessment",
        r"\b(unclear|needs work|sounds wrong|too wordy|confusing)\b",
    ),
    _rule(
        PatternFamily.EDITING,
        "document_targeting",
        r"\b(at the end|in the (introduction|conclusion)|before this|after that)\b",
    ),
)

PATTERN_FAMILIES = MappingProxyType({
    PatternFamily.CONSULTATION: CONSULTATION_PATTERNS,
    PatternFamily.EDITING: EDITING_PATTERNS,
})
