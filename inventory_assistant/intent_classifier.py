from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .utils import normalize_message


class Intent(str, Enum):
    LOW_STOCK = "low_stock"
    TOTAL_VALUE = "total_value"
    TOTAL_STOCK = "total_stock"
    DISTINCT_COUNT = "distinct_count"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class IntentRule:
    """One ordered keyword rule; the pattern is searched, not fully matched."""
    intent: Intent
    pattern: re.Pattern


class IntentClassifier:
    """First-match-wins dispatch over an ordered list of keyword rules."""

    def __init__(self, rules: Iterable[IntentRule]) -> None:
        self._rules: List[IntentRule] = list(rules)

    @classmethod
    def from_patterns(cls, patterns: Iterable[Tuple[str, str]]) -> "IntentClassifier":
        """Purpose: Compile (intent name, regex) pairs from a locale pack into rules.
        Inputs/Outputs: Input is an ordered iterable of pairs; returns a classifier.
        Side Effects / State: None.
        Dependencies: re.compile with IGNORECASE.
        Failure Modes: Unknown intent names (or "unclassified") raise ValueError;
            invalid regex raises re.error.
        If Removed: Keyword sets would have to live in code.
        Testing Notes: Ensure pack order is kept and bad names are rejected.
        """
        # Keep the pack order; it is the tie-break between overlapping rules.
        rules: List[IntentRule] = []
        for name, pattern in patterns:
            intent = Intent(name)
            if intent is Intent.UNCLASSIFIED:
                raise ValueError("'unclassified' cannot be used as a rule intent")
            rules.append(IntentRule(intent=intent, pattern=re.compile(pattern, re.IGNORECASE)))
        return cls(rules)

    @property
    def rules(self) -> Tuple[IntentRule, ...]:
        return tuple(self._rules)

    def match(self, message: Optional[str]) -> Optional[IntentRule]:
        """Return the first rule whose pattern occurs in the lowercased message."""
        lowered = normalize_message(message)
        for rule in self._rules:
            if rule.pattern.search(lowered):
                return rule
        return None

    def classify(self, message: Optional[str]) -> Intent:
        rule = self.match(message)
        return rule.intent if rule else Intent.UNCLASSIFIED
