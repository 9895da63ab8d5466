#!/usr/bin/env python3
"""
Heuristics - Content-Based Disambiguation Rules

Loads disambiguation rules from a heuristics.yml file. Each heuristic owns a
set of extensions and an ordered list of rules; the first rule whose matcher
accepts the file content decides the language(s).

A rule with no pattern at all always matches. When that rule comes last it
is a catch-all: every file with one of the heuristic's extensions is
resolved by heuristics alone.
"""

import re
import logging
import threading
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import yaml

logger = logging.getLogger(__name__)


class AlwaysMatch:
    """Unconditional matcher."""

    def match(self, content: str) -> bool:
        return True


class PatternMatch:
    """Matches when any of the given regular expressions is found."""

    def __init__(self, patterns: Iterable[str]):
        self.source = '|'.join(f'(?:{p})' for p in patterns)
        self._regex = None
        self._lock = threading.Lock()

    @property
    def regex(self) -> "re.Pattern":
        # Compiled on first use; shared by worker threads
        with self._lock:
            if self._regex is None:
                try:
                    self._regex = re.compile(self.source, re.MULTILINE)
                except re.error as e:
                    raise ValueError(f"Invalid heuristic pattern {self.source!r}: {e}") from e
            return self._regex

    def match(self, content: str) -> bool:
        return self.regex.search(content) is not None


class NegativePatternMatch(PatternMatch):
    """Matches when none of the given regular expressions is found."""

    def match(self, content: str) -> bool:
        return not super().match(content)


class AndMatch:
    """Matches when every sub-matcher matches."""

    def __init__(self, matchers: List):
        self.matchers = matchers

    def match(self, content: str) -> bool:
        return all(m.match(content) for m in self.matchers)


def _as_list(value) -> List[str]:
    if value is None:
        return []
    if isinstance(value, list):
        return [str(v) for v in value]
    return [str(value)]


def build_matcher(rule: Dict, named_patterns: Dict[str, List[str]]):
    """Turn one rule mapping into a matcher object."""
    matchers = []

    if 'pattern' in rule:
        matchers.append(PatternMatch(_as_list(rule['pattern'])))
    if 'negative_pattern' in rule:
        matchers.append(NegativePatternMatch(_as_list(rule['negative_pattern'])))
    if 'named_pattern' in rule:
        name = rule['named_pattern']
        if name not in named_patterns:
            raise ValueError(f"Unknown named pattern: {name}")
        matchers.append(PatternMatch(named_patterns[name]))
    if 'and' in rule:
        matchers.append(AndMatch([build_matcher(sub, named_patterns) for sub in rule['and']]))

    if not matchers:
        return AlwaysMatch()
    if len(matchers) == 1:
        return matchers[0]
    return AndMatch(matchers)


class HeuristicRule:
    """A matcher plus the language(s) it resolves to."""

    def __init__(self, languages: List[str], matcher):
        self.languages = languages
        self.matcher = matcher

    @property
    def is_unconditional(self) -> bool:
        return isinstance(self.matcher, AlwaysMatch)


class Heuristic:
    """Ordered disambiguation rules for a set of extensions."""

    def __init__(self, extensions: Iterable[str], rules: List[HeuristicRule]):
        self.extensions = frozenset(extensions)
        self.rules = rules

    @classmethod
    def from_dict(cls, data: Dict, named_patterns: Optional[Dict[str, List[str]]] = None) -> "Heuristic":
        named_patterns = named_patterns or {}
        rules = [
            HeuristicRule(_as_list(rule.get('language')), build_matcher(rule, named_patterns))
            for rule in data.get('rules', [])
        ]
        return cls(_as_list(data.get('extensions')), rules)

    def ends_in_catch_all(self) -> bool:
        """True when the last rule matches unconditionally."""
        return bool(self.rules) and self.rules[-1].is_unconditional

    def call(self, content: str) -> List[str]:
        """Languages of the first rule matching content; empty if none."""
        for rule in self.rules:
            if rule.matcher.match(content):
                return list(rule.languages)
        return []


def load_heuristics(path: Path) -> List[Heuristic]:
    """
    Load heuristics from a heuristics.yml file.

    Args:
        path: YAML document with `disambiguations` and optional `named_patterns`

    Returns:
        List of Heuristic objects in document order
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Heuristics file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"{path}: invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping with 'disambiguations'")

    named_patterns = {
        name: _as_list(patterns)
        for name, patterns in (data.get('named_patterns') or {}).items()
    }
    heuristics = [
        Heuristic.from_dict(entry, named_patterns)
        for entry in data.get('disambiguations') or []
    ]

    logger.info(f"Loaded {len(heuristics)} heuristics from {path}")
    return heuristics
