#!/usr/bin/env python3
"""
Token Classifier - Multinomial Naive Bayes over Source Tokens

Training accumulates per-language token counts in a mutable database;
finalize() freezes them into a TrainedModel holding log probabilities.
Classification ranks candidate languages by

    log P(language) + sum(log P(token | language))

with add-one smoothing over the vocabulary seen in training.
"""

import math
import logging
from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from sample_validation.core.tokenizer import extract_tokens

logger = logging.getLogger(__name__)


class TokenClassifier:
    """Training database: token statistics accumulated per language."""

    def __init__(self):
        self.token_counts: Dict[str, Counter] = defaultdict(Counter)
        self.sample_counts: Counter = Counter()
        self.finalized = False

    def train(self, language: str, tokens: Iterable[str]):
        """Add one sample's tokens under its language."""
        if self.finalized:
            raise RuntimeError("Cannot train a finalized classifier")
        self.token_counts[language].update(tokens)
        self.sample_counts[language] += 1

    def finalize(self) -> "TrainedModel":
        """Freeze the accumulated statistics into a TrainedModel."""
        self.finalized = True

        vocabulary = set()
        for counts in self.token_counts.values():
            vocabulary.update(counts)
        vocabulary_size = len(vocabulary) + 1  # +1 for unseen tokens

        total_samples = sum(self.sample_counts.values())
        priors = {}
        token_log_probs = {}
        unseen_log_probs = {}

        for language, counts in self.token_counts.items():
            total_tokens = sum(counts.values())
            denominator = total_tokens + vocabulary_size
            priors[language] = math.log(self.sample_counts[language] / total_samples)
            token_log_probs[language] = {
                token: math.log((count + 1) / denominator)
                for token, count in counts.items()
            }
            unseen_log_probs[language] = math.log(1 / denominator)

        logger.debug(f"Finalized classifier: {len(priors)} languages, "
                     f"{vocabulary_size - 1} distinct tokens")
        return TrainedModel(priors, token_log_probs, unseen_log_probs)


class TrainedModel:
    """Immutable result of TokenClassifier.finalize()."""

    def __init__(
        self,
        priors: Dict[str, float],
        token_log_probs: Dict[str, Dict[str, float]],
        unseen_log_probs: Dict[str, float]
    ):
        self._priors = priors
        self._token_log_probs = token_log_probs
        self._unseen_log_probs = unseen_log_probs

    @property
    def languages(self) -> List[str]:
        return sorted(self._priors)

    def score(self, tokens: List[str], language: str) -> float:
        log_probs = self._token_log_probs[language]
        unseen = self._unseen_log_probs[language]
        return self._priors[language] + sum(log_probs.get(t, unseen) for t in tokens)

    def classify(
        self,
        content: str,
        languages: Optional[Iterable[str]] = None
    ) -> List[Tuple[str, float]]:
        """
        Rank languages for a piece of source text.

        Args:
            content: Raw file content
            languages: Candidate languages (None = every trained language).
                       Candidates absent from training are ignored.

        Returns:
            (language, score) pairs, best first; ties broken by name
        """
        if languages is None:
            candidates = self.languages
        else:
            candidates = [lang for lang in dict.fromkeys(languages) if lang in self._priors]

        if not candidates:
            return []

        tokens = extract_tokens(content)
        scores = [(language, self.score(tokens, language)) for language in candidates]
        return sorted(scores, key=lambda pair: (-pair[1], pair[0]))
