#!/usr/bin/env python3
"""
LOOCV Evaluator - Leave-One-Out Classification of a Single Sample

For each eligible sample a fresh classifier is trained on every other
sample in the corpus, then asked to classify the held-out content. The
sample never contributes to its own training database.
"""

import logging
from typing import Callable, Optional, Union

from sample_validation.core.classifier import TokenClassifier
from sample_validation.core.data_models import Candidates, Evaluated, Sample, Skipped
from sample_validation.cross_validation.ambiguity_filter import AmbiguityFilter
from sample_validation.cross_validation.run_context import RunContext

logger = logging.getLogger(__name__)


class LeaveOneOutEvaluator:
    """
    Evaluates the classifier on one held-out sample at a time.

    Instances are safe to share between worker threads: the context is
    read-only and every call builds its own training database.
    """

    def __init__(
        self,
        context: RunContext,
        classifier_factory: Optional[Callable[[], TokenClassifier]] = None
    ):
        """
        Initialize evaluator.

        Args:
            context: Immutable run configuration and corpus
            classifier_factory: Builds an empty training database
                                (default: TokenClassifier)
        """
        self.context = context
        self.classifier_factory = classifier_factory or TokenClassifier
        self.ambiguity_filter = AmbiguityFilter(context)

    def evaluate(self, sample: Sample, candidates: Candidates) -> Evaluated:
        """
        Train without the sample, classify it, compare to ground truth.

        Args:
            sample: Held-out sample
            candidates: Languages the classifier may choose among

        Returns:
            Evaluated outcome (predicted is None when nothing was ranked)
        """
        classifier = self.classifier_factory()
        for other in self.context.samples:
            if other.path == sample.path:
                continue
            classifier.train(other.language, other.tokens)
        model = classifier.finalize()

        ranked = model.classify(sample.content, candidates.languages)
        predicted = ranked[0][0] if ranked else None

        logger.debug(f"{sample.path}: expected {sample.language}, predicted {predicted}")
        return Evaluated(path=sample.path, expected=sample.language, predicted=predicted)

    def evaluate_sample(self, sample: Sample) -> Union[Evaluated, Skipped]:
        """Filter, then evaluate: the per-task function for the executor."""
        selection = self.ambiguity_filter.select(sample)
        if isinstance(selection, Skipped):
            return selection
        return self.evaluate(sample, selection)
