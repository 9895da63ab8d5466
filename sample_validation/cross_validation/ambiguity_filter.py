#!/usr/bin/env python3
"""
Ambiguity Filter - Which Samples Are Worth Testing

In default mode only samples whose extension is claimed by several languages
are evaluated, and classification is restricted to those languages. In
exhaustive mode every sample is evaluated against every language.
"""

import logging
from typing import Union

from sample_validation.core.data_models import Candidates, Sample, Skipped, SkipReason
from sample_validation.cross_validation.config import MIN_SAMPLES_PER_LANGUAGE
from sample_validation.cross_validation.run_context import RunContext

logger = logging.getLogger(__name__)


class AmbiguityFilter:
    """Decides eligibility and candidate languages for one sample."""

    def __init__(self, context: RunContext):
        self.context = context

    def _skip(self, sample: Sample, reason: SkipReason) -> Skipped:
        logger.debug(f"Skipping {sample.path}: {reason.value}")
        return Skipped(path=sample.path, language=sample.language, reason=reason)

    def select(self, sample: Sample) -> Union[Skipped, Candidates]:
        """
        Args:
            sample: Sample under consideration

        Returns:
            Skipped marker, or the Candidates to classify among
        """
        context = self.context

        # Single-sample languages always warn, whatever else would skip them
        if context.language_counts.get(sample.language, 0) < MIN_SAMPLES_PER_LANGUAGE:
            return self._skip(sample, SkipReason.SINGLE_SAMPLE_LANGUAGE)

        if context.extensions is not None and sample.extension not in context.extensions:
            return self._skip(sample, SkipReason.EXTENSION_NOT_SELECTED)

        if context.exhaustive:
            return Candidates(languages=None)

        by_filename = [lang.name for lang in context.languages.find_by_filename(sample.path)]
        if len(by_filename) == 1:
            return self._skip(sample, SkipReason.UNAMBIGUOUS_FILENAME)

        by_extension = [lang.name for lang in context.languages.find_by_extension(sample.path)]
        if len(by_extension) < 2:
            return self._skip(sample, SkipReason.UNAMBIGUOUS_EXTENSION)

        if sample.extension in context.skip_set:
            return self._skip(sample, SkipReason.HEURISTIC_CATCH_ALL)

        if by_filename:
            # May end up empty; the evaluator reports that as Unknown
            return Candidates(languages=tuple(lang for lang in by_extension if lang in by_filename))
        return Candidates(languages=tuple(by_extension))
