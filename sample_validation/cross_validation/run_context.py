#!/usr/bin/env python3
"""
Run Context - Immutable Per-Run Configuration

Everything the evaluation tasks read is frozen here before any of them
starts: the corpus, per-language sample counts, the heuristic skip-set and
the mode flags.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Iterable, List, Mapping, Optional, Tuple

from sample_validation.core.corpus import count_languages
from sample_validation.core.data_models import Sample
from sample_validation.core.heuristics import Heuristic
from sample_validation.core.languages import LanguageRegistry
from sample_validation.cross_validation.skip_set import build_skip_set

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunContext:
    """Read-only state shared by every evaluation task."""
    samples: Tuple[Sample, ...]
    languages: LanguageRegistry
    language_counts: Mapping[str, int]
    skip_set: FrozenSet[str] = frozenset()
    exhaustive: bool = False
    extensions: Optional[FrozenSet[str]] = None
    check_threshold: bool = False

    def __post_init__(self):
        paths = [sample.path for sample in self.samples]
        if len(set(paths)) != len(paths):
            raise ValueError("Sample paths must be unique")

    @classmethod
    def build(
        cls,
        samples: Iterable[Sample],
        languages: LanguageRegistry,
        heuristics: List[Heuristic],
        exhaustive: bool = False,
        extensions: Optional[Iterable[str]] = None,
        check_threshold: bool = False
    ) -> "RunContext":
        """
        Compute the derived state once and freeze it.

        Args:
            samples: The whole corpus
            languages: Language registry for filename/extension lookups
            heuristics: Heuristic rules used to build the skip-set
            exhaustive: Evaluate every sample against every language
            extensions: Optional extension allow-list (leading dots)
            check_threshold: Gate the run on the acceptance threshold

        Returns:
            RunContext
        """
        samples = tuple(samples)
        skip_set = build_skip_set(heuristics, exhaustive=exhaustive)
        context = cls(
            samples=samples,
            languages=languages,
            language_counts=MappingProxyType(count_languages(samples)),
            skip_set=skip_set,
            exhaustive=exhaustive,
            extensions=frozenset(extensions) if extensions is not None else None,
            check_threshold=check_threshold
        )

        logger.info("Initialized RunContext:")
        logger.info(f"  Samples: {len(samples)}")
        logger.info(f"  Mode: {'exhaustive' if exhaustive else 'ambiguous extensions only'}")
        logger.info(f"  Skip-set: {len(skip_set)} extensions resolved by heuristics")
        if context.extensions is not None:
            logger.info(f"  Extensions: {', '.join(sorted(context.extensions))}")
        return context
