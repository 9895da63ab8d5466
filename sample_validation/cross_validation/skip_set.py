#!/usr/bin/env python3
"""
Heuristic Skip-Set Builder

Extensions owned by a heuristic that ends in an unconditional rule are
always resolved before the classifier runs, so testing the classifier on
them measures nothing.
"""

import logging
from typing import FrozenSet, Iterable

from sample_validation.core.heuristics import Heuristic

logger = logging.getLogger(__name__)


def build_skip_set(heuristics: Iterable[Heuristic], exhaustive: bool = False) -> FrozenSet[str]:
    """
    Collect extensions fully resolved by a catch-all heuristic.

    Args:
        heuristics: Heuristic rule set
        exhaustive: In exhaustive mode nothing is skipped

    Returns:
        Frozen set of extensions (with leading dots)
    """
    if exhaustive:
        return frozenset()

    skip_set = set()
    for heuristic in heuristics:
        if heuristic.ends_in_catch_all():
            skip_set.update(heuristic.extensions)

    logger.debug(f"Skip-set: {sorted(skip_set)}")
    return frozenset(skip_set)
