#!/usr/bin/env python3
"""
Parallel Executor - Worker Pool over Samples

Runs one independent task per sample and collects the results. Completion
order is not preserved; callers sort afterwards.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, List, Sequence, TypeVar

from tqdm import tqdm

from sample_validation.core.data_models import Sample
from sample_validation.cross_validation.config import EVALUATION_DEFAULTS

logger = logging.getLogger(__name__)

T = TypeVar('T')


class ParallelExecutor:
    """
    Fixed-size thread pool that maps a task over samples.

    A task failure is fatal: remaining tasks are cancelled and the
    exception propagates to the caller.

    Tasks share the run context in memory rather than being pickled.
    Pure-Python training and scoring hold the GIL, so extra workers give
    little speedup on CPython; results are the same for any worker count.
    """

    def __init__(
        self,
        workers: int = EVALUATION_DEFAULTS['workers'],
        show_progress: bool = EVALUATION_DEFAULTS['show_progress']
    ):
        """
        Initialize executor.

        Args:
            workers: Number of worker threads (1 = sequential)
            show_progress: Display a tqdm progress bar on stderr
        """
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")

        self.workers = workers
        self.show_progress = show_progress

    def run(self, task: Callable[[Sample], T], samples: Sequence[Sample]) -> List[T]:
        """
        Apply task to every sample.

        Args:
            task: Per-sample function; must only read shared state
            samples: Samples to process

        Returns:
            One result per sample, in completion order
        """
        if self.workers == 1:
            logger.info(f"Evaluating {len(samples)} samples sequentially...")
            return [
                task(sample)
                for sample in tqdm(samples, desc="Evaluating samples", unit="sample",
                                   disable=not self.show_progress)
            ]

        logger.info(f"Evaluating {len(samples)} samples with {self.workers} parallel workers...")
        results = []

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            with tqdm(total=len(samples), desc="Evaluating samples", unit="sample",
                      disable=not self.show_progress) as pbar:
                futures = {executor.submit(task, sample): sample for sample in samples}

                for future in as_completed(futures):
                    sample = futures[future]
                    try:
                        results.append(future.result())
                    except Exception as e:
                        logger.error(f"✗ Failed {sample.path}: {e}")
                        for pending in futures:
                            pending.cancel()
                        raise
                    pbar.update(1)

        return results
