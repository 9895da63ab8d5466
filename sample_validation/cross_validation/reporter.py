#!/usr/bin/env python3
"""
Reporter - Aggregate, Sort and Gate Cross-Validation Results

Turns the executor's unordered results into a RunReport sorted by path,
prints it, and optionally checks the error count against the acceptance
threshold.
"""

import sys
import json
import logging
from pathlib import Path
from typing import Iterable, Optional, TextIO, Union

from sample_validation.core.data_models import Evaluated, RunReport, Skipped
from sample_validation.cross_validation.config import acceptable_errors
from sample_validation.cross_validation.run_context import RunContext

logger = logging.getLogger(__name__)


class CrossValidationReporter:
    """Aggregates per-sample results into a deterministic report."""

    def __init__(self, check_threshold: bool = False, exhaustive: bool = False):
        """
        Args:
            check_threshold: Compute a pass/fail verdict
            exhaustive: Use the exhaustive-mode threshold
        """
        self.check_threshold = check_threshold
        self.exhaustive = exhaustive

    @classmethod
    def from_context(cls, context: RunContext) -> "CrossValidationReporter":
        """Reporter configured by the run's threshold and mode flags."""
        return cls(check_threshold=context.check_threshold, exhaustive=context.exhaustive)

    def aggregate(self, results: Iterable[Union[Evaluated, Skipped]]) -> RunReport:
        """
        Drop skip markers, sort by path, count failures.

        Args:
            results: Executor output, any order

        Returns:
            RunReport
        """
        outcomes = []
        warnings = set()
        for result in results:
            if isinstance(result, Skipped):
                if result.warning:
                    warnings.add(result.warning)
                continue
            outcomes.append(result)

        outcomes.sort(key=lambda outcome: outcome.path)
        report = RunReport(outcomes=outcomes, warnings=sorted(warnings))

        if self.check_threshold:
            report.threshold = acceptable_errors(self.exhaustive)
            report.passed = report.total_errors <= report.threshold

        return report

    def emit(self, report: RunReport, out: Optional[TextIO] = None):
        """
        Print the report.

        Warnings and threshold violations go to the log (stderr); result
        lines and the "within threshold" verdict go to out (stdout).
        """
        if out is None:
            out = sys.stdout

        for warning in report.warnings:
            logger.warning(warning)

        for outcome in report.outcomes:
            print(outcome.format_line(), file=out)

        if report.passed is None:
            return
        if report.passed:
            print(f"Total errors {report.total_errors} is within threshold {report.threshold}", file=out)
        else:
            logger.error(f"Total errors {report.total_errors} is above threshold {report.threshold}")

    def write_json(self, report: RunReport, output_file: Path):
        """Save the report as JSON."""
        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, 'w') as f:
            json.dump(report.to_dict(), f, indent=2)
        logger.info(f"Results saved to: {output_file}")
