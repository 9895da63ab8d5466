#!/usr/bin/env python3
"""
Main CLI - Leave-One-Out Cross-Validation of the Language Classifier

For every sample worth testing, trains the classifier on all other samples
and checks that the held-out sample is classified as its own language.
Prints one GOOD/BAD line per sample, sorted by path.
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from sample_validation.core.corpus import load_samples
from sample_validation.core.heuristics import load_heuristics
from sample_validation.core.languages import LanguageRegistry
from sample_validation.cross_validation.config import (
    ACCEPTABLE_ERRORS,
    ACCEPTABLE_ERRORS_ALL,
    EVALUATION_DEFAULTS,
    PATH_DEFAULTS
)
from sample_validation.cross_validation.loocv_evaluator import LeaveOneOutEvaluator
from sample_validation.cross_validation.parallel_executor import ParallelExecutor
from sample_validation.cross_validation.reporter import CrossValidationReporter
from sample_validation.cross_validation.run_context import RunContext

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


class UsageErrorParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on bad arguments."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _extension_list(value: str) -> List[str]:
    extensions = [ext.strip() for ext in value.split(",") if ext.strip()]
    if not extensions:
        raise argparse.ArgumentTypeError("expected a comma-separated list of extensions")
    return extensions


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = UsageErrorParser(
        prog="sample-cross-validation",
        description="Leave-one-out cross-validation of the language classifier",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Ambiguous extensions only, restricted to their candidate languages
  sample-cross-validation

  # Every sample against every language
  sample-cross-validation --all

  # Only .h and .m samples, fail if errors exceed the threshold
  sample-cross-validation --extensions=.h,.m --test

Thresholds for --test: {ACCEPTABLE_ERRORS} errors (default), {ACCEPTABLE_ERRORS_ALL} errors (--all)
        """
    )

    parser.add_argument("--all", dest="exhaustive", action="store_true",
                       help="Test every sample against every language (disables heuristics skip-set)")
    parser.add_argument("--extensions", type=_extension_list, default=None,
                       help="Comma-separated extensions to test, with leading dots (e.g. .h,.m)")
    parser.add_argument("--test", action="store_true",
                       help="Exit with status 1 if the error count exceeds the acceptable threshold")
    parser.add_argument("--samples-dir", type=Path, default=Path(PATH_DEFAULTS['samples_dir']),
                       help="Sample corpus directory (default: %(default)s)")
    parser.add_argument("--languages", type=Path, default=Path(PATH_DEFAULTS['languages_file']),
                       help="Language metadata YAML (default: %(default)s)")
    parser.add_argument("--heuristics", type=Path, default=Path(PATH_DEFAULTS['heuristics_file']),
                       help="Heuristic rules YAML (default: %(default)s)")
    parser.add_argument("--workers", type=int, default=EVALUATION_DEFAULTS['workers'],
                       help="Parallel workers (default: %(default)s)")
    parser.add_argument("--output", type=Path, default=None,
                       help="Also write the report as JSON to this file")
    parser.add_argument("--no-progress", action="store_true",
                       help="Disable the progress bar")
    parser.add_argument("--verbose", "-v", action="store_true",
                       help="Verbose output")

    args = parser.parse_args(argv)
    if args.workers < 1:
        parser.error(f"--workers must be >= 1, got {args.workers}")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run cross-validation.

    Returns:
        Process exit status (0 success, 1 failure)
    """
    args = parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        languages = LanguageRegistry.load(args.languages)
        # Exhaustive mode ignores heuristics entirely
        heuristics = [] if args.exhaustive else load_heuristics(args.heuristics)
        samples = load_samples(args.samples_dir)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    context = RunContext.build(
        samples=samples,
        languages=languages,
        heuristics=heuristics,
        exhaustive=args.exhaustive,
        extensions=args.extensions,
        check_threshold=args.test
    )

    evaluator = LeaveOneOutEvaluator(context)
    executor = ParallelExecutor(workers=args.workers, show_progress=not args.no_progress)
    results = executor.run(evaluator.evaluate_sample, context.samples)

    reporter = CrossValidationReporter.from_context(context)
    report = reporter.aggregate(results)
    reporter.emit(report)

    if args.output:
        reporter.write_json(report, args.output)

    return 1 if report.passed is False else 0


if __name__ == "__main__":
    sys.exit(main())
