"""
Leave-One-Out Cross-Validation for the Language Classifier

Measures classifier accuracy with strict sample exclusion and gates the
result on a fixed error threshold.

Main Components:
- config: Acceptance thresholds and defaults
- run_context: Immutable per-run configuration and corpus
- skip_set: Extensions already resolved by catch-all heuristics
- ambiguity_filter: Which samples are worth testing, and among which languages
- loocv_evaluator: Train-without-sample, classify, compare
- parallel_executor: Worker pool over samples
- reporter: Sorted report and threshold gate
- main: CLI entry point
"""

__version__ = "1.0.0"
