#!/usr/bin/env python3
"""
Cross-Validation Configuration

Centralized constants and defaults for the leave-one-out harness.
"""

import os

# Acceptance thresholds for --test. These are regression ratchets:
# lower them when accuracy improves, never raise them.
ACCEPTABLE_ERRORS = 80          # default mode (ambiguous extensions only)
ACCEPTABLE_ERRORS_ALL = 1000    # --all (every sample, every language)

# Default locations, relative to the working directory
PATH_DEFAULTS = {
    'samples_dir': 'samples',
    'languages_file': 'languages.yml',
    'heuristics_file': 'heuristics.yml'
}

# Evaluation defaults
EVALUATION_DEFAULTS = {
    'workers': os.cpu_count() or 1,
    'show_progress': True
}

# Fewer samples than this for a language leaves nothing to train on
MIN_SAMPLES_PER_LANGUAGE = 2


def acceptable_errors(exhaustive: bool) -> int:
    """Threshold for the given mode."""
    return ACCEPTABLE_ERRORS_ALL if exhaustive else ACCEPTABLE_ERRORS
