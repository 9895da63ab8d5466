"""
Sample Validation - Language Classifier Regression Gate

Leave-one-out cross-validation of a token-based language classifier over a
labeled corpus of source-code samples, used to catch accuracy regressions
before classifier changes are accepted.
"""

__version__ = "1.0.0"
