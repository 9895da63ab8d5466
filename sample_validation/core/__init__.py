"""
Collaborators used by the cross-validation harness: corpus loading,
tokenization, language metadata, heuristic rules and the token classifier.
"""
