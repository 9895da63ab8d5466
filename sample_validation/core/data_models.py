from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

UNKNOWN_LANGUAGE = "Unknown"


@dataclass(frozen=True)
class Sample:
    """A labeled source file from the sample corpus."""
    path: str
    language: str
    content: str
    tokens: Tuple[str, ...]
    filename: str
    extension: str

    def to_dict(self) -> Dict:
        """Convert to dictionary representation (content omitted)."""
        return {
            "path": self.path,
            "language": self.language,
            "filename": self.filename,
            "extension": self.extension,
            "token_count": len(self.tokens)
        }


class SkipReason(Enum):
    """Why a sample was left out of evaluation."""
    EXTENSION_NOT_SELECTED = "extension not selected"
    SINGLE_SAMPLE_LANGUAGE = "only one sample for language"
    UNAMBIGUOUS_FILENAME = "filename is unambiguous"
    UNAMBIGUOUS_EXTENSION = "extension is unambiguous"
    HEURISTIC_CATCH_ALL = "extension resolved by heuristics"

    @property
    def warns(self) -> bool:
        return self is SkipReason.SINGLE_SAMPLE_LANGUAGE


@dataclass(frozen=True)
class Skipped:
    """Skip marker for a sample that carries no pass/fail signal."""
    path: str
    language: str
    reason: SkipReason

    @property
    def warning(self) -> Optional[str]:
        if not self.reason.warns:
            return None
        return f"Skipping {self.language}; need more than one sample for this language"


@dataclass(frozen=True)
class Evaluated:
    """Outcome of classifying one held-out sample."""
    path: str
    expected: str
    predicted: Optional[str]

    @property
    def good(self) -> bool:
        return self.predicted == self.expected

    def format_line(self) -> str:
        if self.good:
            return f"{self.path} GOOD"
        return f"{self.path} BAD ({self.predicted or UNKNOWN_LANGUAGE})"

    def to_dict(self) -> Dict:
        return {
            "path": self.path,
            "expected": self.expected,
            "predicted": self.predicted or UNKNOWN_LANGUAGE,
            "good": self.good
        }


@dataclass(frozen=True)
class Candidates:
    """Languages a classification call may choose among (None = all)."""
    languages: Optional[Tuple[str, ...]] = None


@dataclass
class RunReport:
    """Sorted, threshold-checked summary of a cross-validation run."""
    outcomes: List[Evaluated]
    warnings: List[str] = field(default_factory=list)
    threshold: Optional[int] = None
    passed: Optional[bool] = None

    @property
    def total_errors(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.good)

    def to_dict(self) -> Dict:
        return {
            "total_evaluated": len(self.outcomes),
            "total_errors": self.total_errors,
            "threshold": self.threshold,
            "passed": self.passed,
            "warnings": list(self.warnings),
            "results": [outcome.to_dict() for outcome in self.outcomes]
        }
