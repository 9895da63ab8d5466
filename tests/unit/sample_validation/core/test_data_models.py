"""
Unit tests for outcome and report data models.
"""
from sample_validation.core.data_models import (
    Evaluated,
    RunReport,
    Skipped,
    SkipReason,
    UNKNOWN_LANGUAGE
)


class TestEvaluated:
    """Test suite for Evaluated outcomes."""

    def test_good(self):
        outcome = Evaluated(path="samples/Matlab/B1.m", expected="Matlab", predicted="Matlab")

        assert outcome.good
        assert outcome.format_line() == "samples/Matlab/B1.m GOOD"

    def test_bad(self):
        outcome = Evaluated(path="samples/Matlab/B1.m", expected="Matlab", predicted="Objective-C")

        assert not outcome.good
        assert outcome.format_line() == "samples/Matlab/B1.m BAD (Objective-C)"

    def test_bad_unknown(self):
        outcome = Evaluated(path="samples/Matlab/B1.m", expected="Matlab", predicted=None)

        assert not outcome.good
        assert outcome.format_line() == f"samples/Matlab/B1.m BAD ({UNKNOWN_LANGUAGE})"
        assert outcome.to_dict()['predicted'] == "Unknown"


class TestSkipped:
    """Test suite for skip markers."""

    def test_single_sample_language_warns(self):
        skipped = Skipped(path="samples/Rare/x.r", language="Rare",
                          reason=SkipReason.SINGLE_SAMPLE_LANGUAGE)

        assert "Rare" in skipped.warning

    def test_other_reasons_silent(self):
        for reason in SkipReason:
            if reason is SkipReason.SINGLE_SAMPLE_LANGUAGE:
                continue
            assert Skipped(path="p", language="L", reason=reason).warning is None


class TestRunReport:
    """Test suite for RunReport."""

    def test_total_errors_and_dict(self):
        report = RunReport(outcomes=[
            Evaluated(path="a", expected="X", predicted="X"),
            Evaluated(path="b", expected="X", predicted="Y"),
            Evaluated(path="c", expected="X", predicted=None),
        ], threshold=5, passed=True)

        data = report.to_dict()

        assert report.total_errors == 2
        assert data['total_evaluated'] == 3
        assert data['total_errors'] == 2
        assert data['threshold'] == 5
        assert data['passed'] is True
        assert [r['path'] for r in data['results']] == ["a", "b", "c"]
