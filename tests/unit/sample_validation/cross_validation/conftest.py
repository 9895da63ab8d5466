"""
Pytest fixtures for the cross-validation harness tests.
"""
import pytest

from sample_validation.core.corpus import count_languages
from sample_validation.cross_validation.run_context import RunContext


@pytest.fixture
def mixed_samples(make_sample):
    """
    In-memory corpus covering every filter branch.

    - Rakefile: filename claimed by Ruby only
    - *.txt: extension claimed by Text only
    - *.m: Matlab / Objective-C
    - *.pl: Perl / Prolog, resolved by a catch-all heuristic
    - config.h: filename claimed by Objective-C and C
    - odd.m: filename claimed by Text and Ruby, neither owns .m
    - only.m: the single sample of its language
    """
    return [
        make_sample("samples/C/config.h", "C"),
        make_sample("samples/C/e.h", "C"),
        make_sample("samples/Matlab/a.m", "Matlab"),
        make_sample("samples/Matlab/b.m", "Matlab"),
        make_sample("samples/Objective-C/c.m", "Objective-C"),
        make_sample("samples/Objective-C/d.m", "Objective-C"),
        make_sample("samples/Perl/p1.pl", "Perl"),
        make_sample("samples/Perl/p2.pl", "Perl"),
        make_sample("samples/Rare/only.m", "Rare"),
        make_sample("samples/Ruby/filenames/Rakefile", "Ruby"),
        make_sample("samples/Ruby/z.rb", "Ruby"),
        make_sample("samples/Text/odd.m", "Text"),
        make_sample("samples/Text/x.txt", "Text"),
        make_sample("samples/Text/y.txt", "Text"),
    ]


@pytest.fixture
def make_context(registry, mixed_samples):
    """Build a RunContext over mixed_samples (or the given samples)."""
    def _make(samples=None, **kwargs):
        samples = tuple(samples if samples is not None else mixed_samples)
        kwargs.setdefault('skip_set', frozenset({'.pl'}))
        return RunContext(
            samples=samples,
            languages=registry,
            language_counts=count_languages(samples),
            **kwargs
        )
    return _make


@pytest.fixture
def by_path(mixed_samples):
    """Look up a mixed sample by path."""
    samples = {sample.path: sample for sample in mixed_samples}
    return lambda path: samples[path]
