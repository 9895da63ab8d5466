"""
Pytest fixtures for sample_validation tests.

Provides temporary corpora, language/heuristic YAML files, in-memory
samples and a recording fake classifier for the cross-validation harness.
"""
import pytest
import tempfile
import sys
from pathlib import Path, PurePosixPath
from typing import Dict

# Add project root to path
project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

from sample_validation.core.data_models import Sample
from sample_validation.core.languages import Language, LanguageRegistry


MATLAB_SOURCE_1 = """function y = square_all(x)
% Square every element of x
y = zeros(size(x));
for k = 1:numel(x)
    y(k) = x(k) .^ 2;
end
disp(y);
fprintf('done\\n');
end
"""

MATLAB_SOURCE_2 = """function total = sum_all(x)
% Sum every element of x
total = zeros(1, 1);
for k = 1:numel(x)
    total = total + x(k);
end
disp(total);
fprintf('total\\n');
end
"""

OBJC_SOURCE_1 = """#import <Foundation/Foundation.h>

@interface Greeter : NSObject
@property (nonatomic, strong) NSString *name;
- (void)greet;
@end

@implementation Greeter
- (void)greet {
    NSLog(@"Hello %@", self.name);
}
@end
"""

OBJC_SOURCE_2 = """#import <Foundation/Foundation.h>

@interface Counter : NSObject
@property (nonatomic, assign) NSInteger count;
- (void)increment;
@end

@implementation Counter
- (void)increment {
    self.count += 1;
    NSLog(@"Count %ld", (long)self.count);
}
@end
"""

TEXT_SOURCE_1 = "This is a plain text file with some words in it.\n"
TEXT_SOURCE_2 = "Another plain text document, nothing special here.\n"

LANGUAGES_YAML = """Text:
  extensions: [".txt"]
Matlab:
  extensions: [".matlab", ".m"]
Objective-C:
  extensions: [".m", ".h"]
Ruby:
  extensions: [".rb"]
  filenames: ["Rakefile"]
Perl:
  extensions: [".pl"]
Prolog:
  extensions: [".pl", ".pro"]
"""

HEURISTICS_YAML = r"""disambiguations:
- extensions: ['.m']
  rules:
  - language: Objective-C
    named_pattern: objectivec
  - language: Matlab
    pattern: '^\s*function\b'
- extensions: ['.pl']
  rules:
  - language: Prolog
    pattern: '^[^#]*:-'
  - language: Perl
named_patterns:
  objectivec: '^\s*(@(interface|implementation|end)\b|#import\s+.+\.h[">])'
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_corpus(temp_dir):
    """Write {relative path: content} under temp_dir/samples and return that directory."""
    def _write(files: Dict[str, str]) -> Path:
        samples_dir = temp_dir / "samples"
        for relative, content in files.items():
            file_path = samples_dir / relative
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content)
        return samples_dir
    return _write


@pytest.fixture
def languages_file(temp_dir):
    """Languages metadata file for the scenario corpus."""
    path = temp_dir / "languages.yml"
    path.write_text(LANGUAGES_YAML)
    return path


@pytest.fixture
def heuristics_file(temp_dir):
    """Heuristics with one catch-all (.pl) and one open-ended (.m) rule set."""
    path = temp_dir / "heuristics.yml"
    path.write_text(HEURISTICS_YAML)
    return path


@pytest.fixture
def scenario_files():
    """Two Text samples (unambiguous) and two each of Matlab/Objective-C .m samples."""
    return {
        "Text/A1.txt": TEXT_SOURCE_1,
        "Text/A2.txt": TEXT_SOURCE_2,
        "Matlab/B1.m": MATLAB_SOURCE_1,
        "Matlab/B2.m": MATLAB_SOURCE_2,
        "Objective-C/B3.m": OBJC_SOURCE_1,
        "Objective-C/B4.m": OBJC_SOURCE_2,
    }


@pytest.fixture
def scenario_corpus(write_corpus, scenario_files, languages_file, heuristics_file):
    """Scenario corpus on disk plus its YAML files."""
    return {
        'samples_dir': write_corpus(scenario_files),
        'languages_file': languages_file,
        'heuristics_file': heuristics_file
    }


@pytest.fixture
def make_sample():
    """Build an in-memory Sample; tokens default to a marker unique to the path."""
    def _make(path: str, language: str, content: str = "", tokens=None) -> Sample:
        pure = PurePosixPath(path)
        return Sample(
            path=path,
            language=language,
            content=content or f"content of {path}",
            tokens=tuple(tokens) if tokens is not None else (f"token:{path}",),
            filename=pure.name,
            extension=pure.suffix
        )
    return _make


@pytest.fixture
def registry():
    """In-memory registry with ambiguous extensions and filenames."""
    return LanguageRegistry([
        Language("Text", [".txt"], ["odd.m"]),
        Language("Matlab", [".matlab", ".m"]),
        Language("Objective-C", [".m", ".h"], ["config.h"]),
        Language("C", [".c", ".h"], ["config.h"]),
        Language("C++", [".cpp", ".h"]),
        Language("Ruby", [".rb"], ["Rakefile", "odd.m"]),
        Language("Perl", [".pl"]),
        Language("Prolog", [".pl", ".pro"]),
    ])


class FakeTrainedModel:
    """Returns a single prediction chosen by a callable."""

    def __init__(self, predict):
        self.predict = predict
        self.calls = []

    def classify(self, content, languages=None):
        self.calls.append((content, languages))
        language = self.predict(content, languages)
        return [] if language is None else [(language, 0.0)]


class FakeClassifier:
    """Records every (language, tokens) pair it is trained on."""

    def __init__(self, predict, training_log, models):
        self.predict = predict
        self.trained = []
        self.models = models
        training_log.append(self.trained)

    def train(self, language, tokens):
        self.trained.append((language, tuple(tokens)))

    def finalize(self):
        model = FakeTrainedModel(self.predict)
        self.models.append(model)
        return model


@pytest.fixture
def fake_classifier_factory():
    """
    Make a classifier factory whose models predict via predict(content, languages).

    The factory exposes .training_log (one list of training pairs per
    classifier built) and .models (every finalized model).
    """
    def _make(predict):
        training_log = []
        models = []

        def factory():
            return FakeClassifier(predict, training_log, models)

        factory.training_log = training_log
        factory.models = models
        return factory
    return _make
