#!/usr/bin/env python3
"""
Corpus Loader - Labeled Sample Files

Reads the sample corpus laid out as:

    samples/<Language>/<file>             labeled by directory
    samples/<Language>/filenames/<name>   sample whose exact name matters

Every file becomes one immutable Sample with its tokens precomputed.
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, List

from sample_validation.core.data_models import Sample
from sample_validation.core.tokenizer import extract_tokens

logger = logging.getLogger(__name__)


def _read_sample(file_path: Path, language: str, root: Path) -> Sample:
    content = file_path.read_bytes().decode('utf-8', errors='replace')
    relative = file_path.relative_to(root.parent).as_posix()
    return Sample(
        path=relative,
        language=language,
        content=content,
        tokens=tuple(extract_tokens(content)),
        filename=file_path.name,
        extension=file_path.suffix
    )


def load_samples(samples_dir: Path) -> List[Sample]:
    """
    Load every sample under samples_dir.

    Args:
        samples_dir: Corpus root containing one directory per language

    Returns:
        Samples sorted by path
    """
    samples_dir = Path(samples_dir)
    if not samples_dir.is_dir():
        raise FileNotFoundError(f"Samples directory not found: {samples_dir}")

    samples = []
    for language_dir in sorted(p for p in samples_dir.iterdir() if p.is_dir()):
        if language_dir.name.startswith('.'):
            continue
        language = language_dir.name

        for file_path in sorted(language_dir.iterdir()):
            if file_path.name.startswith('.'):
                continue
            if file_path.is_dir():
                if file_path.name == 'filenames':
                    samples.extend(
                        _read_sample(f, language, samples_dir)
                        for f in sorted(file_path.iterdir())
                        if f.is_file() and not f.name.startswith('.')
                    )
                continue
            samples.append(_read_sample(file_path, language, samples_dir))

    samples.sort(key=lambda s: s.path)
    logger.info(f"Loaded {len(samples)} samples for "
                f"{len(count_languages(samples))} languages from {samples_dir}")
    return samples


def count_languages(samples: Iterable[Sample]) -> Dict[str, int]:
    """Number of samples per ground-truth language."""
    return dict(Counter(sample.language for sample in samples))
