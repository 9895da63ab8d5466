#!/usr/bin/env python3
"""
Language Registry - Filename and Extension Lookup

Loads language metadata (extensions and exact filenames per language) from a
languages.yml file and answers "which languages could this file be?".
"""

import logging
from pathlib import Path, PurePosixPath
from typing import Dict, Iterable, List, Optional

import yaml

logger = logging.getLogger(__name__)


class Language:
    """A named language with the extensions and filenames it claims."""

    def __init__(
        self,
        name: str,
        extensions: Optional[Iterable[str]] = None,
        filenames: Optional[Iterable[str]] = None
    ):
        self.name = name
        self.extensions = [ext.lower() for ext in (extensions or [])]
        self.filenames = list(filenames or [])

    def __repr__(self) -> str:
        return f"Language({self.name!r})"


class LanguageRegistry:
    """
    Lookup tables over a fixed set of languages.

    Lookups return languages in registry order, which is the order of the
    languages.yml document.
    """

    def __init__(self, languages: Iterable[Language]):
        self.languages = list(languages)
        self._by_name: Dict[str, Language] = {}
        self._by_extension: Dict[str, List[Language]] = {}
        self._by_filename: Dict[str, List[Language]] = {}

        for language in self.languages:
            self._by_name[language.name] = language
            for ext in language.extensions:
                self._by_extension.setdefault(ext, []).append(language)
            for filename in language.filenames:
                self._by_filename.setdefault(filename, []).append(language)

    @classmethod
    def load(cls, path: Path) -> "LanguageRegistry":
        """
        Load a registry from a languages.yml file.

        Args:
            path: YAML mapping of language name -> {extensions, filenames}

        Returns:
            LanguageRegistry
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Languages file not found: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"{path}: invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping of language names")

        languages = []
        for name, attributes in data.items():
            attributes = attributes or {}
            languages.append(Language(
                name=str(name),
                extensions=attributes.get('extensions'),
                filenames=attributes.get('filenames')
            ))

        logger.info(f"Loaded {len(languages)} languages from {path}")
        return cls(languages)

    def __getitem__(self, name: str) -> Language:
        return self._by_name[name]

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self.languages)

    def find_by_filename(self, path: str) -> List[Language]:
        """Languages claiming this exact basename."""
        return list(self._by_filename.get(PurePosixPath(path).name, []))

    def find_by_extension(self, path: str) -> List[Language]:
        """
        Languages claiming this file's extension.

        Every dotted suffix of the lowercased basename is tried, longest
        first, so "index.blade.php" matches ".blade.php" before ".php".
        A leading dot (hidden file) is not an extension separator.
        """
        basename = PurePosixPath(path).name.lower()
        parts = basename.lstrip('.').split('.')[1:]
        for i in range(len(parts)):
            candidate = '.' + '.'.join(parts[i:])
            if candidate in self._by_extension:
                return list(self._by_extension[candidate])
        return []
