"""
Stop word management for the tag cloud.
Excluded words are kept in a plain text file, one word per line.
"""

import os
from typing import FrozenSet, Optional, Set

from config import ANALYSIS_CONFIG, EXCLUSION_CONFIG, OUTPUT_CONFIG


class WordExcluder:
    """Loads, queries and persists the set of words left out of the cloud."""

    def __init__(self, path: Optional[str] = None, use_defaults: bool = True):
        """
        Initialize the excluder.

        Args:
            path: Path to the excluded words file
            use_defaults: Whether to include the built-in stop words
        """
        self.path = path or EXCLUSION_CONFIG["excluded_words_path"]
        self.case_sensitive = ANALYSIS_CONFIG["case_sensitive"]
        self._defaults: Set[str] = set()
        if use_defaults:
            self._defaults = {
                self._normalize(word) for word in EXCLUSION_CONFIG["default_excluded_words"]
            }
        self._words: Set[str] = self._load(self.path)

    def _normalize(self, word: str) -> str:
        word = word.strip()
        return word if self.case_sensitive else word.lower()

    def _load(self, path: str) -> Set[str]:
        words = set()
        if not os.path.exists(path):
            return words
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                for word in line.split():
                    words.add(self._normalize(word))
        return words

    @property
    def words(self) -> FrozenSet[str]:
        return frozenset(self._words | self._defaults)

    def is_excluded(self, word: str) -> bool:
        word = self._normalize(word)
        return word in self._words or word in self._defaults

    def add_word(self, word: str) -> None:
        """Add a word to the exclusion list."""
        word = self._normalize(word)
        if not word or not word.isalpha():
            raise ValueError(f"Can not exclude '{word}': only alphabetic words are allowed")
        self._words.add(word)

    def remove_word(self, word: str) -> bool:
        try:
            self._words.remove(self._normalize(word))
            return True
        except KeyError:
            return False

    def save(self, path: Optional[str] = None) -> None:
        """Write the user-excluded words back to file."""
        save_path = path or self.path
        with open(save_path, "w", encoding="utf-8") as f:
            for word in sorted(self._words):
                f.write(f"{word}\n")
        if OUTPUT_CONFIG["verbose"]:
            print(f"Saved {len(self._words)} excluded words to {save_path}")
