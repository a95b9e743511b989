"""
Word frequency counting for the tag cloud.
"""

import string
from collections import Counter
from pathlib import Path
from typing import List, Optional, Tuple, Union

from config import ANALYSIS_CONFIG, CLOUD_CONFIG, OUTPUT_CONFIG
from text_extractor import TextExtractorFactory
from word_excluder import WordExcluder


def _is_file(source: Union[str, Path]) -> bool:
    """Tell a path from raw text; names the OS rejects are treated as text."""
    try:
        return Path(source).is_file()
    except (OSError, ValueError):
        return False


class WordCounter:
    """Counts words in text and ranks them for the cloud."""

    def __init__(
        self, excluder: Optional[WordExcluder] = None, min_length: Optional[int] = None
    ):
        """
        Initialize the word counter.

        Args:
            excluder: Stop word source; a default WordExcluder when omitted
            min_length: Words shorter than this are ignored
        """
        self.excluder = excluder if excluder is not None else WordExcluder()
        self.min_length = (
            ANALYSIS_CONFIG["min_word_length"] if min_length is None else min_length
        )

    def count_words(self, text: str) -> Counter:
        """Count word occurrences, skipping punctuation, numbers and stop words."""
        words = []

        for word in text.split():
            if ANALYSIS_CONFIG["strip_punctuation"]:
                word = word.strip(string.punctuation)

            if not word or not word.isalpha() or len(word) < self.min_length:
                continue
            if not ANALYSIS_CONFIG["case_sensitive"]:
                word = word.lower()
            if self.excluder.is_excluded(word):
                continue
            words.append(word)

        return Counter(words)

    @staticmethod
    def most_common(counts: Counter, limit: int) -> List[Tuple[str, int]]:
        """Return up to ``limit`` words by descending count, ties alphabetical."""
        if limit <= 0:
            return []
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:limit]

    def analyze(
        self,
        source: Union[str, Path],
        input_type: Optional[str] = None,
        limit: Optional[int] = None,
        **extractor_kwargs,
    ) -> List[Tuple[str, int]]:
        """
        Extract text from a source and rank its words.

        Args:
            source: Path to file or text string
            input_type: Type of input (auto-detected if None)
            limit: Number of words to keep (default from CLOUD_CONFIG)
            **extractor_kwargs: Additional arguments for text extraction

        Returns:
            List of (word, count) sorted by descending count
        """
        if limit is None:
            limit = CLOUD_CONFIG["word_count"]

        if input_type is None:
            if isinstance(source, (str, Path)) and _is_file(source):
                input_type = TextExtractorFactory.detect_file_type(str(source))
            else:
                input_type = "string"

        extractor = TextExtractorFactory.create_extractor(input_type, **extractor_kwargs)
        counts = self.count_words(extractor.extract(str(source)))

        if OUTPUT_CONFIG["verbose"]:
            print(f"Counted {sum(counts.values())} words ({len(counts)} unique)")

        return self.most_common(counts, limit)
