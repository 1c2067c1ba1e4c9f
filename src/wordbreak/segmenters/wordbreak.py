"""Deterministic word-break segmenter for dotted and camel-cased identifiers."""

import unicodedata
from typing import List, Optional

from ..core.errors import InvalidConfigurationError
from ..options.schema import WordBreakOptions


# Letter categories only; str.isupper also accepts e.g. Roman numerals.
def _is_upper(char: str) -> bool:
    return unicodedata.category(char) == "Lu"


def _is_lower(char: str) -> bool:
    return unicodedata.category(char) == "Ll"


class WordBreakSegmenter:
    """
    Inserts break markers into long tokens of a plain-text fragment.

    A break is placed after every dot that is followed by more content, and
    before an uppercase letter that follows a lowercase letter or a digit.
    The minimum length gate is checked for the whole text, for each
    space-delimited word and for each dot-delimited segment, so a long word
    can receive dot breaks while its short segments keep their case intact.
    """

    def __init__(self, options: WordBreakOptions):
        """
        Initialize segmenter.

        Args:
            options: Break options (minimum length and marker)

        Raises:
            InvalidConfigurationError: If no options are given
        """
        if options is None:
            raise InvalidConfigurationError("WordBreakSegmenter requires options")
        self.options = options
        self.min_length = options.minimum_characters
        self.marker = options.word_break_characters

    def process(self, text: Optional[str]) -> Optional[str]:
        """
        Insert break markers into text.

        Only the ASCII space separates words; tabs and newlines are ordinary
        characters. Runs of spaces are reproduced exactly.

        Args:
            text: Plain text without embedded markup

        Returns:
            str: Text with markers inserted. None, blank and short input is
            returned as given.
        """
        if text is None or not text.strip():
            return text

        if len(text) < self.min_length:
            return text

        return " ".join(self._process_word(word) for word in text.split(" "))

    def _process_word(self, word: str) -> str:
        if len(word) < self.min_length:
            return word

        if "." not in word:
            if self.options.require_dot_for_case_breaks:
                return word
            return self._process_segment(word)

        # Empty segments from leading, repeated or trailing dots add nothing
        # but their separator.
        result = ("." + self.marker).join(
            self._process_segment(segment) for segment in word.split(".")
        )

        # No marker after a dot that ends the word.
        if word.endswith(".") and self.marker:
            result = result[:-len(self.marker)]

        return result

    def _process_segment(self, segment: str) -> str:
        if len(segment) < self.min_length:
            return segment

        parts: List[str] = []
        start = 0

        for i in range(1, len(segment)):
            prev = segment[i - 1]
            if _is_upper(segment[i]) and (_is_lower(prev) or prev.isdecimal()):
                parts.append(segment[start:i])
                start = i

        parts.append(segment[start:])
        return self.marker.join(parts)
