from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TextCounts:
    words: list[str] = field(default_factory=list)
    alphabetic: int = 0
    numeric: int = 0
    symbol: int = 0
    whitespace: int = 0

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def character_count(self) -> int:
        return self.alphabetic + self.numeric + self.symbol + self.whitespace


def count_characters(text: str) -> TextCounts:
    """
    Split text into words and count each character class.

    Letters and numerals build up the current word, whitespace ends it.
    Any other character is counted as a symbol and skipped, so it neither
    joins nor splits a word ("don't" -> "dont").
    """
    counts = TextCounts()
    current: list[str] = []

    for char in text:
        if char.isalpha():
            counts.alphabetic += 1
            current.append(char)
        elif char.isspace():
            counts.whitespace += 1
            if current:
                counts.words.append("".join(current))
                current = []
        elif char.isnumeric():
            counts.numeric += 1
            current.append(char)
        else:
            counts.symbol += 1

    if current:
        counts.words.append("".join(current))
    return counts
