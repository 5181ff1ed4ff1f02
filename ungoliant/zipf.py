"""Word counts and Zipf's law statistics over a corpus."""

from __future__ import annotations

import math
import unicodedata
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator

# Characters allowed inside a word when surrounded by letters or by digits.
_MID_LETTER = frozenset(":'.\u00b7\u2019\u2027\u0387\u05f4\ufe13\ufe55\uff1a\uff0e\uff07")
_MID_NUM = frozenset(",.;'\u2019\u066c\ufe50\ufe54\uff0c\uff1b\uff0e\uff07")


def _is_ideograph(char: str) -> bool:
    code = ord(char)
    return (
        0x3040 <= code <= 0x309F  # hiragana
        or 0x3400 <= code <= 0x4DBF
        or 0x4E00 <= code <= 0x9FFF
        or 0xF900 <= code <= 0xFAFF
        or 0x20000 <= code <= 0x2FFFF
    )


def _is_word_char(char: str) -> bool:
    if _is_ideograph(char):
        return False
    return char.isalnum() or char == "_" or unicodedata.category(char)[0] == "M"


def _joins(prev: str, mid: str, nxt: str) -> bool:
    """Whether `mid` may join `prev` and `nxt` into a single word."""
    if not (_is_word_char(prev) and _is_word_char(nxt)):
        return False
    if mid in _MID_LETTER and prev.isalpha() and nxt.isalpha():
        return True
    return mid in _MID_NUM and prev.isdigit() and nxt.isdigit()


def unicode_words(text: str) -> Iterator[str]:
    """Yield the words of `text`.

    Words are runs of alphanumeric characters, possibly joined by an
    apostrophe or a period between letters or digits. Each ideographic
    character is a word of its own; punctuation and spaces are dropped.
    """
    i = 0
    n = len(text)
    while i < n:
        char = text[i]
        if _is_ideograph(char):
            yield char
            i += 1
            continue
        if not _is_word_char(char):
            i += 1
            continue
        j = i + 1
        while j < n:
            nxt = text[j]
            if _is_word_char(nxt):
                j += 1
            elif j + 1 < n and _joins(text[j - 1], nxt, text[j + 1]):
                j += 2
            else:
                break
        word = text[i:j]
        if any(c.isalnum() for c in word):
            yield word
        i = j


@dataclass(frozen=True)
class ZipfEntry:
    """Rank, count, frequency and the Zipf constant (frequency times rank) of a word."""

    rank: int
    count: int
    prob: float
    constant: float

    @classmethod
    def from_count(cls, rank: int, count: int, nb_words: int) -> ZipfEntry:
        """Build an entry; nb_words is the total (non unique) number of words."""
        prob = count / nb_words
        return cls(rank=rank, count=count, prob=prob, constant=prob * rank)


@dataclass
class Zipf:
    """Lowercased word counts together with the total number of words."""

    counts: Counter[str] = field(default_factory=Counter)
    nb_words: int = 0

    def add_count(self, text: str) -> None:
        """Count the words of a text."""
        for word in unicode_words(text):
            self.counts[word.lower()] += 1
            self.nb_words += 1

    def _ranked_counts(self) -> list[int]:
        return sorted(self.counts.values(), reverse=True)

    def rank_freq_constant(self) -> list[ZipfEntry]:
        """Entries ordered by decreasing count, ranks starting at 1."""
        return [
            ZipfEntry.from_count(rank, count, self.nb_words)
            for rank, count in enumerate(self._ranked_counts(), start=1)
        ]

    def constants(self) -> list[float]:
        """Zipf constants (rank times frequency), ordered by rank."""
        return [
            rank * (count / self.nb_words)
            for rank, count in enumerate(self._ranked_counts(), start=1)
        ]

    def mean_constants(self) -> float:
        """Mean of the Zipf constants; NaN when nothing was counted."""
        constants = self.constants()
        if not constants:
            return math.nan
        return sum(constants) / len(constants)

    def sig_constants(self) -> float:
        """Standard deviation of the Zipf constants; NaN when nothing was counted."""
        constants = self.constants()
        if not constants:
            return math.nan
        mean = sum(constants) / len(constants)
        devs = sum((x - mean) ** 2 for x in constants)
        return math.sqrt(devs / len(self.counts))