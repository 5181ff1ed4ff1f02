"""Sentence-level filters: annotate or strip short sentences at the edges of documents."""

from __future__ import annotations

from dataclasses import dataclass, field

from ungoliant.annotators import Annotate, Transform, _lines
from ungoliant.document import Document

Range = tuple[int, int]


def _is_long_enough(sentence: str, min_length: int) -> bool:
    """A sentence is long enough if it has at least `min_length` characters."""
    return len(sentence) >= min_length


def _keep_body(lines: list[str], min_length: int) -> tuple[str, list[Range]]:
    """Drop leading and trailing short lines.

    Returns the kept content and the inclusive line range it covers, or an
    empty string and no range if every line is short.
    """
    long_indices = [
        idx for idx, line in enumerate(lines) if _is_long_enough(line, min_length)
    ]
    if not long_indices:
        return "", []
    start, end = long_indices[0], long_indices[-1]
    return "\n".join(lines[start : end + 1]), [(start, end)]


@dataclass
class ShortSentences(Annotate):
    """Flags documents in which too many lines are short.

    A document is annotated with `short_sentences` when the number of lines
    shorter than `min_length` characters exceeds `threshold` times its line count.
    """

    min_length: int = 100
    threshold: float = 0.5

    def annotate(self, doc: Document) -> None:
        lines = _lines(doc.content)
        limit = int(self.threshold * len(lines))
        nb_short = sum(
            1 for line in lines if not _is_long_enough(line, self.min_length)
        )
        if nb_short > limit:
            doc.metadata.add_annotation("short_sentences")


@dataclass
class RemoveShortSentences(Transform):
    """Removes the short lines located before and after the main body of a document.

    Lines shorter than `min_length` characters are removed from the start
    and the end until a long enough line is met; short lines inside the body
    are kept.
    """

    min_length: int = 100

    def transform_text(self, text: str) -> tuple[str, list[Range]]:
        """Return the kept text and the inclusive line ranges it came from."""
        return _keep_body(_lines(text), self.min_length)

    def transform(self, doc: Document) -> list[Range]:
        """Replace the document's content with its body and return the kept ranges."""
        content, ranges = self.transform_text(doc.content)
        doc.content = content
        return ranges


@dataclass
class Conv:
    """Convolution-based removal of short head and foot lines.

    Line lengths (in bytes) are averaged over a sliding window of
    `conv_size` lines, padded at both ends with the first and last lengths,
    so that a long line surrounded by short ones is removed along with them.
    Leading and trailing lines whose averaged length is below the minimum
    length of `rss` are then dropped.
    """

    conv_size: int = 5
    rss: RemoveShortSentences = field(default_factory=RemoveShortSentences)

    def transform_idx(self, doc: Document) -> tuple[Document, list[Range]]:
        """Transform the document and return it with the inclusive kept line ranges.

        If no line is kept the document is returned untouched with no range.
        Raises ValueError on an empty document or a zero window size.
        """
        if self.conv_size <= 0:
            raise ValueError("convolution window size must be positive")
        lines = _lines(doc.content)
        if not lines:
            raise ValueError("cannot convolve an empty document")

        lengths = [float(len(line.encode("utf-8"))) for line in lines]
        padding = self.conv_size // 2
        padded = [lengths[0]] * padding + lengths + [lengths[-1]] * padding

        convolved = [
            sum(padded[start : start + self.conv_size]) / self.conv_size
            for start in range(len(padded) - self.conv_size + 1)
        ]

        min_length = float(self.rss.min_length)
        kept = [
            idx
            for idx, (_, length) in enumerate(zip(lines, convolved))
            if length >= min_length
        ]
        if not kept:
            return doc, []

        start, end = kept[0], kept[-1]
        doc.content = "\n".join(lines[start : end + 1])
        return doc, [(start, end)]