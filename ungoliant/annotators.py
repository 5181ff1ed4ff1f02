"""Document annotators: add contextual annotations to documents without altering content."""

from __future__ import annotations

import math
import unicodedata
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable

from ungoliant.document import Document


def _lines(text: str) -> list[str]:
    """Split text into lines on '\\n', dropping a trailing empty line and '\\r' endings."""
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class Annotate(ABC):
    """Something that adds annotations to a document's metadata."""

    @abstractmethod
    def annotate(self, doc: Document) -> None:
        """Annotate the document in place."""


class Transform(ABC):
    """Something that changes a document's content.

    Returns the inclusive (start, end) line ranges of the kept content.
    """

    @abstractmethod
    def transform(self, doc) -> list[tuple[int, int]]:
        """Transform the document in place and return the kept line ranges."""


@dataclass
class Annotator(Annotate):
    """Chains several annotators and runs them in insertion order."""

    annotators: list[Annotate] = field(default_factory=list)

    def add(self, annotator: Annotate) -> Annotator:
        """Append an annotator; returns self so calls can be chained."""
        self.annotators.append(annotator)
        return self

    def annotate(self, doc: Document) -> None:
        for annotator in self.annotators:
            annotator.annotate(doc)

    def __len__(self) -> int:
        return len(self.annotators)


@dataclass
class Header(Annotate):
    """Flags documents with too many short lines at their beginning or end.

    header_pctg is the share of lines considered header (and footer),
    threshold_pctg the share of short lines in it needed to annotate, and
    min_length the byte length under which a line is short.
    """

    header_pctg: float = 0.2
    threshold_pctg: float = 0.5
    min_length: int = 100

    def annotate(self, doc: Document) -> None:
        lines = _lines(doc.content)
        nb_lines_header = math.floor(len(lines) * self.header_pctg)
        threshold = math.floor(nb_lines_header * self.threshold_pctg)

        if self.count_short_lines(lines[:nb_lines_header]) > threshold:
            doc.metadata.add_annotation("header")

        footer = reversed(lines[len(lines) - nb_lines_header:]) if nb_lines_header else ()
        if self.count_short_lines(footer) > threshold:
            doc.metadata.add_annotation("footer")

    def count_short_lines(self, lines: Iterable[str]) -> int:
        """Count lines whose UTF-8 length is below min_length."""
        return sum(1 for line in lines if len(line.encode("utf-8")) < self.min_length)


def _is_letter_or_mark(char: str) -> bool:
    return unicodedata.category(char)[0] in ("L", "M")


@dataclass
class Noisy(Annotate):
    """Flags documents whose share of non-letter characters is too high."""

    threshold: float = 0.5

    def annotate(self, doc: Document) -> None:
        content = doc.content
        limit = math.floor(len(content) * self.threshold)
        letters = 0
        nonletters = 0
        for char in content:
            if _is_letter_or_mark(char):
                letters += 1
                if letters > limit:
                    return
            else:
                nonletters += 1
                if nonletters > limit:
                    doc.metadata.add_annotation("noisy")
                    return


@dataclass
class TinyDocument(Annotate):
    """Flags documents with fewer lines than the threshold."""

    threshold: int = 5

    def annotate(self, doc: Document) -> None:
        if len(_lines(doc.content)) < self.threshold:
            doc.metadata.add_annotation("tiny")