"""Sentence-level documents, their language pieces and line-offset metadata."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from ungoliant.chunks import group_by

logger = logging.getLogger(__name__)

WarcHeaders = dict[str, bytes]


@dataclass
class Metadata:
    """Record headers linked to a text zone, with its line offset and length."""

    headers: dict[str, str] = field(default_factory=dict)
    offset: int = 0
    nb_sentences: int = 0

    @classmethod
    def from_headers(cls, headers: WarcHeaders) -> Metadata:
        """Build metadata from raw headers; raises UnicodeDecodeError on invalid UTF-8."""
        return cls(headers={key: value.decode("utf-8") for key, value in headers.items()})

    def to_dict(self) -> dict[str, Any]:
        return {
            "headers": dict(self.headers),
            "offset": self.offset,
            "nb_sentences": self.nb_sentences,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Metadata:
        return cls(
            headers={str(k): str(v) for k, v in data["headers"].items()},
            offset=int(data["offset"]),
            nb_sentences=int(data["nb_sentences"]),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> Metadata:
        return cls.from_dict(json.loads(text))


@dataclass
class MergedPiece:
    """Same-language sentences of a document joined into a single string."""

    headers: WarcHeaders
    sentences: str
    nb_sentences: int
    identification: str

    @classmethod
    def from_sentences(
        cls, headers: WarcHeaders, sentences: Iterable[str], identification: str
    ) -> MergedPiece:
        """Join sentences with newlines, counting them."""
        sentences = list(sentences)
        return cls(
            headers=headers,
            sentences="\n".join(sentences),
            nb_sentences=len(sentences),
            identification=identification,
        )


@dataclass
class PartChunk:
    """Concatenated merged pieces of one language, with per-piece offset metadata.

    Pieces are separated by an empty line, so each offset accounts for one
    extra line after the previous piece.
    """

    metadata: list[Metadata] = field(default_factory=list)
    body: str = ""

    @classmethod
    def from_pieces(cls, merged_pieces: Iterable[MergedPiece]) -> PartChunk:
        """Build a part chunk; the same-language constraint is not checked."""
        pieces = list(merged_pieces)
        metadata: list[Metadata] = []
        bodies: list[str] = []
        offset = 0
        for piece in pieces:
            meta = Metadata.from_headers(piece.headers)
            meta.offset = offset
            meta.nb_sentences = piece.nb_sentences
            bodies.append(piece.sentences)
            offset += meta.nb_sentences + 1
            metadata.append(meta)
        return cls(metadata=metadata, body="\n\n".join(bodies))

    def bump_offsets(self, offset: int) -> int | None:
        """Shift every offset by `offset`; return the offset for the next write, if any."""
        for meta in self.metadata:
            meta.offset += offset
        if not self.metadata:
            logger.warning("no metadata!")
            return None
        last = self.metadata[-1]
        return last.offset + last.nb_sentences + 1


@dataclass
class Document:
    """A record's headers, its sentences and one language identification per sentence."""

    headers: WarcHeaders
    sentences: list[str]
    identifications: list[str]

    def __post_init__(self) -> None:
        if len(self.sentences) != len(self.identifications):
            raise ValueError("different number of sentences and identifications")

    def into_merged_pieces(self) -> list[MergedPiece]:
        """One merged piece per contiguous run of same-language sentences."""
        return [
            MergedPiece.from_sentences(
                dict(self.headers), self.sentences[start : end + 1], lang
            )
            for lang, ranges in group_by(self.identifications).items()
            for start, end in ranges
        ]

    def into_merged_pieces_lang(self) -> list[MergedPiece]:
        """One merged piece per language, gathering all of its sentences in order."""
        return [
            MergedPiece.from_sentences(
                dict(self.headers),
                [s for start, end in ranges for s in self.sentences[start : end + 1]],
                lang,
            )
            for lang, ranges in group_by(self.identifications).items()
        ]