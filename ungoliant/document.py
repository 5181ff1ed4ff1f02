"""Documents, their OSCAR metadata and language identifications."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

RECORD_ID = "warc-record-id"
TARGET_URI = "warc-target-uri"

WarcHeaders = dict[str, bytes]


@dataclass(frozen=True)
class Identification:
    """A language label with its confidence."""

    label: str
    prob: float

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "prob": self.prob}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Identification:
        return cls(label=str(data["label"]), prob=float(data["prob"]))


def _default_sentence_ids() -> list[Identification | None]:
    return [Identification("en", 1.0)]


@dataclass
class Metadata:
    """OSCAR-specific metadata: document identification, annotations, per-line identifications.

    The defaults describe an English document with probability 1.0, no
    annotation and a single English line.
    """

    identification: Identification = field(
        default_factory=lambda: Identification("en", 1.0)
    )
    annotation: list[str] | None = None
    sentence_identifications: list[Identification | None] = field(
        default_factory=_default_sentence_ids
    )

    def add_annotation(self, annotation: str) -> None:
        """Append an annotation, creating the list on first use."""
        if self.annotation is None:
            self.annotation = [annotation]
        else:
            self.annotation.append(annotation)

    def to_dict(self) -> dict[str, Any]:
        return {
            "identification": self.identification.to_dict(),
            "annotation": None if self.annotation is None else list(self.annotation),
            "sentence_identifications": [
                None if ident is None else ident.to_dict()
                for ident in self.sentence_identifications
            ],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Metadata:
        annotation = data.get("annotation")
        return cls(
            identification=Identification.from_dict(data["identification"]),
            annotation=None if annotation is None else [str(a) for a in annotation],
            sentence_identifications=[
                None if ident is None else Identification.from_dict(ident)
                for ident in data["sentence_identifications"]
            ],
        )


@dataclass
class Document:
    """Textual content together with its WARC headers and OSCAR metadata."""

    content: str
    warc_headers: WarcHeaders = field(default_factory=dict)
    metadata: Metadata = field(default_factory=Metadata)

    @property
    def identification(self) -> Identification:
        """The document-level language identification."""
        return self.metadata.identification

    @property
    def warc_id(self) -> str:
        """The WARC record id; raises KeyError if the header is absent."""
        return self.warc_headers[RECORD_ID].decode("utf-8", errors="replace")

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": self.content,
            "warc_headers": {
                key: value.decode("utf-8", errors="replace")
                for key, value in self.warc_headers.items()
            },
            "metadata": self.metadata.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Document:
        return cls(
            content=data["content"],
            warc_headers={
                key: value.encode("utf-8")
                for key, value in data["warc_headers"].items()
            },
            metadata=Metadata.from_dict(data["metadata"]),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> Document:
        return cls.from_dict(json.loads(text))

    def __repr__(self) -> str:
        headers = {
            k: v.decode("utf-8", errors="replace") for k, v in self.warc_headers.items()
        }
        return (
            f"Document(content={self.content.splitlines()!r}, "
            f"warc_headers={headers!r}, metadata={self.metadata!r})"
        )