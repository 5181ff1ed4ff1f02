"""Locations of kept records inside shards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LocationKind(Enum):
    """The mandatory fields of a Location."""

    SHARD_ID = "shard_id"
    RECORD_ID = "record_id"
    LINE_START = "line_start"
    LINE_END = "line_end"
    LOC_IN_SHARD = "loc_in_shard"


class IncompleteLocation(Exception):
    """Raised when a location is built with a missing field."""

    def __init__(self, missing: LocationKind) -> None:
        super().__init__(f"missing location field: {missing.value}")
        self.missing = missing


@dataclass(frozen=True)
class Location:
    """Links a record id to a place in a shard.

    line_start and line_end bound the kept text (inclusive); loc_in_shard is
    the record index in the shard.
    """

    shard_id: int = 0
    record_id: str = ""
    line_start: int = 0
    line_end: int = 0
    loc_in_shard: int = 0


@dataclass
class LocationBuilder:
    """A location still being filled in."""

    shard_id: int | None = None
    record_id: str | None = None
    line_start: int | None = None
    line_end: int | None = None
    loc_in_shard: int | None = None

    def build(self) -> Location:
        """Build the location, raising IncompleteLocation if a field is missing."""
        for kind in LocationKind:
            if getattr(self, kind.value) is None:
                raise IncompleteLocation(kind)
        return Location(
            shard_id=self.shard_id,
            record_id=self.record_id,
            line_start=self.line_start,
            line_end=self.line_end,
            loc_in_shard=self.loc_in_shard,
        )