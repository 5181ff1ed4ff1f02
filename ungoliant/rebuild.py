"""Rebuild information linking locations to metadata, grouped per shard."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from ungoliant.document import Metadata
from ungoliant.location import Location


@dataclass
class RebuildInformation:
    """A location in a shard together with the metadata of the kept document."""

    shard_id: int
    record_id: str
    line_start: int
    line_end: int
    loc_in_shard: int
    metadata: Metadata

    @classmethod
    def from_location(cls, location: Location, metadata: Metadata) -> RebuildInformation:
        return cls(
            shard_id=location.shard_id,
            record_id=location.record_id,
            line_start=location.line_start,
            line_end=location.line_end,
            loc_in_shard=location.loc_in_shard,
            metadata=metadata,
        )

    def into_parts(self) -> tuple[Location, Metadata]:
        """Split into a (Location, Metadata) pair."""
        location = Location(
            self.shard_id,
            self.record_id,
            self.line_start,
            self.line_end,
            self.loc_in_shard,
        )
        return location, self.metadata

    def to_dict(self) -> dict[str, Any]:
        return {
            "shard_id": self.shard_id,
            "record_id": self.record_id,
            "line_start": self.line_start,
            "line_end": self.line_end,
            "loc_in_shard": self.loc_in_shard,
            "metadata": self.metadata.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RebuildInformation:
        return cls(
            shard_id=int(data["shard_id"]),
            record_id=str(data["record_id"]),
            line_start=int(data["line_start"]),
            line_end=int(data["line_end"]),
            loc_in_shard=int(data["loc_in_shard"]),
            metadata=Metadata.from_dict(data["metadata"]),
        )


@dataclass
class ShardResult:
    """All rebuild information for a single shard."""

    shard_id: int
    rebuild_info: list[RebuildInformation] = field(default_factory=list)

    @classmethod
    def from_locations(
        cls,
        shard_id: int,
        locations: Iterable[Location],
        metadata: Iterable[Metadata],
    ) -> ShardResult:
        """Pair locations with metadata; extra items on either side are dropped."""
        return cls(
            shard_id,
            [
                RebuildInformation.from_location(loc, meta)
                for loc, meta in zip(locations, metadata)
            ],
        )

    def into_parts(self) -> tuple[int, list[RebuildInformation]]:
        return self.shard_id, self.rebuild_info

    def to_dict(self) -> dict[str, Any]:
        return {
            "shard_id": self.shard_id,
            "rebuild_info": [info.to_dict() for info in self.rebuild_info],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ShardResult:
        return cls(
            int(data["shard_id"]),
            [RebuildInformation.from_dict(info) for info in data["rebuild_info"]],
        )