import pytest

from ungoliant.location import (
    IncompleteLocation,
    Location,
    LocationBuilder,
    LocationKind,
)


def test_location_build_incomplete():
    with pytest.raises(IncompleteLocation) as excinfo:
        LocationBuilder().build()
    assert excinfo.value.missing is LocationKind.SHARD_ID


def test_location_build_complete():
    rid, ls, le, lis, si = "record_id", 0, 10, 1, 4
    lb = LocationBuilder()
    lb.record_id = rid
    lb.line_start = ls
    lb.line_end = le
    lb.loc_in_shard = lis
    lb.shard_id = si
    assert lb.build() == Location(si, rid, ls, le, lis)


def test_missing_field_reported_in_order():
    lb = LocationBuilder(shard_id=1, record_id="r", line_start=0)
    with pytest.raises(IncompleteLocation) as excinfo:
        lb.build()
    assert excinfo.value.missing is LocationKind.LINE_END


def test_missing_loc_in_shard():
    lb = LocationBuilder(shard_id=1, record_id="r", line_start=0, line_end=3)
    with pytest.raises(IncompleteLocation) as excinfo:
        lb.build()
    assert excinfo.value.missing is LocationKind.LOC_IN_SHARD


def test_location_default():
    loc = Location()
    assert (loc.shard_id, loc.record_id, loc.line_start, loc.line_end, loc.loc_in_shard) == (
        0,
        "",
        0,
        0,
        0,
    )