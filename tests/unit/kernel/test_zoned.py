"""Unit tests for ZonedTimestamp and zone helpers."""

from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from wallclock.kernel.errors import InvalidArgumentError
from wallclock.kernel.time import ZonedTimestamp, resolve_zone, zone_id

TOKYO = ZoneInfo("Asia/Tokyo")
NEW_YORK = ZoneInfo("America/New_York")


# ---------------------------------------------------------------------------
# resolve_zone / zone_id
# ---------------------------------------------------------------------------


class TestResolveZone:
    def test_tzinfo_returned_as_is(self) -> None:
        assert resolve_zone(TOKYO) is TOKYO

    def test_utc_names_map_to_utc(self) -> None:
        assert resolve_zone("UTC") is UTC
        assert resolve_zone("z") is UTC

    def test_iana_name(self) -> None:
        assert resolve_zone("Asia/Tokyo") == TOKYO

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(InvalidArgumentError) as info:
            resolve_zone("Mars/Olympus_Mons")
        assert info.value.argument == "zone"

    def test_none_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            resolve_zone(None)

    def test_wrong_type_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            resolve_zone(9)  # type: ignore[arg-type]


class TestZoneId:
    def test_iana_key(self) -> None:
        assert zone_id(TOKYO) == "Asia/Tokyo"

    def test_fixed_offset(self) -> None:
        assert zone_id(UTC) == "UTC"
        assert zone_id(timezone(timedelta(hours=9))) == "UTC+09:00"


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_requires_aware_datetime(self) -> None:
        with pytest.raises(InvalidArgumentError):
            ZonedTimestamp(datetime(2016, 1, 1))

    def test_rejects_none(self) -> None:
        with pytest.raises(InvalidArgumentError):
            ZonedTimestamp(None)  # type: ignore[arg-type]

    def test_of_local(self) -> None:
        zoned = ZonedTimestamp.of(datetime(2016, 1, 1, 9), "Asia/Tokyo")
        assert zoned.date_time() == datetime(2016, 1, 1, 9)
        assert zoned.zone_id == "Asia/Tokyo"

    def test_of_rejects_aware(self) -> None:
        with pytest.raises(InvalidArgumentError):
            ZonedTimestamp.of(datetime(2016, 1, 1, tzinfo=UTC))

    def test_of_instant_from_datetime(self) -> None:
        zoned = ZonedTimestamp.of_instant(datetime(2016, 1, 1, tzinfo=UTC), TOKYO)
        assert zoned.date_time() == datetime(2016, 1, 1, 9)

    def test_of_instant_from_epoch_seconds(self) -> None:
        zoned = ZonedTimestamp.of_instant(0)
        assert zoned.instant() == datetime(1970, 1, 1, tzinfo=UTC)

    def test_of_instant_rejects_naive(self) -> None:
        with pytest.raises(InvalidArgumentError):
            ZonedTimestamp.of_instant(datetime(2016, 1, 1))

    def test_dst_gap_moves_forward(self) -> None:
        # 2016-03-13 02:30 does not exist in New York.
        zoned = ZonedTimestamp.of(datetime(2016, 3, 13, 2, 30), NEW_YORK)
        assert zoned.time() == time(3, 30)


# ---------------------------------------------------------------------------
# Projections and derivations
# ---------------------------------------------------------------------------


class TestProjections:
    def _zoned(self) -> ZonedTimestamp:
        return ZonedTimestamp.of(datetime(2016, 1, 1, 12, 30, 15, 250), TOKYO)

    def test_date_time_projections(self) -> None:
        zoned = self._zoned()
        assert zoned.date() == date(2016, 1, 1)
        assert zoned.time() == time(12, 30, 15, 250)
        assert zoned.date_time() == datetime(2016, 1, 1, 12, 30, 15, 250)
        assert zoned.date_time().tzinfo is None

    def test_instant_is_utc(self) -> None:
        assert self._zoned().instant() == datetime(2016, 1, 1, 3, 30, 15, 250, tzinfo=UTC)
        assert self._zoned().instant().tzinfo is UTC

    def test_with_date_keeps_time_and_zone(self) -> None:
        moved = self._zoned().with_date(date(2017, 2, 3))
        assert moved.date_time() == datetime(2017, 2, 3, 12, 30, 15, 250)
        assert moved.zone_id == "Asia/Tokyo"

    def test_with_time_keeps_date(self) -> None:
        moved = self._zoned().with_time(time(0, 0))
        assert moved.date_time() == datetime(2016, 1, 1)

    def test_plus_uses_absolute_timeline(self) -> None:
        # 2016-11-06 01:30 EDT + 1h = 01:30 EST in New York.
        before = ZonedTimestamp.of(datetime(2016, 11, 6, 1, 30), NEW_YORK)
        after = before.plus(timedelta(hours=1))
        assert after.instant() - before.instant() == timedelta(hours=1)
        assert after.time() == time(1, 30)
        assert after != before

    def test_with_zone_same_instant(self) -> None:
        zoned = self._zoned()
        moved = zoned.with_zone_same_instant("UTC")
        assert moved.instant() == zoned.instant()
        assert moved.date_time() == datetime(2016, 1, 1, 3, 30, 15, 250)


# ---------------------------------------------------------------------------
# Equality
# ---------------------------------------------------------------------------


class TestEquality:
    def test_equal_values(self) -> None:
        a = ZonedTimestamp.of(datetime(2016, 1, 1), TOKYO)
        b = ZonedTimestamp.of(datetime(2016, 1, 1), ZoneInfo("Asia/Tokyo"))
        assert a == b
        assert hash(a) == hash(b)

    def test_same_instant_different_zone_not_equal(self) -> None:
        tokyo = ZonedTimestamp.of(datetime(2016, 1, 1, 9), TOKYO)
        utc = ZonedTimestamp.of(datetime(2016, 1, 1, 0), UTC)
        assert tokyo.instant() == utc.instant()
        assert tokyo != utc

    def test_same_offset_different_id_not_equal(self) -> None:
        tokyo = ZonedTimestamp.of(datetime(2016, 1, 1, 9), TOKYO)
        plus_nine = ZonedTimestamp.of(datetime(2016, 1, 1, 9), timezone(timedelta(hours=9)))
        assert tokyo != plus_nine

    def test_not_equal_to_datetime(self) -> None:
        value = datetime(2016, 1, 1, tzinfo=UTC)
        assert ZonedTimestamp(value) != value

    def test_isoformat_carries_zone_id(self) -> None:
        zoned = ZonedTimestamp.of(datetime(2016, 1, 1), TOKYO)
        assert zoned.isoformat() == "2016-01-01T00:00:00+09:00[Asia/Tokyo]"
        assert str(zoned) == zoned.isoformat()
