import time
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from whackerlink_reporter.errors import TimezoneNotFoundError
from whackerlink_reporter.timestamps import (
    format_timestamp,
    report_timestamp,
    resolve_timezone,
)


@pytest.fixture
def central() -> ZoneInfo:
    return ZoneInfo("America/Chicago")


@pytest.mark.unit
class TestFormatTimestamp:
    """
    Test fixed-zone timestamp rendering.
    """

    def test_standard_time_offset(self, central: ZoneInfo) -> None:
        instant = datetime(2025, 1, 15, 12, 30, 0, 123456, tzinfo=timezone.utc)

        assert format_timestamp(instant, central) == "2025-01-15T06:30:00.123-06:00"

    def test_daylight_time_offset(self, central: ZoneInfo) -> None:
        instant = datetime(2025, 7, 1, 12, 0, 0, tzinfo=timezone.utc)

        assert format_timestamp(instant, central) == "2025-07-01T07:00:00.000-05:00"

    def test_naive_instant_is_utc(self, central: ZoneInfo) -> None:
        naive = datetime(2025, 1, 15, 12, 30, 0)

        assert format_timestamp(naive, central) == "2025-01-15T06:30:00.000-06:00"

    def test_deterministic_for_fixed_instant(self, central: ZoneInfo) -> None:
        instant = datetime(2024, 11, 3, 7, 30, tzinfo=timezone.utc)

        assert format_timestamp(instant, central) == format_timestamp(instant, central)

    @pytest.mark.skipif(not hasattr(time, "tzset"), reason="Requires time.tzset")
    def test_independent_of_host_timezone(
        self, central: ZoneInfo, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        instant = datetime(2025, 1, 15, 12, 30, tzinfo=timezone.utc)

        monkeypatch.setenv("TZ", "Asia/Tokyo")
        time.tzset()
        try:
            assert format_timestamp(instant, central) == "2025-01-15T06:30:00.000-06:00"
        finally:
            monkeypatch.undo()
            time.tzset()

    def test_report_timestamp_uses_now(self, central: ZoneInfo) -> None:
        stamp = report_timestamp(central)
        parsed = datetime.fromisoformat(stamp)

        assert parsed.utcoffset() in (timedelta(hours=-6), timedelta(hours=-5))
        assert abs((datetime.now(timezone.utc) - parsed).total_seconds()) < 60

    def test_report_timestamp_with_explicit_now(self, central: ZoneInfo) -> None:
        now = datetime(2025, 3, 9, 8, 0, tzinfo=timezone.utc)

        assert report_timestamp(central, now=now) == "2025-03-09T03:00:00.000-05:00"


@pytest.mark.unit
class TestResolveTimezone:
    def test_resolves_default_zone(self) -> None:
        assert resolve_timezone() == ZoneInfo("America/Chicago")

    @pytest.mark.parametrize("name", ["Mars/Olympus", "../../etc/passwd", ""])
    def test_unknown_zone(self, name: str) -> None:
        with pytest.raises(TimezoneNotFoundError) as exc:
            resolve_timezone(name)

        assert exc.value.setting == "timezone"
        assert exc.value.value == name
