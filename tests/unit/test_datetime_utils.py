"""UTC helpers used for created_at."""

from datetime import UTC, datetime, timedelta, timezone

from taskhub.shared.utils.datetime import ensure_utc, utc_now


def test_utc_now_is_aware() -> None:
    """utc_now carries the UTC zone."""
    assert utc_now().tzinfo is UTC


def test_ensure_utc_attaches_utc_to_naive() -> None:
    """Naive values read back from SQLite are taken as UTC."""
    assert ensure_utc(datetime(2025, 1, 15, 12, 0)) == datetime(2025, 1, 15, 12, 0, tzinfo=UTC)


def test_ensure_utc_converts_other_zones() -> None:
    """Aware values in other zones are shifted to UTC."""
    plus_two = datetime(2025, 1, 15, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    converted = ensure_utc(plus_two)
    assert converted.hour == 12
    assert converted.utcoffset() == timedelta(0)
