"""Tests for date-range extraction."""

from datetime import datetime

from barista.nlu.intents import TemporalInfo, TemporalRange
from barista.nlu.temporal import extract_temporal, temporal_entities


def test_today(now: datetime) -> None:
    assert extract_temporal("toasts today", now) == TemporalInfo(
        range=TemporalRange.TODAY,
        start=datetime(2024, 5, 15),
        end=now,
    )


def test_yesterday_covers_the_whole_prior_day(now: datetime) -> None:
    assert extract_temporal("What happened Yesterday?", now) == TemporalInfo(
        range=TemporalRange.YESTERDAY,
        start=datetime(2024, 5, 14),
        end=datetime(2024, 5, 14, 23, 59, 59, 999000),
    )


def test_this_week_starts_on_sunday(now: datetime) -> None:
    info = extract_temporal("lop this week", now)

    assert info.range is TemporalRange.THIS_WEEK
    assert info.start == datetime(2024, 5, 12)
    assert info.end == now


def test_last_week_is_the_seven_days_before_this_week(now: datetime) -> None:
    info = extract_temporal("last week lop", now)

    assert info == TemporalInfo(
        range=TemporalRange.LAST_WEEK,
        start=datetime(2024, 5, 5),
        end=datetime(2024, 5, 12),
    )


def test_week_variants_map_to_last_week(now: datetime) -> None:
    assert extract_temporal("past week signals", now).range is TemporalRange.LAST_WEEK
    assert extract_temporal("this week's toasts", now).range is TemporalRange.THIS_WEEK
    assert extract_temporal("last week's toasts", now).range is TemporalRange.LAST_WEEK
    assert extract_temporal("the week's best", now).range is TemporalRange.LAST_WEEK


def test_last_week_on_a_sunday() -> None:
    sunday = datetime(2024, 5, 12, 9, 0)

    info = extract_temporal("last week", sunday)

    assert info.start == datetime(2024, 5, 5)
    assert info.end == datetime(2024, 5, 12)


def test_this_month(now: datetime) -> None:
    info = extract_temporal("badges this month", now)

    assert info.range is TemporalRange.THIS_MONTH
    assert info.start == datetime(2024, 5, 1)
    assert info.end == now


def test_last_month_across_year_boundary() -> None:
    info = extract_temporal("last month", datetime(2024, 1, 20, 8, 0))

    assert info == TemporalInfo(
        range=TemporalRange.LAST_MONTH,
        start=datetime(2023, 12, 1),
        end=datetime(2023, 12, 31, 23, 59, 59, 999000),
    )


def test_recent_is_trailing_seven_days(now: datetime) -> None:
    for query in ("recent lop", "latest playbooks", "new discussions"):
        info = extract_temporal(query, now)

        assert info.range is TemporalRange.RECENT
        assert info.start == datetime(2024, 5, 8, 14, 30)
        assert info.end == now


def test_first_match_wins(now: datetime) -> None:
    # "today" precedes "recent" even though both appear
    assert extract_temporal("recent toasts today", now).range is TemporalRange.TODAY
    assert extract_temporal("new this month", now).range is TemporalRange.THIS_MONTH


def test_no_temporal_phrase(now: datetime) -> None:
    info = extract_temporal("toast leaderboard", now)

    assert info == TemporalInfo()
    assert info.range is TemporalRange.NONE
    assert info.start is None
    assert info.end is None
    assert temporal_entities(info) == {}


def test_words_containing_range_terms_do_not_match(now: datetime) -> None:
    assert not extract_temporal("renewal weekly newsletter", now).is_present


def test_temporal_entities(now: datetime) -> None:
    info = extract_temporal("yesterday", now)

    assert temporal_entities(info) == {
        "temporalRange": "yesterday",
        "startDate": "2024-05-14T00:00:00",
        "endDate": "2024-05-14T23:59:59.999000",
    }
