"""Detect date-range phrases and compute their bounds."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from barista.nlu.intents import TemporalInfo, TemporalRange

TEMPORAL_RANGE_KEY = "temporalRange"
START_DATE_KEY = "startDate"
END_DATE_KEY = "endDate"


def _start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def _start_of_week(value: datetime) -> datetime:
    # Weeks start on Sunday.
    days_since_sunday = (value.weekday() + 1) % 7
    return _start_of_day(value) - timedelta(days=days_since_sunday)


def _end_of_day(value: datetime) -> datetime:
    return value.replace(hour=23, minute=59, second=59, microsecond=999000)


def _today(now: datetime) -> tuple[datetime, datetime]:
    return _start_of_day(now), now


def _yesterday(now: datetime) -> tuple[datetime, datetime]:
    start = _start_of_day(now) - timedelta(days=1)
    return start, _end_of_day(start)


def _this_week(now: datetime) -> tuple[datetime, datetime]:
    return _start_of_week(now), now


def _last_week(now: datetime) -> tuple[datetime, datetime]:
    end = _start_of_week(now)
    return end - timedelta(days=7), end


def _this_month(now: datetime) -> tuple[datetime, datetime]:
    return _start_of_day(now).replace(day=1), now


def _last_month(now: datetime) -> tuple[datetime, datetime]:
    first_of_this_month = _start_of_day(now).replace(day=1)
    last_day = first_of_this_month - timedelta(days=1)
    return last_day.replace(day=1), _end_of_day(last_day)


def _recent(now: datetime) -> tuple[datetime, datetime]:
    return now - timedelta(days=7), now


@dataclass(frozen=True)
class _TemporalRule:
    range: TemporalRange
    pattern: re.Pattern[str]
    bounds: Callable[[datetime], tuple[datetime, datetime]]


# Order is precedence: the first matching rule wins.
_TEMPORAL_RULES: tuple[_TemporalRule, ...] = (
    _TemporalRule(TemporalRange.TODAY, re.compile(r"\btoday\b"), _today),
    _TemporalRule(TemporalRange.YESTERDAY, re.compile(r"\byesterday\b"), _yesterday),
    _TemporalRule(TemporalRange.THIS_WEEK, re.compile(r"\bthis week\b"), _this_week),
    _TemporalRule(
        TemporalRange.LAST_WEEK,
        re.compile(r"\blast week\b|\bpast week\b|\bweek'?s?\b"),
        _last_week,
    ),
    _TemporalRule(TemporalRange.THIS_MONTH, re.compile(r"\bthis month\b"), _this_month),
    _TemporalRule(TemporalRange.LAST_MONTH, re.compile(r"\blast month\b"), _last_month),
    _TemporalRule(
        TemporalRange.RECENT, re.compile(r"\brecent\b|\blatest\b|\bnew\b"), _recent
    ),
)


def extract_temporal(query: str, now: datetime | None = None) -> TemporalInfo:
    """Detect the first date-range phrase in a query.

    Args:
        query: Query text, raw or normalized.
        now: Reference time; defaults to the current local time.

    Returns:
        TemporalInfo with concrete bounds, or an empty TemporalInfo when the
        query names no range.
    """

    lowered = query.lower()
    for rule in _TEMPORAL_RULES:
        if rule.pattern.search(lowered):
            start, end = rule.bounds(now or datetime.now())
            return TemporalInfo(range=rule.range, start=start, end=end)

    return TemporalInfo()


def temporal_entities(info: TemporalInfo) -> dict[str, str]:
    """Render temporal info as intent entities."""

    if not info.is_present:
        return {}

    entities = {TEMPORAL_RANGE_KEY: info.range.value}
    if info.start is not None:
        entities[START_DATE_KEY] = info.start.isoformat()
    if info.end is not None:
        entities[END_DATE_KEY] = info.end.isoformat()
    return entities
