"""Group 3-hour forecast samples into calendar days and summarize them."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from datetime import date

from ..numbers import round_one_decimal
from .models import DailyReport, DayAggregate, ForecastPoint


def group_by_day(points: Iterable[ForecastPoint]) -> list[DayAggregate]:
    """Bucket points by date, keeping dates in first-seen order (not sorted)."""
    buckets: dict[str, dict[str, list]] = {}
    for point in points:
        bucket = buckets.setdefault(
            point.date_key,
            {"temperatures": [], "wind_speeds": [], "precipitations": [], "conditions": []},
        )
        bucket["temperatures"].append(point.temperature)
        bucket["wind_speeds"].append(point.wind_speed)
        bucket["precipitations"].append(point.precipitation)
        bucket["conditions"].append(point.condition)
    return [DayAggregate(date=day, **values) for day, values in buckets.items()]


def representative_condition(conditions: Sequence[str]) -> str:
    """Pick the most frequent condition.

    Samples are stable-sorted ascending by frequency and the last one is
    taken, so among equally frequent values the one seen last wins.
    """
    if not conditions:
        raise ValueError("Cannot pick a representative condition from no samples.")
    counts = Counter(conditions)
    return sorted(conditions, key=counts.__getitem__)[-1]


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def summarize_day(aggregate: DayAggregate) -> DailyReport:
    if aggregate.sample_count == 0:
        raise ValueError(f"Day {aggregate.date} has no samples.")
    day = date.fromisoformat(aggregate.date)
    return DailyReport(
        date=aggregate.date,
        weekday=day.strftime("%A"),
        min_temperature=round_one_decimal(min(aggregate.temperatures)),
        max_temperature=round_one_decimal(max(aggregate.temperatures)),
        mean_temperature=round_one_decimal(_mean(aggregate.temperatures)),
        mean_wind_speed=round_one_decimal(_mean(aggregate.wind_speeds)),
        total_precipitation=round_one_decimal(sum(aggregate.precipitations)),
        condition=representative_condition(aggregate.conditions),
    )


def build_daily_reports(points: Iterable[ForecastPoint], days: int) -> list[DailyReport]:
    """Summarize the first ``days`` dates in provider order."""
    if days <= 0:
        return []
    return [summarize_day(aggregate) for aggregate in group_by_day(points)[:days]]
