"""
Dashboard statistics: frequency rankings and the product pie chart.

Rankings are count-descending; equal counts keep the order in which the
values were first seen in the input.
"""
from __future__ import annotations

from typing import Iterable

from .sorting import sort_registrations
from .types import ChartSegment, Dimension, Registration, SortKey, SortOrder


CHART_PALETTE = (
    "#ff6b6b",
    "#4ecdc4",
    "#45b7d1",
    "#96ceb4",
    "#feca57",
    "#ff9ff3",
    "#54a0ff",
    "#5f27cd",
)
CHART_TOP_N = 5


def count_by(registrations: Iterable[Registration], dimension: Dimension | str) -> dict[str, int]:
    attr = Dimension.parse(dimension).value
    counts: dict[str, int] = {}
    for registration in registrations:
        value = getattr(registration, attr)
        counts[value] = counts.get(value, 0) + 1
    return counts


def top_n(
    registrations: Iterable[Registration],
    dimension: Dimension | str,
    n: int,
) -> list[tuple[str, int]]:
    if n <= 0:
        return []
    counts = count_by(registrations, dimension)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return ranked[:n]


def product_chart_data(registrations: Iterable[Registration]) -> list[ChartSegment]:
    ranked = top_n(registrations, Dimension.PRODUCT, CHART_TOP_N)
    total = sum(count for _, count in ranked)
    if total == 0:
        return []

    segments = []
    start = 0.0
    for index, (product, count) in enumerate(ranked):
        sweep = count / total * 360
        segments.append(
            ChartSegment(
                product=product,
                count=count,
                color=CHART_PALETTE[index % len(CHART_PALETTE)],
                start_angle=start,
                sweep_angle=sweep,
            )
        )
        start += sweep
    return segments


def recent_activity(registrations: Iterable[Registration], limit: int = 10) -> list[Registration]:
    if limit <= 0:
        return []
    return sort_registrations(registrations, SortKey.DATE, SortOrder.NEWEST)[:limit]
