"""
Statistics tests: rankings, the product pie chart and recent activity.
"""

import pytest

from prodreg.engine import (
    CHART_PALETTE,
    Dimension,
    Registration,
    count_by,
    product_chart_data,
    recent_activity,
    top_n,
)
from prodreg.engine.demo_data import DEMO_REGISTRATIONS


def _reg(reg_id, product, user="Tom", location="Hal", timestamp="2025-06-15T10:00:00Z"):
    return Registration(
        id=str(reg_id),
        user=user,
        product=product,
        location=location,
        purpose="Reparatie",
        timestamp=timestamp,
        date=timestamp[:10],
        time=timestamp[11:19],
    )


class TestRankings:

    def test_top_users_on_demo_data(self):
        ranked = top_n(DEMO_REGISTRATIONS, Dimension.USER, 3)
        assert ranked == [
            ("Tom Peckstadt", 6),
            ("Siegfried Weverbergh", 3),
            ("Sven De Poorter", 2),
        ]

    def test_ties_keep_first_seen_order(self):
        ranked = top_n(DEMO_REGISTRATIONS, "product", 2)
        assert ranked == [
            ("Interflon Metal Clean spray 500ml", 4),
            ("Interflon Grease LT2 Lube shuttle 400gr", 4),
        ]

    def test_top_locations(self):
        ranked = top_n(DEMO_REGISTRATIONS, Dimension.LOCATION, 5)
        assert ranked[0] == ("Warehouse Dematic groot boven", 5)
        assert sum(count for _, count in ranked) == len(DEMO_REGISTRATIONS)

    def test_n_larger_than_distinct_values(self):
        regs = [_reg(1, "A"), _reg(2, "B"), _reg(3, "A")]
        assert top_n(regs, Dimension.PRODUCT, 10) == [("A", 2), ("B", 1)]

    @pytest.mark.parametrize("n", [0, -3])
    def test_non_positive_n_is_empty(self, n):
        assert top_n(DEMO_REGISTRATIONS, Dimension.USER, n) == []

    def test_count_by_empty(self):
        assert count_by([], Dimension.LOCATION) == {}

    def test_unknown_dimension_raises(self):
        with pytest.raises(ValueError):
            count_by(DEMO_REGISTRATIONS, "purpose")


class TestProductChart:

    def test_empty_history_has_no_segments(self):
        assert product_chart_data([]) == []

    def test_single_product_is_full_circle(self):
        segments = product_chart_data([_reg(1, "A"), _reg(2, "A")])
        assert len(segments) == 1
        assert segments[0].start_angle == 0
        assert segments[0].sweep_angle == pytest.approx(360.0)
        assert segments[0].color == CHART_PALETTE[0]

    def test_segments_are_contiguous_and_cover_circle(self):
        segments = product_chart_data(DEMO_REGISTRATIONS)
        assert len(segments) == 5
        assert sum(s.sweep_angle for s in segments) == pytest.approx(360.0)
        for previous, current in zip(segments, segments[1:]):
            assert current.start_angle == pytest.approx(previous.start_angle + previous.sweep_angle)
        assert [s.color for s in segments] == list(CHART_PALETTE[:5])

    def test_only_top_five_products_are_charted(self):
        regs = [_reg(i, f"P{i}") for i in range(7)]
        segments = product_chart_data(regs)
        assert [s.product for s in segments] == ["P0", "P1", "P2", "P3", "P4"]
        # percentages are relative to the charted products
        assert segments[0].sweep_angle == pytest.approx(72.0)

    def test_sweep_is_proportional_to_count(self):
        regs = [_reg(1, "A"), _reg(2, "A"), _reg(3, "A"), _reg(4, "B")]
        a, b = product_chart_data(regs)
        assert a.sweep_angle == pytest.approx(270.0)
        assert b.start_angle == pytest.approx(270.0)
        assert b.to_dict()["sweep_angle"] == pytest.approx(90.0)


class TestRecentActivity:

    def test_newest_first_and_limited(self):
        recent = recent_activity(DEMO_REGISTRATIONS, limit=3)
        assert [r.id for r in recent] == ["5", "4", "3"]

    def test_default_limit_is_ten(self):
        assert len(recent_activity(DEMO_REGISTRATIONS)) == 10

    def test_zero_limit(self):
        assert recent_activity(DEMO_REGISTRATIONS, limit=0) == []
