"""
Unit tests for dashboard generation.
"""

from decimal import Decimal

import pytest

from demo_insights.config import DashboardConfig, Settings
from demo_insights.metrics import DashboardGenerator


@pytest.fixture
def generator(calculator, settings):
    return DashboardGenerator(calculator, settings=settings)


@pytest.fixture
def report(calculator, catalog, seeded_ledger):
    return calculator.calculate_all_metrics(catalog.demos, seeded_ledger.customers)


class TestFormatting:

    @pytest.mark.parametrize("amount,expected", [
        (Decimal("225000"), "$225.0k"),
        (Decimal("45000"), "$45.0k"),
        (Decimal("1230"), "$1.2k"),
        (Decimal("0"), "$0.0k"),
    ])
    def test_format_revenue(self, generator, amount, expected):
        assert generator.format_revenue(amount) == expected

    def test_custom_currency(self, calculator):
        settings = Settings(dashboard=DashboardConfig(
            currency_symbol="€", revenue_display_divisor=1000000, revenue_display_suffix="M"
        ))
        generator = DashboardGenerator(calculator, settings=settings)
        assert generator.format_revenue(Decimal("2500000")) == "€2.5M"


class TestGenerateDashboard:

    def test_cards(self, generator, report):
        dashboard = generator.generate_dashboard(report)
        cards = {c.metric_name: c for c in dashboard.cards}

        assert [c.title for c in dashboard.cards] == [
            "Total Demos", "Avg. Attendees", "Conversion Rate", "Revenue"
        ]
        assert cards["total_demos"].value == "6"
        assert cards["avg_attendees"].value == "19"
        assert cards["conversion_rate"].value == "50%"
        assert cards["total_revenue"].value == "$270.0k"
        assert all(c.change_percent is None for c in dashboard.cards)

    def test_category_rows(self, generator, report):
        rows = {r.key: r for r in generator.generate_dashboard(report).categories}

        assert rows["virtual"].share_percent == pytest.approx(100 * 2 / 6)
        assert rows["virtual"].conversion == "50%"
        assert rows["virtual"].revenue == "$150.0k"
        assert rows["on-site"].capacity == "Up to 12 attendees"

    def test_type_distribution(self, generator, report):
        distribution = generator.generate_dashboard(report).type_distribution
        assert distribution[0] == {"name": "Virtual", "value": 2}

    def test_empty_report_has_zero_shares(self, generator, calculator):
        report = calculator.calculate_all_metrics([], [])
        dashboard = generator.generate_dashboard(report)
        assert all(r.share_percent == 0.0 for r in dashboard.categories)
        assert dashboard.cards[3].value == "$0.0k"

    def test_change_against_recorded_snapshot(
        self, generator, calculator, catalog, seeded_ledger, report
    ):
        generator.record_snapshot(report)
        seeded_ledger.add_demo_revenue("1", "d4", 27000, "Virtual")

        later = calculator.calculate_all_metrics(catalog.demos, seeded_ledger.customers)
        cards = {c.metric_name: c for c in generator.generate_dashboard(later).cards}

        assert cards["total_revenue"].change_percent == pytest.approx(10.0)
        assert cards["total_demos"].change_percent == pytest.approx(0.0)

    def test_format_summary(self, generator, report):
        text = generator.format_summary(generator.generate_dashboard(report))

        assert "Conversion Rate: 50%" in text
        assert "Revenue: $270.0k" in text
        assert "- Virtual: 2 demos (33%), conversion 50%, revenue $150.0k" in text
