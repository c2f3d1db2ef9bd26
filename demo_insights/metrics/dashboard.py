"""
Dashboard Data Generation

Turns a metrics report into display-ready records for the analytics view.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..config.settings import DashboardConfig, Settings, get_settings
from .calculator import DemoMetricsReport, MetricsCalculator


@dataclass
class MetricCard:
    """One headline metric as shown on the dashboard."""
    metric_name: str
    title: str
    value: str
    change_percent: Optional[float] = None  # vs previous recorded snapshot


@dataclass
class CategoryRow:
    """One demo category row of the performance panel."""
    key: str
    name: str
    description: str
    duration: str
    capacity: str
    demo_count: int
    share_percent: float  # of all demos
    avg_attendees: int
    conversion: str
    revenue: str


@dataclass
class DashboardData:
    """Complete dashboard data snapshot."""
    generated_at: datetime = field(default_factory=datetime.now)
    cards: list = field(default_factory=list)
    categories: list = field(default_factory=list)
    type_distribution: list = field(default_factory=list)


class DashboardGenerator:
    """Generates dashboard data from metrics reports."""

    def __init__(self, calculator: MetricsCalculator = None, settings: Settings = None):
        self._calculator = calculator or MetricsCalculator()
        self._config: DashboardConfig = (settings or get_settings()).dashboard
        self._history: list[dict] = []  # previous summary values

    def record_snapshot(self, report: DemoMetricsReport) -> None:
        """Record a report's headline values so later cards can show change."""
        self._history.append({
            "timestamp": report.generated_at,
            "metrics": self._summary_values(report)
        })

    def format_revenue(self, amount: Decimal) -> str:
        """$225.0k style revenue label."""
        scaled = Decimal(amount) / Decimal(self._config.revenue_display_divisor)
        return f"{self._config.currency_symbol}{scaled:.1f}{self._config.revenue_display_suffix}"

    def generate_dashboard(self, report: DemoMetricsReport) -> DashboardData:
        """Generate complete dashboard data."""
        dashboard = DashboardData(generated_at=report.generated_at)
        summary = report.summary
        current = self._summary_values(report)
        previous = self._history[-1]["metrics"] if self._history else {}

        display_values = {
            "total_demos": str(summary.total_demos),
            "avg_attendees": str(summary.avg_attendees),
            "conversion_rate": f"{summary.conversion_rate}%",
            "total_revenue": self.format_revenue(summary.total_revenue)
        }

        for name, value in display_values.items():
            definition = self._calculator.get_metric_definition(name)
            dashboard.cards.append(MetricCard(
                metric_name=name,
                title=definition.name if definition else name,
                value=value,
                change_percent=self._change(previous.get(name), current[name])
            ))

        for category in report.categories:
            if summary.total_demos:
                share = category.demo_count / summary.total_demos * 100
            else:
                share = 0.0

            dashboard.categories.append(CategoryRow(
                key=category.key,
                name=category.name,
                description=category.description,
                duration=category.duration,
                capacity=category.capacity,
                demo_count=category.demo_count,
                share_percent=share,
                avg_attendees=category.avg_attendees,
                conversion=f"{category.conversion}%",
                revenue=self.format_revenue(category.revenue)
            ))

        dashboard.type_distribution = [
            {"name": name, "value": count} for name, count in report.type_distribution
        ]

        return dashboard

    def _summary_values(self, report: DemoMetricsReport) -> dict:
        summary = report.summary
        return {
            "total_demos": float(summary.total_demos),
            "avg_attendees": float(summary.avg_attendees),
            "conversion_rate": float(summary.conversion_rate),
            "total_revenue": float(summary.total_revenue)
        }

    def _change(self, before: Optional[float], after: float) -> Optional[float]:
        if before is None or before == 0:
            return None
        return (after - before) / before * 100

    def format_summary(self, dashboard: DashboardData) -> str:
        """Format dashboard as text summary."""
        lines = [
            f"Demo Dashboard ({dashboard.generated_at.strftime('%Y-%m-%d %H:%M')})",
            "",
            "Headline Metrics:"
        ]

        for card in dashboard.cards:
            line = f"  {card.title}: {card.value}"
            if card.change_percent is not None:
                line += f" ({card.change_percent:+.0f}%)"
            lines.append(line)

        if dashboard.categories:
            lines.extend(["", "Demo Type Performance:"])
            for row in dashboard.categories:
                lines.append(
                    f"  - {row.name}: {row.demo_count} demos ({row.share_percent:.0f}%), "
                    f"conversion {row.conversion}, revenue {row.revenue}"
                )

        return "\n".join(lines)
