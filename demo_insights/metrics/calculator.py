"""
Metrics Calculator

Joins demo records to customer sale records and calculates:
- Total demos and average attendance
- Conversion rate (demos that led to at least one sale)
- Total revenue across customers
- Per-category breakdown (count, attendance, revenue, conversion)

Everything is recomputed from the inputs on every call. Nothing is cached.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Mapping, Optional

from ..catalog.demos import DemoCategoryDefinition, DemoRecord
from ..catalog.taxonomy import DEFAULT_DEMO_CATEGORIES
from ..core.entities import ZERO, CustomerProfile


def rounded_ratio(numerator, denominator, scale: int = 1) -> int:
    """
    Round scale * numerator / denominator to the nearest int, halves up.

    A zero denominator yields 0 instead of an error.
    """
    if not denominator:
        return 0
    value = Decimal(scale) * Decimal(numerator) / Decimal(denominator)
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass
class MetricDefinition:
    """Definition of a headline metric."""
    name: str
    description: str
    unit: str


@dataclass(frozen=True)
class DemoSummaryMetrics:
    """Headline metrics across all demos and customers."""
    total_demos: int
    avg_attendees: int
    demos_with_sales: int
    conversion_rate: int  # percent
    total_revenue: Decimal


@dataclass(frozen=True)
class CategoryBreakdown:
    """
    Aggregates for one demo category.

    conversion counts every matching sale, so a demo sold twice counts
    twice and the value can exceed 100.
    """
    key: str
    name: str
    description: str
    duration: str
    capacity: str
    demo_count: int
    avg_attendees: int
    sales_count: int
    revenue: Decimal
    conversion: int  # percent


@dataclass
class DemoMetricsReport:
    """Complete metrics snapshot for the presentation layer."""
    summary: DemoSummaryMetrics
    categories: tuple = ()
    type_distribution: tuple = ()  # (category name, demo count) pairs
    generated_at: datetime = field(default_factory=datetime.now)


class MetricsCalculator:
    """
    Calculates demo conversion and revenue metrics.

    The category taxonomy fixes which breakdown rows exist and their
    order; demos whose location matches no category only count toward
    the overall figures.
    """

    def __init__(self, categories: Mapping[str, DemoCategoryDefinition] = None):
        self._categories = dict(categories or DEFAULT_DEMO_CATEGORIES)
        self._metrics = self._define_metrics()

    def _define_metrics(self) -> dict[str, MetricDefinition]:
        return {
            "total_demos": MetricDefinition(
                name="Total Demos",
                description="Number of demos in the catalog",
                unit="demos"
            ),
            "avg_attendees": MetricDefinition(
                name="Avg. Attendees",
                description="Average attendees per demo",
                unit="attendees"
            ),
            "conversion_rate": MetricDefinition(
                name="Conversion Rate",
                description="Percentage of demos with at least one sale",
                unit="%"
            ),
            "total_revenue": MetricDefinition(
                name="Revenue",
                description="Sum of all customer revenue ledger totals",
                unit="currency"
            )
        }

    def get_metric_definition(self, metric_name: str) -> Optional[MetricDefinition]:
        """Get definition for a metric."""
        return self._metrics.get(metric_name)

    @property
    def categories(self) -> dict[str, DemoCategoryDefinition]:
        return dict(self._categories)

    def calculate_summary(
        self,
        demos: Iterable[DemoRecord],
        customers: Iterable[CustomerProfile]
    ) -> DemoSummaryMetrics:
        """
        Calculate the headline metrics.

        demos_with_sales counts distinct demo ids referenced by any sale,
        whether or not the id is in the catalog. total_revenue trusts each
        ledger's cached total.
        """
        demos = tuple(demos)
        customers = tuple(customers)

        total_demos = len(demos)
        total_attendees = sum(demo.attendees for demo in demos)

        demos_with_sales = len({
            sale.demo_id
            for customer in customers
            for sale in customer.revenue.sales
        })

        total_revenue = sum(
            (customer.revenue.total_amount for customer in customers),
            ZERO
        )

        return DemoSummaryMetrics(
            total_demos=total_demos,
            avg_attendees=rounded_ratio(total_attendees, total_demos),
            demos_with_sales=demos_with_sales,
            conversion_rate=rounded_ratio(demos_with_sales, total_demos, scale=100),
            total_revenue=total_revenue
        )

    def calculate_category_breakdown(
        self,
        demos: Iterable[DemoRecord],
        customers: Iterable[CustomerProfile]
    ) -> tuple:
        """Calculate one CategoryBreakdown per taxonomy entry, in taxonomy order."""
        demos = tuple(demos)
        sales = tuple(
            sale
            for customer in customers
            for sale in customer.revenue.sales
        )

        breakdown = []
        for key, definition in self._categories.items():
            category_demos = [d for d in demos if d.category_key == key.lower()]
            demo_ids = {d.id for d in category_demos}

            related_sales = [s for s in sales if s.demo_id in demo_ids]
            demo_count = len(category_demos)

            breakdown.append(CategoryBreakdown(
                key=key,
                name=definition.name,
                description=definition.description,
                duration=definition.duration,
                capacity=definition.capacity,
                demo_count=demo_count,
                avg_attendees=rounded_ratio(
                    sum(d.attendees for d in category_demos), demo_count
                ),
                sales_count=len(related_sales),
                revenue=sum((s.amount for s in related_sales), ZERO),
                conversion=rounded_ratio(len(related_sales), demo_count, scale=100)
            ))

        return tuple(breakdown)

    def calculate_type_distribution(self, demos: Iterable[DemoRecord]) -> tuple:
        """Demo count per category name, in taxonomy order."""
        demos = tuple(demos)
        return tuple(
            (definition.name, sum(1 for d in demos if d.category_key == key.lower()))
            for key, definition in self._categories.items()
        )

    def calculate_all_metrics(
        self,
        demos: Iterable[DemoRecord],
        customers: Iterable[CustomerProfile]
    ) -> DemoMetricsReport:
        """Calculate every metric from one consistent (demos, customers) pair."""
        demos = tuple(demos)
        customers = tuple(customers)

        return DemoMetricsReport(
            summary=self.calculate_summary(demos, customers),
            categories=self.calculate_category_breakdown(demos, customers),
            type_distribution=self.calculate_type_distribution(demos)
        )
