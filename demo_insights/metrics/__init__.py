"""
Metrics and Reporting

Derived demo metrics, recomputed from the current demo catalog and
customer ledger snapshots on every read:
- Total demos and average attendance
- Conversion rate and total revenue
- Per-category breakdown

This module provides:
- Metric calculation
- Dashboard data generation
"""

from .calculator import (
    MetricsCalculator,
    MetricDefinition,
    DemoSummaryMetrics,
    CategoryBreakdown,
    DemoMetricsReport
)
from .dashboard import DashboardData, DashboardGenerator, MetricCard, CategoryRow

__all__ = [
    "MetricsCalculator",
    "MetricDefinition",
    "DemoSummaryMetrics",
    "CategoryBreakdown",
    "DemoMetricsReport",
    "DashboardData",
    "DashboardGenerator",
    "MetricCard",
    "CategoryRow"
]
