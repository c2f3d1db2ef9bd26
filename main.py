#!/usr/bin/env python3
"""
Demo Insights - Main Demo

This script walks through the revenue ledger and metrics engine:
1. Seeds the customer ledger and demo catalog
2. Prints the analytics dashboard
3. Adds a customer and records demo revenue
4. Prints the updated dashboard
"""

from datetime import datetime

from demo_insights.config import get_settings, setup_logging
from demo_insights.ledger import CustomerLedger
from demo_insights.ledger.seed import sample_catalog, sample_customers
from demo_insights.metrics import DashboardGenerator, MetricsCalculator


def print_dashboard(generator: DashboardGenerator, calculator: MetricsCalculator, catalog, ledger):
    """Compute a fresh report from current snapshots and print it."""
    report = calculator.calculate_all_metrics(catalog.demos, ledger.customers)
    dashboard = generator.generate_dashboard(report)
    print(generator.format_summary(dashboard))
    print()
    generator.record_snapshot(report)
    return report


def main():
    """Main entry point."""
    settings = get_settings()
    setup_logging(settings)

    print()
    print("+" + "=" * 58 + "+")
    print(f"|{settings.app_name.upper() + ' DEMONSTRATION':^58}|")
    print("+" + "=" * 58 + "+")
    print()

    catalog = sample_catalog()
    ledger = CustomerLedger(sample_customers(), settings=settings)
    calculator = MetricsCalculator(catalog.categories)
    generator = DashboardGenerator(calculator, settings=settings)

    print("=" * 60)
    print("INITIAL STATE")
    print("=" * 60)
    print_dashboard(generator, calculator, catalog, ledger)

    customer = ledger.add_customer({
        "company": "Northwind Analytics",
        "industry": "Logistics",
        "size": "200-500",
        "budget": "$50k-100k",
        "website": "northwind.example",
        "status": "Prospect",
        "pain_points": ["Route planning is manual", "No shared dashboards"],
        "requirements": ["SSO", "Fleet telemetry import"],
        "stakeholders": [
            {
                "name": "Dana Okafor",
                "role": "VP Operations",
                "influence": "Decision Maker",
                "email": "dana@northwind.example"
            }
        ],
        "timeline": "Q4 2024",
        "notes": "Met at regional Nexus event",
        "last_contact": datetime.now()
    })

    demo = catalog.get_demo("d6")
    ledger.add_demo_revenue(
        customer.id,
        demo.id,
        60000,
        catalog.category_label(demo.location)
    )
    ledger.update_customer(customer.id, {"status": "Active"})
    ledger.verify_invariants()

    print("=" * 60)
    print("AFTER NEW CUSTOMER AND SALE")
    print("=" * 60)
    print_dashboard(generator, calculator, catalog, ledger)

    for profile in ledger.customers:
        print(
            f"  {profile.company:<25} {profile.status.value:<10} "
            f"{len(profile.revenue.sales)} sales, "
            f"{generator.format_revenue(profile.revenue.total_amount)}"
        )
    print()


if __name__ == "__main__":
    main()
