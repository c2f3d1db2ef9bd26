"""
Sample data for demonstrations and tests.

Two customers with existing sales, and a small demo catalog whose first
three demos are the ones those sales refer to.
"""

from datetime import datetime
from decimal import Decimal

from ..catalog.demos import DemoCatalog, DemoRecord
from ..core.entities import (
    CustomerProfile,
    CustomerStatus,
    InfluenceTier,
    RevenueLedger,
    SaleRecord,
    Stakeholder,
)


def sample_customers() -> tuple:
    """The two seeded customers."""
    techcorp_sales = (
        SaleRecord(
            id="s1",
            demo_id="d1",
            product_name="Enterprise License",
            amount=Decimal("150000"),
            quantity=1,
            date=datetime(2024, 2, 20),
            notes="Annual enterprise license with support"
        ),
        SaleRecord(
            id="s2",
            demo_id="d2",
            product_name="Department Licenses",
            amount=Decimal("75000"),
            quantity=5,
            date=datetime(2024, 3, 5),
            notes="Expansion to marketing and sales departments"
        ),
    )
    global_sales = (
        SaleRecord(
            id="s3",
            demo_id="d3",
            product_name="Professional License",
            amount=Decimal("45000"),
            quantity=3,
            date=datetime(2024, 3, 15),
            notes="Initial deployment for core team"
        ),
    )

    return (
        CustomerProfile(
            id="1",
            company="TechCorp Industries",
            industry="Manufacturing",
            size="1000-5000",
            budget="$100k-500k",
            website="techcorp.com",
            status=CustomerStatus.ACTIVE,
            pain_points=(
                "Legacy system integration issues",
                "Scalability challenges",
                "Data security concerns",
            ),
            requirements=(
                "Cloud deployment",
                "Real-time analytics",
                "Mobile access",
                "Enterprise-grade security",
            ),
            stakeholders=(
                Stakeholder(
                    id="s1",
                    name="John Smith",
                    role="CTO",
                    influence=InfluenceTier.DECISION_MAKER,
                    email="john.smith@techcorp.com",
                    phone="(555) 123-4567",
                    notes="Primary technical contact"
                ),
                Stakeholder(
                    id="s2",
                    name="Sarah Johnson",
                    role="IT Director",
                    influence=InfluenceTier.TECHNICAL_EVALUATOR,
                    email="sarah.j@techcorp.com",
                    notes="Focused on security requirements"
                ),
            ),
            current_solution="Legacy on-premise system",
            timeline="Q2 2024",
            notes="High-priority prospect with immediate needs",
            last_contact=datetime(2024, 3, 15),
            revenue=RevenueLedger(
                sales=techcorp_sales,
                total_amount=Decimal("225000"),
                last_updated=datetime(2024, 3, 5)
            )
        ),
        CustomerProfile(
            id="2",
            company="Global Solutions Ltd",
            industry="Technology",
            size="500-1000",
            budget="$50k-100k",
            website="globalsolutions.io",
            status=CustomerStatus.PROSPECT,
            pain_points=(
                "High operational costs",
                "Manual process inefficiencies",
                "Limited visibility into metrics",
            ),
            requirements=(
                "Cost optimization tools",
                "Process automation",
                "Advanced reporting",
                "Integration capabilities",
            ),
            stakeholders=(
                Stakeholder(
                    id="s3",
                    name="Michael Chang",
                    role="COO",
                    influence=InfluenceTier.DECISION_MAKER,
                    email="m.chang@globalsolutions.io",
                    phone="(555) 987-6543",
                    notes="Interested in operational efficiency gains"
                ),
                Stakeholder(
                    id="s4",
                    name="Emma Wilson",
                    role="Finance Director",
                    influence=InfluenceTier.FINANCIAL_APPROVER,
                    email="e.wilson@globalsolutions.io",
                    notes="Focused on ROI and cost savings"
                ),
            ),
            current_solution="Multiple disconnected tools",
            timeline="Q3 2024",
            notes="Looking for comprehensive solution to replace current tech stack",
            last_contact=datetime(2024, 3, 10),
            revenue=RevenueLedger(
                sales=global_sales,
                total_amount=Decimal("45000"),
                last_updated=datetime(2024, 3, 15)
            )
        ),
    )


def sample_catalog() -> DemoCatalog:
    """Six demos across the four default categories."""
    return DemoCatalog(demos=(
        DemoRecord(id="d1", location="Virtual", attendees=24),
        DemoRecord(id="d2", location="On-site", attendees=8),
        DemoRecord(id="d3", location="Nexus", attendees=18),
        DemoRecord(id="d4", location="Virtual", attendees=31),
        DemoRecord(id="d5", location="On-location", attendees=12),
        DemoRecord(id="d6", location="Nexus", attendees=22),
    ))
