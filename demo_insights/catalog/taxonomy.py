"""
Demo category taxonomy.

Fixed at process start. Keys are matched case-insensitively against
DemoRecord.location.
"""

from .demos import DemoCategoryDefinition


DEFAULT_DEMO_CATEGORIES = {
    "virtual": DemoCategoryDefinition(
        key="virtual",
        name="Virtual",
        description="Live product walkthrough over video conference",
        duration="60 minutes",
        capacity="Up to 50 attendees"
    ),
    "nexus": DemoCategoryDefinition(
        key="nexus",
        name="Nexus",
        description="Regional hub event combining demos with networking",
        duration="Half day",
        capacity="Up to 30 attendees"
    ),
    "on-site": DemoCategoryDefinition(
        key="on-site",
        name="On-site",
        description="Weekly Friday sessions hosted at our office",
        duration="2 hours",
        capacity="Up to 12 attendees"
    ),
    "on-location": DemoCategoryDefinition(
        key="on-location",
        name="On-location",
        description="Premium tailored demo at the customer's premises",
        duration="Full day",
        capacity="Up to 20 attendees"
    )
}
