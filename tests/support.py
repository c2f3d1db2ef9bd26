"""
Test helpers shared by unit and conformance tests.
"""

import itertools
from datetime import datetime, timedelta

from demo_insights.catalog import DemoRecord


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime = datetime(2024, 4, 1, 9, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


def sequential_ids(prefix: str = "id"):
    """Id factory yielding id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


def make_demos(*specs) -> tuple:
    """Build demo records from (id, location, attendees) tuples."""
    return tuple(DemoRecord(id=i, location=loc, attendees=n) for i, loc, n in specs)


def minimal_draft(company: str = "Acme Corp", **overrides) -> dict:
    draft = {"company": company, "industry": "Retail", "status": "Prospect"}
    draft.update(overrides)
    return draft
