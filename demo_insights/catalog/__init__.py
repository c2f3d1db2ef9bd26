"""
Demo Catalog

Read-only source of demo records and the static demo category taxonomy.
The ledger and metrics code only ever read from it.
"""

from .demos import DemoRecord, DemoCategoryDefinition, DemoCatalog
from .taxonomy import DEFAULT_DEMO_CATEGORIES

__all__ = [
    "DemoRecord",
    "DemoCategoryDefinition",
    "DemoCatalog",
    "DEFAULT_DEMO_CATEGORIES"
]
