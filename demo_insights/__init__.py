"""
Demo Insights

Revenue ledger and metrics aggregation for sales-engineering demos:
customer profiles with append-only sale ledgers, joined against the demo
catalog to report conversion, revenue and attendance by demo category.
"""

__version__ = "0.1.0"
