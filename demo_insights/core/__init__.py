"""
Core domain models for the demo revenue ledger.

Customers, their stakeholders and the embedded revenue sub-ledger that
records sales attributed to demos.
"""
