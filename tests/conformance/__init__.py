"""
Conformance Test Suite

Property-based checks of the behaviour every caller relies on:
1. test_ledger_invariants.py - Revenue totals always equal the sales sum
2. test_snapshot_isolation.py - Mutations never disturb earlier snapshots
3. test_metrics_determinism.py - Aggregation is a pure function of its inputs

These tests use hypothesis for property-based testing.
"""
