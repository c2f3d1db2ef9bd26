"""
Customer Ledger

The authoritative customer collection and the only sanctioned ways to
change it. Mutations produce new immutable snapshots.
"""

from .schemas import CustomerDraft, CustomerUpdate, StakeholderDraft
from .store import CustomerLedger, LedgerSnapshot

__all__ = [
    "CustomerDraft",
    "CustomerUpdate",
    "StakeholderDraft",
    "CustomerLedger",
    "LedgerSnapshot"
]
