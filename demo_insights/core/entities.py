"""
Core Entities - Customer Ledger Records

This module defines the records the customer ledger is made of. All of
them are immutable: a change to a customer produces a new profile via
dataclasses.replace, never an in-place edit.

Entities:
- Stakeholder: Individual contact inside a customer's buying committee
- SaleRecord: A sale attributed to a demo
- RevenueLedger: Append-only sales for one customer plus the cached total
- CustomerProfile: Prospective or active customer being demoed to
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional

from .exceptions import RevenueDriftError, StaleTimestampError


ZERO = Decimal("0")


def to_money(value) -> Decimal:
    """Convert an int/float/str/Decimal amount to Decimal without float noise."""
    if isinstance(value, bool):
        raise ValueError("Amount must be numeric, got a bool")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation:
            raise ValueError(f"Amount is not a number: {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return amount


class InfluenceTier(str, Enum):
    """How much weight a stakeholder carries in the purchase decision."""
    DECISION_MAKER = "Decision Maker"
    TECHNICAL_EVALUATOR = "Technical Evaluator"
    END_USER = "End User"
    FINANCIAL_APPROVER = "Financial Approver"


class CustomerStatus(str, Enum):
    """Pipeline status of a customer."""
    ACTIVE = "Active"
    PROSPECT = "Prospect"
    CLOSED_WON = "Closed Won"
    CLOSED_LOST = "Closed Lost"


@dataclass(frozen=True)
class Stakeholder:
    """A person on the customer side. Owned by its CustomerProfile."""
    id: str
    name: str
    role: str
    influence: InfluenceTier
    email: str
    phone: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class SaleRecord:
    """
    A monetary transaction attributed to one demo.

    demo_id is a loose reference into the demo catalog: it is never
    checked, and a dangling id simply fails to join during aggregation.
    """
    id: str
    demo_id: str
    product_name: str
    amount: Decimal
    date: datetime
    quantity: int = 1
    notes: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "amount", to_money(self.amount))
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"Quantity must be an integer, got {self.quantity!r}")
        if self.quantity < 1:
            raise ValueError(f"Quantity must be positive, got {self.quantity}")


@dataclass(frozen=True)
class RevenueLedger:
    """
    Append-only sales of one customer with the cached running total.

    Invariants: total_amount == sum of sale amounts, and last_updated is
    no earlier than the newest sale. Both are checked on construction, so
    a broken ledger can never exist.
    """
    sales: tuple = ()
    total_amount: Decimal = ZERO
    last_updated: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        object.__setattr__(self, "sales", tuple(self.sales))
        object.__setattr__(self, "total_amount", to_money(self.total_amount))
        self.check_invariants()

    def check_invariants(self, customer_id: str = None) -> None:
        """Raise a LedgerInvariantError subclass if either invariant is broken."""
        computed = self.computed_total()
        if self.total_amount != computed:
            raise RevenueDriftError(self.total_amount, computed, customer_id)
        newest = self.newest_sale_date
        if newest is not None and self.last_updated < newest:
            raise StaleTimestampError(self.last_updated, newest, customer_id)

    @property
    def newest_sale_date(self) -> Optional[datetime]:
        return max((sale.date for sale in self.sales), default=None)

    @classmethod
    def empty(cls, at: datetime) -> "RevenueLedger":
        return cls(sales=(), total_amount=ZERO, last_updated=at)

    def computed_total(self) -> Decimal:
        """Sum the raw sale amounts."""
        return sum((sale.amount for sale in self.sales), ZERO)

    def append(self, sale: SaleRecord, at: datetime) -> "RevenueLedger":
        """
        Return a new ledger with the sale appended.

        The total is recomputed over every sale rather than incremented.
        last_updated never moves backwards, even if the clock does.
        """
        sales = self.sales + (sale,)
        return RevenueLedger(
            sales=sales,
            total_amount=sum((s.amount for s in sales), ZERO),
            last_updated=max(at, self.last_updated, sale.date)
        )

    @property
    def demo_ids(self) -> frozenset:
        return frozenset(sale.demo_id for sale in self.sales)


@dataclass(frozen=True)
class CustomerProfile:
    """
    A customer (or prospect) the sales-engineering team demos to.

    Profiles are created through the customer ledger, which assigns the id
    and an empty revenue ledger. Sales are only ever added through the
    ledger's revenue operation, never through a field update.
    """
    id: str
    company: str
    industry: str = ""
    size: str = ""
    budget: str = ""
    website: str = ""
    status: CustomerStatus = CustomerStatus.PROSPECT
    pain_points: tuple = ()
    requirements: tuple = ()
    stakeholders: tuple = ()
    current_solution: Optional[str] = None
    timeline: str = ""
    notes: str = ""
    last_contact: datetime = field(default_factory=datetime.now)
    revenue: RevenueLedger = field(default_factory=RevenueLedger)

    def __post_init__(self):
        # pain points behave as a set but keep first-seen order
        object.__setattr__(self, "pain_points", tuple(dict.fromkeys(self.pain_points)))
        object.__setattr__(self, "requirements", tuple(self.requirements))
        object.__setattr__(self, "stakeholders", tuple(self.stakeholders))

    def with_updates(self, **updates) -> "CustomerProfile":
        return replace(self, **updates)

    def with_revenue(self, revenue: RevenueLedger) -> "CustomerProfile":
        return replace(self, revenue=revenue)
