"""
Customer Ledger - State Container

Owns the authoritative customer collection and the currently focused
customer. Every mutation builds a complete new LedgerSnapshot and swaps
it in (copy-on-write), so a reader holding a snapshot always sees a
consistent collection, no matter what happens after it was taken.

Operations:
- add_customer: create a profile with a fresh id and an empty ledger
- update_customer: merge a partial update into an existing profile
- add_demo_revenue: append a demo sale and recompute the total
- select_customer: set the customer focused by detail views
"""

import logging
import threading
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, Iterable, Mapping, Optional, Union
from uuid import uuid4

from ..config.settings import Settings, get_settings
from ..core.entities import CustomerProfile, RevenueLedger, SaleRecord, to_money
from ..core.exceptions import CustomerNotFoundError
from .schemas import CustomerDraft, CustomerUpdate


logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid4().hex


@dataclass(frozen=True)
class LedgerSnapshot:
    """Immutable view of the ledger at one point in time."""
    customers: tuple = ()
    selected_customer_id: Optional[str] = None
    version: int = 0

    def get_customer(self, customer_id: str) -> Optional[CustomerProfile]:
        for customer in self.customers:
            if customer.id == customer_id:
                return customer
        return None

    @property
    def selected_customer(self) -> Optional[CustomerProfile]:
        if self.selected_customer_id is None:
            return None
        return self.get_customer(self.selected_customer_id)

    @property
    def customer_ids(self) -> frozenset:
        return frozenset(c.id for c in self.customers)


class CustomerLedger:
    """
    The customer ledger.

    Collaborators are injected so callers (and tests) control time and
    id generation. Writers are serialized by a lock; readers never lock,
    they just take the current snapshot.
    """

    def __init__(
        self,
        customers: Iterable[CustomerProfile] = (),
        settings: Settings = None,
        clock: Callable[[], datetime] = None,
        id_factory: Callable[[], str] = None
    ):
        self._settings = settings or get_settings()
        self._clock = clock or datetime.now
        self._id_factory = id_factory or _new_id
        self._lock = threading.Lock()

        customers = tuple(customers)
        ids = [c.id for c in customers]
        if len(ids) != len(set(ids)):
            raise ValueError("Customer ids must be unique")

        self._snapshot = LedgerSnapshot(customers=customers)

    # -- reads ---------------------------------------------------------------

    @property
    def snapshot(self) -> LedgerSnapshot:
        return self._snapshot

    @property
    def customers(self) -> tuple:
        return self._snapshot.customers

    @property
    def selected_customer(self) -> Optional[CustomerProfile]:
        return self._snapshot.selected_customer

    def get_customer(self, customer_id: str) -> Optional[CustomerProfile]:
        return self._snapshot.get_customer(customer_id)

    def has_customer(self, customer_id: str) -> bool:
        return self._snapshot.get_customer(customer_id) is not None

    def verify_invariants(self, snapshot: LedgerSnapshot = None) -> None:
        """
        Raise LedgerInvariantError if any revenue ledger is broken: a cached
        total that drifted from its sales, or a last_updated earlier than
        the newest sale.
        """
        snapshot = snapshot or self._snapshot
        for customer in snapshot.customers:
            customer.revenue.check_invariants(customer.id)

    # -- mutations -----------------------------------------------------------

    def add_customer(self, draft: Union[CustomerDraft, Mapping]) -> CustomerProfile:
        """Create a customer with a fresh id and an empty revenue ledger."""
        if not isinstance(draft, CustomerDraft):
            draft = CustomerDraft.model_validate(draft)

        with self._lock:
            current = self._snapshot
            customer_id = self._unused_id(current.customer_ids)
            profile = CustomerProfile(
                id=customer_id,
                revenue=RevenueLedger.empty(self._clock()),
                **draft.to_profile_fields(self._id_factory)
            )
            self._commit(replace(
                current,
                customers=current.customers + (profile,),
                version=current.version + 1
            ))

        logger.info("Added customer %s (%s)", profile.id, profile.company)
        return profile

    def update_customer(
        self,
        customer_id: str,
        updates: Union[CustomerUpdate, Mapping]
    ) -> LedgerSnapshot:
        """
        Merge supplied fields into an existing customer.

        Fields absent from the update are left untouched. An unknown id is
        a no-op returning the unchanged snapshot, unless strict lookup is on.
        """
        if not isinstance(updates, CustomerUpdate):
            updates = CustomerUpdate.model_validate(updates)

        with self._lock:
            current = self._snapshot
            customer = current.get_customer(customer_id)
            if customer is None:
                return self._missing(customer_id, "update_customer")

            changes = updates.to_profile_updates(self._id_factory)
            if not changes:
                return current

            updated = customer.with_updates(**changes)
            snapshot = self._commit(self._replace_customer(current, updated))

        logger.info("Updated customer %s: %s", customer_id, ", ".join(sorted(changes)))
        return snapshot

    def add_demo_revenue(
        self,
        customer_id: str,
        demo_id: str,
        amount,
        category_label: str
    ) -> LedgerSnapshot:
        """
        Record a sale attributed to a demo.

        The sale has quantity 1 and a product name derived from the demo
        category label. The ledger total is recomputed over all sales.
        """
        amount = to_money(amount)

        with self._lock:
            current = self._snapshot
            customer = current.get_customer(customer_id)
            if customer is None:
                return self._missing(customer_id, "add_demo_revenue")

            if amount < 0:
                logger.warning(
                    "Recording negative sale amount %s for customer %s on demo %s",
                    amount, customer_id, demo_id
                )

            now = self._clock()
            existing_ids = frozenset(s.id for s in customer.revenue.sales)
            sale = SaleRecord(
                id=self._unused_id(existing_ids),
                demo_id=demo_id,
                product_name=f"{category_label} {self._settings.ledger.sale_product_suffix}",
                amount=amount,
                date=now,
                quantity=1,
                notes=f"Sale from {category_label} demo"
            )
            updated = customer.with_revenue(customer.revenue.append(sale, now))
            snapshot = self._commit(self._replace_customer(current, updated))

        logger.info(
            "Recorded sale %s of %s for customer %s on demo %s (total %s)",
            sale.id, amount, customer_id, demo_id, updated.revenue.total_amount
        )
        return snapshot

    def select_customer(self, customer_id: Optional[str]) -> LedgerSnapshot:
        """Set the focused customer. Not validated against the collection."""
        with self._lock:
            current = self._snapshot
            snapshot = self._commit(replace(
                current,
                selected_customer_id=customer_id,
                version=current.version + 1
            ))
        logger.debug("Selected customer %s", customer_id)
        return snapshot

    # -- helpers -------------------------------------------------------------

    def _commit(self, snapshot: LedgerSnapshot) -> LedgerSnapshot:
        self._snapshot = snapshot
        return snapshot

    def _replace_customer(
        self,
        current: LedgerSnapshot,
        updated: CustomerProfile
    ) -> LedgerSnapshot:
        return replace(
            current,
            customers=tuple(
                updated if c.id == updated.id else c for c in current.customers
            ),
            version=current.version + 1
        )

    def _unused_id(self, taken: frozenset) -> str:
        new_id = self._id_factory()
        while new_id in taken:
            new_id = self._id_factory()
        return new_id

    def _missing(self, customer_id: str, operation: str) -> LedgerSnapshot:
        if self._settings.ledger.strict_customer_lookup:
            raise CustomerNotFoundError(customer_id)
        logger.debug("%s ignored: no customer with id %s", operation, customer_id)
        return self._snapshot
