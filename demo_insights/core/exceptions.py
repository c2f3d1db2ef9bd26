"""
Ledger exceptions.

Bad caller input is reported with ValueError (or pydantic's
ValidationError, which subclasses it). The classes below cover the
ledger-specific conditions.
"""


class LedgerError(Exception):
    """Base class for customer ledger errors."""


class CustomerNotFoundError(LedgerError):
    """
    Referenced customer id is not in the ledger.

    Only raised when strict customer lookup is enabled; by default an
    unknown id turns the mutation into a no-op.
    """

    def __init__(self, customer_id: str):
        super().__init__(f"Customer not found: {customer_id}")
        self.customer_id = customer_id


class LedgerInvariantError(LedgerError):
    """
    A revenue ledger broke one of its own invariants.

    This is an internal defect, never a recoverable condition.
    """

    def __init__(self, message: str, customer_id: str = None):
        owner = f" for customer {customer_id!r}" if customer_id else ""
        super().__init__(f"{message}{owner}")
        self.customer_id = customer_id


class RevenueDriftError(LedgerInvariantError):
    """Cached total disagrees with the sum of the sales."""

    def __init__(self, cached_total, computed_total, customer_id: str = None):
        super().__init__(
            f"Revenue total drift: cached {cached_total}, sales sum {computed_total}",
            customer_id
        )
        self.cached_total = cached_total
        self.computed_total = computed_total


class StaleTimestampError(LedgerInvariantError):
    """last_updated is earlier than the newest sale."""

    def __init__(self, last_updated, newest_sale, customer_id: str = None):
        super().__init__(
            f"Revenue ledger last updated {last_updated:%Y-%m-%d %H:%M:%S}, "
            f"before its newest sale at {newest_sale:%Y-%m-%d %H:%M:%S}",
            customer_id
        )
        self.last_updated = last_updated
        self.newest_sale = newest_sale
