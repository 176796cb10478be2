"""Domain model entities for famledger.

These are pure data classes representing ledger concepts, independent of
database schema. A person is not an entity: it is any name that shows up as
the source or destination of a transaction.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

# Counterparty for money entering or leaving the household.
WORLD = "WORLD"


class Action(str, Enum):
    """Kinds of ledger movement."""

    EARN = "EARN"
    SPEND = "SPEND"
    BORROW = "BORROW"
    TRANSFER = "TRANSFER"


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    timestamp: datetime
    from_party: str
    to_party: str
    action: Action
    amount: Decimal
    category: str
    note: str


@dataclass(frozen=True)
class Summary:
    """Wallet balance and category totals for one person."""

    person: str
    wallet_balance: Decimal
    total_earn: Decimal
    total_spend: Decimal
