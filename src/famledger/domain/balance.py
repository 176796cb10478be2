"""Wallet balance domain service."""

from decimal import Decimal

from famledger.database.base import Database
from famledger.domain.entities import Action, Summary
from famledger.domain.errors import StorageError, SUMMARY_FAILED


class BalanceService:
    """Service for computing per-person wallet summaries."""

    def __init__(self, db: Database):
        """Initialize balance service.

        Args:
            db: Database instance
        """
        self.db = db

    def compute_summary(self, person: str) -> Summary:
        """Compute wallet balance and earned/spent totals for a person.

        Everything paid to the person counts as inflow and everything paid by
        them as outflow, so the balance can go negative. Only EARN received
        counts as earned and only SPEND paid counts as spent: borrowed money
        moves the balance without being income.

        An unknown person has an all-zero summary.

        Raises:
            StorageError: If the ledger could not be read
        """
        inflow = Decimal("0")
        outflow = Decimal("0")
        total_earn = Decimal("0")
        total_spend = Decimal("0")

        try:
            transactions = self.db.list_transactions(person=person)
        except StorageError as e:
            raise StorageError(SUMMARY_FAILED) from e

        for txn in transactions:
            if txn.to_party == person:
                inflow += txn.amount
                if txn.action is Action.EARN:
                    total_earn += txn.amount
            if txn.from_party == person:
                outflow += txn.amount
                if txn.action is Action.SPEND:
                    total_spend += txn.amount

        return Summary(
            person=person,
            wallet_balance=inflow - outflow,
            total_earn=total_earn,
            total_spend=total_spend,
        )
