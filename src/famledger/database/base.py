"""Abstract ledger store interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from famledger.domain.entities import Action, Transaction


class Database(ABC):
    """Abstract append-only ledger store for famledger.

    Implementations raise StorageError when the underlying medium cannot be
    read or written.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def append_transaction(
        self,
        timestamp: datetime,
        from_party: str,
        to_party: str,
        action: Action,
        amount: Decimal,
        category: str = "",
        note: str = "",
    ) -> Transaction:
        """Persist a validated transaction. Returns the stored record."""
        pass

    @abstractmethod
    def list_transactions(self, person: Optional[str] = None) -> list[Transaction]:
        """List transactions, most recent first.

        Args:
            person: If given, only return transactions where this person is
                the source or the destination

        Ties on timestamp are broken by insertion order, latest first.
        """
        pass
