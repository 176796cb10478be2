"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the ledger entities stay the
same if the storage schema changes.
"""

from datetime import UTC

from famledger.domain import entities as domain
from famledger.database.models import Transaction as ORMTransaction


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity.

    SQLite drops timezone information; stored timestamps are always UTC.
    """
    timestamp = orm_transaction.datetime
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    return domain.Transaction(
        id=orm_transaction.id,
        timestamp=timestamp,
        from_party=orm_transaction.from_person,
        to_party=orm_transaction.to_person,
        action=domain.Action(orm_transaction.action),
        amount=orm_transaction.amount,
        category=orm_transaction.category or "",
        note=orm_transaction.note or "",
    )
