"""Transaction domain service."""

import logging
from datetime import datetime, UTC
from decimal import Decimal
from typing import Optional

from famledger.database.base import Database
from famledger.domain.entities import Action, Transaction as TransactionEntity
from famledger.domain.errors import (
    ValidationError,
    INVALID_ACTION,
    INVALID_AMOUNT,
    MISSING_FIELD,
)
from famledger.utils.amount_parser import AmountInput, parse_amount

logger = logging.getLogger(__name__)

# Upper bound on a single amount; keeps every stored value renderable as a number
MAX_AMOUNT = Decimal("1e15")


def _clean(value: Optional[str]) -> str:
    return value.strip() if value else ""


class TransactionService:
    """Service for recording and listing ledger transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def record_transaction(
        self,
        from_party: Optional[str],
        to_party: Optional[str],
        action: Optional[str],
        amount: Optional[AmountInput],
        category: Optional[str] = None,
        note: Optional[str] = None,
    ) -> TransactionEntity:
        """Validate, normalize and store a transaction.

        From/To are stored as given; this service does not derive them from
        the action kind.

        Args:
            from_party: Source party (a person, WORLD, or a lender name)
            to_party: Destination party
            action: Action kind, any casing (earn, Spend, BORROW, ...)
            amount: Positive amount below MAX_AMOUNT, as a number or numeric string
            category: Optional category, income source, lender or reason
            note: Optional note

        Returns:
            The stored transaction, including its assigned timestamp

        Raises:
            ValidationError: If a required field is empty, the amount is not
                a positive number, or the action is unknown
            StorageError: If the ledger could not be written
        """
        from_party = _clean(from_party)
        to_party = _clean(to_party)
        action_name = _clean(action).upper()

        if not from_party or not to_party or not action_name:
            logger.info("Rejected transaction: %s", MISSING_FIELD)
            raise ValidationError(MISSING_FIELD)

        try:
            if amount is None:
                raise ValueError("Empty amount")
            parsed_amount = parse_amount(amount)
        except ValueError as e:
            logger.info("Rejected transaction: %s (%r)", INVALID_AMOUNT, amount)
            raise ValidationError(INVALID_AMOUNT) from e
        if parsed_amount <= 0 or parsed_amount >= MAX_AMOUNT:
            logger.info("Rejected transaction: %s (%r)", INVALID_AMOUNT, amount)
            raise ValidationError(INVALID_AMOUNT)

        try:
            kind = Action(action_name)
        except ValueError as e:
            logger.info("Rejected transaction: %s (%r)", INVALID_ACTION, action)
            raise ValidationError(INVALID_ACTION) from e

        stored = self.db.append_transaction(
            timestamp=datetime.now(UTC),
            from_party=from_party,
            to_party=to_party,
            action=kind,
            amount=parsed_amount,
            category=category or "",
            note=note or "",
        )
        logger.info(
            "Recorded %s of %s from %s to %s", kind.value, parsed_amount, from_party, to_party
        )
        return stored

    def list_transactions(self, person: Optional[str] = None) -> list[TransactionEntity]:
        """List transactions, most recent first.

        Args:
            person: Optional person filter; blank means everyone

        Returns:
            List of transaction entities
        """
        return self.db.list_transactions(person=_clean(person) or None)
