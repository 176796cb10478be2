"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re
from typing import Union

AmountInput = Union[str, int, float, Decimal]


def parse_amount(amount: AmountInput) -> Decimal:
    """Parse an amount into a Decimal.

    Handles numbers and strings in various formats:
    - 123.45
    - "123.45"
    - "₹123.45"
    - "1,234.56"

    Args:
        amount: Amount as a number or string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount cannot be parsed or is not a finite number
    """
    if isinstance(amount, bool):
        raise ValueError(f"Could not parse amount {amount!r}")

    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, int):
        value = Decimal(amount)
    elif isinstance(amount, float):
        # Go through repr so 0.1 stays 0.1 rather than its binary expansion
        value = Decimal(repr(amount))
    elif isinstance(amount, str):
        value = _parse_amount_string(amount)
    else:
        raise ValueError(f"Could not parse amount {amount!r}")

    if not value.is_finite():
        raise ValueError(f"Amount must be a finite number, got {amount!r}")
    return value


def _parse_amount_string(amount_str: str) -> Decimal:
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove whitespace
    amount_str = amount_str.strip()

    # Remove currency symbols
    amount_str = re.sub(r"[$€£¥₹]", "", amount_str)

    # Remove commas
    amount_str = amount_str.replace(",", "")

    # Remove whitespace again
    amount_str = amount_str.strip()

    try:
        return Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}'") from e
