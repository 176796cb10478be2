"""Rendering of ledger entities for the command line."""

import json
from decimal import Decimal
from typing import Any

import click

from famledger.domain.entities import Summary, Transaction


def _json_number(value: Decimal) -> int | float:
    """Render a Decimal as a JSON number (int when integral)."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def transaction_to_record(txn: Transaction) -> dict[str, Any]:
    """Convert a transaction to its external record layout."""
    return {
        "DateTime": txn.timestamp.isoformat(),
        "From": txn.from_party,
        "To": txn.to_party,
        "Action": txn.action.value,
        "Amount": _json_number(txn.amount),
        "Category": txn.category,
        "Note": txn.note,
    }


def summary_to_record(summary: Summary) -> dict[str, Any]:
    """Convert a summary to its external record layout."""
    return {
        "person": summary.person,
        "walletBalance": _json_number(summary.wallet_balance),
        "totalEarn": _json_number(summary.total_earn),
        "totalSpend": _json_number(summary.total_spend),
    }


def echo_json(payload: Any, err: bool = False) -> None:
    """Write payload as JSON."""
    click.echo(json.dumps(payload, ensure_ascii=False), err=err)


def format_amount(amount: Decimal) -> str:
    return f"{amount:,.2f}"


def echo_created(txn: Transaction) -> None:
    """Human-readable confirmation for a recorded transaction."""
    click.echo(f"Recorded transaction {txn.id}")
    click.echo(f"  Date: {txn.timestamp:%Y-%m-%d %H:%M:%S}")
    click.echo(f"  {txn.action.value}: {txn.from_party} -> {txn.to_party}")
    click.echo(f"  Amount: {format_amount(txn.amount)}")
    if txn.category:
        click.echo(f"  Category: {txn.category}")
    if txn.note:
        click.echo(f"  Note: {txn.note}")
