"""Transaction viewing commands."""

import click
from famledger.cli.error_handling import error_boundary
from famledger.cli.output import echo_json, format_amount, transaction_to_record
from famledger.domain.transaction import TransactionService


@click.command("list")
@click.option("--person", help="Only show transactions to or from this person")
@click.option("--json", "as_json", is_flag=True, help="Print the transactions as a JSON array")
@click.pass_context
def list_transactions(ctx, person: str | None, as_json: bool):
    """List transactions, most recent first."""
    service = TransactionService(ctx.obj["db"])
    with error_boundary(ctx, as_json):
        transactions = service.list_transactions(person=person)
        if as_json:
            echo_json([transaction_to_record(txn) for txn in transactions])
            return

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 110)
    click.echo(
        f"{'Date':<20} {'Action':<9} {'From':<15} {'To':<15} {'Amount':>12}  {'Category':<16} {'Note':<20}"
    )
    click.echo("-" * 110)

    for txn in transactions:
        click.echo(
            f"{txn.timestamp:%Y-%m-%d %H:%M:%S}  {txn.action.value:<9} {txn.from_party[:15]:<15} "
            f"{txn.to_party[:15]:<15} {format_amount(txn.amount):>12}  {txn.category[:16]:<16} "
            f"{txn.note[:20]:<20}"
        )


def register_commands(cli):
    """Register list command with main CLI."""
    cli.add_command(list_transactions)
