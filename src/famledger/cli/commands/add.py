"""Add transaction command."""

import click
from famledger.cli.error_handling import error_boundary
from famledger.cli.output import echo_created, echo_json, transaction_to_record
from famledger.domain.transaction import TransactionService


def record_and_report(ctx: click.Context, as_json: bool, **fields) -> None:
    """Record a transaction and print the outcome.

    Shared by ``add`` and the per-action shortcuts.
    """
    service = TransactionService(ctx.obj["db"])
    with error_boundary(ctx, as_json):
        txn = service.record_transaction(**fields)
        if as_json:
            echo_json({"success": True, "transaction": transaction_to_record(txn)})
        else:
            echo_created(txn)


@click.command("add")
@click.option("--from", "from_party", required=True, help="Source: a person, WORLD, or a lender")
@click.option("--to", "to_party", required=True, help="Destination: a person or WORLD")
@click.option(
    "--action",
    required=True,
    help="EARN, SPEND, BORROW or TRANSFER (any casing)",
)
@click.option("--amount", required=True, help="Positive amount (e.g., 250 or 1,250.50)")
@click.option("--category", help="Income source, expense category, lender or reason")
@click.option("--note", help="Free-text note")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_context
def add_transaction(
    ctx,
    from_party: str,
    to_party: str,
    action: str,
    amount: str,
    category: str | None,
    note: str | None,
    as_json: bool,
):
    """Record a transaction with explicit From/To parties.

    Examples:
        famledger add --from WORLD --to Alice --action earn --amount 100 --category Salary
        famledger add --from Alice --to Bob --action transfer --amount 20 --category Household
    """
    record_and_report(
        ctx,
        as_json,
        from_party=from_party,
        to_party=to_party,
        action=action,
        amount=amount,
        category=category,
        note=note,
    )


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
