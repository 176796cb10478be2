"""Per-action shortcut commands.

Each shortcut fills in the From/To pair the way the household form does:
income comes from WORLD, expenses go to WORLD, a loan comes from the lender,
and a transfer goes to another family member.
"""

import click
from famledger.cli.commands.add import record_and_report
from famledger.domain.entities import Action, WORLD

json_option = click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
note_option = click.option("--note", help="Free-text note")


@click.command("earn")
@click.argument("person")
@click.argument("amount")
@click.option("--source", help="Where the money came from (Salary, Gift, ...)")
@note_option
@json_option
@click.pass_context
def earn(ctx, person: str, amount: str, source: str | None, note: str | None, as_json: bool):
    """Record income received by PERSON."""
    record_and_report(
        ctx,
        as_json,
        from_party=WORLD,
        to_party=person,
        action=Action.EARN.value,
        amount=amount,
        category=source,
        note=note,
    )


@click.command("spend")
@click.argument("person")
@click.argument("amount")
@click.option("--category", help="Expense category (Food, Electricity bill, ...)")
@note_option
@json_option
@click.pass_context
def spend(ctx, person: str, amount: str, category: str | None, note: str | None, as_json: bool):
    """Record an expense paid by PERSON."""
    record_and_report(
        ctx,
        as_json,
        from_party=person,
        to_party=WORLD,
        action=Action.SPEND.value,
        amount=amount,
        category=category,
        note=note,
    )


@click.command("borrow")
@click.argument("person")
@click.argument("amount")
@click.option("--lender", required=True, help="Bank or lender name")
@note_option
@json_option
@click.pass_context
def borrow(ctx, person: str, amount: str, lender: str, note: str | None, as_json: bool):
    """Record money PERSON borrowed from a lender."""
    record_and_report(
        ctx,
        as_json,
        from_party=lender,
        to_party=person,
        action=Action.BORROW.value,
        amount=amount,
        category=lender,
        note=note,
    )


@click.command("transfer")
@click.argument("person")
@click.argument("amount")
@click.option("--to", "recipient", required=True, help="Family member receiving the money")
@click.option("--reason", help="Repay, Household, Gift, ...")
@note_option
@json_option
@click.pass_context
def transfer(
    ctx,
    person: str,
    amount: str,
    recipient: str,
    reason: str | None,
    note: str | None,
    as_json: bool,
):
    """Record money PERSON gave to another family member."""
    record_and_report(
        ctx,
        as_json,
        from_party=person,
        to_party=recipient,
        action=Action.TRANSFER.value,
        amount=amount,
        category=reason,
        note=note,
    )


def register_commands(cli):
    """Register shortcut commands with main CLI."""
    cli.add_command(earn)
    cli.add_command(spend)
    cli.add_command(borrow)
    cli.add_command(transfer)
