"""Wallet summary command."""

import click
from famledger.cli.error_handling import error_boundary
from famledger.cli.output import echo_json, format_amount, summary_to_record
from famledger.domain.balance import BalanceService


@click.command("summary")
@click.argument("person")
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON")
@click.pass_context
def show_summary(ctx, person: str, as_json: bool):
    """Show wallet balance, total earned and total spent for PERSON."""
    service = BalanceService(ctx.obj["db"])
    with error_boundary(ctx, as_json):
        summary = service.compute_summary(person)
        if as_json:
            echo_json(summary_to_record(summary))
            return

    click.echo(f"\nWallet for {summary.person}")
    click.echo("=" * 40)
    click.echo(f"{'Balance':<20} {format_amount(summary.wallet_balance):>19}")
    click.echo(f"{'Total earned':<20} {format_amount(summary.total_earn):>19}")
    click.echo(f"{'Total spent':<20} {format_amount(summary.total_spend):>19}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(show_summary)
