"""
CLI interface for the bank application.

This module provides a command-line entry point that runs the demo scenario
and checks customer credentials.
"""

import logging
from decimal import Decimal

import click

from .bank import Bank
from .exceptions import BankError
from .factory import AccountFactory
from .validators import (
    PASSWORD_MIN_LENGTH,
    PASSWORD_SPECIAL_CHARACTERS,
    is_valid_email,
    is_valid_password,
)


DEMO_EMAIL = "JohnDoe@example.com"
DEMO_PASSWORD = "Password@123"
DEMO_SAVINGS_NUMBER = "1234567890"
DEMO_CURRENT_NUMBER = "0987654321"


def run_demo(bank: Bank, email: str = DEMO_EMAIL, password: str = DEMO_PASSWORD) -> list:
    """Run the demo scenario and return the lines it prints."""
    if not bank.register_customer(email, password):
        return ["Invalid customer registration details."]

    lines = []
    bank.create_account(email, "savings", DEMO_SAVINGS_NUMBER)
    bank.deposit(DEMO_SAVINGS_NUMBER, Decimal('5000'))
    bank.withdraw(DEMO_SAVINGS_NUMBER, Decimal('2000'))
    lines.append(bank.get_statement(DEMO_SAVINGS_NUMBER))

    bank.create_account(email, "current", DEMO_CURRENT_NUMBER)
    bank.deposit(DEMO_CURRENT_NUMBER, Decimal('3000'))
    bank.transfer(DEMO_CURRENT_NUMBER, DEMO_SAVINGS_NUMBER, Decimal('1000'))
    lines.append(bank.get_statement(DEMO_CURRENT_NUMBER))
    lines.append(bank.get_statement(DEMO_SAVINGS_NUMBER))
    return lines


@click.group()
@click.option('--log-level', default='WARNING', envvar='BANK_APP_LOG_LEVEL',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
@click.pass_context
def cli(ctx, log_level):
    """Bank Application CLI"""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj['bank'] = Bank()


@cli.command()
@click.pass_context
def demo(ctx):
    """Run the example banking scenario."""
    bank = ctx.obj['bank']

    try:
        for line in run_demo(bank):
            click.echo(line)
    except BankError as e:
        click.echo(f"❌ Error: {e}", err=True)
        ctx.exit(1)


@cli.command()
@click.option('--email', prompt='Email', help='Customer email')
@click.option('--password', prompt='Password', hide_input=True, help='Customer password')
@click.pass_context
def check_credentials(ctx, email, password):
    """Check whether an email and password would be accepted."""
    problems = []
    if not is_valid_email(email):
        problems.append("email must look like name@domain.tld without spaces")
    if not is_valid_password(password):
        problems.append(
            f"password needs at least {PASSWORD_MIN_LENGTH} characters, an uppercase letter, "
            f"a lowercase letter, a digit and one of {PASSWORD_SPECIAL_CHARACTERS}"
        )

    if problems:
        for problem in problems:
            click.echo(f"❌ Invalid: {problem}", err=True)
        ctx.exit(1)

    click.echo("✅ Credentials are valid")


@cli.command()
def account_types():
    """List supported account types."""
    for account_type in AccountFactory.supported_types():
        click.echo(account_type)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
