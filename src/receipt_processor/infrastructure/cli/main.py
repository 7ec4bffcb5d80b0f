import click

from receipt_processor.infrastructure.cli.receipt_commands import receipt_points
from receipt_processor.infrastructure.cli.server_commands import serve


@click.group()
def cli() -> None:
    """Receipt Processor: score shopping receipts for loyalty points"""


# Register subcommands
cli.add_command(receipt_points)
cli.add_command(serve)
