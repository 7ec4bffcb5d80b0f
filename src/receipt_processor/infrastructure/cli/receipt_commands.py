"""CLI commands for scoring receipts offline."""

from __future__ import annotations

import click
from pydantic import ValidationError as PayloadValidationError

from receipt_processor.application.get_points import GetPointsHandler
from receipt_processor.application.process_receipt import ProcessReceiptHandler
from receipt_processor.domain.exceptions import DomainException
from receipt_processor.infrastructure.api.error_handlers import validation_errors_to_fields
from receipt_processor.infrastructure.api.schemas import ReceiptPayload
from receipt_processor.infrastructure.bootstrap import points_calculator, receipt_repository


def _load_payload(source_name: str, raw: str) -> ReceiptPayload:
    """Parse a receipt file in the same JSON shape the API accepts."""
    try:
        return ReceiptPayload.model_validate_json(raw)
    except PayloadValidationError as exc:
        problems = validation_errors_to_fields(exc.errors())
        details = "; ".join(f"{field}: {msg}" for field, msg in problems.items())
        raise click.BadParameter(details, param_hint=f"'{source_name}'")


@click.command("points")
@click.argument("receipt_file", type=click.File("r", encoding="utf-8"))
@click.option("--breakdown", is_flag=True, help="Show the points awarded by each rule.")
def receipt_points(receipt_file, breakdown: bool) -> None:
    """Score the JSON receipt in RECEIPT_FILE ('-' reads stdin)."""
    payload = _load_payload(receipt_file.name, receipt_file.read())

    repo = receipt_repository()
    try:
        receipt_id = ProcessReceiptHandler(repo).handle(payload.to_spec())
        dto = GetPointsHandler(repo, points_calculator()).handle(receipt_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Receipt {dto.receipt_id}")
    if breakdown:
        click.echo()
        click.echo(f"  {'Rule':<26} {'Points':>8}")
        click.echo(f"  {'-'*35}")
        for score in dto.breakdown:
            click.echo(f"  {score.rule:<26} {score.points:>8}")
        click.echo(f"  {'-'*35}")
    click.echo(f"  {'Total points':<26} {dto.points:>8}")
