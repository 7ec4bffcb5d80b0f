"""API routes for receipt processing and scoring."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from receipt_processor.application.get_points import GetPointsHandler
from receipt_processor.application.process_receipt import ProcessReceiptHandler
from receipt_processor.domain.repository.receipt_repository import ReceiptRepository
from receipt_processor.domain.service.points_calculator import PointsCalculator
from receipt_processor.infrastructure.api.schemas import (
    HealthResponse,
    PointsResponse,
    ProcessResponse,
    ReceiptPayload,
)

router = APIRouter(prefix="/receipts", tags=["receipts"])
health_router = APIRouter(tags=["health"])


def get_receipt_repository(request: Request) -> ReceiptRepository:
    return request.app.state.receipt_repository


def get_points_calculator(request: Request) -> PointsCalculator:
    return request.app.state.points_calculator


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


@router.post("/process", response_model=ProcessResponse)
def process_receipt(
    payload: ReceiptPayload,
    receipt_repo: ReceiptRepository = Depends(get_receipt_repository),
) -> ProcessResponse:
    """Store a receipt and return its generated ID."""
    receipt_id = ProcessReceiptHandler(receipt_repo).handle(payload.to_spec())
    return ProcessResponse(id=receipt_id)


@router.get("/{receipt_id}/points", response_model=PointsResponse)
def get_receipt_points(
    receipt_id: str,
    receipt_repo: ReceiptRepository = Depends(get_receipt_repository),
    calculator: PointsCalculator = Depends(get_points_calculator),
):
    """Return the points awarded for a stored receipt."""
    if not _is_uuid(receipt_id):
        return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content={"id": "Invalid UUID"})

    # EntityNotFoundError is turned into a 404 by the registered handler.
    dto = GetPointsHandler(receipt_repo, calculator).handle(receipt_id)
    return PointsResponse(points=dto.points)


@health_router.get("/health", response_model=HealthResponse)
def health_check(
    receipt_repo: ReceiptRepository = Depends(get_receipt_repository),
) -> HealthResponse:
    return HealthResponse(status="healthy", receipts=receipt_repo.count())
