"""Receipt endpoints - submit a receipt for scoring and look up its points"""

import time
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from receipt_processor.api.routes.schemas import PointsResponse, ProcessReceiptResponse, parse_receipt
from receipt_processor.api.dependencies import get_request_id, get_store
from receipt_processor.domain.exceptions import InvalidReceiptError
from receipt_processor.domain.models import ScoreRecord
from receipt_processor.domain.scoring import score_breakdown
from receipt_processor.infrastructure.storage.store import ReceiptStore, new_receipt_id
from receipt_processor.infrastructure.observability.metrics import (
    record_lookup,
    record_receipt_accepted,
    record_receipt_rejected,
)
from receipt_processor.infrastructure.observability.logging import log_receipt_processed

INVALID_PAYLOAD_MESSAGE = "Invalid request payload"
RECEIPT_NOT_FOUND_MESSAGE = "No receipt found for that ID"

router = APIRouter()


@router.post(
    "/receipts/process",
    response_model=ProcessReceiptResponse,
    responses={400: {"description": INVALID_PAYLOAD_MESSAGE}},
)
async def process_receipt(request: Request, store: ReceiptStore = Depends(get_store)):
    """
    Score a submitted receipt and store the result.

    Flow:
    1. Decode the JSON body into a Receipt
    2. Calculate points
    3. Store points under a freshly generated id
    4. Return the id
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        receipt = parse_receipt(await request.body())
    except InvalidReceiptError as e:
        record_receipt_rejected()
        logging.warning(f"Rejected receipt: {e}", extra={"request_id": request_id})
        return PlainTextResponse(INVALID_PAYLOAD_MESSAGE, status_code=400)

    breakdown = score_breakdown(receipt)
    record = ScoreRecord(id=new_receipt_id(), points=breakdown.total)
    store.put(record.id, record.points)

    duration_ms = (time.time() - start_time) * 1000
    record_receipt_accepted(record.points)
    log_receipt_processed(request_id, record, breakdown, duration_ms)

    return ProcessReceiptResponse(id=record.id)


@router.get(
    "/receipts/{receipt_id}/points",
    response_model=PointsResponse,
    responses={404: {"description": RECEIPT_NOT_FOUND_MESSAGE}},
)
def get_points(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    """Return the points awarded to a previously processed receipt"""
    points, found = store.get(receipt_id)
    record_lookup(found)

    if not found:
        return PlainTextResponse(RECEIPT_NOT_FOUND_MESSAGE, status_code=404)

    return PointsResponse(points=points)
