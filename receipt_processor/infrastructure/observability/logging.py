"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger.json import JsonFormatter

from receipt_processor.config import settings
from receipt_processor.domain.models import ScoreBreakdown, ScoreRecord


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_receipt_processed(
    request_id: str,
    record: ScoreRecord,
    breakdown: ScoreBreakdown,
    duration_ms: float,
) -> None:
    """Log structured scoring outcome, including each rule's contribution"""
    logging.info(
        "Receipt processed",
        extra={
            "request_id": request_id,
            "receipt_id": record.id,
            "step": "receipt_processed",
            "points": record.points,
            "retailer_points": breakdown.retailer_points,
            "round_total_points": breakdown.round_total_points,
            "quarter_total_points": breakdown.quarter_total_points,
            "item_pair_points": breakdown.item_pair_points,
            "description_points": breakdown.description_points,
            "odd_day_points": breakdown.odd_day_points,
            "afternoon_points": breakdown.afternoon_points,
            "duration_ms": duration_ms,
        },
    )
