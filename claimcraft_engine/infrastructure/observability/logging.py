"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from claimcraft_engine.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
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


def log_claim_calculation(
    request_id: str,
    is_b2b: bool,
    days_overdue: int,
    total_debt: Any,
    court_fee: Any,
    is_viable: bool,
    duration_ms: float,
) -> None:
    """Log structured calculation outcome for analysis"""
    logging.info(
        "Claim calculated",
        extra={
            "request_id": request_id,
            "step": "claim_calculated",
            "regime": "b2b" if is_b2b else "b2c",
            "days_overdue": days_overdue,
            "total_debt": str(total_debt),
            "court_fee": str(court_fee),
            "viability_outcome": "viable" if is_viable else "not_viable",
            "duration_ms": duration_ms,
        },
    )
