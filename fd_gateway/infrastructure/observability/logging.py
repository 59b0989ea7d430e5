"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from fd_gateway.config import settings


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


def log_calculation(
    request_id: str,
    compounding_frequency: int,
    tenure_years: float,
    duration_ms: float,
) -> None:
    """Log structured maturity calculation outcome"""
    logging.info(
        "Maturity calculated",
        extra={
            "request_id": request_id,
            "step": "maturity_complete",
            "compounding_frequency": compounding_frequency,
            "tenure_years": tenure_years,
            "duration_ms": duration_ms,
        },
    )


def log_recommendation(
    request_id: str,
    risk_tolerance: str,
    outcome: str,
    duration_ms: float,
) -> None:
    """Log structured recommendation outcome for analysis"""
    logging.info(
        "Recommendation completed",
        extra={
            "request_id": request_id,
            "step": "recommendation_complete",
            "risk_tolerance": risk_tolerance,
            "outcome": outcome,
            "duration_ms": duration_ms,
        },
    )
