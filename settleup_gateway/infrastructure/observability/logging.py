"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from settleup_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.utcnow().isoformat()
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


def log_simplification(
    request_id: str,
    source: str,
    edge_count: int,
    participant_count: int,
    transfer_count: int,
    anomaly_count: int,
    duration_ms: float,
    group_id: str | None = None,
) -> None:
    """Log structured simplification outcome"""
    logging.info(
        "Simplification completed",
        extra={
            "request_id": request_id,
            "group_id": group_id,
            "step": "simplification_complete",
            "source": source,
            "edge_count": edge_count,
            "participant_count": participant_count,
            "transfer_count": transfer_count,
            "anomaly_count": anomaly_count,
            "duration_ms": duration_ms,
        },
    )
