"""Structured JSON logging for evaluation outcomes and validator failures"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from credit_card_applications.config import settings
from credit_card_applications.domain.models import Application, Decision


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str | None = None) -> None:
    """Configure structured JSON logging on the root logger"""
    logger = logging.getLogger()
    logger.setLevel(level or settings.log_level)

    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_decision(variant: str, decision: Decision, application: Application) -> None:
    """Log structured decision outcome for analysis"""
    logging.info(
        "Evaluation completed",
        extra={
            "step": "evaluation_complete",
            "variant": variant,
            "decision": decision.value,
            "age": application.age,
            "gross_annual_income": str(application.gross_annual_income),
        },
    )


def log_validator_failure(application: Application, error: Exception) -> None:
    """
    Default error-containment hook for the full evaluation pipeline.

    Called with the application and the exception raised by the validator;
    the evaluator refers the application to a human after this returns.
    """
    logging.warning(
        f"Frequent flyer validation failed: {error}",
        exc_info=error,
        extra={
            "step": "frequent_flyer_validation",
            "frequent_flyer_number": application.frequent_flyer_number,
            "error_type": type(error).__name__,
        },
    )
