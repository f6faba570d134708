"""Structured JSON logging with the payment reference of the current message."""

import logging
import sys
from typing import TextIO

from pythonjsonlogger.json import JsonFormatter

from ipay88_gateway.application.gateway_client import payment_reference_ctx

LOGGER_NAME = "ipay88_gateway"


class ContextFilter(logging.Filter):
    """Inject the payment reference being processed into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.payment_reference = payment_reference_ctx.get()
        return True


def configure_logging(level: str | int = "INFO", stream: TextIO | None = None) -> logging.Handler:
    """Route the package logger to a JSON handler (stdout by default).

    Calling it again replaces the previously installed handler.
    """

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.addFilter(ContextFilter())
    handler.setFormatter(
        JsonFormatter("%(asctime)s %(levelname)s %(name)s %(payment_reference)s %(message)s")
    )

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers = [handler]
    package_logger.setLevel(level)
    package_logger.propagate = False
    return handler
