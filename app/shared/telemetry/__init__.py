"""Shared telemetry: logging setup with request ID correlation."""

from app.shared.telemetry.logging import RequestIDFilter, get_logger, setup_logging

__all__ = [
    "RequestIDFilter",
    "get_logger",
    "setup_logging",
]
