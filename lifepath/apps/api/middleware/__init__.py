"""API middleware utilities for LifePath."""

from .request_logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
