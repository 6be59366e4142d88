"""Middleware package: FastAPI error handlers."""

from response_wrapper.middleware.error_handler import error_messages, register_error_handlers

__all__ = ["error_messages", "register_error_handlers"]
