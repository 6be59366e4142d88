"""Pydantic Settings for the response wrapper.

All environment variables use the RESPONSE_WRAPPER_ prefix.
Example: RESPONSE_WRAPPER_DEFAULT_PAGE_SIZE=25
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class ResponseWrapperSettings(BaseSettings):
    """Library configuration validated from environment variables."""

    log_level: str = "INFO"

    # Pagination
    default_page_size: int = Field(default=10, ge=1)
    max_page_size: int = Field(default=100, ge=1)

    # Error rendering
    expose_error_details: bool = False  # Append error kwargs to messages

    model_config = {"env_prefix": "RESPONSE_WRAPPER_"}
