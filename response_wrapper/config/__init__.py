"""Configuration module."""

from response_wrapper.config.settings import ResponseWrapperSettings

__all__ = ["ResponseWrapperSettings"]
