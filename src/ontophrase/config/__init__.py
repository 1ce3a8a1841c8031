"""Configuration module for ontophrase."""

from .settings import DEFAULT_CONFIG, ResolverConfig
from .logging import get_logger, setup_logging

__all__ = ["DEFAULT_CONFIG", "ResolverConfig", "get_logger", "setup_logging"]
