"""Email adapter."""

from .client import HttpEmailClient, MockEmailClient

__all__ = ["HttpEmailClient", "MockEmailClient"]
