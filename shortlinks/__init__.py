"""Core redirect-record logic for the short link service."""

from .idgen import IdGenerator
from .records import RedirectManager

__all__ = ["IdGenerator", "RedirectManager"]
