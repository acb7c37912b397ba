"""Validation utilities for redirect records."""

from urllib.parse import urlparse
from typing import Iterable, Tuple

from ..models import SEPARATOR


MAX_URL_LENGTH = 2048

# Characters that end a path segment, so an id holding them is never routed to
UNREACHABLE_ID_CHARS = ("/", "?", "#")


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a target URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"

    try:
        result = urlparse(url)
    except ValueError as e:
        return False, f"Invalid URL format: {e}"

    if result.scheme not in ("http", "https"):
        return False, "URL must use http or https protocol"

    if not result.netloc:
        return False, "URL must have a valid domain"

    return True, ""


def is_valid_record_id(record_id: str, reserved_ids: Iterable[str]) -> Tuple[bool, str]:
    """Validate a short identifier.

    Identifiers may not shadow a route of the web surface, may not contain
    the set-member separator, and must be reachable as a single path segment.

    Args:
        record_id: The identifier to validate
        reserved_ids: Names taken by routes

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not record_id:
        return False, "Short URL id cannot be empty"

    if record_id in reserved_ids:
        return False, f"Sorry, /{record_id} is reserved!"

    if SEPARATOR in record_id:
        return False, f"{SEPARATOR} is reserved... sorry..."

    unreachable = [c for c in UNREACHABLE_ID_CHARS if c in record_id]
    if unreachable:
        return False, f"Short URL id cannot contain {', '.join(repr(c) for c in unreachable)}"

    return True, ""
