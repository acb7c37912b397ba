"""Credential checks guarding record mutation and listing."""

import secrets
from typing import Optional

from .errors import BadRequestError, UnauthorizedError


def _matches(expected: str, provided: str) -> bool:
    return secrets.compare_digest(expected.encode("utf-8"), provided.encode("utf-8"))


def authorize(
    required_secret: Optional[str],
    provided_secret: Optional[str],
    what: str = "password",
) -> None:
    """Check a shared secret.

    No configured secret means open mode and everything is authorized.

    Args:
        required_secret: Configured secret, or None
        provided_secret: Secret supplied by the caller, or None
        what: Name of the credential used in error messages

    Raises:
        BadRequestError: If a secret is configured but none was supplied
        UnauthorizedError: If the supplied secret is wrong
    """
    if required_secret is None:
        return
    if provided_secret is None:
        raise BadRequestError(f"No {what} provided when one is required.")
    if not _matches(required_secret, provided_secret):
        raise UnauthorizedError(f"{what.capitalize()} incorrect.")


def check_edit_key(stored_key: str, provided_key: str) -> None:
    """Check the per-record edit key (case-sensitive, byte-exact).

    Raises:
        UnauthorizedError: If the keys differ
    """
    if not _matches(stored_key, provided_key):
        raise UnauthorizedError("Invalid key provided.")
