"""Tests for credential checks."""

import pytest

from shortlinks.access import authorize, check_edit_key
from shortlinks.errors import BadRequestError, UnauthorizedError


class TestAuthorize:
    """Test the shared secret gate."""

    def test_open_mode(self):
        assert authorize(None, None) is None
        assert authorize(None, "anything") is None

    def test_missing_secret(self):
        with pytest.raises(BadRequestError, match="No password provided"):
            authorize("s", None)

    def test_wrong_secret(self):
        with pytest.raises(UnauthorizedError, match="Password incorrect"):
            authorize("s", "t")

    def test_correct_secret(self):
        assert authorize("s", "s") is None

    def test_empty_secret_is_supplied(self):
        """An empty string is a supplied (wrong) secret, not a missing one."""
        with pytest.raises(UnauthorizedError):
            authorize("s", "")

    def test_non_ascii_secret(self):
        assert authorize("pässwörd", "pässwörd") is None
        with pytest.raises(UnauthorizedError):
            authorize("pässwörd", "passwort")

    def test_credential_name_in_message(self):
        with pytest.raises(BadRequestError, match="admin password"):
            authorize("s", None, what="admin password")


class TestCheckEditKey:
    """Test the per-record edit key check."""

    def test_matching_key(self):
        assert check_edit_key("Ab3dE6gH9j", "Ab3dE6gH9j") is None

    def test_case_sensitive(self):
        with pytest.raises(UnauthorizedError, match="Invalid key"):
            check_edit_key("Ab3dE6gH9j", "ab3de6gh9j")

    def test_prefix_does_not_match(self):
        with pytest.raises(UnauthorizedError):
            check_edit_key("Ab3dE6gH9j", "Ab3dE")
