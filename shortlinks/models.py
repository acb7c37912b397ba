"""Data models for redirect records."""

import json
from dataclasses import dataclass

from .errors import RecordDecodeError


# "Wizard separated values": the member format of stores written before
# members were stored as JSON.
SEPARATOR = "🧙"

MEMBER_FORMAT_JSON = "json"
MEMBER_FORMAT_LEGACY = "legacy"
MEMBER_FORMATS = (MEMBER_FORMAT_JSON, MEMBER_FORMAT_LEGACY)


@dataclass(frozen=True)
class RedirectRecord:
    """A short identifier, its target URL and the key that allows deleting it."""

    id: str
    url: str
    key: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"id": self.id, "url": self.url, "key": self.key}

    @classmethod
    def from_dict(cls, data: dict) -> "RedirectRecord":
        """Create from dictionary."""
        return cls(id=data["id"], url=data["url"], key=data["key"])

    def encode(self, member_format: str = MEMBER_FORMAT_JSON) -> str:
        """Encode the record as a member of the redirect set.

        The encoding is deterministic: encoding the same three values always
        yields the same string, which is what allows removing the member
        again later.

        Args:
            member_format: ``json`` or ``legacy``

        Returns:
            Encoded set member
        """
        if member_format == MEMBER_FORMAT_LEGACY:
            return SEPARATOR.join((self.id, self.url, self.key))
        if member_format == MEMBER_FORMAT_JSON:
            return json.dumps(
                self.to_dict(),
                sort_keys=True,
                separators=(",", ":"),
                ensure_ascii=False,
            )
        raise ValueError(f"Unknown member format: {member_format}")

    @classmethod
    def decode(cls, member: str) -> "RedirectRecord":
        """Decode a set member written in either format.

        Args:
            member: Raw set member

        Returns:
            Decoded record

        Raises:
            RecordDecodeError: If the member does not hold exactly three fields
        """
        # Legacy ids may themselves start with "{", so a failed JSON parse
        # falls through to the separator split.
        if member.startswith("{"):
            try:
                data = json.loads(member)
            except json.JSONDecodeError:
                data = None
            if (
                isinstance(data, dict)
                and set(data) == {"id", "url", "key"}
                and all(isinstance(v, str) for v in data.values())
            ):
                return cls.from_dict(data)

        parts = member.split(SEPARATOR)
        if len(parts) != 3:
            raise RecordDecodeError(
                f"Malformed redirect entry {member!r}: expected 3 fields, got {len(parts)}"
            )
        return cls(id=parts[0], url=parts[1], key=parts[2])
