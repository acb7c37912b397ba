"""Redirect record management.

A record is spread over three store entries (see ``shortlinks.keys``) and the
store offers no transaction spanning them. Records are therefore created and
deleted as a sequence of independent writes:

* the uniqueness check and the writes of ``create_record`` are not atomic, so
  two concurrent creates of the same id both succeed and the last write to
  each key wins;
* a failure half way through leaves the entries already written in place,
  and readers tolerate a missing ``key_<id>``.
"""

import logging
from typing import FrozenSet, Iterable, List, Optional

from .access import authorize, check_edit_key
from .common.validators import is_valid_record_id, is_valid_url
from .errors import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    RecordDecodeError,
    UnauthorizedError,
)
from .idgen import IdGenerator
from .keys import REDIRECTS_SET, edit_key_key, redirect_key
from .models import MEMBER_FORMAT_JSON, MEMBER_FORMATS, RedirectRecord
from .store.base import KeyValueStoreBase


# Paths served by the web surface itself
RESERVED_IDS: FrozenSet[str] = frozenset({"add", "all", "admin", "api", "health"})


class RedirectManager:
    """Create, resolve, list and delete redirect records."""

    def __init__(
        self,
        store: KeyValueStoreBase,
        generator: Optional[IdGenerator] = None,
        password: Optional[str] = None,
        admin_password: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
        member_format: str = MEMBER_FORMAT_JSON,
        reserved_ids: Iterable[str] = RESERVED_IDS,
    ):
        """Initialize redirect manager.

        Args:
            store: Key-value store shared by all requests
            generator: Identifier generator
            password: Global password gating create and delete (None = open)
            admin_password: Password gating the listing (None = listing disabled)
            logger: Optional logger
            member_format: Encoding of redirect set members (json or legacy)
            reserved_ids: Identifiers that may never be created
        """
        if member_format not in MEMBER_FORMATS:
            raise ValueError(f"Unknown member format: {member_format}")

        self.store = store
        self.generator = generator or IdGenerator()
        self.password = password
        self.admin_password = admin_password
        self.logger = logger or logging.getLogger(__name__)
        self.member_format = member_format
        self.reserved_ids = frozenset(reserved_ids)

    @property
    def authentication_required(self) -> bool:
        return self.password is not None

    async def create_record(
        self,
        url: str,
        requested_id: Optional[str] = None,
        provided_password: Optional[str] = None,
    ) -> RedirectRecord:
        """Create a new redirect record.

        Args:
            url: Target URL
            requested_id: Identifier chosen by the caller; generated if None
            provided_password: Global password supplied by the caller

        Returns:
            The created record, including its freshly generated edit key

        Raises:
            BadRequestError: Missing password, invalid URL or invalid id
            UnauthorizedError: Wrong password
            ConflictError: The id is already in use
            StoreError: The store failed; earlier writes are not rolled back
        """
        authorize(self.password, provided_password)

        is_valid, error = is_valid_url(url)
        if not is_valid:
            raise BadRequestError(f"Invalid URL: {error}")

        if requested_id is None:
            record_id = await self.generator.generate_unique_id(self.store)
        else:
            record_id = requested_id

        is_valid, error = is_valid_record_id(record_id, self.reserved_ids)
        if not is_valid:
            raise BadRequestError(error)

        if await self.store.get(redirect_key(record_id)) is not None:
            raise ConflictError("Your proposed short URL is already in use")

        record = RedirectRecord(id=record_id, url=url, key=self.generator.generate_random())

        await self.store.set(redirect_key(record.id), record.url)
        await self.store.set(edit_key_key(record.id), record.key)
        await self.store.set_add(REDIRECTS_SET, record.encode(self.member_format))

        self.logger.info(f"Created redirect: {record.id} -> {record.url}")
        return record

    async def resolve(self, record_id: str) -> Optional[str]:
        """Get the target URL of a redirect.

        Args:
            record_id: The identifier to lookup

        Returns:
            Target URL or None if not found
        """
        url = await self.store.get(redirect_key(record_id))
        if url is None:
            self.logger.debug(f"Redirect not found: {record_id}")
        return url

    async def list_records(self, provided_password: Optional[str] = None) -> List[RedirectRecord]:
        """List every redirect record.

        Unlike creation, listing is never open: without a configured admin
        password it is always refused.

        Args:
            provided_password: Admin password supplied by the caller

        Returns:
            Records sorted by id

        Raises:
            UnauthorizedError: Listing disabled or wrong password
            BadRequestError: No password supplied
            NotFoundError: The store holds no records
            RecordDecodeError: A set member is malformed; the whole listing fails
        """
        if self.admin_password is None:
            raise UnauthorizedError("Listing redirects is disabled.")
        authorize(self.admin_password, provided_password, what="admin password")

        members = await self.store.set_members(REDIRECTS_SET)
        if not members:
            raise NotFoundError("No redirects found.")

        records = []
        for member in members:
            try:
                records.append(RedirectRecord.decode(member))
            except RecordDecodeError:
                self.logger.error(f"Corrupt member in {REDIRECTS_SET}: {member!r}")
                raise

        return sorted(records, key=lambda r: r.id)

    async def delete_record(
        self,
        record_id: str,
        provided_key: str,
        provided_password: Optional[str] = None,
    ) -> RedirectRecord:
        """Delete a redirect record.

        The three entries are removed independently. The set member is
        rebuilt from the values read here; if another request changed the
        record in between, the member no longer matches and stays behind.

        Args:
            record_id: Identifier of the record
            provided_key: Edit key returned when the record was created
            provided_password: Global password supplied by the caller

        Returns:
            The deleted record

        Raises:
            BadRequestError: Missing password
            UnauthorizedError: Wrong password or edit key
            NotFoundError: No redirect, or no edit key associated with it
        """
        authorize(self.password, provided_password)

        url = await self.store.get(redirect_key(record_id))
        if url is None:
            raise NotFoundError("Short URL not found")

        stored_key = await self.store.get(edit_key_key(record_id))
        if stored_key is None:
            raise NotFoundError("No key is associated with this short URL")

        try:
            check_edit_key(stored_key, provided_key)
        except UnauthorizedError:
            self.logger.warning(f"Rejected delete of {record_id}: wrong edit key")
            raise

        record = RedirectRecord(id=record_id, url=url, key=stored_key)

        await self.store.delete(edit_key_key(record_id))
        await self.store.delete(redirect_key(record_id))

        removed = False
        for member_format in MEMBER_FORMATS:
            removed |= await self.store.set_remove(REDIRECTS_SET, record.encode(member_format))
        if not removed:
            self.logger.warning(f"No {REDIRECTS_SET} member matched deleted redirect {record_id}")

        self.logger.info(f"Deleted redirect: {record_id}")
        return record

    async def health_check(self) -> bool:
        return await self.store.health_check()

    async def close(self) -> None:
        """Close store connections."""
        await self.store.close()
