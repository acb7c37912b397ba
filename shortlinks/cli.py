"""
Command-line interface for the short link store.

Talks to Redis directly, with the same credential checks as the HTTP API
(passwords are read from the same environment variables as the server).

Usage:
    shortlinks add <url> [--id ID] [--password PW]
    shortlinks get <id>
    shortlinks list --password PW
    shortlinks delete <id> --key KEY [--password PW]
    shortlinks health
"""

import argparse
import asyncio
import json
import sys
from typing import Optional

from config import load_config

from .common.logging_config import setup_logging
from .errors import RedirectError
from .idgen import IdGenerator
from .records import RedirectManager
from .store.redis_store import RedisStore


class ShortLinksCLI:
    """Command-line interface for redirect records."""

    def __init__(self, redis_url: Optional[str] = None, verbose: bool = False):
        """Initialize CLI."""
        self.config = load_config()
        self.redis_url = redis_url or self.config.normalized_redis_url
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")
        self.store = None
        self.manager = None

    async def initialize(self):
        """Connect to the store and build the manager."""
        self.store = RedisStore(redis_url=self.redis_url, logger=self.logger)
        await self.store.connect()

        self.manager = RedirectManager(
            store=self.store,
            generator=IdGenerator(length=self.config.id_length),
            password=self.config.password,
            admin_password=self.config.admin_password,
            logger=self.logger,
            member_format=self.config.member_format,
        )

    async def cleanup(self):
        """Cleanup resources."""
        if self.manager:
            await self.manager.close()
        elif self.store:
            await self.store.close()

    @staticmethod
    def _emit(payload: dict, error: bool = False) -> int:
        print(json.dumps(payload, indent=2), file=sys.stderr if error else sys.stdout)
        return 1 if error else 0

    async def add(self, url: str, record_id: Optional[str], password: Optional[str]):
        record = await self.manager.create_record(url, requested_id=record_id, provided_password=password)
        return self._emit({"success": True, "id": record.id, "key": record.key, "url": record.url})

    async def get(self, record_id: str):
        url = await self.manager.resolve(record_id)
        if url is None:
            return self._emit({"success": False, "error": f"Short URL '{record_id}' not found"}, error=True)
        return self._emit({"success": True, "id": record_id, "url": url})

    async def list_redirects(self, password: Optional[str]):
        records = await self.manager.list_records(provided_password=password)
        return self._emit({
            "success": True,
            "count": len(records),
            "redirects": [r.to_dict() for r in records],
        })

    async def delete(self, record_id: str, key: str, password: Optional[str]):
        await self.manager.delete_record(record_id, provided_key=key, provided_password=password)
        return self._emit({"success": True, "message": f"Short URL '{record_id}' removed"})

    async def health(self):
        healthy = await self.manager.health_check()
        self._emit({"success": healthy, "store": "healthy" if healthy else "unhealthy"}, error=not healthy)
        return 0 if healthy else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shortlinks",
        description="Short link store CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create a redirect with a generated id
  %(prog)s add https://example.com/long/url

  # Create a redirect with a chosen id
  %(prog)s add https://example.com/long/url --id mylink

  # Look up a redirect
  %(prog)s get mylink

  # List every redirect
  %(prog)s list --password s3cret

  # Delete a redirect
  %(prog)s delete mylink --key Lq81vXbN0c
        """
    )

    parser.add_argument(
        "--redis-url",
        default=None,
        help="Redis connection URL (default: from REDIS_URL env)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    add_parser = subparsers.add_parser("add", help="Create a redirect")
    add_parser.add_argument("url", help="URL to redirect to")
    add_parser.add_argument("--id", dest="record_id", help="Short id (generated if omitted)")
    add_parser.add_argument("--password", help="Global password")

    get_parser = subparsers.add_parser("get", help="Look up a redirect")
    get_parser.add_argument("record_id", help="Short id")

    list_parser = subparsers.add_parser("list", help="List every redirect")
    list_parser.add_argument("--password", help="Admin password")

    delete_parser = subparsers.add_parser("delete", help="Delete a redirect")
    delete_parser.add_argument("record_id", help="Short id")
    delete_parser.add_argument("--key", required=True, help="Edit key")
    delete_parser.add_argument("--password", help="Global password")

    subparsers.add_parser("health", help="Check store health")

    return parser


async def run(args: argparse.Namespace) -> int:
    cli = ShortLinksCLI(redis_url=args.redis_url, verbose=args.verbose)

    try:
        await cli.initialize()

        if args.command == "add":
            return await cli.add(args.url, args.record_id, args.password)
        elif args.command == "get":
            return await cli.get(args.record_id)
        elif args.command == "list":
            return await cli.list_redirects(args.password)
        elif args.command == "delete":
            return await cli.delete(args.record_id, args.key, args.password)
        return await cli.health()

    except RedirectError as e:
        return cli._emit({"success": False, **e.to_dict()}, error=True)
    finally:
        await cli.cleanup()


def main() -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
