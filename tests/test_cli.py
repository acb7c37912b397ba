"""Tests for the command-line interface."""

import json

import pytest

from shortlinks.cli import ShortLinksCLI, build_parser


@pytest.fixture
def cli(manager, store):
    """CLI wired to the fake store instead of connecting to Redis."""
    cli = ShortLinksCLI(redis_url="redis://unused:6379/0")
    cli.store = store
    cli.manager = manager
    return cli


class TestParser:
    """Test argument parsing."""

    def test_add(self):
        args = build_parser().parse_args(["add", "https://example.com", "--id", "mylink"])

        assert args.command == "add"
        assert args.url == "https://example.com"
        assert args.record_id == "mylink"
        assert args.password is None

    def test_delete_requires_key(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["delete", "mylink"])


@pytest.mark.asyncio
class TestCommands:
    """Test CLI commands against the manager."""

    async def test_add_get_delete(self, cli, capsys):
        assert await cli.add("https://example.com", "clilink", None) == 0
        added = json.loads(capsys.readouterr().out)
        assert added["id"] == "clilink"

        assert await cli.get("clilink") == 0
        assert json.loads(capsys.readouterr().out)["url"] == "https://example.com"

        assert await cli.delete("clilink", added["key"], None) == 0
        capsys.readouterr()

        assert await cli.get("clilink") == 1
        assert "not found" in json.loads(capsys.readouterr().err)["error"]

    async def test_health(self, cli, capsys):
        assert await cli.health() == 0
        assert json.loads(capsys.readouterr().out)["store"] == "healthy"
