"""Tests for identifier generation."""

import pytest

from shortlinks.idgen import IdGenerator
from shortlinks.keys import redirect_key


class TestIdGenerator:
    """Test identifier generation."""

    def test_generate_random(self):
        """Test random id generation."""
        generator = IdGenerator()

        code = generator.generate_random()
        assert len(code) == 10
        assert generator.is_valid_format(code)

    def test_generate_random_custom_length(self):
        """Test random id with custom length."""
        generator = IdGenerator(length=10)

        code = generator.generate_random(length=16)
        assert len(code) == 16
        assert generator.is_valid_format(code)

    def test_generate_random_varies(self):
        generator = IdGenerator()

        codes = {generator.generate_random() for _ in range(50)}
        assert len(codes) == 50

    def test_invalid_length(self):
        with pytest.raises(ValueError):
            IdGenerator(length=0)

    def test_explicit_zero_length_rejected(self):
        generator = IdGenerator()

        with pytest.raises(ValueError):
            generator.generate_random(length=0)

        with pytest.raises(ValueError):
            generator.generate_random(length=-3)

    def test_is_valid_format(self):
        """Test format validation."""
        assert IdGenerator.is_valid_format("abc123XYZ0")

        assert not IdGenerator.is_valid_format("")
        assert not IdGenerator.is_valid_format("abc-123")
        assert not IdGenerator.is_valid_format("abc 123")
        assert not IdGenerator.is_valid_format("abc@123")

    @pytest.mark.asyncio
    async def test_generate_unique_id_skips_taken(self, store):
        """Candidates already used by a redirect are skipped."""
        generator = IdGenerator(length=10)
        candidates = iter(["takenTaken", "takenTaken", "freeFree00"])
        generator.generate_random = lambda length=None: next(candidates)

        await store.set(redirect_key("takenTaken"), "https://example.com")

        assert await generator.generate_unique_id(store) == "freeFree00"

    @pytest.mark.asyncio
    async def test_generate_unique_id_ignores_edit_keys(self, store):
        """Only redir_ entries count as taken."""
        generator = IdGenerator(length=10)
        generator.generate_random = lambda length=None: "sameSame00"

        await store.set("key_sameSame00", "whatever")

        assert await generator.generate_unique_id(store) == "sameSame00"
