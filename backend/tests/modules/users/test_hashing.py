"""Tests for the bcrypt password hasher."""

import pytest
from unittest.mock import patch

from modules.users.hashing import PasswordHasher, DEFAULT_ROUNDS
from modules.users.exceptions import PasswordHashError


class TestPasswordHasher:
    @pytest.fixture
    def hasher(self):
        return PasswordHasher(rounds=4)

    def test_default_cost_is_ten_rounds(self):
        """Default cost should be 10 rounds."""
        assert DEFAULT_ROUNDS == 10
        assert PasswordHasher().rounds == 10

    def test_hash_does_not_contain_plaintext(self, hasher):
        """The digest should not reveal the password."""
        digest = hasher.hash("Passw0rd!")
        assert "Passw0rd!" not in digest
        assert digest.startswith("$2")

    def test_hash_embeds_cost(self, hasher):
        """The digest should carry the cost factor."""
        assert hasher.hash("Passw0rd!").split("$")[2] == "04"

    def test_fresh_salt_per_call(self, hasher):
        """Hashing the same password twice should give different digests."""
        assert hasher.hash("Passw0rd!") != hasher.hash("Passw0rd!")

    def test_verify_correct_password(self, hasher):
        digest = hasher.hash("Passw0rd!")
        assert hasher.verify("Passw0rd!", digest) is True

    def test_verify_wrong_password(self, hasher):
        digest = hasher.hash("Passw0rd!")
        assert hasher.verify("passw0rd!", digest) is False

    def test_verify_empty_inputs(self, hasher):
        assert hasher.verify("", hasher.hash("Passw0rd!")) is False
        assert hasher.verify("Passw0rd!", "") is False

    def test_verify_malformed_digest(self, hasher):
        """A malformed digest should fail verification, not raise."""
        assert hasher.verify("Passw0rd!", "not-a-bcrypt-hash") is False

    def test_hash_failure_is_internal_error(self, hasher):
        """Hasher failures should surface as PasswordHashError."""
        with patch("modules.users.hashing.bcrypt.hashpw", side_effect=ValueError("boom")):
            with pytest.raises(PasswordHashError) as exc_info:
                hasher.hash("Passw0rd!")
        assert exc_info.value.code == "PASSWORD_HASH_FAILED"
        assert "Passw0rd!" not in str(exc_info.value.to_dict())

    @pytest.mark.asyncio
    async def test_async_round_trip(self, hasher):
        """Async variants should run off the event loop and agree with sync ones."""
        digest = await hasher.hash_async("Passw0rd!")
        assert await hasher.verify_async("Passw0rd!", digest) is True
        assert await hasher.verify_async("wrong-password", digest) is False
