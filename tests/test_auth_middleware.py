"""Unit tests for bearer header handling in taskhub.middleware.auth."""

import pytest

from taskhub.errors import AuthenticationError
from taskhub.middleware.auth import extract_bearer_token, get_current_principal


class TestExtractBearerToken:

    def test_extracts_token(self):
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    def test_scheme_is_case_insensitive(self):
        assert extract_bearer_token("bearer abc") == "abc"

    @pytest.mark.parametrize("header", [None, "", "Bearer", "Token abc", "abc"])
    def test_rejects(self, header):
        with pytest.raises(AuthenticationError):
            extract_bearer_token(header)


class TestGetCurrentPrincipal:

    @pytest.mark.asyncio
    async def test_valid_token(self, token_provider):
        token = token_provider.issue("alice", ["ROLE_USER"])
        principal = await get_current_principal(f"Bearer {token}")
        assert principal.username == "alice"
        assert principal.roles == frozenset({"ROLE_USER"})

    @pytest.mark.asyncio
    async def test_invalid_token(self):
        with pytest.raises(AuthenticationError):
            await get_current_principal("Bearer forged.token.value")
