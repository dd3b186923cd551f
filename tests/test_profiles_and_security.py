"""Tests for profiles and bearer token handling."""

from datetime import timedelta

import pytest
from jose import jwt

from scripthub.core.security import create_access_token, decode_identity
from scripthub.modules.access import UnauthenticatedError, UnauthorizedError
from scripthub.modules.profiles import ProfileService

from conftest import ALICE, BOB, TEST_SECRET


class TestProfiles:
    @pytest.mark.asyncio
    async def test_missing_profile_is_none(self, session):
        assert await ProfileService.with_session(session).get_profile(ALICE) is None

    @pytest.mark.asyncio
    async def test_save_then_overwrite(self, session):
        profiles = ProfileService.with_session(session)
        await profiles.save_profile(ALICE, ALICE, "Alice")
        await profiles.save_profile(ALICE, ALICE, "Alice L.")

        profile = await profiles.get_profile(ALICE)
        assert profile.name == "Alice L."

    @pytest.mark.asyncio
    async def test_profiles_are_readable_by_anyone_but_owner_written(self, session):
        profiles = ProfileService.with_session(session)
        await profiles.save_profile(ALICE, ALICE, "Alice")

        with pytest.raises(UnauthorizedError):
            await profiles.save_profile(BOB, ALICE, "Mallory")
        assert (await profiles.get_profile(ALICE)).name == "Alice"


class TestTokens:
    def test_round_trip_identity(self):
        assert decode_identity(create_access_token(ALICE)) == ALICE

    def test_expired_token_rejected(self):
        token = create_access_token(ALICE, expires_delta=timedelta(seconds=-5))
        with pytest.raises(UnauthenticatedError):
            decode_identity(token)

    def test_wrong_signature_rejected(self):
        token = jwt.encode({"sub": ALICE}, "some-other-secret", algorithm="HS256")
        with pytest.raises(UnauthenticatedError):
            decode_identity(token)

    @pytest.mark.parametrize("claims", [{}, {"sub": ""}, {"sub": "   "}, {"sub": "x" * 300}])
    def test_token_without_usable_subject_rejected(self, claims):
        token = jwt.encode(claims, TEST_SECRET, algorithm="HS256")
        with pytest.raises(UnauthenticatedError):
            decode_identity(token)

    def test_garbage_rejected(self):
        with pytest.raises(UnauthenticatedError):
            decode_identity("not-a-jwt")
