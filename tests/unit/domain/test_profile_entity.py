"""Unit tests for the Profile entity."""

import pytest

from domain.entities.profile import Profile


def test_id_must_be_supplied():
    with pytest.raises(TypeError):
        Profile(full_name="Ada Lovelace", email="ada@example.com")  # type: ignore[call-arg]


def test_matches_expects_normalized_query():
    profile = Profile(full_name="Ada Lovelace", email="ada@example.com", id="ada", bio=None)

    assert profile.matches("lovelace")
    assert not profile.matches("LOVELACE")
    assert not profile.matches("none")
    assert profile.matches("")
