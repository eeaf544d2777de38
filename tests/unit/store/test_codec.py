"""Unit tests for the persisted profile format."""

from datetime import date

import orjson
import pytest
from pydantic import ValidationError

from domain.entities.profile import Profile
from infrastructure.store.codec import decode_profiles, encode_profiles, normalize_fields


def test_encodes_camel_case_keys_and_omits_absent_fields():
    profile = Profile(full_name="Ada Lovelace", email="ada@example.com", id="ada")

    [record] = orjson.loads(encode_profiles([profile]))

    assert record["id"] == "ada"
    assert record["fullName"] == "Ada Lovelace"
    assert "createdAt" in record and "updatedAt" in record
    assert "phoneNumber" not in record
    assert "dateOfBirth" not in record


def test_date_of_birth_is_stored_as_iso_date():
    profile = Profile(
        full_name="Ada", email="a@example.com", id="ada", date_of_birth=date(1815, 12, 10)
    )

    [record] = orjson.loads(encode_profiles([profile]))

    assert record["dateOfBirth"] == "1815-12-10"


def test_decodes_records_written_with_nulls():
    payload = (
        '[{"id": "7", "fullName": "Alan Turing", "email": "alan@example.com",'
        ' "phoneNumber": null, "location": "Wilmslow",'
        ' "createdAt": "2026-01-28T10:00:00Z", "updatedAt": "2026-01-28T11:00:00Z"}]'
    )

    [profile] = decode_profiles(payload)

    assert profile.id == "7"
    assert profile.phone_number is None
    assert profile.location == "Wilmslow"
    assert profile.updated_at > profile.created_at


def test_rejects_non_array_payload():
    with pytest.raises(ValidationError):
        decode_profiles('{"id": "1"}')


def test_normalize_fields_keeps_only_supplied_keys():
    assert normalize_fields({"date_of_birth": "1991-04-01", "bio": None}) == {
        "date_of_birth": date(1991, 4, 1),
        "bio": None,
    }


def test_normalize_fields_rejects_unstorable_value():
    with pytest.raises(ValidationError):
        normalize_fields({"date_of_birth": "not-a-date"})
