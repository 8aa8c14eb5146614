"""Tests for registration validators and password hashing"""
import pytest

from yojana.services.auth_service import hash_password, verify_password
from yojana.utils.validators import (
    normalize_mobile_number,
    validate_aadhaar,
    validate_mobile_number,
    validate_pan,
    validate_pincode,
    validate_registration_data,
)


@pytest.mark.parametrize("raw, expected", [
    ("9876543210", "9876543210"),
    ("+91 98765 43210", "9876543210"),
    ("+919876543210", "9876543210"),
    ("09876543210", "9876543210"),
    ("98765-43210", "9876543210"),
    ("", ""),
    (None, ""),
])
def test_normalize_mobile_number(raw, expected):
    assert normalize_mobile_number(raw) == expected


def test_mobile_number_validation():
    assert validate_mobile_number("9876543210")
    assert not validate_mobile_number("1234567890")
    assert not validate_mobile_number("98765")
    assert not validate_mobile_number(None)


def test_identity_number_validation():
    assert validate_aadhaar("1234 1234 1234")
    assert not validate_aadhaar("12341234")
    assert validate_pan("abcde1234f")
    assert not validate_pan("ABCD1234F")
    assert validate_pincode("411001")
    assert not validate_pincode("011001")


def test_registration_data_collects_all_errors():
    errors = validate_registration_data({
        "mobileNumber": "123",
        "aadharNumber": "1",
        "panNumber": "bad",
        "income": -5,
        "address": {"pincode": "12"}
    })
    assert len(errors) == 5
    assert "Income cannot be negative" in errors


def test_registration_data_valid():
    assert validate_registration_data({
        "mobileNumber": "9876543210",
        "aadharNumber": "123412341234",
        "panNumber": "ABCDE1234F",
        "income": 0,
        "address": {"pincode": "411001"}
    }) == []


def test_password_hash_round_trip():
    hashed = hash_password("secret123", rounds=4)
    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong-pass", hashed)


@pytest.mark.parametrize("stored", [None, "", "not-a-bcrypt-hash"])
def test_verify_against_bad_stored_hash(stored):
    assert verify_password("secret123", stored) is False
