"""
Utility functions for validating registration data
"""
import re
from typing import Any, Dict, List, Optional

MOBILE_PATTERN = re.compile(r"^[6-9]\d{9}$")
AADHAAR_PATTERN = re.compile(r"^\d{12}$")
PAN_PATTERN = re.compile(r"^[A-Z]{5}\d{4}[A-Z]$")
PINCODE_PATTERN = re.compile(r"^[1-9]\d{5}$")


def normalize_mobile_number(mobile_number: Optional[str]) -> str:
    """
    Strip spaces, dashes and a leading +91 or 0 from a mobile number

    Args:
        mobile_number: Raw mobile number

    Returns:
        The bare 10 digit number (or whatever remains if it is malformed)
    """
    if not mobile_number:
        return ""

    digits = re.sub(r"[\s-]", "", mobile_number.strip())
    if digits.startswith("+91"):
        digits = digits[3:]
    elif digits.startswith("0") and len(digits) == 11:
        digits = digits[1:]
    return digits


def validate_mobile_number(mobile_number: str) -> bool:
    return bool(MOBILE_PATTERN.match(mobile_number or ""))


def validate_aadhaar(aadhaar: str) -> bool:
    return bool(AADHAAR_PATTERN.match(re.sub(r"\s", "", aadhaar or "")))


def validate_pan(pan: str) -> bool:
    return bool(PAN_PATTERN.match((pan or "").strip().upper()))


def validate_pincode(pincode: str) -> bool:
    return bool(PINCODE_PATTERN.match((pincode or "").strip()))


def validate_registration_data(data: Dict[str, Any]) -> List[str]:
    """
    Validate registration data and return list of validation errors

    Args:
        data: Registration payload dumped with camelCase field names

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if not validate_mobile_number(data.get("mobileNumber")):
        errors.append("Mobile number must be a valid 10 digit Indian number")

    if not validate_aadhaar(data.get("aadharNumber")):
        errors.append("Aadhaar number must be 12 digits")

    if not validate_pan(data.get("panNumber")):
        errors.append("PAN must look like ABCDE1234F")

    address = data.get("address") or {}
    if not validate_pincode(address.get("pincode")):
        errors.append("Pincode must be 6 digits")

    # Income validation
    income = data.get("income")
    if income is not None:
        try:
            if float(income) < 0:
                errors.append("Income cannot be negative")
        except (ValueError, TypeError):
            errors.append("Income must be a valid number")

    return errors
