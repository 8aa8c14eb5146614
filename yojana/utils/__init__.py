"""
Utility functions for the Yojana Eligibility Backend
"""

from .validators import (
    normalize_mobile_number,
    validate_mobile_number,
    validate_aadhaar,
    validate_pan,
    validate_pincode,
    validate_registration_data
)
from .serializers import serialize_user, serialize_schemes

__all__ = [
    "normalize_mobile_number",
    "validate_mobile_number",
    "validate_aadhaar",
    "validate_pan",
    "validate_pincode",
    "validate_registration_data",
    "serialize_user",
    "serialize_schemes"
]
