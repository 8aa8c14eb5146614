"""
Models package for the Yojana Eligibility Backend
"""

from .common import Gender

from .scheme import (
    SchemeRecord,
    EligibilityModel
)

from .user import (
    Applicant,
    Address,
    UserRegistration,
    LoginRequest,
    UserResponse,
    SchemeEligibilityResponse,
    EligibilityCheckResponse
)

__all__ = [
    "Gender",

    # Scheme models
    "SchemeRecord",
    "EligibilityModel",

    # User models
    "Applicant",
    "Address",
    "UserRegistration",
    "LoginRequest",
    "UserResponse",
    "SchemeEligibilityResponse",
    "EligibilityCheckResponse"
]
