"""
API routes for the Yojana Eligibility Backend
"""

from .users import router as users_router
from .eligibility import router as eligibility_router
from .schemes import router as schemes_router

__all__ = [
    "users_router",
    "eligibility_router",
    "schemes_router"
]
