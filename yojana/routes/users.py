"""
API routes for registration, login and per-user scheme eligibility
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException
from pymongo.errors import DuplicateKeyError
from starlette.concurrency import run_in_threadpool

from ..config import settings
from ..models.user import (
    Applicant,
    LoginRequest,
    SchemeEligibilityResponse,
    UserRegistration,
    UserResponse
)
from ..services.auth_service import MAX_PASSWORD_BYTES, hash_password, verify_password
from ..services.catalog_service import catalog_store
from ..services.eligibility_service import match_schemes
from ..services.mongo_service import mongo_service
from ..utils.serializers import serialize_schemes, serialize_user
from ..utils.validators import normalize_mobile_number, validate_registration_data

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


async def _refresh_eligibility(user: Dict[str, Any]) -> Dict[str, Any]:
    """Recompute eligibility from the stored attributes and persist it"""
    eligible = match_schemes(Applicant.from_document(user), catalog_store.current())
    updated = await mongo_service.update_scheme_eligibility(
        user["mobileNumber"],
        serialize_schemes(eligible)
    )
    if updated is None:
        raise HTTPException(status_code=404, detail="User not found")
    return updated


@router.post("/register", response_model=UserResponse, status_code=201)
async def register_user(request: UserRegistration):
    """
    Register a user and store the schemes they are eligible for
    """
    try:
        if not request.password:
            raise HTTPException(status_code=400, detail="Password is required")
        if len(request.password) < 6:
            raise HTTPException(status_code=400, detail="Password must be at least 6 characters")
        if len(request.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise HTTPException(status_code=400, detail=f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

        user_data = request.to_document()
        user_data["mobileNumber"] = normalize_mobile_number(user_data["mobileNumber"])

        validation_errors = validate_registration_data(user_data)
        if validation_errors:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid registration data: {'; '.join(validation_errors)}"
            )

        hashed_password = await run_in_threadpool(
            hash_password, request.password, settings.password_hash_rounds
        )
        eligible = match_schemes(request.applicant(), catalog_store.current())

        saved = await mongo_service.create_user({
            **user_data,
            "password": hashed_password,
            "role": "user",
            "SchemeEligibility": serialize_schemes(eligible)
        })
        logger.info(f"Registered {saved['mobileNumber']} with {len(eligible)} eligible schemes")

        return UserResponse(message="User registered successfully", user=serialize_user(saved))

    except HTTPException:
        raise
    except DuplicateKeyError:
        raise HTTPException(status_code=409, detail="User with this mobile number already exists")
    except Exception as e:
        logger.error(f"Registration error: {e}")
        raise HTTPException(status_code=500, detail="Error registering user")


@router.post("/login", response_model=UserResponse)
async def login_user(request: LoginRequest):
    """
    Check credentials and re-check eligibility against the current catalog
    """
    try:
        if not request.mobile_number or not request.password:
            raise HTTPException(status_code=400, detail="Mobile number and password are required")

        mobile_number = normalize_mobile_number(request.mobile_number)
        user = await mongo_service.get_user_by_mobile(mobile_number)
        if not user:
            raise HTTPException(status_code=404, detail="User not found")

        is_valid = await run_in_threadpool(verify_password, request.password, user.get("password"))
        if not is_valid:
            raise HTTPException(status_code=401, detail="Invalid password")

        user = await _refresh_eligibility(user)

        return UserResponse(message="Login successful", user=serialize_user(user))

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Login error: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/user/schemes/{mobile_number}", response_model=SchemeEligibilityResponse)
async def get_user_schemes(mobile_number: str):
    """
    Get the eligible schemes stored for a user
    """
    try:
        user = await mongo_service.get_user_by_mobile(normalize_mobile_number(mobile_number))
        if not user:
            raise HTTPException(status_code=404, detail="User not found")

        return SchemeEligibilityResponse(
            message="Eligible schemes fetched successfully",
            scheme_eligibility=user.get("SchemeEligibility") or []
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching scheme eligibility: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/user/schemes/{mobile_number}/recheck", response_model=SchemeEligibilityResponse)
async def recheck_user_schemes(mobile_number: str):
    """
    Recompute a user's eligibility against the current catalog and store it
    """
    try:
        user = await mongo_service.get_user_by_mobile(normalize_mobile_number(mobile_number))
        if not user:
            raise HTTPException(status_code=404, detail="User not found")

        user = await _refresh_eligibility(user)

        return SchemeEligibilityResponse(
            message="Eligibility rechecked successfully",
            scheme_eligibility=user.get("SchemeEligibility") or []
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error rechecking scheme eligibility: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
