"""
API routes for stateless eligibility checking
"""
import logging
from fastapi import APIRouter, HTTPException

from ..models.user import Applicant, EligibilityCheckResponse
from ..services.catalog_service import catalog_store
from ..services.eligibility_service import calculate_age, match_schemes
from ..utils.serializers import serialize_schemes

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/eligibility", tags=["eligibility"])


@router.post("/check", response_model=EligibilityCheckResponse)
async def check_eligibility(applicant: Applicant):
    """
    Check which schemes an applicant qualifies for without storing anything
    """
    try:
        eligible = match_schemes(applicant, catalog_store.current())

        return EligibilityCheckResponse(
            age=calculate_age(applicant.date_of_birth),
            total_eligible=len(eligible),
            scheme_eligibility=serialize_schemes(eligible)
        )

    except Exception as e:
        logger.error(f"Error checking eligibility: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
