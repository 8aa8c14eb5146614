"""
API routes for the scheme catalog
"""
import logging
from fastapi import APIRouter, HTTPException

from ..services.catalog_service import catalog_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["schemes"])


@router.get("/all-yojana-data")
async def get_all_yojana_data():
    """
    Get the full scheme catalog
    """
    try:
        return {"message": "All Yojana Data", "data": catalog_store.current().to_documents()}

    except Exception as e:
        logger.error(f"Error reading Yojana data: {e}")
        raise HTTPException(status_code=500, detail="Error fetching yojana data")
