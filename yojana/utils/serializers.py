"""
Helpers turning stored documents and scheme records into JSON-safe dicts
"""
from typing import Any, Dict, Iterable, List

from bson import ObjectId
from fastapi.encoders import jsonable_encoder

from ..models.scheme import SchemeRecord


def serialize_user(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Stored user without the password hash, with ObjectIds as strings"""
    user = {key: value for key, value in doc.items() if key != "password"}
    return jsonable_encoder(user, custom_encoder={ObjectId: str})


def serialize_schemes(schemes: Iterable[SchemeRecord]) -> List[Dict[str, Any]]:
    return [scheme.to_document() for scheme in schemes]
