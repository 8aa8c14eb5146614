"""
Services package for the Yojana Eligibility Backend
"""

from .mongo_service import MongoService, mongo_service
from .catalog_service import SchemeCatalog, CatalogStore, catalog_store, load_catalog
from .eligibility_service import calculate_age, match_schemes
from .auth_service import hash_password, verify_password

__all__ = [
    "MongoService",
    "mongo_service",
    "SchemeCatalog",
    "CatalogStore",
    "catalog_store",
    "load_catalog",
    "calculate_age",
    "match_schemes",
    "hash_password",
    "verify_password"
]
