import copy

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from yojana.config import settings
from yojana.main import app
from yojana.routes import users as users_routes
from yojana.services.catalog_service import SchemeCatalog, catalog_store


TEST_SCHEMES = [
    {
        "title": "Women Self Help Grant",
        "department": "Women and Child Development",
        "eligibility": {"minAge": 18, "maxAge": 60, "maxIncome": 100000, "caste": "OBC", "gender": "Female"}
    },
    {
        "title": "SC Youth Scholarship",
        "eligibility": {"minAge": 16, "maxAge": 30, "maxIncome": 250000, "caste": "SC", "gender": "male"}
    },
    {
        "title": "Rural Housing Support",
        "eligibility": {"minAge": 18, "maxAge": 70, "maxIncome": 200000, "caste": "OBC", "gender": "female"}
    },
]


class FakeMongoService:
    """In-memory stand-in for MongoService keyed by mobile number"""

    def __init__(self):
        self.users = {}

    async def create_user(self, user_doc):
        mobile = user_doc["mobileNumber"]
        if mobile in self.users:
            raise DuplicateKeyError(f"E11000 duplicate key error mobileNumber: {mobile}")
        doc = {**copy.deepcopy(user_doc), "_id": ObjectId()}
        self.users[mobile] = doc
        return copy.deepcopy(doc)

    async def get_user_by_mobile(self, mobile_number):
        doc = self.users.get(mobile_number)
        return copy.deepcopy(doc) if doc else None

    async def update_scheme_eligibility(self, mobile_number, schemes):
        doc = self.users.get(mobile_number)
        if doc is None:
            return None
        doc["SchemeEligibility"] = copy.deepcopy(schemes)
        return copy.deepcopy(doc)

    async def health_check(self):
        return False

    async def count_users(self):
        return len(self.users)


@pytest.fixture
def test_catalog():
    catalog = SchemeCatalog.from_documents(TEST_SCHEMES)
    previous = catalog_store.publish(catalog)
    yield catalog
    catalog_store.publish(previous)


@pytest.fixture
def fake_mongo(monkeypatch):
    fake = FakeMongoService()
    monkeypatch.setattr(users_routes, "mongo_service", fake)
    return fake


@pytest.fixture
def client(test_catalog, fake_mongo, monkeypatch):
    monkeypatch.setattr(settings, "password_hash_rounds", 4)
    return TestClient(app)


@pytest.fixture
def registration_payload():
    return {
        "name": "Sunita",
        "middleName": "Ramesh",
        "lastName": "Patil",
        "mobileNumber": "9876543210",
        "gender": "female",
        "dob": "1990-01-01",
        "caste": "OBC",
        "income": 50000,
        "aadharNumber": "123412341234",
        "panNumber": "abcde1234f",
        "password": "secret123",
        "address": {
            "state": "Maharashtra",
            "district": "Pune",
            "pincode": "411001",
            "addressLine": "12 MG Road"
        }
    }
