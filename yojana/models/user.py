"""
Pydantic models for users, applicants and eligibility responses
"""
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional, Union
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .common import (
    Gender,
    parse_date,
    parse_gender,
    to_number_or_none,
    to_text_or_none,
)


def get_current_utc_time():
    """Get current UTC time for default values"""
    return datetime.now(timezone.utc)


class Applicant(BaseModel):
    """
    Attributes of a user needed for matching.

    Built from a request payload or a stored user document. Values that
    cannot be interpreted are kept as None instead of failing validation.
    """
    date_of_birth: Optional[date] = Field(
        None,
        validation_alias=AliasChoices("dob", "dateOfBirth", "date_of_birth"),
        serialization_alias="dob"
    )
    income: Optional[Union[int, float]] = None
    caste: Optional[str] = None
    gender: Optional[Gender] = None

    @field_validator('date_of_birth', mode='before')
    @classmethod
    def coerce_dob(cls, v):
        return parse_date(v)

    @field_validator('income', mode='before')
    @classmethod
    def coerce_income(cls, v):
        return to_number_or_none(v)

    @field_validator('caste', mode='before')
    @classmethod
    def coerce_caste(cls, v):
        return to_text_or_none(v)

    @field_validator('gender', mode='before')
    @classmethod
    def coerce_gender(cls, v):
        return parse_gender(v)

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Applicant":
        """Build an applicant from a stored user document"""
        return cls.model_validate({
            "dob": doc.get("dob"),
            "income": doc.get("income"),
            "caste": doc.get("caste"),
            "gender": doc.get("gender"),
        })

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "dob": "2000-01-01",
                "income": 50000,
                "caste": "OBC",
                "gender": "female"
            }
        }
    )


class Address(BaseModel):
    """Postal address of a registered user"""
    state: str = Field(..., min_length=1)
    district: str = Field(..., min_length=1)
    pincode: str = Field(..., description="6 digit postal code")
    address_line: str = Field(..., alias="addressLine", min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class UserRegistration(BaseModel):
    """Registration payload"""
    name: str = Field(..., min_length=1)
    middle_name: str = Field(..., alias="middleName", min_length=1)
    last_name: str = Field(..., alias="lastName", min_length=1)
    father_or_husband_name: Optional[str] = Field(None, alias="fatherOrHusbandName")
    mobile_number: str = Field(..., alias="mobileNumber")
    email: Optional[str] = None
    gender: Gender = Field(..., description="User's gender")
    dob: date = Field(..., description="Date of birth")
    caste: str = Field(..., min_length=1, description="User's caste category")
    income: float = Field(..., ge=0, description="Annual household income")
    aadhar_number: str = Field(..., alias="aadharNumber")
    pan_number: str = Field(..., alias="panNumber")
    password: Optional[str] = Field(None, description="Checked by the route so a missing value gives 400")
    address: Address

    @field_validator('gender', mode='before')
    @classmethod
    def validate_gender(cls, v):
        gender = parse_gender(v)
        if gender is None:
            raise ValueError(f'Gender must be one of: {[g.value for g in Gender]}')
        return gender

    @field_validator('pan_number')
    @classmethod
    def normalize_pan(cls, v):
        return v.strip().upper()

    def applicant(self) -> Applicant:
        return Applicant(
            date_of_birth=self.dob,
            income=self.income,
            caste=self.caste,
            gender=self.gender
        )

    def to_document(self) -> Dict[str, Any]:
        """Document to store, without the password"""
        doc = self.model_dump(mode="json", by_alias=True, exclude={"password"})
        # BSON has no date type
        doc["dob"] = datetime(self.dob.year, self.dob.month, self.dob.day, tzinfo=timezone.utc)
        return doc

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Sunita",
                "middleName": "Ramesh",
                "lastName": "Patil",
                "mobileNumber": "9876543210",
                "gender": "female",
                "dob": "1995-04-12",
                "caste": "OBC",
                "income": 120000,
                "aadharNumber": "123412341234",
                "panNumber": "ABCDE1234F",
                "password": "secret123",
                "address": {
                    "state": "Maharashtra",
                    "district": "Pune",
                    "pincode": "411001",
                    "addressLine": "12 MG Road"
                }
            }
        }
    )


class LoginRequest(BaseModel):
    """Login payload"""
    mobile_number: Optional[str] = Field(None, alias="mobileNumber")
    password: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class UserResponse(BaseModel):
    """Registration or login response"""
    message: str
    user: Dict[str, Any]


class SchemeEligibilityResponse(BaseModel):
    """Eligible schemes of a user"""
    message: str
    scheme_eligibility: List[Dict[str, Any]] = Field(default_factory=list, alias="SchemeEligibility")

    model_config = ConfigDict(populate_by_name=True)


class EligibilityCheckResponse(BaseModel):
    """Result of a stateless eligibility check"""
    age: Optional[int] = Field(None, description="Age in completed years, None if the date of birth is invalid")
    total_eligible: int = Field(..., alias="totalEligible")
    scheme_eligibility: List[Dict[str, Any]] = Field(default_factory=list, alias="SchemeEligibility")
    checked_at: datetime = Field(default_factory=get_current_utc_time, alias="checkedAt")

    model_config = ConfigDict(populate_by_name=True)
