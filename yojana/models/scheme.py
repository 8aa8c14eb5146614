"""
Pydantic models for schemes and their eligibility rules
"""
from typing import Any, Dict, Optional, Union
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .common import (
    Gender,
    parse_gender,
    to_int_or_none,
    to_number_or_none,
    to_text_or_none,
)


class EligibilityModel(BaseModel):
    """
    Qualification rule for one scheme.

    Every field is optional so that a malformed catalog entry still loads;
    a missing bound simply never matches. Legacy field names from the
    original data file (age, income, Gender) are accepted on input.
    """
    min_age: Optional[int] = Field(
        None,
        validation_alias=AliasChoices("minAge", "age", "min_age"),
        serialization_alias="minAge",
        description="Inclusive lower age bound"
    )
    max_age: Optional[int] = Field(
        None,
        validation_alias=AliasChoices("maxAge", "max_age"),
        serialization_alias="maxAge",
        description="Inclusive upper age bound"
    )
    max_income: Optional[Union[int, float]] = Field(
        None,
        validation_alias=AliasChoices("maxIncome", "income", "max_income"),
        serialization_alias="maxIncome",
        description="Inclusive annual income ceiling"
    )
    caste: Optional[str] = Field(None, description="Exact caste category")
    gender: Optional[Gender] = Field(
        None,
        validation_alias=AliasChoices("gender", "Gender"),
        description="Gender category"
    )

    @field_validator('min_age', 'max_age', mode='before')
    @classmethod
    def coerce_age(cls, v):
        return to_int_or_none(v)

    @field_validator('max_income', mode='before')
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

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class SchemeRecord(BaseModel):
    """
    One government scheme from the catalog.

    Descriptive fields other than the title are kept as extras and passed
    through unchanged.
    """
    title: Optional[str] = Field(None, description="Display name of the scheme")
    eligibility: EligibilityModel = Field(
        default_factory=EligibilityModel,
        validation_alias=AliasChoices("eligibility", "EligibilityModel"),
        description="Eligibility rule"
    )

    @field_validator('title', mode='before')
    @classmethod
    def coerce_title(cls, v):
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator('eligibility', mode='before')
    @classmethod
    def coerce_eligibility(cls, v):
        if isinstance(v, (dict, EligibilityModel)):
            return v
        return {}

    def to_document(self) -> Dict[str, Any]:
        """Serialize with canonical camelCase field names"""
        return self.model_dump(mode="json", by_alias=True)

    model_config = ConfigDict(
        extra="allow",
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "Ladli Behna Yojana",
                "description": "Monthly assistance for women",
                "eligibility": {
                    "minAge": 21,
                    "maxAge": 60,
                    "maxIncome": 250000,
                    "caste": "OBC",
                    "gender": "female"
                }
            }
        }
    )
