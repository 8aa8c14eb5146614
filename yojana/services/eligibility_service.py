"""
Eligibility service for matching applicants against the scheme catalog
"""
import logging
from datetime import date
from typing import Any, Iterable, List, Optional

from ..models.common import parse_date
from ..models.scheme import EligibilityModel, SchemeRecord
from ..models.user import Applicant

logger = logging.getLogger(__name__)


def calculate_age(date_of_birth: Any, today: Optional[date] = None) -> Optional[int]:
    """
    Age in completed years as of today.

    The age goes up on the birthday itself. Dates are not range checked, so
    a future date of birth gives a negative age.

    Args:
        date_of_birth: date, datetime or ISO-8601 string
        today: evaluation date (defaults to the current date)

    Returns:
        The age, or None when the date of birth is missing or unparseable
    """
    birth_date = parse_date(date_of_birth)
    if birth_date is None:
        return None

    if today is None:
        today = date.today()

    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def _at_least(value, bound) -> bool:
    return value is not None and bound is not None and value >= bound


def _at_most(value, bound) -> bool:
    return value is not None and bound is not None and value <= bound


def _same(value, expected) -> bool:
    return value is not None and expected is not None and value == expected


def is_eligible(applicant: Applicant, age: Optional[int], rule: EligibilityModel) -> bool:
    """All five conditions must hold; a missing value on either side fails"""
    return (
        _at_least(age, rule.min_age)
        and _at_most(age, rule.max_age)
        and _at_most(applicant.income, rule.max_income)
        and _same(applicant.caste, rule.caste)
        and _same(applicant.gender, rule.gender)
    )


def match_schemes(
    applicant: Applicant,
    catalog: Iterable[SchemeRecord],
    today: Optional[date] = None
) -> List[SchemeRecord]:
    """
    Schemes the applicant qualifies for, in catalog order.

    Duplicate catalog entries that match are all returned. Never raises;
    no match is an empty list.
    """
    age = calculate_age(applicant.date_of_birth, today)

    eligible = []
    for scheme in catalog:
        rule = scheme.eligibility
        matched = is_eligible(applicant, age, rule)
        logger.debug(
            f"Scheme {scheme.title!r}: age {age} in [{rule.min_age}, {rule.max_age}], "
            f"income {applicant.income} <= {rule.max_income}, caste {applicant.caste!r} == {rule.caste!r}, "
            f"gender {applicant.gender} == {rule.gender} -> {matched}"
        )
        if matched:
            eligible.append(scheme)

    return eligible
