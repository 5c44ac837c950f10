"""
Pydantic models for study-abroad estimate requests.

This module defines the user configuration of an estimate along with the
caller-side helpers that derive sensible defaults for it (course duration,
hourly wage, legal work-hour clamp). The estimation engine itself never
clamps or adjusts a configuration; it computes with what it is given.
"""

from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .currency import BASE_CURRENCY, round_half_away_from_zero
from .reference_data import PartTimeWorkProfile, ReferenceDataStore

StudentOrigin = Literal["EU", "Non-EU"]
CourseLevel = Literal[
    "Undergraduate", "Masters", "PhD", "Short-term", "Language Course"
]
CityTier = Literal["Big City", "Mid-sized", "Small Town"]

MAX_HOLIDAY_WORK_WEEKS = 18
MAX_DURATION_YEARS = 8

COURSE_DEFAULT_DURATIONS: Dict[str, float] = {
    "Undergraduate": 3,
    "Masters": 2,
    "PhD": 4,
    "Short-term": 0.5,  # 6 months
    "Language Course": 0.25,  # 3 months
}

# Local wage levels relative to the national student average
CITY_TIER_WAGE_MULTIPLIERS: Dict[str, float] = {
    "Big City": 1.2,
    "Mid-sized": 1.0,
    "Small Town": 0.9,
}


class UserConfig(BaseModel):
    """A student's estimate configuration."""

    model_config = ConfigDict(
        frozen=True,
        allow_inf_nan=False,
        json_schema_extra={
            "example": {
                "country": "Germany",
                "student_origin": "Non-EU",
                "course_level": "Undergraduate",
                "duration_years": 3,
                "city_tier": "Mid-sized",
                "target_currency": "EUR",
                "work_hours_per_week": 0,
                "hourly_wage": 13.5,
                "holiday_work_weeks": 0,
            }
        },
    )

    country: str = Field(..., min_length=1, description="Destination country")
    student_origin: StudentOrigin = Field(
        default="Non-EU", description="Fee and visa status of the student"
    )
    course_level: CourseLevel = Field(
        default="Undergraduate", description="Level of the programme"
    )
    duration_years: float = Field(
        default=3,
        gt=0,
        le=MAX_DURATION_YEARS,
        description="Programme length in years (may be < 1)",
    )
    city_tier: CityTier = Field(
        default="Mid-sized", description="Cost-of-living bucket of the city"
    )
    target_currency: str = Field(
        default=BASE_CURRENCY,
        min_length=3,
        max_length=3,
        description="Display currency code",
    )
    work_hours_per_week: int = Field(
        default=0, ge=0, description="Planned term-time work hours per week"
    )
    hourly_wage: float = Field(default=12, ge=0, description="Hourly wage (EUR)")
    holiday_work_weeks: int = Field(
        default=0,
        ge=0,
        le=MAX_HOLIDAY_WORK_WEEKS,
        description="Weeks of full-time holiday work per year",
    )
    name: Optional[str] = Field(default=None, description="Student name for exports")
    email: Optional[str] = Field(default=None, description="Contact email")


def default_duration_years(course_level: str, current: float = 3) -> float:
    """
    Get the typical programme length for a course level.

    Args:
        course_level: Course level name
        current: Value returned for unknown course levels

    Returns:
        Duration in years
    """
    return COURSE_DEFAULT_DURATIONS.get(course_level, current)


def legal_max_hours(work: PartTimeWorkProfile, student_origin: str) -> int:
    """Get the weekly term-time work cap for a student origin."""
    return work.max_hours_eu if student_origin == "EU" else work.max_hours_non_eu


def suggest_hourly_wage(work: PartTimeWorkProfile, city_tier: str) -> float:
    """
    Suggest an hourly wage for the local labour market.

    The national average student wage is scaled by city tier, rounded to the
    nearest 0.50 and never drops below the minimum wage.

    Args:
        work: Static part-time work profile of the destination
        city_tier: City tier of the study location

    Returns:
        Suggested hourly wage in EUR
    """
    multiplier = CITY_TIER_WAGE_MULTIPLIERS.get(city_tier, 1.0)
    rounded = round_half_away_from_zero(work.avg_student_wage * multiplier * 2) / 2
    return max(work.min_wage, rounded)


def clamp_work_hours(work_hours_per_week: int, max_hours: int) -> int:
    """Clamp planned weekly hours to the legal cap."""
    return max(0, min(work_hours_per_week, max_hours))


def apply_destination_defaults(
    config: UserConfig, reference_data: ReferenceDataStore
) -> UserConfig:
    """
    Return a copy of a configuration adjusted to its destination.

    Sets the suggested hourly wage for the city tier and clamps planned work
    hours to the legal cap for the student's origin.

    Args:
        config: The configuration to adjust
        reference_data: Reference data used to look up the destination

    Returns:
        New UserConfig instance
    """
    work = reference_data.get_profile(config.country).part_time_work
    return config.model_copy(
        update={
            "hourly_wage": suggest_hourly_wage(work, config.city_tier),
            "work_hours_per_week": clamp_work_hours(
                config.work_hours_per_week, legal_max_hours(work, config.student_origin)
            ),
        }
    )
