"""
Reference data models for study-abroad cost estimation.

This module defines the read-only datasets the estimation engine consumes:
official per-country visa/funding/work-rights data, static cost profiles, and
the currency and blocked-account tables, bundled in a ``ReferenceDataStore``.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PROFILE_KEY = "default"


class FundingProof(BaseModel):
    """Official proof-of-funds requirement for a student visa."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    preferred_method: str = Field(..., description="Accepted funding-proof method")
    amount_euro: float = Field(..., ge=0, description="Yearly amount to prove (EUR)")
    details: str = Field(default="", description="Human-readable requirement")
    official_link: str = Field(default="", description="Official source URL")


class WorkRights(BaseModel):
    """Official part-time work rights for student visa holders."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    allowed: bool = Field(..., description="Whether students may work")
    max_hours: str = Field(..., description="Official hour limit as stated")
    notes: str = Field(default="", description="Additional regulations")


class OfficialCountryData(BaseModel):
    """Government-sourced visa and funding data for a country."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    country: str = Field(..., min_length=1, description="Country name")
    funding_proof: FundingProof = Field(..., description="Proof-of-funds rule")
    visa_fee_euro: float = Field(..., ge=0, description="Visa fee (EUR)")
    work_rights: WorkRights = Field(..., description="Student work rights")


class TuitionRates(BaseModel):
    """Yearly tuition by student origin."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    eu: float = Field(..., ge=0, description="Yearly tuition for EU students")
    non_eu: float = Field(..., ge=0, description="Yearly tuition for Non-EU students")
    details: str = Field(default="", description="Tuition notes")


class OneTimeCosts(BaseModel):
    """Costs paid once, at the start of the programme."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    visa_admin: float = Field(default=0, ge=0, description="Visa and admin fees")
    blocked_account: float = Field(
        default=0, ge=0, description="Blocked-account deposit (liquidity, not spent)"
    )
    flight_travel: float = Field(default=0, ge=0, description="Initial travel")
    tests_admissions: float = Field(
        default=0, ge=0, description="Language tests and application fees"
    )
    deposit: float = Field(default=0, ge=0, description="Housing deposit")


class RecurringCosts(BaseModel):
    """Monthly living costs for a mid-sized city."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    housing_monthly: float = Field(default=0, ge=0, description="Rent and utilities")
    insurance_monthly: float = Field(default=0, ge=0, description="Health insurance")
    food_monthly: float = Field(default=0, ge=0, description="Food and groceries")
    transport_monthly: float = Field(default=0, ge=0, description="Local transport")
    misc_monthly: float = Field(default=0, ge=0, description="Leisure and other")

    def total(self) -> float:
        """Sum of all monthly categories."""
        return (
            self.housing_monthly
            + self.insurance_monthly
            + self.food_monthly
            + self.transport_monthly
            + self.misc_monthly
        )


class PartTimeWorkProfile(BaseModel):
    """Static part-time work data with origin-specific hour limits."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    can_work: bool = Field(default=True, description="Whether students may work")
    regulations: str = Field(default="", description="Work regulations summary")
    min_wage: float = Field(..., ge=0, description="Hourly minimum wage (EUR)")
    avg_student_wage: float = Field(
        ..., ge=0, description="Typical hourly student wage (EUR)"
    )
    max_hours_eu: int = Field(..., ge=0, description="Weekly cap for EU students")
    max_hours_non_eu: int = Field(
        ..., ge=0, description="Weekly cap for Non-EU students"
    )


class StaticCostProfile(BaseModel):
    """Static cost-of-living and tuition profile for a country."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    tuition_yearly: TuitionRates = Field(..., description="Tuition by origin")
    one_time_costs: OneTimeCosts = Field(..., description="One-time costs")
    recurring_costs: RecurringCosts = Field(..., description="Monthly costs")
    part_time_work: PartTimeWorkProfile = Field(..., description="Work data")
    highlights: List[str] = Field(default_factory=list, description="Selling points")
    description: str = Field(default="", description="Short description")
    housing_range: str = Field(default="", description="Typical rent range")


class CountryOption(BaseModel):
    """A selectable destination country."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    value: str = Field(..., description="Country name used as lookup key")
    label: str = Field(..., description="Display label with flag")


class CurrencyOption(BaseModel):
    """A supported display currency."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    code: str = Field(..., min_length=3, max_length=3, description="ISO code")
    symbol: str = Field(..., description="Display symbol")
    label: str = Field(..., description="Display label")


class ReferenceDataStore(BaseModel):
    """Read-only bundle of every dataset the estimation engine consumes."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    official_data: Dict[str, OfficialCountryData] = Field(
        default_factory=dict, description="Official data by country"
    )
    cost_profiles: Dict[str, StaticCostProfile] = Field(
        ..., description="Static cost profiles by country (must include 'default')"
    )
    exchange_rates: Dict[str, float] = Field(
        default_factory=lambda: {"EUR": 1.0},
        description="Rates against the base currency",
    )
    currencies: List[CurrencyOption] = Field(
        default_factory=list, description="Supported display currencies"
    )
    blocked_account_countries: List[str] = Field(
        default_factory=list, description="Countries requiring a blocked account"
    )
    countries: List[CountryOption] = Field(
        default_factory=list, description="Selectable destination countries"
    )

    @field_validator("cost_profiles")
    @classmethod
    def validate_default_profile(
        cls, v: Dict[str, StaticCostProfile]
    ) -> Dict[str, StaticCostProfile]:
        """Ensure the fallback profile is present."""
        if DEFAULT_PROFILE_KEY not in v:
            raise ValueError("cost_profiles must include a 'default' profile")
        return v

    @field_validator("exchange_rates")
    @classmethod
    def validate_exchange_rates(cls, v: Dict[str, float]) -> Dict[str, float]:
        """Validate that every rate is positive."""
        for code, rate in v.items():
            if rate <= 0:
                raise ValueError(f"Exchange rate for {code} must be positive")
        return v

    def get_profile(self, country: str) -> StaticCostProfile:
        """Get the static profile for a country, falling back to the default."""
        return self.cost_profiles.get(country, self.cost_profiles[DEFAULT_PROFILE_KEY])

    def has_profile(self, country: str) -> bool:
        return country in self.cost_profiles and country != DEFAULT_PROFILE_KEY

    def get_official_data(self, country: str) -> Optional[OfficialCountryData]:
        """Get official data for a country, or None when none is published."""
        return self.official_data.get(country)

    def is_blocked_account_country(self, country: str) -> bool:
        return country in self.blocked_account_countries

    @property
    def currency_symbols(self) -> Dict[str, str]:
        """Currency code to display symbol table."""
        return {option.code: option.symbol for option in self.currencies}

    def get_country_label(self, country: str) -> Optional[str]:
        for option in self.countries:
            if option.value == country:
                return option.label
        return None
