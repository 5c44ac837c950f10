"""
Metrics calculator for study-abroad cost estimates.

This module derives liquidity requirements, degree-level costs, work-income
offsets and affordability classifications from a resolved ``CostRecord`` and
a ``UserConfig``. It is the only place these formulas live: the HTTP API and
the export report both render its output.
"""

import math
from typing import Dict, List, Literal, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from .cost_record import CostRecord
from .currency import round_half_away_from_zero
from .study_config import UserConfig

AffordabilityTier = Literal["Affordable", "Moderate", "High Cost", "Full Funding Needed"]

MONTHS_PER_YEAR = 12


class MetricsConfig(BaseModel):
    """Configuration for the metrics calculation."""

    city_tier_multipliers: Dict[str, float] = Field(
        default={"Big City": 1.35, "Mid-sized": 1.0, "Small Town": 0.85},
        description="Housing cost multiplier by city tier",
    )
    food_sensitivity: float = Field(
        default=0.5,
        ge=0,
        le=1,
        description="Share of the housing multiplier applied to food",
    )
    semester_weeks: int = Field(
        default=38, ge=0, le=52, description="Weeks of term-time work per year"
    )
    holiday_hours_per_week: int = Field(
        default=40, ge=0, description="Weekly hours assumed for holiday work"
    )
    max_holiday_weeks: int = Field(
        default=18,
        ge=0,
        le=52,
        description="Holiday weeks assumed for the max-potential check",
    )
    affordable_threshold: float = Field(
        default=90, ge=0, le=100, description="Coverage % rated Affordable"
    )
    moderate_threshold: float = Field(
        default=60, ge=0, le=100, description="Coverage % rated Moderate"
    )
    feasibility_threshold: float = Field(
        default=85, ge=0, description="Max-potential coverage % rated feasible"
    )


class MonthlyBudget(BaseModel):
    """Monthly living budget lines after the city-tier adjustment."""

    model_config = ConfigDict(frozen=True)

    housing: float = Field(..., description="Rent and utilities")
    food: float = Field(..., description="Food and groceries")
    insurance: float = Field(..., description="Health insurance")
    transport_and_leisure: float = Field(..., description="Transport plus misc")
    total: float = Field(..., description="Total monthly need")


class TimelineYear(BaseModel):
    """Costs and work income for one year of the programme."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1, description="Programme year (1-based)")
    fraction: float = Field(..., ge=0, le=1, description="Share of the year studied")
    start_up_fees: float = Field(..., description="One-time fees (year 1 only)")
    tuition: float = Field(..., description="Tuition for the year")
    living: float = Field(..., description="Living costs for the year")
    total_cost: float = Field(..., description="Gross cost for the year")
    work_income: float = Field(..., description="Projected work income")
    cumulative_cost: float = Field(..., description="Gross cost to date")


class DerivedMetrics(BaseModel):
    """All derived financial quantities of an estimate (base currency)."""

    model_config = ConfigDict(frozen=True)

    # Living costs
    housing_adjusted: float = Field(..., description="City-adjusted housing")
    food_adjusted: float = Field(..., description="City-adjusted food")
    monthly_living_cost: float = Field(..., description="Monthly living cost")
    yearly_living_cost: float = Field(..., description="Yearly living cost")
    monthly_budget: MonthlyBudget = Field(..., description="Monthly budget lines")

    # Scenario 1: upfront liquidity
    start_up_fees: float = Field(..., description="One-time sunk fees")
    mandatory_liquidity: float = Field(..., description="Visa-mandated liquidity")
    recommended_liquidity: float = Field(..., description="Recommended liquidity")
    liquidity_gap: float = Field(..., ge=0, description="Recommended minus mandatory")
    first_year_cost: float = Field(..., description="Economic cost of year 1")
    subsequent_year_cost: float = Field(..., description="Cost of each later year")
    total_degree_cost: float = Field(..., description="Gross programme cost")

    # Work income
    semester_income: float = Field(..., description="Yearly term-time income")
    holiday_income: float = Field(..., description="Yearly holiday income")
    yearly_work_income: float = Field(..., description="Yearly work income")
    monthly_avg_work_income: float = Field(..., description="Average monthly income")

    # Scenario 2: net economic cost
    total_fixed_costs: float = Field(..., description="Start-up plus all tuition")
    total_living_costs: float = Field(..., description="Living costs over programme")
    total_work_income: float = Field(..., description="Work income over programme")
    uncovered_living: float = Field(..., ge=0, description="Living not covered by work")
    net_total_cost: float = Field(..., description="Net programme cost")
    net_monthly_out_of_pocket: float = Field(
        ..., ge=0, description="Monthly living cost not covered by work"
    )

    # Coverage and classification
    living_cost_covered_percent: int = Field(
        ..., ge=0, le=100, description="Share of living costs covered by work"
    )
    affordability_tier: AffordabilityTier = Field(..., description="Affordability")
    max_potential_monthly_income: float = Field(
        ..., description="Monthly income working the legal maximum"
    )
    max_potential_coverage_percent: int = Field(
        ..., description="Coverage achievable at the legal maximum"
    )
    is_work_feasible: bool = Field(
        ..., description="Whether work can realistically fund living costs"
    )

    timeline: List[TimelineYear] = Field(..., description="Year-by-year breakdown")


class MetricsCalculator:
    """Calculator for all derived estimate metrics."""

    def __init__(self, config: Optional[MetricsConfig] = None):
        """Initialize the metrics calculator.

        Args:
            config: Configuration for the metrics calculation
        """
        self.config = config or MetricsConfig()

    def compute(self, record: CostRecord, user_config: UserConfig) -> DerivedMetrics:
        """
        Compute all derived metrics for a cost record and user configuration.

        All math is done in the base currency. Out-of-range configuration
        values (e.g. hours above the legal cap) are used as given.

        Args:
            record: Resolved cost record
            user_config: The student's configuration

        Returns:
            DerivedMetrics with every quantity recomputed
        """
        cfg = self.config
        recurring = record.recurring_costs
        one_time = record.one_time_costs
        duration = user_config.duration_years
        tuition = record.tuition_yearly

        # City-tier adjustment
        multiplier = cfg.city_tier_multipliers.get(user_config.city_tier, 1.0)
        housing_adjusted = recurring.housing_monthly * multiplier
        food_adjusted = recurring.food_monthly * (
            1 + (multiplier - 1) * cfg.food_sensitivity
        )
        monthly_living_cost = (
            housing_adjusted
            + recurring.insurance_monthly
            + food_adjusted
            + recurring.transport_monthly
            + recurring.misc_monthly
        )
        yearly_living_cost = monthly_living_cost * MONTHS_PER_YEAR

        # Blocked account is liquidity, not a sunk cost
        start_up_fees = (
            one_time.visa_admin
            + one_time.tests_admissions
            + one_time.flight_travel
            + one_time.deposit
        )

        mandatory_liquidity = (
            self._funding_requirement(record) + tuition + start_up_fees
        )
        first_year_cost = yearly_living_cost + tuition + start_up_fees
        recommended_liquidity = max(mandatory_liquidity, first_year_cost)
        liquidity_gap = max(0.0, recommended_liquidity - mandatory_liquidity)

        semester_income = (
            user_config.work_hours_per_week
            * user_config.hourly_wage
            * cfg.semester_weeks
        )
        holiday_income = (
            cfg.holiday_hours_per_week
            * user_config.hourly_wage
            * user_config.holiday_work_weeks
        )
        yearly_work_income = semester_income + holiday_income
        monthly_avg_work_income = yearly_work_income / MONTHS_PER_YEAR

        subsequent_year_cost = yearly_living_cost + tuition
        total_degree_cost = first_year_cost + subsequent_year_cost * max(
            0, duration - 1
        )
        total_fixed_costs = start_up_fees + tuition * duration
        total_living_costs = yearly_living_cost * duration
        total_work_income = yearly_work_income * duration
        # Work income offsets living costs only
        uncovered_living = max(0.0, total_living_costs - total_work_income)
        net_total_cost = total_fixed_costs + uncovered_living

        living_cost_covered_percent = self._coverage_percent(
            monthly_avg_work_income, monthly_living_cost
        )
        affordability_tier = self._classify(living_cost_covered_percent, user_config)

        max_potential_monthly_income = self._max_potential_monthly_income(record)
        max_potential_coverage_percent = (
            round_half_away_from_zero(
                max_potential_monthly_income / monthly_living_cost * 100
            )
            if monthly_living_cost > 0
            else 0
        )

        return DerivedMetrics(
            housing_adjusted=housing_adjusted,
            food_adjusted=food_adjusted,
            monthly_living_cost=monthly_living_cost,
            yearly_living_cost=yearly_living_cost,
            monthly_budget=MonthlyBudget(
                housing=housing_adjusted,
                food=food_adjusted,
                insurance=recurring.insurance_monthly,
                transport_and_leisure=(
                    recurring.transport_monthly + recurring.misc_monthly
                ),
                total=monthly_living_cost,
            ),
            start_up_fees=start_up_fees,
            mandatory_liquidity=mandatory_liquidity,
            recommended_liquidity=recommended_liquidity,
            liquidity_gap=liquidity_gap,
            first_year_cost=first_year_cost,
            subsequent_year_cost=subsequent_year_cost,
            total_degree_cost=total_degree_cost,
            semester_income=semester_income,
            holiday_income=holiday_income,
            yearly_work_income=yearly_work_income,
            monthly_avg_work_income=monthly_avg_work_income,
            total_fixed_costs=total_fixed_costs,
            total_living_costs=total_living_costs,
            total_work_income=total_work_income,
            uncovered_living=uncovered_living,
            net_total_cost=net_total_cost,
            net_monthly_out_of_pocket=max(
                0.0, monthly_living_cost - monthly_avg_work_income
            ),
            living_cost_covered_percent=living_cost_covered_percent,
            affordability_tier=affordability_tier,
            max_potential_monthly_income=max_potential_monthly_income,
            max_potential_coverage_percent=max_potential_coverage_percent,
            is_work_feasible=(
                max_potential_coverage_percent >= cfg.feasibility_threshold
            ),
            timeline=self._build_timeline(
                duration,
                start_up_fees,
                tuition,
                yearly_living_cost,
                yearly_work_income,
            ),
        )

    def _funding_requirement(self, record: CostRecord) -> float:
        """Blocked deposit if required, otherwise the official proof amount."""
        blocked_account = record.one_time_costs.blocked_account
        if blocked_account > 0:
            return blocked_account
        if record.official_data is not None:
            return record.official_data.funding_proof.amount_euro
        return 0.0

    def _coverage_percent(self, monthly_income: float, monthly_living: float) -> int:
        if monthly_living <= 0:
            return 0
        percent = round_half_away_from_zero(monthly_income / monthly_living * 100)
        return max(0, min(100, percent))

    def _classify(self, covered_percent: int, user_config: UserConfig) -> str:
        """Classify affordability, top-down."""
        if user_config.work_hours_per_week == 0 and user_config.holiday_work_weeks == 0:
            return "Full Funding Needed"
        if covered_percent >= self.config.affordable_threshold:
            return "Affordable"
        if covered_percent >= self.config.moderate_threshold:
            return "Moderate"
        return "High Cost"

    def _max_potential_monthly_income(self, record: CostRecord) -> float:
        """Monthly income at the legal cap, ignoring the user's chosen hours."""
        work = record.part_time_work
        semester = work.legal_max_hours * work.avg_student_wage * self.config.semester_weeks
        holiday = (
            self.config.holiday_hours_per_week
            * work.avg_student_wage
            * self.config.max_holiday_weeks
        )
        return (semester + holiday) / MONTHS_PER_YEAR

    def _build_timeline(
        self,
        duration: float,
        start_up_fees: float,
        tuition: float,
        yearly_living_cost: float,
        yearly_work_income: float,
    ) -> List[TimelineYear]:
        """
        Build the year-by-year breakdown.

        Year 1 always carries start-up fees and a full year of tuition and
        living costs, matching ``total_degree_cost``; later years are scaled by
        the share of the year studied. Work income is scaled by that share in
        every year, matching ``total_work_income``.
        """
        num_years = max(1, math.ceil(duration))
        fractions = np.clip(duration - np.arange(num_years), 0.0, 1.0)

        cost_fractions = fractions.copy()
        cost_fractions[0] = 1.0

        start_up = np.zeros(num_years)
        start_up[0] = start_up_fees
        tuition_by_year = tuition * cost_fractions
        living_by_year = yearly_living_cost * cost_fractions
        total_by_year = start_up + tuition_by_year + living_by_year
        cumulative = np.cumsum(total_by_year)
        income_by_year = yearly_work_income * fractions

        return [
            TimelineYear(
                year=index + 1,
                fraction=float(fractions[index]),
                start_up_fees=float(start_up[index]),
                tuition=float(tuition_by_year[index]),
                living=float(living_by_year[index]),
                total_cost=float(total_by_year[index]),
                work_income=float(income_by_year[index]),
                cumulative_cost=float(cumulative[index]),
            )
            for index in range(num_years)
        ]


def compute_metrics(
    record: CostRecord,
    config: UserConfig,
    metrics_config: Optional[MetricsConfig] = None,
) -> DerivedMetrics:
    """
    Compute derived metrics with the given (or default) configuration.

    Args:
        record: Resolved cost record
        config: The student's configuration
        metrics_config: Calculation thresholds and constants

    Returns:
        DerivedMetrics
    """
    return MetricsCalculator(metrics_config).compute(record, config)
