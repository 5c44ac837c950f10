"""
Data merge resolver for study-abroad cost estimation.

This module merges official per-country regulatory data with static cost
profiles under a fixed override precedence, producing a single ``CostRecord``
and an ordered compliance audit log explaining every rule applied.
"""

import logging
from typing import List, Optional

from pydantic import BaseModel, Field

from .cost_record import AuditLogEntry, CostRecord, PartTimeWork
from .country_catalog import get_reference_data
from .currency import round_half_away_from_zero
from .reference_data import (
    OfficialCountryData,
    RecurringCosts,
    ReferenceDataStore,
    StaticCostProfile,
)
from .study_config import legal_max_hours

logger = logging.getLogger(__name__)

BLOCKED_ACCOUNT_METHOD = "Blocked Account"


class ResolverConfig(BaseModel):
    """Configuration for the compliance audit rules."""

    reality_check_ratio: float = Field(
        default=1.2,
        gt=0,
        description=(
            "Real monthly costs above this multiple of the government minimum "
            "raise a cost warning"
        ),
    )


def _money(amount: float) -> str:
    return f"€{round_half_away_from_zero(amount):,}"


class DataMergeResolver:
    """Resolves a consistent cost record from official and static data."""

    def __init__(
        self,
        reference_data: Optional[ReferenceDataStore] = None,
        config: Optional[ResolverConfig] = None,
    ):
        """Initialize the resolver.

        Args:
            reference_data: Reference data store (bundled catalog by default)
            config: Configuration for the audit rules
        """
        self.reference_data = reference_data or get_reference_data()
        self.config = config or ResolverConfig()

    def resolve(
        self,
        country: str,
        course_level: str,
        duration_years: float,
        student_origin: str,
    ) -> CostRecord:
        """
        Resolve the cost record for a destination and student origin.

        Never fails: unknown countries use the default static profile and
        carry no official data.

        Args:
            country: Destination country (exact name)
            course_level: Course level of the programme
            duration_years: Programme length in years
            student_origin: "EU" or "Non-EU"

        Returns:
            A new CostRecord with its audit log in rule order
        """
        store = self.reference_data
        official = store.get_official_data(country)
        profile = store.get_profile(country)
        if not store.has_profile(country):
            logger.debug(f"No static cost profile for {country}, using default")

        audit_log: List[AuditLogEntry] = []
        is_eu = student_origin == "EU"

        tuition_yearly = self._select_tuition(profile, is_eu, audit_log)

        one_time_costs = profile.one_time_costs.model_copy(
            update={
                "visa_admin": self._visa_fee(profile, official),
                "blocked_account": self._blocked_account(
                    country, profile, official, audit_log
                ),
            }
        )

        part_time_work = self._work_rights(
            profile, official, student_origin, audit_log
        )

        if official is not None:
            self._reality_check(official, profile.recurring_costs, audit_log)

        return CostRecord(
            country_name=country,
            course_level=course_level,
            duration_years=duration_years,
            student_origin=student_origin,
            tuition_yearly=tuition_yearly,
            tuition_details=profile.tuition_yearly.details,
            one_time_costs=one_time_costs,
            recurring_costs=profile.recurring_costs,
            part_time_work=part_time_work,
            highlights=list(profile.highlights),
            description=profile.description,
            housing_range=profile.housing_range,
            official_data=official,
            audit_log=audit_log,
            exchange_rates=dict(store.exchange_rates),
        )

    def _select_tuition(
        self, profile: StaticCostProfile, is_eu: bool, audit_log: List[AuditLogEntry]
    ) -> float:
        """Select tuition by origin."""
        rates = profile.tuition_yearly
        if not is_eu:
            audit_log.append(
                AuditLogEntry.info(
                    f"Applied international tuition rate ({_money(rates.non_eu)}/yr) "
                    "for Non-EU origin."
                )
            )
            return rates.non_eu

        if rates.eu != rates.non_eu:
            message = (
                f"Applied subsidized EU tuition rate ({_money(rates.eu)}/yr) "
                "instead of the Non-EU rate."
            )
        else:
            message = (
                f"Applied EU tuition rate ({_money(rates.eu)}/yr); "
                "the same rate applies to Non-EU students."
            )
        audit_log.append(AuditLogEntry.info(message))
        return rates.eu

    def _visa_fee(
        self, profile: StaticCostProfile, official: Optional[OfficialCountryData]
    ) -> float:
        if official is not None:
            return official.visa_fee_euro
        return profile.one_time_costs.visa_admin

    def _blocked_account(
        self,
        country: str,
        profile: StaticCostProfile,
        official: Optional[OfficialCountryData],
        audit_log: List[AuditLogEntry],
    ) -> float:
        """Gate the blocked-account deposit on the blocked-account country set."""
        if not self.reference_data.is_blocked_account_country(country):
            audit_log.append(
                AuditLogEntry.info(
                    'Switched to the "Annual Financial Proof" method '
                    f"(no Blocked Account required for {country})."
                )
            )
            return 0.0

        if official is not None:
            amount = official.funding_proof.amount_euro
        else:
            amount = profile.one_time_costs.blocked_account

        if official is not None and BLOCKED_ACCOUNT_METHOD in (
            official.funding_proof.preferred_method
        ):
            message = (
                "Enforced official Blocked Account requirement "
                f"(approx. {_money(amount)}) for {country}."
            )
        else:
            message = (
                f"Applied mandatory deposit of {_money(amount)} "
                f"based on {country} visa rules."
            )
        audit_log.append(AuditLogEntry.info(message))
        return amount

    def _work_rights(
        self,
        profile: StaticCostProfile,
        official: Optional[OfficialCountryData],
        student_origin: str,
        audit_log: List[AuditLogEntry],
    ) -> PartTimeWork:
        """Resolve work rights, official data first."""
        work = profile.part_time_work
        max_hours = legal_max_hours(work, student_origin)

        audit_log.append(
            AuditLogEntry.info(
                f"Legal work limit: capped estimate to {max_hours}h/week based on "
                f"{student_origin} student visa regulations."
            )
        )

        return PartTimeWork(
            can_work=official.work_rights.allowed if official else work.can_work,
            regulations=official.work_rights.notes if official else work.regulations,
            min_wage=work.min_wage,
            avg_student_wage=work.avg_student_wage,
            legal_max_hours=max_hours,
        )

    def _reality_check(
        self,
        official: OfficialCountryData,
        recurring_costs: RecurringCosts,
        audit_log: List[AuditLogEntry],
    ) -> None:
        """Warn when real living costs far exceed the visa minimum."""
        govt_monthly = official.funding_proof.amount_euro / 12
        real_monthly = recurring_costs.total()

        if real_monthly > self.config.reality_check_ratio * govt_monthly:
            audit_log.append(
                AuditLogEntry.warning(
                    f"Real monthly costs (~{_money(real_monthly)}) are significantly "
                    "higher than the government visa minimum "
                    f"(~{_money(govt_monthly)}). The higher real estimate is used "
                    "for all projections."
                )
            )


def resolve(
    country: str,
    course_level: str,
    duration_years: float,
    student_origin: str,
    reference_data: Optional[ReferenceDataStore] = None,
) -> CostRecord:
    """
    Resolve a cost record with the default resolver configuration.

    Args:
        country: Destination country (exact name)
        course_level: Course level of the programme
        duration_years: Programme length in years
        student_origin: "EU" or "Non-EU"
        reference_data: Reference data store (bundled catalog by default)

    Returns:
        A new CostRecord
    """
    resolver = DataMergeResolver(reference_data=reference_data)
    return resolver.resolve(country, course_level, duration_years, student_origin)
