"""Estimation and compliance engine for study-abroad cost estimates."""

from .cost_record import AuditLogEntry, CostRecord, PartTimeWork
from .country_catalog import create_reference_data, get_reference_data
from .currency import (
    BASE_CURRENCY,
    CurrencyConverter,
    CurrencyFormatter,
    convert,
    round_half_away_from_zero,
)
from .merge_resolver import DataMergeResolver, ResolverConfig, resolve
from .metrics import (
    DerivedMetrics,
    MetricsCalculator,
    MetricsConfig,
    MonthlyBudget,
    TimelineYear,
    compute_metrics,
)
from .reference_data import (
    OfficialCountryData,
    ReferenceDataStore,
    StaticCostProfile,
)
from .study_config import (
    UserConfig,
    apply_destination_defaults,
    clamp_work_hours,
    default_duration_years,
    suggest_hourly_wage,
)

__all__ = [
    "AuditLogEntry",
    "CostRecord",
    "PartTimeWork",
    "create_reference_data",
    "get_reference_data",
    "BASE_CURRENCY",
    "CurrencyConverter",
    "CurrencyFormatter",
    "convert",
    "round_half_away_from_zero",
    "DataMergeResolver",
    "ResolverConfig",
    "resolve",
    "DerivedMetrics",
    "MetricsCalculator",
    "MetricsConfig",
    "MonthlyBudget",
    "TimelineYear",
    "compute_metrics",
    "OfficialCountryData",
    "ReferenceDataStore",
    "StaticCostProfile",
    "UserConfig",
    "apply_destination_defaults",
    "clamp_work_hours",
    "default_duration_years",
    "suggest_hourly_wage",
]
