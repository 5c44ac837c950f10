"""
Estimate service coordinating the estimation engine for presentation layers.

This service runs the merge resolver and metrics calculator for a user
configuration and packages the results, converted with the shared currency
contract, for the HTTP API and the export report.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from eurostudy.models.cost_record import CostRecord
from eurostudy.models.country_catalog import get_reference_data
from eurostudy.models.currency import CurrencyConverter
from eurostudy.models.merge_resolver import DataMergeResolver, ResolverConfig
from eurostudy.models.metrics import DerivedMetrics, MetricsCalculator, MetricsConfig
from eurostudy.models.reference_data import ReferenceDataStore
from eurostudy.models.report import build_display_figures, generate_estimate_report
from eurostudy.models.study_config import (
    UserConfig,
    default_duration_years,
    legal_max_hours,
    suggest_hourly_wage,
)

logger = logging.getLogger(__name__)


class Estimate(BaseModel):
    """A resolved record with its metrics for one configuration."""

    model_config = ConfigDict(frozen=True)

    config: UserConfig = Field(..., description="The student's configuration")
    record: CostRecord = Field(..., description="Resolved cost record")
    metrics: DerivedMetrics = Field(..., description="Derived metrics")


class EstimateService:
    """Service for producing cost estimates and their renderings."""

    def __init__(
        self,
        reference_data: Optional[ReferenceDataStore] = None,
        resolver_config: Optional[ResolverConfig] = None,
        metrics_config: Optional[MetricsConfig] = None,
    ) -> None:
        """Initialize the estimate service.

        Args:
            reference_data: Reference data store (bundled catalog by default)
            resolver_config: Configuration for the merge resolver
            metrics_config: Configuration for the metrics calculator
        """
        self.reference_data = reference_data or get_reference_data()
        self.resolver = DataMergeResolver(self.reference_data, resolver_config)
        self.calculator = MetricsCalculator(metrics_config)
        self.logger = logging.getLogger(__name__)

    def estimate(self, config: UserConfig) -> Estimate:
        """Resolve the cost record and compute metrics for a configuration.

        Args:
            config: The student's configuration

        Returns:
            Estimate with record and metrics
        """
        record = self.resolver.resolve(
            config.country,
            config.course_level,
            config.duration_years,
            config.student_origin,
        )
        metrics = self.calculator.compute(record, config)

        self.logger.info(
            f"Estimated {config.country} ({config.student_origin}, "
            f"{config.duration_years:g}y): net cost {metrics.net_total_cost:.0f} EUR, "
            f"tier {metrics.affordability_tier}"
        )
        for entry in record.audit_entries("warning"):
            self.logger.warning(f"{config.country}: {entry.message}")

        return Estimate(config=config, record=record, metrics=metrics)

    def converter_for(self, target_currency: str) -> CurrencyConverter:
        """Build the display converter for a currency."""
        return CurrencyConverter(
            target_currency=target_currency,
            rate_table=self.reference_data.exchange_rates,
            symbol_table=self.reference_data.currency_symbols,
        )

    def build_response(self, estimate: Estimate) -> Dict[str, Any]:
        """Package an estimate as a JSON-serialisable dictionary.

        Args:
            estimate: The estimate to package

        Returns:
            Dictionary with config, record, base metrics and display figures
        """
        converter = self.converter_for(estimate.config.target_currency)
        return {
            "config": estimate.config.model_dump(mode="json"),
            "record": estimate.record.model_dump(mode="json"),
            "metrics": estimate.metrics.model_dump(mode="json"),
            "display": build_display_figures(estimate.metrics, converter),
        }

    def render_report(
        self, estimate: Estimate, prepared_on: Optional[date] = None
    ) -> str:
        """Render the plain-text export report for an estimate."""
        converter = self.converter_for(estimate.config.target_currency)
        return generate_estimate_report(
            estimate.record,
            estimate.config,
            estimate.metrics,
            converter,
            prepared_on=prepared_on,
        )

    def destination_defaults(
        self,
        country: str,
        student_origin: str = "Non-EU",
        city_tier: str = "Mid-sized",
        course_level: str = "Undergraduate",
    ) -> Dict[str, Any]:
        """Get suggested configuration values for a destination.

        Args:
            country: Destination country
            student_origin: "EU" or "Non-EU"
            city_tier: City tier of the study location
            course_level: Course level of the programme

        Returns:
            Dictionary with duration, wage and legal hour cap suggestions
        """
        work = self.reference_data.get_profile(country).part_time_work
        return {
            "country": country,
            "has_official_data": self.reference_data.get_official_data(country)
            is not None,
            "duration_years": default_duration_years(course_level),
            "hourly_wage": suggest_hourly_wage(work, city_tier),
            "legal_max_hours": legal_max_hours(work, student_origin),
        }

    def list_countries(self) -> List[Dict[str, Any]]:
        """List selectable destination countries."""
        return [
            {
                "value": option.value,
                "label": option.label,
                "has_official_data": self.reference_data.get_official_data(
                    option.value
                )
                is not None,
                "requires_blocked_account": self.reference_data.is_blocked_account_country(
                    option.value
                ),
            }
            for option in self.reference_data.countries
        ]

    def list_currencies(self) -> List[Dict[str, Any]]:
        """List supported display currencies with their rates."""
        return [
            {
                **option.model_dump(),
                "rate": self.reference_data.exchange_rates.get(option.code, 1),
            }
            for option in self.reference_data.currencies
        ]
