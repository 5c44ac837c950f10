"""
Merged cost record produced by the data merge resolver.

A ``CostRecord`` is a value: it is created fresh by each resolve call and is
never mutated afterwards. All monetary fields are in the base currency.
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .reference_data import OfficialCountryData, OneTimeCosts, RecurringCosts

AuditKind = Literal["info", "warning"]


class AuditLogEntry(BaseModel):
    """One explanation of a rule or override applied by the resolver."""

    model_config = ConfigDict(frozen=True)

    kind: AuditKind = Field(..., description="Severity of the entry")
    message: str = Field(..., min_length=1, description="Human-readable explanation")

    @classmethod
    def info(cls, message: str) -> "AuditLogEntry":
        return cls(kind="info", message=message)

    @classmethod
    def warning(cls, message: str) -> "AuditLogEntry":
        return cls(kind="warning", message=message)


class PartTimeWork(BaseModel):
    """Resolved part-time work rules for one student origin."""

    model_config = ConfigDict(frozen=True)

    can_work: bool = Field(..., description="Whether the student may work")
    regulations: str = Field(..., description="Applicable regulations")
    min_wage: float = Field(..., ge=0, description="Hourly minimum wage (EUR)")
    avg_student_wage: float = Field(
        ..., ge=0, description="Typical hourly student wage (EUR)"
    )
    legal_max_hours: int = Field(..., ge=0, description="Weekly term-time cap")


class CostRecord(BaseModel):
    """Consistent cost data for one destination and student origin."""

    model_config = ConfigDict(frozen=True)

    country_name: str = Field(..., description="Requested country name")
    course_level: str = Field(..., description="Requested course level")
    duration_years: float = Field(..., description="Requested duration in years")
    student_origin: str = Field(..., description="Requested student origin")

    tuition_yearly: float = Field(..., ge=0, description="Tuition for this origin")
    tuition_details: str = Field(default="", description="Tuition notes")
    one_time_costs: OneTimeCosts = Field(..., description="Resolved one-time costs")
    recurring_costs: RecurringCosts = Field(..., description="Monthly costs")
    part_time_work: PartTimeWork = Field(..., description="Resolved work rules")

    highlights: List[str] = Field(default_factory=list, description="Selling points")
    description: str = Field(default="", description="Short description")
    housing_range: str = Field(default="", description="Typical rent range")

    official_data: Optional[OfficialCountryData] = Field(
        default=None, description="Official data, when published"
    )
    audit_log: List[AuditLogEntry] = Field(
        default_factory=list, description="Ordered explanation of applied rules"
    )
    exchange_rates: Dict[str, float] = Field(
        default_factory=dict, description="Rates against the base currency"
    )

    @property
    def has_warnings(self) -> bool:
        return any(entry.kind == "warning" for entry in self.audit_log)

    def audit_entries(self, kind: AuditKind) -> List[AuditLogEntry]:
        """Get audit entries of one kind, in log order."""
        return [entry for entry in self.audit_log if entry.kind == kind]
