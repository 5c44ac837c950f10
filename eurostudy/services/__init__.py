"""Services coordinating the estimation engine."""

from .estimate_service import Estimate, EstimateService

__all__ = ["Estimate", "EstimateService"]
