"""
Quota module.

Gates capabilities by plan tier and counts free-tier usage.

Public API:
- IQuotaService: Interface for the gate
- QuotaService: Identity-metadata backed implementation
- Capability, QuotaDecision, QuotaStatus: Models
- QuotaExceededError, PremiumRequiredError: Denials
"""

from .interfaces import IQuotaService
from .models import (
    Capability,
    DenialReason,
    METERED_CAPABILITIES,
    QuotaDecision,
    QuotaStatus,
)
from .exceptions import QuotaError, QuotaExceededError, PremiumRequiredError
from .service import QuotaService

__all__ = [
    "IQuotaService",
    "QuotaService",
    "Capability",
    "DenialReason",
    "METERED_CAPABILITIES",
    "QuotaDecision",
    "QuotaStatus",
    "QuotaError",
    "QuotaExceededError",
    "PremiumRequiredError",
]
