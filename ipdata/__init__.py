"""Data model and response normalization for the ipdata.co lookup API."""

from .config import VERSION as __version__
from .models import (
    AutonomousSystemInfo,
    BulkLookupResult,
    BulkOutcome,
    CurrencyInfo,
    LookupResult,
    SpokenLanguage,
    ThreatInfo,
    TimeZoneInfo,
)
from .normalize import bulk_to_lookup, normalize_bulk_response

__all__ = [
    "AutonomousSystemInfo",
    "BulkLookupResult",
    "BulkOutcome",
    "CurrencyInfo",
    "LookupResult",
    "SpokenLanguage",
    "ThreatInfo",
    "TimeZoneInfo",
    "__version__",
    "bulk_to_lookup",
    "normalize_bulk_response",
]
