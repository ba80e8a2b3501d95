"""Data models for fingerprints and personas."""

from kalam_style.models.fingerprint import (
    FINGERPRINT_VERSION,
    ComplexityDistribution,
    LinguisticFingerprint,
)
from kalam_style.models.persona import PersonaRecord, PersonaStatus, PersonaSummary

__all__ = [
    "FINGERPRINT_VERSION",
    "ComplexityDistribution",
    "LinguisticFingerprint",
    "PersonaRecord",
    "PersonaStatus",
    "PersonaSummary",
]
