"""Kalam Style - rule-based linguistic fingerprinting and persona prompts."""

__version__ = "0.1.0"

from kalam_style.errors import InsufficientInputError
from kalam_style.models.fingerprint import LinguisticFingerprint
from kalam_style.style.analyzer import StyleAnalyzer, create_linguistic_fingerprint
from kalam_style.style.prompts import generate_humanized_persona_prompt, generate_persona_prompt

__all__ = [
    "__version__",
    "InsufficientInputError",
    "LinguisticFingerprint",
    "StyleAnalyzer",
    "create_linguistic_fingerprint",
    "generate_persona_prompt",
    "generate_humanized_persona_prompt",
]
