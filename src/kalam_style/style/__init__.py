"""
Style Analysis Module

Rule-based linguistic fingerprinting of prose, and rendering of
fingerprints into persona prompts for text-generation services.
"""

from .metrics import TextMetrics, compute_metrics
from .analyzers import FEATURE_ANALYZERS, classify_sentence
from .prompts import generate_humanized_persona_prompt, generate_persona_prompt
from .insights import (
    TextStatistics,
    describe_text,
    generate_key_insights,
    generate_persona_characterization,
    generate_recommendations,
    generate_style_summary,
)
from .analyzer import StyleAnalysis, StyleAnalyzer, create_linguistic_fingerprint

__all__ = [
    # Metrics
    "TextMetrics",
    "compute_metrics",
    # Analyzers
    "FEATURE_ANALYZERS",
    "classify_sentence",
    # Fingerprint
    "create_linguistic_fingerprint",
    # Prompts
    "generate_persona_prompt",
    "generate_humanized_persona_prompt",
    # Insights
    "TextStatistics",
    "describe_text",
    "generate_recommendations",
    "generate_style_summary",
    "generate_key_insights",
    "generate_persona_characterization",
    # Analyzer
    "StyleAnalysis",
    "StyleAnalyzer",
]
