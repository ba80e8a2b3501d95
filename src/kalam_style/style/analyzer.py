"""
Style Analyzer

Main entry point for style analysis. create_linguistic_fingerprint is
the pure engine; StyleAnalyzer wraps it with input validation, file
loading, prompt rendering and persistence for callers such as the CLI.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional
import logging

from kalam_style.config import get_settings
from kalam_style.errors import InputTooShortError, InsufficientInputError
from kalam_style.ingest import load_text
from kalam_style.models.fingerprint import LinguisticFingerprint

from .analyzers import FEATURE_ANALYZERS
from .insights import (
    TextStatistics,
    describe_text,
    generate_key_insights,
    generate_persona_characterization,
    generate_recommendations,
    generate_style_summary,
)
from .metrics import compute_metrics
from .prompts import generate_humanized_persona_prompt, generate_persona_prompt


logger = logging.getLogger(__name__)


def create_linguistic_fingerprint(text: str) -> LinguisticFingerprint:
    """
    Build the linguistic fingerprint of a text.

    Metrics are computed once and shared by every feature analyzer.
    The result depends only on the text.

    Args:
        text: Raw prose

    Returns:
        LinguisticFingerprint

    Raises:
        InsufficientInputError: If the text contains no words
    """
    metrics = compute_metrics(text)
    if metrics.total_words == 0:
        raise InsufficientInputError("Text contains no words to analyze")

    features = {name: analyze(text, metrics) for name, analyze in FEATURE_ANALYZERS.items()}
    fingerprint = LinguisticFingerprint(**features)

    logger.debug(
        "Fingerprinted %d words in %d sentences (%s, %s)",
        metrics.total_words,
        len(metrics.sentences),
        fingerprint.formality_level,
        fingerprint.sentence_variety,
    )
    return fingerprint


@dataclass
class StyleAnalysis:
    """Everything produced by one analysis run."""
    fingerprint: LinguisticFingerprint
    task: str
    persona_prompt: str
    humanized_prompt: str
    statistics: TextStatistics
    recommendations: list[str] = field(default_factory=list)
    style_summary: str = ""
    key_insights: list[str] = field(default_factory=list)
    persona_characterization: str = ""
    analyzed_at: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> dict:
        return {
            "linguistic_fingerprint": self.fingerprint.to_dict(),
            "task": self.task,
            "persona_prompt": self.persona_prompt,
            "humanized_prompt": self.humanized_prompt,
            "metadata": {
                **self.statistics.to_dict(),
                "analyzed_at": self.analyzed_at,
            },
            "recommendations": self.recommendations,
            "style_summary": self.style_summary,
            "key_insights": self.key_insights,
            "persona_characterization": self.persona_characterization,
        }


class StyleAnalyzer:
    """
    Validates input and runs the fingerprint engine.

    Usage:
        analyzer = StyleAnalyzer()
        analysis = analyzer.analyze_text(text, task="Write a product update")
        # or
        analysis = analyzer.analyze_file("path/to/essay.txt")
    """

    def __init__(
        self,
        min_text_length: Optional[int] = None,
        default_task: Optional[str] = None,
    ):
        """
        Initialize the style analyzer.

        Args:
            min_text_length: Shortest text accepted, in characters (defaults to settings)
            default_task: Task used for prompts when none is given (defaults to settings)
        """
        settings = get_settings()
        self.min_text_length = (
            settings.min_text_length if min_text_length is None else min_text_length
        )
        self.default_task = default_task or settings.default_task

    def validate(self, text: str) -> str:
        """Return the stripped text, or raise if it is too short to analyze."""
        stripped = text.strip()
        if len(stripped) < self.min_text_length:
            raise InputTooShortError(len(stripped), self.min_text_length)
        return stripped

    def fingerprint(self, text: str) -> LinguisticFingerprint:
        return create_linguistic_fingerprint(self.validate(text))

    def analyze_text(self, text: str, task: Optional[str] = None) -> StyleAnalysis:
        """
        Analyze a text and render prompts and commentary for it.

        Args:
            text: The text to analyze
            task: Task for the rendered prompts

        Returns:
            StyleAnalysis
        """
        task = task or self.default_task
        fingerprint = self.fingerprint(text)

        return StyleAnalysis(
            fingerprint=fingerprint,
            task=task,
            persona_prompt=generate_persona_prompt(fingerprint, task),
            humanized_prompt=generate_humanized_persona_prompt(fingerprint, task),
            statistics=describe_text(text),
            recommendations=generate_recommendations(fingerprint),
            style_summary=generate_style_summary(fingerprint),
            key_insights=generate_key_insights(fingerprint),
            persona_characterization=generate_persona_characterization(fingerprint),
        )

    def analyze_file(self, file_path: str | Path, task: Optional[str] = None) -> StyleAnalysis:
        """Load a .txt, .md or .epub file and analyze it."""
        path = Path(file_path)
        logger.info("Analyzing %s", path.name)
        return self.analyze_text(load_text(path), task)

    def save_fingerprint(
        self,
        fingerprint: LinguisticFingerprint,
        output_path: str | Path,
    ):
        """Save fingerprint to JSON file."""
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(fingerprint.to_json(), encoding="utf-8")

    def load_fingerprint(self, input_path: str | Path) -> LinguisticFingerprint:
        """Load fingerprint from JSON file."""
        return LinguisticFingerprint.from_json(Path(input_path).read_text(encoding="utf-8"))
