"""Linguistic fingerprint record."""

import json
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


VocabularyRichness = Literal["simple", "moderate", "complex", "academic", "technical"]
DictionLevel = Literal["concrete", "abstract", "mixed"]
FormalityLevel = Literal["informal", "semi-formal", "formal", "academic"]
SentenceVariety = Literal["uniform", "moderate", "highly-varied"]
LogicalFlow = Literal["deductive", "inductive", "mixed"]
InformationPacing = Literal["dense", "moderate", "deliberate"]
Tone = Literal["optimistic", "critical", "neutral"]
Mood = Literal["enthusiastic", "inquisitive", "concerned", "measured"]
SentenceComplexity = Literal["simple", "moderate", "complex"]
VocabularyLevel = Literal["Academic", "Professional", "General"]

FINGERPRINT_VERSION = 1


class ComplexityDistribution(BaseModel):
    """Share of sentences in each structural class. Sums to 1.0 when any sentence exists."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    simple: float = Field(default=0.0, ge=0.0, le=1.0)
    compound: float = Field(default=0.0, ge=0.0, le=1.0)
    complex: float = Field(default=0.0, ge=0.0, le=1.0)
    compound_complex: float = Field(default=0.0, ge=0.0, le=1.0)

    def total(self) -> float:
        return self.simple + self.compound + self.complex + self.compound_complex


class LinguisticFingerprint(BaseModel):
    """
    Multi-dimensional summary of one author's writing.

    Holds derived statistics and labels only; the source text is not
    retained. Instances are immutable.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: Literal[1] = FINGERPRINT_VERSION

    # === Lexical ===
    vocabulary_richness: VocabularyRichness
    domain_jargon: tuple[str, ...] = ()
    favorite_words: tuple[str, ...] = ()
    diction_level: DictionLevel
    formality_level: FormalityLevel
    contractions_usage: bool

    # === Syntactic ===
    avg_sentence_length: float = Field(ge=0.0)
    sentence_variety: SentenceVariety
    complexity_distribution: ComplexityDistribution
    clause_usage: tuple[str, ...] = ()
    sentence_openers: tuple[str, ...] = ()

    # === Rhetorical ===
    tone: Tone
    mood: Mood
    logical_flow: LogicalFlow
    transition_style: tuple[str, ...] = ()
    rhetorical_devices: tuple[str, ...] = ()
    information_pacing: InformationPacing

    # === Idiosyncratic ===
    punctuation_habits: tuple[str, ...] = ()
    formatting_preferences: tuple[str, ...] = ()
    filler_phrases: tuple[str, ...] = ()
    writing_tics: tuple[str, ...] = ()

    # === Anomalies ===
    common_errors: tuple[str, ...] = ()
    awkward_phrasing: tuple[str, ...] = ()
    consistent_mistakes: tuple[str, ...] = ()

    # === Legacy scalars kept for older consumers ===
    lexical_diversity: float = Field(ge=0.0, le=1.0)
    sentence_complexity: SentenceComplexity
    vocabulary_level: VocabularyLevel
    writing_patterns: tuple[str, ...] = ()
    structural_preferences: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
    readability_score: float = Field(ge=0.0, le=100.0)

    def to_dict(self) -> dict:
        """Convert to plain JSON-compatible data."""
        return self.model_dump(mode="json")

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, d: dict) -> "LinguisticFingerprint":
        return cls.model_validate(d)

    @classmethod
    def from_json(cls, json_str: str) -> "LinguisticFingerprint":
        return cls.model_validate_json(json_str)

    def summary(self) -> str:
        """Generate a human-readable summary of the fingerprint."""
        cd = self.complexity_distribution
        lines = [
            "=== Linguistic Fingerprint ===",
            "",
            "[Lexical]",
            f"   Vocabulary richness: {self.vocabulary_richness}",
            f"   Formality: {self.formality_level}",
            f"   Diction: {self.diction_level}",
            f"   Contractions: {'yes' if self.contractions_usage else 'no'}",
            f"   Lexical diversity: {self.lexical_diversity:.3f}",
            "",
            "[Syntactic]",
            f"   Avg sentence length: {self.avg_sentence_length:.1f} words",
            f"   Sentence variety: {self.sentence_variety}",
            f"   Structure: {cd.simple*100:.0f}% simple, {cd.compound*100:.0f}% compound, "
            f"{cd.complex*100:.0f}% complex, {cd.compound_complex*100:.0f}% compound-complex",
            "",
            "[Rhetorical]",
            f"   Tone / mood: {self.tone} / {self.mood}",
            f"   Logical flow: {self.logical_flow}",
            f"   Information pacing: {self.information_pacing}",
            "",
            "[Readability]",
            f"   Reading ease: {self.readability_score:.0f}",
            f"   Vocabulary level: {self.vocabulary_level}",
        ]

        listed = [
            ("Favorite words", self.favorite_words),
            ("Domain jargon", self.domain_jargon),
            ("Transitions", self.transition_style),
            ("Filler phrases", self.filler_phrases),
            ("Writing tics", self.writing_tics),
            ("Common errors", self.common_errors),
        ]
        extras = [f"   {label}: {', '.join(values)}" for label, values in listed if values]
        if extras:
            lines.extend(["", "[Signature Traits]", *extras])

        return "\n".join(lines)
