"""
Style Insights

Human-facing commentary derived from a fingerprint: recommendations,
a one-line summary, key insights and a short persona characterization.
Also basic statistics about the raw input.
"""

from dataclasses import dataclass, asdict

from kalam_style.models.fingerprint import LinguisticFingerprint

from .metrics import split_paragraphs, split_sentences


WELL_BALANCED = "Writing style appears well-balanced"


@dataclass
class TextStatistics:
    """Size of the analyzed input."""
    text_length: int
    word_count: int
    sentence_count: int
    paragraph_count: int

    def to_dict(self) -> dict:
        return asdict(self)


def describe_text(text: str) -> TextStatistics:
    return TextStatistics(
        text_length=len(text),
        word_count=len(text.split()),
        sentence_count=len(split_sentences(text)),
        paragraph_count=len(split_paragraphs(text)),
    )


def generate_recommendations(fingerprint: LinguisticFingerprint) -> list[str]:
    """Suggestions for the author. Never empty."""
    fp = fingerprint
    recommendations = []

    if fp.vocabulary_richness == "simple":
        recommendations.append(
            "Consider incorporating more sophisticated vocabulary to enhance expressiveness"
        )

    if fp.avg_sentence_length > 30:
        recommendations.append("Some sentences are quite long - consider breaking them down for clarity")
    elif fp.avg_sentence_length < 10:
        recommendations.append("Sentences are quite short - try varying length for better flow")

    if fp.formality_level == "informal" and fp.vocabulary_richness == "academic":
        recommendations.append("There's a mismatch between informal tone and academic vocabulary")

    if not fp.contractions_usage and fp.formality_level == "informal":
        recommendations.append("Consider using contractions to match the informal tone")

    if "Heavy use of commas" in fp.punctuation_habits:
        recommendations.append("Review comma usage - some sentences might be overly complex")

    if fp.readability_score < 30:
        recommendations.append(
            "Text complexity is very high - consider simplifying for broader accessibility"
        )

    return recommendations or [WELL_BALANCED]


def generate_style_summary(fingerprint: LinguisticFingerprint) -> str:
    fp = fingerprint
    characteristics = [
        f"{fp.vocabulary_richness} vocabulary",
        f"{fp.formality_level} tone",
        f"{fp.sentence_variety} sentence variety",
        f"{fp.information_pacing} information pacing",
    ]
    if fp.contractions_usage:
        characteristics.append("uses contractions")
    if fp.rhetorical_devices:
        characteristics.append(f"employs {' and '.join(fp.rhetorical_devices[:2])}")

    return (
        f"This author demonstrates {', '.join(characteristics)} "
        f"with {fp.tone} mood and {fp.logical_flow} reasoning patterns."
    )


def generate_key_insights(fingerprint: LinguisticFingerprint) -> list[str]:
    fp = fingerprint
    insights = []

    if fp.vocabulary_richness == "academic" and len(fp.domain_jargon) > 5:
        insights.append(
            f"Highly specialized vocabulary with {len(fp.domain_jargon)} domain-specific terms"
        )
    if fp.complexity_distribution.complex > 0.4:
        insights.append("Favors complex sentence structures with multiple clauses")
    if len(fp.rhetorical_devices) > 2:
        insights.append(f"Employs varied rhetorical devices: {', '.join(fp.rhetorical_devices)}")
    if fp.contractions_usage and fp.formality_level != "academic":
        insights.append("Uses contractions for a more conversational, approachable tone")
    if fp.filler_phrases:
        quoted = '", "'.join(fp.filler_phrases)
        insights.append(f'Has characteristic filler phrases: "{quoted}"')

    return insights


def generate_persona_characterization(fingerprint: LinguisticFingerprint) -> str:
    """One sentence describing the writer behind the fingerprint."""
    fp = fingerprint
    traits = []

    if fp.vocabulary_richness == "academic":
        traits.append("intellectually rigorous")
    elif fp.vocabulary_richness == "complex":
        traits.append("articulate and well-educated")

    if fp.information_pacing == "dense":
        traits.append("information-dense communicator")
    elif fp.information_pacing == "deliberate":
        traits.append("methodical and deliberate")

    if fp.tone == "optimistic":
        traits.append("positive and forward-looking")
    elif fp.tone == "critical":
        traits.append("analytical and discerning")

    if fp.logical_flow == "deductive":
        traits.append("systematic thinker who builds arguments logically")
    elif fp.logical_flow == "inductive":
        traits.append("evidence-based reasoner who builds from specifics")

    if not traits:
        return "This author demonstrates a balanced and adaptable writing style."

    article = "an" if traits[0][0] in "aeiou" else "a"
    return f"This author appears to be {article} {', '.join(traits)} writer."
