"""Shared sample texts and fingerprint builders."""

import pytest

from kalam_style.models.fingerprint import ComplexityDistribution, LinguisticFingerprint


ACADEMIC_TEXT = """\
The empirical analysis demonstrates a significant effect on the outcome. Therefore, the \
framework must be evaluated with considerable care. Moreover, the methodology establishes \
a theoretical basis for further inquiry into the observed phenomenon. Consequently, we \
examine the hypothesis in detail across several independent samples.

Thus the results corroborate the prevailing paradigm. However, substantial questions \
remain regarding the generality of the conclusions. Furthermore, the observed variance \
must be examined in subsequent work. Therefore, the present study should be regarded as \
a preliminary contribution rather than a definitive account.

Nevertheless, the theoretical implications are considerable. The analysis of the data \
establishes that the effect persists under controlled conditions. Therefore, we postulate \
that the mechanism is general, and we evaluate this claim in the final section.
"""

CASUAL_TEXT = """\
Honestly, I don't really know what's gonna happen next. It's kind of weird stuff, you know? \
We're gonna get there though. I think it's pretty cool and I want to see more of it. Don't \
worry about the small things, they're gonna sort themselves out.
"""

# Five sentences of exactly ten words each
UNIFORM_TEXT = " ".join(["The cat sat on the warm mat by the door."] * 5)

SHORT_SENTENCE = "The dog ran very fast."
LONG_SENTENCE = "The " + " ".join(["river"] * 38) + " ended."
# Alternating five-word and forty-word sentences
VARIED_TEXT = " ".join([SHORT_SENTENCE, LONG_SENTENCE] * 3)


def make_fingerprint(**overrides) -> LinguisticFingerprint:
    """A plain fingerprint with empty lists and middle-of-the-road labels."""
    fields = dict(
        vocabulary_richness="moderate",
        diction_level="mixed",
        formality_level="semi-formal",
        contractions_usage=False,
        avg_sentence_length=15.0,
        sentence_variety="moderate",
        complexity_distribution=ComplexityDistribution(simple=1.0),
        tone="neutral",
        mood="measured",
        logical_flow="mixed",
        information_pacing="moderate",
        lexical_diversity=0.5,
        sentence_complexity="moderate",
        vocabulary_level="General",
        readability_score=60.0,
    )
    fields.update(overrides)
    return LinguisticFingerprint(**fields)


@pytest.fixture
def academic_text() -> str:
    return ACADEMIC_TEXT


@pytest.fixture
def casual_text() -> str:
    return CASUAL_TEXT


@pytest.fixture
def plain_fingerprint() -> LinguisticFingerprint:
    return make_fingerprint()


@pytest.fixture
def sample_file(tmp_path):
    """Academic sample written to a .txt file."""
    path = tmp_path / "sample.txt"
    path.write_text(ACADEMIC_TEXT, encoding="utf-8")
    return path
