"""
Feature Analyzers

Each analyzer derives one fingerprint field from the raw text and its
precomputed TextMetrics. Analyzers are pure and never consult one
another, so FEATURE_ANALYZERS can be evaluated in any order.

All heuristics are keyword and regex rules. They are approximate
signals, not a grammatical parse.
"""

from collections import Counter
from typing import Callable, Iterable
import re

from kalam_style.models.fingerprint import ComplexityDistribution

from .lexicons import (
    ABSTRACT_WORDS,
    CASUAL_WORDS,
    CONCERN_WORDS,
    CONCRETE_WORDS,
    CONFUSABLE_PAIRS,
    DEDUCTIVE_MARKERS,
    FILLER_PHRASES,
    FORMAL_WORDS,
    INDUCTIVE_MARKERS,
    INTENSIFIERS,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    SPELLING_VARIANTS,
    TRANSITION_WORDS,
)
from .metrics import (
    TextMetrics,
    contains_any,
    count_phrase,
    count_phrases,
    has_coordinating,
    has_subordinating,
)


MAX_JARGON = 10
MAX_FAVORITE_WORDS = 8
MAX_SENTENCE_OPENERS = 5
MAX_TRANSITIONS = 8
MAX_FILLERS = 8
MAX_KEYWORDS = 10

ASSUMED_SYLLABLES_PER_WORD = 1.5

PUNCTUATION_NAMES = {
    ".": "periods",
    ",": "commas",
    ";": "semicolons",
    ":": "colons",
    "!": "exclamation marks",
    "?": "question marks",
    "(": "parentheses",
    ")": "parentheses",
    '"': "quotation marks",
    "-": "dashes",
}

JARGON_TOKEN = re.compile(r"[A-Za-z][A-Za-z0-9]*(?:-[A-Za-z0-9]+)*")
JARGON_SUFFIXES = ("tion", "ment", "ology", "ism", "ity")
OPENER_WORD = re.compile(r"[A-Za-z0-9']+")
REPEATED_WORD = re.compile(r"\b(\w+)\s+\1\b", re.IGNORECASE)
ALLITERATION = re.compile(r"\b([a-z])[a-z]*\s+\1[a-z]*\s+\1[a-z]*\b", re.IGNORECASE)


def _ranked(counts: Counter, limit: int, min_count: int = 1) -> tuple[str, ...]:
    """Keys by descending count; ties keep first-seen order."""
    ranked = sorted(
        (item for item in counts.items() if item[1] >= min_count),
        key=lambda item: -item[1],
    )
    return tuple(key for key, _ in ranked[:limit])


def _unique(labels: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(labels))


# ============================================================================
# Lexical
# ============================================================================

def analyze_vocabulary_richness(text: str, metrics: TextMetrics) -> str:
    diversity = metrics.lexical_diversity

    if metrics.academic_ratio > 0.05:
        return "academic"
    if metrics.avg_word_length > 6 and diversity > 0.7:
        return "technical"
    if diversity > 0.6:
        return "complex"
    if diversity > 0.4:
        return "moderate"
    return "simple"


def analyze_domain_jargon(text: str, metrics: TextMetrics) -> tuple[str, ...]:
    """Acronyms, hyphenated compounds and long nominalisations."""
    everyday = set(CASUAL_WORDS) | set(FORMAL_WORDS)
    counts: Counter = Counter()

    for token in JARGON_TOKEN.findall(text):
        if len(token) >= 2 and token.isupper() and token.isalpha():
            counts[token] += 1
            continue

        word = token.lower()
        if len(word) <= 6 or word in everyday:
            continue
        if "-" in word or word.endswith(JARGON_SUFFIXES):
            counts[word] += 1

    return _ranked(counts, MAX_JARGON)


def analyze_favorite_words(text: str, metrics: TextMetrics) -> tuple[str, ...]:
    """Words longer than three letters used more than twice."""
    counts = Counter(w for w in metrics.words if len(w) > 3)
    return _ranked(counts, MAX_FAVORITE_WORDS, min_count=3)


def analyze_diction_level(text: str, metrics: TextMetrics) -> str:
    abstract = count_phrases(text, ABSTRACT_WORDS)
    concrete = count_phrases(text, CONCRETE_WORDS)

    if abstract > concrete * 1.5:
        return "abstract"
    if concrete > abstract * 1.5:
        return "concrete"
    return "mixed"


def analyze_formality_level(text: str, metrics: TextMetrics) -> str:
    formal = count_phrases(text, FORMAL_WORDS)
    casual = count_phrases(text, CASUAL_WORDS)

    if metrics.academic_ratio > 0.03:
        return "academic"
    if formal > casual * 2:
        return "formal"
    if casual > formal * 2:
        return "informal"
    return "semi-formal"


def analyze_contractions_usage(text: str, metrics: TextMetrics) -> bool:
    return metrics.contractions_count > 0


# ============================================================================
# Syntactic
# ============================================================================

def analyze_avg_sentence_length(text: str, metrics: TextMetrics) -> float:
    return metrics.avg_words_per_sentence


def analyze_sentence_variety(text: str, metrics: TextMetrics) -> str:
    if metrics.sentence_length_variation < 3:
        return "uniform"
    if metrics.sentence_length_variation < 8:
        return "moderate"
    return "highly-varied"


def classify_sentence(sentence: str) -> str:
    """Structural class of one sentence from conjunctions and commas."""
    subordinating = has_subordinating(sentence)
    coordinating = has_coordinating(sentence)
    commas = sentence.count(",")

    if coordinating and subordinating:
        return "compound_complex"
    if subordinating or commas > 2:
        return "complex"
    if coordinating or commas > 0:
        return "compound"
    return "simple"


def analyze_complexity_distribution(text: str, metrics: TextMetrics) -> ComplexityDistribution:
    if not metrics.sentences:
        return ComplexityDistribution()

    counts = Counter(classify_sentence(s) for s in metrics.sentences)
    total = len(metrics.sentences)
    return ComplexityDistribution(
        simple=counts["simple"] / total,
        compound=counts["compound"] / total,
        complex=counts["complex"] / total,
        compound_complex=counts["compound_complex"] / total,
    )


def analyze_clause_usage(text: str, metrics: TextMetrics) -> tuple[str, ...]:
    clauses = []
    if contains_any(text, ["which", "that"]):
        clauses.append("Frequent relative clauses")
    if contains_any(text, ["because", "since"]):
        clauses.append("Causal subordinate clauses")
    if contains_any(text, ["although", "even though", "while"]):
        clauses.append("Concessive clauses")
    if contains_any(text, ["if", "unless", "provided that"]):
        clauses.append("Conditional clauses")
    if contains_any(text, ["when", "before", "after"]):
        clauses.append("Temporal clauses")
    return tuple(clauses)


def analyze_sentence_openers(text: str, metrics: TextMetrics) -> tuple[str, ...]:
    """First words that open more than one sentence."""
    openers: Counter = Counter()
    for sentence in metrics.sentences:
        match = OPENER_WORD.search(sentence)
        if match:
            openers[match.group(0).lower()] += 1
    return _ranked(openers, MAX_SENTENCE_OPENERS, min_count=2)


# ============================================================================
# Rhetorical
# ============================================================================

def analyze_tone(text: str, metrics: TextMetrics) -> str:
    positive = count_phrases(text, POSITIVE_WORDS)
    negative = count_phrases(text, NEGATIVE_WORDS)

    if positive > negative:
        return "optimistic"
    if negative > positive:
        return "critical"
    return "neutral"


def analyze_mood(text: str, metrics: TextMetrics) -> str:
    if "!" in text:
        return "enthusiastic"
    if "?" in text:
        return "inquisitive"
    if contains_any(text, CONCERN_WORDS):
        return "concerned"
    return "measured"


def analyze_logical_flow(text: str, metrics: TextMetrics) -> str:
    deductive = count_phrases(text, DEDUCTIVE_MARKERS)
    inductive = count_phrases(text, INDUCTIVE_MARKERS)

    if deductive > inductive * 1.5:
        return "deductive"
    if inductive > deductive * 1.5:
        return "inductive"
    return "mixed"


def analyze_transition_style(text: str, metrics: TextMetrics) -> tuple[str, ...]:
    found = [t for t in TRANSITION_WORDS if count_phrase(text, t) > 0]
    return tuple(found[:MAX_TRANSITIONS])


def analyze_rhetorical_devices(text: str, metrics: TextMetrics) -> tuple[str, ...]:
    devices = []
    if "?" in text:
        devices.append("rhetorical questions")
    if contains_any(text, ["like", "similar to"]) or re.search(r"\bas\s+\w+\s+as\b", text, re.IGNORECASE):
        devices.append("similes")
    if REPEATED_WORD.search(text):
        devices.append("repetition")
    if ":" in text:
        devices.append("explanatory colons")
    if ALLITERATION.search(text):
        devices.append("alliteration")
    return tuple(devices)


def analyze_information_pacing(text: str, metrics: TextMetrics) -> str:
    if metrics.total_words == 0:
        return "moderate"

    density = (metrics.academic_term_count + metrics.unique_words) / metrics.total_words
    if density > 0.7:
        return "dense"
    if density > 0.5:
        return "moderate"
    return "deliberate"


# ============================================================================
# Idiosyncratic
# ============================================================================

def analyze_punctuation_habits(text: str, metrics: TextMetrics) -> tuple[str, ...]:
    freq = metrics.punctuation_frequency
    total = sum(freq.values())
    if total == 0:
        return ()

    habits = []
    for mark, count in freq.items():
        if count / total > 0.3:
            habits.append(f"Heavy use of {PUNCTUATION_NAMES[mark]}")

    if freq.get(";", 0) > 0:
        habits.append("Semicolon preference")
    if freq.get("!", 0) > freq.get(".", 0) * 0.1:
        habits.append("Exclamatory style")
    if freq.get("?", 0) > 0:
        habits.append("Questioning approach")
    if freq.get('"', 0) > 0:
        habits.append("Quotation usage")

    return _unique(habits)


def analyze_formatting_preferences(text: str, metrics: TextMetrics) -> tuple[str, ...]:
    preferences = []
    if re.search(r"\*[^*\s][^*]*\*", text):
        preferences.append("Emphasis with asterisks")
    if re.search(r"^\s*[-*•]\s", text, re.MULTILINE):
        preferences.append("Bullet point lists")
    if re.search(r"^\s*\d+[.)]\s", text, re.MULTILINE):
        preferences.append("Numbered lists")
    if len(metrics.paragraphs) > 1:
        preferences.append("Frequent paragraph breaks")
    if re.search(r"\([^()]*\)", text):
        preferences.append("Parenthetical asides")
    if re.search(r"\b[A-Z]{4,}\b", text):
        preferences.append("Capitalization for emphasis")
    return tuple(preferences)


def analyze_filler_phrases(text: str, metrics: TextMetrics) -> tuple[str, ...]:
    counts = Counter({f: count_phrase(text, f) for f in FILLER_PHRASES})
    return _ranked(counts, MAX_FILLERS)


def analyze_writing_tics(text: str, metrics: TextMetrics) -> tuple[str, ...]:
    tics = []
    if count_phrase(text, "actually") > 2:
        tics.append('Frequent use of "actually"')
    if count_phrase(text, "obviously") > 1:
        tics.append('Uses "obviously" for emphasis')
    if count_phrase(text, "clearly") > 1:
        tics.append('Frequent "clearly" for emphasis')
    if count_phrases(text, INTENSIFIERS) > 2:
        tics.append("Leans on intensifying adverbs")
    if "..." in text or "…" in text:
        tics.append("Trailing ellipses")
    if "--" in text or "—" in text:
        tics.append("Dash interruptions")
    if re.search(r"\b\w+/\w+\b", text):
        tics.append("Slash constructions")
    return tuple(tics)


# ============================================================================
# Anomalies
# ============================================================================

def analyze_common_errors(text: str, metrics: TextMetrics) -> tuple[str, ...]:
    normalized = text.replace("’", "'")
    errors = [
        label
        for first, second, label in CONFUSABLE_PAIRS
        if count_phrase(normalized, first) > 0 and count_phrase(normalized, second) > 0
    ]
    if re.search(r"\S  +\S", text):
        errors.append("Double spacing")
    return tuple(errors)


def analyze_awkward_phrasing(text: str, metrics: TextMetrics) -> tuple[str, ...]:
    awkward = []
    for sentence, length in zip(metrics.sentences, metrics.sentence_lengths):
        if sentence.count(",") > 3:
            awkward.append("Overly complex comma usage")
        if length > 40:
            awkward.append("Extremely long sentences")
        if re.search(r"\b(of|in|on|to)\s+\1\b", sentence, re.IGNORECASE):
            awkward.append("Repeated prepositions")
        if re.search(r"\b(the|a|an)\s+\1\b", sentence, re.IGNORECASE):
            awkward.append("Repeated articles")
    return _unique(awkward)


def analyze_consistent_mistakes(text: str, metrics: TextMetrics) -> tuple[str, ...]:
    mistakes = []

    for us, uk in SPELLING_VARIANTS:
        if contains_any(text, [us]) and contains_any(text, [uk]):
            mistakes.append("Mixed spelling conventions")
            break

    lowercase_starts = 0
    for sentence in metrics.sentences:
        first_letter = next((ch for ch in sentence if ch.isalpha()), "")
        if first_letter.islower():
            lowercase_starts += 1
    if metrics.sentences and lowercase_starts > len(metrics.sentences) * 0.1:
        mistakes.append("Inconsistent capitalization")

    return tuple(mistakes)


# ============================================================================
# Legacy scalars
# ============================================================================

def analyze_lexical_diversity(text: str, metrics: TextMetrics) -> float:
    return metrics.lexical_diversity


def analyze_sentence_complexity(text: str, metrics: TextMetrics) -> str:
    if metrics.avg_words_per_sentence < 15:
        return "simple"
    if metrics.avg_words_per_sentence < 25:
        return "moderate"
    return "complex"


def analyze_vocabulary_level(text: str, metrics: TextMetrics) -> str:
    if metrics.academic_ratio > 0.05:
        return "Academic"
    if metrics.academic_ratio > 0.02:
        return "Professional"
    return "General"


def analyze_writing_patterns(text: str, metrics: TextMetrics) -> tuple[str, ...]:
    patterns = []
    sentence_count = len(metrics.sentences)

    if metrics.passive_voice_count > sentence_count * 0.2:
        patterns.append("Frequent use of passive voice")
    if metrics.avg_words_per_sentence > 20:
        patterns.append("Complex, multi-clause sentences")
    if contains_any(text, ["therefore", "consequently"]):
        patterns.append("Logical progression with transitional phrases")
    if contains_any(text, ["empirical", "data", "study", "evidence"]):
        patterns.append("Evidence-based argumentation")
    if metrics.punctuation_frequency.get(",", 0) > sentence_count * 2:
        patterns.append("Heavy use of subordinate clauses")

    return tuple(patterns) or ("Direct and straightforward expression",)


def analyze_structural_preferences(text: str, metrics: TextMetrics) -> tuple[str, ...]:
    preferences = []
    if contains_any(text, ["first", "second", "finally"]):
        preferences.append("Numbered or sequential organization")
    if contains_any(text, ["in conclusion", "to summarize", "in summary"]):
        preferences.append("Clear conclusions and summaries")
    if contains_any(text, ["for example", "such as", "for instance"]):
        preferences.append("Use of examples and illustrations")
    return tuple(preferences) or ("Implicit organizational structure",)


def analyze_keywords(text: str, metrics: TextMetrics) -> tuple[str, ...]:
    transitions = set(TRANSITION_WORDS)
    counts = Counter(w for w in metrics.words if len(w) > 4 and w not in transitions)
    return _ranked(counts, MAX_KEYWORDS)


def analyze_readability_score(text: str, metrics: TextMetrics) -> float:
    """Flesch reading ease with a fixed syllables-per-word estimate."""
    score = 206.835 - 1.015 * metrics.avg_words_per_sentence - 84.6 * ASSUMED_SYLLABLES_PER_WORD
    return float(max(0, min(100, round(score))))


Analyzer = Callable[[str, TextMetrics], object]

# Fingerprint field name -> analyzer
FEATURE_ANALYZERS: dict[str, Analyzer] = {
    # Lexical
    "vocabulary_richness": analyze_vocabulary_richness,
    "domain_jargon": analyze_domain_jargon,
    "favorite_words": analyze_favorite_words,
    "diction_level": analyze_diction_level,
    "formality_level": analyze_formality_level,
    "contractions_usage": analyze_contractions_usage,
    # Syntactic
    "avg_sentence_length": analyze_avg_sentence_length,
    "sentence_variety": analyze_sentence_variety,
    "complexity_distribution": analyze_complexity_distribution,
    "clause_usage": analyze_clause_usage,
    "sentence_openers": analyze_sentence_openers,
    # Rhetorical
    "tone": analyze_tone,
    "mood": analyze_mood,
    "logical_flow": analyze_logical_flow,
    "transition_style": analyze_transition_style,
    "rhetorical_devices": analyze_rhetorical_devices,
    "information_pacing": analyze_information_pacing,
    # Idiosyncratic
    "punctuation_habits": analyze_punctuation_habits,
    "formatting_preferences": analyze_formatting_preferences,
    "filler_phrases": analyze_filler_phrases,
    "writing_tics": analyze_writing_tics,
    # Anomalies
    "common_errors": analyze_common_errors,
    "awkward_phrasing": analyze_awkward_phrasing,
    "consistent_mistakes": analyze_consistent_mistakes,
    # Legacy
    "lexical_diversity": analyze_lexical_diversity,
    "sentence_complexity": analyze_sentence_complexity,
    "vocabulary_level": analyze_vocabulary_level,
    "writing_patterns": analyze_writing_patterns,
    "structural_preferences": analyze_structural_preferences,
    "keywords": analyze_keywords,
    "readability_score": analyze_readability_score,
}
