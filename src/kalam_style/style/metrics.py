"""
Text Metrics

Raw statistical counts extracted once per text. Every feature analyzer
reads from the same TextMetrics instead of re-tokenizing.
"""

from collections import Counter
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping
import re
import statistics

from .lexicons import (
    ACADEMIC_KEYWORDS,
    CONTRACTIONS,
    COORDINATING_CONJUNCTIONS,
    SUBORDINATING_CONJUNCTIONS,
)


SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
PARAGRAPH_BOUNDARY = re.compile(r"\n\s*\n")
NON_WORD = re.compile(r"\W+")

# Auxiliary verb followed by an -ed participle. Misses irregular participles
# ("was taken") and catches adjectives ("is tired").
PASSIVE_VOICE = re.compile(r"\b(was|were|is|are|been|being)\s+\w+ed\b", re.IGNORECASE)

PUNCTUATION_MARKS = '.,;:!?()"-'


@lru_cache(maxsize=512)
def _phrase_regex(phrase: str) -> re.Pattern:
    return re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE)


@lru_cache(maxsize=64)
def _alternation_regex(phrases: tuple[str, ...]) -> re.Pattern:
    body = "|".join(re.escape(p) for p in phrases)
    return re.compile(rf"\b(?:{body})\b", re.IGNORECASE)


def count_phrase(text: str, phrase: str) -> int:
    """Count whole-word occurrences of a word or phrase (case-insensitive)."""
    return len(_phrase_regex(phrase).findall(text))


def count_phrases(text: str, phrases: Iterable[str]) -> int:
    """Sum of whole-word occurrences of each phrase."""
    return sum(count_phrase(text, p) for p in phrases)


def contains_any(text: str, phrases: Iterable[str]) -> bool:
    """True if any phrase occurs as a whole word."""
    return bool(_alternation_regex(tuple(phrases)).search(text))


def count_substrings(text: str, terms: Iterable[str]) -> int:
    """Case-insensitive containment count, matching inside longer words too."""
    lowered = text.lower()
    return sum(lowered.count(term.lower()) for term in terms)


def normalize_apostrophes(text: str) -> str:
    return text.replace("’", "'").replace("‘", "'")


@dataclass(frozen=True)
class TextMetrics:
    """Statistics for one text. Built by compute_metrics, never mutated."""
    total_words: int
    unique_words: int
    words: tuple[str, ...]  # lower-cased tokens in text order

    sentences: tuple[str, ...]
    paragraphs: tuple[str, ...]
    sentence_lengths: tuple[int, ...]  # words per sentence

    avg_words_per_sentence: float
    avg_word_length: float
    sentence_length_variation: float  # population std dev of sentence_lengths

    complex_sentences: int
    academic_term_count: int
    passive_voice_count: int
    contractions_count: int

    punctuation_frequency: Mapping[str, int]
    clause_patterns: frozenset[str]

    @property
    def lexical_diversity(self) -> float:
        return self.unique_words / self.total_words if self.total_words > 0 else 0.0

    @property
    def academic_ratio(self) -> float:
        return self.academic_term_count / self.total_words if self.total_words > 0 else 0.0


def split_sentences(text: str) -> list[str]:
    """Split on runs of terminal punctuation, dropping empty fragments."""
    return [s.strip() for s in SENTENCE_BOUNDARY.split(text) if s.strip()]


def split_paragraphs(text: str) -> list[str]:
    """Split on blank lines, dropping empty fragments."""
    return [p.strip() for p in PARAGRAPH_BOUNDARY.split(text) if p.strip()]


def tokenize(text: str) -> list[str]:
    """Lower-cased alphanumeric tokens."""
    return [w for w in NON_WORD.split(text.lower()) if w]


def compute_metrics(text: str) -> TextMetrics:
    """
    Calculate the raw metrics for a text.

    Total for any input: text without words yields zero counts rather
    than raising, leaving the empty-input decision to the caller.

    Args:
        text: Raw prose

    Returns:
        TextMetrics with all counts populated
    """
    sentences = split_sentences(text)
    paragraphs = split_paragraphs(text)
    words = tokenize(text)

    total_words = len(words)
    sentence_lengths = [len(s.split()) for s in sentences]

    avg_words_per_sentence = total_words / len(sentences) if sentences else 0.0
    avg_word_length = sum(len(w) for w in words) / total_words if total_words > 0 else 0.0
    variation = statistics.pstdev(sentence_lengths) if len(sentence_lengths) > 1 else 0.0

    punctuation_frequency = Counter(ch for ch in text if ch in PUNCTUATION_MARKS)

    return TextMetrics(
        total_words=total_words,
        unique_words=len(set(words)),
        words=tuple(words),
        sentences=tuple(sentences),
        paragraphs=tuple(paragraphs),
        sentence_lengths=tuple(sentence_lengths),
        avg_words_per_sentence=avg_words_per_sentence,
        avg_word_length=avg_word_length,
        sentence_length_variation=float(variation),
        complex_sentences=sum(1 for s in sentences if _is_complex(s)),
        academic_term_count=count_substrings(text, ACADEMIC_KEYWORDS),
        passive_voice_count=len(PASSIVE_VOICE.findall(text)),
        contractions_count=count_substrings(normalize_apostrophes(text), CONTRACTIONS),
        punctuation_frequency=MappingProxyType(dict(punctuation_frequency)),
        clause_patterns=_extract_clause_patterns(sentences),
    )


def has_subordinating(sentence: str) -> bool:
    return contains_any(sentence, SUBORDINATING_CONJUNCTIONS)


def has_coordinating(sentence: str) -> bool:
    return contains_any(sentence, COORDINATING_CONJUNCTIONS)


def _is_complex(sentence: str) -> bool:
    return has_subordinating(sentence) or sentence.count(",") > 2


def _extract_clause_patterns(sentences: list[str]) -> frozenset[str]:
    patterns = set()
    for sentence in sentences:
        if has_subordinating(sentence):
            patterns.add("subordinate clause")
        if sentence.count(",") >= 2:
            patterns.add("embedded clause")
        if has_coordinating(sentence):
            patterns.add("coordinate clause")
    return frozenset(patterns)
