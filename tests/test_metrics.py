"""Tests for raw text metrics."""

from kalam_style.style.metrics import (
    compute_metrics,
    count_phrase,
    count_substrings,
    split_paragraphs,
    split_sentences,
    tokenize,
)


class TestSplitting:
    """Test sentence, paragraph and word boundaries."""

    def test_sentences_split_on_terminal_punctuation(self):
        assert split_sentences("One thing. Two things! Three?") == ["One thing", "Two things", "Three"]

    def test_punctuation_runs_do_not_create_empty_sentences(self):
        assert split_sentences("Wait... What?!") == ["Wait", "What"]

    def test_paragraphs_split_on_blank_lines(self):
        text = "First.\n\n   \n\nSecond.\nStill second."
        assert split_paragraphs(text) == ["First.", "Second.\nStill second."]

    def test_words_are_lowercased_alphanumeric(self):
        assert tokenize("Hello, World! It's 2024.") == ["hello", "world", "it", "s", "2024"]


class TestPhraseCounting:
    """Test lexicon matching helpers."""

    def test_whole_word_matching(self):
        assert count_phrase("Thus, and thusly.", "thus") == 1

    def test_phrases_match_case_insensitively(self):
        assert count_phrase("For example, this. FOR EXAMPLE, that.", "for example") == 2

    def test_substring_counting_matches_inside_words(self):
        assert count_substrings("The analyses and the analysis", ["analys"]) == 2


class TestComputeMetrics:
    """Test the metrics record."""

    def test_empty_text_yields_zeroed_metrics(self):
        metrics = compute_metrics("")

        assert metrics.total_words == 0
        assert metrics.sentences == ()
        assert metrics.avg_words_per_sentence == 0.0
        assert metrics.lexical_diversity == 0.0
        assert metrics.academic_ratio == 0.0

    def test_word_counts(self):
        metrics = compute_metrics("The cat and the dog.")

        assert metrics.total_words == 5
        assert metrics.unique_words == 4
        assert metrics.lexical_diversity == 0.8

    def test_single_sentence_has_no_variation(self):
        metrics = compute_metrics("Only one sentence lives here.")
        assert metrics.sentence_length_variation == 0.0

    def test_sentence_length_variation_is_population_std_dev(self):
        metrics = compute_metrics("Go now. The quick brown fox jumps over the lazy dog every single day.")

        assert metrics.sentence_lengths == (2, 12)
        assert metrics.sentence_length_variation == 5.0
        assert metrics.avg_words_per_sentence == 7.0

    def test_passive_voice(self):
        metrics = compute_metrics("The report was completed by the team. We finished it.")
        assert metrics.passive_voice_count == 1

    def test_academic_terms(self):
        metrics = compute_metrics("However, the analysis is therefore sound.")
        assert metrics.academic_term_count == 3

    def test_contractions_including_curly_apostrophes(self):
        metrics = compute_metrics("Don't stop. It’s fine.")
        assert metrics.contractions_count == 2

    def test_punctuation_frequency(self):
        metrics = compute_metrics("Hi, there; ok!")
        assert dict(metrics.punctuation_frequency) == {",": 1, ";": 1, "!": 1}

    def test_complex_sentences(self):
        metrics = compute_metrics("I stayed because it rained. I left.")
        assert metrics.complex_sentences == 1

    def test_clause_patterns(self):
        assert compute_metrics("I ran and she walked.").clause_patterns == {"coordinate clause"}
        assert compute_metrics("It rained, she said, we left.").clause_patterns == {"embedded clause"}
        assert "subordinate clause" in compute_metrics("I left because it rained.").clause_patterns
