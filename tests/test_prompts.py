"""Tests for persona prompt rendering."""

import pytest

from kalam_style.models.fingerprint import ComplexityDistribution
from kalam_style.style import (
    create_linguistic_fingerprint,
    generate_humanized_persona_prompt,
    generate_persona_prompt,
)

from conftest import ACADEMIC_TEXT, CASUAL_TEXT, make_fingerprint


RENDERERS = [generate_persona_prompt, generate_humanized_persona_prompt]


class TestContracts:
    """Test guarantees shared by both templates."""

    @pytest.mark.parametrize("render", RENDERERS)
    def test_task_inserted_verbatim(self, render, plain_fingerprint):
        task = 'Write a {short} note about "budgets" & <deadlines>'
        prompt = render(plain_fingerprint, task)
        assert task in prompt
        assert len(prompt) > len(task)

    @pytest.mark.parametrize("render", RENDERERS)
    def test_empty_task_still_renders(self, render, plain_fingerprint):
        prompt = render(plain_fingerprint, "")
        assert prompt.strip()

    @pytest.mark.parametrize("render", RENDERERS)
    def test_deterministic(self, render):
        fp = create_linguistic_fingerprint(CASUAL_TEXT)
        assert render(fp, "Write a post") == render(fp, "Write a post")

    @pytest.mark.parametrize("render", RENDERERS)
    def test_empty_lists_leave_no_broken_sentences(self, render, plain_fingerprint):
        prompt = render(plain_fingerprint, "Write a post")
        assert '""' not in prompt
        assert ": ." not in prompt
        assert ", ." not in prompt

    def test_templates_differ(self, plain_fingerprint):
        assert generate_persona_prompt(plain_fingerprint, "x") != generate_humanized_persona_prompt(
            plain_fingerprint, "x"
        )


class TestStructuredPrompt:
    """Test the sectioned template."""

    def test_scalars_always_present(self, plain_fingerprint):
        prompt = generate_persona_prompt(plain_fingerprint, "Write a post")
        assert "- Vocabulary Richness: moderate" in prompt
        assert "- Formality: semi-formal" in prompt
        assert "- Uses Contractions: No" in prompt
        assert "- Average Sentence Length: 15.0 words" in prompt
        assert "- Tone: neutral" in prompt
        assert "- Logical Flow: mixed" in prompt
        assert "- Readability Score: 60/100" in prompt
        assert "100% simple, 0% compound, 0% complex, 0% compound-complex" in prompt

    def test_empty_lists_omitted(self, plain_fingerprint):
        prompt = generate_persona_prompt(plain_fingerprint, "Write a post")
        assert "Favorite Words" not in prompt
        assert "IDIOSYNCRATIC PATTERNS" not in prompt
        assert "NATURAL IMPERFECTIONS" not in prompt

    def test_populated_lists_surface(self):
        fp = make_fingerprint(
            favorite_words=("budget", "quarter"),
            filler_phrases=("basically",),
            common_errors=("Double spacing",),
        )
        prompt = generate_persona_prompt(fp, "Write a post")
        assert "- Favorite Words: budget, quarter" in prompt
        assert "- Filler Phrases: basically" in prompt
        assert "- Common Errors: Double spacing" in prompt

    def test_instructions(self, plain_fingerprint):
        prompt = generate_persona_prompt(plain_fingerprint, "Write a post")
        assert prompt.startswith("You are a Linguistic Persona Emulator.")
        assert "Do not mention that you are an AI" in prompt
        assert "TASK: Write a post" in prompt

    def test_real_fingerprint(self):
        fp = create_linguistic_fingerprint(ACADEMIC_TEXT)
        prompt = generate_persona_prompt(fp, "Summarize the findings")
        assert "- Formality: academic" in prompt
        assert "Transition Style: " in prompt


class TestHumanizedPrompt:
    """Test the conversational template."""

    def test_opening_and_closing(self, plain_fingerprint):
        prompt = generate_humanized_persona_prompt(plain_fingerprint, "Write a post")
        assert prompt.startswith(
            "Hey there! You're writing as someone who has a neutral tone with a measured mood."
        )
        assert "\n\nNow, here's what you need to do: Write a post\n\n" in prompt
        assert prompt.endswith("Ready? Go for it!")
        assert "Never mention AI" in prompt

    @pytest.mark.parametrize("level,phrase", [
        ("informal", "They're super casual and relaxed in their writing."),
        ("semi-formal", "They strike a nice balance - professional but approachable."),
        ("formal", "They're quite professional and polished in their communication."),
        ("academic", "They write with scholarly precision and depth."),
    ])
    def test_formality_phrases(self, level, phrase):
        prompt = generate_humanized_persona_prompt(make_fingerprint(formality_level=level), "x")
        assert phrase in prompt

    def test_contractions(self):
        with_contractions = generate_humanized_persona_prompt(
            make_fingerprint(contractions_usage=True), "x"
        )
        assert "They love using contractions" in with_contractions

        without = generate_humanized_persona_prompt(make_fingerprint(), "x")
        assert "They tend to avoid contractions" in without

    def test_fillers_and_tics(self):
        fp = make_fingerprint(
            filler_phrases=("basically", "you know", "kind of"),
            writing_tics=("Trailing ellipses",),
        )
        prompt = generate_humanized_persona_prompt(fp, "x")
        assert 'they use phrases like "basically" and "you know" quite a bit.' in prompt
        assert "They have some quirky writing habits: Trailing ellipses." in prompt

    def test_complexity_distribution(self):
        fp = make_fingerprint(
            complexity_distribution=ComplexityDistribution(
                simple=0.5, compound=0.25, complex=0.25, compound_complex=0.0
            )
        )
        prompt = generate_humanized_persona_prompt(fp, "x")
        assert (
            "About 50% of their sentences are simple, 25% compound, "
            "25% complex and 0% compound-complex."
        ) in prompt

    def test_empty_lists_omitted(self, plain_fingerprint):
        prompt = generate_humanized_persona_prompt(plain_fingerprint, "x")
        assert "phrases like" not in prompt
        assert "quirky writing habits" not in prompt
        assert "not perfect" not in prompt
