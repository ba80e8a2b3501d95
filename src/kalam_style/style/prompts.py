"""
Prompt Rendering

Turns a LinguisticFingerprint and a task into a directive prompt for a
text-generation service. Two fixed templates are provided:

- generate_persona_prompt: structured, sectioned analysis
- generate_humanized_persona_prompt: conversational second-person brief

Both are deterministic. List fields are rendered only when populated;
scalar fields are always present. The task is inserted verbatim.
"""

from kalam_style.models.fingerprint import LinguisticFingerprint


def _join(values) -> str:
    return ", ".join(values)


def _percent(ratio: float) -> str:
    return f"{round(ratio * 100)}%"


def _section(title: str, scalars: list[tuple[str, str]], lists: list[tuple[str, tuple]]) -> str:
    lines = [f"{title}:"]
    lines.extend(f"- {label}: {value}" for label, value in scalars)
    lines.extend(f"- {label}: {_join(values)}" for label, values in lists if values)
    return "\n".join(lines)


def generate_persona_prompt(fingerprint: LinguisticFingerprint, task: str) -> str:
    """
    Render the structured persona prompt.

    Args:
        fingerprint: Fingerprint of the author to imitate
        task: What the generation service should write, inserted as-is

    Returns:
        Prompt string ending with the task instruction
    """
    fp = fingerprint
    cd = fp.complexity_distribution

    sections = [
        _section(
            "LEXICAL ANALYSIS",
            [
                ("Vocabulary Richness", fp.vocabulary_richness),
                ("Diction Level", fp.diction_level),
                ("Formality", fp.formality_level),
                ("Uses Contractions", "Yes" if fp.contractions_usage else "No"),
            ],
            [
                ("Domain Jargon", fp.domain_jargon),
                ("Favorite Words", fp.favorite_words),
            ],
        ),
        _section(
            "SYNTACTIC ANALYSIS",
            [
                ("Average Sentence Length", f"{fp.avg_sentence_length:.1f} words"),
                ("Sentence Variety", fp.sentence_variety),
                (
                    "Complexity Distribution",
                    f"{_percent(cd.simple)} simple, {_percent(cd.compound)} compound, "
                    f"{_percent(cd.complex)} complex, {_percent(cd.compound_complex)} compound-complex",
                ),
            ],
            [
                ("Clause Usage", fp.clause_usage),
                ("Common Sentence Openers", fp.sentence_openers),
            ],
        ),
        _section(
            "RHETORICAL ANALYSIS",
            [
                ("Tone", fp.tone),
                ("Mood", fp.mood),
                ("Logical Flow", fp.logical_flow),
                ("Information Pacing", fp.information_pacing),
            ],
            [
                ("Transition Style", fp.transition_style),
                ("Rhetorical Devices", fp.rhetorical_devices),
            ],
        ),
        _section(
            "IDIOSYNCRATIC PATTERNS",
            [],
            [
                ("Punctuation Habits", fp.punctuation_habits),
                ("Formatting Preferences", fp.formatting_preferences),
                ("Filler Phrases", fp.filler_phrases),
                ("Writing Tics", fp.writing_tics),
            ],
        ),
        _section(
            "NATURAL IMPERFECTIONS",
            [],
            [
                ("Common Errors", fp.common_errors),
                ("Awkward Phrasing", fp.awkward_phrasing),
                ("Consistent Mistakes", fp.consistent_mistakes),
            ],
        ),
        _section(
            "REFERENCE METRICS",
            [
                ("Lexical Diversity", f"{fp.lexical_diversity:.2f}"),
                ("Sentence Complexity", fp.sentence_complexity),
                ("Vocabulary Level", fp.vocabulary_level),
                ("Readability Score", f"{fp.readability_score:.0f}/100"),
            ],
            [
                ("Writing Patterns", fp.writing_patterns),
                ("Structural Preferences", fp.structural_preferences),
                ("Keywords", fp.keywords),
            ],
        ),
    ]

    # Sections with nothing populated collapse to their header; drop them.
    body = "\n\n".join(s for s in sections if "\n" in s)

    return (
        "You are a Linguistic Persona Emulator. You have analyzed a text and "
        "created this linguistic fingerprint:\n\n"
        f"{body}\n\n"
        "Now BECOME this author completely. Write in their exact style, matching "
        "every linguistic pattern identified above. Do not mention that you are an "
        "AI or that you are emulating a style.\n\n"
        f"TASK: {task}\n\n"
        "Write as the original author would, incorporating their vocabulary choices, "
        "sentence structures and stylistic quirks."
    )


FORMALITY_PHRASES = {
    "informal": "They're super casual and relaxed in their writing.",
    "semi-formal": "They strike a nice balance - professional but approachable.",
    "formal": "They're quite professional and polished in their communication.",
    "academic": "They write with scholarly precision and depth.",
}

VARIETY_PHRASES = {
    "uniform": "Their sentences keep a steady, even rhythm",
    "moderate": "Their sentences vary a fair bit in length",
    "highly-varied": "They mix short punchy sentences with long winding ones",
}

PACING_PHRASES = {
    "dense": "They pack a lot of information into every line.",
    "moderate": "They move through ideas at a comfortable pace.",
    "deliberate": "They take their time and let ideas breathe.",
}

FLOW_PHRASES = {
    "deductive": "They like to state the point first and then back it up.",
    "inductive": "They build up from examples before landing the point.",
    "mixed": "They move between examples and conclusions freely.",
}


def _quoted(values, limit: int) -> str:
    return '" and "'.join(values[:limit])


def generate_humanized_persona_prompt(fingerprint: LinguisticFingerprint, task: str) -> str:
    """Render the conversational persona prompt."""
    fp = fingerprint
    parts = [
        f"Hey there! You're writing as someone who has a {fp.tone} tone with a {fp.mood} mood.",
        FORMALITY_PHRASES[fp.formality_level],
    ]

    if fp.contractions_usage:
        parts.append(
            "They love using contractions (don't, won't, it's) - makes everything sound more natural."
        )
    else:
        parts.append("They tend to avoid contractions, keeping things more formal.")

    parts.append(
        f"{VARIETY_PHRASES[fp.sentence_variety]}, averaging about "
        f"{fp.avg_sentence_length:.0f} words a sentence."
    )
    cd = fp.complexity_distribution
    parts.append(
        f"About {cd.simple:.0%} of their sentences are simple, {cd.compound:.0%} compound, "
        f"{cd.complex:.0%} complex and {cd.compound_complex:.0%} compound-complex."
    )
    parts.append(
        f"Their vocabulary is {fp.vocabulary_richness} and leans {fp.diction_level}, "
        f"at roughly a {fp.vocabulary_level.lower()} level."
    )
    parts.append(PACING_PHRASES[fp.information_pacing])
    parts.append(FLOW_PHRASES[fp.logical_flow])

    if fp.favorite_words:
        parts.append(f"Words they keep coming back to: {_join(fp.favorite_words)}.")
    if fp.domain_jargon:
        parts.append(f"They drop in specialist terms like {_join(fp.domain_jargon[:5])}.")
    if fp.sentence_openers:
        parts.append(f'They often kick off sentences with "{_quoted(fp.sentence_openers, 3)}".')
    if fp.transition_style:
        parts.append(f'To link ideas they reach for "{_quoted(fp.transition_style, 3)}".')
    if fp.filler_phrases:
        parts.append(
            f'You\'ll notice they use phrases like "{_quoted(fp.filler_phrases, 2)}" quite a bit.'
        )
    if fp.writing_tics:
        parts.append(f"They have some quirky writing habits: {_join(fp.writing_tics[:2])}.")
    if fp.rhetorical_devices:
        parts.append(f"Rhetorically, they lean on {_join(fp.rhetorical_devices)}.")
    if fp.clause_usage:
        parts.append(f"Structurally you'll see {_join(fp.clause_usage).lower()}.")
    if fp.punctuation_habits:
        parts.append(f"Punctuation-wise: {_join(fp.punctuation_habits).lower()}.")
    if fp.formatting_preferences:
        parts.append(f"On the page they favor {_join(fp.formatting_preferences).lower()}.")
    if fp.writing_patterns:
        parts.append(f"Overall patterns: {_join(fp.writing_patterns).lower()}.")
    if fp.structural_preferences:
        parts.append(f"They organize things with {_join(fp.structural_preferences).lower()}.")
    if fp.keywords:
        parts.append(f"Topics that come up a lot: {_join(fp.keywords[:5])}.")

    imperfections = fp.common_errors + fp.awkward_phrasing + fp.consistent_mistakes
    if imperfections:
        parts.append(
            f"They're not perfect either, and that's part of the charm: {_join(imperfections).lower()}."
        )

    parts.append(
        f"Readability sits around {fp.readability_score:.0f} out of 100 and their "
        f"lexical diversity is about {fp.lexical_diversity:.2f}, so keep it {fp.sentence_complexity}."
    )

    return (
        " ".join(parts)
        + f"\n\nNow, here's what you need to do: {task}\n\n"
        + "Write it exactly how this person would - don't just copy their style, BE them. "
        "Make it feel authentic and natural, like they're actually sitting down and writing "
        "this themselves. Never mention AI or that you're imitating anyone. Ready? Go for it!"
    )
