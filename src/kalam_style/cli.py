"""Command-line interface for Kalam Style."""

from contextlib import contextmanager
from pathlib import Path
import json
import logging

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from kalam_style import __version__
from kalam_style.errors import (
    InsufficientInputError,
    PersonaNotFoundError,
    PersonaNotReadyError,
    UnsupportedFormatError,
)

console = Console()
err_console = Console(stderr=True)

HANDLED_ERRORS = (
    InsufficientInputError,
    UnsupportedFormatError,
    PersonaNotFoundError,
    PersonaNotReadyError,
    ValidationError,
)


@contextmanager
def _exit_on_error():
    """Report known failures without a traceback and exit with status 1."""
    try:
        yield
    except HANDLED_ERRORS as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """Kalam Style - Linguistic fingerprints and persona prompts for any author."""
    from kalam_style.config import get_settings

    logging.basicConfig(
        level=logging.DEBUG if verbose else get_settings().log_level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


# ============================================================================
# Style commands
# ============================================================================

@main.group()
def style() -> None:
    """Style analysis commands - fingerprint texts and render prompts."""
    pass


@style.command(name="analyze")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--task", "-t", help="Task for the rendered prompts")
@click.option("--output", "-o", type=click.Path(), help="Output file for fingerprint (JSON)")
@click.option("--json", "as_json", is_flag=True, help="Print the full analysis as JSON")
def style_analyze(path: str, task: str | None, output: str | None, as_json: bool) -> None:
    """Analyze a text file and extract its linguistic fingerprint.

    Example:
        kalam style analyze essays/op-ed.txt -o op-ed_style.json
    """
    from kalam_style.style import StyleAnalyzer

    file_path = Path(path)
    analyzer = StyleAnalyzer()

    with _exit_on_error():
        analysis = analyzer.analyze_file(file_path, task=task)

    if as_json:
        click.echo(json.dumps(analysis.to_dict(), indent=2))
    else:
        console.print(f"[bold]Style Analysis:[/bold] {file_path.name}\n")
        console.print(analysis.fingerprint.summary(), markup=False)

        stats = analysis.statistics
        table = Table(title="Input")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")
        table.add_row("Characters", f"{stats.text_length:,}")
        table.add_row("Words", f"{stats.word_count:,}")
        table.add_row("Sentences", f"{stats.sentence_count:,}")
        table.add_row("Paragraphs", f"{stats.paragraph_count:,}")
        console.print()
        console.print(table)

        console.print(f"\n[bold]Summary:[/bold] {analysis.style_summary}", highlight=False)
        console.print("\n[bold]Recommendations:[/bold]")
        for recommendation in analysis.recommendations:
            console.print(f"  - {recommendation}", markup=False)

    if output:
        output_path = Path(output)
        analyzer.save_fingerprint(analysis.fingerprint, output_path)
        if not as_json:
            console.print(f"\n[green]OK[/green] Fingerprint saved to {output_path}")


@style.command(name="prompt")
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("--task", "-t", required=True, help="What the persona should write")
@click.option("--humanized", is_flag=True, help="Use the conversational template")
@click.option("--from-json", "-j", is_flag=True, help="SOURCE is a fingerprint JSON file (not text)")
def style_prompt(source: str, task: str, humanized: bool, from_json: bool) -> None:
    """Render a persona prompt from a text or a saved fingerprint.

    Examples:
        kalam style prompt essays/op-ed.txt -t "Write about remote work"
        kalam style prompt op-ed_style.json -j -t "Write about remote work" --humanized
    """
    from kalam_style.ingest import load_text
    from kalam_style.style import (
        StyleAnalyzer,
        generate_humanized_persona_prompt,
        generate_persona_prompt,
    )

    analyzer = StyleAnalyzer()

    with _exit_on_error():
        if from_json:
            fingerprint = analyzer.load_fingerprint(source)
        else:
            fingerprint = analyzer.fingerprint(load_text(Path(source)))

    render = generate_humanized_persona_prompt if humanized else generate_persona_prompt
    click.echo(render(fingerprint, task))


@style.command(name="report")
@click.argument("fingerprint_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", type=click.Path(), help="Output file for report (Markdown)")
def style_report(fingerprint_path: str, output: str | None) -> None:
    """Generate a detailed style report from a fingerprint file.

    Example:
        kalam style report op-ed_style.json -o op-ed_report.md
    """
    from kalam_style.style import StyleAnalyzer

    analyzer = StyleAnalyzer()
    with _exit_on_error():
        fingerprint = analyzer.load_fingerprint(fingerprint_path)

    report = _generate_style_report(fingerprint)

    if output:
        output_path = Path(output)
        output_path.write_text(report, encoding="utf-8")
        console.print(f"[green]OK[/green] Report saved to {output_path}")
    else:
        console.print(report, markup=False)


def _generate_style_report(fingerprint) -> str:
    """Generate a markdown style report from a fingerprint."""
    from kalam_style.style import (
        generate_key_insights,
        generate_persona_characterization,
        generate_recommendations,
        generate_style_summary,
    )

    fp = fingerprint
    cd = fp.complexity_distribution
    lines = [
        "# Linguistic Fingerprint Report",
        "",
        generate_style_summary(fp),
        "",
        generate_persona_characterization(fp),
        "",
        "## Lexical",
        "",
        "| Feature | Value |",
        "|---------|-------|",
        f"| Vocabulary richness | {fp.vocabulary_richness} |",
        f"| Vocabulary level | {fp.vocabulary_level} |",
        f"| Diction | {fp.diction_level} |",
        f"| Formality | {fp.formality_level} |",
        f"| Contractions | {'yes' if fp.contractions_usage else 'no'} |",
        f"| Lexical diversity | {fp.lexical_diversity:.3f} |",
        "",
        "## Sentence Structure",
        "",
        "| Metric | Value |",
        "|--------|-------|",
        f"| Mean sentence length | {fp.avg_sentence_length:.1f} words |",
        f"| Variety | {fp.sentence_variety} |",
        f"| Complexity | {fp.sentence_complexity} |",
        f"| Simple | {cd.simple*100:.1f}% |",
        f"| Compound | {cd.compound*100:.1f}% |",
        f"| Complex | {cd.complex*100:.1f}% |",
        f"| Compound-complex | {cd.compound_complex*100:.1f}% |",
        "",
        "## Rhetoric",
        "",
        "| Feature | Value |",
        "|---------|-------|",
        f"| Tone | {fp.tone} |",
        f"| Mood | {fp.mood} |",
        f"| Logical flow | {fp.logical_flow} |",
        f"| Information pacing | {fp.information_pacing} |",
        "",
        "## Readability",
        "",
        "| Metric | Score | Interpretation |",
        "|--------|-------|----------------|",
        f"| Reading ease | {fp.readability_score:.0f} | {_interpret_flesch(fp.readability_score)} |",
        "",
    ]

    traits = [
        ("Favorite words", fp.favorite_words),
        ("Domain jargon", fp.domain_jargon),
        ("Sentence openers", fp.sentence_openers),
        ("Transitions", fp.transition_style),
        ("Rhetorical devices", fp.rhetorical_devices),
        ("Punctuation habits", fp.punctuation_habits),
        ("Formatting", fp.formatting_preferences),
        ("Filler phrases", fp.filler_phrases),
        ("Writing tics", fp.writing_tics),
        ("Common errors", fp.common_errors),
        ("Awkward phrasing", fp.awkward_phrasing),
        ("Consistent mistakes", fp.consistent_mistakes),
    ]
    populated = [(label, values) for label, values in traits if values]
    if populated:
        lines.extend(["## Signature Traits", ""])
        lines.extend(f"- **{label}**: {', '.join(values)}" for label, values in populated)
        lines.append("")

    insights = generate_key_insights(fp)
    if insights:
        lines.extend(["## Key Insights", ""])
        lines.extend(f"- {insight}" for insight in insights)
        lines.append("")

    lines.extend(["## Recommendations", ""])
    lines.extend(f"- {r}" for r in generate_recommendations(fp))
    lines.append("")

    return "\n".join(lines)


def _interpret_flesch(score: float) -> str:
    """Interpret Flesch Reading Ease score."""
    if score >= 90:
        return "Very easy (5th grade)"
    elif score >= 80:
        return "Easy (6th grade)"
    elif score >= 70:
        return "Fairly easy (7th grade)"
    elif score >= 60:
        return "Standard (8th-9th grade)"
    elif score >= 50:
        return "Fairly difficult (10th-12th grade)"
    elif score >= 30:
        return "Difficult (college level)"
    else:
        return "Very difficult (college graduate)"


# ============================================================================
# Persona commands
# ============================================================================

@main.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    help="Persona directory (defaults to KALAM_DATA_DIR/personas)",
)
@click.pass_context
def persona(ctx: click.Context, data_dir: str | None) -> None:
    """Persona commands - store writing samples and reuse their style."""
    from kalam_style.config import get_settings
    from kalam_style.persona import JsonPersonaStore, PersonaService

    store = JsonPersonaStore(data_dir or get_settings().personas_dir)
    ctx.obj = PersonaService(store)


@persona.command(name="create")
@click.argument("name")
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def persona_create(service, name: str, files: tuple[str, ...]) -> None:
    """Create a persona from one or more writing samples.

    Example:
        kalam persona create "Columnist" essays/*.txt
    """
    from kalam_style.ingest import load_text

    with _exit_on_error():
        texts = [load_text(Path(f)) for f in files]
        with console.status(f"Fingerprinting {len(texts)} sample(s)..."):
            record = service.create_persona(name, texts)

    console.print(f"[green]OK[/green] Persona [bold]{record.name}[/bold] is {record.status}")
    console.print(f"[dim]id: {record.id}[/dim]")


@persona.command(name="list")
@click.pass_obj
def persona_list(service) -> None:
    """List stored personas, newest first."""
    personas = service.store.list_personas()
    if not personas:
        console.print("[dim]No personas yet[/dim]")
        return

    table = Table(title=f"Personas ({len(personas)})")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Status")
    table.add_column("Sources", justify="right")
    table.add_column("Created", style="dim")

    colors = {"ready": "green", "processing": "yellow", "failed": "red"}
    for p in personas:
        table.add_row(
            p.id,
            p.name,
            f"[{colors[p.status]}]{p.status}[/{colors[p.status]}]",
            str(p.source_count),
            p.created_at[:10],
        )

    console.print(table)


@persona.command(name="show")
@click.argument("persona_id")
@click.option("--json", "as_json", is_flag=True, help="Print the stored record as JSON")
@click.pass_obj
def persona_show(service, persona_id: str, as_json: bool) -> None:
    """Show a persona and its fingerprint."""
    with _exit_on_error():
        record = service.get_persona(persona_id)

    if as_json:
        click.echo(record.model_dump_json(indent=2))
        return

    console.print(f"[bold]{record.name}[/bold] [dim]({record.id})[/dim]")
    console.print(f"Status: {record.status}", highlight=False)
    console.print(f"Sources: {record.source_count}", highlight=False)
    if record.error_message:
        console.print(f"[red]Error:[/red] {escape(record.error_message)}", highlight=False)
    if record.linguistic_fingerprint:
        console.print()
        console.print(record.linguistic_fingerprint.summary(), markup=False)


@persona.command(name="prompt")
@click.argument("persona_id")
@click.option("--task", "-t", required=True, help="What the persona should write")
@click.option("--humanized", is_flag=True, help="Use the conversational template")
@click.pass_obj
def persona_prompt(service, persona_id: str, task: str, humanized: bool) -> None:
    """Render a prompt that writes as a stored persona."""
    with _exit_on_error():
        prompts = service.persona_prompts(persona_id, task=task)

    if prompts.fingerprint is None:
        console.print(f"[red]Error:[/red] Persona {persona_id} has no fingerprint and too little text")
        raise SystemExit(1)

    click.echo(prompts.humanized_prompt if humanized else prompts.persona_prompt)


@persona.command(name="delete")
@click.argument("persona_id")
@click.pass_obj
def persona_delete(service, persona_id: str) -> None:
    """Delete a persona."""
    with _exit_on_error():
        service.delete_persona(persona_id)
    console.print(f"[green]OK[/green] Deleted {persona_id}")


if __name__ == "__main__":
    main()
