"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from kalam_style import __version__
from kalam_style.cli import main
from kalam_style.models.fingerprint import LinguisticFingerprint
from kalam_style.persona import JsonPersonaStore


@pytest.fixture
def runner():
    return CliRunner()


class TestStyleCommands:
    """Test `kalam style ...`."""

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_analyze(self, runner, sample_file):
        result = runner.invoke(main, ["style", "analyze", str(sample_file)])
        assert result.exit_code == 0, result.output
        assert "Style Analysis" in result.output
        assert "[Lexical]" in result.output

    def test_analyze_json(self, runner, sample_file):
        result = runner.invoke(main, ["style", "analyze", str(sample_file), "--json", "-t", "Write a memo"])
        assert result.exit_code == 0, result.output

        data = json.loads(result.output)
        assert data["task"] == "Write a memo"
        assert data["linguistic_fingerprint"]["formality_level"] == "academic"
        assert data["metadata"]["paragraph_count"] == 3

    def test_analyze_saves_fingerprint(self, runner, sample_file, tmp_path):
        output = tmp_path / "out" / "fp.json"
        result = runner.invoke(main, ["style", "analyze", str(sample_file), "-o", str(output)])

        assert result.exit_code == 0, result.output
        fp = LinguisticFingerprint.from_json(output.read_text())
        assert fp.contractions_usage is False

    def test_analyze_rejects_short_text(self, runner, tmp_path):
        path = tmp_path / "short.txt"
        path.write_text("Just a few words.")

        result = runner.invoke(main, ["style", "analyze", str(path)])

        assert result.exit_code == 1
        assert "at least 100 characters" in result.output

    def test_analyze_rejects_unknown_format(self, runner, tmp_path):
        path = tmp_path / "paper.pdf"
        path.write_bytes(b"%PDF-1.4")

        result = runner.invoke(main, ["style", "analyze", str(path)])

        assert result.exit_code == 1
        assert "Unsupported file format" in result.output

    def test_prompt_from_text(self, runner, sample_file):
        result = runner.invoke(main, ["style", "prompt", str(sample_file), "-t", "Write a memo", "--humanized"])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("Hey there!")
        assert "Write a memo" in result.output

    def test_prompt_from_json(self, runner, sample_file, tmp_path):
        fp_path = tmp_path / "fp.json"
        runner.invoke(main, ["style", "analyze", str(sample_file), "-o", str(fp_path)])

        result = runner.invoke(main, ["style", "prompt", str(fp_path), "-j", "-t", "Write a memo"])

        assert result.exit_code == 0, result.output
        assert "TASK: Write a memo" in result.output

    def test_prompt_requires_task(self, runner, sample_file):
        result = runner.invoke(main, ["style", "prompt", str(sample_file)])
        assert result.exit_code == 2

    def test_report(self, runner, sample_file, tmp_path):
        fp_path = tmp_path / "fp.json"
        report_path = tmp_path / "report.md"
        runner.invoke(main, ["style", "analyze", str(sample_file), "-o", str(fp_path)])

        result = runner.invoke(main, ["style", "report", str(fp_path), "-o", str(report_path)])

        assert result.exit_code == 0, result.output
        report = report_path.read_text()
        assert report.startswith("# Linguistic Fingerprint Report")
        assert "## Recommendations" in report
        assert "| Formality | academic |" in report

    def test_report_rejects_invalid_fingerprint(self, runner, tmp_path):
        fp_path = tmp_path / "fp.json"
        fp_path.write_text(json.dumps({"tone": "sarcastic"}))

        result = runner.invoke(main, ["style", "report", str(fp_path)])

        assert result.exit_code == 1


class TestPersonaCommands:
    """Test `kalam persona ...`."""

    @pytest.fixture
    def data_dir(self, tmp_path):
        return tmp_path / "personas"

    def invoke(self, runner, data_dir, *args):
        return runner.invoke(main, ["persona", "--data-dir", str(data_dir), *args])

    def test_lifecycle(self, runner, data_dir, sample_file):
        result = self.invoke(runner, data_dir, "create", "Scholar", str(sample_file))
        assert result.exit_code == 0, result.output
        assert "ready" in result.output

        [summary] = JsonPersonaStore(data_dir).list_personas()

        result = self.invoke(runner, data_dir, "list")
        assert result.exit_code == 0
        assert "Scholar" in result.output

        result = self.invoke(runner, data_dir, "show", summary.id)
        assert result.exit_code == 0
        assert "Scholar" in result.output
        assert "[Lexical]" in result.output

        result = self.invoke(runner, data_dir, "show", summary.id, "--json")
        assert json.loads(result.output)["status"] == "ready"

        result = self.invoke(runner, data_dir, "prompt", summary.id, "-t", "Draft an abstract")
        assert result.exit_code == 0
        assert "TASK: Draft an abstract" in result.output

        result = self.invoke(runner, data_dir, "delete", summary.id)
        assert result.exit_code == 0
        assert JsonPersonaStore(data_dir).list_personas() == []

    def test_prompt_with_empty_task(self, runner, data_dir, sample_file):
        self.invoke(runner, data_dir, "create", "Scholar", str(sample_file))
        [summary] = JsonPersonaStore(data_dir).list_personas()

        result = self.invoke(runner, data_dir, "prompt", summary.id, "-t", "")

        assert result.exit_code == 0, result.output
        assert result.output.startswith("You are a Linguistic Persona Emulator")

    def test_delete_index_keeps_personas(self, runner, data_dir, sample_file):
        self.invoke(runner, data_dir, "create", "Scholar", str(sample_file))

        result = self.invoke(runner, data_dir, "delete", "index")

        assert result.exit_code == 1
        assert len(JsonPersonaStore(data_dir).list_personas()) == 1

    def test_list_empty(self, runner, data_dir):
        result = self.invoke(runner, data_dir, "list")
        assert result.exit_code == 0
        assert "No personas yet" in result.output

    def test_create_with_short_text_fails(self, runner, data_dir, tmp_path):
        path = tmp_path / "short.txt"
        path.write_text("Too short.")

        result = self.invoke(runner, data_dir, "create", "Tiny", str(path))

        assert result.exit_code == 1
        [summary] = JsonPersonaStore(data_dir).list_personas()
        assert summary.status == "failed"

    def test_unknown_persona(self, runner, data_dir):
        assert self.invoke(runner, data_dir, "show", "nope").exit_code == 1
        assert self.invoke(runner, data_dir, "prompt", "nope", "-t", "x").exit_code == 1
        assert self.invoke(runner, data_dir, "delete", "nope").exit_code == 1
