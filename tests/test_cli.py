"""
Tests for the n8n-codegen command line interface.
"""

import json
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from n8n_codegen.cli.main import cli
from n8n_codegen.exceptions import UpstreamError
from n8n_codegen.generator.engine import CodeGenerator


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def workflow_file(tmp_path, sample_workflow_data):
    path = tmp_path / "workflow.json"
    path.write_text(json.dumps(sample_workflow_data), encoding="utf-8")
    return path


class TestGenerateFile:

    def test_prints_code(self, runner, workflow_file, sample_workflow_data):
        result = runner.invoke(cli, ["generate", "file", str(workflow_file)])

        assert result.exit_code == 0, result.output
        assert CodeGenerator().generate(sample_workflow_data) in result.output

    def test_rule_intent_without_ai(self, runner, workflow_file):
        result = runner.invoke(cli, ["generate", "file", str(workflow_file), "-i", "use const", "--no-ai"])

        assert result.exit_code == 0, result.output
        assert "  const total = 0;" in result.output

    def test_writes_output_file(self, runner, workflow_file, tmp_path):
        output = tmp_path / "out" / "main.mjs"
        result = runner.invoke(cli, ["generate", "file", str(workflow_file), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8").startswith("// Auto-generated code from n8n workflow")

    def test_invalid_document(self, runner, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("nodes: [unclosed", encoding="utf-8")

        result = runner.invoke(cli, ["generate", "file", str(path)])

        assert result.exit_code == 1
        assert "Error: Invalid workflow document" in result.output

    def test_non_utf8_document(self, runner, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"name": "Caf\xe9"}')

        result = runner.invoke(cli, ["generate", "file", str(path)])

        assert result.exit_code == 1
        assert "not valid UTF-8" in result.output


class TestGenerateRemote:

    def test_passes_options(self, runner):
        with patch(
            "n8n_codegen.cli.commands.generate.convert_workflow_to_code",
            new=AsyncMock(return_value="// code\n"),
        ) as convert:
            result = runner.invoke(cli, ["generate", "remote", "42", "--intent", "use const", "--no-ai", "--order", "graph"])

        assert result.exit_code == 0, result.output
        assert "// code" in result.output
        args, kwargs = convert.call_args
        assert args == ("42",)
        assert kwargs["intent"] == "use const"
        assert kwargs["use_ai"] is False
        assert kwargs["generator"].order == "graph"

    def test_upstream_error_reported(self, runner):
        with patch(
            "n8n_codegen.cli.commands.generate.convert_workflow_to_code",
            new=AsyncMock(side_effect=UpstreamError("n8n", 401, "unauthorized")),
        ):
            result = runner.invoke(cli, ["generate", "remote", "42"])

        assert result.exit_code == 1
        assert "Error: n8n API error (401): unauthorized" in result.output


class TestRefactorCommand:

    def test_refactor_stdin(self, runner):
        result = runner.invoke(cli, ["refactor", "-", "--intent", "use const", "--no-ai"], input="let a = 1;\n")

        assert result.exit_code == 0, result.output
        assert result.output == "const a = 1;\n"

    def test_warns_when_ai_unavailable(self, runner):
        result = runner.invoke(cli, ["refactor", "-", "--intent", "simplify"], input="let a = 1;\n")

        assert result.exit_code == 0, result.output
        assert "OPENAI_API_KEY not set" in result.output
        assert "let a = 1;" in result.output

    def test_malformed_openai_url_falls_back_to_rules(self, runner, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("OPENAI_BASE_URL", "https://api.openai.com:notaport/v1")

        result = runner.invoke(cli, ["refactor", "-", "--intent", "use const"], input="let a = 1;\n")

        assert result.exit_code == 0, result.output
        assert "const a = 1;" in result.output


def test_node_types(runner):
    result = runner.invoke(cli, ["generate", "node-types"])

    assert result.exit_code == 0
    assert result.output.split() == ["function", "httpRequest", "set"]
