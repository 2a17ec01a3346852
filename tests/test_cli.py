import json
from pathlib import Path

import yaml
from click.testing import CliRunner

from routing_openapi.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliGenerate:
    def test_generate_yaml(self, tmp_path):
        output = tmp_path / "out" / "openapi.yaml"
        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(FIXTURES / "routes.yaml"), "-o", str(output)])

        assert result.exit_code == 0
        assert "Found 3 routes." in result.output
        doc = yaml.safe_load(output.read_text())
        assert doc["openapi"] == "3.0.0"
        assert "/api/users/{id}" in doc["paths"]

    def test_generate_json_with_info(self, tmp_path):
        output = tmp_path / "openapi.json"
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", str(FIXTURES / "routes.json"),
            "-o", str(output),
            "--title", "Health API",
            "--version", "2.1.0",
        ])

        assert result.exit_code == 0
        doc = json.loads(output.read_text())
        assert doc["info"] == {"title": "Health API", "version": "2.1.0"}
        assert list(doc["paths"]) == ["/health"]

    def test_explicit_format_overrides_suffix(self, tmp_path):
        output = tmp_path / "openapi.txt"
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", str(FIXTURES / "routes.json"), "-o", str(output), "--format", "json",
        ])

        assert result.exit_code == 0
        assert json.loads(output.read_text())["openapi"] == "3.0.0"

    def test_bad_routes_file(self, tmp_path):
        bad = tmp_path / "routes.yaml"
        bad.write_text("- just\n- a list\n")
        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(bad), "-o", str(tmp_path / "o.yaml")])

        assert result.exit_code == 1
        assert "Cannot load routes" in result.output

    def test_verbose_flag(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [
            "-v", "generate", str(FIXTURES / "routes.json"), "-o", str(tmp_path / "o.yaml"),
        ])
        assert result.exit_code == 0
