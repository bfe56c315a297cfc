"""Tests for the command-line interface."""

from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from deps_analyzer.cli import cli
from deps_analyzer.graph import RenderError

FIXTURES = Path(__file__).parent / "fixtures" / "sample_project"


def test_analyze_writes_dot_file(tmp_path):
    out = tmp_path / "deps.dot"
    result = CliRunner().invoke(cli, [
        "analyze", "app", "--project-root", str(FIXTURES), "-o", str(out), "--depth", "2",
    ])
    assert result.exit_code == 0, result.output
    assert "Analyzing dependencies for :app" in result.output
    assert "Max depth: 2" in result.output
    assert "Node duplication: False" in result.output
    assert "libs.kotlinCoroutines" in result.output
    assert out.exists()


def test_analyze_render_failure_exits_non_zero(tmp_path):
    with patch("deps_analyzer.pipeline.write_diagram", side_effect=RenderError("dot exploded")):
        result = CliRunner().invoke(cli, [
            "analyze", ":app", "--project-root", str(FIXTURES), "-o", str(tmp_path / "x.svg"),
        ])
    assert result.exit_code == 1
    assert "dot exploded" in result.output


def test_invalid_direction():
    result = CliRunner().invoke(cli, ["dot", ":app", "--direction", "RL"])
    assert result.exit_code == 2


def test_negative_depth():
    result = CliRunner().invoke(cli, ["dot", ":app", "--depth", "-1"])
    assert result.exit_code == 2


def test_dot_prints_source():
    result = CliRunner().invoke(cli, [
        "dot", ":app", "--project-root", str(FIXTURES), "--direction", "tb", "--duplicate",
    ])
    assert result.exit_code == 0, result.output
    assert result.output.startswith("digraph Dependencies {")
    assert "rankdir=TB;" in result.output
    assert '":core:core-model_2"' in result.output


def test_dot_lib_prefix_option():
    result = CliRunner().invoke(cli, [
        "dot", ":app", "--project-root", str(FIXTURES), "--lib-prefix", "deliverooLibs.",
    ])
    assert result.exit_code == 0, result.output
    assert "deliverooLibs.retrofit" in result.output
    assert "libs.kotlinCoroutines" not in result.output


def test_scan_command():
    result = CliRunner().invoke(cli, ["scan", str(FIXTURES / "app" / "build.gradle.kts")])
    assert result.exit_code == 0, result.output
    assert ":account:account-data" in result.output
    assert "deliverooLibs.retrofit" in result.output


def test_scan_empty_descriptor():
    result = CliRunner().invoke(cli, ["scan", str(FIXTURES / "core" / "core-model" / "build.gradle.kts")])
    assert result.exit_code == 0
    assert "No dependencies found." in result.output
