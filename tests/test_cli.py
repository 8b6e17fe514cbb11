"""Tests for the command line."""

import subprocess
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from gotestdeps.cli import ResolutionFailed, cli
from gotestdeps.errors import ResolverError

FIXTURES = Path(__file__).parent / "fixtures"


def _fake_go_list(cmd, **kwargs):
    name = "golist_app_test.json" if "-test" in cmd else "golist_app.json"
    return subprocess.CompletedProcess(cmd, 0, stdout=(FIXTURES / name).read_text(), stderr="")


@patch("gotestdeps.resolver.golist.subprocess.run", side_effect=_fake_go_list)
def test_no_arguments_writes_diagram(mock_run):
    result = CliRunner().invoke(cli, [])
    assert result.exit_code == 0, result.output
    assert result.output.startswith("graph LR\n")
    assert '    N2["example.com/testtool"]\n' in result.output
    assert "    class N2 test_only;\n" in result.output
    assert mock_run.call_count == 2


@patch("gotestdeps.resolver.golist.subprocess.run", side_effect=_fake_go_list)
def test_output_file(mock_run, tmp_path):
    out = tmp_path / "deps.mmd"
    result = CliRunner().invoke(cli, ["-o", str(out), "--parallel"])
    assert result.exit_code == 0, result.output
    assert out.read_text().startswith("graph LR\n")
    assert result.output == ""


@patch("gotestdeps.resolver.golist.subprocess.run")
def test_resolver_failure_exits_nonzero(mock_run, tmp_path):
    mock_run.return_value = subprocess.CompletedProcess(
        [], 0, stdout=(FIXTURES / "golist_errors.json").read_text(), stderr="",
    )
    out = tmp_path / "deps.mmd"
    result = CliRunner().invoke(cli, ["-o", str(out)])
    assert result.exit_code == 1
    assert "aborting due to previous errors" in result.output
    assert result.output.count("no required module provides package example.com/gone") == 1
    assert not out.exists()


@patch("gotestdeps.resolver.golist.subprocess.run")
def test_resolver_failure_keeps_cause(mock_run):
    mock_run.return_value = subprocess.CompletedProcess(
        [], 0, stdout=(FIXTURES / "golist_errors.json").read_text(), stderr="",
    )
    result = CliRunner().invoke(cli, [], standalone_mode=False)
    assert isinstance(result.exception, ResolutionFailed)
    assert isinstance(result.exception.__cause__, ResolverError)
    assert result.exception.__cause__.include_tests is False


def test_help():
    result = CliRunner().invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "Mermaid" in result.output
