"""
Test module for CLI commands.
"""
import json
import os
import pytest
from click.testing import CliRunner
from source_window.cli import cli


@pytest.fixture
def no_config(tmp_path):
    """Point --config at a file that does not exist so defaults apply."""
    return str(tmp_path / "absent.json")


def test_cli_help():
    """Test CLI help command."""
    runner = CliRunner()
    result = runner.invoke(cli, ['--help'])
    assert result.exit_code == 0
    assert 'Usage:' in result.output
    assert 'source' in result.output
    assert 'src' in result.output


def test_cli_source_help():
    """Test source command help."""
    runner = CliRunner()
    result = runner.invoke(cli, ['source', '--help'])
    assert result.exit_code == 0
    assert '--file' in result.output
    assert '--line' in result.output
    assert '--executable' in result.output
    assert 'highlights the current' in result.output


def test_cli_source_window(source_file, no_config):
    """Test printing a window with markers."""
    runner = CliRunner()
    result = runner.invoke(cli, ['source', '--config', no_config, '--file', source_file, '--line', '15', '2', '1'])
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "   line 13",
        "   line 14",
        ">> line 15",
        "   line 16",
    ]


def test_cli_src_alias(source_file, no_config):
    """Test that src behaves like source."""
    runner = CliRunner()
    args = ['--config', no_config, '--file', source_file, '--line', '15', '2', '1']
    assert runner.invoke(cli, ['src'] + args).output == runner.invoke(cli, ['source'] + args).output


def test_cli_negative_lower_bound(source_file, no_config):
    """Test that a negative lower bound is made positive."""
    runner = CliRunner()
    result = runner.invoke(cli, ['source', '--config', no_config, '--file', source_file, '--line', '15', '--', '-1', '0'])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["   line 14", ">> line 15"]


def test_cli_no_active_frame(no_config):
    """Test the error when there is no frame."""
    runner = CliRunner()
    result = runner.invoke(cli, ['source', '--config', no_config])
    assert result.exit_code == 1
    assert result.output.splitlines() == ["Error: No active stack frame"]


def test_cli_invalid_lower_bound(source_file, no_config):
    """Test the error for a bad argument."""
    runner = CliRunner()
    result = runner.invoke(cli, ['source', '--config', no_config, '--file', source_file, '--line', '3', 'abc'])
    assert result.exit_code == 1
    assert result.output.splitlines() == ["Error: Invalid lower bound value 'abc'"]


def test_cli_no_source_info(source_file, no_config):
    """Test a frame with a file but an unknown line."""
    runner = CliRunner()
    result = runner.invoke(cli, ['source', '--config', no_config, '--file', source_file])
    assert result.exit_code == 1
    assert result.output.splitlines() == ["Error: No source information available"]


def test_cli_staleness_notice(source_file, executable_file, no_config):
    """Test the staleness notice precedes the source."""
    os.utime(executable_file, (1000, 1000))
    os.utime(source_file, (2000, 2000))
    runner = CliRunner()
    result = runner.invoke(cli, ['source', '--config', no_config, '--file', source_file, '--line', '2',
                                 '--executable', executable_file, '0', '0'])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == f"Notice: Source file '{source_file}' is newer than the debuggee executable"
    assert lines[1:] == [">> line 2"]


def test_cli_config_file(source_file, tmp_path):
    """Test that the configuration file changes defaults and rendering."""
    config_path = tmp_path / "source_window.json"
    config_path.write_text(json.dumps({
        "default_lower": 1,
        "default_upper": 1,
        "show_markers": False,
        "show_line_numbers": True,
    }))
    runner = CliRunner()
    result = runner.invoke(cli, ['source', '--config', str(config_path), '--file', source_file, '--line', '10'])
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "    9: line 9",
        "   10: line 10",
        "   11: line 11",
    ]


def test_cli_json_output(source_file, no_config):
    """Test JSON output of messages and result."""
    runner = CliRunner()
    result = runner.invoke(cli, ['source', '--config', no_config, '--file', source_file, '--line', '3',
                                 '--json', '1', '0'])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["messages"] == [
        {"kind": "info", "text": "line 2", "index": 1},
        {"kind": "emphasis", "text": "line 3", "index": 2},
    ]
    assert data["result"]["successful"] is True
    assert data["result"]["lines_emitted"] == 2


def test_cli_json_output_on_error(no_config):
    """Test JSON output still reports failures."""
    runner = CliRunner()
    result = runner.invoke(cli, ['source', '--config', no_config, '--json'])
    assert result.exit_code == 1
    data = json.loads(result.output)
    assert data["messages"] == [{"kind": "error", "text": "No active stack frame", "index": None}]
    assert data["result"]["error"] == "No active stack frame"
