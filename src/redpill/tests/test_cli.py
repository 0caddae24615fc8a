"""
Tests for the command-line interface
"""
import pytest
from unittest.mock import Mock, patch
from typer.testing import CliRunner

from redpill import __version__
from redpill.cli import app, normalize_args
from redpill.lib.process.base import PortListing, ProcessRecord

runner = CliRunner()

@pytest.fixture
def proc():
    return ProcessRecord(pid=12345, name="node", user="alice", command="next dev")

@pytest.fixture
def inspector():
    """Mock process inspector"""
    mock = Mock()
    mock.find_processes.return_value = []
    mock.list_all_listening.return_value = []
    with patch('redpill.lib.factory.InspectorFactory.create', return_value=mock):
        yield mock

@pytest.fixture
def terminator():
    """Mock process terminator"""
    mock = Mock()
    mock.kill.return_value = True
    with patch('redpill.lib.process.terminator.ProcessTerminator.from_config', return_value=mock):
        yield mock

def test_normalize_args():
    """Test a bare port is routed to the check command"""
    assert normalize_args(["3000"]) == ["check", "3000"]
    assert normalize_args(["--debug", "3000"]) == ["--debug", "check", "3000"]
    assert normalize_args(["free", "3000"]) == ["free", "3000"]
    assert normalize_args(["list"]) == ["list"]
    assert normalize_args([]) == []

def test_no_args_shows_help():
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "free" in result.output
    assert "list" in result.output

def test_help():
    result = runner.invoke(app, ["-h"])
    assert result.exit_code == 0
    assert "Examples" in result.output
    assert "--version" in result.output

def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"redpill v{__version__}" in result.output

def test_check_invalid_port(inspector):
    """Test out-of-range ports are rejected"""
    result = runner.invoke(app, ["check", "70000"])
    assert result.exit_code == 1
    assert "Invalid port" in result.output
    inspector.find_processes.assert_not_called()

def test_check_free_port(inspector, terminator):
    result = runner.invoke(app, normalize_args(["3000"]))
    assert result.exit_code == 0
    assert "Port 3000 is free" in result.output
    inspector.find_processes.assert_called_once_with(3000)

def test_check_kill_confirmed(inspector, terminator, proc):
    """Test confirming kills the process"""
    inspector.find_processes.return_value = [proc]
    with patch('redpill.lib.ui.confirm', return_value=True):
        result = runner.invoke(app, ["check", "3000"])

    assert result.exit_code == 0
    assert "next dev" in result.output
    assert "Killed process 12345 on port 3000" in result.output
    terminator.kill.assert_called_once_with(12345)

def test_check_kill_declined(inspector, terminator, proc):
    """Test declining leaves the process alone"""
    inspector.find_processes.return_value = [proc]
    with patch('redpill.lib.ui.confirm', return_value=False):
        result = runner.invoke(app, ["check", "3000"])

    assert result.exit_code == 0
    assert "Skipped" in result.output
    terminator.kill.assert_not_called()

def test_check_yes_skips_prompt(inspector, terminator, proc):
    inspector.find_processes.return_value = [proc]
    with patch('redpill.lib.ui.confirm') as mock_confirm:
        result = runner.invoke(app, ["check", "3000", "--yes"])

    assert result.exit_code == 0
    mock_confirm.assert_not_called()
    terminator.kill.assert_called_once_with(12345)

def test_check_kill_failed(inspector, terminator, proc):
    inspector.find_processes.return_value = [proc]
    terminator.kill.return_value = False
    result = runner.invoke(app, ["check", "3000", "-y"])

    assert result.exit_code == 0
    assert "Failed to kill process 12345" in result.output
    assert "sudo" in result.output

def test_check_config_error(tmp_path, monkeypatch):
    """Test configuration errors exit with code 1"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("bogus: 1\n")
    monkeypatch.setenv("REDPILL_CONFIG", str(config_file))

    result = runner.invoke(app, ["check", "3000"])
    assert result.exit_code == 1
    assert "Configuration error" in result.output

def test_free_requires_ports():
    result = runner.invoke(app, ["free"])
    assert result.exit_code == 1
    assert "Please specify a port or range" in result.output

def test_free_no_valid_ports(inspector):
    result = runner.invoke(app, ["free", "abc", "3010-3000"])
    assert result.exit_code == 1
    assert "No valid ports" in result.output
    inspector.find_processes.assert_not_called()

def test_free_kills_every_process(inspector, terminator):
    """Test free kills processes across a range without asking"""
    web = ProcessRecord(pid=1, name="node", user="alice", command="next dev")
    api = ProcessRecord(pid=2, name="python", user="alice", command="uvicorn app:app")
    inspector.find_processes.side_effect = lambda port: {3000: [web], 3002: [api]}.get(port, [])
    terminator.kill.side_effect = lambda pid: pid == 1

    with patch('redpill.lib.ui.confirm') as mock_confirm:
        result = runner.invoke(app, ["free", "3000-3002"])

    assert result.exit_code == 0
    mock_confirm.assert_not_called()
    assert [call.args[0] for call in inspector.find_processes.call_args_list] == [3000, 3001, 3002]
    assert "Killed process 1 on port 3000" in result.output
    assert "Failed to kill process 2" in result.output
    assert "Freed 1/2" in result.output

def test_free_nothing_found(inspector, terminator):
    result = runner.invoke(app, ["free", "3000", "8080"])
    assert result.exit_code == 0
    assert "No processes found" in result.output
    terminator.kill.assert_not_called()

@pytest.mark.parametrize("command", ["list", "ls"])
def test_list(inspector, proc, command):
    """Test list and its ls alias print the listening ports"""
    inspector.list_all_listening.return_value = [
        PortListing(port=3000, process=proc),
        PortListing(port=5432, process=ProcessRecord(6789, "postgres", "alice", "postgres")),
    ]
    result = runner.invoke(app, [command])

    assert result.exit_code == 0
    assert "3000" in result.output
    assert "5432" in result.output
    assert "2 ports in use" in result.output

def test_list_empty(inspector):
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "No listening ports found" in result.output

def test_list_unexpected_error(inspector):
    """Test unexpected errors are reported and exit with code 1"""
    inspector.list_all_listening.side_effect = RuntimeError("boom")
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 1
    assert "Error: boom" in result.output
