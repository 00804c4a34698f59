"""Tests for the subprocess wrapper."""

import subprocess
from unittest.mock import patch

import pytest

from dotfiles_bootstrap.errors import CommandError
from dotfiles_bootstrap.lib.command import fmt_argv, run_cmd


def test_success_returns_captured_output() -> None:
    with patch("dotfiles_bootstrap.lib.command.subprocess.run") as mock_run:
        mock_run.return_value = subprocess.CompletedProcess(["git", "status"], 0, stdout="clean\n", stderr="")

        result = run_cmd(["git", "status"])

    assert result.ok
    assert result.stdout == "clean\n"
    kwargs = mock_run.call_args.kwargs
    assert kwargs["stdout"] is subprocess.PIPE
    assert kwargs["stderr"] is subprocess.PIPE


def test_interactive_does_not_capture() -> None:
    with patch("dotfiles_bootstrap.lib.command.subprocess.run") as mock_run:
        mock_run.return_value = subprocess.CompletedProcess(["chsh"], 0, stdout=None, stderr=None)

        result = run_cmd(["chsh", "-s", "/bin/zsh"], interactive=True)

    assert result.stdout == ""
    assert mock_run.call_args.kwargs["stdout"] is None


def test_failure_raises_command_error_with_exit_code() -> None:
    with patch("dotfiles_bootstrap.lib.command.subprocess.run") as mock_run:
        mock_run.return_value = subprocess.CompletedProcess(
            ["git", "pull"], 1, stdout="", stderr="fatal: not a git repository"
        )

        with pytest.raises(CommandError) as exc_info:
            run_cmd(["git", "pull"])

    assert exc_info.value.returncode == 1
    assert exc_info.value.exit_code == 1
    assert exc_info.value.stderr == "fatal: not a git repository"
    assert str(exc_info.value) == "Command failed (1): git pull"


def test_failure_without_check_returns_result() -> None:
    with patch("dotfiles_bootstrap.lib.command.subprocess.run") as mock_run:
        mock_run.return_value = subprocess.CompletedProcess(["false"], 3, stdout="", stderr="")

        result = run_cmd(["false"], check=False)

    assert result.returncode == 3
    assert not result.ok


def test_missing_executable_maps_to_127() -> None:
    with patch("dotfiles_bootstrap.lib.command.subprocess.run", side_effect=FileNotFoundError("nope")):
        with pytest.raises(CommandError) as exc_info:
            run_cmd(["/no/such/upgrade.sh"])

    assert exc_info.value.exit_code == 127


def test_dry_run_executes_nothing() -> None:
    with patch("dotfiles_bootstrap.lib.command.subprocess.run") as mock_run:
        result = run_cmd(["rm", "-rf", "/"], dry_run=True)

    mock_run.assert_not_called()
    assert result.returncode == 0


def test_env_is_layered_over_process_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KEEP_ME", "1")
    with patch("dotfiles_bootstrap.lib.command.subprocess.run") as mock_run:
        mock_run.return_value = subprocess.CompletedProcess(["true"], 0, stdout="", stderr="")

        run_cmd(["true"], env={"ZSH": "/x"})

    env = mock_run.call_args.kwargs["env"]
    assert env["ZSH"] == "/x"
    assert env["KEEP_ME"] == "1"


def test_fmt_argv_quotes_arguments() -> None:
    assert fmt_argv(["sh", "-c", "echo hi", ""]) == "sh -c 'echo hi' ''"


def test_signal_exit_maps_to_shell_convention() -> None:
    with patch("dotfiles_bootstrap.lib.command.subprocess.run") as mock_run:
        mock_run.return_value = subprocess.CompletedProcess(["git", "clone"], -15, stdout="", stderr="")

        with pytest.raises(CommandError) as exc_info:
            run_cmd(["git", "clone"])

    assert exc_info.value.exit_code == 143
