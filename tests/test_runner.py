"""Tests for running nested action entry points."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from private_action.errors import EntryPointExecutionError, EntryPointNotFoundError
from private_action.runner import EntryPointRunner


@pytest.fixture
def script(tmp_path: Path) -> Path:
    path = tmp_path / "index.js"
    path.write_text("console.log('hi')\n")
    return path


class TestEntryPointRunner:
    """Tests for EntryPointRunner.run."""

    def test_runs_with_interpreter_and_env(self, script: Path) -> None:
        env = {"PATH": "/bin", "INPUT_GREETING": "hello"}

        with patch(
            "private_action.runner.subprocess.run",
            return_value=subprocess.CompletedProcess(args=[], returncode=0),
        ) as mock_run:
            EntryPointRunner().run(script, env)

        mock_run.assert_called_once_with(["node", str(script)], env=env, timeout=None)

    def test_custom_interpreter_and_timeout(self, script: Path) -> None:
        with patch(
            "private_action.runner.subprocess.run",
            return_value=subprocess.CompletedProcess(args=[], returncode=0),
        ) as mock_run:
            EntryPointRunner(interpreter="node20", timeout=30).run(script, {})

        mock_run.assert_called_once_with(["node20", str(script)], env={}, timeout=30)

    def test_missing_script(self, tmp_path: Path) -> None:
        with patch("private_action.runner.subprocess.run") as mock_run:
            with pytest.raises(EntryPointNotFoundError):
                EntryPointRunner().run(tmp_path / "missing.js", {})

        mock_run.assert_not_called()

    def test_non_zero_exit(self, script: Path) -> None:
        with patch(
            "private_action.runner.subprocess.run",
            return_value=subprocess.CompletedProcess(args=[], returncode=3),
        ):
            with pytest.raises(EntryPointExecutionError) as exc_info:
                EntryPointRunner().run(script, {})

        assert exc_info.value.returncode == 3
        assert "exit code 3" in str(exc_info.value)

    def test_timeout(self, script: Path) -> None:
        with patch(
            "private_action.runner.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="node", timeout=5),
        ):
            with pytest.raises(EntryPointExecutionError) as exc_info:
                EntryPointRunner(timeout=5).run(script, {})

        assert exc_info.value.returncode is None
        assert "timed out" in str(exc_info.value)

    def test_interpreter_not_found(self, script: Path) -> None:
        with patch(
            "private_action.runner.subprocess.run",
            side_effect=FileNotFoundError("node"),
        ):
            with pytest.raises(EntryPointExecutionError) as exc_info:
                EntryPointRunner().run(script, {})

        assert "could not start node" in str(exc_info.value)
