"""Shared test fixtures and configuration."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
from rich.console import Console

from private_action import display
from private_action.config import LoaderConfig


@pytest.fixture(autouse=True)
def reset_display(monkeypatch: pytest.MonkeyPatch):
    """Start every test with no registered secrets, outside GitHub Actions."""
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
    display.reset()
    yield
    display.reset()


@pytest.fixture
def console_output(monkeypatch: pytest.MonkeyPatch) -> io.StringIO:
    """Capture everything the display module prints."""
    buffer = io.StringIO()
    monkeypatch.setattr(
        display,
        "console",
        Console(file=buffer, color_system=None, width=200, soft_wrap=True, highlight=False),
    )
    return buffer


class FakeGit:
    """Records git operations; clone creates the target directory."""

    def __init__(self, files: Optional[Dict[str, str]] = None) -> None:
        self.calls: List[tuple] = []
        self.files = files or {}

    def clone(self, url: str, directory: Any) -> None:
        self.calls.append(("clone", url, Path(directory)))
        directory = Path(directory)
        directory.mkdir(parents=True)
        for relative, content in self.files.items():
            target = directory / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)

    def set_remote_url(self, directory: Any, url: str, remote: str = "origin") -> None:
        self.calls.append(("set_remote_url", Path(directory), url))

    def checkout(self, directory: Any, ref: str) -> None:
        self.calls.append(("checkout", Path(directory), ref))

    def ops(self) -> List[str]:
        return [call[0] for call in self.calls]


class FakeRunner:
    """Records entry point runs instead of starting processes."""

    def __init__(self, fail_on: Optional[str] = None) -> None:
        self.runs: List[Dict[str, Any]] = []
        self.fail_on = fail_on

    def run(self, script: Path, env: Dict[str, str]) -> None:
        from private_action.errors import EntryPointExecutionError

        self.runs.append({"script": script, "env": dict(env)})
        if self.fail_on and script.name == self.fail_on:
            raise EntryPointExecutionError(str(script), 1)


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit()


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def make_config(tmp_path: Path):
    """Factory for LoaderConfig pointing at a temporary work directory."""

    def _make(**overrides: Any) -> LoaderConfig:
        values: Dict[str, Any] = {
            "token": "s3cr3t-token",
            "repo_name": "acme/widgets",
            "work_directory": tmp_path / ".private-action",
        }
        values.update(overrides)
        return LoaderConfig(**values)

    return _make
