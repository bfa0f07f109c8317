"""Unit tests for the display module.

Covers secret redaction and the two output styles: workflow commands under
GitHub Actions and icon lines elsewhere.
"""

import io

import pytest

from private_action import display


class TestRedaction:
    """Tests for add_secret and redact."""

    def test_redact_registered_secret(self) -> None:
        display.add_secret("hunter2")
        assert display.redact("password is hunter2!") == "password is ***!"

    def test_redact_without_secrets(self) -> None:
        assert display.redact("nothing to hide") == "nothing to hide"

    def test_empty_secret_ignored(self) -> None:
        display.add_secret("")
        assert display.redact("abc") == "abc"

    def test_longer_secret_replaced_whole(self) -> None:
        display.add_secret("abc")
        display.add_secret("abcdef")
        assert display.redact("x abcdef y") == "x *** y"

    def test_messages_are_redacted(self, console_output: io.StringIO) -> None:
        display.add_secret("hunter2")
        display.info("url https://hunter2@github.com")
        display.warning("hunter2")
        display.error("hunter2")

        output = console_output.getvalue()
        assert "hunter2" not in output
        assert "url https://***@github.com" in output

    def test_reset_forgets_secrets(self) -> None:
        display.add_secret("hunter2")
        display.reset()
        assert display.redact("hunter2") == "hunter2"


class TestLocalOutput:
    """Tests for output outside GitHub Actions."""

    def test_group_indents(self, console_output: io.StringIO) -> None:
        with display.group("Cloning private action"):
            display.info("inside")
        display.info("outside")

        lines = console_output.getvalue().splitlines()
        assert lines[0] == "▶ Cloning private action"
        assert lines[1] == "  • inside"
        assert lines[2] == "• outside"

    def test_no_workflow_commands(self, console_output: io.StringIO) -> None:
        display.add_secret("hunter2")
        with display.group("Group"):
            display.error("boom")

        output = console_output.getvalue()
        assert "::" not in output
        assert "hunter2" not in output

    def test_markup_not_interpreted(self, console_output: io.StringIO) -> None:
        display.info("[bold]literal[/bold]")
        assert "[bold]literal[/bold]" in console_output.getvalue()


class TestGitHubActionsOutput:
    """Tests for workflow command output."""

    @pytest.fixture(autouse=True)
    def github_actions(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_ACTIONS", "true")

    def test_add_mask(self, console_output: io.StringIO) -> None:
        display.add_secret("hunter2")
        display.add_secret("hunter2")
        assert console_output.getvalue().splitlines() == ["::add-mask::hunter2"]

    def test_group_commands(self, console_output: io.StringIO) -> None:
        with display.group("Input Validation"):
            display.info("hello")

        assert console_output.getvalue().splitlines() == [
            "::group::Input Validation",
            "hello",
            "::endgroup::",
        ]

    def test_nested_groups_emit_once(self, console_output: io.StringIO) -> None:
        with display.group("outer"):
            with display.group("inner"):
                display.info("x")

        assert console_output.getvalue().splitlines() == [
            "::group::outer",
            "x",
            "::endgroup::",
        ]

    def test_group_closed_on_error(self, console_output: io.StringIO) -> None:
        with pytest.raises(RuntimeError):
            with display.group("outer"):
                raise RuntimeError("boom")

        assert console_output.getvalue().splitlines()[-1] == "::endgroup::"

    def test_annotations(self, console_output: io.StringIO) -> None:
        display.warning("careful")
        display.error("broken")
        display.set_failed("failed")
        display.debug("details")

        assert console_output.getvalue().splitlines() == [
            "::warning::careful",
            "::error::broken",
            "::error::failed",
            "::debug::details",
        ]

    def test_print_command(self, console_output: io.StringIO) -> None:
        display.print_command(["git", "checkout", "v2"])
        assert console_output.getvalue().splitlines() == ["[command]git checkout v2"]
