"""Custom exceptions for the private action loader."""

from typing import List, Optional, Sequence


class PrivateActionError(Exception):
    """Base exception for all loader errors."""

    pass


class ConfigurationError(PrivateActionError):
    """Raised when loader inputs or settings are missing or invalid."""

    pass


class RequiredInputMissingError(ConfigurationError):
    """Raised when a required action input has no value and no default.

    Attributes:
        input_name: Name of the missing input as declared in action.yml
        action_name: Name of the nested action
    """

    def __init__(self, input_name: str, action_name: Optional[str] = None):
        self.input_name = input_name
        self.action_name = action_name

        where = f" for action '{action_name}'" if action_name else ""
        super().__init__(
            f"Input {input_name} required but not provided and no default is set{where}"
        )


class ManifestError(PrivateActionError):
    """Base class for action.yml loading errors.

    Attributes:
        path: Path of the manifest (or the directory searched for it)
    """

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class ManifestNotFoundError(ManifestError):
    """Raised when no action.yml exists in the action directory.

    Attributes:
        searched_paths: List of paths that were searched
    """

    def __init__(self, action_path: str, searched_paths: Optional[List[str]] = None):
        self.searched_paths = searched_paths or []

        paths_info = ""
        if self.searched_paths:
            paths_info = "\nSearched paths:\n  " + "\n  ".join(self.searched_paths)
        super().__init__(f"No action.yml found in {action_path}{paths_info}", path=action_path)


class ManifestParseError(ManifestError):
    """Raised when action.yml cannot be read or is not valid YAML.

    Attributes:
        parse_error: The underlying parse error message
    """

    def __init__(self, path: str, parse_error: str):
        self.parse_error = parse_error
        super().__init__(f"Failed to parse {path}: {parse_error}", path=path)


class ManifestMalformedError(ManifestError):
    """Raised when action.yml lacks 'name', 'runs' or 'runs.main'."""

    def __init__(self, path: str, detail: Optional[str] = None):
        message = "Malformed action.yml found"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(f"{message}: {path}", path=path)


class UnsupportedPostConditionError(PrivateActionError):
    """Raised when runs.post-if is set to anything other than always().

    Attributes:
        post_if: The post-if expression found in the manifest
    """

    def __init__(self, post_if: str):
        self.post_if = post_if
        super().__init__(
            f"Action has post-if that isn't empty or 'always()': that's not supported yet "
            f"(got {post_if!r})"
        )


class GitCommandError(PrivateActionError):
    """Raised when a git command exits with a non-zero status.

    The command and stderr are expected to be redacted by the caller.

    Attributes:
        command: The git command line that failed
        returncode: Exit status (None if git could not be started)
        stderr: Captured error output
    """

    def __init__(
        self,
        command: Sequence[str],
        returncode: Optional[int],
        stderr: str = "",
    ):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr

        status = f"exit code {returncode}" if returncode is not None else "could not start"
        message = f"Command '{' '.join(self.command)}' failed ({status})"
        if stderr.strip():
            message += f": {stderr.strip()}"
        super().__init__(message)


class EntryPointError(PrivateActionError):
    """Base class for nested entry point failures.

    Attributes:
        script: Path of the entry point script
    """

    def __init__(self, message: str, script: str):
        self.script = script
        super().__init__(message)


class EntryPointNotFoundError(EntryPointError):
    """Raised when the script named by runs.main or runs.post does not exist."""

    def __init__(self, script: str):
        super().__init__(f"Entry point not found: {script}", script=script)


class EntryPointExecutionError(EntryPointError):
    """Raised when an entry point exits non-zero, times out or cannot start.

    Attributes:
        returncode: Exit status (None if the process never finished)
    """

    def __init__(self, script: str, returncode: Optional[int], reason: Optional[str] = None):
        self.returncode = returncode

        if reason:
            message = f"Entry point {script} failed: {reason}"
        else:
            message = f"Entry point {script} failed with exit code {returncode}"
        super().__init__(message, script=script)
