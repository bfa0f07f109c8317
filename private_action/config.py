"""Loader configuration read from the CI host environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from private_action.errors import ConfigurationError
from private_action.types import CachePolicy, input_env_name

DEFAULT_WORK_DIRECTORY = "./.private-action"
DEFAULT_GIT_HOST = "github.com"
DEFAULT_INTERPRETER = "node"

# Inputs of the loader action itself
TOKEN_INPUT = "pal-repo-token"
REPO_NAME_INPUT = "pal-repo-name"
ACTION_DIRECTORY_INPUT = "pal-action-directory"


@dataclass
class LoaderConfig:
    """Complete loader configuration.

    Attributes:
        token: Credential used to clone the private repository
        repo_name: Reference in "owner/repo[@ref]" form
        action_directory: Subdirectory of the action inside the repository
        work_directory: Root directory for checkouts
        git_host: Git host the repository lives on
        interpreter: Program used to run entry points
        cache_policy: Existing checkout handling
        fail_on_missing_inputs: Abort when a required input has no value
        timeout: Entry point timeout in seconds (None waits forever)
    """

    token: str
    repo_name: str
    action_directory: Optional[str] = None
    work_directory: Path = Path(DEFAULT_WORK_DIRECTORY)
    git_host: str = DEFAULT_GIT_HOST
    interpreter: str = DEFAULT_INTERPRETER
    cache_policy: CachePolicy = CachePolicy.REUSE
    fail_on_missing_inputs: bool = True
    timeout: Optional[float] = None


def get_input(
    name: str,
    environ: Optional[Mapping[str, str]] = None,
    required: bool = False,
) -> str:
    """Read an action input the way the CI host exposes it.

    Args:
        name: Input name (e.g. "pal-repo-token")
        environ: Environment to read from (os.environ if None)
        required: Raise if the input is missing or blank

    Returns:
        Trimmed input value ("" if not set)

    Raises:
        ConfigurationError: If required and not supplied
    """
    if environ is None:
        environ = os.environ
    value = environ.get(input_env_name(name), "").strip()
    if required and not value:
        raise ConfigurationError(f"Input required and not supplied: {name}")
    return value


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes", "on"):
        return True
    if lowered in ("false", "0", "no", "off"):
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {value!r}")


def parse_cache_policy(value: str) -> CachePolicy:
    """Parse a cache policy name ("reuse" or "refresh")."""
    try:
        return CachePolicy(value.strip().lower())
    except ValueError:
        valid = ", ".join(p.value for p in CachePolicy)
        raise ConfigurationError(
            f"Invalid cache policy: {value!r}. Valid policies: {valid}"
        ) from None


def load_config(environ: Optional[Mapping[str, str]] = None) -> LoaderConfig:
    """Build a LoaderConfig from action inputs and PAL_* settings.

    Args:
        environ: Environment to read from (os.environ if None)

    Raises:
        ConfigurationError: If a required input is missing or a setting is invalid
    """
    if environ is None:
        environ = os.environ

    token = get_input(TOKEN_INPUT, environ, required=True)
    repo_name = get_input(REPO_NAME_INPUT, environ, required=True)
    action_directory = get_input(ACTION_DIRECTORY_INPUT, environ) or None

    timeout: Optional[float] = None
    timeout_value = environ.get("PAL_ENTRY_POINT_TIMEOUT", "").strip()
    if timeout_value:
        try:
            timeout = float(timeout_value)
        except ValueError:
            raise ConfigurationError(
                f"Invalid PAL_ENTRY_POINT_TIMEOUT: {timeout_value!r}"
            ) from None
        if timeout <= 0:
            raise ConfigurationError("PAL_ENTRY_POINT_TIMEOUT must be positive")

    fail_value = environ.get("PAL_FAIL_ON_MISSING_INPUTS", "").strip()

    return LoaderConfig(
        token=token,
        repo_name=repo_name,
        action_directory=action_directory,
        work_directory=Path(
            environ.get("PAL_WORK_DIRECTORY", "").strip() or DEFAULT_WORK_DIRECTORY
        ),
        git_host=environ.get("PAL_GIT_HOST", "").strip() or DEFAULT_GIT_HOST,
        interpreter=environ.get("PAL_INTERPRETER", "").strip() or DEFAULT_INTERPRETER,
        cache_policy=parse_cache_policy(environ.get("PAL_CACHE_POLICY", "") or "reuse"),
        fail_on_missing_inputs=(
            _parse_bool("PAL_FAIL_ON_MISSING_INPUTS", fail_value) if fail_value else True
        ),
        timeout=timeout,
    )
