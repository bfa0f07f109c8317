"""Lifecycle dispatch of a private action's main and post entry points."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Mapping, Optional

from private_action import display
from private_action.config import LoaderConfig
from private_action.environment import project_inputs
from private_action.errors import UnsupportedPostConditionError
from private_action.git import GitClient
from private_action.manifest import load_manifest
from private_action.resolver import RepositoryResolver
from private_action.runner import EntryPointRunner
from private_action.types import (
    ActionReference,
    DispatchResult,
    InputProjection,
    LifecyclePhase,
)


class LifecycleDispatcher:
    """Runs one lifecycle phase of a private action.

    The dispatcher:
    1. Resolves the repository reference to a checkout
    2. Loads the nested action.yml
    3. Projects input defaults into the child environment
    4. Runs the main or post entry point
    5. Deletes the checkout after a successful post phase

    Main and post are separate invocations; the only state carried between
    them is the checkout directory.
    """

    def __init__(
        self,
        config: LoaderConfig,
        git: Optional[GitClient] = None,
        runner: Optional[EntryPointRunner] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """Initialize the dispatcher.

        Args:
            config: Loader configuration
            git: Git client (default GitClient if None)
            runner: Entry point runner (built from config if None)
            environ: Base environment for the child (os.environ if None)
        """
        self.config = config
        self.resolver = RepositoryResolver(
            work_root=config.work_directory,
            token=config.token,
            git=git,
            host=config.git_host,
            cache_policy=config.cache_policy,
        )
        self.runner = runner or EntryPointRunner(
            interpreter=config.interpreter,
            timeout=config.timeout,
        )
        self._environ = environ

    def run(self, phase: LifecyclePhase) -> DispatchResult:
        """Run the given lifecycle phase.

        Raises:
            PrivateActionError: On the first failing step; nothing after it runs
        """
        reference = ActionReference.parse(self.config.repo_name)

        with display.group("Cloning private action"):
            checkout = self.resolver.resolve(reference)
            manifest, action_path = load_manifest(checkout, self.config.action_directory)

        with display.group("Input Validation"):
            base_env = os.environ if self._environ is None else self._environ
            projection = project_inputs(manifest.inputs, base_env, manifest.name)

        result = DispatchResult(phase=phase, action_name=manifest.name, checkout=checkout)

        if phase is LifecyclePhase.MAIN:
            self._check_inputs(projection)
            display.info(f"Running main for action {manifest.name}")
            result.entry_point = action_path / manifest.main
            self.runner.run(result.entry_point, projection.env)
            return result

        if not manifest.has_post:
            display.info("Action has no 'post' step")
        else:
            if not manifest.post_is_unconditional:
                raise UnsupportedPostConditionError(manifest.post_if or "")

            self._check_inputs(projection)
            display.info(f"Running post for action {manifest.name}")
            result.entry_point = action_path / str(manifest.post)
            self.runner.run(result.entry_point, projection.env)

        display.info("Cleaning up repo directory")
        _remove_checkout(checkout)
        result.cleaned_up = True
        return result

    def _check_inputs(self, projection: InputProjection) -> None:
        """Abort before an entry point runs with required inputs unset."""
        if not projection.errors:
            return
        if self.config.fail_on_missing_inputs:
            raise projection.errors[0]
        display.warning(
            f"Continuing with {len(projection.errors)} required input(s) unset"
        )


def _remove_checkout(checkout: Path) -> None:
    if checkout.exists():
        shutil.rmtree(checkout)


def run_action(
    config: LoaderConfig,
    phase: LifecyclePhase,
    git: Optional[GitClient] = None,
    runner: Optional[EntryPointRunner] = None,
) -> DispatchResult:
    """Run one lifecycle phase with a fresh dispatcher.

    Convenience wrapper used by the command line entry point.
    """
    return LifecycleDispatcher(config, git=git, runner=runner).run(phase)
