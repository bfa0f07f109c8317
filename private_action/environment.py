"""Projection of nested action inputs into the child process environment."""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence

from private_action import display
from private_action.errors import RequiredInputMissingError
from private_action.types import InputProjection, InputSpec


def project_inputs(
    inputs: Sequence[InputSpec],
    base_env: Mapping[str, str],
    action_name: Optional[str] = None,
) -> InputProjection:
    """Build the environment the nested action will see.

    For each declared input, in declaration order:
    1. A value already present in base_env always wins
    2. Optional inputs without a default are skipped
    3. Required inputs without a default are recorded as errors
    4. Otherwise the default is applied

    An empty default counts as no default.

    base_env is never modified; the result carries a copy.

    Args:
        inputs: Declared inputs of the nested action
        base_env: Environment the loader itself runs with
        action_name: Name of the nested action (for error messages)

    Returns:
        InputProjection with the child environment and per-input outcome
    """
    env: Dict[str, str] = dict(base_env)
    projection = InputProjection(env=env)

    if not inputs:
        display.info("No inputs defined in action.")
        return projection

    display.info(f"The configured inputs are {', '.join(inp.name for inp in inputs)}")

    for inp in inputs:
        env_name = inp.env_name

        if env.get(env_name):
            display.info(f"Input {inp.name} already set")
            projection.summary[inp.name] = "provided"
            continue

        if not inp.default:
            if not inp.required:
                display.info(f"Input {inp.name} not required and has no default")
                projection.summary[inp.name] = "skipped"
                continue

            err = RequiredInputMissingError(inp.name, action_name)
            display.error(str(err))
            projection.errors.append(err)
            projection.summary[inp.name] = "missing"
            continue

        display.info(f"Input {inp.name} not set.  Using default '{inp.default}'")
        env[env_name] = inp.default
        projection.applied[env_name] = inp.default
        projection.summary[inp.name] = "default"

    return projection
