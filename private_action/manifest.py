"""Loading and validation of the nested action's action.yml."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional, Tuple

import yaml

from private_action import display
from private_action.errors import (
    ManifestMalformedError,
    ManifestNotFoundError,
    ManifestParseError,
)
from private_action.types import ActionManifest, InputSpec

MANIFEST_FILENAMES = ("action.yml", "action.yaml")


def find_manifest(action_path: Path) -> Path:
    """Locate the manifest file in action_path.

    Raises:
        ManifestNotFoundError: If neither action.yml nor action.yaml exists
    """
    searched_paths: List[str] = []
    for filename in MANIFEST_FILENAMES:
        candidate = action_path / filename
        searched_paths.append(str(candidate))
        if candidate.is_file():
            return candidate
    raise ManifestNotFoundError(str(action_path), searched_paths)


def load_manifest(
    checkout: Path,
    action_directory: Optional[str] = None,
) -> Tuple[ActionManifest, Path]:
    """Load the action manifest from a checkout.

    Args:
        checkout: Checkout directory of the action repository
        action_directory: Subdirectory holding the action, for repositories
            with more than one action

    Returns:
        Tuple of (manifest, action_path)

    Raises:
        ManifestNotFoundError: If there is no action.yml
        ManifestParseError: If the file cannot be read or parsed
        ManifestMalformedError: If required fields are missing
    """
    action_path = checkout / action_directory if action_directory else checkout

    display.info(f"Reading {action_path}")
    manifest_file = find_manifest(action_path)

    return parse_manifest(manifest_file), action_path


def parse_manifest(file_path: Path) -> ActionManifest:
    """Parse an action.yml file into an ActionManifest.

    Raises:
        ManifestParseError: If the file cannot be read or parsed
        ManifestMalformedError: If required fields are missing
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ManifestParseError(str(file_path), f"YAML parse error: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestParseError(str(file_path), f"File read error: {e}")

    if not isinstance(data, dict):
        raise ManifestMalformedError(str(file_path), "expected a YAML mapping")

    runs = data.get("runs")
    if not (data.get("name") and isinstance(runs, dict) and runs.get("main")):
        raise ManifestMalformedError(str(file_path))

    post_if = runs.get("post-if")

    return ActionManifest(
        name=str(data["name"]),
        main=str(runs["main"]),
        post=str(runs["post"]) if runs.get("post") else None,
        post_if=str(post_if) if post_if else None,
        inputs=_parse_inputs(data.get("inputs"), file_path),
        description=str(data.get("description") or ""),
        source_path=file_path,
    )


def _parse_inputs(inputs_data: Any, file_path: Path) -> List[InputSpec]:
    """Parse the 'inputs' mapping of action.yml.

    Args:
        inputs_data: Value of the 'inputs' key (mapping or None)
        file_path: Path to the manifest (for error messages)

    Returns:
        List of InputSpec objects, in declaration order
    """
    if inputs_data is None:
        return []

    if not isinstance(inputs_data, dict):
        raise ManifestMalformedError(
            str(file_path),
            f"'inputs' must be a mapping, got: {type(inputs_data).__name__}",
        )

    inputs: List[InputSpec] = []

    for name, spec in inputs_data.items():
        if spec is None:
            spec = {}
        if not isinstance(spec, dict):
            raise ManifestMalformedError(
                str(file_path),
                f"input '{name}' must be a mapping, got: {type(spec).__name__}",
            )

        inputs.append(
            InputSpec(
                name=str(name),
                required=_as_bool(spec.get("required", False)),
                default=_as_env_value(spec.get("default")),
                description=str(spec.get("description") or ""),
            )
        )

    return inputs


def _as_bool(value: Any) -> bool:
    # action.yml files in the wild use both YAML booleans and quoted strings
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def _as_env_value(value: Any) -> Optional[str]:
    # Empty string, false and 0 count as no default
    if value is None or (isinstance(value, (str, int, float)) and not value):
        return None
    if value is True:
        return "true"
    return str(value)
