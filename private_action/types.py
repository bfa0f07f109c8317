"""Type definitions for the private action loader."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

ALWAYS_POST_IF = "always()"


def input_env_name(name: str) -> str:
    """Environment variable the CI host stores an action input in."""
    # Spaces become underscores, as the CI host does for its own inputs
    return f"INPUT_{name.replace(' ', '_').upper()}"


class LifecyclePhase(Enum):
    """Lifecycle phase of one loader invocation."""

    MAIN = "main"
    POST = "post"


class CachePolicy(Enum):
    """What to do when a checkout directory already exists.

    REUSE keeps the existing checkout without fetching (fast, may be stale).
    REFRESH deletes it and clones again.
    """

    REUSE = "reuse"
    REFRESH = "refresh"


@dataclass(frozen=True)
class ActionReference:
    """A repository reference of the form "owner/repo[@ref]".

    Attributes:
        owner_repo: Repository identifier on the git host (e.g. "acme/widgets")
        ref: Branch, tag or SHA to check out, or None for the default branch
    """

    owner_repo: str
    ref: Optional[str] = None

    @classmethod
    def parse(cls, value: str) -> ActionReference:
        """Parse an "owner/repo[@ref]" string.

        Raises:
            ConfigurationError: If the repository part is empty
        """
        from private_action.errors import ConfigurationError

        owner_repo, _, ref = value.strip().partition("@")
        owner_repo = owner_repo.strip()
        ref = ref.strip()

        if not owner_repo:
            raise ConfigurationError(
                f"Invalid repository reference: {value!r}. "
                f"Expected 'owner/repo' or 'owner/repo@ref'"
            )

        return cls(owner_repo=owner_repo, ref=ref or None)

    def __str__(self) -> str:
        return f"{self.owner_repo}@{self.ref}" if self.ref else self.owner_repo


@dataclass
class InputSpec:
    """Declared input of a nested action.

    Attributes:
        name: Input name as written in action.yml
        required: Whether the action requires a value
        default: Default value, already converted to a string
        description: Human-readable description
    """

    name: str
    required: bool = False
    default: Optional[str] = None
    description: str = ""

    @property
    def env_name(self) -> str:
        """Environment variable the nested action reads this input from."""
        return input_env_name(self.name)


@dataclass
class ActionManifest:
    """Parsed action.yml of the nested action.

    Only the fields the loader acts on are kept.

    Attributes:
        name: Action name (required)
        main: Path of the main entry point, relative to the action directory
        post: Path of the post entry point, if any
        post_if: Condition under which post runs, if any
        inputs: Declared inputs, in declaration order
        description: Action description
        source_path: Path to the action.yml file
    """

    name: str
    main: str
    post: Optional[str] = None
    post_if: Optional[str] = None
    inputs: List[InputSpec] = field(default_factory=list)
    description: str = ""
    source_path: Optional[Path] = None

    def get_input(self, name: str) -> Optional[InputSpec]:
        """Get input definition by name."""
        for inp in self.inputs:
            if inp.name == name:
                return inp
        return None

    def get_required_inputs(self) -> List[InputSpec]:
        """Get all required input definitions."""
        return [inp for inp in self.inputs if inp.required]

    @property
    def has_post(self) -> bool:
        return bool(self.post)

    @property
    def post_is_unconditional(self) -> bool:
        """True when post-if is absent or the always-run literal."""
        return not self.post_if or self.post_if == ALWAYS_POST_IF


@dataclass
class InputProjection:
    """Outcome of projecting action inputs into an environment.

    Attributes:
        env: Complete environment for the child process
        applied: Variables set from defaults (env name -> value)
        summary: Input name -> "provided" | "default" | "skipped" | "missing"
        errors: Configuration errors for required inputs with no value
    """

    env: Dict[str, str]
    applied: Dict[str, str] = field(default_factory=dict)
    summary: Dict[str, str] = field(default_factory=dict)
    errors: List[Exception] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass
class DispatchResult:
    """Summary of one lifecycle phase run.

    Attributes:
        phase: The phase that ran
        action_name: Name of the nested action
        checkout: Checkout directory used
        entry_point: Script that was executed, or None if none ran
        cleaned_up: Whether the checkout was deleted
    """

    phase: LifecyclePhase
    action_name: str
    checkout: Path
    entry_point: Optional[Path] = None
    cleaned_up: bool = False
