"""Private Action Loader package.

Runs a GitHub Action that lives in a private repository: the repository is
cloned with a token, its action.yml is read, input defaults are applied and
the action's main or post entry point is executed.
"""

from .cli import main
from .config import LoaderConfig, get_input, load_config
from .dispatcher import LifecycleDispatcher, run_action
from .environment import project_inputs
from .errors import (
    ConfigurationError,
    EntryPointError,
    EntryPointExecutionError,
    EntryPointNotFoundError,
    GitCommandError,
    ManifestError,
    ManifestMalformedError,
    ManifestNotFoundError,
    ManifestParseError,
    PrivateActionError,
    RequiredInputMissingError,
    UnsupportedPostConditionError,
)
from .git import GitClient
from .manifest import load_manifest, parse_manifest
from .resolver import RepositoryResolver, safe_name
from .runner import EntryPointRunner
from .types import (
    ActionManifest,
    ActionReference,
    CachePolicy,
    DispatchResult,
    InputProjection,
    InputSpec,
    LifecyclePhase,
)

__all__ = [
    # CLI
    "main",
    # Config
    "LoaderConfig",
    "get_input",
    "load_config",
    # Types
    "ActionManifest",
    "ActionReference",
    "CachePolicy",
    "DispatchResult",
    "InputProjection",
    "InputSpec",
    "LifecyclePhase",
    # Components
    "EntryPointRunner",
    "GitClient",
    "LifecycleDispatcher",
    "RepositoryResolver",
    "load_manifest",
    "parse_manifest",
    "project_inputs",
    "run_action",
    "safe_name",
    # Errors
    "PrivateActionError",
    "ConfigurationError",
    "RequiredInputMissingError",
    "ManifestError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "ManifestMalformedError",
    "UnsupportedPostConditionError",
    "GitCommandError",
    "EntryPointError",
    "EntryPointNotFoundError",
    "EntryPointExecutionError",
]
