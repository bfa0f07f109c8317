"""Resolution of repository references to local checkouts."""

from __future__ import annotations

import re
import shutil
from pathlib import Path
from typing import Optional

from private_action import display
from private_action.errors import GitCommandError
from private_action.git import GitClient
from private_action.types import ActionReference, CachePolicy

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9]")


def safe_name(owner_repo: str) -> str:
    """Filesystem-safe directory name for a repository.

    Every non-alphanumeric character becomes '_', so "acme/widgets" and
    "acme/wid-gets" map to different directories.
    """
    return _UNSAFE_CHARS.sub("_", owner_repo)


class RepositoryResolver:
    """Resolves ActionReference objects to checkouts under a work root.

    Attributes:
        work_root: Directory all checkouts are placed under
        host: Git host name (e.g. "github.com")
        cache_policy: Whether existing checkouts are reused or re-cloned
    """

    def __init__(
        self,
        work_root: Path,
        token: str,
        git: Optional[GitClient] = None,
        host: str = "github.com",
        cache_policy: CachePolicy = CachePolicy.REUSE,
    ):
        """Initialize the resolver.

        The token is registered for redaction immediately, before anything
        can print a URL containing it.

        Args:
            work_root: Root directory for checkouts
            token: Credential used in the clone URL
            git: Git client (a default GitClient if None)
            host: Git host name
            cache_policy: Existing checkout handling
        """
        display.info("Masking token just in case")
        display.add_secret(token)

        self.work_root = Path(work_root)
        self._token = token
        self.git = git or GitClient()
        self.host = host
        self.cache_policy = cache_policy

    def repo_directory(self, reference: ActionReference) -> Path:
        """Checkout directory for a reference."""
        return self.work_root / safe_name(reference.owner_repo)

    def public_url(self, reference: ActionReference) -> str:
        """Clone URL without credentials (what is persisted in the checkout)."""
        return f"https://{self.host}/{reference.owner_repo}.git"

    def authenticated_url(self, reference: ActionReference) -> str:
        """Clone URL carrying the token."""
        return f"https://{self._token}@{self.host}/{reference.owner_repo}.git"

    def resolve(self, reference: ActionReference) -> Path:
        """Make sure a checkout of reference exists and return its path.

        Args:
            reference: Repository and optional ref to check out

        Returns:
            Path of the checkout directory

        Raises:
            GitCommandError: If any git command fails
        """
        repo_directory = self.repo_directory(reference)

        if repo_directory.exists() and self.cache_policy is CachePolicy.REFRESH:
            display.info(f"Removing existing checkout {repo_directory}")
            shutil.rmtree(repo_directory)

        if repo_directory.exists():
            display.info("Repo is already cloned.")
        else:
            ref_info = f" (SHA: {reference.ref})" if reference.ref else ""
            display.info(
                f"Cloning action from {self.authenticated_url(reference)}{ref_info}"
            )
            self.git.clone(self.authenticated_url(reference), repo_directory)

            # Nothing else may touch the checkout before the token is gone
            display.info("Remove github token from config")
            try:
                self.git.set_remote_url(repo_directory, self.public_url(reference))
            except GitCommandError:
                # The checkout still holds the token and must not be reused
                shutil.rmtree(repo_directory, ignore_errors=True)
                raise

        if reference.ref:
            display.info(f"Checking out {reference.ref}")
            self.git.checkout(repo_directory, reference.ref)

        return repo_directory
