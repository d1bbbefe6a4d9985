"""Optional rewriting of file path cells into repository links."""

import logging
from pathlib import Path
from typing import Callable, Optional

logger = logging.getLogger(__name__)


def identity(value: str) -> str:
    return value


def make_file_linker(repo_url: Optional[str], head_ref: Optional[str],
                     root: str = ".") -> Callable[[str], str]:
    """Build a cell transform that links values naming an existing file.

    Args:
        repo_url: Repository web URL (e.g., "https://github.com/org/repo")
        head_ref: Branch or commit the links point at
        root: Checkout directory that relative paths are resolved against

    Returns:
        Transform mapping "./spec/foo_spec.rb" to
        "[./spec/foo_spec.rb](https://github.com/org/repo/blob/<ref>/spec/foo_spec.rb)".
        Values that are not existing files are returned unchanged. Without a
        repo URL or ref, the identity transform is returned.
    """
    if not repo_url or not head_ref:
        logger.debug("No repository URL or head ref, file links disabled")
        return identity

    base = repo_url.rstrip("/")
    checkout = Path(root)

    def link(value: str) -> str:
        relative = value[2:] if value.startswith("./") else value
        if not relative or Path(relative).is_absolute():
            return value
        try:
            if not (checkout / relative).is_file():
                return value
        except (OSError, ValueError):
            # names too long for the filesystem, embedded NUL bytes
            return value
        return f"[{value}]({base}/blob/{head_ref}/{relative})"

    return link
