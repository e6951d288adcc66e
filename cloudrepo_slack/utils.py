"""the beautiful world start from here."""

from __future__ import annotations

import hashlib

SOURCE_BASE_URL = "https://source.cloud.google.com"
GRAVATAR_BASE_URL = "https://www.gravatar.com/avatar/"


def split_resource_name(name: str) -> tuple[str, str] | None:
    """
    Extract ``(project_id, repo_name)`` from a repository resource name.

    Example
    -------
    'projects/p1/repos/r1' → ('p1', 'r1')

    Anything that is not exactly four ``/``-separated segments → None.
    """
    parts = (name or "").split("/")
    if len(parts) != 4:
        return None
    return parts[1], parts[3]


def commit_url(project_id: str, repo_name: str, commit_id: str) -> str:
    """Link to a commit in the Cloud Source Repositories browser. No escaping."""
    return f"{SOURCE_BASE_URL}/{project_id}/{repo_name}/+/{commit_id}"


def gravatar_url(email: str) -> str:
    """Return the Gravatar avatar URL for ``email``, or '' when it is empty."""
    email = (email or "").strip()
    if not email:
        return ""
    digest = hashlib.md5(email.encode()).hexdigest()
    return GRAVATAR_BASE_URL + digest
