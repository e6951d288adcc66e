"""Turn ref updates into notification facts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Optional

from cloudrepo_slack.schemas import ChangeEnvelope, RefUpdate
from cloudrepo_slack.utils import commit_url, split_resource_name

logger = logging.getLogger(__name__)

UPDATE_TYPE_COLORS = MappingProxyType(
    {
        "CREATE": "#2e77ff",
        "UPDATE_FAST_FORWARD": "#60ff55",
        "UPDATE_NON_FAST_FORWARD": "#ff2e2e",
        "DELETE": "#ff6d2e",
    }
)


@dataclass(frozen=True)
class NotificationFact:
    resource_name: str
    project_id: str
    repo_name: str
    commit_url: str
    ref_name: str
    author_email: str
    update_type: str
    color: str
    new_id: str
    event_time: Optional[datetime] = None


def build_fact(envelope: ChangeEnvelope, update: RefUpdate) -> NotificationFact | None:
    """
    Map one ref update to a fact worth notifying about.

    Returns None (skip, not an error) when the update type has no color or
    the envelope name is not a ``projects/{p}/repos/{r}`` resource.
    """
    color = UPDATE_TYPE_COLORS.get(update.update_type)
    if color is None:
        logger.debug("skip %s: unsupported update type %r", update.ref_name, update.update_type)
        return None

    ids = split_resource_name(envelope.name)
    if ids is None:
        logger.debug("skip %s: not a repository resource %r", update.ref_name, envelope.name)
        return None
    project_id, repo_name = ids

    return NotificationFact(
        resource_name=envelope.name,
        project_id=project_id,
        repo_name=repo_name,
        commit_url=commit_url(project_id, repo_name, update.new_id),
        ref_name=update.ref_name,
        author_email=envelope.ref_update_event.email,
        update_type=update.update_type,
        color=color,
        new_id=update.new_id,
        event_time=envelope.event_time,
    )
