from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Type

from bitbucket_webhooks.schemas import payloads
from bitbucket_webhooks.schemas.payloads import Payload

EVENT_KEY_HEADER = "X-Event-Key"

# Request headers handed to event handlers
# https://confluence.atlassian.com/bitbucket/event-payloads-740262817.html#EventPayloads-HTTPHeaders
HEADER_NAMES = (
    EVENT_KEY_HEADER,
    "X-Hook-UUID",
    "X-Request-UUID",
    "X-Attempt-Number",
)

# Read-only header name -> value mapping, built per request
Headers = Mapping[str, str]


class EventKey(str, Enum):
    REPO_PUSH = "repo:push"
    REPO_FORK = "repo:fork"
    REPO_COMMIT_COMMENT_CREATED = "repo:commit_comment_created"
    REPO_COMMIT_STATUS_CREATED = "repo:commit_status_created"
    REPO_COMMIT_STATUS_UPDATED = "repo:commit_status_updated"
    ISSUE_CREATED = "issue:created"
    ISSUE_UPDATED = "issue:updated"
    ISSUE_COMMENT_CREATED = "issue:comment_created"
    PULL_REQUEST_CREATED = "pullrequest:created"
    PULL_REQUEST_UPDATED = "pullrequest:updated"
    PULL_REQUEST_APPROVED = "pullrequest:approved"
    PULL_REQUEST_UNAPPROVED = "pullrequest:unapproved"
    PULL_REQUEST_FULFILLED = "pullrequest:fulfilled"
    PULL_REQUEST_REJECTED = "pullrequest:rejected"
    PULL_REQUEST_COMMENT_CREATED = "pullrequest:comment_created"
    PULL_REQUEST_COMMENT_UPDATED = "pullrequest:comment_updated"
    # Bitbucket sends this one with an underscore
    PULL_REQUEST_COMMENT_DELETED = "pull_request:comment_deleted"


EVENT_TYPES: Mapping[str, Type[Payload]] = MappingProxyType({
    EventKey.REPO_PUSH.value: payloads.RepoPushEvent,
    EventKey.REPO_FORK.value: payloads.RepoForkEvent,
    EventKey.REPO_COMMIT_COMMENT_CREATED.value: payloads.RepoCommitCommentCreatedEvent,
    EventKey.REPO_COMMIT_STATUS_CREATED.value: payloads.RepoCommitStatusCreatedEvent,
    EventKey.REPO_COMMIT_STATUS_UPDATED.value: payloads.RepoCommitStatusUpdatedEvent,
    EventKey.ISSUE_CREATED.value: payloads.IssueCreatedEvent,
    EventKey.ISSUE_UPDATED.value: payloads.IssueUpdatedEvent,
    EventKey.ISSUE_COMMENT_CREATED.value: payloads.IssueCommentCreatedEvent,
    EventKey.PULL_REQUEST_CREATED.value: payloads.PullRequestCreatedEvent,
    EventKey.PULL_REQUEST_UPDATED.value: payloads.PullRequestUpdatedEvent,
    EventKey.PULL_REQUEST_APPROVED.value: payloads.PullRequestApprovedEvent,
    EventKey.PULL_REQUEST_UNAPPROVED.value: payloads.PullRequestApprovalRemovedEvent,
    EventKey.PULL_REQUEST_FULFILLED.value: payloads.PullRequestMergedEvent,
    EventKey.PULL_REQUEST_REJECTED.value: payloads.PullRequestDeclinedEvent,
    EventKey.PULL_REQUEST_COMMENT_CREATED.value: payloads.PullRequestCommentCreatedEvent,
    EventKey.PULL_REQUEST_COMMENT_UPDATED.value: payloads.PullRequestCommentUpdatedEvent,
    EventKey.PULL_REQUEST_COMMENT_DELETED.value: payloads.PullRequestCommentDeletedEvent,
})


def payload_type(event_key: str) -> Optional[Type[Payload]]:
    """Return the payload model for an event key, or None if Bitbucket has no such event"""
    return EVENT_TYPES.get(event_key)


def collect_headers(source: Mapping[str, str]) -> Headers:
    """Pick the Bitbucket headers out of the request headers.

    Lookup is case-insensitive. Missing headers are present with an empty value.
    """
    lowered = {name.lower(): value for name, value in source.items()}
    return MappingProxyType(
        {name: lowered.get(name.lower(), "") for name in HEADER_NAMES}
    )
