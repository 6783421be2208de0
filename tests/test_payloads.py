import json

import pytest

from bitbucket_webhooks.schemas.events import (
    EVENT_TYPES,
    HEADER_NAMES,
    EventKey,
    collect_headers,
    payload_type,
)
from bitbucket_webhooks.schemas.payloads import (
    IssueCommentCreatedEvent,
    IssueEvent,
    PullRequestApprovalRemovedEvent,
    PullRequestCommentDeletedEvent,
    PullRequestCommentEvent,
    PullRequestEvent,
    RepoCommitStatusEvent,
    RepoCommitStatusUpdatedEvent,
    RepoPushEvent,
)


def test_catalog_covers_every_event_key():
    assert set(EVENT_TYPES) == {key.value for key in EventKey}
    assert len(EVENT_TYPES) == 17


def test_catalog_maps_each_key_to_its_model():
    assert {key: model.__name__ for key, model in EVENT_TYPES.items()} == {
        "repo:push": "RepoPushEvent",
        "repo:fork": "RepoForkEvent",
        "repo:commit_comment_created": "RepoCommitCommentCreatedEvent",
        "repo:commit_status_created": "RepoCommitStatusCreatedEvent",
        "repo:commit_status_updated": "RepoCommitStatusUpdatedEvent",
        "issue:created": "IssueCreatedEvent",
        "issue:updated": "IssueUpdatedEvent",
        "issue:comment_created": "IssueCommentCreatedEvent",
        "pullrequest:created": "PullRequestCreatedEvent",
        "pullrequest:updated": "PullRequestUpdatedEvent",
        "pullrequest:approved": "PullRequestApprovedEvent",
        "pullrequest:unapproved": "PullRequestApprovalRemovedEvent",
        "pullrequest:fulfilled": "PullRequestMergedEvent",
        "pullrequest:rejected": "PullRequestDeclinedEvent",
        "pullrequest:comment_created": "PullRequestCommentCreatedEvent",
        "pullrequest:comment_updated": "PullRequestCommentUpdatedEvent",
        "pull_request:comment_deleted": "PullRequestCommentDeletedEvent",
    }


def test_comment_deleted_key_keeps_underscore():
    assert payload_type("pull_request:comment_deleted") is PullRequestCommentDeletedEvent
    assert payload_type("pullrequest:comment_deleted") is None


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        EVENT_TYPES["repo:imported"] = RepoPushEvent


def test_payload_type_lookup():
    assert payload_type("repo:push") is RepoPushEvent
    assert payload_type("pullrequest:unapproved") is PullRequestApprovalRemovedEvent
    assert payload_type("repo:imported") is None


@pytest.mark.parametrize("event_key, base", [
    ("repo:commit_status_updated", RepoCommitStatusEvent),
    ("issue:comment_created", IssueEvent),
    ("pullrequest:fulfilled", PullRequestEvent),
    ("pull_request:comment_deleted", PullRequestCommentEvent),
])
def test_event_families_share_base_fields(event_key, base):
    assert set(base.model_fields) <= set(EVENT_TYPES[event_key].model_fields)


def test_empty_body_gives_zero_values():
    event = RepoPushEvent.model_validate_json(b"{}")
    assert event.repository.name == ""
    assert event.repository.is_private is False
    assert event.actor.links.html.href == ""
    assert event.push.changes == []


def test_nulls_fall_back_to_zero_values():
    body = {
        "issue": {"id": 7, "component": None, "milestone": None, "created_on": None},
        "comment": {"id": None, "parent": None, "inline": None},
    }
    event = IssueCommentCreatedEvent.model_validate_json(json.dumps(body))
    assert event.issue.id == 7
    assert event.issue.component == ""
    assert event.issue.milestone.name == ""
    assert event.issue.created_on is None
    assert event.comment.id == 0
    assert event.comment.parent.id == 0
    assert event.comment.inline.from_ is None


def test_unknown_fields_are_ignored():
    body = {"repository": {"name": "test-repo", "mainbranch": {"name": "main"}}, "extra": 1}
    event = RepoPushEvent.model_validate_json(json.dumps(body))
    assert event.repository.name == "test-repo"
    assert not hasattr(event, "extra")


def test_timestamps_are_parsed():
    body = {"commit_status": {"created_on": "2015-11-19T20:37:35.547563+00:00"}}
    event = RepoCommitStatusUpdatedEvent.model_validate_json(json.dumps(body))
    assert event.commit_status.created_on.year == 2015
    assert event.commit_status.updated_on is None


def test_self_link_alias():
    body = {"actor": {"links": {"self": {"href": "https://api.bitbucket.org/2.0/users/username"}}}}
    event = RepoPushEvent.model_validate_json(json.dumps(body))
    assert event.actor.links.self_.href == "https://api.bitbucket.org/2.0/users/username"


def test_collect_headers_fills_missing_with_empty():
    headers = collect_headers({"x-event-key": "repo:push", "x-hook-uuid": "abc", "Content-Type": "application/json"})
    assert set(headers) == set(HEADER_NAMES)
    assert headers["X-Event-Key"] == "repo:push"
    assert headers["X-Hook-UUID"] == "abc"
    assert headers["X-Request-UUID"] == ""
    assert "Content-Type" not in headers


def test_collect_headers_is_read_only():
    headers = collect_headers({"X-Event-Key": "repo:push"})
    with pytest.raises(TypeError):
        headers["X-Event-Key"] = "repo:fork"
