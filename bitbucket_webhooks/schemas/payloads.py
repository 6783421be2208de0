"""Bitbucket Cloud webhook payloads.

See the Bitbucket docs for the events and payloads:
https://confluence.atlassian.com/bitbucket/event-payloads-740262817.html

Every field has a zero value so a partial payload still decodes. Date/time
fields stay ``None`` when Bitbucket leaves them out. Strings, integers and
booleans are strict: a JSON value of another type is rejected, not coerced.
"""
from datetime import datetime
from typing import Any, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    model_validator,
)


class Payload(BaseModel):
    """Base for all payload records"""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # A JSON null keeps the field's zero value
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Link(Payload):
    href: StrictStr = ""


class Links(Payload):
    """Common links record. Which links are populated depends on the event."""

    avatar: Link = Field(default_factory=Link)
    html: Link = Field(default_factory=Link)
    self_: Link = Field(default_factory=Link, alias="self")
    commits: Link = Field(default_factory=Link)
    commit: Link = Field(default_factory=Link)


class User(Payload):
    """https://confluence.atlassian.com/bitbucket/event-payloads-740262817.html#EventPayloads-entity_userUser"""

    type: StrictStr = ""
    username: StrictStr = ""
    display_name: StrictStr = ""
    uuid: StrictStr = ""
    links: Links = Field(default_factory=Links)


class Actor(User):
    """The user who triggered the event"""


class Repository(Payload):
    scm: StrictStr = ""
    full_name: StrictStr = ""
    type: StrictStr = ""
    website: StrictStr = ""
    owner: User = Field(default_factory=User)
    uuid: StrictStr = ""
    links: Links = Field(default_factory=Links)
    name: StrictStr = ""
    is_private: StrictBool = False


class Author(Payload):
    raw: StrictStr = ""
    user: User = Field(default_factory=User)


class CommitParent(Payload):
    hash: StrictStr = ""
    links: Links = Field(default_factory=Links)
    type: StrictStr = ""


class Commit(Payload):
    date: Optional[datetime] = None
    parents: List[CommitParent] = []
    message: StrictStr = ""
    hash: StrictStr = ""
    author: Author = Field(default_factory=Author)
    links: Links = Field(default_factory=Links)
    type: StrictStr = ""


class CommitRef(Payload):
    hash: StrictStr = ""


class Branch(Payload):
    name: StrictStr = ""


class OldOrNew(Payload):
    """One end of a push change: the branch or tag before or after the push"""

    repository: Repository = Field(default_factory=Repository)
    target: Commit = Field(default_factory=Commit)
    links: Links = Field(default_factory=Links)
    name: StrictStr = ""
    type: StrictStr = ""


class PushChange(Payload):
    forced: StrictBool = False
    old: OldOrNew = Field(default_factory=OldOrNew)
    new: OldOrNew = Field(default_factory=OldOrNew)
    closed: StrictBool = False
    created: StrictBool = False
    truncated: StrictBool = False
    links: Links = Field(default_factory=Links)
    commits: List[Commit] = []


class Push(Payload):
    changes: List[PushChange] = []


class Content(Payload):
    raw: StrictStr = ""
    html: StrictStr = ""
    markup: StrictStr = ""


class CommentParent(Payload):
    id: StrictInt = 0


class Inline(Payload):
    path: StrictStr = ""
    from_: Any = Field(default=None, alias="from")
    to: StrictInt = 0


class Comment(Payload):
    """https://confluence.atlassian.com/bitbucket/event-payloads-740262817.html#EventPayloads-entity_comment"""

    id: StrictInt = 0
    parent: CommentParent = Field(default_factory=CommentParent)
    content: Content = Field(default_factory=Content)
    inline: Inline = Field(default_factory=Inline)
    created_on: Optional[datetime] = None
    updated_on: Optional[datetime] = None
    links: Links = Field(default_factory=Links)


class CommitStatus(Payload):
    name: StrictStr = ""
    description: StrictStr = ""
    state: StrictStr = ""
    key: StrictStr = ""
    url: StrictStr = ""
    type: StrictStr = ""
    created_on: Optional[datetime] = None
    updated_on: Optional[datetime] = None
    links: Links = Field(default_factory=Links)


class Milestone(Payload):
    name: StrictStr = ""


class Version(Payload):
    name: StrictStr = ""


class Issue(Payload):
    """https://confluence.atlassian.com/bitbucket/event-payloads-740262817.html#EventPayloads-entity_issue"""

    id: StrictInt = 0
    component: StrictStr = ""
    title: StrictStr = ""
    content: Content = Field(default_factory=Content)
    priority: StrictStr = ""
    state: StrictStr = ""
    type: StrictStr = ""
    milestone: Milestone = Field(default_factory=Milestone)
    version: Version = Field(default_factory=Version)
    created_on: Optional[datetime] = None
    updated_on: Optional[datetime] = None
    links: Links = Field(default_factory=Links)


class StatusChange(Payload):
    old: StrictStr = ""
    new: StrictStr = ""


class IssueChanges(Payload):
    status: StatusChange = Field(default_factory=StatusChange)


class Participant(Payload):
    """Pull request participant as Bitbucket actually sends it.

    Note: this doesn't match the docs, which list plain users.
    """

    role: StrictStr = ""
    type: StrictStr = ""
    approved: StrictBool = False
    user: User = Field(default_factory=User)


class Endpoint(Payload):
    """Source or destination of a pull request"""

    branch: Branch = Field(default_factory=Branch)
    commit: CommitRef = Field(default_factory=CommitRef)
    repository: Repository = Field(default_factory=Repository)


class PullRequest(Payload):
    """https://confluence.atlassian.com/bitbucket/event-payloads-740262817.html#EventPayloads-entity_pullrequest"""

    id: StrictInt = 0
    title: StrictStr = ""
    description: StrictStr = ""
    state: StrictStr = ""
    author: User = Field(default_factory=User)
    source: Endpoint = Field(default_factory=Endpoint)
    destination: Endpoint = Field(default_factory=Endpoint)
    merge_commit: CommitRef = Field(default_factory=CommitRef)
    participants: List[Participant] = []
    reviewers: List[User] = []
    close_source_branch: StrictBool = False
    closed_by: User = Field(default_factory=User)
    reason: StrictStr = ""
    created_on: Optional[datetime] = None
    updated_on: Optional[datetime] = None
    links: Links = Field(default_factory=Links)


class Approval(Payload):
    date: Optional[datetime] = None
    user: User = Field(default_factory=User)


# Repository events


class RepoPushEvent(Payload):
    actor: Actor = Field(default_factory=Actor)
    repository: Repository = Field(default_factory=Repository)
    push: Push = Field(default_factory=Push)


class RepoForkEvent(Payload):
    actor: Actor = Field(default_factory=Actor)
    repository: Repository = Field(default_factory=Repository)
    fork: Repository = Field(default_factory=Repository)


class RepoCommitCommentCreatedEvent(Payload):
    actor: Actor = Field(default_factory=Actor)
    comment: Comment = Field(default_factory=Comment)
    repository: Repository = Field(default_factory=Repository)
    commit: CommitRef = Field(default_factory=CommitRef)


class RepoCommitStatusEvent(Payload):
    """Not a Bitbucket event. Shared fields of the commit status events."""

    actor: Actor = Field(default_factory=Actor)
    repository: Repository = Field(default_factory=Repository)
    commit_status: CommitStatus = Field(default_factory=CommitStatus)


class RepoCommitStatusCreatedEvent(RepoCommitStatusEvent):
    pass


class RepoCommitStatusUpdatedEvent(RepoCommitStatusEvent):
    pass


# Issue events


class IssueEvent(Payload):
    """Not a Bitbucket event. Shared fields of the issue events."""

    actor: Actor = Field(default_factory=Actor)
    issue: Issue = Field(default_factory=Issue)
    repository: Repository = Field(default_factory=Repository)


class IssueCreatedEvent(IssueEvent):
    pass


class IssueUpdatedEvent(IssueEvent):
    comment: Comment = Field(default_factory=Comment)
    changes: IssueChanges = Field(default_factory=IssueChanges)


class IssueCommentCreatedEvent(IssueEvent):
    comment: Comment = Field(default_factory=Comment)


# Pull request events


class PullRequestEvent(Payload):
    """Not a Bitbucket event. Shared fields of the pull request events."""

    actor: Actor = Field(default_factory=Actor)
    pullrequest: PullRequest = Field(default_factory=PullRequest)
    repository: Repository = Field(default_factory=Repository)


class PullRequestCreatedEvent(PullRequestEvent):
    pass


class PullRequestUpdatedEvent(PullRequestEvent):
    pass


class PullRequestApprovedEvent(PullRequestEvent):
    approval: Approval = Field(default_factory=Approval)


class PullRequestApprovalRemovedEvent(PullRequestEvent):
    approval: Approval = Field(default_factory=Approval)


class PullRequestMergedEvent(PullRequestEvent):
    pass


class PullRequestDeclinedEvent(PullRequestEvent):
    pass


class PullRequestCommentEvent(PullRequestEvent):
    """Not a Bitbucket event. Shared fields of the pull request comment events."""

    comment: Comment = Field(default_factory=Comment)


class PullRequestCommentCreatedEvent(PullRequestCommentEvent):
    pass


class PullRequestCommentUpdatedEvent(PullRequestCommentEvent):
    pass


class PullRequestCommentDeletedEvent(PullRequestCommentEvent):
    pass
