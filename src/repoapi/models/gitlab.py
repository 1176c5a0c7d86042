from typing import Any, Optional, TypedDict


class GitlabIdentity(TypedDict, total=False):
    provider: str
    extern_uid: str
    saml_provider_id: Optional[int]


class GitlabProfile(TypedDict, total=False):
    id: int
    username: str
    name: str
    state: str
    locked: bool
    avatar_url: str
    web_url: str
    created_at: str
    bio: str
    location: str
    public_email: str
    email: str
    commit_email: str
    website_url: str
    job_title: str
    organization: str
    two_factor_enabled: bool
    identities: list[GitlabIdentity]


class GitlabNamespace(TypedDict, total=False):
    id: int
    name: str
    path: str
    kind: str
    full_path: str


class GitlabProject(TypedDict, total=False):
    id: int
    name: str
    name_with_namespace: str
    path: str
    path_with_namespace: str
    description: Optional[str]
    default_branch: str
    visibility: str
    web_url: str
    ssh_url_to_repo: str
    http_url_to_repo: str
    archived: bool
    open_issues_count: int
    created_at: str
    last_activity_at: str
    namespace: GitlabNamespace
    _links: dict[str, str]


class GitlabIssue(TypedDict, total=False):
    id: int
    iid: int
    project_id: int
    title: str
    description: Optional[str]
    state: str
    labels: list[str]
    issue_type: str
    assignees: list[dict[str, Any]]
    author: dict[str, Any]
    web_url: str
    created_at: str
    updated_at: str
    closed_at: Optional[str]


class ProjectQueryParams(TypedDict, total=False):
    """Filters accepted by the GitLab project listing endpoints."""

    archived: bool
    search: str
    simple: bool
    owned: bool
    visibility: str
    active: bool


class IssueQueryParams(TypedDict, total=False):
    """Filters accepted by the GitLab issue listing endpoint."""

    issue_type: str
    search: str
    assignee_id: int
    state: str
    labels: str
