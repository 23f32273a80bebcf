"""Pydantic schemas for GitHub webhook payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

PING_EVENT = "ping"
PULL_REQUEST_EVENT = "pull_request"
SUPPORTED_EVENTS = (PING_EVENT, PULL_REQUEST_EVENT)


class GitHubModel(BaseModel):
    """Base for payload fragments.

    Unknown fields are ignored and JSON nulls fall back to the field default,
    including a null in place of the whole object.
    """

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class User(GitHubModel):
    login: str = ""


class PullRequest(GitHubModel):
    html_url: str = ""
    state: str = ""
    title: str = ""
    user: User = Field(default_factory=User)


class Label(GitHubModel):
    name: str = ""


class PullRequestEvent(GitHubModel):
    """Decoded pull_request webhook event."""

    action: str = ""
    number: int = 0
    pull_request: PullRequest = Field(default_factory=PullRequest)
    label: Label = Field(default_factory=Label)
