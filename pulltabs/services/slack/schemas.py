"""Pydantic schemas for Slack incoming webhook messages."""

from pydantic import BaseModel, Field


class Attachment(BaseModel):
    """Legacy Slack message attachment."""

    fallback: str
    color: str
    pretext: str
    title: str
    title_link: str
    text: str


class OutboundMessage(BaseModel):
    """Message posted to a Slack incoming webhook."""

    text: str
    attachments: list[Attachment] = Field(min_length=1)

    def to_wire(self) -> bytes:
        """Serialize to the JSON body sent to Slack."""
        return self.model_dump_json().encode("utf-8")
