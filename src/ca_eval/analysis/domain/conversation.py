"""Message and Conversation value objects — the request body sent for analysis."""

from typing import Literal

from pydantic import BaseModel, Field

type Sender = Literal["customer", "agent"]

PLACEHOLDER_CUSTOMER_NAME = "Test Customer"
PLACEHOLDER_AGENT_NAME = "Test Agent"


class Message(BaseModel, frozen=True):
    sender: Sender
    text: str


class Conversation(BaseModel, frozen=True):
    """An ordered exchange of sender-tagged messages submitted for analysis."""

    messages: list[Message] = Field(min_length=1)
    customer_name: str = PLACEHOLDER_CUSTOMER_NAME
    agent_name: str = PLACEHOLDER_AGENT_NAME

    @classmethod
    def from_customer_text(
        cls,
        text: str,
        customer_name: str | None = None,
        agent_name: str | None = None,
    ) -> "Conversation":
        """Wrap a single customer utterance into a one-message conversation."""
        return cls(
            messages=[Message(sender="customer", text=text)],
            customer_name=customer_name or PLACEHOLDER_CUSTOMER_NAME,
            agent_name=agent_name or PLACEHOLDER_AGENT_NAME,
        )
