from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

SEND_MESSAGE_MUTATION = """
  mutation SendMessage($input: SendMessageInput!) {
    sendMessage(input: $input) {
      message {
        id
        role
        content
      }
    }
  }
"""


class Role(str, Enum):
    """Sender of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """A single message in the conversation transcript."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Opaque message id, local or server-provided")
    role: Role = Field(description="Role of the message sender: 'user' or 'assistant'")
    content: str = Field(description="Content of the message")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_numeric_id(cls, value: Any) -> Any:
        # Some servers hand back integer ids
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def to_dict(self) -> dict[str, str]:
        """Plain dict in the wire shape ({id, role, content})."""
        return {"id": self.id, "role": self.role.value, "content": self.content}


def build_request_body(text: str) -> dict[str, Any]:
    """Build the JSON body for one SendMessage mutation.

    Args:
        text: Message to forward to the assistant

    Returns:
        Dict with the mutation document and its variables
    """
    return {
        "query": SEND_MESSAGE_MUTATION,
        "variables": {
            "input": {
                "message": text,
            },
        },
    }
