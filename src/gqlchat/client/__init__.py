from .base import ChatClient
from .errors import RequestError, TransportError
from .factory import create_chat_client
from .graphql import NO_REPLY_MESSAGE, GraphQLChatClient
from .models import SEND_MESSAGE_MUTATION, ChatMessage, Role, build_request_body

__all__ = [
    "ChatClient",
    "ChatMessage",
    "GraphQLChatClient",
    "NO_REPLY_MESSAGE",
    "RequestError",
    "Role",
    "SEND_MESSAGE_MUTATION",
    "TransportError",
    "build_request_body",
    "create_chat_client",
]
