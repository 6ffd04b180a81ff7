"""Services for the GPT chat CLI."""
from .errors import (
    ChatError,
    ChatClientError,
    KeyNotSetError,
    InvalidInputError,
    InvalidPayloadError,
    NoResultsError,
)
from .console import read_line
from .request_builder import build_request
from .transport import ChatGateway, OpenAIGateway
from .progress import ProgressIndicator
from .conversation_loop import ConversationLoop

__all__ = ['ChatError', 'ChatClientError', 'KeyNotSetError', 'InvalidInputError', 'InvalidPayloadError', 'NoResultsError', 'read_line', 'build_request', 'ChatGateway', 'OpenAIGateway', 'ProgressIndicator', 'ConversationLoop']
