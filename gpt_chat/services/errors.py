"""Error taxonomy for the chat client."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ChatError:
    """Structured error information."""
    code: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


class ChatClientError(Exception):
    """Base exception for chat client errors with structured error information."""
    
    code = "CHAT_ERROR"
    default_message = "chat client error"
    
    def __init__(self, message: Optional[str] = None, **details: Any):
        self.error = ChatError(
            code=self.code,
            message=message or self.default_message,
            details=details
        )
        super().__init__(self.error.message)


class KeyNotSetError(ChatClientError):
    """No API credential was configured before the session started."""
    code = "KEY_NOT_SET"
    default_message = "the OPENAI_API_KEY environment variable is not set"


class InvalidInputError(ChatClientError):
    """The next line of user input could not be read."""
    code = "INVALID_INPUT"
    default_message = "couldn't scan user input"


class InvalidPayloadError(ChatClientError):
    """The request body could not be serialized."""
    code = "INVALID_PAYLOAD"
    default_message = "couldn't generate payload"


class NoResultsError(ChatClientError):
    """
    The API could not be reached or its response could not be decoded.
    
    Both cases surface identically; details["reason"] records which one
    happened (timeout, network, decode or malformed).
    """
    code = "NO_RESULTS"
    default_message = "couldn't fetch results"
