"""Chat-completion API response models."""
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .conversation import Turn


@dataclass
class Usage:
    """Token accounting reported by the API."""
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass
class Choice:
    """One candidate reply."""
    message: Turn
    finish_reason: str = ""
    index: int = 0


@dataclass
class ChatCompletion:
    """Decoded chat-completions response body."""
    id: str = ""
    object: str = ""
    model: str = ""
    choices: List[Choice] = field(default_factory=list)
    usage: Usage = field(default_factory=Usage)

    @property
    def reply(self) -> Turn:
        """The message of the first choice, the only one the client shows."""
        return self.choices[0].message

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChatCompletion":
        """
        Build a response from decoded JSON.
        
        Unknown fields are ignored. A body without a usable
        choices[0].message raises ValueError.
        
        Args:
            data: Decoded response body
            
        Returns:
            ChatCompletion instance
            
        Raises:
            ValueError: If the body is not a completion with at least one message
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        
        raw_choices = data.get("choices") or []
        if not isinstance(raw_choices, list) or not raw_choices:
            raise ValueError("response contains no choices")
        
        first = raw_choices[0]
        message = first.get("message") if isinstance(first, dict) else None
        if not isinstance(message, dict):
            raise ValueError("first choice has no message")
        if not isinstance(message.get("role"), str):
            raise ValueError("message role must be a string")
        if not isinstance(message.get("content"), (str, type(None))):
            raise ValueError("message content must be a string or null")
        
        # only the first choice is shown; the rest are decoded best-effort
        choices = [_decode_choice(raw) for raw in raw_choices]
        
        usage = data.get("usage")
        if not isinstance(usage, dict):
            usage = {}
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            model=data.get("model") or "",
            choices=choices,
            usage=Usage(
                prompt_tokens=usage.get("prompt_tokens") or 0,
                completion_tokens=usage.get("completion_tokens") or 0,
                total_tokens=usage.get("total_tokens") or 0
            )
        )


# json.loads turns paired \uXXXX escapes into one code point, so any
# surrogate left in a decoded string is unpaired and cannot be UTF-8 encoded
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def _text(value: Any) -> str:
    """Decoded JSON string with unpaired surrogates replaced by U+FFFD; null is ""."""
    if not isinstance(value, str):
        return ""
    return _LONE_SURROGATE.sub("\ufffd", value)


def _decode_choice(raw: Any) -> Choice:
    if not isinstance(raw, dict):
        raw = {}
    message = raw.get("message")
    if not isinstance(message, dict):
        message = {}
    index = raw.get("index")
    return Choice(
        message=Turn(role=_text(message.get("role")), content=_text(message.get("content"))),
        finish_reason=_text(raw.get("finish_reason")),
        index=index if isinstance(index, int) else 0
    )
