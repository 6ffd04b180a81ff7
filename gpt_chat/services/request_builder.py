"""Serialization of chat-completion request bodies."""
import json
import logging

from gpt_chat.models.conversation import Transcript
from gpt_chat.services.errors import InvalidPayloadError

logger = logging.getLogger(__name__)


def build_request(transcript: Transcript, model: str, role: str, content: str) -> bytes:
    """
    Record a new turn and serialize the full request body.
    
    The turn is appended to the transcript before serialization, so every
    call grows the history even when the returned bytes are discarded.
    Content is passed through as-is: no length limit, empty strings allowed.
    
    Args:
        transcript: Conversation history, mutated in place
        model: Model identifier for the request
        role: Role of the new turn ("user" or the role the API replied with)
        content: Text of the new turn
        
    Returns:
        Compact UTF-8 JSON: {"model": ..., "messages": [{"role": ..., "content": ...}, ...]}
        
    Raises:
        InvalidPayloadError: If the body cannot be serialized
    """
    transcript.append(role, content)
    
    body = {
        "model": model,
        "messages": transcript.to_list()
    }
    
    try:
        # surrogateescape keeps undecodable input bytes intact on the wire
        payload = json.dumps(
            body,
            ensure_ascii=False,
            separators=(",", ":")
        ).encode("utf-8", errors="surrogateescape")
    except (TypeError, ValueError) as e:
        logger.error(f"Failed to serialize request body: {e}", exc_info=True)
        raise InvalidPayloadError(role=role, original_error=str(e)) from e
    
    logger.debug(f"Built request: model={model}, messages={len(transcript)}, bytes={len(payload)}")
    return payload
