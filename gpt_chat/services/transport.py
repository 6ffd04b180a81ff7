"""Transport gateway for the OpenAI chat-completions endpoint."""
import json
import logging
import time
from abc import ABC, abstractmethod

import httpx

from gpt_chat.config import OPENAI_API_URL, REQUEST_TIMEOUT
from gpt_chat.models.api import ChatCompletion
from gpt_chat.services.errors import NoResultsError

logger = logging.getLogger(__name__)


class ChatGateway(ABC):
    """Anything that can send a serialized request and return a decoded reply."""
    
    @abstractmethod
    def send(self, payload: bytes, credential: str) -> ChatCompletion:
        """
        Send one chat-completion request.
        
        Raises:
            NoResultsError: If no usable response was obtained
        """


class OpenAIGateway(ChatGateway):
    """HTTPS gateway to the chat-completions API. Never retries."""
    
    def __init__(
        self,
        api_url: str = OPENAI_API_URL,
        timeout: float = REQUEST_TIMEOUT
    ):
        """
        Initialize the gateway.
        
        Args:
            api_url: Chat-completions endpoint
            timeout: Request timeout in seconds
        """
        self.api_url = api_url
        self.timeout = timeout
    
    def send(self, payload: bytes, credential: str) -> ChatCompletion:
        """
        POST the payload and decode the response.
        
        Transport failures and undecodable bodies both raise NoResultsError;
        details["reason"] tells them apart for logging.
        
        Args:
            payload: Serialized request body, sent unchanged
            credential: API key used as the bearer token
            
        Returns:
            Decoded ChatCompletion
            
        Raises:
            NoResultsError: On timeout, network error, or a body that is not a completion
        """
        headers = {
            "Authorization": f"Bearer {credential}",
            "Content-Type": "application/json"
        }
        
        start_time = time.time()
        
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(
                    self.api_url,
                    headers=headers,
                    content=payload
                )
        except httpx.TimeoutException as e:
            latency_ms = int((time.time() - start_time) * 1000)
            logger.error(f"Request timeout after {self.timeout}s: latency={latency_ms}ms")
            raise NoResultsError(reason="timeout", latency_ms=latency_ms, original_error=str(e)) from e
        except httpx.RequestError as e:
            latency_ms = int((time.time() - start_time) * 1000)
            logger.error(f"Network error: {e}, latency={latency_ms}ms")
            raise NoResultsError(reason="network", latency_ms=latency_ms, original_error=str(e)) from e
        
        latency_ms = int((time.time() - start_time) * 1000)
        
        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(
                f"Undecodable response body: status={response.status_code}, latency={latency_ms}ms",
                extra={"error_code": NoResultsError.code}
            )
            raise NoResultsError(
                reason="decode",
                status_code=response.status_code,
                latency_ms=latency_ms,
                original_error=str(e)
            ) from e
        
        try:
            completion = ChatCompletion.from_dict(data)
        except ValueError as e:
            logger.error(
                f"Malformed completion: status={response.status_code}, error={e}",
                extra={"error_code": NoResultsError.code}
            )
            raise NoResultsError(
                reason="malformed",
                status_code=response.status_code,
                latency_ms=latency_ms,
                original_error=str(e)
            ) from e
        
        logger.info(
            f"Received completion: model={completion.model}, "
            f"input_tokens={completion.usage.prompt_tokens}, "
            f"output_tokens={completion.usage.completion_tokens}, "
            f"latency={latency_ms}ms"
        )
        return completion
