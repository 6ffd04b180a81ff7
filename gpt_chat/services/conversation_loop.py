"""Interactive conversation loop."""
import logging
import sys
import threading
from typing import Optional, TextIO

from gpt_chat.config import DEFAULT_MODEL, SPINNER_DELAY
from gpt_chat.models.conversation import Transcript
from gpt_chat.services.console import read_line
from gpt_chat.services.errors import InvalidPayloadError, KeyNotSetError
from gpt_chat.services.progress import ProgressIndicator
from gpt_chat.services.request_builder import build_request
from gpt_chat.services.transport import ChatGateway

logger = logging.getLogger(__name__)

BANNER = "enter your question, and type ENTER"
PROMPT = "> "


class ConversationLoop:
    """
    Drives prompt -> request -> spinner -> reply, one question at a time.
    
    The loop owns the transcript; every request carries the whole history.
    Any failure on the user's side of a turn ends the run with a
    ChatClientError. Failing to record the assistant's reply is only
    reported, since the user has already seen it.
    """
    
    def __init__(
        self,
        gateway: ChatGateway,
        credential: Optional[str],
        model: str = DEFAULT_MODEL,
        input_stream: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
        error_output: Optional[TextIO] = None,
        cancel_event: Optional[threading.Event] = None,
        spinner_delay: float = SPINNER_DELAY
    ):
        """
        Initialize the loop.
        
        Args:
            gateway: Transport used for every request
            credential: API key; None or empty fails the run before any I/O
            model: Model identifier sent with each request
            input_stream: Where user lines are read from (default stdin)
            output: Where prompts, spinner frames and replies go (default stdout)
            error_output: Where non-fatal problems are reported (default stderr)
            cancel_event: Set to end the run after the current turn
            spinner_delay: Seconds per spinner frame
        """
        self.gateway = gateway
        self.credential = credential
        self.model = model
        self.input_stream = input_stream or sys.stdin
        self.output = output or sys.stdout
        self.error_output = error_output or sys.stderr
        self.cancel_event = cancel_event or threading.Event()
        self.spinner_delay = spinner_delay
        self.transcript = Transcript()
    
    def run(self) -> None:
        """
        Run until cancelled.
        
        Returns normally only on cancellation.
        
        Raises:
            KeyNotSetError: No credential configured (checked once, before anything else)
            InvalidInputError: Reading the next line failed
            InvalidPayloadError: The user's request could not be serialized
            NoResultsError: The request failed or the reply could not be decoded
        """
        if not self.credential:
            raise KeyNotSetError()
        
        logger.info(f"Starting conversation: model={self.model}")
        self._write(f"{BANNER}\n")
        
        while True:
            self._turn()
            
            if self.cancel_event.is_set():
                logger.info(f"Conversation cancelled after {len(self.transcript)} messages")
                return
    
    def _turn(self) -> None:
        """One question/answer exchange."""
        self._write(PROMPT)
        text = read_line(self.input_stream)
        
        payload = build_request(self.transcript, self.model, "user", text)
        
        with ProgressIndicator(
            output=self.output,
            delay=self.spinner_delay,
            cancel_event=self.cancel_event
        ):
            completion = self.gateway.send(payload, self.credential)
        
        reply = completion.reply
        self._write(f"{reply.content}\n\n")
        
        try:
            build_request(self.transcript, self.model, reply.role, reply.content)
        except InvalidPayloadError as e:
            logger.warning(f"Couldn't record reply in transcript: {e}", extra={"error_code": e.error.code})
            self.error_output.write(f"couldn't update conversation: {e}\n")
            self.error_output.flush()
    
    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()
