"""Busy indicator shown while a request is in flight."""
import itertools
import logging
import sys
import threading
from typing import Optional, TextIO

from gpt_chat.config import SPINNER_DELAY, SPINNER_FRAMES

logger = logging.getLogger(__name__)


class ProgressIndicator:
    """
    Terminal spinner running on a background thread.
    
    One instance covers exactly one network call:
    
        indicator = ProgressIndicator(output=sys.stdout)
        indicator.start()
        # blocking call
        indicator.stop()  # returns only once the last frame is erased
    
    The thread also exits on its own when the run-wide cancellation
    event is set, so a call that never returns cannot keep it spinning.
    """
    
    def __init__(
        self,
        output: Optional[TextIO] = None,
        frames: str = SPINNER_FRAMES,
        delay: float = SPINNER_DELAY,
        cancel_event: Optional[threading.Event] = None
    ):
        self.output = output or sys.stdout
        self.frames = frames
        self.delay = delay
        self.cancel_event = cancel_event or threading.Event()
        self.frames_drawn = 0
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._stopped = False
    
    def _should_exit(self) -> bool:
        return self._stop_event.is_set() or self.cancel_event.is_set()
    
    def _spin(self) -> None:  # runs in the background thread
        for frame in itertools.cycle(self.frames):
            if self._should_exit():
                break
            self.output.write(f"\r{frame}")
            self.output.flush()
            self.frames_drawn += 1
            if self._stop_event.wait(self.delay):
                break
        logger.debug(f"Progress indicator exited after {self.frames_drawn} frames")
    
    def start(self) -> None:
        """Start spinning. An indicator can only be started once."""
        if self._thread is not None:
            raise RuntimeError("progress indicator already started")
        self._thread = threading.Thread(target=self._spin, name="progress-indicator", daemon=True)
        self._thread.start()
    
    def stop(self) -> None:
        """Signal the thread, wait for it, and erase the spinner glyph."""
        if self._thread is None or self._stopped:
            return
        self._stopped = True
        self._stop_event.set()
        self._thread.join()
        if self.frames_drawn:
            self.output.write("\r \r")
            self.output.flush()
    
    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()
    
    def __enter__(self) -> "ProgressIndicator":
        self.start()
        return self
    
    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
