"""Line-oriented console input."""
import logging
from typing import TextIO

from gpt_chat.services.errors import InvalidInputError

logger = logging.getLogger(__name__)


def read_line(stream: TextIO) -> str:
    """
    Read one line of user input.
    
    Args:
        stream: Text stream to read from
        
    Returns:
        The line without its trailing newline ("" for an empty line)
        
    Raises:
        InvalidInputError: On end-of-stream or a read/decode failure
    """
    try:
        line = stream.readline()
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.error(f"Failed to read input: {e}")
        raise InvalidInputError(original_error=str(e)) from e
    
    if not line:
        logger.debug("End of input stream reached")
        raise InvalidInputError(reason="eof")
    
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line
