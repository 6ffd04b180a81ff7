"""Command-line entry point for the GPT chat CLI."""
import argparse
import logging
import sys
import threading
from typing import List, Optional

from gpt_chat.config import DEFAULT_MODEL, LOG_FILE, LOG_FORMAT, LOG_LEVEL, OPENAI_API_KEY, REQUEST_TIMEOUT
from gpt_chat.logger import setup_logging
from gpt_chat.services.conversation_loop import ConversationLoop
from gpt_chat.services.errors import ChatClientError
from gpt_chat.services.transport import OpenAIGateway

logger = logging.getLogger(__name__)


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_FORMATS = ["text", "json"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gpt-chat",
        description="Chat with an OpenAI model from the terminal"
    )
    parser.add_argument(
        "--model",
        default=DEFAULT_MODEL,
        help=f"OpenAI model to use (default: {DEFAULT_MODEL})"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=REQUEST_TIMEOUT,
        help=f"Request timeout in seconds (default: {REQUEST_TIMEOUT:g})"
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=LOG_LEVELS,
        type=str.upper,
        help="Enable logging at this level (default: off)"
    )
    parser.add_argument(
        "--log-format",
        default=LOG_FORMAT,
        choices=LOG_FORMATS,
        help="Log line format (default: text)"
    )
    parser.add_argument(
        "--log-file",
        default=LOG_FILE,
        help="Write logs to this file instead of stderr"
    )
    args = parser.parse_args(argv)
    
    # argparse does not check choices against defaults taken from the environment
    if args.log_level is not None and args.log_level not in LOG_LEVELS:
        parser.error(f"invalid LOG_LEVEL {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")
    if args.log_format not in LOG_FORMATS:
        parser.error(f"invalid LOG_FORMAT {args.log_format!r} (choose from {', '.join(LOG_FORMATS)})")
    return args


def main(argv: Optional[List[str]] = None, credential: Optional[str] = OPENAI_API_KEY) -> int:
    """
    Run an interactive session.
    
    Returns:
        Process exit status: 0 on cancellation, 1 on a fatal error
    """
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_format, args.log_file)
    
    cancel_event = threading.Event()
    loop = ConversationLoop(
        gateway=OpenAIGateway(timeout=args.timeout),
        credential=credential,
        model=args.model,
        cancel_event=cancel_event
    )
    
    try:
        loop.run()
    except ChatClientError as e:
        logger.error(f"Session failed: {e}", extra={"error_code": e.error.code, "error_details": e.error.details})
        print(f"error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        cancel_event.set()
        logger.info("Interrupted by user")
        print()
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
