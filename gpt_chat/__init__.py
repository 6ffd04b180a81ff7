"""Terminal client for the OpenAI chat-completions API."""
__version__ = "1.0.0"
