"""Data models for the GPT chat CLI."""
from .conversation import Turn, Transcript
from .api import ChatCompletion, Choice, Usage

__all__ = [
    "Turn",
    "Transcript",
    "ChatCompletion",
    "Choice",
    "Usage",
]
