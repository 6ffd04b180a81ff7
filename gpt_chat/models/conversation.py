"""Conversation data models."""
from dataclasses import dataclass, asdict
from typing import Dict, Iterator, List, Tuple


@dataclass
class Turn:
    """Represents a single role-tagged utterance in a conversation."""
    role: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class Transcript:
    """
    Ordered, append-only conversation history.
    
    The whole transcript is sent with every request, so insertion order is
    the chronological order of the conversation. Entries are never removed
    or reordered.
    """
    
    def __init__(self):
        self._turns: List[Turn] = []
    
    def append(self, role: str, content: str) -> Turn:
        """Add a turn at the end of the transcript and return it."""
        turn = Turn(role=role, content=content)
        self._turns.append(turn)
        return turn
    
    @property
    def turns(self) -> Tuple[Turn, ...]:
        return tuple(self._turns)
    
    def to_list(self) -> List[Dict[str, str]]:
        """Current contents as role/content dicts, oldest first."""
        return [turn.to_dict() for turn in self._turns]
    
    def __len__(self) -> int:
        return len(self._turns)
    
    def __iter__(self) -> Iterator[Turn]:
        return iter(self._turns)
    
    def __getitem__(self, index: int) -> Turn:
        return self._turns[index]
