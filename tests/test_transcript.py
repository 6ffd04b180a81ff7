"""Unit tests for the conversation models."""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from gpt_chat.models.conversation import Transcript, Turn


class TestTranscript:
    """Test suite for Transcript."""
    
    def test_new_transcript_is_empty(self):
        """Test a fresh transcript has no turns."""
        transcript = Transcript()
        
        assert len(transcript) == 0
        assert transcript.to_list() == []
    
    def test_append_keeps_insertion_order(self):
        """Test turns come back in the order they were appended."""
        transcript = Transcript()
        transcript.append("user", "first")
        transcript.append("assistant", "second")
        transcript.append("user", "third")
        
        assert [t.content for t in transcript] == ["first", "second", "third"]
        assert transcript[1] == Turn(role="assistant", content="second")
    
    def test_append_returns_new_turn(self):
        """Test append hands back the stored turn."""
        transcript = Transcript()
        turn = transcript.append("user", "hello")
        
        assert turn == Turn(role="user", content="hello")
        assert transcript[-1] is turn
    
    def test_append_does_not_validate_or_deduplicate(self):
        """Test empty content, odd roles and duplicates are all kept."""
        transcript = Transcript()
        transcript.append("admin", "")
        transcript.append("admin", "")
        transcript.append("", "x" * 100_000)
        
        assert len(transcript) == 3
        assert transcript[0].content == ""
        assert transcript[2].role == ""
    
    def test_to_list_serializes_role_then_content(self):
        """Test dict form uses role and content keys in that order."""
        transcript = Transcript()
        transcript.append("user", "foo")
        
        items = transcript.to_list()
        
        assert items == [{"role": "user", "content": "foo"}]
        assert list(items[0].keys()) == ["role", "content"]
    
    def test_turns_view_is_a_snapshot(self):
        """Test the read-only view does not change the transcript when modified."""
        transcript = Transcript()
        transcript.append("user", "foo")
        
        view = transcript.turns
        transcript.append("assistant", "bar")
        
        assert isinstance(view, tuple)
        assert len(view) == 1
        assert len(transcript) == 2
