"""Integration tests for OpenAIGateway with the OpenAI API.

These tests require a valid OPENAI_API_KEY in the environment.
They will be skipped if the API key is not available.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
import os
from gpt_chat.models.conversation import Transcript
from gpt_chat.services.request_builder import build_request
from gpt_chat.services.transport import OpenAIGateway
from gpt_chat.services.errors import NoResultsError


@pytest.mark.skipif(
    not os.getenv("OPENAI_API_KEY"),
    reason="OPENAI_API_KEY not set in environment"
)
class TestOpenAIGatewayIntegration:
    """Integration tests for OpenAIGateway with the real API."""
    
    def test_round_trip(self):
        """Test a single question gets a non-empty reply."""
        transcript = Transcript()
        payload = build_request(transcript, "gpt-3.5-turbo", "user", "Reply with the single word: pong")
        
        result = OpenAIGateway().send(payload, os.environ["OPENAI_API_KEY"])
        
        assert result.reply.content
        assert result.reply.role == "assistant"
        assert result.usage.total_tokens > 0
    
    def test_bad_key_is_no_results(self):
        """Test an invalid credential surfaces as NoResults."""
        payload = build_request(Transcript(), "gpt-3.5-turbo", "user", "hello")
        
        with pytest.raises(NoResultsError):
            OpenAIGateway().send(payload, "sk-invalid")
