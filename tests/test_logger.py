"""Unit tests for logging setup."""
import sys
import json
import logging
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from gpt_chat.logger import JSONFormatter, setup_logging


@pytest.fixture
def root_logger():
    """Restore root logger handlers and level after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestJSONFormatter:
    """Test suite for JSONFormatter."""
    
    def test_basic_fields(self):
        """Test a record is rendered with timestamp, level, logger and message."""
        record = logging.LogRecord("services.transport", logging.INFO, __file__, 1, "hello %s", ("world",), None)
        
        data = json.loads(JSONFormatter().format(record))
        
        assert data["level"] == "INFO"
        assert data["logger"] == "services.transport"
        assert data["message"] == "hello world"
        assert data["timestamp"].endswith("Z")
    
    def test_extra_fields_are_included(self):
        """Test fields passed via extra= end up in the JSON object."""
        record = logging.LogRecord("main", logging.ERROR, __file__, 1, "failed", None, None)
        record.error_code = "NO_RESULTS"
        record.error_details = {"reason": "timeout"}
        
        data = json.loads(JSONFormatter().format(record))
        
        assert data["error_code"] == "NO_RESULTS"
        assert data["error_details"] == {"reason": "timeout"}
    
    def test_exception_is_included(self):
        """Test exception info is rendered."""
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("main", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
        
        data = json.loads(JSONFormatter().format(record))
        
        assert "ValueError: boom" in data["exception"]


class TestSetupLogging:
    """Test suite for setup_logging."""
    
    def test_no_level_installs_null_handler(self, root_logger):
        """Test logging stays silent when no level is configured."""
        setup_logging(None)
        
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], logging.NullHandler)
    
    def test_json_logs_to_file(self, root_logger, tmp_path):
        """Test JSON records are written to the configured file."""
        log_file = tmp_path / "chat.log"
        
        setup_logging("INFO", "json", str(log_file))
        logging.getLogger("services.transport").info("Received completion", extra={"error_code": None})
        for handler in root_logger.handlers:
            handler.flush()
        
        lines = log_file.read_text(encoding="utf-8").strip().splitlines()
        record = json.loads(lines[-1])
        assert record["message"] == "Received completion"
        assert record["level"] == "INFO"
    
    def test_text_format_level(self, root_logger):
        """Test the requested level is applied to the root logger."""
        setup_logging("warning", "text")
        
        assert root_logger.level == logging.WARNING
        assert isinstance(root_logger.handlers[0], logging.StreamHandler)
    
    def test_unknown_level_raises_and_keeps_handlers(self, root_logger):
        """Test an unknown level name is rejected before any handler is touched."""
        handlers = list(root_logger.handlers)
        
        with pytest.raises(ValueError, match="Unknown log level: verbose"):
            setup_logging("verbose")
        
        assert root_logger.handlers == handlers
