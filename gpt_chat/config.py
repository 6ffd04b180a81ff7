"""Configuration management for the GPT chat CLI."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# API Keys
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

# Endpoint Configuration
OPENAI_API_URL = os.getenv(
    "OPENAI_API_URL",
    "https://api.openai.com/v1/chat/completions"
)
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "60"))  # seconds

# Model Configuration
# available models (03/2025): gpt-4-turbo, gpt-3.5-turbo-0125, gpt-4-turbo-instruct
DEFAULT_MODEL = os.getenv("OPENAI_MODEL", "gpt-4-turbo")

# Spinner Configuration
SPINNER_FRAMES = "-\\|/"
SPINNER_DELAY = 0.1  # seconds per frame

# Logging Configuration (silent unless a level is given)
LOG_LEVEL = os.getenv("LOG_LEVEL")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")
LOG_FILE = os.getenv("LOG_FILE")
