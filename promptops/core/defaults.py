from pathlib import Path
import os

DEFAULT_STORAGE_PATH = Path(os.getenv("PROMPTOPS_STORAGE_PATH", Path.home() / ".promptops"))
DEFAULT_LLM_CONFIG_PATH = ".promptops/config.yml"
DEFAULT_LOG_LEVEL = os.getenv("PROMPTOPS_LOG_LEVEL", "INFO")

DEFAULT_ENCODING = "utf8"

SECTION_DELIMITER = "\n\n---\n"

# Input bounds
INPUT_MIN_LENGTH = 10
INPUT_MAX_LENGTH = 5000

# Language detection
HEBREW_RANGE = ("\u0590", "\u05ff")
HEBREW_RATIO_THRESHOLD = 0.3

# Tweak suggestions
DEFAULT_MAX_SUGGESTIONS = 3
MIN_CONFIDENCE = 0.3
MAX_CONFIDENCE = 0.9
KEYWORD_SCORE = 0.3
AGENT_RELEVANCE_SCORE = 0.15

CUSTOM_TWEAK_SHORT_NAME_MAX_LENGTH = 15

# Completion defaults
DEFAULT_MAX_TOKENS = 2048
DEFAULT_TEMPERATURE = 0.7

VALID_LENGTHS = ["short", "standard", "detailed"]
VALID_STRATEGIES = ["implement", "diagnose"]
