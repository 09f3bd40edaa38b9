"""Application-wide constants."""

from datetime import date
from pathlib import Path

# Application metadata
APP_NAME = "lexicology"
APP_VERSION = "0.1.0"
APP_TITLE = "Lexicology - Vocabulary Builder"

# Paths
PACKAGE_ROOT = Path(__file__).resolve().parent.parent
RESOURCES_DIR = PACKAGE_ROOT / "resources"
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config" / "default_config.yaml"
BUNDLED_WORDS_PATH = RESOURCES_DIR / "words.json"
USER_DATA_DIR = Path.home() / ".lexicology"
LEARNING_PROGRESS_PATH = USER_DATA_DIR / "learning_progress.json"

# Merriam-Webster Collegiate API
MW_BASE_URL = "https://www.dictionaryapi.com/api/v3/references/collegiate/json"
MW_API_KEY_ENV = "MW_API_KEY"
DEFAULT_TIMEOUT_SEC = 10

# Word server
WORD_SERVER_URL = "http://localhost:3001/api"
DEFAULT_USER_ID = "default-user-id"

# Word of the day
WORD_OF_THE_DAY_EPOCH = date(2024, 1, 1)

# Word records
DEFAULT_SOURCE = "Default Source"
USER_SOURCE = "User"

# Display
SENSE_BULLET = "•"
BC_TOKEN = "{bc}"

# User-facing messages
MSG_NETWORK_ERROR = "A network error occurred."
MSG_EMPTY_TERM = "Enter a word to search."
MSG_SUGGESTIONS = "Word not found. Did you mean one of these?"
MSG_NOT_FOUND = "The dictionary does not contain an entry for '{term}'."
