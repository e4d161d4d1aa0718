import os

from dotenv import load_dotenv

load_dotenv()

# Get the base directory of the project (the directory containing this file)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Path to the data directory (assumes 'data' is at the same level as 'shiritori')
DATA_DIR = os.path.abspath(os.path.join(BASE_DIR, '..', 'data'))

# Tokenizer backend used to read kanji: janome, kakasi
TOKENIZER_BACKEND = os.getenv("SHIRITORI_TOKENIZER", "janome")

# Optional janome user dictionary (simplified CSV format)
USER_DICTIONARY = os.getenv("SHIRITORI_USER_DICTIONARY") or None

RESOLVER_TIMEOUT_MS = int(os.getenv("SHIRITORI_RESOLVER_TIMEOUT_MS", "5000"))

# Unset disables the kana-proportion tiebreak in the candidate ranker
_threshold = os.getenv("SHIRITORI_KANA_PROPORTION_THRESHOLD")
KANA_PROPORTION_THRESHOLD = float(_threshold) if _threshold else None

WORDS_FILE = os.getenv("SHIRITORI_WORDS_FILE", os.path.join(DATA_DIR, 'words.txt'))

# Root logger level, e.g. WARNING to hide the per-word pipeline trace
LOG_LEVEL = os.getenv("SHIRITORI_LOG_LEVEL", "INFO").upper()
