"""
Game constants.

Single source of truth for the rules and defaults shared by the engine, the
controller and the CLI front-ends. Front-ends override these through their
argparse flags; library code takes them as keyword defaults.
"""

from pathlib import Path

# Shortest word the engine accepts.
MIN_WORD_LENGTH = 3

# Root word used when the word source is present but holds no usable entry.
DEFAULT_ROOT_WORD = "silkworm"

DEFAULT_LANGUAGE = "en"

DATA_DIR = Path(__file__).resolve().parent / "datasets" / "data"

# Bundled root-word list (one lowercase word per line).
DEFAULT_START_WORDS = DATA_DIR / "start.txt"

DEFAULT_DICTIONARY = "wordfreq"

# wordfreq reports 0.0 for unseen words; 2.0 is roughly once per 10M words.
DEFAULT_MIN_ZIPF = 2.0

# Web text is full of short fragments ("lst", "nle") with real frequencies,
# so words up to this length must also appear in a curated allow-list.
SHORT_WORD_MAX_LENGTH = 4
SHORT_WORDS_TEMPLATE = "short_words_{language}.txt"

REMOTE_DICTIONARY_URL = "https://api.dictionaryapi.dev/api/v2/entries/{language}/{word}"
DEFAULT_HTTP_TIMEOUT = 5.0
