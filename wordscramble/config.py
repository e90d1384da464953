import os
from pathlib import Path

DATA_DIR = Path(__file__).parent / 'data'


class Config:
    # Newline-delimited list of candidate root words
    START_WORDS_PATH = os.environ.get('WORDSCRAMBLE_START_WORDS') or str(DATA_DIR / 'start.txt')
    # Optional word file backing the dictionary check; unset uses wordfreq
    DICTIONARY_PATH = os.environ.get('WORDSCRAMBLE_DICTIONARY') or None
    CORS_ORIGINS = [o.strip() for o in os.environ.get('WORDSCRAMBLE_CORS_ORIGINS', '*').split(',') if o.strip()]
    LOG_LEVEL = os.environ.get('WORDSCRAMBLE_LOG_LEVEL', 'INFO').upper()
    # Size of the wordfreq English vocabulary used when no dictionary file is set
    WORDFREQ_TOP_N = int(os.environ.get('WORDSCRAMBLE_WORDFREQ_TOP_N', '100000'))
