"""
Settings, read once from the environment.
"""

import os
from pathlib import Path


DICTIONARY_PATH = Path(os.getenv("WORDDICT_PATH", "dictionary.db"))

API_URL = os.getenv("WORDDICT_API", "http://localhost:8000/api")

LOG_LEVEL = os.getenv("WORDDICT_LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
