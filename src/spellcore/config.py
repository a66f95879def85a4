from __future__ import annotations
import os
import sys
from pathlib import Path

# project root: the directory holding pyproject.toml
PROJECT_ROOT = Path(__file__).resolve().parents[2]

# where the bundled word list lives (rewritten in place on accepted insertions)
DICTIONARY_FILE: str = os.environ.get(
    "TEXTANALYSIS_DICTIONARY", str(PROJECT_ROOT / "data" / "basic_words.txt")
)

# ranking
TOP_K: int = 5
SENTINEL_DISTANCE: int = sys.maxsize   # distance shown for an unused suggestion slot

# bounds
MAX_WORD_LENGTH: int = 29
MAX_SENTENCE_LENGTH: int = 29
DICTIONARY_CAPACITY: int = 2500

# network defaults
DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = int(os.environ.get("TEXTANALYSIS_PORT", "60000"))
DEFAULT_WEB_PORT: int = 8000

# cap on a single line read from a client socket
MAX_LINE_BYTES: int = 1024

# seconds to wait for a client reply; None blocks forever
READ_TIMEOUT: float | None = None

# Progress logging (set TEXTANALYSIS_VERBOSE=1 to enable)
VERBOSE = os.environ.get("TEXTANALYSIS_VERBOSE") == "1"
