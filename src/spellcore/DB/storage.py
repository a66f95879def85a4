from __future__ import annotations
import contextlib
import os
from typing import Iterable, List

from ..errors import FatalStartup


def load_words(path: str) -> List[str]:
    """Read whitespace-delimited tokens, lowercased, in file order."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FatalStartup(f"Dictionary file not readable: {path} ({e})") from e
    return [tok.lower() for tok in text.split()]


def save_words(words: Iterable[str], path: str) -> None:
    """Rewrite the whole file, one word per line (tmp file + replace)."""
    tmp = f"{path}.tmp"
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            for w in words:
                f.write(w + "\n")
        os.replace(tmp, path)
    except OSError:
        # the target is untouched; do not leave a half-written tmp file behind
        with contextlib.suppress(OSError):
            os.remove(tmp)
        raise
