# wordlist.py
# Plain-text word list loading: one word per line, UTF-8.
# Blank lines and lines starting with '#' are skipped.

from __future__ import annotations

import logging
import os
from typing import List

logger = logging.getLogger(__name__)


def load_words(path: str) -> List[str]:
    """
    Read words from `path` in file order.
    Raises FileNotFoundError / OSError if the file cannot be read.
    """
    words: List[str] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if not word or word.startswith("#"):
                continue
            words.append(word)
    logger.debug("read %d words from %s", len(words), os.path.basename(path))
    return words
