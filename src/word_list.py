# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Word list loading and checks.

Produces the clean, uppercase, duplicate-free list the generator expects.
"""

import re
from pathlib import Path
from typing import Iterable, List

WORD_PATTERN = re.compile(r"^[A-Z]+$")


class WordListError(Exception):
    """Raised when a word list cannot be read."""
    pass


def normalize_words(lines: Iterable[str]) -> List[str]:
    """
    Clean raw word entries.

    Blank lines and '#' comments are skipped, entries are trimmed and
    uppercased, and repeated words keep only their first occurrence.
    """
    words: List[str] = []
    seen = set()
    for line in lines:
        word = line.strip()
        if not word or word.startswith("#"):
            continue
        word = word.upper()
        if word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words


def load_words_file(path: str) -> List[str]:
    """Read a word file (one word per line) and normalize it."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(f"Could not read word list {path}: {e}")
    return normalize_words(text.splitlines())


def validate_words(words: List[str], size: int) -> List[str]:
    """
    Validate a normalized word list against a grid size.

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if not words:
        errors.append("Please enter at least one word.")
        return errors

    for word in words:
        if not WORD_PATTERN.match(word):
            errors.append(
                f'Invalid word format: "{word}". Words should contain only letters.'
            )

    longest = max(len(word) for word in words)
    if longest > size:
        errors.append(
            f"The longest word ({longest} letters) is longer than the grid size "
            f"({size}). Increase the grid size or use shorter words."
        )

    return errors
