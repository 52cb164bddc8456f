"""Finding a part number inside free text (BOM comments, order lines)."""

import logging
import re

from .normalizer import normalize
from .registry import PatternRegistry

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s;,|]+")
_LABEL_PREFIX = re.compile(r"^(?:IC-|PART-|MPN[-:]|PN:|P/N:|REF[-:]|ITEM[-:])", re.IGNORECASE)
_PACKAGING_SUFFIX = re.compile(r"-(?:SMD|THT|ROHS)$", re.IGNORECASE)
_EDGE_PUNCTUATION = "\"'()[]{}<>.:"

# Shorter words are never treated as part numbers
MIN_WORD_LENGTH = 3


def clean_word(word: str) -> str:
    """Strip labels and decorations: 'P/N:BAV99-SMD' -> 'BAV99', 'mpn=LM358' -> 'LM358'"""
    word = word.strip(_EDGE_PUNCTUATION)
    if "=" in word:
        word = word.split("=", 1)[1]
    word = _LABEL_PREFIX.sub("", word)
    word = _PACKAGING_SUFFIX.sub("", word)
    return word.strip(_EDGE_PUNCTUATION).upper()


def candidate_words(text: str) -> list[str]:
    words = []
    for raw in _SEPARATORS.split(text or ""):
        word = clean_word(raw)
        if len(word) >= MIN_WORD_LENGTH:
            words.append(word)
    return words


def find_mpn_in_text(text: str | None, registry: PatternRegistry) -> str | None:
    """First word a manufacturer pattern recognizes, else the first word any pattern matches.

    Returns the cleaned word, or None when nothing in the text looks like a
    known part number.
    """
    if not text:
        return None
    fallback = None
    for word in candidate_words(text):
        matches = registry.lookup(normalize(word))
        if not matches:
            continue
        if any(entry.is_scoped for entry in matches):
            logger.debug(f"Found part number {word!r} in text")
            return word
        if fallback is None:
            fallback = word
    if fallback is not None:
        logger.debug(f"Found generic part number {fallback!r} in text")
    return fallback
