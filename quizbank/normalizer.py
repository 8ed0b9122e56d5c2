"""
Repairs text pulled from PDFs whose text layer mangles ligatures.

The passes below must run in this order; each one assumes the earlier ones
already ran:

  1. raw-glyph word fixes  ("soÕware" -> "software")
  2. single glyph table    (theta -> "ti", sigma -> "tt", curly quotes, odd spaces)
  3. split word fixes      ("a tt ack" -> "attack")
  4. word reassembly       ("func ti on" -> "function")
  5. orphaned infix merge  (any leftover "xx ti yy")
  6. noise stripping       (watermarks, page markers, URLs, whitespace)

normalize() is total and reaches its fixed point in a single pass.
"""
from typing import Iterable

from . import config
from .rules import (
    GLYPH_TABLE,
    NOISE_PATTERNS,
    ORPHAN_INFIX,
    RAW_GLYPH_WORD_FIXES,
    SPLIT_WORD_FIXES,
    WHITESPACE,
    WORD_REASSEMBLY_FIXES,
    Rule,
    phrase_pattern,
)


def _match_case(matched: str, replacement: str) -> str:
    if matched.isupper():
        return replacement.upper()
    if matched[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def apply_word_rules(text: str, rules: Iterable[Rule]) -> str:
    for pattern, replacement in rules:
        text = pattern.sub(lambda m: _match_case(m.group(0), replacement), text)
    return text


def strip_noise(text: str) -> str:
    """Drop running headers, page markers and URLs, then collapse whitespace."""
    for pattern, replacement in NOISE_PATTERNS:
        text = pattern.sub(replacement, text)
    for phrase in config.EXTRA_NOISE_PHRASES:
        text = phrase_pattern(phrase).sub(" ", text)
    return WHITESPACE.sub(" ", text).strip()


def normalize(raw: str) -> str:
    if not isinstance(raw, str):
        return ""

    text = apply_word_rules(raw, RAW_GLYPH_WORD_FIXES)
    text = text.translate(GLYPH_TABLE)
    text = apply_word_rules(text, SPLIT_WORD_FIXES)
    text = apply_word_rules(text, WORD_REASSEMBLY_FIXES)
    text = ORPHAN_INFIX.sub(r"\1", text)
    return strip_noise(text)


def clean_field(text: str) -> str:
    """Normalize one captured field (question text or a single option)."""
    return normalize(text)
