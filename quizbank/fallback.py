"""
Lenient, block-by-block question recovery.

Used when the structured grammars find too few questions in a document.
The text is cut at every question number, and each block is matched on its
own with the answer key made optional. A block without a printed key gets
the default answer, which trades answer-key precision for question recall:
the question is still shown and answerable, but its stored key may be wrong.
"""
import logging
import re
from typing import List, Optional

from . import config
from .extractor import (
    ANSWER_KEYWORD,
    ANSWER_LETTER,
    LETTERED_MARKER,
    NEXT_QUESTION,
    PARENTHESIZED_MARKER,
    option_spans,
)
from .models import QuestionCandidate
from .normalizer import clean_field

logger = logging.getLogger(__name__)

# No boundary inside a number ("12.", "2.5") or between "Q" and its number.
BLOCK_BOUNDARY = re.compile(r"(?<![\w.])(?=" + NEXT_QUESTION + ")")
# "Answer: B2. Next question" loses the space between key and number.
GLUED_KEY = re.compile("(" + ANSWER_KEYWORD + r"[:.\s]*[A-Da-d])(?=" + NEXT_QUESTION + ")")
LEADING_NUMBER = re.compile(r"^(?:[Qq]\.?\s*)?(\d{1,3})[.)]")

OPTIONAL_ANSWER = r"(?:\s*" + ANSWER_KEYWORD + ANSWER_LETTER + r".*)?\s*$"

BLOCK_GRAMMARS = (
    re.compile(r"^(.+?)" + option_spans(LETTERED_MARKER) + OPTIONAL_ANSWER),
    re.compile(r"^(.+?)" + option_spans(PARENTHESIZED_MARKER) + OPTIONAL_ANSWER),
)


def split_blocks(text: str) -> List[str]:
    text = GLUED_KEY.sub(r"\1 ", text)
    return [block.strip() for block in BLOCK_BOUNDARY.split(text)]


def parse_block(block: str, source_id: str) -> Optional[QuestionCandidate]:
    number_match = LEADING_NUMBER.match(block)
    if not number_match:
        return None

    number = int(number_match.group(1))
    remaining = block[number_match.end():].strip()

    for grammar in BLOCK_GRAMMARS:
        match = grammar.match(remaining)
        if not match:
            continue
        question, opt_a, opt_b, opt_c, opt_d, answer = match.groups()
        question = question.strip()
        if len(question) <= config.MIN_QUESTION_LENGTH:
            logger.debug("Block %s in %s: question text too short", number, source_id)
            return None
        return QuestionCandidate(
            number=number,
            question=clean_field(question),
            options={
                "A": clean_field(opt_a),
                "B": clean_field(opt_b),
                "C": clean_field(opt_c),
                "D": clean_field(opt_d),
            },
            answer=answer.upper() if answer else config.DEFAULT_ANSWER,
            source=source_id,
        )

    logger.debug("Block %s in %s matched no option layout", number, source_id)
    return None


def segment(text: str, source_id: str) -> List[QuestionCandidate]:
    candidates: List[QuestionCandidate] = []
    for block in split_blocks(text):
        if len(block) < config.MIN_BLOCK_LENGTH:
            continue
        try:
            candidate = parse_block(block, source_id)
        except Exception:
            logger.error("Skipping malformed block in %s: %.60r", source_id, block, exc_info=True)
            continue
        if candidate is not None:
            candidates.append(candidate)
    return candidates
