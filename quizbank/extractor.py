import re
from typing import List, Match, Pattern

from .models import OPTION_LABELS, QuestionCandidate
from .normalizer import clean_field

ANSWER_KEYWORD = r"\b(?i:correct\s+answer|answer|ans|correct)"
# The key letter may be glued to the next question number ("Answer: B2.").
ANSWER_LETTER = r"[:.\s]*([A-Da-d])(?![A-Za-z])"
ANSWER_KEY = ANSWER_KEYWORD + ANSWER_LETTER
QUESTION_NUMBER = r"(?:[Qq]\.?\s*)?(\d+)[.)]"
NEXT_QUESTION = r"(?:[Qq]\.?\s*)?\d{1,3}[.)](?!\d)"
# A question span never runs across a full answer key and the next
# question number, so it cannot swallow a neighbouring block.
QUESTION_SPAN = (
    r"((?:(?!" + ANSWER_KEYWORD + r"[:.\s]*[A-Da-d](?![A-Za-z])\s*" + NEXT_QUESTION + r").)+?)"
)

# Option markers must follow whitespace so "(A + B)" inside an option
# never reads as a marker.
LETTERED_MARKER = r"{label}[.)]"
PARENTHESIZED_MARKER = r"\({label}\)"


def option_spans(marker: str, span: str = r"(.+?)") -> str:
    return "".join(
        r"\s+" + marker.format(label=label) + r"\s*" + span for label in OPTION_LABELS
    )


LETTERED = re.compile(
    QUESTION_NUMBER + r"\s*" + QUESTION_SPAN + option_spans(LETTERED_MARKER) + r"\s*" + ANSWER_KEY
)
PARENTHESIZED = re.compile(
    QUESTION_NUMBER + r"\s*" + QUESTION_SPAN + option_spans(PARENTHESIZED_MARKER) + r"\s*" + ANSWER_KEY
)

GRAMMARS = (LETTERED, PARENTHESIZED)

_ANSWER_TAIL = re.compile(ANSWER_KEY)


def _scan_limit(text: str) -> int:
    """End of the last answer key; no structured match can end later."""
    end = 0
    for match in _ANSWER_TAIL.finditer(text):
        end = match.end()
    return end


def _candidate(match: Match, source_id: str) -> QuestionCandidate:
    number, question, opt_a, opt_b, opt_c, opt_d, answer = match.groups()
    return QuestionCandidate(
        number=int(number),
        question=clean_field(question),
        options={
            "A": clean_field(opt_a),
            "B": clean_field(opt_b),
            "C": clean_field(opt_c),
            "D": clean_field(opt_d),
        },
        answer=answer.upper(),
        source=source_id,
    )


def scan(grammar: Pattern, text: str, source_id: str, limit: int = None) -> List[QuestionCandidate]:
    if limit is None:
        limit = _scan_limit(text)
    candidates = []
    for match in grammar.finditer(text, 0, limit):
        if not all(match.groups()):
            continue
        candidates.append(_candidate(match, source_id))
    return candidates


def extract(text: str, source_id: str) -> List[QuestionCandidate]:
    """
    Run both option grammars over the whole normalized text.

    Results are concatenated, lettered first. The same question can come out
    of both grammars; identity resolution happens later in the pipeline.
    """
    limit = _scan_limit(text)
    if not limit:
        return []

    candidates: List[QuestionCandidate] = []
    for grammar in GRAMMARS:
        candidates.extend(scan(grammar, text, source_id, limit))
    return candidates
