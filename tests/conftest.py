import pytest

from quizbank.models import QuestionPool
from quizbank.pipeline import ExtractionPipeline


@pytest.fixture
def make_block():
    """Build one lettered question block, with or without a printed answer key."""
    def _make(number, answer=None):
        block = f"{number}. Which statement about item {number} is true? A. alpha B. beta C. gamma D. delta"
        if answer:
            block += f" Answer: {answer}"
        return block
    return _make


@pytest.fixture
def mixed_document(make_block):
    """Three answered questions followed by nine without an answer key."""
    answered = [make_block(n, "B") for n in range(1, 4)]
    unanswered = [make_block(n) for n in range(4, 13)]
    return " ".join(answered + unanswered)


@pytest.fixture
def answered_document(make_block):
    return " ".join(make_block(n, "C") for n in range(1, 13))


@pytest.fixture
def pool(answered_document):
    result = QuestionPool()
    for record in ExtractionPipeline().extract_document(answered_document, "bank"):
        result.add(record)
    return result
