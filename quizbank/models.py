"""
Data types shared by the extraction pipeline and its consumers.

Candidates are provisional parse results; records are the validated,
identity-assigned questions that end up in a pool.
"""
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

from . import config

logger = logging.getLogger(__name__)

OPTION_LABELS = ("A", "B", "C", "D")


@dataclass(frozen=True)
class SourceDocument:
    """A document name plus its already-extracted, page-ordered text."""
    name: str
    text: str

    def read_text(self) -> str:
        return self.text


@dataclass
class QuestionCandidate:
    number: int
    question: str
    options: Dict[str, str]
    answer: str
    source: str

    def invalid_reason(self) -> Optional[str]:
        if len(self.question) <= config.MIN_QUESTION_LENGTH:
            return f"question text too short ({len(self.question)} chars)"
        for label in OPTION_LABELS:
            if not self.options.get(label):
                return f"option {label} is empty"
        if self.answer not in OPTION_LABELS:
            return f"answer {self.answer!r} is not one of A-D"
        return None


@dataclass(frozen=True)
class QuestionRecord:
    id: str
    number: int
    question: str
    options: Mapping[str, str]
    answer: str
    source: str

    def __post_init__(self):
        # frozen covers the fields, not the dict behind options
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    @classmethod
    def from_candidate(cls, candidate: QuestionCandidate) -> "QuestionRecord":
        return cls(
            id=f"{candidate.source}-{candidate.number}",
            number=candidate.number,
            question=candidate.question,
            options={label: candidate.options[label] for label in OPTION_LABELS},
            answer=candidate.answer,
            source=candidate.source,
        )

    def to_dict(self, include_answer: bool = True) -> Dict[str, object]:
        payload = {
            "id": self.id,
            "number": self.number,
            "question": self.question,
            "options": dict(self.options),
            "source": self.source,
        }
        if include_answer:
            payload["answer"] = self.answer
        return payload


@dataclass
class DocumentReport:
    """What happened to one document during a pipeline run."""
    name: str
    structured_count: int = 0
    used_fallback: bool = False
    candidate_count: int = 0
    record_count: int = 0
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class QuestionPool:
    """
    Ordered, append-only collection of QuestionRecords.

    Identity collisions are resolved by the duplicate policy:
      last   - the later record replaces the earlier one in its original slot
      first  - later records with a known identity are ignored
      reject - every record carrying a colliding identity is dropped
    """

    def __init__(self, duplicate_policy: str = None):
        self.duplicate_policy = duplicate_policy or config.DUPLICATE_POLICY
        if self.duplicate_policy not in {"last", "first", "reject"}:
            raise ValueError(f"Unknown duplicate policy: {self.duplicate_policy!r}")
        self._records: Dict[str, QuestionRecord] = {}
        self._rejected = set()
        self.reports: List[DocumentReport] = []

    def add(self, record: QuestionRecord) -> bool:
        if record.id in self._rejected:
            return False
        if record.id not in self._records:
            self._records[record.id] = record
            return True

        if self.duplicate_policy == "last":
            logger.debug("Duplicate id %s: keeping the later record", record.id)
            self._records[record.id] = record
            return True
        if self.duplicate_policy == "first":
            logger.debug("Duplicate id %s: keeping the earlier record", record.id)
            return False

        logger.debug("Duplicate id %s: rejecting all copies", record.id)
        del self._records[record.id]
        self._rejected.add(record.id)
        return False

    @property
    def records(self) -> List[QuestionRecord]:
        return list(self._records.values())

    def get(self, record_id: str) -> Optional[QuestionRecord]:
        return self._records.get(record_id)

    def ids(self) -> List[str]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[QuestionRecord]:
        return iter(list(self._records.values()))

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    @property
    def failures(self) -> List[DocumentReport]:
        return [r for r in self.reports if r.failed]

    def failure_summary(self) -> Optional[str]:
        failed = len(self.failures)
        if not failed:
            return None
        return f"{failed} of {len(self.reports)} documents failed"

    def has_enough(self, minimum: int = None) -> bool:
        if minimum is None:
            minimum = config.MIN_POOL_SIZE
        return len(self) >= minimum

    def shortfall_message(self, minimum: int = None) -> Optional[str]:
        if minimum is None:
            minimum = config.MIN_POOL_SIZE
        if self.has_enough(minimum):
            return None
        return f"Only {len(self)} questions found. Need at least {minimum}."
