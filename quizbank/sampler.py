import random
from typing import Iterable, List

from .models import QuestionRecord


def sample(pool: Iterable[QuestionRecord], count: int, exclude_ids: Iterable[str] = (), rng: random.Random = None) -> List[QuestionRecord]:
    """
    Draw up to ``count`` random records whose ids are not in ``exclude_ids``.

    The pool itself is never reordered. A result shorter than ``count``
    means the pool is depleted for this exclusion set.
    """
    excluded = set(exclude_ids)
    available = [record for record in pool if record.id not in excluded]
    # random.shuffle is an in-place Fisher-Yates shuffle
    (rng or random).shuffle(available)
    return available[:max(count, 0)]


def sample_rounds(pool: Iterable[QuestionRecord], count: int, rounds: int, exclude_ids: Iterable[str] = (), rng: random.Random = None) -> List[List[QuestionRecord]]:
    """Draw successive rounds that never repeat a question, stopping once the pool runs dry."""
    records = list(pool)
    excluded = list(exclude_ids)
    drawn = []
    for _ in range(rounds):
        batch = sample(records, count, excluded, rng)
        if not batch:
            break
        drawn.append(batch)
        excluded.extend(record.id for record in batch)
        if len(batch) < count:
            break
    return drawn
