"""
Turns a batch of documents into one question pool.

Each document is read and parsed on its own; text extraction is the only
I/O and runs in worker threads, everything after it is a pure transform.
Results are merged into the pool once every document has settled, in the
order the documents were submitted.
"""
import asyncio
import logging
from typing import List, Sequence, Tuple

from . import config
from .extractor import extract
from .fallback import segment
from .models import DocumentReport, QuestionCandidate, QuestionPool, QuestionRecord
from .normalizer import normalize

logger = logging.getLogger(__name__)


class ExtractionPipeline:
    def __init__(self, min_structured: int = None, duplicate_policy: str = None):
        self.min_structured = (
            config.MIN_STRUCTURED_CANDIDATES if min_structured is None else min_structured
        )
        self.duplicate_policy = duplicate_policy or config.DUPLICATE_POLICY

    def extract_candidates(self, raw: str, source_id: str, report: DocumentReport = None) -> List[QuestionCandidate]:
        """Normalize one document's text and parse it, falling back when recall is low."""
        text = normalize(raw)
        candidates = extract(text, source_id)
        if report is not None:
            report.structured_count = len(candidates)

        if len(candidates) < self.min_structured:
            logger.debug(
                "%s: %d structured candidates (< %d), segmenting by question number",
                source_id, len(candidates), self.min_structured,
            )
            candidates = segment(text, source_id)
            if report is not None:
                report.used_fallback = True

        if report is not None:
            report.candidate_count = len(candidates)
        return candidates

    def build_records(self, candidates: Sequence[QuestionCandidate]) -> List[QuestionRecord]:
        records = []
        for candidate in candidates:
            reason = candidate.invalid_reason()
            if reason:
                logger.debug("Dropping %s-%s: %s", candidate.source, candidate.number, reason)
                continue
            records.append(QuestionRecord.from_candidate(candidate))
        return records

    def extract_document(self, raw: str, source_id: str, report: DocumentReport = None) -> List[QuestionRecord]:
        records = self.build_records(self.extract_candidates(raw, source_id, report))
        if report is not None:
            report.record_count = len(records)
        return records

    async def _process(self, document) -> Tuple[DocumentReport, List[QuestionRecord]]:
        report = DocumentReport(name=document.name)
        try:
            raw = await asyncio.to_thread(document.read_text)
            records = self.extract_document(raw, document.name, report)
        except Exception as e:
            logger.error("Extraction failed for '%s': %s", document.name, e, exc_info=True)
            report.error = str(e) or e.__class__.__name__
            return report, []

        if records:
            logger.info(
                "%s: %d questions (%s)",
                document.name, len(records), "fallback" if report.used_fallback else "structured",
            )
        else:
            logger.warning("%s: no questions found", document.name)
        return report, records

    async def run(self, documents: Sequence) -> QuestionPool:
        """
        Extract every document concurrently and merge the results.

        A document whose text cannot be read is reported and skipped; the
        rest of the batch still lands in the pool.
        """
        results = await asyncio.gather(*(self._process(doc) for doc in documents))

        pool = QuestionPool(self.duplicate_policy)
        for report, records in results:
            pool.reports.append(report)
            for record in records:
                pool.add(record)

        summary = pool.failure_summary()
        if summary:
            logger.warning(summary)
        return pool

    def run_sync(self, documents: Sequence) -> QuestionPool:
        return asyncio.run(self.run(documents))


def build_pool(documents: Sequence, **kwargs) -> QuestionPool:
    return ExtractionPipeline(**kwargs).run_sync(documents)
