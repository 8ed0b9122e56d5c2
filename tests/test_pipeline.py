import time

import pytest

from quizbank import pipeline
from quizbank.models import SourceDocument
from quizbank.pdf_source import DocumentExtractionError
from quizbank.pipeline import ExtractionPipeline, build_pool


class BrokenDocument:
    name = "broken.pdf"

    def read_text(self):
        raise DocumentExtractionError(self.name, "no text layer")


class SlowDocument(SourceDocument):
    def read_text(self):
        time.sleep(0.2)
        return self.text


DUPLICATED = (
    "1. First version of the question here? A. a1 B. b1 C. c1 D. d1 Answer: B "
    "1. Second version of the question here? A. a2 B. b2 C. c2 D. d2 Answer: C"
)


class TestRecallGate:
    def test_single_clean_question_goes_through_fallback(self):
        pool = build_pool([SourceDocument("doc", "1) What is 2+2? A) 3 B) 4 C) 5 D) 6 Answer: B")])
        assert len(pool) == 1
        record = pool.records[0]
        assert record.id == "doc-1"
        assert record.answer == "B"
        assert pool.reports[0].used_fallback

    def test_few_structured_matches_trigger_fallback(self, mixed_document):
        pool = build_pool([SourceDocument("doc", mixed_document)])
        report = pool.reports[0]
        assert report.structured_count == 3
        assert report.used_fallback
        assert len(pool) == 12
        assert [r.answer for r in pool] == ["B"] * 3 + ["A"] * 9

    def test_enough_structured_matches_skip_fallback(self, make_block):
        text = " ".join(make_block(n, "D") for n in range(1, 6)) + " " + make_block(6)
        pool = build_pool([SourceDocument("doc", text)])
        assert not pool.reports[0].used_fallback
        assert pool.ids() == [f"doc-{n}" for n in range(1, 6)]

    def test_threshold_is_configurable(self, mixed_document):
        pool = build_pool([SourceDocument("doc", mixed_document)], min_structured=0)
        assert len(pool) == 3

    def test_answer_word_in_question_keeps_structured_hit(self, make_block):
        text = " ".join(make_block(n, "C") for n in range(1, 6))
        text += " 6. Which of the following statements is correct A. foo B. bar C. baz D. qux Answer: B"
        pool = build_pool([SourceDocument("doc", text)])
        assert not pool.reports[0].used_fallback
        assert pool.ids() == [f"doc-{n}" for n in range(1, 7)]
        assert pool.get("doc-6").answer == "B"

    def test_invalid_candidates_are_dropped(self):
        text = "1. Too short A. a B. b C. c D. d Answer: A"
        pipeline = ExtractionPipeline()
        assert pipeline.extract_document(text, "doc") == []


class TestBatch:
    def test_failed_document_leaves_partial_pool(self, mixed_document):
        pool = build_pool([SourceDocument("good.pdf", mixed_document), BrokenDocument()])
        assert len(pool) == 12
        assert pool.failure_summary() == "1 of 2 documents failed"
        assert "no text layer" in pool.reports[1].error

    def test_parser_fault_leaves_partial_pool(self, mixed_document, monkeypatch):
        real_extract = pipeline.extract

        def failing(text, source_id):
            if source_id == "bad":
                raise RuntimeError("parser fault")
            return real_extract(text, source_id)

        monkeypatch.setattr(pipeline, "extract", failing)
        pool = build_pool([SourceDocument("good", mixed_document), SourceDocument("bad", mixed_document)])
        assert len(pool) == 12
        assert pool.failure_summary() == "1 of 2 documents failed"
        assert pool.reports[1].error == "parser fault"

    def test_merge_follows_submission_order(self, make_block):
        slow = SlowDocument("a", make_block(1, "A"))
        fast = SourceDocument("b", make_block(1, "B"))
        pool = build_pool([slow, fast])
        assert pool.ids() == ["a-1", "b-1"]
        assert [r.name for r in pool.reports] == ["a", "b"]

    def test_empty_batch(self):
        pool = build_pool([])
        assert len(pool) == 0
        assert pool.failure_summary() is None

    @pytest.mark.parametrize("policy, answers", [
        ("last", ["C"]),
        ("first", ["B"]),
        ("reject", []),
    ])
    def test_duplicate_identity(self, policy, answers):
        pool = build_pool([SourceDocument("doc", DUPLICATED)], duplicate_policy=policy)
        assert [r.answer for r in pool] == answers
