import io

import pytest
from pypdf import PdfWriter

from quizbank.pdf_source import DocumentExtractionError, PdfDocument, iter_pdf_documents
from quizbank.pipeline import build_pool


def blank_pdf_bytes(pages=1):
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=200, height=200)
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()


class TestPdfDocument:
    def test_blank_pages_give_empty_text(self):
        doc = PdfDocument(blank_pdf_bytes(2), "blank.pdf")
        assert doc.read_text().strip() == ""

    def test_reads_from_path(self, tmp_path):
        path = tmp_path / "blank.pdf"
        path.write_bytes(blank_pdf_bytes())
        doc = PdfDocument(path)
        assert doc.name == "blank.pdf"
        assert doc.read_text().strip() == ""

    def test_garbage_bytes(self):
        doc = PdfDocument(b"this is not a pdf at all", "junk.pdf")
        with pytest.raises(DocumentExtractionError) as exc_info:
            doc.read_text()
        assert exc_info.value.name == "junk.pdf"

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentExtractionError):
            PdfDocument(tmp_path / "missing.pdf").read_text()


class TestFolder:
    def test_lists_pdfs_sorted(self, tmp_path):
        for name in ["b.pdf", "a.pdf", "notes.txt"]:
            (tmp_path / name).write_bytes(b"")
        assert [d.name for d in iter_pdf_documents(tmp_path)] == ["a.pdf", "b.pdf"]

    def test_unreadable_pdf_is_reported(self, tmp_path):
        (tmp_path / "bad.pdf").write_bytes(b"garbage")
        (tmp_path / "blank.pdf").write_bytes(blank_pdf_bytes())
        pool = build_pool(list(iter_pdf_documents(tmp_path)))
        assert len(pool) == 0
        assert [r.name for r in pool.failures] == ["bad.pdf"]
        assert pool.failure_summary() == "1 of 2 documents failed"
