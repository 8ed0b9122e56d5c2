import io
import json

from quizbank import cli
from quizbank.models import DocumentReport, SourceDocument
from quizbank.pipeline import build_pool


def test_write_text_groups_by_document(make_block):
    pool = build_pool([
        SourceDocument("quiz.pdf", make_block(1, "B")),
        SourceDocument("empty.pdf", "nothing to see"),
    ])
    out = io.StringIO()
    cli.write_text(pool, out)
    text = out.getvalue()

    assert "--- FILE: quiz.pdf ---" in text
    assert "1. Which statement about item 1 is true?" in text
    assert "  D) delta" in text
    assert "  * B" in text
    assert "--- FILE: empty.pdf ---\nNO QUESTIONS FOUND" in text


def test_write_json(pool):
    out = io.StringIO()
    cli.write_json(pool, out)
    data = json.loads(out.getvalue())
    assert len(data) == 12
    assert data[0]["id"] == "bank-1"
    assert data[0]["answer"] == "C"


def test_audit_flags_crashes_and_empty_documents(make_block, capsys):
    pool = build_pool([
        SourceDocument("quiz.pdf", make_block(1, "B")),
        SourceDocument("empty.pdf", ""),
    ])
    pool.reports.append(DocumentReport("bad.pdf", error="unreadable"))

    assert cli.print_audit(pool) == 1
    out = capsys.readouterr().out
    assert "Checking quiz.pdf... OK (1 q, fallback)" in out
    assert "empty.pdf: 0 questions parsed" in out
    assert "bad.pdf: CRASH unreadable" in out


def test_main_without_pdfs(tmp_path, capsys):
    assert cli.main([str(tmp_path)]) == 1
    assert "No PDF files found." in capsys.readouterr().out


def test_main_writes_output_and_reports_shortfall(tmp_path, capsys):
    (tmp_path / "bad.pdf").write_bytes(b"garbage")
    output = tmp_path / "out.txt"

    assert cli.main([str(tmp_path), "-o", str(output), "--min-questions", "1"]) == 1
    assert "ERROR: Could not read text from 'bad.pdf'" in output.read_text(encoding="utf-8")
    out = capsys.readouterr().out
    assert "1 of 1 documents failed" in out
    assert "Only 0 questions found. Need at least 1." in out
