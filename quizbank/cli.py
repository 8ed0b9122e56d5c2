import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from . import config
from .models import QuestionPool
from .pdf_source import PdfDocument, iter_pdf_documents
from .pipeline import ExtractionPipeline


def _collect_documents(paths: List[Path]) -> List[PdfDocument]:
    documents = []
    for path in paths:
        if path.is_dir():
            documents.extend(iter_pdf_documents(path))
        else:
            documents.append(PdfDocument(path, path.name))
    return documents


def write_text(pool: QuestionPool, f_out) -> None:
    by_source = {}
    for record in pool:
        by_source.setdefault(record.source, []).append(record)

    for report in pool.reports:
        f_out.write(f"\n--- FILE: {report.name} ---\n")
        if report.failed:
            f_out.write(f"ERROR: {report.error}\n")
            continue
        records = by_source.get(report.name, [])
        if not records:
            f_out.write("NO QUESTIONS FOUND\n")
            continue
        for q in records:
            f_out.write(f"{q.number}. {q.question}\n")
            for label, text in q.options.items():
                f_out.write(f"  {label}) {text}\n")
            f_out.write(f"  * {q.answer}\n\n")


def write_json(pool: QuestionPool, f_out) -> None:
    json.dump([q.to_dict() for q in pool], f_out, indent=2, ensure_ascii=False)
    f_out.write("\n")


def print_audit(pool: QuestionPool) -> int:
    issues = []
    for report in pool.reports:
        print(f"Checking {report.name}...", end=" ")
        if report.failed:
            print(f"CRASH: {report.error}")
            issues.append(f"{report.name}: CRASH {report.error}")
        elif report.record_count == 0:
            print("FAILED (0 questions)")
            issues.append(f"{report.name}: 0 questions parsed")
        else:
            mode = "fallback" if report.used_fallback else "structured"
            dropped = report.candidate_count - report.record_count
            status = f"OK ({report.record_count} q, {mode}"
            if dropped:
                status += f", {dropped} dropped"
            print(status + ")")

    print("\n--- Summary ---")
    print(f"{len(pool)} questions from {len(pool.reports)} documents")
    if not issues:
        print("ALL DOCUMENTS PARSED.")
        return 0
    print(f"Found {len(issues)} issues:")
    for issue in issues:
        print(f" - {issue}")
    return 1


def main(argv: List[str] = None) -> int:
    parser = argparse.ArgumentParser(description="Extract multiple-choice questions from PDF files.")
    parser.add_argument("paths", nargs="*", type=Path, help=f"PDF files or folders (default: {config.DOCUMENTS_DIR})")
    parser.add_argument("-o", "--output", type=Path, default=Path("all_questions.txt"))
    parser.add_argument("--json", action="store_true", help="write JSON instead of text")
    parser.add_argument("--audit", action="store_true", help="print a per-document report instead of writing questions")
    parser.add_argument("--min-questions", type=int, default=config.MIN_POOL_SIZE)
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    documents = _collect_documents(args.paths or [config.DOCUMENTS_DIR])
    if not documents:
        print("No PDF files found.")
        return 1

    print(f"Found {len(documents)} PDF files.")
    pool = ExtractionPipeline().run_sync(documents)

    if args.audit:
        return print_audit(pool)

    with open(args.output, "w", encoding="utf-8") as f_out:
        if args.json:
            write_json(pool, f_out)
        else:
            write_text(pool, f_out)
    print(f"Done! {len(pool)} questions saved to {args.output}")

    if pool.failure_summary():
        print(f"⚠️  {pool.failure_summary()}")
    shortfall = pool.shortfall_message(args.min_questions)
    if shortfall:
        print(f"⚠️  {shortfall}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
