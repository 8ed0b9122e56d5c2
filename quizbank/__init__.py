"""Recover multiple-choice questions from PDF text with broken ligatures."""
from .extractor import extract
from .fallback import segment
from .models import (
    DocumentReport,
    QuestionCandidate,
    QuestionPool,
    QuestionRecord,
    SourceDocument,
)
from .normalizer import clean_field, normalize
from .pdf_source import DocumentExtractionError, PdfDocument, iter_pdf_documents
from .pipeline import ExtractionPipeline, build_pool
from .sampler import sample, sample_rounds

__version__ = "0.1.0"

__all__ = [
    "DocumentExtractionError",
    "DocumentReport",
    "ExtractionPipeline",
    "PdfDocument",
    "QuestionCandidate",
    "QuestionPool",
    "QuestionRecord",
    "SourceDocument",
    "build_pool",
    "clean_field",
    "extract",
    "iter_pdf_documents",
    "normalize",
    "sample",
    "sample_rounds",
    "segment",
]
