import io
import logging
from pathlib import Path
from typing import IO, Iterator, Union

from pypdf import PdfReader
from pypdf.errors import PyPdfError

logger = logging.getLogger(__name__)

PdfInput = Union[Path, str, bytes, IO[bytes]]


class DocumentExtractionError(Exception):
    """The PDF text layer of one document could not be read."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"Could not read text from '{name}': {reason}")
        self.name = name
        self.reason = reason


class PdfDocument:
    """A PDF whose text is read lazily, one page per line group."""

    def __init__(self, source: PdfInput, name: str = None):
        if name is None:
            name = Path(source).name if isinstance(source, (str, Path)) else "document.pdf"
        self.source = source
        self.name = name

    def read_text(self) -> str:
        source = io.BytesIO(self.source) if isinstance(self.source, bytes) else self.source
        try:
            reader = PdfReader(source)
            pages = [page.extract_text() or "" for page in reader.pages]
        except (PyPdfError, OSError, ValueError) as e:
            raise DocumentExtractionError(self.name, str(e)) from e
        return "\n".join(pages)

    def __repr__(self) -> str:
        return f"PdfDocument({self.name!r})"


def iter_pdf_documents(folder: Path) -> Iterator[PdfDocument]:
    try:
        paths = sorted(Path(folder).glob("*.pdf"))
    except OSError as e:
        logger.warning("Failed to list documents directory %s: %s", folder, e)
        return
    for path in paths:
        yield PdfDocument(path, path.name)
