"""Resume text extraction with pypdf."""

import logging
from pathlib import Path

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from .base import DocumentTextExtractor, ProviderError

logger = logging.getLogger(__name__)


class PdfTextExtractor(DocumentTextExtractor):
    name = "pdf"

    def extract_text(self, path: Path) -> str:
        try:
            reader = PdfReader(str(path))
            pages = [page.extract_text() or "" for page in reader.pages]
        except (PdfReadError, OSError, ValueError) as e:
            logger.warning(f"Could not read PDF {path.name}: {e}")
            raise ProviderError(self.name, "Could not read the uploaded PDF")

        text = "\n".join(pages).strip()
        if not text:
            raise ProviderError(self.name, "No readable text found in the uploaded PDF")
        return text
