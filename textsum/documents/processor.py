"""
Document Processor - Extract text from uploaded documents.

Supports: PDF, TXT, MD, DOCX
"""

import io
import os
import re
from dataclasses import dataclass

try:
    from PyPDF2 import PdfReader
except ImportError:
    PdfReader = None

try:
    from docx import Document as DocxDocument
except ImportError:
    DocxDocument = None


SUPPORTED_EXTENSIONS = (".txt", ".md", ".pdf", ".docx")


@dataclass
class ExtractedDocument:
    """Plain text pulled out of a document."""
    filename: str
    text: str
    metadata: dict


class DocumentProcessor:
    """Turn uploaded files into text for the summarizer."""

    def extract(self, content: bytes, filename: str) -> ExtractedDocument:
        """Extract and clean the text of a document."""
        ext = os.path.splitext(filename)[1].lower()

        if ext == ".pdf":
            text, pages = self._extract_pdf(content)
        elif ext == ".docx":
            text, pages = self._extract_docx(content), None
        elif ext in (".txt", ".md", ""):
            text, pages = content.decode("utf-8", errors="ignore"), None
        else:
            raise ValueError(
                f"Unsupported file type {ext!r}; expected one of {SUPPORTED_EXTENSIONS}"
            )

        text = self._clean(text)
        metadata = {"filename": filename, "nchar": len(text)}
        if pages is not None:
            metadata["pages"] = pages

        return ExtractedDocument(filename=filename, text=text, metadata=metadata)

    def extract_file(self, path: str) -> ExtractedDocument:
        with open(path, "rb") as f:
            return self.extract(f.read(), os.path.basename(path))

    def _extract_pdf(self, content: bytes):
        if PdfReader is None:
            raise ImportError("Install pypdf2: pip install pypdf2")

        reader = PdfReader(io.BytesIO(content))
        parts = []
        for page in reader.pages:
            text = page.extract_text()
            if text:
                parts.append(text)
        return "\n\n".join(parts), len(reader.pages)

    def _extract_docx(self, content: bytes) -> str:
        if DocxDocument is None:
            raise ImportError("Install python-docx: pip install python-docx")

        doc = DocxDocument(io.BytesIO(content))
        return "\n\n".join(p.text for p in doc.paragraphs if p.text.strip())

    def _clean(self, text: str) -> str:
        text = re.sub(r"[ \t]+", " ", text)
        text = re.sub(r"\n{3,}", "\n\n", text)
        return text.strip()
