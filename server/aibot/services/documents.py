from __future__ import annotations
import io
import logging
from pathlib import Path
from typing import Optional

import pytesseract
from docx import Document
from PIL import Image
from pypdf import PdfReader

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = (".txt", ".md", ".markdown", ".csv")


class DocumentExtractionError(Exception):
    pass


def is_image(mime_type: Optional[str]) -> bool:
    return bool(mime_type) and mime_type.startswith("image/")


class DocumentService:
    """Plain-text extraction for uploaded documents."""

    def __init__(self, ocr_lang: str = "eng") -> None:
        self.ocr_lang = ocr_lang

    def extract_text_from_buffer(self, data: bytes, mime_type: Optional[str], original_name: str) -> str:
        suffix = Path(original_name or "").suffix.lower()
        try:
            if is_image(mime_type):
                return self.extract_from_image(data)
            if suffix == ".pdf" or mime_type == "application/pdf":
                return self.extract_from_pdf(data)
            if suffix == ".docx" or "wordprocessingml" in (mime_type or ""):
                return self.extract_from_docx(data)
            if suffix in TEXT_EXTENSIONS or (mime_type or "").startswith("text/"):
                return self.extract_from_text(data)
        except Exception as e:
            logger.warning("Extraction failed for %s (%s): %s", original_name, mime_type, e)
            raise DocumentExtractionError(f"Failed to extract text from document: {e}") from e
        raise DocumentExtractionError(f"Unsupported file type: {suffix or mime_type or 'unknown'}")

    def extract_from_pdf(self, data: bytes) -> str:
        reader = PdfReader(io.BytesIO(data))
        return "\n".join(page.extract_text() or "" for page in reader.pages)

    def extract_from_docx(self, data: bytes) -> str:
        doc = Document(io.BytesIO(data))
        return "\n".join(p.text for p in doc.paragraphs)

    def extract_from_text(self, data: bytes) -> str:
        return data.decode("utf-8", errors="replace")

    def extract_from_image(self, data: bytes) -> str:
        with Image.open(io.BytesIO(data)) as img:
            text = pytesseract.image_to_string(img, lang=self.ocr_lang)
        return text.strip() or "No text found in image"


document_service = DocumentService()
