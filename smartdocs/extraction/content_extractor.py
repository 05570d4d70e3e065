"""Turns raw uploaded bytes into plain text.

Extraction never fails from the caller's point of view: unsupported types
and engine errors both yield an empty string, which downstream code treats
as "no evidence".
"""

import mimetypes

from smartdocs.config.settings import Settings
from smartdocs.documents.models import SourceFile
from smartdocs.logging.logger import Log
from smartdocs.ocr.base import BaseOcrEngine
from smartdocs.ocr.exceptions import OcrError
from smartdocs.ocr.tesseract_adapter import TesseractAdapter
from smartdocs.pdf.base import BasePdfExtractor
from smartdocs.pdf.exceptions import PdfExtractionError
from smartdocs.pdf.factory import PdfExtractorFactory

PDF_MIME_TYPE = "application/pdf"
_GENERIC_MIME_TYPES = frozenset({"", "application/octet-stream"})


def resolve_mime_type(file: SourceFile) -> str:
    """Return the declared MIME type, guessing from the filename when it is generic."""
    declared = file.mime_type.lower().strip()
    if declared not in _GENERIC_MIME_TYPES:
        return declared
    guessed, _ = mimetypes.guess_type(file.filename)
    return (guessed or declared).lower()


class ContentExtractor:
    """Dispatches a file to OCR or PDF text-layer extraction by MIME type."""

    def __init__(self, pdf_extractor: BasePdfExtractor, ocr_engine: BaseOcrEngine) -> None:
        self._pdf_extractor = pdf_extractor
        self._ocr_engine = ocr_engine

    def extract(self, file: SourceFile) -> str:
        mime_type = resolve_mime_type(file)
        try:
            if mime_type == PDF_MIME_TYPE:
                Log.info(f"Extracting text layer from PDF '{file.filename}'")
                text = self._pdf_extractor.extract(file.data)
            elif mime_type.startswith("image/"):
                Log.info(f"Running OCR on image '{file.filename}'")
                text = self._ocr_engine.recognize(file.data)
            else:
                Log.warning(f"Unsupported file type '{mime_type}' for '{file.filename}'")
                return ""
        except (PdfExtractionError, OcrError) as exc:
            Log.error(f"Text extraction failed for '{file.filename}': {exc}")
            return ""
        Log.info(f"Extracted {len(text)} chars from '{file.filename}'")
        return text


def build_content_extractor(settings: Settings) -> ContentExtractor:
    """Build a ContentExtractor with the configured PDF and OCR engines."""
    return ContentExtractor(
        pdf_extractor=PdfExtractorFactory.create(settings),
        ocr_engine=TesseractAdapter(
            language=settings.ocr_language,
            timeout_seconds=settings.ocr_timeout_seconds,
        ),
    )
