from unittest.mock import MagicMock, patch

import pytest

from smartdocs.documents.models import SourceFile
from smartdocs.extraction.content_extractor import ContentExtractor, resolve_mime_type
from smartdocs.ocr.exceptions import OcrError
from smartdocs.ocr.tesseract_adapter import TesseractAdapter
from smartdocs.pdf.exceptions import PdfExtractionError
from smartdocs.pdf.pdfplumber_adapter import PdfPlumberAdapter


def _make_extractor() -> tuple[ContentExtractor, MagicMock, MagicMock]:
    pdf = MagicMock()
    ocr = MagicMock()
    return ContentExtractor(pdf_extractor=pdf, ocr_engine=ocr), pdf, ocr


class TestResolveMimeType:
    def test_keeps_declared_type(self) -> None:
        file = SourceFile("scan.bin", "image/png", b"")
        assert resolve_mime_type(file) == "image/png"

    @pytest.mark.parametrize("declared", ["", "application/octet-stream"])
    def test_guesses_from_filename_when_generic(self, declared: str) -> None:
        file = SourceFile("bill.pdf", declared, b"")
        assert resolve_mime_type(file) == "application/pdf"


class TestContentExtractor:
    def test_pdf_goes_to_pdf_extractor(self) -> None:
        extractor, pdf, ocr = _make_extractor()
        pdf.extract.return_value = "pdf text"
        result = extractor.extract(SourceFile("a.pdf", "application/pdf", b"%PDF"))
        assert result == "pdf text"
        pdf.extract.assert_called_once_with(b"%PDF")
        ocr.recognize.assert_not_called()

    def test_image_goes_to_ocr(self) -> None:
        extractor, pdf, ocr = _make_extractor()
        ocr.recognize.return_value = "ocr text"
        result = extractor.extract(SourceFile("a.jpg", "image/jpeg", b"\xff\xd8"))
        assert result == "ocr text"
        pdf.extract.assert_not_called()

    def test_unsupported_type_returns_empty(self) -> None:
        extractor, pdf, ocr = _make_extractor()
        with patch("smartdocs.extraction.content_extractor.Log") as mock_log:
            result = extractor.extract(SourceFile("a.docx", "application/msword", b"x"))
        assert result == ""
        mock_log.warning.assert_called_once()
        pdf.extract.assert_not_called()
        ocr.recognize.assert_not_called()

    def test_pdf_failure_degrades_to_empty(self) -> None:
        extractor, pdf, _ocr = _make_extractor()
        pdf.extract.side_effect = PdfExtractionError("broken")
        assert extractor.extract(SourceFile("a.pdf", "application/pdf", b"x")) == ""

    def test_ocr_failure_degrades_to_empty(self) -> None:
        extractor, _pdf, ocr = _make_extractor()
        ocr.recognize.side_effect = OcrError("timeout")
        assert extractor.extract(SourceFile("a.png", "image/png", b"x")) == ""

    def test_real_pdf_text_layer(self, sample_pdf_bytes: bytes) -> None:
        extractor = ContentExtractor(PdfPlumberAdapter(), TesseractAdapter())
        result = extractor.extract(SourceFile("bill.pdf", "application/pdf", sample_pdf_bytes))
        assert "Invoice #102" in result
