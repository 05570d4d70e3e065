from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text-layer extraction adapters."""

    def __init__(self, max_pages: int = 10) -> None:
        self._max_pages = max_pages

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract the text layer of the first ``max_pages`` pages.

        Pages beyond the bound are skipped without notice.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Page texts joined with newlines, stripped.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """
