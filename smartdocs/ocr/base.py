from abc import ABC, abstractmethod


class BaseOcrEngine(ABC):
    """Contract for all image text recognition adapters."""

    @abstractmethod
    def recognize(self, image_bytes: bytes) -> str:
        """Recognize text in an encoded image (PNG, JPEG, ...).

        Returns:
            Recognized lines in reading order, one per output line.

        Raises:
            OcrError: if the image cannot be decoded or the engine fails.
        """
