import io

import pytesseract
from PIL import Image

from smartdocs.ocr.base import BaseOcrEngine
from smartdocs.ocr.exceptions import OcrError

LineKey = tuple[int, int, int]


class TesseractAdapter(BaseOcrEngine):
    """Recognizes text with Tesseract at word granularity, reassembled into lines."""

    def __init__(self, language: str = "eng", timeout_seconds: int = 60) -> None:
        self._language = language
        self._timeout_seconds = timeout_seconds

    def recognize(self, image_bytes: bytes) -> str:
        try:
            with Image.open(io.BytesIO(image_bytes)) as img:
                data = pytesseract.image_to_data(
                    img.convert("RGB"),
                    lang=self._language,
                    timeout=self._timeout_seconds,
                    output_type=pytesseract.Output.DICT,
                )
        except OcrError:
            raise
        except Exception as exc:
            raise OcrError(f"tesseract recognition failed: {exc}") from exc
        return "\n".join(self._group_lines(data)).strip()

    @staticmethod
    def _group_lines(data: dict[str, list[object]]) -> list[str]:
        """Join recognized words sharing (block, paragraph, line) in emit order."""
        lines: dict[LineKey, list[str]] = {}
        for i, word in enumerate(data.get("text", [])):
            token = str(word).strip()
            if not token:
                continue
            key = (
                int(data["block_num"][i]),  # type: ignore[call-overload]
                int(data["par_num"][i]),  # type: ignore[call-overload]
                int(data["line_num"][i]),  # type: ignore[call-overload]
            )
            lines.setdefault(key, []).append(token)
        return [" ".join(words) for words in lines.values()]
