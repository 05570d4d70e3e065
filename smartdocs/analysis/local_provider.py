from smartdocs.analysis.base import BaseAnalysisProvider
from smartdocs.classification.classifier import Classifier
from smartdocs.documents.models import AnalysisResult, SourceFile
from smartdocs.extraction.content_extractor import ContentExtractor
from smartdocs.logging.logger import Log
from smartdocs.synthesis.synthesizer import Synthesizer


class LocalAnalysisProvider(BaseAnalysisProvider):
    """Offline analysis: extraction, rule classification and text synthesis.

    Fully deterministic and never touches the network.
    """

    def __init__(
        self,
        extractor: ContentExtractor,
        classifier: Classifier | None = None,
        synthesizer: Synthesizer | None = None,
    ) -> None:
        self._extractor = extractor
        self._classifier = classifier or Classifier()
        self._synthesizer = synthesizer or Synthesizer()

    def analyze(self, file: SourceFile) -> AnalysisResult:
        Log.info(f"Starting local analysis of '{file.filename}'")
        try:
            result = self._analyze_content(file)
        except Exception as exc:
            Log.error(f"Local analysis failed for '{file.filename}', using filename: {exc}")
            return self._analyze_filename(file)
        Log.info(f"Local analysis of '{file.filename}' complete: {result.category}")
        return result

    def _analyze_content(self, file: SourceFile) -> AnalysisResult:
        ocr_text = self._extractor.extract(file)
        classification = self._classifier.classify(ocr_text, file.filename)
        important_date = self._classifier.extract_date(ocr_text)
        return AnalysisResult(
            title=self._synthesizer.title(ocr_text, file.filename, classification.category),
            category=classification.category,
            summary=self._synthesizer.summary(ocr_text, classification.category),
            tags=classification.tags,
            important_date=important_date.date,
            date_label=important_date.label,
            ocr_text=ocr_text or None,
        )

    def _analyze_filename(self, file: SourceFile) -> AnalysisResult:
        name = file.filename.lower()
        classification = self._classifier.classify(name, name)
        return AnalysisResult(
            title=file.stem,
            category=classification.category,
            summary=f"{classification.category} document",
            tags=classification.tags,
        )
