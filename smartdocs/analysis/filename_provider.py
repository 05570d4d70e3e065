from smartdocs.analysis.base import BaseAnalysisProvider
from smartdocs.classification.filename_classifier import FilenameClassifier
from smartdocs.documents.models import AnalysisResult, SourceFile
from smartdocs.logging.logger import Log


class FilenameAnalysisProvider(BaseAnalysisProvider):
    """Degraded analysis for text-only backends that cannot see the file.

    The category, tags and summary come from filename keywords alone; no
    OCR text or dates are produced. Callers can check ``low_fidelity``.
    """

    low_fidelity = True

    def __init__(self, backend: str, classifier: FilenameClassifier | None = None) -> None:
        self._backend = backend
        self._classifier = classifier or FilenameClassifier()

    def analyze(self, file: SourceFile) -> AnalysisResult:
        Log.warning(
            f"Provider '{self._backend}' cannot read file content; "
            f"classifying '{file.filename}' from its name only"
        )
        rule = self._classifier.classify(file.filename, file.mime_type)
        return AnalysisResult(
            title=file.stem,
            category=rule.category,
            summary=rule.summary,
            tags=rule.tags,
        )
