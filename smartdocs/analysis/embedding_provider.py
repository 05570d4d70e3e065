from smartdocs.analysis.base import BaseAnalysisProvider
from smartdocs.classification.classifier import Classifier
from smartdocs.classification.models import Classification
from smartdocs.documents.models import AnalysisResult, SourceFile
from smartdocs.embeddings.base import BaseEmbeddingClient
from smartdocs.embeddings.exceptions import EmbeddingError
from smartdocs.embeddings.similarity import cosine_similarity
from smartdocs.extraction.content_extractor import ContentExtractor
from smartdocs.logging.logger import Log
from smartdocs.synthesis.synthesizer import Synthesizer

# Zero-shot candidate labels and the rule category each one maps to.
CANDIDATE_LABELS: tuple[tuple[str, str], ...] = (
    ("receipt", "Receipt"),
    ("invoice", "Receipt"),
    ("passport", "Identity"),
    ("id card", "Identity"),
    ("contract", "Legal"),
    ("notes", "Notes"),
    ("medical report", "Medical"),
    ("prescription", "Medical"),
    ("boarding pass", "Travel"),
    ("certificate", "Education"),
)

_MIN_TEXT_CHARS = 20
_EMBED_CHAR_LIMIT = 512


class EmbeddingAnalysisProvider(BaseAnalysisProvider):
    """Local extraction plus zero-shot categorization by embedding similarity.

    The category is the candidate label closest to the document text. When
    the text is too short, the best similarity is below ``min_score`` or the
    embedding backend fails, the rule classifier decides instead.
    """

    def __init__(
        self,
        *,
        extractor: ContentExtractor,
        embedding_client: BaseEmbeddingClient,
        min_score: float = 0.15,
        classifier: Classifier | None = None,
        synthesizer: Synthesizer | None = None,
    ) -> None:
        self._extractor = extractor
        self._embedding_client = embedding_client
        self._min_score = min_score
        self._classifier = classifier or Classifier()
        self._synthesizer = synthesizer or Synthesizer()
        self._label_vectors: list[list[float]] | None = None

    def analyze(self, file: SourceFile) -> AnalysisResult:
        ocr_text = self._extractor.extract(file)
        classification = self._classify(ocr_text, file.filename)
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

    def _classify(self, text: str, filename: str) -> Classification:
        if len(text.strip()) < _MIN_TEXT_CHARS:
            return self._classifier.classify(text, filename)
        try:
            category, score = self._zero_shot(text)
        except (EmbeddingError, ValueError) as exc:
            Log.warning(f"Embedding classification failed, using rules: {exc}")
            return self._classifier.classify(text, filename)

        if score < self._min_score:
            Log.info(f"Best label score {score:.3f} below threshold, using rules")
            return self._classifier.classify(text, filename)
        Log.info(f"Zero-shot category '{category}' (score {score:.3f})")
        return Classification(category=category, tags=self._classifier.tags_for(category))

    def _zero_shot(self, text: str) -> tuple[str, float]:
        label_vectors = self._get_label_vectors()
        [text_vector] = self._embedding_client.embed([text[:_EMBED_CHAR_LIMIT]])
        best_category, best_score = CANDIDATE_LABELS[0][1], float("-inf")
        for (_, category), vector in zip(CANDIDATE_LABELS, label_vectors):
            score = cosine_similarity(text_vector, vector)
            if score > best_score:
                best_category, best_score = category, score
        return best_category, best_score

    def _get_label_vectors(self) -> list[list[float]]:
        if self._label_vectors is None:
            labels = [f"{label} document" for label, _ in CANDIDATE_LABELS]
            self._label_vectors = self._embedding_client.embed(labels)
        return self._label_vectors
