from smartdocs.classification.rules import (
    FILENAME_FALLBACKS,
    FILENAME_RULES,
    FilenameRule,
)
from smartdocs.documents.models import OTHER


class FilenameClassifier:
    """Guesses a category from filename keywords when no content is available."""

    def __init__(self, rules: tuple[FilenameRule, ...] = FILENAME_RULES) -> None:
        self._rules = rules

    def classify(self, filename: str, mime_type: str) -> FilenameRule:
        name = filename.lower()
        for rule in self._rules:
            if any(keyword in name for keyword in rule.keywords):
                return rule
        mime = mime_type.lower()
        if "pdf" in mime:
            return FILENAME_FALLBACKS["pdf"]
        if "image" in mime:
            return FILENAME_FALLBACKS["image"]
        summary = f"{mime_type or 'Document'} uploaded successfully"
        return FilenameRule(OTHER, (), ("document",), summary)
