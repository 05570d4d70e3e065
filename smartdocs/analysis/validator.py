"""Validates a remote model's analysis JSON before it becomes an AnalysisResult."""

from typing import Any

from smartdocs.analysis.exceptions import AnalysisValidationError
from smartdocs.documents.models import SENTINEL_CATEGORIES, AnalysisResult

_MAX_TAGS = 6
_MAX_TAG_CHARS = 40


def validate_and_build(data: dict[str, Any]) -> AnalysisResult:
    """Validate raw parsed JSON and build an AnalysisResult.

    Raises:
        AnalysisValidationError: on any validation failure.
    """
    title = _require_string(data, "title")
    category = _require_string(data, "category").strip()
    summary = _require_string(data, "summary")
    if not category:
        raise AnalysisValidationError("'category' must be a non-empty string")
    tags = _build_tags(data.get("tags"))
    if not tags and category not in SENTINEL_CATEGORIES:
        raise AnalysisValidationError(f"'tags' must not be empty for category '{category}'")
    return AnalysisResult(
        title=title.strip(),
        category=category,
        summary=summary.strip(),
        tags=tags,
        important_date=_optional_string(data, "importantDate"),
        date_label=_optional_string(data, "dateLabel"),
        ocr_text=_optional_string(data, "ocrText"),
    )


def _require_string(data: dict[str, Any], key: str) -> str:
    if key not in data:
        raise AnalysisValidationError(f"Missing required field: {key}")
    value = data[key]
    if not isinstance(value, str):
        raise AnalysisValidationError(f"'{key}' must be a string")
    return value


def _optional_string(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise AnalysisValidationError(f"'{key}' must be a string or null")
    return value.strip() or None


def _build_tags(raw: Any) -> tuple[str, ...]:
    if not isinstance(raw, list):
        raise AnalysisValidationError("'tags' must be a list")
    tags: list[str] = []
    for i, item in enumerate(raw):
        if not isinstance(item, str):
            raise AnalysisValidationError(f"Tag at index {i} must be a string")
        tag = item.strip().lower()[:_MAX_TAG_CHARS]
        if tag and tag not in tags:
            tags.append(tag)
    return tuple(tags[:_MAX_TAGS])
