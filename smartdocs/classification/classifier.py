from smartdocs.classification.models import Classification, ImportantDate
from smartdocs.classification.rules import (
    CATEGORY_RULES,
    DATE_RULES,
    FALLBACK_TAGS,
    CategoryRule,
    DateRule,
)
from smartdocs.documents.models import OTHER


class Classifier:
    """First-match-wins classification over ordered rule tables."""

    def __init__(
        self,
        category_rules: tuple[CategoryRule, ...] = CATEGORY_RULES,
        date_rules: tuple[DateRule, ...] = DATE_RULES,
    ) -> None:
        self._category_rules = category_rules
        self._date_rules = date_rules

    def classify(self, text: str, filename: str) -> Classification:
        """Return the category of the first rule matching ``text + " " + filename``."""
        combined = f"{text} {filename}".lower()
        for rule in self._category_rules:
            if any(pattern.search(combined) for pattern in rule.patterns):
                return Classification(category=rule.category, tags=rule.tags)
        return Classification(category=OTHER, tags=FALLBACK_TAGS)

    def extract_date(self, text: str) -> ImportantDate:
        """Return the first labeled date found; the date is not validated or normalized."""
        for rule in self._date_rules:
            match = rule.pattern.search(text)
            if match:
                return ImportantDate(date=match.group(1), label=rule.label)
        return ImportantDate()

    def tags_for(self, category: str) -> tuple[str, ...]:
        """Fixed tag vocabulary of a category, case-insensitively; fallback tags otherwise."""
        for rule in self._category_rules:
            if rule.category.lower() == category.lower():
                return rule.tags
        return FALLBACK_TAGS
