"""Ordered rule tables for document classification and date extraction.

Tables are evaluated top to bottom and the first matching rule wins, so the
row order is the precedence. Overlapping vocabulary (a medical bill says both
"invoice" and "doctor") is resolved purely by position.
"""

import re
from dataclasses import dataclass

from smartdocs.documents.models import OTHER


@dataclass(frozen=True)
class CategoryRule:
    category: str
    patterns: tuple[re.Pattern[str], ...]
    tags: tuple[str, ...]


@dataclass(frozen=True)
class DateRule:
    label: str
    pattern: re.Pattern[str]


@dataclass(frozen=True)
class FilenameRule:
    category: str
    keywords: tuple[str, ...]
    tags: tuple[str, ...]
    summary: str


def _words(*alternatives: str) -> re.Pattern[str]:
    return re.compile(r"\b(?:" + "|".join(alternatives) + r")\b", re.IGNORECASE)


CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        category="Identity",
        patterns=(
            _words(
                "passport", "driver", "license", "id card", "identity",
                "national id", "voter", "aadhar", "pan card",
            ),
            _words("dob", "date of birth", "issued", "expires"),
        ),
        tags=("identity", "id", "verification", "official"),
    ),
    CategoryRule(
        category="Receipt",
        patterns=(
            _words(
                "receipt", "invoice", "bill", "payment", "transaction",
                "amount", "total", "paid", "due",
            ),
            re.compile(r"\$|₹|€|£|\d+\.\d{2}"),
        ),
        tags=("receipt", "finance", "payment", "transaction"),
    ),
    CategoryRule(
        category="Medical",
        patterns=(
            _words(
                "medical", "prescription", "doctor", "patient", "hospital",
                "clinic", "diagnosis", "medicine", "pharmacy", "health",
            ),
        ),
        tags=("medical", "health", "prescription", "healthcare"),
    ),
    CategoryRule(
        category="Education",
        patterns=(
            _words(
                "certificate", "diploma", "degree", "transcript", "university",
                "college", "school", "grade", "marks", "student",
            ),
        ),
        tags=("education", "certificate", "academic", "school"),
    ),
    CategoryRule(
        category="Travel",
        patterns=(
            _words(
                "ticket", "boarding", "flight", "hotel", "reservation",
                "booking", "travel", "airport", "destination",
            ),
        ),
        tags=("travel", "ticket", "booking", "trip"),
    ),
    CategoryRule(
        category="Legal",
        patterns=(
            _words(
                "contract", "agreement", "legal", "terms", "conditions",
                "clause", "party", "signed", "witness",
            ),
        ),
        tags=("legal", "contract", "agreement", "official"),
    ),
    CategoryRule(
        category="Notes",
        patterns=(_words("note", "memo", "draft", "reminder", "todo", "list"),),
        tags=("notes", "memo", "personal", "draft"),
    ),
)

FALLBACK_TAGS: tuple[str, ...] = ("document", "file")

# ISO-like first so "2024-05-01" is not cut down to "24-05-01".
DATE_TOKEN = r"(\d{4}[-/.]\d{1,2}[-/.]\d{1,2}|\d{1,2}[-/.]\d{1,2}[-/.]\d{2,4})"

DATE_RULES: tuple[DateRule, ...] = (
    DateRule(
        "Expiry Date",
        re.compile(r"expir(?:y|es|ed)?(?:\s+date)?\s*:?\s*" + DATE_TOKEN, re.IGNORECASE),
    ),
    DateRule(
        "Valid Until",
        re.compile(r"valid\s+until\s*:?\s*" + DATE_TOKEN, re.IGNORECASE),
    ),
    DateRule(
        "Due Date",
        re.compile(r"(?<!payment )\bdue(?:\s+date)?\s*:?\s*" + DATE_TOKEN, re.IGNORECASE),
    ),
    DateRule(
        "Payment Due",
        re.compile(r"payment\s+due(?:\s+date)?\s*:?\s*" + DATE_TOKEN, re.IGNORECASE),
    ),
    DateRule(
        "Issue Date",
        re.compile(r"issue(?:d)?\s+date\s*:?\s*" + DATE_TOKEN, re.IGNORECASE),
    ),
    DateRule(
        "Issue Date",
        re.compile(r"date\s+of\s+issue\s*:?\s*" + DATE_TOKEN, re.IGNORECASE),
    ),
)

# Substring matching on the lower-cased filename only. "id" deliberately
# matches inside longer words; filenames are too short for word boundaries.
FILENAME_RULES: tuple[FilenameRule, ...] = (
    FilenameRule(
        "Identity", ("id", "passport", "license", "card"),
        ("identity", "id", "verification"), "Identity document",
    ),
    FilenameRule(
        "Receipt", ("receipt", "invoice", "bill", "payment"),
        ("receipt", "finance", "payment"), "Financial receipt or invoice",
    ),
    FilenameRule(
        "Medical", ("medical", "prescription", "health", "doctor"),
        ("medical", "health", "records"), "Medical document or health record",
    ),
    FilenameRule(
        "Education", ("certificate", "diploma", "degree", "transcript"),
        ("education", "certificate", "academic"), "Educational certificate or document",
    ),
    FilenameRule(
        "Travel", ("ticket", "boarding", "flight", "hotel"),
        ("travel", "ticket", "booking"), "Travel document or booking",
    ),
    FilenameRule(
        "Legal", ("contract", "agreement", "legal", "terms"),
        ("legal", "contract", "agreement"), "Legal document or contract",
    ),
    FilenameRule(
        "Notes", ("note", "memo", "draft"),
        ("notes", "memo", "draft"), "Note or memo document",
    ),
)

# Fallbacks for filenames no keyword matched, keyed by MIME family.
FILENAME_FALLBACKS: dict[str, FilenameRule] = {
    "pdf": FilenameRule(OTHER, (), ("pdf", "document"), "PDF document"),
    "image": FilenameRule(OTHER, (), ("image", "photo"), "Image file"),
}
