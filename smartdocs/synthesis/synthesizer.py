"""Deterministic title and summary synthesis for providers without a generative model."""

import re

_TITLE_SCAN_LINES = 5
_TITLE_MIN_CHARS = 10
_TITLE_MAX_CHARS = 60
_TITLE_LIMIT = 50
_UPPERCASE_RATIO = 0.5

_SUMMARY_MIN_WORDS = 10
_SENTENCE_MIN_CHARS = 20
_SUMMARY_LIMIT = 100

_TITLE_CASE_RE = re.compile(r"^[A-Z][a-z]+(\s+[A-Z][a-z]+)*")
_UPPERCASE_RE = re.compile(r"[A-Z]")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_EXTENSION_RE = re.compile(r"\.[^/.]+$")


class Synthesizer:
    """Derives a human-readable title and a one-line summary from extracted text."""

    def title(self, text: str, filename: str, category: str) -> str:
        lines = [line for line in text.split("\n") if line.strip()]
        for line in lines[:_TITLE_SCAN_LINES]:
            trimmed = line.strip()
            if not _TITLE_MIN_CHARS < len(trimmed) < _TITLE_MAX_CHARS:
                continue
            uppercase_ratio = len(_UPPERCASE_RE.findall(trimmed)) / len(trimmed)
            if uppercase_ratio > _UPPERCASE_RATIO or _TITLE_CASE_RE.match(trimmed):
                return trimmed[:_TITLE_LIMIT]
        return f"{category} - {clean_filename(filename)}"[:_TITLE_LIMIT]

    def summary(self, text: str, category: str) -> str:
        word_count = len(text.split())
        if word_count < _SUMMARY_MIN_WORDS:
            return f"{category} document with minimal text content"

        for sentence in _SENTENCE_SPLIT_RE.split(text):
            stripped = sentence.strip()
            if len(stripped) > _SENTENCE_MIN_CHARS:
                if len(stripped) > _SUMMARY_LIMIT:
                    return stripped[:_SUMMARY_LIMIT] + "..."
                return stripped

        return f"{category} document containing {word_count} words"


def clean_filename(filename: str) -> str:
    """Drop the extension and turn ``_``/``-`` separators into spaces."""
    return re.sub(r"[_-]", " ", _EXTENSION_RE.sub("", filename))
