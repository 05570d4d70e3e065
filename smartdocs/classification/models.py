from dataclasses import dataclass


@dataclass(frozen=True)
class Classification:
    """Category and its fixed tag vocabulary."""

    category: str
    tags: tuple[str, ...]


@dataclass(frozen=True)
class ImportantDate:
    """A labeled date captured verbatim from document text."""

    date: str | None = None
    label: str | None = None

    @property
    def found(self) -> bool:
        return self.date is not None
