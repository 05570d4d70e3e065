"""Runtime choice of the active analysis/search backend."""

PROVIDERS: tuple[str, ...] = (
    "local",
    "openai",
    "gemini",
    "groq",
    "perplexity",
    "huggingface",
    "embedding",
)


class UnknownProviderError(ValueError):
    """Raised when a provider name is not one of PROVIDERS."""


def normalize_provider_name(name: str) -> str:
    normalized = name.strip().lower()
    if normalized not in PROVIDERS:
        raise UnknownProviderError(
            f"Unknown AI provider '{name}'. Choose from: {list(PROVIDERS)}"
        )
    return normalized


class ProviderSelection:
    """Holds the name of the active provider.

    Dispatchers read it on every call, so a change takes effect on the next
    analysis or search without rebuilding anything.
    """

    def __init__(self, initial: str = "local") -> None:
        self._active = normalize_provider_name(initial)

    def get(self) -> str:
        return self._active

    def set(self, name: str) -> None:
        self._active = normalize_provider_name(name)
