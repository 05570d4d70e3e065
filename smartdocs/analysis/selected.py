from collections.abc import Callable

from smartdocs.analysis.base import BaseAnalysisProvider
from smartdocs.config.provider_selection import ProviderSelection
from smartdocs.documents.models import AnalysisResult, SourceFile

ProviderBuilder = Callable[[str], BaseAnalysisProvider]


class SelectedAnalysisProvider(BaseAnalysisProvider):
    """Delegates to whichever provider the selection names at call time.

    Built providers are reused per name; the selection itself is read
    fresh on every call.
    """

    def __init__(self, selection: ProviderSelection, build: ProviderBuilder) -> None:
        self._selection = selection
        self._build = build
        self._providers: dict[str, BaseAnalysisProvider] = {}

    @property
    def active(self) -> BaseAnalysisProvider:
        name = self._selection.get()
        provider = self._providers.get(name)
        if provider is None:
            provider = self._build(name)
            self._providers[name] = provider
        return provider

    @property
    def low_fidelity(self) -> bool:  # type: ignore[override]
        return self.active.low_fidelity

    def analyze(self, file: SourceFile) -> AnalysisResult:
        return self.active.analyze(file)
